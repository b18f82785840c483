"""
Роутер OTP: POST /api/auth/send-otp, POST /api/auth/verify-otp.
"""
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, status

from jobportal.core.config import Settings, get_settings
from jobportal.integrations.email import MailDispatcher
from jobportal.modules.otp.schemas import (
    SendOtpRequest,
    SendOtpResponse,
    VerifyOtpRequest,
    VerifyOtpResponse,
)
from jobportal.modules.otp.service import OtpStore

router = APIRouter(prefix="/api/auth", tags=["auth"])

logger = logging.getLogger(__name__)


def get_mail_dispatcher(request: Request) -> MailDispatcher:
    """Возвращает MailDispatcher из app.state (инициализируется при старте)."""
    return request.app.state.mail_dispatcher


def get_otp_store(request: Request) -> OtpStore:
    """Возвращает OtpStore из app.state."""
    return request.app.state.otp_store


async def _deliver_otp(dispatcher: MailDispatcher, email: str, otp: str, purpose: str) -> None:
    result = await dispatcher.send_otp_mail(email, otp, purpose)
    if not result.success:
        logger.error(f"Async OTP send failed for {email}: {result.error}")


@router.post("/send-otp", response_model=SendOtpResponse, response_model_exclude_none=True)
async def send_otp(
    body: SendOtpRequest,
    background_tasks: BackgroundTasks,
    otp_store: OtpStore = Depends(get_otp_store),
    dispatcher: MailDispatcher = Depends(get_mail_dispatcher),
    settings: Settings = Depends(get_settings),
) -> SendOtpResponse:
    """
    Выпустить одноразовый код и отправить его на email.

    Письмо уходит в фоне: ответ не ждёт SMTP и не зависит от результата отправки.
    """
    record = await otp_store.issue(body.email, body.purpose)
    background_tasks.add_task(_deliver_otp, dispatcher, body.email, record.code, body.purpose)

    response = SendOtpResponse(message="OTP sent successfully")
    if not settings.is_production:
        logger.info(f"Dev mode: OTP for {body.email} is {record.code}")
        response.otp = record.code
    return response


@router.post("/verify-otp", response_model=VerifyOtpResponse)
async def verify_otp(
    body: VerifyOtpRequest,
    otp_store: OtpStore = Depends(get_otp_store),
) -> VerifyOtpResponse:
    """Проверить и погасить код. 400, если код неверный или истёк."""
    if not await otp_store.verify(body.email, body.otp, body.purpose):
        logger.warning(f"Invalid or expired OTP for {body.email}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid or expired OTP",
        )
    return VerifyOtpResponse(message="OTP verified successfully")
