"""
Роутер формы обратной связи: POST /api/contact/send.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from jobportal.core.config import Settings, get_settings
from jobportal.integrations.email import MailDispatcher
from jobportal.modules.contact.schemas import ContactMessageRequest, ContactMessageResponse
from jobportal.modules.otp.router import get_mail_dispatcher

router = APIRouter(prefix="/api/contact", tags=["contact"])

logger = logging.getLogger(__name__)


@router.post("/send", response_model=ContactMessageResponse)
async def send_contact_message(
    body: ContactMessageRequest,
    dispatcher: MailDispatcher = Depends(get_mail_dispatcher),
    settings: Settings = Depends(get_settings),
) -> ContactMessageResponse:
    """Переслать сообщение с формы на CONTACT_RECIPIENT."""
    if not settings.CONTACT_RECIPIENT:
        logger.error("Contact form used but CONTACT_RECIPIENT is not configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Contact recipient is not configured",
        )

    result = await dispatcher.send_contact_mail(
        to_email=settings.CONTACT_RECIPIENT,
        from_email=body.email,
        name=body.name,
        message=body.message,
        subject=body.subject,
        category=body.category,
    )
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Could not send message at this time",
        )
    return ContactMessageResponse(message="Message sent")
