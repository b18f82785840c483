"""
Use-cases для транзакционных писем: OTP, сброс пароля, форма обратной связи.
"""
import logging

from jobportal.integrations.email.ports import EmailSender
from jobportal.integrations.email.templates import (
    render_contact_email,
    render_otp_email,
    render_password_reset_email,
)
from jobportal.integrations.email.types import DispatchResult, OutgoingEmail

logger = logging.getLogger(__name__)


def _error_text(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class MailDispatcher:
    """
    Отправка писем через EmailSender с результатом вместо исключения.

    Каждый вызов: ровно одна попытка отправки; ретраи на стороне вызывающего.
    """

    def __init__(self, sender: EmailSender, otp_ttl_minutes: int = 5, brand: str = "MegaJobNepal") -> None:
        self._sender = sender
        self._otp_ttl_minutes = otp_ttl_minutes
        self._brand = brand

    async def _dispatch(self, message: OutgoingEmail, success_message: str) -> DispatchResult:
        try:
            await self._sender.send_email(message)
        except Exception as e:
            logger.error("Error sending email to=%s subject=%s: %s", message.to, message.subject, e)
            return DispatchResult.fail(_error_text(e))
        logger.info("%s to: %s", success_message, message.to)
        return DispatchResult.ok(success_message)

    async def send_otp_mail(self, email: str, otp: str, purpose: str = "signup") -> DispatchResult:
        """
        Отправить письмо с одноразовым кодом.

        Args:
            email: Email получателя (формат не проверяется).
            otp: Код, подставляется в HTML (с экранированием).
            purpose: "signup" или "password_reset"; влияет только на текст письма.

        Returns:
            DispatchResult.ok("OTP sent successfully") либо DispatchResult.fail(<текст ошибки>).
        """
        subject, html, text = render_otp_email(otp, self._otp_ttl_minutes, self._brand, purpose)
        message = OutgoingEmail(to=email, subject=subject, html=html, text=text)
        return await self._dispatch(message, "OTP sent successfully")

    async def send_password_reset_mail(self, email: str, reset_url: str) -> DispatchResult:
        """Отправить письмо со ссылкой для сброса пароля."""
        subject, html, text = render_password_reset_email(reset_url, self._brand)
        message = OutgoingEmail(to=email, subject=subject, html=html, text=text)
        return await self._dispatch(message, "Password reset email sent")

    async def send_contact_mail(
        self,
        *,
        to_email: str,
        from_email: str,
        name: str,
        message: str,
        subject: str | None = None,
        category: str | None = None,
    ) -> DispatchResult:
        """Переслать сообщение с формы обратной связи; Reply-To: адрес автора."""
        mail_subject, html, text = render_contact_email(
            name=name,
            from_email=from_email,
            message=message,
            subject=subject,
            category=category,
            brand=self._brand,
        )
        outgoing = OutgoingEmail(
            to=to_email,
            subject=mail_subject,
            html=html,
            text=text,
            reply_to=from_email,
        )
        return await self._dispatch(outgoing, "Contact message sent")
