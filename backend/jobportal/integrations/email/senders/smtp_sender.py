"""
Отправка email через SMTP (aiosmtplib) с пулом соединений.
"""
import logging
from email.message import EmailMessage
from email.utils import formataddr, make_msgid

from jobportal.core.config import SmtpConfig
from jobportal.integrations.email.ports import EmailSender
from jobportal.integrations.email.senders.smtp_pool import SMTPConnectionPool
from jobportal.integrations.email.types import OutgoingEmail

logger = logging.getLogger(__name__)


def build_message(config: SmtpConfig, email: OutgoingEmail) -> EmailMessage:
    """Собрать MIME-письмо: plain text (если есть) + HTML-альтернатива."""
    msg = EmailMessage()
    msg["Subject"] = email.subject
    msg["From"] = formataddr((config.from_name or None, config.from_address))
    msg["To"] = email.to
    if email.reply_to:
        msg["Reply-To"] = email.reply_to
    msg["Message-ID"] = make_msgid()
    msg.set_content(email.text or "", subtype="plain", charset="utf-8")
    msg.add_alternative(email.html, subtype="html", charset="utf-8")
    return msg


class SMTPEmailSender(EmailSender):
    """Отправка писем через SMTP-релей (Gmail, cPanel и т.д.)."""

    def __init__(self, config: SmtpConfig, pool: SMTPConnectionPool | None = None) -> None:
        self._config = config
        self._pool = pool or SMTPConnectionPool(config)
        if not config.verify_certificates:
            logger.warning(
                "SMTP TLS certificate validation is disabled for host=%s",
                config.host,
            )
        if not config.auth_enabled:
            logger.info("SMTP credentials not set, connecting without authentication")

    async def send_email(self, message: OutgoingEmail) -> str | None:
        msg = build_message(self._config, message)
        try:
            await self._pool.send_message(
                msg,
                sender=self._config.from_address,
                recipients=[message.to],
            )
        except Exception as e:
            logger.error(
                "SMTP send failed to=%s subject=%s: %s",
                message.to,
                message.subject,
                str(e),
            )
            raise
        logger.info("Email sent via SMTP to=%s subject=%s", message.to, message.subject)
        return msg["Message-ID"]

    async def close(self) -> None:
        await self._pool.close()
