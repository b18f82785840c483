"""
Fallback: печать письма в лог/консоль (без реальной отправки).
"""
import logging

from jobportal.integrations.email.ports import EmailSender
from jobportal.integrations.email.types import OutgoingEmail

logger = logging.getLogger(__name__)


class ConsoleEmailSender(EmailSender):
    """Отправка «в консоль»: только логирование."""

    async def send_email(self, message: OutgoingEmail) -> str | None:
        logger.info(
            "[ConsoleEmail] to=%s subject=%s\n---\n%s\n---",
            message.to,
            message.subject,
            message.text or message.html,
        )
        return None
