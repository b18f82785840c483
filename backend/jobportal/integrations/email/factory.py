"""
Фабрика выбора реализации EmailSender по EMAIL_PROVIDER из env.
"""
import logging

from jobportal.core.config import Settings, get_settings
from jobportal.integrations.email.ports import EmailSender
from jobportal.integrations.email.senders.console_sender import ConsoleEmailSender
from jobportal.integrations.email.senders.smtp_sender import SMTPEmailSender

logger = logging.getLogger(__name__)


def get_email_sender(settings: Settings | None = None) -> EmailSender:
    """
    Возвращает экземпляр EmailSender в зависимости от EMAIL_PROVIDER.

    - "smtp" (по умолчанию): SMTP с пулом соединений
    - "console": вывод в лог/консоль
    """
    if settings is None:
        settings = get_settings()
    provider = (settings.EMAIL_PROVIDER or "smtp").strip().lower()
    if provider == "console":
        return ConsoleEmailSender()
    if provider == "smtp":
        return SMTPEmailSender(settings.smtp)
    # Неизвестный провайдер: fallback на console
    logger.warning("Unknown EMAIL_PROVIDER=%r, falling back to console", provider)
    return ConsoleEmailSender()
