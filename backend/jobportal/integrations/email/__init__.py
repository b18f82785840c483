"""
Интеграция отправки email: абстракция EmailSender + фабрика по EMAIL_PROVIDER.
"""
from jobportal.integrations.email.ports import EmailSender
from jobportal.integrations.email.factory import get_email_sender
from jobportal.integrations.email.service import MailDispatcher
from jobportal.integrations.email.types import DispatchResult, OutgoingEmail

__all__ = [
    "EmailSender",
    "get_email_sender",
    "MailDispatcher",
    "DispatchResult",
    "OutgoingEmail",
]
