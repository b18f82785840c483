from jobportal.integrations.email.senders.smtp_pool import SMTPConnectionPool
from jobportal.integrations.email.senders.smtp_sender import SMTPEmailSender
from jobportal.integrations.email.senders.console_sender import ConsoleEmailSender

__all__ = ["SMTPConnectionPool", "SMTPEmailSender", "ConsoleEmailSender"]
