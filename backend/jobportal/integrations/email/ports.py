"""
Интерфейс отправки email (port).
"""
from abc import ABC, abstractmethod

from jobportal.integrations.email.types import OutgoingEmail


class EmailSender(ABC):
    """Абстракция для отправки транзакционных писем."""

    @abstractmethod
    async def send_email(self, message: OutgoingEmail) -> str | None:
        """
        Отправить письмо.

        Args:
            message: Письмо (получатель, тема, HTML и опциональный plain text).

        Returns:
            provider_message_id: идентификатор сообщения у провайдера, если есть; иначе None.

        Raises:
            Любое исключение транспорта (соединение, TLS, аутентификация, отказ сервера).
        """
        ...

    async def close(self) -> None:
        """Освободить ресурсы транспорта (по умолчанию ничего не делает)."""
        return None
