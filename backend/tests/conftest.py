import asyncio
import os

# Не пишем лог-файл при импорте jobportal.main в тестах
os.environ.setdefault("LOG_FILE", "")

import pytest

from jobportal.core.config import SmtpConfig
from jobportal.integrations.email.ports import EmailSender
from jobportal.integrations.email.types import OutgoingEmail


class StubEmailSender(EmailSender):
    """Запоминает письма; если задан error: бросает его при отправке."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.sent: list[OutgoingEmail] = []

    async def send_email(self, message: OutgoingEmail) -> str | None:
        if self.error is not None:
            raise self.error
        self.sent.append(message)
        return "<stub@test>"


class FakeSMTPClient:
    """Подмена aiosmtplib.SMTP для тестов пула."""

    def __init__(self, send_error: Exception | None = None, delay: float = 0.0) -> None:
        self.send_error = send_error
        self.delay = delay
        self.is_connected = False
        self.logged_in: tuple[str, str] | None = None
        self.sent: list[tuple[object, str, list[str]]] = []
        self.quit_called = False
        self.closed = False

    async def connect(self) -> None:
        self.is_connected = True

    async def login(self, username: str, password: str) -> None:
        self.logged_in = (username, password)

    async def send_message(self, message, sender=None, recipients=None):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.send_error is not None:
            raise self.send_error
        self.sent.append((message, sender, recipients))
        return {}, "OK"

    async def quit(self) -> None:
        self.quit_called = True
        self.is_connected = False

    def close(self) -> None:
        self.closed = True
        self.is_connected = False


@pytest.fixture
def stub_sender_cls() -> type[StubEmailSender]:
    return StubEmailSender


@pytest.fixture
def stub_sender() -> StubEmailSender:
    return StubEmailSender()


@pytest.fixture
def fake_client_cls() -> type[FakeSMTPClient]:
    return FakeSMTPClient


@pytest.fixture
def smtp_config() -> SmtpConfig:
    return SmtpConfig(
        host="smtp.test",
        port=2525,
        username="mailer@megajob.test",
        password="secret",
        from_address="mailer@megajob.test",
        max_connections=2,
        max_messages=3,
    )
