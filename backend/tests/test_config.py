import pytest

from jobportal.core.config import Settings, parse_secure_flag
from jobportal.integrations.email import get_email_sender
from jobportal.integrations.email.senders import ConsoleEmailSender, SMTPEmailSender

_MAIL_ENV = (
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_SECURE",
    "SMTP_USER",
    "SMTP_PASS",
    "EMAIL_USER",
    "EMAIL_PASS",
    "EMAIL_FROM",
    "EMAIL_FROM_NAME",
    "EMAIL_PROVIDER",
    "SMTP_TLS_VERIFY",
    "SMTP_TIMEOUT_S",
    "SMTP_POOL_MAX_CONNECTIONS",
    "SMTP_POOL_MAX_MESSAGES",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _MAIL_ENV:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    smtp = Settings().smtp

    assert smtp.host == "smtp.gmail.com"
    assert smtp.port == 587
    assert smtp.secure is False
    assert smtp.username is None
    assert smtp.password is None
    assert smtp.auth_enabled is False
    assert smtp.verify_certificates is True
    assert smtp.max_connections == 5
    assert smtp.max_messages == 100
    assert smtp.from_name == "MegaJobNepal"


def test_explicit_smtp_values(monkeypatch) -> None:
    monkeypatch.setenv("SMTP_HOST", "mail.megajob.test")
    monkeypatch.setenv("SMTP_PORT", "465")
    monkeypatch.setenv("SMTP_SECURE", "TRUE")
    monkeypatch.setenv("SMTP_USER", "noreply@megajob.test")
    monkeypatch.setenv("SMTP_PASS", "pw")

    smtp = Settings().smtp

    assert smtp.host == "mail.megajob.test"
    assert smtp.port == 465
    assert smtp.secure is True
    assert smtp.auth_enabled is True
    # EMAIL_FROM не задан: отправитель совпадает с логином
    assert smtp.from_address == "noreply@megajob.test"


def test_email_user_and_pass_are_fallbacks(monkeypatch) -> None:
    monkeypatch.setenv("EMAIL_USER", "legacy@megajob.test")
    monkeypatch.setenv("EMAIL_PASS", "legacy-pw")

    smtp = Settings().smtp

    assert smtp.username == "legacy@megajob.test"
    assert smtp.password == "legacy-pw"


def test_smtp_user_wins_over_email_user(monkeypatch) -> None:
    monkeypatch.setenv("SMTP_USER", "primary@megajob.test")
    monkeypatch.setenv("EMAIL_USER", "legacy@megajob.test")

    assert Settings().smtp.username == "primary@megajob.test"


def test_missing_password_disables_auth(monkeypatch) -> None:
    monkeypatch.setenv("SMTP_USER", "noreply@megajob.test")

    smtp = Settings().smtp

    assert smtp.auth_enabled is False
    # Конфигурация без пароля не падает: SMTP-отправитель создаётся
    assert isinstance(get_email_sender(Settings()), SMTPEmailSender)


def test_invalid_port_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("SMTP_PORT", "not-a-port")

    assert Settings().smtp.port == 587


def test_tls_verification_can_be_disabled(monkeypatch) -> None:
    monkeypatch.setenv("SMTP_TLS_VERIFY", "false")

    assert Settings().smtp.verify_certificates is False


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        ("True", True),
        (" TRUE ", True),
        ("false", False),
        ("1", False),
        ("yes", False),
        ("", False),
        (None, False),
    ],
)
def test_parse_secure_flag(raw, expected) -> None:
    assert parse_secure_flag(raw) is expected


def test_email_provider_selection(monkeypatch) -> None:
    monkeypatch.setenv("EMAIL_PROVIDER", "console")
    assert isinstance(get_email_sender(Settings()), ConsoleEmailSender)

    monkeypatch.setenv("EMAIL_PROVIDER", "carrier-pigeon")
    assert isinstance(get_email_sender(Settings()), ConsoleEmailSender)

    monkeypatch.setenv("EMAIL_PROVIDER", "smtp")
    assert isinstance(get_email_sender(Settings()), SMTPEmailSender)
