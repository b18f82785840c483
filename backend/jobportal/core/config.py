"""
Конфигурация приложения из переменных окружения (.env).
"""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Загружаем .env из корня backend
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)


def _str(key: str, default: str | None = None) -> str:
    value = os.getenv(key)
    if value is not None:
        return value.strip()
    if default is not None:
        return default
    return ""


def _int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _bool(key: str, default: bool) -> bool:
    raw = os.getenv(key, "").strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    return default


def _first(*keys: str) -> str | None:
    """Первое непустое значение из списка переменных окружения."""
    for key in keys:
        value = _str(key)
        if value:
            return value
    return None


def parse_secure_flag(raw: str | None) -> bool:
    """SMTP_SECURE: только "true" (в любом регистре) включает implicit TLS."""
    return (raw or "false").strip().lower() == "true"


@dataclass(frozen=True)
class SmtpConfig:
    """Параметры подключения к SMTP-релею и пула соединений."""

    host: str = "smtp.gmail.com"
    port: int = 587
    secure: bool = False
    username: str | None = None
    password: str | None = None
    verify_certificates: bool = True
    timeout_s: int = 10
    max_connections: int = 5
    max_messages: int = 100
    from_address: str = "no-reply@localhost"
    from_name: str = "MegaJobNepal"

    @property
    def auth_enabled(self) -> bool:
        # Без пары логин/пароль подключаемся без аутентификации
        return bool(self.username and self.password)


class Settings:
    """Настройки приложения. Значения читаются из окружения при создании экземпляра."""

    def __init__(self) -> None:
        self.APP_ENV: str = _str("APP_ENV", "development").lower()

        # Email provider: "smtp" | "console"
        self.EMAIL_PROVIDER: str = _str("EMAIL_PROVIDER", "smtp")

        # SMTP (cPanel, Gmail App Password и т.д.)
        self.SMTP_HOST: str = _str("SMTP_HOST") or "smtp.gmail.com"
        self.SMTP_PORT: int = _int("SMTP_PORT", 587)
        self.SMTP_SECURE: bool = parse_secure_flag(os.getenv("SMTP_SECURE"))
        self.SMTP_USER: str | None = _first("SMTP_USER", "EMAIL_USER")
        self.SMTP_PASS: str | None = _first("SMTP_PASS", "EMAIL_PASS")
        # false: принимать самоподписанные сертификаты (shared-хостинги)
        self.SMTP_TLS_VERIFY: bool = _bool("SMTP_TLS_VERIFY", True)
        self.SMTP_TIMEOUT_S: int = _int("SMTP_TIMEOUT_S", 10)
        self.SMTP_POOL_MAX_CONNECTIONS: int = _int("SMTP_POOL_MAX_CONNECTIONS", 5)
        self.SMTP_POOL_MAX_MESSAGES: int = _int("SMTP_POOL_MAX_MESSAGES", 100)

        # Отправитель писем
        self.EMAIL_FROM: str = _first("EMAIL_FROM") or self.SMTP_USER or "no-reply@localhost"
        self.EMAIL_FROM_NAME: str = _str("EMAIL_FROM_NAME", "MegaJobNepal")

        # OTP
        self.OTP_TTL_MINUTES: int = _int("OTP_TTL_MINUTES", 5)

        # Куда пересылать сообщения с формы обратной связи
        self.CONTACT_RECIPIENT: str = _str("CONTACT_RECIPIENT", "")

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    @property
    def smtp(self) -> SmtpConfig:
        """Конфигурация SMTP-транспорта, собранная из настроек."""
        return SmtpConfig(
            host=self.SMTP_HOST,
            port=self.SMTP_PORT,
            secure=self.SMTP_SECURE,
            username=self.SMTP_USER,
            password=self.SMTP_PASS,
            verify_certificates=self.SMTP_TLS_VERIFY,
            timeout_s=self.SMTP_TIMEOUT_S,
            max_connections=max(1, self.SMTP_POOL_MAX_CONNECTIONS),
            max_messages=max(1, self.SMTP_POOL_MAX_MESSAGES),
            from_address=self.EMAIL_FROM,
            from_name=self.EMAIL_FROM_NAME,
        )


# Глобальный экземпляр конфига (инициализируется при первом обращении)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Возвращает экземпляр настроек (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
