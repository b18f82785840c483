"""
Типы для интеграции email: исходящее письмо и результат отправки.
"""
from pydantic import BaseModel


class OutgoingEmail(BaseModel):
    """Транзакционное письмо одному получателю."""

    to: str
    subject: str
    html: str
    text: str | None = None
    reply_to: str | None = None


class DispatchResult(BaseModel):
    """Результат отправки: успех с сообщением либо ошибка транспорта."""

    success: bool
    message: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, message: str) -> "DispatchResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, error: str) -> "DispatchResult":
        return cls(success=False, error=error)

    def as_dict(self) -> dict:
        """{"success": True, "message": ...} или {"success": False, "error": ...}."""
        if self.success:
            return {"success": True, "message": self.message}
        return {"success": False, "error": self.error}
