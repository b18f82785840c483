"""
Хранилище одноразовых кодов (in-memory) с TTL.
"""
import asyncio
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Literal

OtpPurpose = Literal["signup", "password_reset"]


def generate_otp() -> str:
    """6-значный код 100000..999999 (secrets)."""
    return str(100000 + secrets.randbelow(900000))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OtpRecord:
    email: str
    code: str
    purpose: str
    expires_at: datetime


class OtpStore:
    """
    Один действующий код на пару (email, purpose).

    Повторный issue заменяет предыдущий код; verify погашает код при совпадении.
    """

    def __init__(
        self,
        ttl_minutes: int = 5,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = timedelta(minutes=ttl_minutes)
        self._clock = clock
        self._records: dict[tuple[str, str], OtpRecord] = {}
        self._lock = asyncio.Lock()

    @staticmethod
    def _key(email: str, purpose: str) -> tuple[str, str]:
        return email.strip().lower(), purpose

    async def issue(self, email: str, purpose: OtpPurpose = "signup") -> OtpRecord:
        record = OtpRecord(
            email=email,
            code=generate_otp(),
            purpose=purpose,
            expires_at=self._clock() + self._ttl,
        )
        async with self._lock:
            self._purge_expired()
            self._records[self._key(email, purpose)] = record
        return record

    async def verify(self, email: str, code: str, purpose: OtpPurpose = "signup") -> bool:
        key = self._key(email, purpose)
        async with self._lock:
            record = self._records.get(key)
            if record is None:
                return False
            if record.expires_at <= self._clock():
                del self._records[key]
                return False
            if not secrets.compare_digest(record.code.encode(), code.strip().encode()):
                return False
            del self._records[key]
            return True

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [k for k, r in self._records.items() if r.expires_at <= now]
        for key in expired:
            del self._records[key]

    def __len__(self) -> int:
        return len(self._records)
