"""
Пул SMTP-соединений (aiosmtplib): не больше max_connections одновременно,
каждое соединение пересоздаётся после max_messages писем.
"""
import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from email.message import EmailMessage

import aiosmtplib

from jobportal.core.config import SmtpConfig

logger = logging.getLogger(__name__)


@dataclass
class _PooledConnection:
    client: aiosmtplib.SMTP
    messages_sent: int = 0


class SMTPConnectionPool:
    """
    Переиспользуемые соединения с SMTP-релеем.

    Пул создаётся один раз на процесс. Ошибка отправки не ретраится:
    соединение выбрасывается из пула, исключение уходит вызывающему.
    """

    def __init__(
        self,
        config: SmtpConfig,
        client_factory: Callable[[], aiosmtplib.SMTP] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or self._build_client
        self._slots = asyncio.Semaphore(config.max_connections)
        self._idle: list[_PooledConnection] = []

    @property
    def idle_count(self) -> int:
        return len(self._idle)

    def _build_client(self) -> aiosmtplib.SMTP:
        cfg = self._config
        # secure=True: implicit TLS (обычно 465); иначе STARTTLS, если сервер его поддерживает
        return aiosmtplib.SMTP(
            hostname=cfg.host,
            port=cfg.port,
            use_tls=cfg.secure,
            start_tls=False if cfg.secure else None,
            validate_certs=cfg.verify_certificates,
            timeout=cfg.timeout_s,
        )

    async def _open(self) -> _PooledConnection:
        client = self._client_factory()
        await client.connect()
        if self._config.auth_enabled:
            try:
                await client.login(self._config.username, self._config.password)
            except BaseException:
                client.close()
                raise
        logger.debug("SMTP connection opened host=%s port=%s", self._config.host, self._config.port)
        return _PooledConnection(client=client)

    async def _checkout(self) -> _PooledConnection:
        while self._idle:
            conn = self._idle.pop()
            if conn.client.is_connected:
                return conn
            logger.debug("Dropping stale SMTP connection")
        return await self._open()

    async def _retire(self, conn: _PooledConnection) -> None:
        try:
            await conn.client.quit()
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.debug("SMTP QUIT failed, closing transport: %s", e)
            conn.client.close()

    async def send_message(
        self,
        message: EmailMessage,
        *,
        sender: str,
        recipients: list[str],
    ) -> None:
        """Отправить письмо через свободное соединение пула."""
        async with self._slots:
            conn = await self._checkout()
            try:
                await conn.client.send_message(message, sender=sender, recipients=recipients)
            except BaseException:
                conn.client.close()
                raise
            conn.messages_sent += 1
            if conn.messages_sent >= self._config.max_messages:
                logger.debug("SMTP connection reached %s messages, recycling", conn.messages_sent)
                await self._retire(conn)
            else:
                self._idle.append(conn)

    async def close(self) -> None:
        """Закрыть все простаивающие соединения."""
        idle, self._idle = self._idle, []
        for conn in idle:
            await self._retire(conn)
