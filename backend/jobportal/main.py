import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from jobportal.core.config import get_settings
from jobportal.core.logging_config import get_logger, setup_logging
from jobportal.integrations.email import MailDispatcher, get_email_sender
from jobportal.modules.contact.router import router as contact_router
from jobportal.modules.otp.router import router as otp_router
from jobportal.modules.otp.service import OtpStore

# Настраиваем логирование при старте приложения
setup_logging()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Инициализация при старте: конфиг, отправитель писем, хранилище OTP."""
    settings = get_settings()
    email_sender = get_email_sender(settings)
    app.state.email_sender = email_sender
    app.state.mail_dispatcher = MailDispatcher(
        email_sender,
        otp_ttl_minutes=settings.OTP_TTL_MINUTES,
        brand=settings.EMAIL_FROM_NAME or "MegaJobNepal",
    )
    app.state.otp_store = OtpStore(ttl_minutes=settings.OTP_TTL_MINUTES)
    logger.info("Mail provider: %s (env=%s)", settings.EMAIL_PROVIDER, settings.APP_ENV)
    yield
    # Закрываем простаивающие SMTP-соединения пула
    await email_sender.close()


app = FastAPI(
    title="MegaJobNepal API",
    description="Job portal backend: OTP and transactional mail",
    version="1.0.0",
    lifespan=lifespan,
)

# Разрешённые origins из переменной окружения
cors_origins_str = os.getenv(
    "CORS_ALLOW_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173"  # Дефолт для локальной разработки
)

allowed_origins = [origin.strip() for origin in cors_origins_str.split(",") if origin.strip()]

# CORS middleware ДО подключения роутеров
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(otp_router)
app.include_router(contact_router)


@app.get("/api", response_class=PlainTextResponse)
def health() -> str:
    return "MegaJobNepal"
