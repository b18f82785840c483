import logging
import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Загружаем .env файл
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


def _get_log_level() -> int:
    """Получить уровень логирования из переменной окружения."""
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()

    level_mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    return level_mapping.get(log_level_str, logging.INFO)


def _build_handlers() -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    # LOG_FILE="" отключает запись в файл
    log_file = os.getenv("LOG_FILE", "logs/app.log").strip()
    if log_file:
        path = Path(log_file)
        if not path.is_absolute():
            path = Path(__file__).parent.parent.parent / path
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def setup_logging() -> None:
    """Настройка логирования для приложения."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=_get_log_level(),
        format=log_format,
        datefmt=date_format,
        handlers=_build_handlers(),
    )

    # Настройка уровней для сторонних библиотек
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("aiosmtplib").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Получить logger с указанным именем."""
    return logging.getLogger(name)
