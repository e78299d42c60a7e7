"""Структурированное логирование: JSON для продакшена, цветной вывод для разработки."""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict

from starlette_mini.core.config import settings

STRUCTURED_FIELDS = ("path", "original_size", "minified_size", "saved_bytes", "content_type")


class JSONFormatter(logging.Formatter):
    """JSON форматтер для структурированных логов."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "application": settings.APP_NAME,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        for key in STRUCTURED_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, ensure_ascii=False)


class ContextualFormatter(logging.Formatter):
    """Читаемый форматтер с цветами для разработки."""

    colors = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
    }
    reset = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.colors.get(record.levelname, "")
        formatted = (
            f"{level_color}[{record.levelname}]{self.reset} "
            f"{datetime.now(timezone.utc).strftime('%H:%M:%S')} "
            f"{record.name}:{record.lineno} - "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


def setup_logger(
    name: str = "starlette_mini",
    level: str = settings.LOG_LEVEL,
    json_logs: bool = settings.LOG_JSON,
) -> logging.Logger:
    """
    Настройка логгера.

    Args:
        name: Имя логгера
        level: Уровень логирования
        json_logs: Использовать JSON формат

    Returns:
        Настроенный логгер
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Повторная настройка не должна дублировать обработчики
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(JSONFormatter() if json_logs else ContextualFormatter())
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger


class StructuredLogger:
    """Обертка для логгера с поддержкой структурированных данных."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _log(
        self,
        level: int,
        message: str,
        exc_info: bool = False,
        **kwargs,
    ):
        extra: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if key not in ("stack_info", "stacklevel"):
                extra[key] = value
        self.logger.log(level, message, exc_info=exc_info, extra=extra)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, **kwargs)

    def log_minification(
        self,
        path: str,
        original_size: int,
        minified_size: int,
        **kwargs,
    ):
        """
        Логирование результата минификации ответа.

        Args:
            path: Путь запроса
            original_size: Размер исходного тела (байты)
            minified_size: Размер минифицированного тела (байты)
        """
        saved = original_size - minified_size
        self.debug(
            f"Minified {path}: {original_size} -> {minified_size} bytes (-{saved})",
            path=path,
            original_size=original_size,
            minified_size=minified_size,
            saved_bytes=saved,
            **kwargs,
        )


base_logger = setup_logger()
logger = StructuredLogger(base_logger)

__all__ = ["logger", "setup_logger", "StructuredLogger", "JSONFormatter", "ContextualFormatter"]
