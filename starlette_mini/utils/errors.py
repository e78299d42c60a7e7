"""Исключения минификации."""

from typing import Optional


class MiniError(Exception):
    """Базовое исключение пакета."""

    def __init__(self, message: str, original_exception: Optional[BaseException] = None):
        self.message = message
        self.original_exception = original_exception
        super().__init__(message)


class MinificationError(MiniError):
    """Минификатор не смог обработать тело ответа.

    Middleware перехватывает его и отдаёт исходное тело без изменений.
    """
