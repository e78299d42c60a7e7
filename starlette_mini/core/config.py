from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Конфигурация окружения: логирование и демо-сервер.

    Сам middleware настроек не читает, политика минификации фиксирована.
    """

    model_config = SettingsConfigDict(
        env_prefix="MINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    APP_NAME: str = Field(default="starlette-mini", description="Название приложения")
    DEBUG: bool = Field(default=False, description="Режим отладки")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Уровень логирования")
    LOG_JSON: bool = Field(default=False, description="JSON формат логов")

    # Demo server
    HOST: str = Field(default="127.0.0.1", description="Адрес демо-сервера")
    PORT: int = Field(default=3000, ge=1, le=65535, description="Порт демо-сервера")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Валидация уровня логирования."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL должен быть одним из: {', '.join(valid_levels)}")
        return v.upper()


settings = Settings()
