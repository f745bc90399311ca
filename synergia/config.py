"""Synergia OS: Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Local store
    DATABASE_URL: str = "sqlite:///./data/synergia.db"

    # Session
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "session"
    SESSION_EXPIRATION_MINUTES: int = 60 * 24 * 5  # 5 days
    SESSION_COOKIE_SECURE: bool = False

    # First-run account
    DEFAULT_ADMIN_NAME: str = "Admin"
    DEFAULT_ADMIN_EMAIL: str = "admin@synergia.local"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    # Timezone (export file names, CSV dates)
    TIMEZONE: str = "America/Sao_Paulo"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
