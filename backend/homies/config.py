"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./homies.db"
    CORS_ORIGINS: str = "http://localhost:3000"
    TIMEZONE: str = "UTC"  # IANA tz used for created_on
    LOG_LEVEL: str = "INFO"
    DEFAULT_EVENT_TYPES: str = "Animals,Games,Discussion,Workshop"

    class Config:
        env_file = ".env"


settings = Settings()
