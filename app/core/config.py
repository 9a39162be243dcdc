from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

RESOURCES_DIR = Path(__file__).resolve().parents[1] / "resources"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    PROJECT_NAME: str = "TeamUp Events Service"
    LOG_LEVEL: str = Field(default="INFO", description="Root logging level")
    BACKEND_CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Database
    DATABASE_URL: str = Field(..., description="SQLAlchemy async database URL")
    DB_ECHO: bool = Field(default=False, description="Enable SQLAlchemy query logging")

    # Content filter word lists, one word per line
    FORBIDDEN_WORDS_FILE: Path = RESOURCES_DIR / "forbidden_words.txt"
    UNNECESSARY_WORDS_FILE: Path = RESOURCES_DIR / "unnecessary_words.txt"

    # Event checks
    EVENT_CREATE_RATE_LIMIT: str = Field(default="30/minute", description="slowapi limit for event creation")
    MAX_EVENT_AGE_YEARS: int = Field(default=1, ge=1, description="Events this many years in the past are rejected")


@lru_cache
def get_settings() -> Settings:
    return Settings()
