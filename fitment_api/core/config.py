"""Application configuration with environment variable validation."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env relative to the project root (3 levels up from this file)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenAI
    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4", validation_alias="OPENAI_MODEL")
    # Low temperature keeps fitment answers close to deterministic
    openai_temperature: float = Field(
        default=0.2, ge=0.0, le=2.0, validation_alias="OPENAI_TEMPERATURE"
    )
    openai_max_tokens: int = Field(
        default=2000, gt=0, validation_alias="OPENAI_MAX_TOKENS"
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def validate_settings() -> None:
    """Validate that all required settings are present."""
    settings = get_settings()
    errors = []

    if not settings.openai_api_key:
        errors.append("OPENAI_API_KEY is required")

    if errors:
        raise ValueError(f"Configuration errors: {'; '.join(errors)}")
