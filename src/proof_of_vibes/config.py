"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    admin_token: str
    environment: str = _ENVIRONMENT
    event_name: str = "Proof of Vibes"
    certificate_prefix: str = "POV"
    default_recipient_name: str = "Event Attendee"
    max_edition_count: int = 50
    default_page_size: int = 100
    max_page_size: int = 500
    seed_sample_collectibles: bool = True
    cors_allowed_origins: str = "*"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse a comma separated CORS origin list from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    return [chunk.strip() for chunk in cleaned.split(",") if chunk.strip()]
