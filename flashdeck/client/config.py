"""Client configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from flashdeck.constants import (
    LIST_PAGE_SIZE,
    SEARCH_DEBOUNCE_SECONDS,
    SEARCH_MIN_LENGTH,
    STUDY_MODE_MAX_CARDS,
)


class ClientSettings(BaseSettings):
    """Client settings, read from FLASHDECK_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FLASHDECK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    API_URL: str = "http://localhost:8000/api/v1"
    REQUEST_TIMEOUT: float = 10.0

    # Browsing list
    LIST_PAGE_SIZE: int = LIST_PAGE_SIZE

    # Study mode loads at most this many cards; larger sets are truncated
    STUDY_MODE_MAX_CARDS: int = STUDY_MODE_MAX_CARDS

    # Search input
    SEARCH_DEBOUNCE_SECONDS: float = SEARCH_DEBOUNCE_SECONDS
    SEARCH_MIN_LENGTH: int = SEARCH_MIN_LENGTH


@lru_cache
def get_client_settings() -> ClientSettings:
    """Get cached client settings instance."""
    return ClientSettings()
