# core/config.py
"""
Runtime settings for the meme scraper.

Values come from environment variables prefixed with ``MEME_SCRAPER_`` (or a
local ``.env`` file) and fall back to the defaults below, which describe the
one site this package knows how to read.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="MEME_SCRAPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Target site
    # ------------------------------------------------------------------
    BASE_URL: str = Field(default="https://knowyourmeme.com", description="Site origin every meme URL must start with")
    SEARCH_PATH: str = Field(default="/search", description="Path of the search listing page")

    # ------------------------------------------------------------------
    # Request headers & transport
    # ------------------------------------------------------------------
    DEFAULT_USER_AGENT: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"
    ACCEPT_LANGUAGE: str = "en-US,en;q=0.9"
    ACCEPT: str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    TIMEOUT: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    # ------------------------------------------------------------------
    # Logging & selector catalogue
    # ------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    SELECTORS_PATH: Path = Path(__file__).resolve().parents[1] / "configs" / "selectors.yaml"

    @property
    def search_url(self) -> str:
        return f"{self.BASE_URL}{self.SEARCH_PATH}"

    def request_headers(self) -> dict:
        """The fixed header set sent with every request."""
        return {
            "User-Agent": self.DEFAULT_USER_AGENT,
            "Accept-Language": self.ACCEPT_LANGUAGE,
            "Accept": self.ACCEPT,
        }


@lru_cache
def get_settings() -> Settings:
    return Settings()
