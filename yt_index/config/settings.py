"""Process-wide settings read from the environment (and an optional .env file)."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration for the yt-index application.

    Values come from unprefixed environment variables so API keys keep their
    usual names (GOOGLE_KNOWLEDGE_API_KEY, WORDNIK_API_KEY).
    Component-level tuning lives in the per-package config classes
    (KEYWORDS_*, NER_*, DICTIONARIES_*, KG_*, SEGMENTS_*, TRANSCRIPT_*).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # External lookup APIs
    google_knowledge_api_key: str | None = None
    wordnik_api_key: str | None = None

    @property
    def is_production(self) -> bool:
        """Production enables JSON logs."""
        return self.environment == "production"

    @property
    def google_knowledge_configured(self) -> bool:
        """Check if the Google Knowledge Graph API is configured."""
        return bool(self.google_knowledge_api_key)

    @property
    def wordnik_configured(self) -> bool:
        """Check if the Wordnik (WordNet) API is configured."""
        return bool(self.wordnik_api_key)


@lru_cache
def get_settings() -> Settings:
    """
    Return the process-wide Settings, built on first call.

    Tests that change the environment call get_settings.cache_clear().
    """
    return Settings()
