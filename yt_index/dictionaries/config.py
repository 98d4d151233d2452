"""Configuration for dictionary loading and dynamic term lookups.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other service configs in the project.
API keys are read from the central Settings (GOOGLE_KNOWLEDGE_API_KEY,
WORDNIK_API_KEY).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DictionariesConfig(BaseSettings):
    """
    Configuration for the dictionary loader.

    All settings can be overridden via environment variables with DICTIONARIES_ prefix.
    Example: DICTIONARIES_WIKIPEDIA_ENABLED=true

    Attributes:
        *_enabled: Per-source toggles for dynamic lookups.
        lookup_timeout_seconds: Time box for a single external lookup.
        max_candidates: Candidate terms queried per dynamic source.
        max_related_terms: Related terms mined from one lookup response.
        max_concurrent_lookups: Bounded fan-out of lookups within one source.
    """

    model_config = SettingsConfigDict(
        env_prefix="DICTIONARIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Source toggles
    urban_dictionary_enabled: bool = Field(
        default=True,
        description="Allow Urban Dictionary lookups for slang/cultural terms.",
    )
    wikipedia_enabled: bool = Field(
        default=True,
        description="Allow Wikipedia summary lookups for cultural references.",
    )
    wordnet_enabled: bool = Field(
        default=True,
        description="Allow Wordnik related-word lookups (requires WORDNIK_API_KEY).",
    )
    google_knowledge_enabled: bool = Field(
        default=True,
        description="Allow Google Knowledge Graph lookups (requires GOOGLE_KNOWLEDGE_API_KEY).",
    )

    # Endpoints
    urban_dictionary_url: str = "https://api.urbandictionary.com/v0/define"
    wikipedia_summary_url: str = "https://en.wikipedia.org/api/rest_v1/page/summary"
    wordnik_url: str = "https://api.wordnik.com/v4/word.json"

    # Rate limiting / time boxing
    lookup_timeout_seconds: float = Field(
        default=5.0,
        gt=0.0,
        le=60.0,
        description="Maximum seconds for one lookup before it is cancelled.",
    )
    file_fetch_timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        description="Maximum seconds to download a url dictionary.",
    )
    max_candidates: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Candidate terms extracted from the transcript per dynamic source.",
    )
    max_related_terms: int = Field(
        default=5,
        ge=0,
        le=50,
        description="Related terms mined from a single definition or description.",
    )
    max_concurrent_lookups: int = Field(
        default=3,
        ge=1,
        le=20,
        description="Lookups issued concurrently within one dynamic source.",
    )
    min_candidate_length: int = Field(
        default=4,
        ge=2,
        le=20,
        description="Minimum length of a transcript candidate term.",
    )

    cache_max_entries: int = Field(
        default=1000,
        ge=1,
        le=100_000,
        description="Loaded dictionaries kept in cache; the oldest is evicted beyond this.",
    )

    user_agent: str = "yt-index/0.1.0"
