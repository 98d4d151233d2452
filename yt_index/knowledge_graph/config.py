"""Configuration for the knowledge-graph service.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other service configs in the project.
The API key itself is read from the central Settings
(GOOGLE_KNOWLEDGE_API_KEY).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class KnowledgeGraphConfig(BaseSettings):
    """
    Configuration for Google Knowledge Graph lookups and entity scoring.

    All settings can be overridden via environment variables with KG_ prefix.
    Example: KG_MAX_CANDIDATES=3

    Scoring formula for an entity found in the transcript:
        score = base_score
                + description_bonus          (if it has a description)
                + detailed_description_bonus (if it has a long article body)
                + high_value_type_bonus      (if any type is high-value)
        multiplied by the caller's source weight, capped at 1.0.
    """

    model_config = SettingsConfigDict(
        env_prefix="KG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API configuration
    base_url: str = Field(
        default="https://kgsearch.googleapis.com/v1/entities:search",
        description="Knowledge Graph Search API endpoint.",
    )
    max_results: int = Field(
        default=10,
        ge=1,
        le=500,
        description="Entities requested per query.",
    )
    timeout_seconds: float = Field(
        default=5.0,
        gt=0.0,
        le=60.0,
        description="Maximum seconds for one query before it is cancelled.",
    )
    max_candidates: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Candidate terms queried per transcript (rate-limit bound).",
    )
    max_concurrent_requests: int = Field(
        default=3,
        ge=1,
        le=20,
        description="Queries issued concurrently.",
    )

    # Scoring configuration
    base_score: float = Field(default=0.6, gt=0.0, le=1.0)
    description_bonus: float = Field(default=0.1, ge=0.0, le=1.0)
    detailed_description_bonus: float = Field(default=0.1, ge=0.0, le=1.0)
    detailed_description_min_length: int = Field(default=100, ge=0)
    high_value_type_bonus: float = Field(default=0.15, ge=0.0, le=1.0)
    high_value_types: list[str] = Field(
        default=["Person", "Organization", "Place", "Event", "CreativeWork"],
        description="Schema.org types that earn the high-value bonus.",
    )
