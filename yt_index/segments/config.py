"""Configuration for the segments service.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other service configs in the project.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SegmentsConfig(BaseSettings):
    """
    Configuration for the Segment Extraction service.

    All settings can be overridden via environment variables with SEGMENTS_ prefix.
    Example: SEGMENTS_MAX_SEGMENTS_RETURN=30

    Attributes:
        min_segment_length: Pieces shorter than this are dropped.
        comma_split_threshold: Pieces longer than this are re-split on commas.
        max_segments_return: Default cap on segments returned to callers.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEGMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    min_segment_length: int = Field(
        default=10,
        ge=1,
        description="Minimum length of a segment after whitespace normalization.",
    )
    comma_split_threshold: int = Field(
        default=100,
        ge=10,
        description="Pieces longer than this many characters are split on commas.",
    )
    max_segments_return: int = Field(
        default=15,
        ge=1,
        le=500,
        description="Default number of segments returned by the processing layer.",
    )
