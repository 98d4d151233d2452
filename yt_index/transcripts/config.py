"""Configuration for transcript fetching.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other service configs in the project.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TranscriptConfig(BaseSettings):
    """
    Configuration for the yt-dlp based transcript fetcher.

    All settings can be overridden via environment variables with TRANSCRIPT_ prefix.
    Example: TRANSCRIPT_YT_DLP_BINARY=/usr/local/bin/yt-dlp
    """

    model_config = SettingsConfigDict(
        env_prefix="TRANSCRIPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # yt-dlp
    yt_dlp_binary: str = Field(
        default="yt-dlp",
        description="yt-dlp executable name or path.",
    )
    command_timeout_seconds: float = Field(
        default=60.0,
        gt=0.0,
        le=600.0,
        description="Maximum seconds for the yt-dlp metadata command.",
    )
    subtitle_languages: list[str] = Field(
        default=["en", "en-US", "en-GB"],
        description="Subtitle languages tried in order.",
    )

    # Subtitle / metadata HTTP
    subtitle_timeout_seconds: float = Field(default=15.0, gt=0.0, le=120.0)
    oembed_url: str = "https://www.youtube.com/oembed"
    metadata_timeout_seconds: float = Field(default=5.0, gt=0.0, le=60.0)

    # Presentation
    summary_words: int = Field(
        default=200,
        ge=10,
        le=5000,
        description="Words kept in the transcript summary.",
    )
    max_transcript_chars: int = Field(
        default=10000,
        ge=100,
        description="Transcript characters returned to callers before truncation.",
    )
