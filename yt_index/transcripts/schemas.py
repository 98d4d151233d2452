"""Schema definitions for videos and fetched transcripts."""

from dataclasses import dataclass
from typing import Any


@dataclass
class VideoValidationResult:
    """
    Outcome of validating a video URL.

    Attributes:
        is_valid: Whether the URL points at a YouTube video.
        video_id: The 11-character video ID, if valid.
        error: Human-readable reason when invalid.
    """

    is_valid: bool
    video_id: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "video_id": self.video_id,
            "error": self.error,
        }


@dataclass
class VideoMetadata:
    """Basic video metadata."""

    video_id: str
    title: str = "Unknown"
    author: str = "Unknown"
    thumbnail_url: str | None = None

    @classmethod
    def from_yt_dlp(cls, video_id: str, data: dict[str, Any]) -> "VideoMetadata":
        """Create metadata from yt-dlp --print-json output."""
        return cls(
            video_id=video_id,
            title=data.get("title") or "Unknown",
            author=data.get("uploader") or data.get("channel") or "Unknown",
            thumbnail_url=data.get("thumbnail"),
        )

    @classmethod
    def from_oembed(cls, video_id: str, data: dict[str, Any]) -> "VideoMetadata":
        """Create metadata from a YouTube oEmbed response."""
        return cls(
            video_id=video_id,
            title=data.get("title") or "Unknown",
            author=data.get("author_name") or "Unknown",
            thumbnail_url=data.get("thumbnail_url"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "video_id": self.video_id,
            "title": self.title,
            "author": self.author,
            "thumbnail_url": self.thumbnail_url,
        }


@dataclass
class TranscriptResult:
    """
    Result of fetching a transcript.

    Attributes:
        success: Whether a transcript was obtained.
        message: Human-readable status message.
        transcript: Full transcript text (empty on failure).
        video_id: Video ID, empty if it could not be extracted.
        title: Video title, if known.
        author: Video author, if known.
        summary: First words of the transcript.
    """

    success: bool
    message: str
    transcript: str = ""
    video_id: str = ""
    title: str | None = None
    author: str | None = None
    summary: str = ""

    @property
    def transcript_length(self) -> int:
        return len(self.transcript)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "transcript": self.transcript,
            "video_id": self.video_id,
            "title": self.title,
            "author": self.author,
            "transcript_length": self.transcript_length,
            "summary": self.summary,
        }
