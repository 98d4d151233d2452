"""YouTube URL parsing and validation."""

import re
from urllib.parse import urlparse

from yt_index.transcripts.schemas import VideoValidationResult

VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([a-zA-Z0-9_-]{11})"
)
# The ID must end at a query separator or the end of the URL
STRICT_VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([a-zA-Z0-9_-]{11})(?:\?|&|$)"
)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


def extract_video_id(url: str) -> str | None:
    """Extract the 11-character video ID from a YouTube URL, or None."""
    if not url:
        return None
    match = VIDEO_ID_PATTERN.search(url)
    return match.group(1) if match else None


def watch_url(video_id: str) -> str:
    """Canonical watch URL for a video ID."""
    return WATCH_URL.format(video_id=video_id)


def validate_video_url(url: str) -> VideoValidationResult:
    """
    Validate that a URL is a well-formed YouTube video URL.

    Examples:
        >>> validate_video_url("https://youtu.be/dQw4w9WgXcQ").video_id
        'dQw4w9WgXcQ'
        >>> validate_video_url("not a url").error
        'Invalid URL format'
    """
    if not url or not isinstance(url, str):
        return VideoValidationResult(
            is_valid=False, error="URL is required and must be a string"
        )

    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        return VideoValidationResult(is_valid=False, error="Invalid URL format")

    match = STRICT_VIDEO_ID_PATTERN.search(url)
    if not match:
        return VideoValidationResult(is_valid=False, error="Not a valid YouTube video URL")

    return VideoValidationResult(is_valid=True, video_id=match.group(1))
