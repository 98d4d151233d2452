"""
Transcript retrieval for YouTube videos.

Components:
- TranscriptConfig: Configuration for yt-dlp and subtitle downloads
- extract_video_id / validate_video_url: URL parsing
- parse_vtt: WebVTT to plain text
- TranscriptFetcher: yt-dlp based fetcher returning TranscriptResult
"""

from yt_index.transcripts.config import TranscriptConfig
from yt_index.transcripts.fetcher import TranscriptFetchError, TranscriptFetcher, create_summary
from yt_index.transcripts.schemas import TranscriptResult, VideoMetadata, VideoValidationResult
from yt_index.transcripts.video import extract_video_id, validate_video_url
from yt_index.transcripts.vtt import parse_vtt

__all__ = [
    "TranscriptConfig",
    "TranscriptFetchError",
    "TranscriptFetcher",
    "TranscriptResult",
    "VideoMetadata",
    "VideoValidationResult",
    "create_summary",
    "extract_video_id",
    "parse_vtt",
    "validate_video_url",
]
