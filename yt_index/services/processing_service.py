"""
Video processing service - combines transcript, keywords and segments.

Fetches a transcript for a video URL (or takes one directly), runs keyword
and segment extraction independently, and assembles a single envelope with
a success flag and a human-readable message.

Partial success is preserved: if keyword extraction fails the segments are
still returned and the message carries a note.
"""

from dataclasses import dataclass, field
from typing import Any

import structlog

from yt_index.dictionaries.schemas import DictionaryConfig
from yt_index.keywords.schemas import KeywordExtractionResult
from yt_index.keywords.service import KeywordsService
from yt_index.observability.logging import log_context
from yt_index.segments.config import SegmentsConfig
from yt_index.segments.service import SegmentsService
from yt_index.transcripts.config import TranscriptConfig
from yt_index.transcripts.fetcher import TranscriptFetcher, create_summary

logger = structlog.get_logger(__name__)

TRUNCATION_MARKER = "... [truncated]"


@dataclass
class ProcessingResult:
    """
    Combined result for one video or transcript.

    Attributes:
        success: Whether a transcript was processed.
        message: Human-readable status message, including partial-failure notes.
        video_id: Video ID, if known.
        title: Video title, if known.
        author: Video author, if known.
        transcript_length: Length of the full transcript.
        transcript: Display transcript (may be truncated).
        summary: First words of the transcript.
        keywords: Keyword result, or None if not requested or failed.
        segments: First max_segments segments.
        total_segments: Number of segments before limiting.
    """

    success: bool
    message: str
    video_id: str = ""
    title: str | None = None
    author: str | None = None
    transcript_length: int = 0
    transcript: str = ""
    summary: str = ""
    keywords: KeywordExtractionResult | None = None
    segments: list[str] = field(default_factory=list)
    total_segments: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "message": self.message,
            "video_id": self.video_id,
            "title": self.title,
            "author": self.author,
            "transcript_length": self.transcript_length,
            "transcript": self.transcript,
            "summary": self.summary,
            "keywords": self.keywords.to_dict() if self.keywords is not None else None,
            "segments": list(self.segments),
            "total_segments": self.total_segments,
        }


class VideoProcessingService:
    """
    Service that turns a video URL into transcript, keywords and segments.

    Usage:
        service = VideoProcessingService()
        result = await service.process_video("https://youtu.be/dQw4w9WgXcQ")
        print(result.message)
    """

    def __init__(
        self,
        fetcher: TranscriptFetcher | None = None,
        keywords_service: KeywordsService | None = None,
        segments_service: SegmentsService | None = None,
        transcript_config: TranscriptConfig | None = None,
        segments_config: SegmentsConfig | None = None,
    ):
        """
        Initialize video processing service.

        Args:
            fetcher: Transcript fetcher (or create from config)
            keywords_service: Keyword extraction service (or create default)
            segments_service: Segment extraction service (or create from config)
            transcript_config: Transcript configuration
            segments_config: Segments configuration
        """
        self._transcript_config = transcript_config or TranscriptConfig()
        self._segments_config = segments_config or SegmentsConfig()
        self._fetcher = fetcher or TranscriptFetcher(self._transcript_config)
        self._keywords_service = keywords_service
        self._segments_service = segments_service or SegmentsService(self._segments_config)

    @property
    def keywords_service(self) -> KeywordsService:
        """Keyword service, created on first use."""
        if self._keywords_service is None:
            self._keywords_service = KeywordsService()
        return self._keywords_service

    async def process_video(
        self,
        url: str,
        include_keywords: bool = True,
        include_segments: bool = True,
        max_segments: int | None = None,
        dictionary_config: DictionaryConfig | None = None,
        dynamic_sources: list[str] | None = None,
        dynamic_weights: dict[str, float] | None = None,
    ) -> ProcessingResult:
        """
        Fetch a video's transcript and analyze it.

        Returns:
            ProcessingResult; success=False when no transcript was obtained.
        """
        fetched = await self._fetcher.fetch(url)
        if not fetched.success:
            logger.info("Transcript unavailable", url=url, video_id=fetched.video_id)
            return ProcessingResult(
                success=False,
                message=fetched.message,
                video_id=fetched.video_id,
                title=fetched.title,
                author=fetched.author,
            )

        with log_context(video_id=fetched.video_id):
            return await self.process_transcript(
                fetched.transcript,
                include_keywords=include_keywords,
                include_segments=include_segments,
                max_segments=max_segments,
                dictionary_config=dictionary_config,
                dynamic_sources=dynamic_sources,
                dynamic_weights=dynamic_weights,
                video_id=fetched.video_id,
                title=fetched.title,
                author=fetched.author,
            )

    async def process_transcript(
        self,
        transcript: str,
        include_keywords: bool = True,
        include_segments: bool = True,
        max_segments: int | None = None,
        dictionary_config: DictionaryConfig | None = None,
        dynamic_sources: list[str] | None = None,
        dynamic_weights: dict[str, float] | None = None,
        video_id: str = "",
        title: str | None = None,
        author: str | None = None,
    ) -> ProcessingResult:
        """
        Analyze a transcript that has already been obtained.

        Args:
            transcript: Transcript text.
            include_keywords: Run keyword extraction.
            include_segments: Run segment extraction.
            max_segments: Segments returned (default from SegmentsConfig).
            dictionary_config: Static dictionaries for keyword extraction.
            dynamic_sources: Dynamic sources for keyword extraction.
            dynamic_weights: Weights for dynamic sources.
            video_id: Video ID for the envelope.
            title: Video title for the envelope.
            author: Video author for the envelope.

        Returns:
            ProcessingResult with partial-failure notes in the message.
        """
        if not transcript or not transcript.strip():
            return ProcessingResult(
                success=False,
                message="Transcript is empty.",
                video_id=video_id,
                title=title,
                author=author,
            )

        if max_segments is None:
            max_segments = self._segments_config.max_segments_return

        max_chars = self._transcript_config.max_transcript_chars
        truncated = len(transcript) > max_chars
        display = transcript[:max_chars] + TRUNCATION_MARKER if truncated else transcript

        notes: list[str] = []
        if truncated:
            notes.append(
                f"Note: Transcript truncated to {max_chars} characters for display."
            )

        keywords: KeywordExtractionResult | None = None
        if include_keywords:
            try:
                keywords = await self.keywords_service.extract(
                    transcript,
                    dictionary_config=dictionary_config,
                    dynamic_sources=dynamic_sources,
                    dynamic_weights=dynamic_weights,
                )
            except Exception as e:
                logger.warning("Keyword extraction failed", video_id=video_id, error=str(e))
                notes.append("Note: Keyword extraction failed.")

        segments: list[str] = []
        if include_segments:
            segments = self._segments_service.extract(transcript)

        message = f"Processed transcript ({len(transcript)} characters)"
        if title:
            message += f" for {title!r}"
        if author:
            message += f" by {author}"
        message += "."
        if keywords is not None:
            message += f" Extracted {keywords.total_count} keywords."
        if include_segments:
            message += f" Extracted {len(segments)} segments."
        if notes:
            message += " " + " ".join(notes)

        logger.info(
            "Transcript processed",
            video_id=video_id,
            transcript_length=len(transcript),
            keywords=keywords.total_count if keywords is not None else None,
            segments=len(segments),
            truncated=truncated,
        )

        return ProcessingResult(
            success=True,
            message=message,
            video_id=video_id,
            title=title,
            author=author,
            transcript_length=len(transcript),
            transcript=display,
            summary=create_summary(transcript, self._transcript_config.summary_words),
            keywords=keywords,
            segments=segments[:max_segments],
            total_segments=len(segments),
        )
