"""
Segment extraction service.

Turns a raw transcript into an ordered list of clean, punctuation-terminated
segments. Extraction is a pure function of the transcript and configuration:
no reordering, no deduplication, no I/O.

A piece that was closed by sentence-ending punctuation keeps the first such
mark of its delimiter run ("you???" -> "you?"); every other piece is closed
with a period.
"""

import logging
import re

from yt_index.segments.config import SegmentsConfig

logger = logging.getLogger(__name__)

SEGMENT_DELIMITERS = (".", "!", "?", ";", ":", "\n", "—", "–", "…")
SENTENCE_ENDINGS = (".", "!", "?")

_DELIMITERS = "".join(re.escape(d) for d in SEGMENT_DELIMITERS)

# A piece of text followed by its (possibly empty) run of delimiters
PIECE_PATTERN = re.compile(f"([^{_DELIMITERS}]+)([{_DELIMITERS}]*)")
WHITESPACE_PATTERN = re.compile(r"\s+")
PUNCTUATION_ONLY_PATTERN = re.compile(r"^[^\w\s]*$")
SENTENCE_END_PATTERN = re.compile(r"[.!?]$")


class SegmentsService:
    """
    Segmenter for transcript text.

    Usage:
        >>> service = SegmentsService()
        >>> service.extract("Hello world. This is a test. How are you today?")
        ['Hello world.', 'This is a test.', 'How are you today?']
    """

    def __init__(self, config: SegmentsConfig | None = None):
        """
        Initialize segments service.

        Args:
            config: Segments configuration. If None, uses default config.
        """
        self.config = config or SegmentsConfig()

    def extract(self, transcript: str | None) -> list[str]:
        """
        Extract segments from a transcript.

        Args:
            transcript: Transcript text. Empty or whitespace-only input
                yields an empty list.

        Returns:
            Ordered list of segments, each trimmed, whitespace-normalized,
            at least min_segment_length characters long and ending in
            ".", "!" or "?".
        """
        if not transcript or not transcript.strip():
            return []

        pieces = self._split_on_delimiters(transcript)
        pieces = self._split_long_pieces(pieces)

        segments: list[str] = []
        for text, ending in pieces:
            text = WHITESPACE_PATTERN.sub(" ", text).strip()
            if len(text) < self.config.min_segment_length:
                continue
            if PUNCTUATION_ONLY_PATTERN.match(text):
                continue
            if not SENTENCE_END_PATTERN.search(text):
                text = f"{text}{ending or '.'}"
            segments.append(text)

        logger.debug(f"Extracted {len(segments)} segments from {len(transcript)} chars")
        return segments

    def _split_on_delimiters(self, transcript: str) -> list[tuple[str, str]]:
        """
        Split on sentence/clause delimiters, dropping empty pieces.

        Returns:
            (text, ending) pairs where ending is the first sentence-ending
            mark in the delimiter run that closed the piece, or "".
        """
        pieces: list[tuple[str, str]] = []
        for match in PIECE_PATTERN.finditer(transcript):
            text = match.group(1).strip()
            if not text:
                continue
            ending = next((c for c in match.group(2) if c in SENTENCE_ENDINGS), "")
            pieces.append((text, ending))
        return pieces

    def _split_long_pieces(
        self, pieces: list[tuple[str, str]]
    ) -> list[tuple[str, str]]:
        """Re-split pieces above the comma threshold; short pieces stay intact."""
        result: list[tuple[str, str]] = []
        for text, ending in pieces:
            if len(text) <= self.config.comma_split_threshold:
                result.append((text, ending))
                continue

            parts = [part.strip() for part in text.split(",") if part.strip()]
            # Only the final part inherits the closing punctuation
            for i, part in enumerate(parts):
                result.append((part, ending if i == len(parts) - 1 else ""))
        return result


def extract_segments(transcript: str | None, config: SegmentsConfig | None = None) -> list[str]:
    """
    Extract segments from a transcript.

    Convenience wrapper around SegmentsService for callers that do not
    need to hold a service instance.

    Args:
        transcript: Transcript text.
        config: Optional segments configuration.

    Returns:
        Ordered list of segments.
    """
    return SegmentsService(config=config).extract(transcript)
