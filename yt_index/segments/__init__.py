"""
Segment extraction for transcripts.

Splits a transcript into clause/sentence-level segments on punctuation
delimiters, re-splits overly long pieces on commas, and filters out
fragments that are too short or purely punctuation.

Components:
- SegmentsConfig: Configuration for the segmenter
- SegmentsService: Segmenter bound to a configuration
- extract_segments: Convenience function using the default configuration
"""

from yt_index.segments.config import SegmentsConfig
from yt_index.segments.service import SegmentsService, extract_segments

__all__ = [
    "SegmentsConfig",
    "SegmentsService",
    "extract_segments",
]
