"""Keyword and segment extraction for YouTube video transcripts."""

__version__ = "0.1.0"
