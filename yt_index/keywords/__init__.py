"""
Keyword extraction for video transcripts.

Combines named-entity recognition, frequency heuristics, dictionary matches
and knowledge-graph lookups into one ranked, deduplicated keyword list.

Components:
- KeywordsConfig: Configuration for sampling, scoring and merging
- Keyword / KeywordExtractionResult: Result dataclasses
- KeywordsService: Main service for keyword extraction
- extract_keywords: Convenience function using a shared default service
"""

from yt_index.keywords.config import KeywordsConfig
from yt_index.keywords.schemas import Keyword, KeywordExtractionResult
from yt_index.keywords.service import KeywordsService, extract_keywords

__all__ = [
    "KeywordsConfig",
    "Keyword",
    "KeywordExtractionResult",
    "KeywordsService",
    "extract_keywords",
]
