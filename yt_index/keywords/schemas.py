"""Schema definitions for extracted keywords.

Provides lightweight dataclasses for keywords and the extraction result,
with serialization methods for API responses.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class Keyword:
    """
    A single scored keyword.

    Several extraction methods may produce a Keyword for the same word;
    they are merged into one per lowercase word.

    Attributes:
        word: Surface form of the keyword.
        entity: Category tag (e.g. "B-PERSON", "KEYWORD", "DICTIONARY").
            BIO prefixes are kept here and stripped only when grouping.
        score: Relevance score in (0, 1].
        sources: Ordered names of the methods/dictionaries that produced it.

    Example:
        >>> keyword = Keyword(word="React", entity="KEYWORD", score=0.82, sources=["general"])
        >>> keyword.to_dict()
        {'word': 'React', 'entity': 'KEYWORD', 'score': 0.82, 'sources': ['general']}
    """

    word: str
    entity: str
    score: float
    sources: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert keyword to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "entity": self.entity,
            "score": self.score,
            "sources": list(self.sources),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Keyword":
        """
        Create keyword from dictionary.

        Raises:
            KeyError: If required fields are missing.
        """
        return cls(
            word=data["word"],
            entity=data["entity"],
            score=float(data["score"]),
            sources=list(data.get("sources", [])),
        )


@dataclass
class KeywordExtractionResult:
    """
    Result of keyword extraction for one transcript.

    Attributes:
        keywords: Keywords sorted by descending score.
        grouped_keywords: Keywords bucketed by category (BIO prefix stripped),
            score order preserved within each bucket.
        dictionaries_used: Names of dictionaries that matched at least one keyword.
    """

    keywords: list[Keyword] = field(default_factory=list)
    grouped_keywords: dict[str, list[Keyword]] = field(default_factory=dict)
    dictionaries_used: list[str] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.keywords)

    @classmethod
    def empty(cls) -> "KeywordExtractionResult":
        return cls()

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return {
            "keywords": [k.to_dict() for k in self.keywords],
            "grouped_keywords": {
                category: [k.to_dict() for k in keywords]
                for category, keywords in self.grouped_keywords.items()
            },
            "total_count": self.total_count,
            "dictionaries_used": list(self.dictionaries_used),
        }

    def log_summary(self, top_n: int = 10) -> None:
        """Log the top keywords of each category."""
        logger.info(
            f"{self.total_count} keywords in {len(self.grouped_keywords)} categories"
        )
        for category, keywords in self.grouped_keywords.items():
            top = ", ".join(f"{k.word} ({k.score:.2f})" for k in keywords[:top_n])
            logger.info(f"{category}: {top}")
        if self.dictionaries_used:
            logger.info(f"Dictionaries used: {', '.join(self.dictionaries_used)}")
