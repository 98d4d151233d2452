"""Schema definitions for NER entities.

Provides a lightweight dataclass for representing recognized entities and
the protocol every recognizer implementation satisfies.
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass
class RecognizedEntity:
    """
    A single entity returned by an entity recognizer.

    Attributes:
        word: Surface form as found in the text.
        entity: Model tag, either BIO-prefixed ("B-PER") or grouped ("PER").
        score: Model confidence from 0.0 to 1.0.

    Example:
        >>> entity = RecognizedEntity(word="Paris", entity="B-LOC", score=0.998)
        >>> entity.to_dict()
        {'word': 'Paris', 'entity': 'B-LOC', 'score': 0.998}
    """

    word: str
    entity: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "entity": self.entity,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecognizedEntity":
        """
        Create entity from a pipeline output item.

        Accepts both raw token output ("entity") and aggregated output
        ("entity_group").

        Raises:
            KeyError: If word or tag fields are missing.
        """
        tag = data.get("entity") or data["entity_group"]
        return cls(
            word=data["word"],
            entity=tag,
            score=float(data.get("score", 0.0)),
        )


@runtime_checkable
class EntityRecognizer(Protocol):
    """Anything that can recognize named entities in a chunk of text."""

    async def recognize(self, text: str) -> list[RecognizedEntity]:
        """Return the entities found in text."""
        ...
