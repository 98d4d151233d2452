"""Schema definitions for knowledge-graph entities."""

from dataclasses import dataclass, field
from typing import Any

# Generic schema.org type present on almost every entity
GENERIC_TYPE = "Thing"


@dataclass
class KnowledgeGraphEntity:
    """
    One entity returned by the Knowledge Graph Search API.

    Attributes:
        name: Entity name.
        types: Schema.org types (e.g. ["Person", "Thing"]).
        description: Short description ("American entrepreneur").
        detailed_description: Longer article body, if any.
        result_score: Relevance score reported by the API.
    """

    name: str
    types: list[str] = field(default_factory=list)
    description: str = ""
    detailed_description: str = ""
    result_score: float = 0.0

    @property
    def primary_type(self) -> str | None:
        """First non-generic type, or None when the entity is untyped."""
        for entity_type in self.types:
            if entity_type != GENERIC_TYPE:
                return entity_type
        return None

    @classmethod
    def from_api_item(cls, item: dict[str, Any]) -> "KnowledgeGraphEntity":
        """
        Create an entity from one ``itemListElement`` entry.

        Raises:
            KeyError: If the entry has no result name.
            TypeError: If the entry or its result is not an object.
        """
        result = item.get("result") if isinstance(item, dict) else None
        if not isinstance(result, dict):
            raise TypeError("knowledge-graph item has no result object")
        types = result.get("@type", [])
        if isinstance(types, str):
            types = [types]
        detailed = result.get("detailedDescription")
        if not isinstance(detailed, dict):
            detailed = {}
        return cls(
            name=result["name"],
            types=list(types),
            description=result.get("description", "") or "",
            detailed_description=detailed.get("articleBody", "") or "",
            result_score=float(item.get("resultScore", 0.0) or 0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "types": self.types,
            "description": self.description,
            "detailed_description": self.detailed_description,
            "result_score": self.result_score,
        }


@dataclass
class KnowledgeGraphMatch:
    """
    A knowledge-graph entity that occurs in the transcript, with its score.

    Attributes:
        entity: The matched entity.
        score: Relevance score in (0, 1].
        category: Keyword category (primary schema.org type, or KNOWLEDGE_GRAPH).
    """

    entity: KnowledgeGraphEntity
    score: float
    category: str

    def to_dict(self) -> dict[str, Any]:
        """Convert match to dictionary for JSON serialization."""
        return {
            "entity": self.entity.to_dict(),
            "score": self.score,
            "category": self.category,
        }
