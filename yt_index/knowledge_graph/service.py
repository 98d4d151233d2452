"""
Knowledge-graph entity extraction from transcripts.

Candidate terms taken from the transcript are looked up in the Google
Knowledge Graph; returned entities whose name occurs in the transcript are
scored by description richness and type.
"""

import asyncio
import logging

from yt_index.dictionaries.candidates import extract_entity_candidates
from yt_index.knowledge_graph.client import KnowledgeGraphClient
from yt_index.knowledge_graph.config import KnowledgeGraphConfig
from yt_index.knowledge_graph.schemas import KnowledgeGraphEntity, KnowledgeGraphMatch

logger = logging.getLogger(__name__)

UNTYPED_CATEGORY = "KNOWLEDGE_GRAPH"


class KnowledgeGraphService:
    """
    Finds knowledge-graph entities mentioned in a transcript.

    Every query is time-boxed and isolated: a failed or timed-out query
    contributes no entities and the remaining candidates are still queried.

    Usage:
        service = KnowledgeGraphService()
        matches = await service.find_entities(transcript, weight=1.2)
    """

    def __init__(
        self,
        config: KnowledgeGraphConfig | None = None,
        client: KnowledgeGraphClient | None = None,
    ):
        """
        Initialize knowledge-graph service.

        Args:
            config: Knowledge-graph configuration. If None, uses default config.
            client: Search client. If None, one is built from config.
        """
        self.config = config or KnowledgeGraphConfig()
        self._client = client or KnowledgeGraphClient(config=self.config)

    @property
    def is_available(self) -> bool:
        """Check if the underlying client has an API key."""
        return self._client.is_configured

    def score_entity(self, entity: KnowledgeGraphEntity, weight: float = 1.0) -> float:
        """
        Score an entity by description richness and type.

        Args:
            entity: Entity to score.
            weight: Source weight multiplier.

        Returns:
            Score capped at 1.0.
        """
        score = self.config.base_score
        if entity.description:
            score += self.config.description_bonus
        if len(entity.detailed_description) >= self.config.detailed_description_min_length:
            score += self.config.detailed_description_bonus
        if any(t in self.config.high_value_types for t in entity.types):
            score += self.config.high_value_type_bonus
        return min(score * weight, 1.0)

    async def _search(
        self, candidate: str, semaphore: asyncio.Semaphore
    ) -> list[KnowledgeGraphEntity]:
        async with semaphore:
            try:
                return await asyncio.wait_for(
                    self._client.search(candidate),
                    timeout=self.config.timeout_seconds,
                )
            except asyncio.TimeoutError:
                logger.warning(f"Knowledge graph lookup timed out for {candidate!r}")
            except Exception as e:
                logger.warning(f"Knowledge graph lookup failed for {candidate!r}: {e}")
        return []

    async def find_entities(
        self, transcript: str, weight: float = 1.0
    ) -> list[KnowledgeGraphMatch]:
        """
        Find scored entities that occur in the transcript.

        Args:
            transcript: Transcript text.
            weight: Score multiplier for this source.

        Returns:
            One match per entity name (highest score kept), in descending
            score order. Empty if the client is not configured.
        """
        if not transcript or not transcript.strip():
            return []

        if not self.is_available:
            logger.warning("Knowledge graph extraction skipped: no API key configured")
            return []

        candidates = extract_entity_candidates(transcript, limit=self.config.max_candidates)
        if not candidates:
            return []

        semaphore = asyncio.Semaphore(self.config.max_concurrent_requests)
        results = await asyncio.gather(
            *(self._search(candidate, semaphore) for candidate in candidates)
        )

        haystack = transcript.lower()
        matches: dict[str, KnowledgeGraphMatch] = {}
        for entities in results:
            for entity in entities:
                key = entity.name.strip().lower()
                if not key or key not in haystack:
                    continue
                score = self.score_entity(entity, weight)
                existing = matches.get(key)
                if existing is None or score > existing.score:
                    matches[key] = KnowledgeGraphMatch(
                        entity=entity,
                        score=score,
                        category=entity.primary_type or UNTYPED_CATEGORY,
                    )

        ranked = sorted(matches.values(), key=lambda m: m.score, reverse=True)
        logger.debug(
            f"Knowledge graph: {len(candidates)} candidates, {len(ranked)} entities matched"
        )
        for match in ranked:
            logger.debug(f"Knowledge graph match: {match.to_dict()}")
        return ranked
