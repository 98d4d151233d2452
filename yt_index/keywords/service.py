"""
Keyword Extraction Service for video transcripts.

Combines several extraction methods into one ranked, deduplicated keyword
list grouped by category.

Pipeline:
1. Long transcripts are sampled down to the configured budget
2. Dictionaries are loaded (static config + dynamic sources)
3. Methods run independently: NER, general frequency heuristics,
   dictionary-direct matches and knowledge-graph entities
4. Results are merged pairwise in priority order and grouped by category

Every stage is isolated: a failing model, lookup or dictionary contributes
no keywords and extraction continues with the others.
"""

import asyncio
import logging
from collections.abc import Callable
from functools import lru_cache

from yt_index.dictionaries.cache import DictionaryCache
from yt_index.dictionaries.loader import DictionaryLoader
from yt_index.dictionaries.schemas import Dictionary, DictionaryConfig
from yt_index.keywords.config import KeywordsConfig
from yt_index.keywords.extractors import (
    entities_to_keywords,
    extract_dictionary_keywords,
    extract_general_keywords,
    knowledge_graph_keywords,
)
from yt_index.keywords.merge import group_keywords, merge_keyword_lists
from yt_index.keywords.sampling import reduce_transcript, split_into_chunks
from yt_index.keywords.schemas import Keyword, KeywordExtractionResult
from yt_index.knowledge_graph.service import KnowledgeGraphService
from yt_index.ner.config import NERConfig
from yt_index.ner.schemas import EntityRecognizer, RecognizedEntity
from yt_index.ner.service import NERService

logger = logging.getLogger(__name__)

# Dynamic source that drives knowledge-graph extraction instead of a dictionary
KNOWLEDGE_GRAPH_SOURCE = "google_knowledge"


class KeywordsService:
    """
    Keyword extraction service.

    Collaborators are injectable so that scoring and merging can be tested
    with deterministic fakes.

    Usage:
        >>> service = KeywordsService()
        >>> result = await service.extract(
        ...     transcript,
        ...     dynamic_sources=["wikipedia", "google_knowledge"],
        ...     dynamic_weights={"google_knowledge": 1.2},
        ... )
        >>> for keyword in result.keywords[:3]:
        ...     print(f"{keyword.word} [{keyword.entity}] {keyword.score:.2f}")

    Note:
        The dictionary cache lives as long as this service instance.
    """

    def __init__(
        self,
        config: KeywordsConfig | None = None,
        recognizer: EntityRecognizer | None = None,
        dictionary_loader: DictionaryLoader | None = None,
        knowledge_graph: KnowledgeGraphService | None = None,
        cache: DictionaryCache | None = None,
        ner_config: NERConfig | None = None,
    ):
        """
        Initialize keywords service.

        Args:
            config: Keywords configuration. If None, uses default config.
            recognizer: Entity recognizer. If None, a lazily-loaded NERService.
            dictionary_loader: Dictionary loader. If None, one sharing ``cache``.
            knowledge_graph: Knowledge-graph service. If None, uses defaults.
            cache: Dictionary cache for the default loader.
            ner_config: NER chunking and timeout settings.
        """
        self.config = config or KeywordsConfig()
        self.ner_config = ner_config or NERConfig()
        self.cache = cache if cache is not None else DictionaryCache()
        self._recognizer = recognizer if recognizer is not None else NERService(self.ner_config)
        self._dictionary_loader = dictionary_loader or DictionaryLoader(cache=self.cache)
        self._knowledge_graph = knowledge_graph or KnowledgeGraphService()

    async def extract(
        self,
        transcript: str,
        dictionary_config: DictionaryConfig | None = None,
        dynamic_sources: list[str] | None = None,
        dynamic_weights: dict[str, float] | None = None,
    ) -> KeywordExtractionResult:
        """
        Extract keywords from a transcript.

        Args:
            transcript: Transcript text. Empty input yields an empty result.
            dictionary_config: Static dictionary sources.
            dynamic_sources: Dynamic source names. "google_knowledge" enables
                knowledge-graph extraction; the others load dictionaries.
                Defaults to config.dynamic_sources.
            dynamic_weights: Optional weight per dynamic source name.

        Returns:
            KeywordExtractionResult with keywords sorted by descending score.
        """
        if not transcript or not transcript.strip():
            return KeywordExtractionResult.empty()

        text = reduce_transcript(
            transcript,
            max_length=self.config.max_transcript_length,
            strategy=self.config.sampling_strategy,
            chunk_size=self.config.chunk_size,
            max_chunks=self.config.max_sampled_chunks,
            window=self.config.truncation_window,
        )

        if dynamic_sources is None:
            dynamic_sources = list(self.config.dynamic_sources)
        dynamic_weights = dynamic_weights or {}

        dictionaries = await self._load_dictionaries(
            text, dictionary_config, dynamic_sources, dynamic_weights
        )

        method_results: dict[str, list[Keyword]] = {}
        if self.config.enable_ner:
            method_results["ner"] = await self._extract_ner(text, dictionaries)
        if self.config.enable_general:
            method_results["general"] = self._run_stage(
                "general", extract_general_keywords, text, dictionaries, self.config
            )
        if self.config.enable_dictionary and dictionaries:
            method_results["dictionary"] = self._run_stage(
                "dictionary", extract_dictionary_keywords, text, dictionaries, self.config
            )
        if self.config.enable_knowledge_graph and KNOWLEDGE_GRAPH_SOURCE in dynamic_sources:
            method_results["knowledge_graph"] = await self._extract_knowledge_graph(
                text, dynamic_weights.get(KNOWLEDGE_GRAPH_SOURCE, 1.0)
            )

        order = list(self.config.merge_order)
        order += [method for method in method_results if method not in order]
        keywords = merge_keyword_lists([method_results.get(m, []) for m in order])

        result = KeywordExtractionResult(
            keywords=keywords,
            grouped_keywords=group_keywords(keywords),
            dictionaries_used=self._dictionaries_used(dictionaries, keywords),
        )
        logger.info(
            f"Extracted {result.total_count} keywords "
            f"({', '.join(f'{m}={len(k)}' for m, k in method_results.items())})"
        )
        return result

    async def _load_dictionaries(
        self,
        text: str,
        dictionary_config: DictionaryConfig | None,
        dynamic_sources: list[str],
        dynamic_weights: dict[str, float],
    ) -> list[Dictionary]:
        dictionaries: list[Dictionary] = []
        try:
            dictionaries.extend(
                await self._dictionary_loader.load_dictionaries(dictionary_config, text)
            )
            lookup_sources = [s for s in dynamic_sources if s != KNOWLEDGE_GRAPH_SOURCE]
            if lookup_sources:
                dictionaries.extend(
                    await self._dictionary_loader.load_dynamic_dictionaries(
                        text, lookup_sources, dynamic_weights
                    )
                )
        except Exception as e:
            logger.warning(f"Dictionary loading failed: {e}")
        return [d for d in dictionaries if len(d) > 0]

    def _run_stage(
        self, name: str, func: Callable[..., list[Keyword]], *args: object
    ) -> list[Keyword]:
        try:
            return func(*args)
        except Exception as e:
            logger.warning(f"{name} keyword extraction failed: {e}")
            return []

    async def _extract_ner(self, text: str, dictionaries: list[Dictionary]) -> list[Keyword]:
        """Recognize entities chunk by chunk; a failed chunk contributes nothing."""
        entities: list[RecognizedEntity] = []
        for i, chunk in enumerate(split_into_chunks(text, self.ner_config.chunk_size)):
            try:
                entities.extend(
                    await asyncio.wait_for(
                        self._recognizer.recognize(chunk),
                        timeout=self.ner_config.timeout_seconds,
                    )
                )
            except asyncio.TimeoutError:
                logger.warning(f"Entity recognition timed out on chunk {i}")
            except Exception as e:
                logger.warning(f"Entity recognition failed on chunk {i}: {e}")

        return self._run_stage("ner", entities_to_keywords, entities, dictionaries, self.config)

    async def _extract_knowledge_graph(self, text: str, weight: float) -> list[Keyword]:
        try:
            matches = await self._knowledge_graph.find_entities(text, weight=weight)
        except Exception as e:
            logger.warning(f"Knowledge graph extraction failed: {e}")
            return []
        return knowledge_graph_keywords(matches)

    @staticmethod
    def _dictionaries_used(dictionaries: list[Dictionary], keywords: list[Keyword]) -> list[str]:
        sources = {source for keyword in keywords for source in keyword.sources}
        used: list[str] = []
        for dictionary in dictionaries:
            if dictionary.name in sources and dictionary.name not in used:
                used.append(dictionary.name)
        return used


@lru_cache
def get_keywords_service() -> KeywordsService:
    """Get the shared default KeywordsService (one model load per process)."""
    return KeywordsService()


async def extract_keywords(
    transcript: str,
    dictionary_config: DictionaryConfig | None = None,
    dynamic_sources: list[str] | None = None,
    dynamic_weights: dict[str, float] | None = None,
) -> KeywordExtractionResult:
    """Extract keywords with the shared default service."""
    return await get_keywords_service().extract(
        transcript,
        dictionary_config=dictionary_config,
        dynamic_sources=dynamic_sources,
        dynamic_weights=dynamic_weights,
    )
