"""
Dictionary loading.

Turns dictionary source descriptions into loaded Dictionary objects. Static
sources (inline, file, url) read their terms directly; transcript-dependent
sources (api and the dynamic lookups) query a bounded list of candidate
terms taken from the transcript, each call time-boxed and isolated.

Loaded dictionaries are stored in a DictionaryCache keyed by the canonical
source description.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from pathlib import Path
from urllib.parse import urlparse

import httpx

from yt_index.dictionaries.cache import DictionaryCache, source_cache_key
from yt_index.dictionaries.candidates import extract_candidate_terms
from yt_index.dictionaries.config import DictionariesConfig
from yt_index.dictionaries.lookups import (
    ApiLookup,
    GoogleKnowledgeLookup,
    TermLookup,
    UrbanDictionaryLookup,
    WikipediaLookup,
    WordnikLookup,
)
from yt_index.dictionaries.schemas import (
    ApiSource,
    Dictionary,
    DictionaryConfig,
    DictionarySource,
    DictionarySourceError,
    FileSource,
    InlineSource,
    UrlSource,
    make_dynamic_source,
    parse_dictionary_source,
)
from yt_index.http_client import HTTPClient

logger = logging.getLogger(__name__)

# Sources whose candidates are proper-noun phrases rather than plain words
PROPER_NOUN_SOURCES = frozenset({"wikipedia", "google_knowledge"})


class DictionaryLoader:
    """
    Loads dictionaries from source descriptions.

    Usage:
        loader = DictionaryLoader()
        dictionaries = await loader.load_dictionaries(
            DictionaryConfig(dictionaries=[{"type": "inline", "terms": ["react"]}]),
            transcript,
        )
    """

    def __init__(
        self,
        config: DictionariesConfig | None = None,
        cache: DictionaryCache | None = None,
        http_client: httpx.AsyncClient | None = None,
        lookups: dict[str, TermLookup] | None = None,
    ):
        """
        Initialize dictionary loader.

        Args:
            config: Dictionary configuration. If None, uses default config.
            cache: Dictionary cache. If None, the loader owns a private cache.
            http_client: Optional shared httpx client for url/api/dynamic sources.
            lookups: Term lookups keyed by dynamic source type. Missing entries
                are built from config on first use.
        """
        self.config = config or DictionariesConfig()
        self.cache = cache if cache is not None else DictionaryCache(self.config.cache_max_entries)
        self._http_client = http_client
        self._lookups: dict[str, TermLookup] = dict(lookups or {})
        self._loaders: dict[
            str, Callable[[DictionarySource, str, str | None], Awaitable[Dictionary]]
        ] = {
            "inline": self._load_inline,
            "file": self._load_file,
            "url": self._load_url,
            "api": self._load_api,
            "urban_dictionary": self._load_dynamic,
            "wikipedia": self._load_dynamic,
            "wordnet": self._load_dynamic,
            "google_knowledge": self._load_dynamic,
        }

    def _get_lookup(self, source_type: str) -> TermLookup:
        if source_type not in self._lookups:
            if source_type == "urban_dictionary":
                lookup: TermLookup = UrbanDictionaryLookup(self.config, self._http_client)
            elif source_type == "wikipedia":
                lookup = WikipediaLookup(self.config, self._http_client)
            elif source_type == "wordnet":
                lookup = WordnikLookup(self.config, self._http_client)
            elif source_type == "google_knowledge":
                lookup = GoogleKnowledgeLookup(self.config)
            else:
                raise DictionarySourceError(f"No lookup for source type {source_type!r}")
            self._lookups[source_type] = lookup
        return self._lookups[source_type]

    def _is_enabled(self, source_type: str) -> bool:
        return getattr(self.config, f"{source_type}_enabled", True)

    async def load(self, source: object, transcript: str | None = None) -> Dictionary:
        """
        Load one dictionary.

        Args:
            source: A parsed source or a raw mapping with a ``type`` key.
            transcript: Transcript text, required by transcript-dependent sources.

        Returns:
            The loaded (possibly cached) dictionary.

        Raises:
            DictionarySourceError: If the source is unknown or malformed.
            OSError: If a file source cannot be read.
            HTTPClientError, httpx.HTTPError: If a url source cannot be fetched.
        """
        parsed = parse_dictionary_source(source)
        loader = self._loaders.get(parsed.type)
        if loader is None:
            raise DictionarySourceError(f"Unknown dictionary source type: {parsed.type!r}")

        if not self._is_enabled(parsed.type):
            logger.info(f"Dictionary source {parsed.type!r} is disabled")
            return Dictionary(name=parsed.name or parsed.type, terms=frozenset(), weight=parsed.weight)

        key = source_cache_key(parsed, transcript)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Dictionary cache hit: {cached.name!r}")
            return cached

        dictionary = await loader(parsed, key, transcript)
        self.cache.put(key, dictionary)
        logger.debug(f"Loaded dictionary {dictionary.to_dict()}")
        return dictionary

    async def load_dictionaries(
        self,
        dictionary_config: DictionaryConfig | None,
        transcript: str | None = None,
    ) -> list[Dictionary]:
        """
        Load every source in a dictionary config.

        A source that fails (bad description, unreadable file, network
        error) is skipped with a warning; the others still load.
        """
        if dictionary_config is None:
            return []

        dictionaries: list[Dictionary] = []
        for entry in dictionary_config.dictionaries:
            try:
                dictionaries.append(await self.load(entry, transcript))
            except DictionarySourceError as e:
                logger.warning(f"Skipping invalid dictionary source: {e}")
            except Exception as e:
                logger.warning(f"Failed to load dictionary source: {e}")
        return dictionaries

    async def load_dynamic_dictionaries(
        self,
        transcript: str,
        source_names: Iterable[str],
        weights: dict[str, float] | None = None,
    ) -> list[Dictionary]:
        """
        Load dynamic dictionaries by source name.

        Args:
            transcript: Transcript text used for candidate terms.
            source_names: Dynamic source names (e.g. ["wikipedia"]).
            weights: Optional weight per source name (default 1.0).

        Returns:
            Loaded dictionaries; unknown names and failures are skipped.
        """
        weights = weights or {}
        entries = []
        for name in source_names:
            try:
                entries.append(make_dynamic_source(name, weights.get(name, 1.0)))
            except DictionarySourceError as e:
                logger.warning(str(e))
        return await self.load_dictionaries(DictionaryConfig(dictionaries=entries), transcript)

    async def _load_inline(
        self, source: InlineSource, key: str, transcript: str | None
    ) -> Dictionary:
        return Dictionary.from_terms(
            source.name or f"inline_{key[:8]}", source.terms, source.weight
        )

    async def _load_file(
        self, source: FileSource, key: str, transcript: str | None
    ) -> Dictionary:
        path = Path(source.path)
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        return Dictionary.from_terms(source.name or path.stem, text.splitlines(), source.weight)

    async def _load_url(
        self, source: UrlSource, key: str, transcript: str | None
    ) -> Dictionary:
        http = HTTPClient(
            timeout=self.config.file_fetch_timeout_seconds,
            http_client=self._http_client,
            user_agent=self.config.user_agent,
        )
        text = await http.get_text(source.url)
        name = source.name or Path(urlparse(source.url).path).stem or urlparse(source.url).netloc
        return Dictionary.from_terms(name, text.splitlines(), source.weight)

    async def _load_api(
        self, source: ApiSource, key: str, transcript: str | None
    ) -> Dictionary:
        lookup = ApiLookup(
            source,
            timeout=self.config.lookup_timeout_seconds,
            http_client=self._http_client,
        )
        name = source.name or f"api_{urlparse(source.url).netloc}"
        terms = await self._collect_terms(lookup, transcript, proper_nouns_only=False)
        return Dictionary.from_terms(name, terms, source.weight)

    async def _load_dynamic(
        self, source: DictionarySource, key: str, transcript: str | None
    ) -> Dictionary:
        lookup = self._get_lookup(source.type)
        name = source.name or source.type
        if not getattr(lookup, "is_configured", True):
            logger.warning(f"Dictionary source {source.type!r} skipped: not configured")
            return Dictionary(name=name, terms=frozenset(), weight=source.weight)

        terms = await self._collect_terms(
            lookup, transcript, proper_nouns_only=source.type in PROPER_NOUN_SOURCES
        )
        return Dictionary.from_terms(name, terms, source.weight)

    async def _lookup_one(
        self, lookup: TermLookup, term: str, semaphore: asyncio.Semaphore
    ) -> list[str]:
        async with semaphore:
            try:
                return await asyncio.wait_for(
                    lookup.lookup(term), timeout=self.config.lookup_timeout_seconds
                )
            except asyncio.TimeoutError:
                logger.warning(f"{lookup.name} lookup timed out for {term!r}")
            except Exception as e:
                logger.warning(f"{lookup.name} lookup failed for {term!r}: {e}")
        return []

    async def _collect_terms(
        self,
        lookup: TermLookup,
        transcript: str | None,
        proper_nouns_only: bool,
    ) -> list[str]:
        """Query candidates concurrently (bounded) and accumulate unique terms."""
        if not transcript or not transcript.strip():
            return []

        candidates = extract_candidate_terms(
            transcript,
            limit=self.config.max_candidates,
            min_length=self.config.min_candidate_length,
            proper_nouns_only=proper_nouns_only,
        )
        if not candidates and proper_nouns_only:
            candidates = extract_candidate_terms(
                transcript,
                limit=self.config.max_candidates,
                min_length=self.config.min_candidate_length,
            )
        if not candidates:
            return []

        semaphore = asyncio.Semaphore(self.config.max_concurrent_lookups)
        results = await asyncio.gather(
            *(self._lookup_one(lookup, candidate, semaphore) for candidate in candidates)
        )

        terms: list[str] = []
        seen: set[str] = set()
        for candidate, related in zip(candidates, results):
            # A candidate the source knows about is itself a boost term
            for term in ([candidate] if related else []) + related:
                normalized = term.strip().lower()
                if normalized and normalized not in seen:
                    seen.add(normalized)
                    terms.append(normalized)

        logger.debug(
            f"{lookup.name}: {len(candidates)} candidates produced {len(terms)} terms"
        )
        return terms
