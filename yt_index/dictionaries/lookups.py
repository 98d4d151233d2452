"""
External term lookups used by dynamic dictionaries.

Every lookup exposes the same narrow interface: given a query term, return
zero or more related terms. Errors propagate; the loader time-boxes and
isolates each call.

Lookups:
- UrbanDictionaryLookup: slang and cultural terms
- WikipediaLookup: page summaries for cultural references
- WordnikLookup: related words (synonyms, equivalents) via the Wordnik API
- GoogleKnowledgeLookup: entity names from the Knowledge Graph
- ApiLookup: a user-configured JSON endpoint
"""

import logging
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote

import httpx

from yt_index.config.settings import get_settings
from yt_index.dictionaries.candidates import mine_related_terms
from yt_index.dictionaries.config import DictionariesConfig
from yt_index.dictionaries.schemas import ApiSource
from yt_index.http_client import HTTPClient
from yt_index.knowledge_graph.client import KnowledgeGraphClient

logger = logging.getLogger(__name__)


@runtime_checkable
class TermLookup(Protocol):
    """A source of related terms for a query term."""

    name: str

    async def lookup(self, term: str) -> list[str]:
        """Return terms related to ``term`` (may be empty)."""
        ...


class UrbanDictionaryLookup:
    """Looks up slang definitions and mines related terms from them."""

    name = "urban_dictionary"

    def __init__(
        self,
        config: DictionariesConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config or DictionariesConfig()
        self._http = HTTPClient(
            timeout=self.config.lookup_timeout_seconds,
            http_client=http_client,
            user_agent=self.config.user_agent,
        )

    async def lookup(self, term: str) -> list[str]:
        data = await self._http.get_json(
            self.config.urban_dictionary_url, params={"term": term}
        )
        entries = data.get("list", []) if isinstance(data, dict) else []

        terms: list[str] = []
        # Only the top definitions; later ones are mostly noise
        for entry in entries[:3]:
            word = str(entry.get("word", "")).strip().lower()
            if word and word not in terms:
                terms.append(word)
            for related in mine_related_terms(
                str(entry.get("definition", "")),
                limit=self.config.max_related_terms,
                exclude={term},
            ):
                if related not in terms:
                    terms.append(related)
        return terms


class WikipediaLookup:
    """Looks up a Wikipedia page summary for a term."""

    name = "wikipedia"

    def __init__(
        self,
        config: DictionariesConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config or DictionariesConfig()
        self._http = HTTPClient(
            timeout=self.config.lookup_timeout_seconds,
            http_client=http_client,
            user_agent=self.config.user_agent,
        )

    async def lookup(self, term: str) -> list[str]:
        title = quote(term.strip().replace(" ", "_"), safe="")
        data = await self._http.get_json(f"{self.config.wikipedia_summary_url}/{title}")
        if not isinstance(data, dict) or data.get("type") == "disambiguation":
            return []

        terms: list[str] = []
        page_title = str(data.get("title", "")).strip().lower()
        if page_title:
            terms.append(page_title)
        for related in mine_related_terms(
            str(data.get("extract", "")),
            limit=self.config.max_related_terms,
            exclude={term, page_title},
        ):
            if related not in terms:
                terms.append(related)
        return terms


class WordnikLookup:
    """Looks up related words (the ``wordnet`` source) via the Wordnik API."""

    name = "wordnet"

    def __init__(
        self,
        config: DictionariesConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        api_key: str | None = None,
    ):
        self.config = config or DictionariesConfig()
        self._api_key = api_key if api_key is not None else get_settings().wordnik_api_key
        self._http = HTTPClient(
            timeout=self.config.lookup_timeout_seconds,
            http_client=http_client,
            user_agent=self.config.user_agent,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def lookup(self, term: str) -> list[str]:
        if not self._api_key:
            raise RuntimeError("Wordnik API key is not configured")

        data = await self._http.get_json(
            f"{self.config.wordnik_url}/{quote(term.lower(), safe='')}/relatedWords",
            params={
                "useCanonical": "true",
                "limitPerRelationshipType": 10,
                "api_key": self._api_key,
            },
        )

        terms: list[str] = []
        for group in data if isinstance(data, list) else []:
            for word in group.get("words", []):
                word = str(word).strip().lower()
                if word and word != term.lower() and word not in terms:
                    terms.append(word)
        return terms[: self.config.max_related_terms * 4]


class GoogleKnowledgeLookup:
    """Looks up entity names and description terms in the Knowledge Graph."""

    name = "google_knowledge"

    def __init__(
        self,
        config: DictionariesConfig | None = None,
        client: KnowledgeGraphClient | None = None,
    ):
        self.config = config or DictionariesConfig()
        self._client = client or KnowledgeGraphClient()

    @property
    def is_configured(self) -> bool:
        return self._client.is_configured

    async def lookup(self, term: str) -> list[str]:
        terms: list[str] = []
        for entity in await self._client.search(term):
            name = entity.name.strip().lower()
            if name and name not in terms:
                terms.append(name)
            for related in mine_related_terms(
                entity.description,
                limit=self.config.max_related_terms,
                exclude={term, name},
            ):
                if related not in terms:
                    terms.append(related)
        return terms


class ApiLookup:
    """Queries a user-configured JSON endpoint described by an ApiSource."""

    name = "api"

    def __init__(
        self,
        source: ApiSource,
        timeout: float = 5.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.source = source
        self._http = HTTPClient(timeout=timeout, http_client=http_client)

    async def lookup(self, term: str) -> list[str]:
        data: Any = await self._http.get_json(
            self.source.url,
            params={self.source.query_param: term},
            headers=self.source.headers,
        )
        if isinstance(data, dict):
            data = data.get(self.source.terms_field, [])
        if not isinstance(data, list):
            logger.debug(f"Unexpected response shape from {self.source.url}")
            return []
        return [str(item) for item in data if isinstance(item, str) and item.strip()]
