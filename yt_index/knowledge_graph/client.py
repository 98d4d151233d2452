"""
Async client for the Google Knowledge Graph Search API.

Usage:
    client = KnowledgeGraphClient(api_key="...")
    entities = await client.search("Leonardo da Vinci")
"""

import logging
from typing import Any

import httpx

from yt_index.config.settings import get_settings
from yt_index.http_client import HTTPClient
from yt_index.knowledge_graph.config import KnowledgeGraphConfig
from yt_index.knowledge_graph.schemas import KnowledgeGraphEntity

logger = logging.getLogger(__name__)


class KnowledgeGraphClient:
    """
    Client for entity search against the Knowledge Graph Search API.

    Search errors propagate to the caller; callers decide how to isolate
    them (per candidate term).
    """

    def __init__(
        self,
        config: KnowledgeGraphConfig | None = None,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize knowledge-graph client.

        Args:
            config: Knowledge-graph configuration. If None, uses default config.
            api_key: API key. Defaults to GOOGLE_KNOWLEDGE_API_KEY from settings.
            http_client: Optional shared httpx client.
        """
        self.config = config or KnowledgeGraphConfig()
        self._api_key = api_key if api_key is not None else get_settings().google_knowledge_api_key
        self._http = HTTPClient(timeout=self.config.timeout_seconds, http_client=http_client)

    @property
    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return bool(self._api_key)

    async def search(self, query: str) -> list[KnowledgeGraphEntity]:
        """
        Search for entities matching a query.

        Args:
            query: Free-text query (typically a candidate term).

        Returns:
            Entities in API relevance order. Items without a name are skipped.

        Raises:
            RuntimeError: If no API key is configured.
            HTTPClientError: On HTTP errors.
            httpx.HTTPError: On transport errors.
        """
        if not self._api_key:
            raise RuntimeError("Google Knowledge Graph API key is not configured")

        params: dict[str, Any] = {
            "query": query,
            "key": self._api_key,
            "limit": self.config.max_results,
            "indent": "false",
        }
        data = await self._http.get_json(self.config.base_url, params=params)

        entities: list[KnowledgeGraphEntity] = []
        for item in data.get("itemListElement", []):
            try:
                entities.append(KnowledgeGraphEntity.from_api_item(item))
            except (KeyError, TypeError, ValueError):
                logger.debug(f"Skipping malformed knowledge-graph item for {query!r}")

        return entities
