"""Tests for the Knowledge Graph Search API client."""

import httpx
import pytest

from yt_index.http_client import HTTPClientError
from yt_index.knowledge_graph.client import KnowledgeGraphClient
from yt_index.knowledge_graph.config import KnowledgeGraphConfig

API_RESPONSE = {
    "itemListElement": [
        {
            "@type": "EntitySearchResult",
            "result": {
                "name": "Taylor Swift",
                "@type": ["Person", "Thing"],
                "description": "American singer-songwriter",
                "detailedDescription": {"articleBody": "Taylor Alison Swift is an American singer."},
            },
            "resultScore": 1523.4,
        },
        {"result": {"@type": "Thing"}, "resultScore": 3.0},
        {"result": {"name": "Swift", "@type": "Thing"}},
    ]
}


class TestKnowledgeGraphClient:
    """Tests for KnowledgeGraphClient."""

    @pytest.mark.asyncio
    async def test_search(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["query"] == "Taylor Swift"
            assert request.url.params["key"] == "test-key"
            assert request.url.params["limit"] == "3"
            return httpx.Response(200, json=API_RESPONSE)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            client = KnowledgeGraphClient(
                config=KnowledgeGraphConfig(max_results=3),
                api_key="test-key",
                http_client=http_client,
            )
            entities = await client.search("Taylor Swift")

        assert [e.name for e in entities] == ["Taylor Swift", "Swift"]
        assert entities[0].types == ["Person", "Thing"]
        assert entities[0].description == "American singer-songwriter"
        assert entities[0].result_score == pytest.approx(1523.4)
        assert entities[1].types == ["Thing"]

    @pytest.mark.asyncio
    async def test_malformed_items_skipped(self):
        payload = {
            "itemListElement": [
                {"result": "Taylor Swift"},
                "Taylor Swift",
                {"result": {"name": "Paris", "detailedDescription": ["Capital"]}},
                {"result": {"name": "Taylor Swift", "@type": ["Person", "Thing"]}},
            ]
        }
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))

        async with httpx.AsyncClient(transport=transport) as http_client:
            client = KnowledgeGraphClient(api_key="test-key", http_client=http_client)
            entities = await client.search("Taylor Swift")

        assert [e.name for e in entities] == ["Paris", "Taylor Swift"]
        assert entities[0].detailed_description == ""

    @pytest.mark.asyncio
    async def test_empty_response(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))

        async with httpx.AsyncClient(transport=transport) as http_client:
            client = KnowledgeGraphClient(api_key="k", http_client=http_client)
            assert await client.search("nothing") == []

    @pytest.mark.asyncio
    async def test_http_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(403, text="quota"))

        async with httpx.AsyncClient(transport=transport) as http_client:
            client = KnowledgeGraphClient(api_key="k", http_client=http_client)
            with pytest.raises(HTTPClientError):
                await client.search("anything")

    @pytest.mark.asyncio
    async def test_requires_api_key(self):
        client = KnowledgeGraphClient()

        assert not client.is_configured
        with pytest.raises(RuntimeError):
            await client.search("anything")
