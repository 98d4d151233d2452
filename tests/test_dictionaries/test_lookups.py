"""Tests for external term lookups."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from yt_index.dictionaries.lookups import (
    ApiLookup,
    GoogleKnowledgeLookup,
    TermLookup,
    UrbanDictionaryLookup,
    WikipediaLookup,
    WordnikLookup,
)
from yt_index.dictionaries.schemas import ApiSource
from yt_index.http_client import HTTPClientError
from yt_index.knowledge_graph.schemas import KnowledgeGraphEntity


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestUrbanDictionaryLookup:
    """Tests for UrbanDictionaryLookup."""

    @pytest.mark.asyncio
    async def test_lookup(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["term"] == "rizz"
            return httpx.Response(
                200,
                json={
                    "list": [
                        {
                            "word": "Rizz",
                            "definition": "Charisma, especially [flirting] skill. Charisma charisma.",
                        }
                    ]
                },
            )

        async with mock_client(handler) as client:
            terms = await UrbanDictionaryLookup(http_client=client).lookup("rizz")

        assert terms == ["rizz", "flirting", "charisma", "especially", "skill"]

    @pytest.mark.asyncio
    async def test_no_entries(self):
        async with mock_client(lambda request: httpx.Response(200, json={"list": []})) as client:
            assert await UrbanDictionaryLookup(http_client=client).lookup("zzz") == []

    @pytest.mark.asyncio
    async def test_http_error_propagates(self):
        async with mock_client(lambda request: httpx.Response(503)) as client:
            with pytest.raises(HTTPClientError):
                await UrbanDictionaryLookup(http_client=client).lookup("rizz")

    def test_satisfies_protocol(self):
        assert isinstance(UrbanDictionaryLookup(), TermLookup)


class TestWikipediaLookup:
    """Tests for WikipediaLookup."""

    @pytest.mark.asyncio
    async def test_lookup(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/rest_v1/page/summary/United_Nations"
            return httpx.Response(
                200,
                json={
                    "type": "standard",
                    "title": "United Nations",
                    "extract": (
                        "The United Nations is an intergovernmental organization. "
                        "The organization maintains peace."
                    ),
                },
            )

        async with mock_client(handler) as client:
            terms = await WikipediaLookup(http_client=client).lookup("United Nations")

        assert terms[0] == "united nations"
        assert terms[1] == "organization"
        assert "intergovernmental" in terms

    @pytest.mark.asyncio
    async def test_disambiguation_ignored(self):
        response = {"type": "disambiguation", "title": "Mercury", "extract": "Mercury may refer to"}

        async with mock_client(lambda request: httpx.Response(200, json=response)) as client:
            assert await WikipediaLookup(http_client=client).lookup("Mercury") == []

    @pytest.mark.asyncio
    async def test_missing_page(self):
        async with mock_client(lambda request: httpx.Response(404, json={})) as client:
            with pytest.raises(HTTPClientError) as exc_info:
                await WikipediaLookup(http_client=client).lookup("Nonexistent Page")

        assert exc_info.value.status_code == 404


class TestWordnikLookup:
    """Tests for WordnikLookup."""

    @pytest.mark.asyncio
    async def test_lookup(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path.endswith("/rapid/relatedWords")
            assert request.url.params["api_key"] == "test-key"
            return httpx.Response(
                200,
                json=[
                    {"relationshipType": "synonym", "words": ["Fast", "quick", "rapid"]},
                    {"relationshipType": "equivalent", "words": ["quick", "speedy"]},
                ],
            )

        async with mock_client(handler) as client:
            lookup = WordnikLookup(http_client=client, api_key="test-key")
            terms = await lookup.lookup("rapid")

        assert lookup.is_configured
        assert terms == ["fast", "quick", "speedy"]

    @pytest.mark.asyncio
    async def test_requires_api_key(self):
        lookup = WordnikLookup(api_key="")

        assert not lookup.is_configured
        with pytest.raises(RuntimeError):
            await lookup.lookup("rapid")

    def test_key_from_settings(self, monkeypatch):
        from yt_index.config.settings import get_settings

        monkeypatch.setenv("WORDNIK_API_KEY", "from-env")
        get_settings.cache_clear()

        assert WordnikLookup().is_configured


class TestGoogleKnowledgeLookup:
    """Tests for GoogleKnowledgeLookup."""

    @pytest.mark.asyncio
    async def test_lookup(self):
        client = MagicMock()
        client.is_configured = True
        client.search = AsyncMock(
            return_value=[KnowledgeGraphEntity(name="Python", description="Programming language")]
        )

        lookup = GoogleKnowledgeLookup(client=client)
        terms = await lookup.lookup("python")

        assert lookup.is_configured
        assert terms == ["python", "programming", "language"]
        client.search.assert_awaited_once_with("python")

    def test_unconfigured(self):
        assert not GoogleKnowledgeLookup().is_configured


class TestApiLookup:
    """Tests for ApiLookup."""

    @pytest.mark.asyncio
    async def test_list_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["q"] == "react"
            assert request.headers["X-Token"] == "secret"
            return httpx.Response(200, json=["hooks", "", "jsx", 42])

        source = ApiSource(url="https://terms.example.com/related", headers={"X-Token": "secret"})
        async with mock_client(handler) as client:
            terms = await ApiLookup(source, http_client=client).lookup("react")

        assert terms == ["hooks", "jsx"]

    @pytest.mark.asyncio
    async def test_object_response(self):
        source = ApiSource(url="https://terms.example.com/related", terms_field="words")
        response = {"words": ["hooks"]}

        async with mock_client(lambda request: httpx.Response(200, json=response)) as client:
            assert await ApiLookup(source, http_client=client).lookup("react") == ["hooks"]

    @pytest.mark.asyncio
    async def test_unexpected_shape(self):
        source = ApiSource(url="https://terms.example.com/related")

        async with mock_client(lambda request: httpx.Response(200, json={"terms": "hooks"})) as client:
            assert await ApiLookup(source, http_client=client).lookup("react") == []

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        source = ApiSource(url="https://terms.example.com/related")

        async with mock_client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(HTTPClientError):
                await ApiLookup(source, http_client=client).lookup("react")
