"""Pytest fixtures for yt-index tests."""

import threading
import time
from unittest.mock import MagicMock

import pytest

from yt_index.config.settings import Settings, get_settings
from yt_index.ner.schemas import RecognizedEntity

SAMPLE_TRANSCRIPTS = {
    "short": "Hello world, this is a test video about programming and software development.",
    "technical": (
        "In this tutorial, we'll cover React hooks, TypeScript, and modern web development "
        "practices. We'll use Node.js, Express, and MongoDB for the backend."
    ),
    "long": (
        "Welcome to our comprehensive guide on machine learning and artificial intelligence. "
        "Today we'll discuss neural networks, deep learning, computer vision, natural language "
        "processing, and data science. We'll cover Python programming, TensorFlow, PyTorch, "
        "scikit-learn, and various algorithms including supervised learning, unsupervised "
        "learning, and reinforcement learning."
    ),
    "mixed": (
        "The weather today is sunny with a temperature of 75 degrees. We're discussing climate "
        "change, global warming, and environmental sustainability. The United Nations has "
        "released a new report on carbon emissions."
    ),
    "simple": "Hello world. This is a test. How are you today?",
    "complex": (
        "Welcome to our tutorial. First, we'll cover the basics. Then, we'll move to advanced "
        "topics. Finally, we'll wrap up with a summary."
    ),
    "with_commas": (
        "In this video, we'll discuss programming, software development, and best practices. "
        "We'll cover React, TypeScript, and modern web development."
    ),
    "single_sentence": "This is a single sentence without punctuation",
    "multiple_punctuation": "Hello!!! How are you??? I'm fine... What about you?!",
}


class FakeRecognizer:
    """Deterministic recognizer returning canned entities for known words."""

    def __init__(self, entities: list[RecognizedEntity] | None = None, error: Exception | None = None):
        self.entities = entities or []
        self.error = error
        self.calls: list[str] = []

    async def recognize(self, text: str) -> list[RecognizedEntity]:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return [e for e in self.entities if e.word in text]


class FakeLookup:
    """Deterministic term lookup backed by a mapping."""

    def __init__(self, name: str, results: dict[str, list[str]] | None = None, error: Exception | None = None):
        self.name = name
        self.results = results or {}
        self.error = error
        self.queries: list[str] = []

    async def lookup(self, term: str) -> list[str]:
        self.queries.append(term)
        if self.error is not None:
            raise self.error
        return list(self.results.get(term.lower(), []))


class SlowModelLoader:
    """Stand-in for the transformers pipeline factory that takes a while to load."""

    def __init__(self, delay: float):
        self.delay = delay
        self.loads = 0
        self.active = 0
        self.max_active = 0
        self._lock = threading.Lock()

    def __call__(self, *args, **kwargs):
        with self._lock:
            self.loads += 1
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        time.sleep(self.delay)
        with self._lock:
            self.active -= 1
        model = MagicMock()
        model.return_value = []
        return model


@pytest.fixture
def sample_transcripts() -> dict[str, str]:
    """Sample transcripts covering common shapes."""
    return dict(SAMPLE_TRANSCRIPTS)


@pytest.fixture
def fake_recognizer_factory():
    """Build FakeRecognizer instances."""
    return FakeRecognizer


@pytest.fixture
def fake_lookup_factory():
    """Build FakeLookup instances."""
    return FakeLookup


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(environment="development", log_level="DEBUG")


@pytest.fixture(autouse=True)
def no_api_keys(monkeypatch):
    """Run every test without real API keys from the environment."""
    monkeypatch.setenv("GOOGLE_KNOWLEDGE_API_KEY", "")
    monkeypatch.setenv("WORDNIK_API_KEY", "")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def slow_model_loader_factory():
    """Build SlowModelLoader instances."""
    return SlowModelLoader
