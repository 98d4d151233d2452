"""Tests for NER service."""

import asyncio
import threading
from unittest.mock import MagicMock, patch

import pytest

from yt_index.ner.config import NERConfig
from yt_index.ner.service import NERService


@pytest.fixture
def ner_config():
    """NER config pinned to CPU."""
    return NERConfig(device="cpu", confidence_threshold=0.5)


@pytest.fixture
def mock_pipeline():
    """Patch the transformers pipeline factory."""
    with patch("yt_index.ner.service.pipeline") as factory:
        model = MagicMock()
        model.return_value = []
        factory.return_value = model
        yield factory


class TestNERServiceInitialization:
    """Tests for NERService initialization."""

    def test_lazy_initialization(self, ner_config, mock_pipeline):
        """Model should not be loaded until first recognize call."""
        service = NERService(config=ner_config)

        assert not service.is_initialized
        mock_pipeline.assert_not_called()

    def test_initialization_on_recognize(self, ner_config, mock_pipeline):
        service = NERService(config=ner_config)
        service.recognize_sync("Test text")

        assert service.is_initialized
        mock_pipeline.assert_called_once()
        kwargs = mock_pipeline.call_args.kwargs
        assert kwargs["model"] == "dslim/bert-base-NER"
        assert kwargs["aggregation_strategy"] == "simple"
        assert str(kwargs["device"]) == "cpu"

    def test_model_load_failure_degrades(self, ner_config, mock_pipeline):
        mock_pipeline.side_effect = OSError("model not found")
        service = NERService(config=ner_config)

        assert service.recognize_sync("Tim Cook") == []
        assert not service.is_available
        assert service.recognize_sync("Tim Cook") == []
        mock_pipeline.assert_called_once()

    def test_empty_text_skips_model(self, ner_config, mock_pipeline):
        service = NERService(config=ner_config)

        assert service.recognize_sync("   ") == []
        mock_pipeline.assert_not_called()


class TestRecognition:
    """Tests for entity recognition output handling."""

    def test_threshold_filtering(self, ner_config, mock_pipeline):
        mock_pipeline.return_value.return_value = [
            {"entity_group": "PER", "word": "Tim Cook", "score": 0.99},
            {"entity_group": "ORG", "word": "Foo", "score": 0.3},
        ]
        service = NERService(config=ner_config)

        entities = service.recognize_sync("Tim Cook and Foo")

        assert [e.word for e in entities] == ["Tim Cook"]
        assert entities[0].entity == "PER"

    def test_subword_pieces_merged(self, ner_config, mock_pipeline):
        mock_pipeline.return_value.return_value = [
            {"entity": "B-ORG", "word": "Mongo", "score": 0.9},
            {"entity": "I-ORG", "word": "##DB", "score": 0.8},
        ]
        service = NERService(config=ner_config)

        entities = service.recognize_sync("MongoDB")

        assert len(entities) == 1
        assert entities[0].word == "MongoDB"
        assert entities[0].entity == "B-ORG"
        assert entities[0].score == pytest.approx(0.8)

    @pytest.mark.asyncio
    async def test_recognize_async(self, ner_config, mock_pipeline):
        mock_pipeline.return_value.return_value = [
            {"entity_group": "LOC", "word": "Paris", "score": 0.95},
        ]
        service = NERService(config=ner_config)

        entities = await service.recognize("Paris")

        assert [e.word for e in entities] == ["Paris"]


class TestConcurrentLoading:
    """Tests for the lazy model load under concurrent callers."""

    def test_threads_share_one_load(self, ner_config, slow_model_loader_factory):
        loader = slow_model_loader_factory(delay=0.2)
        service = NERService(config=ner_config)

        with patch("yt_index.ner.service.pipeline", loader):
            threads = [
                threading.Thread(target=service.recognize_sync, args=("Tim Cook",))
                for _ in range(5)
            ]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert loader.loads == 1
        assert loader.max_active == 1
        assert service.is_initialized

    @pytest.mark.asyncio
    async def test_timed_out_calls_do_not_reload(self, ner_config, slow_model_loader_factory):
        loader = slow_model_loader_factory(delay=0.3)
        service = NERService(config=ner_config)

        with patch("yt_index.ner.service.pipeline", loader):
            for _ in range(5):
                with pytest.raises(asyncio.TimeoutError):
                    await asyncio.wait_for(service.recognize("Tim Cook"), timeout=0.02)
            for _ in range(100):
                if service.is_initialized:
                    break
                await asyncio.sleep(0.02)

        assert loader.loads == 1
        assert loader.max_active == 1

    def test_failed_load_not_retried_by_waiters(self, ner_config, mock_pipeline):
        mock_pipeline.side_effect = RuntimeError("no model")
        service = NERService(config=ner_config)

        threads = [
            threading.Thread(target=service.recognize_sync, args=("Tim Cook",))
            for _ in range(3)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        mock_pipeline.assert_called_once()
        assert not service.is_available


class TestDeviceDetection:
    """Tests for device selection."""

    def test_explicit_device(self):
        service = NERService(config=NERConfig(device="cpu"))

        assert str(service._detect_device()) == "cpu"

    def test_auto_falls_back_to_cpu(self):
        service = NERService(config=NERConfig(device="auto"))

        with patch("yt_index.ner.service.torch.cuda.is_available", return_value=False), patch(
            "yt_index.ner.service.torch.backends.mps.is_available", return_value=False
        ):
            assert str(service._detect_device()) == "cpu"

    def test_auto_prefers_cuda(self):
        service = NERService(config=NERConfig(device="auto"))

        with patch("yt_index.ner.service.torch.cuda.is_available", return_value=True):
            assert service._detect_device().type == "cuda"
