"""Tests for NER configuration."""

import pytest
from pydantic import ValidationError

from yt_index.ner.config import NERConfig


class TestNERConfig:
    """Tests for NERConfig."""

    def test_defaults(self):
        config = NERConfig()

        assert config.model_name == "dslim/bert-base-NER"
        assert config.aggregation_strategy == "simple"
        assert config.device == "auto"
        assert config.chunk_size == 1000
        assert config.timeout_seconds == 30.0
        assert config.confidence_threshold == 0.5

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("NER_CHUNK_SIZE", "2000")
        monkeypatch.setenv("NER_DEVICE", "cpu")

        config = NERConfig()

        assert config.chunk_size == 2000
        assert config.device == "cpu"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("chunk_size", 50),
            ("chunk_size", 10000),
            ("timeout_seconds", 0),
            ("confidence_threshold", 1.5),
            ("aggregation_strategy", "bogus"),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            NERConfig(**{field: value})
