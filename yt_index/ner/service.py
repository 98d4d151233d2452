"""
NER Service for transcript entity recognition.

Provides named entity recognition using a pretrained HuggingFace
token-classification model (BERT fine-tuned on CoNLL-03 by default).

Architecture:
- Lazy model loading (pipeline loaded on first recognize() call)
- Inference runs in a worker thread so callers can time-box it
- Graceful degradation (returns empty list when the model is unavailable)
- Configurable via environment variables (NER_*)
"""

import asyncio
import logging
import threading
from typing import Any

import torch
from transformers import pipeline

from yt_index.ner.config import NERConfig
from yt_index.ner.schemas import RecognizedEntity

logger = logging.getLogger(__name__)

# WordPiece continuation prefix emitted when aggregation is disabled
SUBWORD_PREFIX = "##"


class NERService:
    """
    Named Entity Recognition service backed by a transformers pipeline.

    Satisfies the EntityRecognizer protocol.

    Usage:
        >>> service = NERService()
        >>> entities = await service.recognize("Tim Cook spoke at Apple Park in Cupertino.")
        >>> for e in entities:
        ...     print(f"{e.entity}: {e.word} ({e.score:.2f})")
        PER: Tim Cook (1.00)
        LOC: Apple Park (0.98)
        LOC: Cupertino (1.00)

    Note:
        The model is loaded lazily on first recognize() call to avoid
        memory overhead when entity recognition is disabled.
    """

    def __init__(self, config: NERConfig | None = None):
        """
        Initialize NER service.

        Args:
            config: NER configuration. If None, uses default config.
        """
        self.config = config or NERConfig()
        self._pipeline: Any = None
        self._device: torch.device | None = None
        self._initialized = False
        self._unavailable = False
        self._init_lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        """Check if the model pipeline is loaded."""
        return self._initialized

    @property
    def is_available(self) -> bool:
        """False once loading the model has failed."""
        return not self._unavailable

    def _detect_device(self) -> torch.device:
        """Detect the best available device for inference."""
        if self._device is not None:
            return self._device

        if self.config.device != "auto":
            self._device = torch.device(self.config.device)
        elif torch.cuda.is_available():
            self._device = torch.device("cuda")
        elif torch.backends.mps.is_available():
            self._device = torch.device("mps")
        else:
            self._device = torch.device("cpu")

        logger.info(f"Using {self._device} device for NER")
        return self._device

    def _initialize(self) -> None:
        """
        Load the token-classification pipeline.

        This is called lazily on first recognize() call. Worker threads left
        running by a timed-out chunk wait on the lock instead of starting a
        second load.
        """
        if self._initialized:
            return

        with self._init_lock:
            if self._initialized or self._unavailable:
                return

            logger.info(f"Loading NER model: {self.config.model_name}")
            try:
                self._pipeline = pipeline(
                    "ner",
                    model=self.config.model_name,
                    aggregation_strategy=self.config.aggregation_strategy,
                    device=self._detect_device(),
                )
            except (OSError, ValueError, RuntimeError, ImportError):
                self._unavailable = True
                raise
            self._initialized = True
            logger.info("NER service initialized")

    def recognize_sync(self, text: str) -> list[RecognizedEntity]:
        """
        Recognize entities in text (synchronous).

        Args:
            text: Text chunk to analyze.

        Returns:
            Entities with confidence at or above the configured threshold.
        """
        if not text or not text.strip() or self._unavailable:
            return []

        if not self._initialized:
            try:
                self._initialize()
            except (OSError, ValueError, RuntimeError, ImportError) as e:
                logger.warning(f"NER model unavailable, entity recognition disabled: {e}")
                return []
            if self._unavailable:
                return []

        raw_results = self._pipeline(text)
        entities = self._merge_subwords(
            [RecognizedEntity.from_dict(item) for item in raw_results]
        )

        return [
            e for e in entities if e.score >= self.config.confidence_threshold
        ]

    async def recognize(self, text: str) -> list[RecognizedEntity]:
        """
        Recognize entities in text (async wrapper).

        Inference is CPU-bound, so it is pushed to a worker thread; this
        keeps the event loop free and lets callers apply asyncio timeouts.

        Args:
            text: Text chunk to analyze.

        Returns:
            List of RecognizedEntity objects.
        """
        return await asyncio.to_thread(self.recognize_sync, text)

    def _merge_subwords(self, entities: list[RecognizedEntity]) -> list[RecognizedEntity]:
        """
        Glue "##" word pieces onto the preceding token.

        Only relevant with aggregation_strategy="none"; the merged token keeps
        the lower of the two confidences.
        """
        merged: list[RecognizedEntity] = []
        for entity in entities:
            if entity.word.startswith(SUBWORD_PREFIX) and merged:
                previous = merged[-1]
                previous.word += entity.word[len(SUBWORD_PREFIX):]
                previous.score = min(previous.score, entity.score)
                continue
            merged.append(entity)
        return merged
