"""
Named Entity Recognition (NER) for transcript text.

This module wraps a pretrained token-classification model behind the narrow
EntityRecognizer interface so that keyword scoring can be exercised with
deterministic fakes.

Components:
- NERConfig: Configuration for the NER service
- RecognizedEntity: Dataclass representing one recognized entity
- EntityRecognizer: Protocol for anything that recognizes entities in text
- NERService: transformers-backed recognizer
"""

from yt_index.ner.config import NERConfig
from yt_index.ner.schemas import EntityRecognizer, RecognizedEntity
from yt_index.ner.service import NERService

__all__ = [
    "NERConfig",
    "EntityRecognizer",
    "RecognizedEntity",
    "NERService",
]
