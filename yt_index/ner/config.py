"""Configuration for the NER service.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other service configs in the project.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NERConfig(BaseSettings):
    """
    Configuration for the Named Entity Recognition service.

    All settings can be overridden via environment variables with NER_ prefix.
    Example: NER_MODEL_NAME=dslim/bert-large-NER

    Attributes:
        model_name: HuggingFace token-classification model. Any model emitting
            BIO tags (B-PER, I-ORG, ...) or grouped tags (PER, ORG, ...) works.
        aggregation_strategy: transformers aggregation strategy. "none" keeps
            raw BIO-tagged tokens, "simple" groups word pieces into entities.
        chunk_size: Characters per chunk sent to the model.
        confidence_threshold: Minimum confidence score for entity inclusion.
        timeout_seconds: Time box for recognizing a single chunk.
        device: Device for inference ("auto", "cpu", "cuda", "mps").
    """

    model_config = SettingsConfigDict(
        env_prefix="NER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Model configuration
    model_name: str = Field(
        default="dslim/bert-base-NER",
        description="HuggingFace model name for token classification.",
    )
    aggregation_strategy: Literal["none", "simple", "first", "average", "max"] = Field(
        default="simple",
        description="How the pipeline merges sub-word tokens into entities.",
    )
    device: str = Field(
        default="auto",
        description="Device for inference (auto, cpu, cuda, mps).",
    )

    # Chunking configuration
    chunk_size: int = Field(
        default=1000,
        ge=100,
        le=5000,
        description="Characters per chunk sent to the model.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        le=300.0,
        description="Maximum seconds to wait for one chunk before giving up on it.",
    )

    # Quality configuration
    confidence_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Minimum confidence score for including an entity.",
    )
