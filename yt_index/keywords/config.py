"""Configuration for the keywords service.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other service configs in the project.
Scoring weights are tunable here rather than fixed in the algorithms.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

KeywordMethod = Literal["ner", "general", "dictionary", "knowledge_graph"]


class KeywordsConfig(BaseSettings):
    """
    Configuration for the Keyword Extraction service.

    All settings can be overridden via environment variables with KEYWORDS_ prefix.
    Example: KEYWORDS_TOP_N=25

    General keyword score:
        min(tf * frequency_scale, 1) * frequency_weight
        + min(len / length_norm, 1) * length_weight
        + technical_bonus   (technical-term substring match)
        + domain_bonus      (domain-term substring match)
        + sum(dictionary weight * dictionary_boost) over matching dictionaries
    capped at 1.0.
    """

    model_config = SettingsConfigDict(
        env_prefix="KEYWORDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Long input handling
    max_transcript_length: int = Field(
        default=10000,
        ge=100,
        description="Transcripts longer than this are sampled before analysis.",
    )
    sampling_strategy: Literal["prefix", "sentences"] = Field(
        default="sentences",
        description="prefix keeps the start; sentences samples chunks across the document.",
    )
    chunk_size: int = Field(
        default=1000,
        ge=100,
        le=10000,
        description="Chunk size in characters for long-input sampling (NER chunks use NER_CHUNK_SIZE).",
    )
    max_sampled_chunks: int = Field(
        default=10,
        ge=2,
        le=100,
        description="Maximum chunks kept by sentence sampling.",
    )
    truncation_window: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Fraction of the cut searched backwards for a sentence end.",
    )

    # Stage toggles
    enable_ner: bool = True
    enable_general: bool = True
    enable_dictionary: bool = True
    enable_knowledge_graph: bool = True

    # General extraction
    min_word_length: int = Field(default=4, ge=1, le=20)
    frequency_scale: float = Field(default=10.0, gt=0.0)
    frequency_weight: float = Field(default=0.5, ge=0.0, le=1.0)
    length_weight: float = Field(default=0.2, ge=0.0, le=1.0)
    length_norm: float = Field(default=10.0, gt=0.0)
    technical_bonus: float = Field(default=0.3, ge=0.0, le=1.0)
    domain_bonus: float = Field(default=0.15, ge=0.0, le=1.0)
    dictionary_boost: float = Field(default=0.1, ge=0.0, le=1.0)
    min_general_score: float = Field(default=0.05, ge=0.0, lt=1.0)
    top_n: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Maximum general keywords kept per transcript.",
    )

    # NER
    ner_confidence_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Entities below this confidence are discarded.",
    )
    ner_dictionary_boost: float = Field(default=0.1, ge=0.0, le=1.0)

    # Dictionary-direct extraction
    dictionary_length_weight: float = Field(default=0.3, ge=0.0, le=1.0)
    dictionary_weight_factor: float = Field(default=0.2, ge=0.0, le=1.0)

    # Merge
    merge_order: list[KeywordMethod] = Field(
        default=["ner", "general", "dictionary", "knowledge_graph"],
        description="Priority order for merging; earlier lists win ties.",
    )

    dynamic_sources: list[str] = Field(
        default_factory=list,
        description="Dynamic dictionary sources used when a call does not name any.",
    )

    @field_validator("merge_order")
    @classmethod
    def _unique_merge_order(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("merge_order must not contain duplicates")
        return value
