"""
Long-transcript reduction.

Transcripts longer than the configured budget are reduced before the
expensive analysis stages, either by keeping a prefix or by sampling
sentence-aligned chunks evenly across the whole document (always keeping
the first and last chunk so the closing content is represented).
"""

import logging
import re

import numpy as np

logger = logging.getLogger(__name__)

SENTENCE_SPLIT_PATTERN = re.compile(r"(?<=[.!?])\s+")
SENTENCE_ENDINGS = ".!?"


def split_into_chunks(text: str, chunk_size: int) -> list[str]:
    """Split text into consecutive fixed-size character chunks."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    return [text[i : i + chunk_size] for i in range(0, len(text), chunk_size)]


def split_into_sentences(text: str) -> list[str]:
    """Split text after sentence-ending punctuation followed by whitespace."""
    return [s for s in SENTENCE_SPLIT_PATTERN.split(text.strip()) if s]


def pack_sentences(sentences: list[str], chunk_size: int) -> list[str]:
    """
    Accumulate sentences into chunks of at most chunk_size characters.

    A sentence longer than chunk_size is hard-split into fixed-size pieces.
    """
    chunks: list[str] = []
    current = ""
    for sentence in sentences:
        if len(sentence) > chunk_size:
            if current:
                chunks.append(current)
                current = ""
            chunks.extend(split_into_chunks(sentence, chunk_size))
            continue

        candidate = f"{current} {sentence}" if current else sentence
        if len(candidate) > chunk_size:
            chunks.append(current)
            current = sentence
        else:
            current = candidate

    if current:
        chunks.append(current)
    return chunks


def sample_chunks(chunks: list[str], max_chunks: int) -> list[str]:
    """
    Pick up to max_chunks chunks evenly spaced across the list.

    The first and last chunks are always included and original order is kept.
    """
    if len(chunks) <= max_chunks:
        return list(chunks)
    if max_chunks == 1:
        return [chunks[-1]]

    indices = np.linspace(0, len(chunks) - 1, num=max_chunks).round().astype(int)
    return [chunks[i] for i in sorted(set(indices.tolist()))]


def truncate_at_sentence_boundary(text: str, limit: int, window: float = 0.2) -> str:
    """
    Truncate text to at most limit characters.

    Prefers to cut just after the last sentence-ending mark found within the
    final ``window`` fraction of the cut; otherwise cuts at the limit.
    """
    if len(text) <= limit:
        return text

    cut = text[:limit]
    earliest = int(limit * (1 - window))
    last_end = max(cut.rfind(mark) for mark in SENTENCE_ENDINGS)
    if last_end >= earliest:
        return cut[: last_end + 1]
    return cut.rstrip()


def reduce_transcript(
    text: str,
    max_length: int,
    strategy: str = "sentences",
    chunk_size: int = 1000,
    max_chunks: int = 10,
    window: float = 0.2,
) -> str:
    """
    Reduce a transcript to at most max_length characters.

    Args:
        text: Transcript text.
        max_length: Character budget.
        strategy: "prefix" or "sentences".
        chunk_size: Chunk size for sentence packing.
        max_chunks: Maximum sampled chunks.
        window: Sentence-boundary search window for the final truncation.

    Returns:
        The text unchanged if within budget, else the reduced text.
    """
    if len(text) <= max_length:
        return text

    if strategy == "prefix":
        reduced = truncate_at_sentence_boundary(text, max_length, window)
    else:
        chunks = pack_sentences(split_into_sentences(text), chunk_size)
        sampled = sample_chunks(chunks, max_chunks)
        reduced = truncate_at_sentence_boundary(" ".join(sampled), max_length, window)

    logger.debug(
        f"Transcript reduced from {len(text)} to {len(reduced)} chars ({strategy})"
    )
    return reduced
