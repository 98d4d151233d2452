"""Tests for long-transcript reduction."""

import pytest

from yt_index.keywords.sampling import (
    pack_sentences,
    reduce_transcript,
    sample_chunks,
    split_into_chunks,
    split_into_sentences,
    truncate_at_sentence_boundary,
)


def _long_transcript(sentences: int = 300) -> str:
    return " ".join(f"Sentence number {i} is here." for i in range(sentences))


class TestChunking:
    """Tests for chunk and sentence splitting."""

    def test_split_into_chunks(self):
        assert split_into_chunks("abcdefg", 3) == ["abc", "def", "g"]

    def test_split_into_chunks_empty(self):
        assert split_into_chunks("", 3) == []

    def test_split_into_chunks_invalid_size(self):
        with pytest.raises(ValueError):
            split_into_chunks("abc", 0)

    def test_split_into_sentences(self):
        assert split_into_sentences("One. Two! Three? Four") == ["One.", "Two!", "Three?", "Four"]

    def test_pack_sentences(self):
        chunks = pack_sentences(["aaaa.", "bbbb.", "cccc."], 11)

        assert chunks == ["aaaa. bbbb.", "cccc."]

    def test_pack_oversized_sentence_hard_split(self):
        chunks = pack_sentences(["short.", "x" * 25], 10)

        assert chunks == ["short.", "x" * 10, "x" * 10, "x" * 5]


class TestSampleChunks:
    """Tests for evenly spaced chunk sampling."""

    def test_keeps_all_when_under_limit(self):
        chunks = ["a", "b", "c"]

        assert sample_chunks(chunks, 5) == chunks

    def test_includes_first_and_last(self):
        chunks = [f"chunk{i}" for i in range(20)]
        sampled = sample_chunks(chunks, 5)

        assert len(sampled) == 5
        assert sampled[0] == "chunk0"
        assert sampled[-1] == "chunk19"

    def test_preserves_order(self):
        chunks = [f"chunk{i:02d}" for i in range(50)]
        sampled = sample_chunks(chunks, 7)

        assert sampled == sorted(sampled)


class TestTruncation:
    """Tests for sentence-boundary truncation."""

    def test_short_text_unchanged(self):
        assert truncate_at_sentence_boundary("Short text.", 100) == "Short text."

    def test_cuts_at_sentence_end_within_window(self):
        text = "a" * 85 + ". " + "b" * 50
        result = truncate_at_sentence_boundary(text, 100, window=0.2)

        assert result == "a" * 85 + "."

    def test_hard_cut_when_no_sentence_end_in_window(self):
        text = "a. " + "b" * 200
        result = truncate_at_sentence_boundary(text, 100, window=0.2)

        assert len(result) == 100
        assert result.endswith("b")


class TestReduceTranscript:
    """Tests for reduce_transcript strategies."""

    def test_under_budget_unchanged(self):
        text = "A short transcript."

        assert reduce_transcript(text, max_length=1000) == text

    def test_sentence_sampling_covers_start_and_end(self):
        text = _long_transcript()
        reduced = reduce_transcript(
            text, max_length=1000, strategy="sentences", chunk_size=200, max_chunks=4
        )

        assert len(reduced) <= 1000
        assert reduced.startswith("Sentence number 0 is here.")
        assert reduced.endswith("Sentence number 299 is here.")

    def test_sentence_sampling_truncates_to_budget(self):
        text = _long_transcript()
        reduced = reduce_transcript(
            text, max_length=500, strategy="sentences", chunk_size=400, max_chunks=10
        )

        assert len(reduced) <= 500
        assert reduced.endswith(".")

    def test_prefix_strategy(self):
        text = _long_transcript()
        reduced = reduce_transcript(text, max_length=1000, strategy="prefix")

        assert len(reduced) <= 1000
        assert text.startswith(reduced)
        assert reduced.endswith(".")
