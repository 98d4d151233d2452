"""Merging and grouping of keyword lists from different extraction methods."""

from collections.abc import Sequence

from yt_index.keywords.extractors import strip_bio_prefix
from yt_index.keywords.schemas import Keyword


def _union(first: list[str], second: list[str]) -> list[str]:
    return first + [s for s in second if s not in first]


def merge_keywords(primary: Sequence[Keyword], secondary: Sequence[Keyword]) -> list[Keyword]:
    """
    Merge two keyword lists into one keyword per lowercase word.

    Primary entries are inserted first. A secondary entry replaces the word,
    entity and score only if its score is strictly greater. Sources are the
    ordered union of both. Input keywords are not modified.

    Returns:
        Merged keywords sorted by descending score.
    """
    merged: dict[str, Keyword] = {}

    for keyword in list(primary) + list(secondary):
        key = keyword.word.lower()
        existing = merged.get(key)
        if existing is None:
            merged[key] = Keyword(
                word=keyword.word,
                entity=keyword.entity,
                score=keyword.score,
                sources=list(keyword.sources),
            )
            continue

        sources = _union(existing.sources, keyword.sources)
        if keyword.score > existing.score:
            existing.word = keyword.word
            existing.entity = keyword.entity
            existing.score = keyword.score
        existing.sources = sources

    return sorted(merged.values(), key=lambda k: k.score, reverse=True)


def merge_keyword_lists(lists: Sequence[Sequence[Keyword]]) -> list[Keyword]:
    """
    Merge any number of keyword lists pairwise in priority order.

    Args:
        lists: Keyword lists, highest priority first.

    Returns:
        Merged keywords sorted by descending score.
    """
    merged: list[Keyword] = []
    for keywords in lists:
        merged = merge_keywords(merged, keywords)
    return merged


def group_keywords(keywords: Sequence[Keyword]) -> dict[str, list[Keyword]]:
    """Bucket keywords by category with BIO prefixes stripped, order preserved."""
    grouped: dict[str, list[Keyword]] = {}
    for keyword in keywords:
        grouped.setdefault(strip_bio_prefix(keyword.entity), []).append(keyword)
    return grouped
