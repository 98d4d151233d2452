"""Candidate-term extraction from transcripts and lookup responses.

Dynamic dictionaries and the knowledge-graph stage never send the whole
transcript to an external API; they query a small, bounded list of
candidate terms derived from it. Related terms mined from returned
definitions/descriptions go through the same length and pattern filters.
"""

import re
from collections import Counter

from yt_index.config.vocabulary import is_stop_word

WORD_PATTERN = re.compile(r"[A-Za-z][A-Za-z'\-]*[A-Za-z]")
PROPER_NOUN_PATTERN = re.compile(r"\b[A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+)*\b")
RELATED_TERM_PATTERN = re.compile(r"^[a-z][a-z\-]{2,28}[a-z]$")
BRACKETED_TERM_PATTERN = re.compile(r"\[([^\[\]]{2,40})\]")


def _rank(items: list[str]) -> list[str]:
    """Order unique items by frequency, ties broken by first occurrence."""
    counts = Counter(items)
    first_seen = {item: i for i, item in reversed(list(enumerate(items)))}
    return sorted(counts, key=lambda item: (-counts[item], first_seen[item]))


def extract_candidate_terms(
    transcript: str,
    limit: int,
    min_length: int = 4,
    proper_nouns_only: bool = False,
) -> list[str]:
    """
    Extract a bounded list of lookup candidates from a transcript.

    Args:
        transcript: Transcript text.
        limit: Maximum number of candidates returned.
        min_length: Minimum candidate length.
        proper_nouns_only: Only return capitalized (proper-noun-shaped)
            phrases, case preserved. Otherwise return lowercase words.

    Returns:
        Candidates ordered by frequency, then first occurrence.
    """
    if not transcript or limit <= 0:
        return []

    if proper_nouns_only:
        phrases = []
        for match in PROPER_NOUN_PATTERN.finditer(transcript):
            words = match.group(0).split()
            # Drop sentence-initial stop words ("The Louvre" -> "Louvre")
            while words and is_stop_word(words[0]):
                words.pop(0)
            phrase = " ".join(words)
            if len(phrase) >= min_length:
                phrases.append(phrase)
        return _rank(phrases)[:limit]

    words = [
        word.lower()
        for word in WORD_PATTERN.findall(transcript)
        if len(word) >= min_length and not is_stop_word(word)
    ]
    return _rank(words)[:limit]


def extract_entity_candidates(
    transcript: str,
    limit: int,
    min_frequent_length: int = 6,
) -> list[str]:
    """
    Extract knowledge-graph candidates: proper-noun phrases first, then
    long words that occur at least twice.
    """
    candidates = extract_candidate_terms(
        transcript, limit=limit, min_length=3, proper_nouns_only=True
    )
    if len(candidates) >= limit:
        return candidates

    seen = {c.lower() for c in candidates}
    words = [
        word.lower()
        for word in WORD_PATTERN.findall(transcript)
        if len(word) >= min_frequent_length and not is_stop_word(word)
    ]
    counts = Counter(words)
    for word in _rank(words):
        if len(candidates) >= limit:
            break
        if counts[word] >= 2 and word not in seen:
            candidates.append(word)
            seen.add(word)
    return candidates


def mine_related_terms(
    text: str,
    limit: int,
    exclude: set[str] | None = None,
) -> list[str]:
    """
    Mine related terms from a definition or description.

    Bracketed phrases (Urban Dictionary cross-references) are taken first,
    then frequent plain words. Every term is lowercase, 4-30 characters,
    alphabetic (hyphens allowed) and not a stop word.

    Args:
        text: Definition/description text.
        limit: Maximum number of terms returned.
        exclude: Terms to skip (e.g. the query itself).

    Returns:
        Unique related terms.
    """
    if not text or limit <= 0:
        return []

    exclude = {e.lower() for e in (exclude or set())}
    related: list[str] = []

    def _accept(term: str) -> None:
        term = term.strip().lower()
        if (
            term not in exclude
            and term not in related
            and RELATED_TERM_PATTERN.match(term)
            and not is_stop_word(term)
        ):
            related.append(term)

    for match in BRACKETED_TERM_PATTERN.finditer(text):
        _accept(match.group(1))
        if len(related) >= limit:
            return related

    words = [w.lower() for w in WORD_PATTERN.findall(text) if len(w) >= 4]
    for word in _rank(words):
        _accept(word)
        if len(related) >= limit:
            break

    return related
