"""
Keyword extraction methods.

Each function turns its input into a list of Keyword objects with scores in
(0, 1]:

- entities_to_keywords: recognized named entities, dictionary-boosted
- extract_general_keywords: frequency/length heuristics with curated
  technical and domain bonuses
- extract_dictionary_keywords: dictionary terms found in the transcript
- knowledge_graph_keywords: knowledge-graph matches
"""

import re
from collections import Counter
from collections.abc import Iterable, Sequence

from yt_index.config.vocabulary import (
    is_stop_word,
    matches_domain_term,
    matches_technical_term,
)
from yt_index.dictionaries.schemas import Dictionary
from yt_index.keywords.config import KeywordsConfig
from yt_index.keywords.schemas import Keyword
from yt_index.knowledge_graph.schemas import KnowledgeGraphMatch
from yt_index.ner.schemas import RecognizedEntity

PUNCTUATION_PATTERN = re.compile(r"[^\w\s]")
BIO_PREFIX_PATTERN = re.compile(r"^[BI]-")

# Model tag -> keyword category
ENTITY_CATEGORIES = {
    "PER": "PERSON",
    "PERSON": "PERSON",
    "ORG": "ORG",
    "LOC": "LOCATION",
    "LOCATION": "LOCATION",
    "MISC": "MISC",
}
UNMAPPED_CATEGORY = "ENTITY"
GENERAL_CATEGORY = "KEYWORD"
DICTIONARY_CATEGORY = "DICTIONARY"


def strip_bio_prefix(tag: str) -> str:
    """Remove a leading B-/I- prefix ("B-PERSON" -> "PERSON")."""
    return BIO_PREFIX_PATTERN.sub("", tag)


def map_entity_tag(tag: str) -> str:
    """
    Map a model tag to a keyword category, keeping any BIO prefix.

    "B-PER" -> "B-PERSON", "LOC" -> "LOCATION", "B-FOO" -> "B-ENTITY".
    """
    match = BIO_PREFIX_PATTERN.match(tag)
    prefix = match.group(0) if match else ""
    core = tag[len(prefix):].upper()
    return prefix + ENTITY_CATEGORIES.get(core, UNMAPPED_CATEGORY)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _dictionary_matches(word: str, dictionaries: Sequence[Dictionary]) -> list[Dictionary]:
    return [d for d in dictionaries if d.contains(word)]


def entities_to_keywords(
    entities: Iterable[RecognizedEntity],
    dictionaries: Sequence[Dictionary] = (),
    config: KeywordsConfig | None = None,
) -> list[Keyword]:
    """
    Convert recognized entities to keywords.

    Entities below the confidence threshold are dropped. Scores get an
    additive boost of ``weight * ner_dictionary_boost`` per matching
    dictionary, capped at 1.0. Duplicates by (lowercase word, category)
    keep the higher score.
    """
    config = config or KeywordsConfig()
    best: dict[tuple[str, str], Keyword] = {}

    for entity in entities:
        word = entity.word.strip()
        if not word or entity.score < config.ner_confidence_threshold:
            continue

        category = map_entity_tag(entity.entity)
        matching = _dictionary_matches(word, dictionaries)
        score = entity.score + sum(d.weight * config.ner_dictionary_boost for d in matching)
        score = min(score, 1.0)
        if score <= 0:
            continue

        key = (word.lower(), strip_bio_prefix(category))
        existing = best.get(key)
        if existing is None or score > existing.score:
            best[key] = Keyword(
                word=word,
                entity=category,
                score=score,
                sources=["ner"] + [d.name for d in matching],
            )

    return list(best.values())


def extract_general_keywords(
    text: str,
    dictionaries: Sequence[Dictionary] = (),
    config: KeywordsConfig | None = None,
) -> list[Keyword]:
    """
    Extract keywords by frequency and length heuristics.

    Args:
        text: Transcript text.
        dictionaries: Loaded dictionaries used for the boost term.
        config: Keywords configuration. If None, uses default config.

    Returns:
        Up to top_n capitalized keywords tagged KEYWORD, by descending score.
    """
    config = config or KeywordsConfig()
    words = PUNCTUATION_PATTERN.sub(" ", text.lower()).split()
    if not words:
        return []

    total = len(words)
    counts = Counter(
        w
        for w in words
        if len(w) >= config.min_word_length and not w.isdigit() and not is_stop_word(w)
    )

    keywords: list[Keyword] = []
    for word, count in counts.items():
        frequency = count / total
        score = (
            min(frequency * config.frequency_scale, 1.0) * config.frequency_weight
            + min(len(word) / config.length_norm, 1.0) * config.length_weight
        )
        if matches_technical_term(word):
            score += config.technical_bonus
        if matches_domain_term(word):
            score += config.domain_bonus

        matching = _dictionary_matches(word, dictionaries)
        score += sum(d.weight * config.dictionary_boost for d in matching)
        score = min(score, 1.0)

        if score > config.min_general_score:
            keywords.append(
                Keyword(
                    word=_capitalize(word),
                    entity=GENERAL_CATEGORY,
                    score=score,
                    sources=["general"] + [d.name for d in matching],
                )
            )

    keywords.sort(key=lambda k: k.score, reverse=True)
    return keywords[: config.top_n]


def extract_dictionary_keywords(
    text: str,
    dictionaries: Sequence[Dictionary],
    config: KeywordsConfig | None = None,
) -> list[Keyword]:
    """
    Emit a DICTIONARY keyword for every dictionary term found in the text.

    Score is ``dictionary_length_weight * min(len(term) / 10, 1)
    + dictionary_weight_factor * weight``, capped at 1.0.
    """
    config = config or KeywordsConfig()
    haystack = text.lower()
    keywords: list[Keyword] = []

    for dictionary in dictionaries:
        for term in sorted(dictionary.terms):
            if term not in haystack:
                continue
            score = min(
                config.dictionary_length_weight * min(len(term) / 10, 1.0)
                + config.dictionary_weight_factor * dictionary.weight,
                1.0,
            )
            if score > 0:
                keywords.append(
                    Keyword(
                        word=_capitalize(term),
                        entity=DICTIONARY_CATEGORY,
                        score=score,
                        sources=[dictionary.name],
                    )
                )

    return keywords


def knowledge_graph_keywords(matches: Iterable[KnowledgeGraphMatch]) -> list[Keyword]:
    """Convert knowledge-graph matches to keywords."""
    return [
        Keyword(
            word=match.entity.name,
            entity=match.category,
            score=match.score,
            sources=["google_knowledge"],
        )
        for match in matches
        if match.score > 0
    ]
