"""Tests for the individual keyword extraction methods."""

import pytest

from yt_index.dictionaries.schemas import Dictionary
from yt_index.keywords.config import KeywordsConfig
from yt_index.keywords.extractors import (
    entities_to_keywords,
    extract_dictionary_keywords,
    extract_general_keywords,
    knowledge_graph_keywords,
    map_entity_tag,
    strip_bio_prefix,
)
from yt_index.knowledge_graph.schemas import KnowledgeGraphEntity, KnowledgeGraphMatch
from yt_index.ner.schemas import RecognizedEntity


class TestEntityTags:
    """Tests for tag mapping and BIO prefix handling."""

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("B-PER", "B-PERSON"),
            ("I-PER", "I-PERSON"),
            ("B-ORG", "B-ORG"),
            ("I-LOC", "I-LOCATION"),
            ("B-MISC", "B-MISC"),
            ("PER", "PERSON"),
            ("LOC", "LOCATION"),
            ("B-DATE", "B-ENTITY"),
            ("WEIRD", "ENTITY"),
        ],
    )
    def test_map_entity_tag(self, tag, expected):
        assert map_entity_tag(tag) == expected

    @pytest.mark.parametrize(
        "tag,expected",
        [("B-PERSON", "PERSON"), ("I-ORG", "ORG"), ("KEYWORD", "KEYWORD"), ("BI-X", "BI-X")],
    )
    def test_strip_bio_prefix(self, tag, expected):
        assert strip_bio_prefix(tag) == expected


class TestEntitiesToKeywords:
    """Tests for converting recognized entities."""

    def test_below_threshold_dropped(self):
        entities = [
            RecognizedEntity(word="Paris", entity="B-LOC", score=0.9),
            RecognizedEntity(word="Maybe", entity="B-ORG", score=0.2),
        ]
        keywords = entities_to_keywords(entities)

        assert [k.word for k in keywords] == ["Paris"]
        assert keywords[0].entity == "B-LOCATION"
        assert keywords[0].sources == ["ner"]

    def test_dedup_by_word_and_category_keeps_higher(self):
        entities = [
            RecognizedEntity(word="Paris", entity="B-LOC", score=0.7),
            RecognizedEntity(word="paris", entity="I-LOC", score=0.95),
            RecognizedEntity(word="Paris", entity="B-PER", score=0.8),
        ]
        keywords = entities_to_keywords(entities)

        assert len(keywords) == 2
        location = next(k for k in keywords if strip_bio_prefix(k.entity) == "LOCATION")
        assert location.score == pytest.approx(0.95)
        assert location.word == "paris"

    def test_dictionary_boost(self):
        dictionary = Dictionary.from_terms("people", ["ada lovelace"], weight=1.5)
        entities = [RecognizedEntity(word="Ada Lovelace", entity="PER", score=0.8)]

        keywords = entities_to_keywords(entities, [dictionary])

        assert keywords[0].score == pytest.approx(0.95)
        assert keywords[0].sources == ["ner", "people"]

    def test_boost_capped_at_one(self):
        dictionary = Dictionary.from_terms("people", ["ada"], weight=5.0)
        entities = [RecognizedEntity(word="Ada", entity="PER", score=0.99)]

        keywords = entities_to_keywords(entities, [dictionary])

        assert keywords[0].score == 1.0

    def test_custom_threshold(self):
        config = KeywordsConfig(ner_confidence_threshold=0.1)
        entities = [RecognizedEntity(word="Maybe", entity="B-ORG", score=0.2)]

        assert len(entities_to_keywords(entities, config=config)) == 1

    def test_blank_words_skipped(self):
        entities = [RecognizedEntity(word="  ", entity="B-ORG", score=0.9)]

        assert entities_to_keywords(entities) == []


class TestGeneralKeywords:
    """Tests for frequency-based extraction."""

    def test_technical_terms_found(self, sample_transcripts):
        keywords = extract_general_keywords(sample_transcripts["technical"])
        words = {k.word.lower() for k in keywords}

        assert {"react", "typescript", "node", "express", "mongodb"} <= words

    def test_keywords_capitalized_and_tagged(self, sample_transcripts):
        keywords = extract_general_keywords(sample_transcripts["long"])

        assert keywords
        for keyword in keywords:
            assert keyword.word[0].isupper()
            assert keyword.entity == "KEYWORD"
            assert keyword.sources[0] == "general"
            assert 0 < keyword.score <= 1

    def test_sorted_descending(self, sample_transcripts):
        keywords = extract_general_keywords(sample_transcripts["long"])
        scores = [k.score for k in keywords]

        assert scores == sorted(scores, reverse=True)

    def test_stop_words_and_short_words_excluded(self):
        keywords = extract_general_keywords("the and with from about this that cat dog")

        assert keywords == []

    def test_top_n(self, sample_transcripts):
        config = KeywordsConfig(top_n=3)
        keywords = extract_general_keywords(sample_transcripts["long"], config=config)

        assert len(keywords) == 3

    def test_technical_bonus_outranks_plain_word(self):
        keywords = extract_general_keywords("kubernetes gardening")
        by_word = {k.word: k.score for k in keywords}

        assert by_word["Kubernetes"] > by_word["Gardening"]

    def test_score_formula(self):
        # one word out of two: tf 0.5 -> min(5, 1) * 0.5; length 6 -> 0.6 * 0.2
        keywords = extract_general_keywords("banana the")

        assert len(keywords) == 1
        assert keywords[0].score == pytest.approx(0.5 + 0.12)

    def test_dictionary_boost_adds_source(self):
        dictionary = Dictionary.from_terms("fruit", ["banana"], weight=2.0)
        keywords = extract_general_keywords("banana the", [dictionary])

        assert keywords[0].score == pytest.approx(0.62 + 0.2)
        assert keywords[0].sources == ["general", "fruit"]

    def test_empty_text(self):
        assert extract_general_keywords("") == []
        assert extract_general_keywords("!!! ???") == []

    def test_punctuation_stripped(self):
        keywords = extract_general_keywords("MongoDB! mongodb, (MongoDB)")

        assert [k.word for k in keywords] == ["Mongodb"]


class TestDictionaryKeywords:
    """Tests for dictionary-direct extraction."""

    def test_matching_terms_emitted(self, sample_transcripts):
        dictionary = Dictionary.from_terms("programming", ["react", "angular"], weight=1.0)
        keywords = extract_dictionary_keywords(sample_transcripts["technical"], [dictionary])

        assert len(keywords) == 1
        assert keywords[0].word == "React"
        assert keywords[0].entity == "DICTIONARY"
        assert keywords[0].sources == ["programming"]
        assert keywords[0].score == pytest.approx(0.3 * 0.5 + 0.2 * 1.0)

    def test_score_capped(self):
        dictionary = Dictionary.from_terms("heavy", ["transcript"], weight=10.0)
        keywords = extract_dictionary_keywords("a transcript", [dictionary])

        assert keywords[0].score == 1.0

    def test_no_dictionaries(self, sample_transcripts):
        assert extract_dictionary_keywords(sample_transcripts["technical"], []) == []


class TestKnowledgeGraphKeywords:
    """Tests for converting knowledge-graph matches."""

    def test_conversion(self):
        entity = KnowledgeGraphEntity(name="United Nations", types=["Organization", "Thing"])
        keywords = knowledge_graph_keywords(
            [KnowledgeGraphMatch(entity=entity, score=0.85, category="Organization")]
        )

        assert len(keywords) == 1
        assert keywords[0].word == "United Nations"
        assert keywords[0].entity == "Organization"
        assert keywords[0].sources == ["google_knowledge"]
        assert keywords[0].score == 0.85
