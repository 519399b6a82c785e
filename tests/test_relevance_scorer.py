"""
Relevance scoring tests.

Run with: python3 -m pytest tests/test_relevance_scorer.py -v
"""

import pytest

from content_intelligence.services.relevance_scorer import (
    tokenize,
    keyword_relevance,
    similarity,
    complementary_relevance,
    topic_relevance,
    topic_words,
)


class TestKeywordRelevance:
    """Test keyword match density."""

    def test_empty_keywords_score_zero(self):
        assert keyword_relevance([], "roof repair guide") == 0.0

    def test_matches_are_case_insensitive_and_capped(self):
        assert keyword_relevance(["roof"], "Roof roof ROOF") == 1.0

    def test_partial_matches(self):
        assert keyword_relevance(["roof", "gutter"], "roof repair") == pytest.approx(0.5)

    def test_blank_keywords_count_toward_divisor(self):
        assert keyword_relevance(["", "roof"], "roof") == pytest.approx(0.5)
        assert keyword_relevance(["   "], "anything at all") == 0.0

    def test_keywords_are_escaped(self):
        assert keyword_relevance(["c++"], "we teach c++ and java") == 1.0
        assert keyword_relevance(["a.b"], "axb") == 0.0

    def test_always_in_range(self):
        texts = ["", "roof", "roof " * 50, "nothing relevant here"]
        for text in texts:
            score = keyword_relevance(["roof", "repair", "shingle"], text)
            assert 0.0 <= score <= 1.0


class TestSimilarity:
    """Test Jaccard word-overlap similarity."""

    def test_identical_texts(self):
        assert similarity("roof repair guide", "roof repair guide") == 1.0

    def test_disjoint_texts(self):
        assert similarity("roof repair", "gutter cleaning") == 0.0

    def test_partial_overlap(self):
        # {roof, repair} vs {roof, cleaning}
        assert similarity("roof repair", "roof cleaning") == pytest.approx(1 / 3)

    def test_symmetric(self):
        a = "Complete roof repair guide for homeowners"
        b = "Homeowners guide to gutter cleaning"
        assert similarity(a, b) == similarity(b, a)

    def test_short_words_ignored(self):
        assert tokenize("a an to roof") == {"roof"}

    def test_texts_without_tokens(self):
        assert similarity("a b", "a b") == 1.0
        assert similarity("a b", "c d") == 0.0
        assert similarity("", "") == 0.0


class TestComplementaryRelevance:
    """Test supporting-concept scoring."""

    def test_supporting_concepts(self):
        assert complementary_relevance([], "gutter guide with tips") == pytest.approx(0.2)

    def test_adds_half_keyword_relevance(self):
        # keyword relevance 1.0 -> 0.5, plus "guide" -> 0.1
        assert complementary_relevance(["roof"], "roof guide") == pytest.approx(0.6)

    def test_capped(self):
        text = "guide tutorial example tips tricks strategies techniques benefits comparison"
        assert complementary_relevance(["guide"], text) == pytest.approx(0.8)


class TestTopicRelevance:
    """Test topic word coverage."""

    def test_all_words_present(self):
        assert topic_relevance("roof repair", "We repair roofs") == 1.0

    def test_half_words_present(self):
        assert topic_relevance("roof gutter", "roof") == 0.5

    def test_empty_topic(self):
        assert topic_relevance("", "roof") == 0.0

    def test_topic_words_lowercased(self):
        assert topic_words("Roof Repair", ["Shingles", ""]) == ["roof", "repair", "shingles"]
