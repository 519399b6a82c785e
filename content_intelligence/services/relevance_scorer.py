"""
Relevance Scoring Primitives

Pure text-scoring functions shared by the clusterer, the gap analyzer and
the linking engine. All functions are case-insensitive, deterministic and
return scores in a fixed range.

Scores:
- keyword_relevance: keyword match density (0-1)
- similarity: word-overlap Jaccard similarity (0-1)
- complementary_relevance: supporting-concept score (0-0.8)
- topic_relevance: share of topic words present in a text (0-1)

Usage:
    from content_intelligence.services.relevance_scorer import similarity

    score = similarity("roof repair guide", page.title + " " + page.content)
"""

import re
from typing import Iterable, List, Set

from content_intelligence.config import (
    SIMILARITY_MIN_WORD_LENGTH,
    SUPPORTING_CONCEPTS,
    SUPPORTING_CONCEPT_WEIGHT,
    COMPLEMENTARY_KEYWORD_WEIGHT,
    COMPLEMENTARY_MAX_SCORE,
)


def tokenize(text: str) -> Set[str]:
    """
    Tokenize text into a set of lowercase words.

    Args:
        text: Text to tokenize

    Returns:
        set: Words at least SIMILARITY_MIN_WORD_LENGTH characters long
    """
    words = re.findall(r'\b\w+\b', (text or "").lower())
    return {w for w in words if len(w) >= SIMILARITY_MIN_WORD_LENGTH}


def keyword_relevance(keywords: List[str], text: str) -> float:
    """
    Calculate keyword relevance of a text.

    Counts every (escaped, case-insensitive) match of every keyword and
    divides by the number of keywords.

    Args:
        keywords: Keywords to look for
        text: Text to search

    Returns:
        float: Relevance score (0-1)
    """
    if not keywords:
        return 0.0

    text = text or ""
    match_count = 0

    for keyword in keywords:
        # Blank keywords would match at every position
        if not keyword or not keyword.strip():
            continue
        match_count += len(re.findall(re.escape(keyword), text, re.IGNORECASE))

    return min(match_count / len(keywords), 1.0)


def similarity(text1: str, text2: str) -> float:
    """
    Calculate word-overlap (Jaccard) similarity between two texts.

    Args:
        text1: First text
        text2: Second text

    Returns:
        float: Similarity score (0-1)
    """
    words1 = tokenize(text1)
    words2 = tokenize(text2)

    union = words1 | words2
    if not union:
        # Neither text has a scorable word: only identical texts match
        if text1 and text2 and text1.lower() == text2.lower():
            return 1.0
        return 0.0

    return len(words1 & words2) / len(union)


def supporting_concept_hits(text: str) -> int:
    """Count supporting concepts (guide, tips, vs...) present in the text."""
    text_lower = (text or "").lower()
    return sum(1 for concept in SUPPORTING_CONCEPTS if concept in text_lower)


def complementary_relevance(keywords: List[str], text: str) -> float:
    """
    Calculate how well a page complements the target content.

    Looks for supporting concepts rather than exact matches, with half the
    keyword relevance added on top.

    Args:
        keywords: Target keywords
        text: Page text

    Returns:
        float: Complementary score (0-0.8)
    """
    supporting_score = SUPPORTING_CONCEPT_WEIGHT * supporting_concept_hits(text)
    keyword_score = keyword_relevance(keywords, text)

    return min(keyword_score * COMPLEMENTARY_KEYWORD_WEIGHT + supporting_score, COMPLEMENTARY_MAX_SCORE)


def topic_relevance(topic: str, text: str) -> float:
    """
    Share of the topic's words that appear anywhere in the text.

    Args:
        topic: Topic phrase
        text: Text to search

    Returns:
        float: Relevance score (0-1)
    """
    topic_words = (topic or "").lower().split()
    if not topic_words:
        return 0.0

    text_lower = (text or "").lower()
    matches = sum(1 for word in topic_words if word in text_lower)

    return matches / len(topic_words)


def topic_words(topic: str, keywords: Iterable[str] = ()) -> List[str]:
    """Lowercased topic words followed by lowercased keywords."""
    words = (topic or "").lower().split()
    words.extend(k.lower() for k in keywords if k)
    return words
