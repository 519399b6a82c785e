"""
Internal Linking Suggestion Service

Proposes internal links for a new piece of content on an existing site.

Three passes over the crawled pages:
1. Source pages: existing pages that should link TO the new content
2. Target pages: existing pages the new content should link TO
3. Contextual pages: members of the topic cluster closest to the new content

Suggestions are merged, sorted by relevance (stable) and capped.

Usage:
    from content_intelligence.services.linking_suggestions import suggest_internal_links

    suggestions = suggest_internal_links(pages, "roof repair", ["shingles", "leaks"])

    # Or from a stored analysis
    engine = LinkingSuggestionEngine(repository)
    suggestions = engine.generate_internal_linking_suggestions(
        analysis_id, "roof repair", ["shingles"], user_id=user_id,
    )
"""

from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from runner.logging_setup import get_logger
from content_intelligence.config import (
    SOURCE_RELEVANCE_THRESHOLD,
    DUPLICATE_SIMILARITY_THRESHOLD,
    COMPLEMENTARY_THRESHOLD,
    CONTEXTUAL_RELEVANCE_THRESHOLD,
    CONTEXTUAL_RELEVANCE_SCORE,
    STRONG_RELEVANCE,
    MODERATE_RELEVANCE,
    MAX_LINKING_SUGGESTIONS,
)
from content_intelligence.exceptions import AuthRequiredError, AnalysisNotFoundError
from content_intelligence.models.site import CrawledPage
from content_intelligence.services.relevance_scorer import (
    keyword_relevance,
    similarity,
    complementary_relevance,
    topic_relevance,
    topic_words,
)
from content_intelligence.services.topic_clusterer import TopicClusterer


LINK_TYPE_INTERNAL = "internal"
LINK_TYPE_CONTEXTUAL = "contextual"

SOURCE_REASON = (
    ". This page should link to your new {topic} content to provide readers "
    "with additional detailed information."
)
TARGET_REASON = (
    ". Your new {topic} content should link to this page to provide readers "
    "with additional context and supporting information."
)
CONTEXTUAL_REASON = (
    "This page is part of the same topic cluster and provides additional "
    "context for readers interested in {topic}."
)


@dataclass
class LinkingSuggestion:
    """A proposed internal link. An empty url stands for the new content."""
    source_url: str
    source_title: str
    target_url: str
    target_title: str
    anchor_text: str
    relevance_score: float  # 0-1
    link_type: str  # internal, contextual
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "source_url": self.source_url,
            "source_title": self.source_title,
            "target_url": self.target_url,
            "target_title": self.target_title,
            "anchor_text": self.anchor_text,
            "relevance_score": round(self.relevance_score, 3),
            "link_type": self.link_type,
            "reasoning": self.reasoning,
        }


def generate_anchor_text(target_topic: str, target_keywords: List[str]) -> str:
    """
    Pick anchor text for a link to the new content.

    Candidates in order: the topic itself, keywords containing the topic's
    first word, then templated phrases. The first non-empty one wins.
    """
    first_word = (target_topic.lower().split() or [""])[0]
    candidates = [target_topic]
    candidates.extend(k for k in target_keywords if k and first_word in k.lower())
    candidates.extend([
        f"comprehensive {target_topic} guide",
        f"{target_topic} best practices",
        f"how to {target_topic.lower()}",
    ])

    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate

    return target_topic


def generate_link_reasoning(target_topic: str, score: float, direction: str) -> str:
    """
    Build the templated reasoning sentence for a suggestion.

    Args:
        target_topic: Topic of the new content
        score: Relevance score (0-1)
        direction: 'source' (page links to new content) or 'target'

    Returns:
        str: Reasoning text
    """
    percent = round(score * 100)

    if score > STRONG_RELEVANCE:
        reason = f"Strong topical relevance ({percent}% match)"
    elif score > MODERATE_RELEVANCE:
        reason = f"Moderate topical relevance ({percent}% match)"
    else:
        reason = f"Some topical relevance ({percent}% match)"

    template = SOURCE_REASON if direction == "source" else TARGET_REASON
    return reason + template.format(topic=target_topic)


def find_source_pages(
    pages: List[CrawledPage],
    target_topic: str,
    target_keywords: List[str],
) -> List[LinkingSuggestion]:
    """Existing pages that should link to the new content."""
    words = topic_words(target_topic, target_keywords)
    anchor = generate_anchor_text(target_topic, target_keywords)
    suggestions = []

    for page in pages:
        text = f"{page.content} {page.title} {page.heading_text()}".lower()
        score = keyword_relevance(words, text)

        if score > SOURCE_RELEVANCE_THRESHOLD:
            suggestions.append(LinkingSuggestion(
                source_url=page.url,
                source_title=page.title,
                target_url="",
                target_title=target_topic,
                anchor_text=anchor,
                relevance_score=score,
                link_type=LINK_TYPE_INTERNAL,
                reasoning=generate_link_reasoning(target_topic, score, "source"),
            ))

    return suggestions


def find_target_pages(
    pages: List[CrawledPage],
    target_topic: str,
    target_keywords: List[str],
) -> List[LinkingSuggestion]:
    """Existing pages the new content should link to."""
    words = topic_words(target_topic, target_keywords)
    suggestions = []

    for page in pages:
        text = f"{page.content} {page.title}".lower()

        # Near-duplicates of the new content are not worth linking
        if similarity(target_topic.lower(), text) > DUPLICATE_SIMILARITY_THRESHOLD:
            continue

        score = complementary_relevance(words, text)

        if score > COMPLEMENTARY_THRESHOLD:
            suggestions.append(LinkingSuggestion(
                source_url="",
                source_title=target_topic,
                target_url=page.url,
                target_title=page.title,
                anchor_text=page.title,
                relevance_score=score,
                link_type=LINK_TYPE_INTERNAL,
                reasoning=generate_link_reasoning(target_topic, score, "target"),
            ))

    return suggestions


def find_contextual_pages(
    pages: List[CrawledPage],
    target_topic: str,
    target_keywords: List[str],
    clusterer: Optional[TopicClusterer] = None,
) -> List[LinkingSuggestion]:
    """Pages from the topic cluster most relevant to the new content."""
    clusterer = clusterer or TopicClusterer()
    clusters = clusterer.identify_topic_clusters(pages)
    cluster_pages = clusterer.find_most_relevant_cluster(target_topic, target_keywords, clusters)

    suggestions = []
    for page in cluster_pages:
        if topic_relevance(target_topic, f"{page.title} {page.content}") > CONTEXTUAL_RELEVANCE_THRESHOLD:
            suggestions.append(LinkingSuggestion(
                source_url="",
                source_title=target_topic,
                target_url=page.url,
                target_title=page.title,
                anchor_text=page.title,
                relevance_score=CONTEXTUAL_RELEVANCE_SCORE,
                link_type=LINK_TYPE_CONTEXTUAL,
                reasoning=CONTEXTUAL_REASON.format(topic=target_topic),
            ))

    return suggestions


def suggest_internal_links(
    pages: List[CrawledPage],
    target_topic: str,
    target_keywords: Optional[List[str]] = None,
) -> List[LinkingSuggestion]:
    """
    Generate internal linking suggestions for new content.

    Args:
        pages: Crawled pages of the site
        target_topic: Topic of the new content
        target_keywords: Supporting keywords

    Returns:
        list: Up to MAX_LINKING_SUGGESTIONS suggestions, highest relevance first
    """
    target_keywords = target_keywords or []

    suggestions = find_source_pages(pages, target_topic, target_keywords)
    suggestions.extend(find_target_pages(pages, target_topic, target_keywords))

    # A cluster page already suggested for the same link is not repeated
    seen = {(s.source_url, s.target_url) for s in suggestions}
    suggestions.extend(
        s for s in find_contextual_pages(pages, target_topic, target_keywords)
        if (s.source_url, s.target_url) not in seen
    )

    suggestions.sort(key=lambda s: s.relevance_score, reverse=True)

    return suggestions[:MAX_LINKING_SUGGESTIONS]


class LinkingSuggestionEngine:
    """
    Generates linking suggestions for a stored website analysis.

    The repository must provide get_website_analysis(id, user_id) and
    get_crawled_pages(id), as CrawlRepository does.
    """

    def __init__(self, repository):
        """
        Initialize engine.

        Args:
            repository: Persistence boundary for stored analyses
        """
        self.repository = repository
        self.logger = get_logger("linking_suggestions")

    def generate_internal_linking_suggestions(
        self,
        website_analysis_id: int,
        target_topic: str,
        target_keywords: Optional[List[str]] = None,
        user_id: Optional[str] = None,
    ) -> List[LinkingSuggestion]:
        """
        Generate suggestions from a stored analysis owned by the caller.

        Args:
            website_analysis_id: Stored analysis id
            target_topic: Topic of the new content
            target_keywords: Supporting keywords
            user_id: Authenticated caller

        Returns:
            list: LinkingSuggestion records

        Raises:
            AuthRequiredError: No authenticated caller
            AnalysisNotFoundError: Analysis missing or owned by someone else
        """
        if not user_id:
            raise AuthRequiredError("User not authenticated")

        analysis = self.repository.get_website_analysis(website_analysis_id, user_id)
        if analysis is None:
            raise AnalysisNotFoundError(website_analysis_id)

        pages = self.repository.get_crawled_pages(website_analysis_id)
        if not pages:
            self.logger.info(f"Analysis {website_analysis_id} has no crawled pages")
            return []

        suggestions = suggest_internal_links(pages, target_topic, target_keywords)

        self.logger.info(
            f"Generated {len(suggestions)} linking suggestions for '{target_topic}' "
            f"from {len(pages)} pages"
        )

        return suggestions
