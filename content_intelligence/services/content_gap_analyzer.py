"""
Content Gap Analyzer Service

Finds content a site is missing by comparing its topics against:
- A fixed list of essential business topics
- Industry heuristics derived from the domain name
- A competitor's topics (optional)

Gaps from all sources are concatenated and ordered by priority
(high > medium > low); the sort is stable so source order is kept
within a priority.

Usage:
    from content_intelligence.services.content_gap_analyzer import ContentGapAnalyzer

    analyzer = ContentGapAnalyzer()
    gaps = analyzer.identify_content_gaps(own_site, competitor_site)
"""

from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from runner.logging_setup import get_logger
from content_intelligence.config import (
    ESSENTIAL_TOPICS,
    INDUSTRY_GAPS,
    HARD_TOPIC_WORDS,
    EASY_TOPIC_WORDS,
    PRIORITY_ORDER,
)
from content_intelligence.models.site import WebsiteAnalysisResult
from content_intelligence.utils import capitalize_topic, lower_set, ordered_unique


COMPETITOR_GAP_REASON = "Competitor ranks for this topic"
COMPETITOR_GAP_ADVANTAGE = "Currently missing this topic in your content"


@dataclass
class ContentGap:
    """A topic the site should cover but does not."""
    topic: str
    reason: str
    priority: str  # high, medium, low
    estimated_difficulty: str  # easy, medium, hard
    competitor_advantage: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = {
            "topic": self.topic,
            "reason": self.reason,
            "priority": self.priority,
            "estimated_difficulty": self.estimated_difficulty,
        }
        if self.competitor_advantage is not None:
            data["competitor_advantage"] = self.competitor_advantage
        return data


def estimate_difficulty(topic: str) -> str:
    """
    Estimate how hard a topic is to rank for from its wording.

    Args:
        topic: Topic text

    Returns:
        str: 'hard', 'easy' or 'medium'
    """
    topic_lower = topic.lower()

    if any(word in topic_lower for word in HARD_TOPIC_WORDS):
        return "hard"
    if any(word in topic_lower for word in EASY_TOPIC_WORDS):
        return "easy"

    return "medium"


class ContentGapAnalyzer:
    """
    Identifies missing content for a website.

    Methods:
        identify_content_gaps: All gaps, sorted by priority
        find_essential_gaps: Missing essential business topics
        find_industry_gaps: Gaps suggested by the domain's industry
        find_competitor_gaps: Competitor topics the site lacks
    """

    def __init__(self):
        self.logger = get_logger("content_gap_analyzer")

    def _topic_exists(self, website: WebsiteAnalysisResult, topic: str, existing: set) -> bool:
        """Topic is a known site topic, or appears in a page title or H1."""
        topic_lower = topic.lower()
        if topic_lower in existing:
            return True

        for page in website.crawled_pages:
            if topic_lower in (page.title or "").lower():
                return True
            if any(topic_lower in h1.lower() for h1 in page.h1):
                return True

        return False

    def find_essential_gaps(self, website: WebsiteAnalysisResult) -> List[ContentGap]:
        """
        Check the site against the essential business topic list.

        Args:
            website: Own site snapshot

        Returns:
            list: Gaps for essential topics the site lacks
        """
        existing = lower_set(website.topics)
        gaps = []

        for entry in ESSENTIAL_TOPICS:
            if self._topic_exists(website, entry["topic"], existing):
                continue

            gaps.append(ContentGap(
                topic=entry["topic"],
                reason=entry["reason"],
                priority=entry["priority"],
                estimated_difficulty=estimate_difficulty(entry["topic"]),
            ))

        return gaps

    def find_industry_gaps(self, website: WebsiteAnalysisResult) -> List[ContentGap]:
        """
        Suggest industry-specific content from domain signals.

        Args:
            website: Own site snapshot

        Returns:
            list: Industry gaps (may be empty)
        """
        domain = (website.domain or "").lower()
        topics = [t.lower() for t in website.topics]
        gaps = []

        for industry in INDUSTRY_GAPS:
            matched = any(signal in domain for signal in industry["domain_signals"])

            topic_signal = industry["topic_signal"]
            if not matched and topic_signal:
                matched = any(topic_signal in t for t in topics)

            if not matched:
                continue

            for topic, reason, priority, difficulty in industry["gaps"]:
                gaps.append(ContentGap(
                    topic=topic,
                    reason=reason,
                    priority=priority,
                    estimated_difficulty=difficulty,
                ))

        return gaps

    def find_competitor_gaps(
        self,
        website: WebsiteAnalysisResult,
        competitor: WebsiteAnalysisResult,
    ) -> List[ContentGap]:
        """
        Find competitor topics missing from the site.

        Args:
            website: Own site snapshot
            competitor: Competitor site snapshot

        Returns:
            list: One medium-priority gap per missing competitor topic
        """
        own_topics = lower_set(website.topics)
        competitor_topics = ordered_unique(t.lower() for t in competitor.topics)

        return [
            ContentGap(
                topic=capitalize_topic(topic),
                reason=COMPETITOR_GAP_REASON,
                priority="medium",
                estimated_difficulty="medium",
                competitor_advantage=COMPETITOR_GAP_ADVANTAGE,
            )
            for topic in competitor_topics
            if topic not in own_topics
        ]

    def identify_content_gaps(
        self,
        website: WebsiteAnalysisResult,
        competitor: Optional[WebsiteAnalysisResult] = None,
    ) -> List[ContentGap]:
        """
        Identify all content gaps for a site.

        Args:
            website: Own site snapshot
            competitor: Optional competitor snapshot

        Returns:
            list: ContentGap records sorted by priority
        """
        gaps = self.find_essential_gaps(website)
        gaps.extend(self.find_industry_gaps(website))

        if competitor is not None:
            gaps.extend(self.find_competitor_gaps(website, competitor))

        gaps.sort(key=lambda gap: PRIORITY_ORDER.get(gap.priority, 0), reverse=True)

        self.logger.debug(f"Found {len(gaps)} content gaps for {website.domain}")

        return gaps


def identify_content_gaps(
    website: WebsiteAnalysisResult,
    competitor: Optional[WebsiteAnalysisResult] = None,
) -> List[ContentGap]:
    """Identify content gaps with a fresh analyzer."""
    return ContentGapAnalyzer().identify_content_gaps(website, competitor)
