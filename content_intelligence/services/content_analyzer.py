"""
Content Analysis Service

Single entry point producing the full content intelligence result for a
crawled website: content gaps, topic clusters, SEO insights, keyword
opportunities, an optional competitor comparison and summary scores.

Scores:
- content_quality_score: 100 minus issue penalties and a thin-content penalty
- topical_authority_score: topic coverage + clusters + internal linking
- technical_seo_score: 100 minus issue penalties

All scores are clamped to 0-100.

Usage:
    from content_intelligence.services.content_analyzer import ContentAnalyzer

    analyzer = ContentAnalyzer()
    result = analyzer.analyze(own_site, competitor_site)
    payload = result.to_dict()
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Union

from runner.logging_setup import get_logger, log_analysis_run
from content_intelligence.config import (
    CONTENT_QUALITY_PENALTIES,
    TECHNICAL_SEO_PENALTIES,
    THIN_CONTENT_WORDS,
    THIN_CONTENT_PENALTY,
    SHALLOW_CONTENT_WORDS,
    SHALLOW_CONTENT_PENALTY,
    MAX_TOPIC_AUTHORITY_POINTS,
    TOPIC_AUTHORITY_PER_TOPIC,
    TOPIC_AUTHORITY_PER_CLUSTER,
    TOPIC_AUTHORITY_LINKING_WEIGHT,
    INTERNAL_LINKING_WEAK_SCORE,
    MAX_KEYWORDS_CONSIDERED,
    MAX_POTENTIAL_USAGE,
    MAX_MISSING_TOPICS,
    MAX_WEAKER_CONTENT,
    MAX_COMPETITOR_OPPORTUNITIES,
)
from content_intelligence.models.site import SiteKeyword, WebsiteAnalysisResult
from content_intelligence.services.content_gap_analyzer import ContentGap, ContentGapAnalyzer
from content_intelligence.services.topic_clusterer import ContentCluster, TopicClusterer
from content_intelligence.utils import capitalize_topic, clamp, lower_set, ordered_unique


@dataclass
class SEOInsight:
    """An actionable SEO finding."""
    type: str  # content_gap, technical_issue, content_cluster
    title: str
    description: str
    impact: str  # low, medium, high
    effort: str  # low, medium, high
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "impact": self.impact,
            "effort": self.effort,
            "recommendations": list(self.recommendations),
        }


@dataclass
class KeywordOpportunity:
    """A keyword the site could use more."""
    keyword: str
    current_usage: int
    potential_usage: int
    difficulty: str  # easy, medium, hard
    search_volume: str  # low, medium, high

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "current_usage": self.current_usage,
            "potential_usage": self.potential_usage,
            "difficulty": self.difficulty,
            "search_volume": self.search_volume,
        }


@dataclass
class CompetitorComparison:
    """Topic-level comparison against one competitor."""
    missing_topics: List[str] = field(default_factory=list)
    weaker_content: List[str] = field(default_factory=list)
    opportunities: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "missing_topics": list(self.missing_topics),
            "weaker_content": list(self.weaker_content),
            "opportunities": list(self.opportunities),
        }


@dataclass
class AnalysisSummary:
    """Headline numbers for the dashboard."""
    total_topics: int = 0
    content_quality_score: float = 0
    topical_authority_score: float = 0
    technical_seo_score: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_topics": self.total_topics,
            "content_quality_score": round(self.content_quality_score, 1),
            "topical_authority_score": round(self.topical_authority_score, 1),
            "technical_seo_score": round(self.technical_seo_score, 1),
        }


@dataclass
class ContentAnalysisResult:
    """Full content analysis of one website."""
    summary: AnalysisSummary
    content_gaps: List[ContentGap] = field(default_factory=list)
    content_clusters: List[ContentCluster] = field(default_factory=list)
    seo_insights: List[SEOInsight] = field(default_factory=list)
    keyword_opportunities: List[KeywordOpportunity] = field(default_factory=list)
    competitor_analysis: Optional[CompetitorComparison] = None

    @classmethod
    def empty(cls) -> "ContentAnalysisResult":
        """Result for a missing or uncrawled site."""
        return cls(summary=AnalysisSummary())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "summary": self.summary.to_dict(),
            "content_gaps": [gap.to_dict() for gap in self.content_gaps],
            "content_clusters": [cluster.to_dict() for cluster in self.content_clusters],
            "seo_insights": [insight.to_dict() for insight in self.seo_insights],
            "keyword_opportunities": [opp.to_dict() for opp in self.keyword_opportunities],
            "competitor_analysis": (
                self.competitor_analysis.to_dict() if self.competitor_analysis else None
            ),
        }


def average_words_per_page(website: WebsiteAnalysisResult) -> float:
    """Mean word count per crawled page (0 when nothing was crawled)."""
    if not website.page_count:
        return 0.0
    return website.total_word_count / website.page_count


def calculate_content_quality_score(website: WebsiteAnalysisResult) -> float:
    """
    Score content quality from technical issues and content depth.

    Args:
        website: Site snapshot

    Returns:
        float: Score (0-100)
    """
    score = 100
    for issue in website.technical_issues:
        score -= CONTENT_QUALITY_PENALTIES.get(issue.severity, 0)

    average_words = average_words_per_page(website)
    if average_words < THIN_CONTENT_WORDS:
        score -= THIN_CONTENT_PENALTY
    elif average_words < SHALLOW_CONTENT_WORDS:
        score -= SHALLOW_CONTENT_PENALTY

    return clamp(score)


def calculate_topical_authority_score(
    website: WebsiteAnalysisResult,
    clusters: List[ContentCluster],
) -> float:
    """Topic coverage, cluster and internal linking bonuses (0-100)."""
    score = min(len(website.topics) * TOPIC_AUTHORITY_PER_TOPIC, MAX_TOPIC_AUTHORITY_POINTS)
    score += len(clusters) * TOPIC_AUTHORITY_PER_CLUSTER
    score += website.linking_score * TOPIC_AUTHORITY_LINKING_WEIGHT

    return clamp(score)


def calculate_technical_seo_score(website: WebsiteAnalysisResult) -> float:
    """100 minus technical issue penalties (0-100)."""
    score = 100
    for issue in website.technical_issues:
        score -= TECHNICAL_SEO_PENALTIES.get(issue.severity, 0)

    return clamp(score)


def estimate_keyword_difficulty(density: float) -> str:
    """Well-used keywords are easy to push further; barely-used ones are hard."""
    if density > 2:
        return "easy"
    if density < 0.5:
        return "hard"
    return "medium"


def estimate_search_volume(frequency: int, total_pages: int) -> str:
    """Rough search volume tier from keyword frequency per page."""
    average = frequency / total_pages if total_pages else 0

    if average > 5:
        return "high"
    if average > 2:
        return "medium"
    return "low"


class ContentAnalyzer:
    """
    Orchestrates the content intelligence services for one website.

    Methods:
        analyze: Full ContentAnalysisResult for a site
        generate_seo_insights: Insights from gaps, issues, depth and linking
        identify_keyword_opportunities: Keywords worth using more
        compare_with_competitor: Topic-level competitor comparison
    """

    def __init__(
        self,
        gap_analyzer: Optional[ContentGapAnalyzer] = None,
        clusterer: Optional[TopicClusterer] = None,
    ):
        self.gap_analyzer = gap_analyzer or ContentGapAnalyzer()
        self.clusterer = clusterer or TopicClusterer()
        self.logger = get_logger("content_analyzer")

    def generate_seo_insights(
        self,
        website: WebsiteAnalysisResult,
        gaps: List[ContentGap],
    ) -> List[SEOInsight]:
        """
        Generate SEO insights.

        Args:
            website: Site snapshot
            gaps: Content gaps already identified

        Returns:
            list: SEOInsight records
        """
        insights = []

        high_gaps = [gap for gap in gaps if gap.priority == "high"]
        if high_gaps:
            insights.append(SEOInsight(
                type="content_gap",
                title="Missing Essential Content",
                description=(
                    f"Your website is missing {len(high_gaps)} critical content "
                    f"sections that customers expect."
                ),
                impact="high",
                effort="medium",
                recommendations=[f"Add a {gap.topic} page: {gap.reason}" for gap in high_gaps],
            ))

        high_issues = [issue for issue in website.technical_issues if issue.severity == "high"]
        if high_issues:
            insights.append(SEOInsight(
                type="technical_issue",
                title="Critical Technical SEO Issues",
                description=(
                    f"Found {len(high_issues)} high-priority technical issues that "
                    f"may impact search rankings."
                ),
                impact="high",
                effort="low",
                recommendations=[issue.description for issue in high_issues],
            ))

        average_words = average_words_per_page(website)
        if average_words < SHALLOW_CONTENT_WORDS:
            insights.append(SEOInsight(
                type="content_cluster",
                title="Content Could Be More Comprehensive",
                description=(
                    f"Average page has {round(average_words)} words. Consider expanding "
                    f"content to improve SEO value."
                ),
                impact="medium",
                effort="high",
                recommendations=[
                    "Expand existing pages with more detailed information",
                    "Add examples and case studies",
                    "Include FAQ sections on relevant pages",
                ],
            ))

        if website.linking_score < INTERNAL_LINKING_WEAK_SCORE:
            insights.append(SEOInsight(
                type="content_cluster",
                title="Improve Internal Linking",
                description=(
                    "Your internal linking structure could be improved to help users "
                    "and search engines navigate your content."
                ),
                impact="medium",
                effort="low",
                recommendations=[
                    "Add links between related pages",
                    "Create topic clusters with pillar pages",
                    "Use descriptive anchor text for internal links",
                ],
            ))

        return insights

    def identify_keyword_opportunities(self, website: WebsiteAnalysisResult) -> List[KeywordOpportunity]:
        """
        Find keywords whose usage could reasonably grow.

        Args:
            website: Site snapshot

        Returns:
            list: KeywordOpportunity records from the top keywords
        """
        opportunities = []

        for keyword in website.keywords[:MAX_KEYWORDS_CONSIDERED]:
            potential = min(keyword.frequency * 2, MAX_POTENTIAL_USAGE)
            if potential <= keyword.frequency:
                continue

            opportunities.append(self._keyword_opportunity(keyword, potential, website.page_count))

        return opportunities

    def _keyword_opportunity(self, keyword: SiteKeyword, potential: int, page_count: int) -> KeywordOpportunity:
        return KeywordOpportunity(
            keyword=keyword.keyword,
            current_usage=keyword.frequency,
            potential_usage=potential,
            difficulty=estimate_keyword_difficulty(keyword.density),
            search_volume=estimate_search_volume(keyword.frequency, page_count),
        )

    def compare_with_competitor(
        self,
        website: WebsiteAnalysisResult,
        competitor: WebsiteAnalysisResult,
    ) -> CompetitorComparison:
        """
        Compare topics with a competitor.

        Args:
            website: Own site snapshot
            competitor: Competitor snapshot

        Returns:
            CompetitorComparison: Missing topics, own-only topics and opportunities
        """
        own_topics = ordered_unique(t.lower() for t in website.topics)
        competitor_topics = ordered_unique(t.lower() for t in competitor.topics)
        own_set = set(own_topics)
        competitor_set = lower_set(competitor_topics)

        missing = [t for t in competitor_topics if t not in own_set]
        weaker = [t for t in own_topics if t not in competitor_set]

        return CompetitorComparison(
            missing_topics=missing[:MAX_MISSING_TOPICS],
            weaker_content=weaker[:MAX_WEAKER_CONTENT],
            opportunities=[
                f"Create content about {capitalize_topic(topic)} that competitors rank for"
                for topic in missing[:MAX_COMPETITOR_OPPORTUNITIES]
            ],
        )

    def analyze(
        self,
        website: Optional[WebsiteAnalysisResult],
        competitor: Optional[WebsiteAnalysisResult] = None,
    ) -> ContentAnalysisResult:
        """
        Run the full content analysis.

        Args:
            website: Own site snapshot
            competitor: Optional competitor snapshot

        Returns:
            ContentAnalysisResult: Empty result when the site is missing or has no pages
        """
        if website is None or not website.crawled_pages:
            self.logger.warning("No crawled pages to analyze, returning empty result")
            return ContentAnalysisResult.empty()

        with log_analysis_run(
            self.logger,
            "content analysis",
            domain=website.domain or website.url,
            pages=website.page_count,
            topics=len(website.topics),
            competitor="yes" if competitor else "no",
        ):
            gaps = self.gap_analyzer.identify_content_gaps(website, competitor)
            clusters = self.clusterer.build_content_clusters(website.crawled_pages, website.topics)
            insights = self.generate_seo_insights(website, gaps)
            opportunities = self.identify_keyword_opportunities(website)
            comparison = self.compare_with_competitor(website, competitor) if competitor else None

            summary = AnalysisSummary(
                total_topics=len(website.topics),
                content_quality_score=calculate_content_quality_score(website),
                topical_authority_score=calculate_topical_authority_score(website, clusters),
                technical_seo_score=calculate_technical_seo_score(website),
            )

            self.logger.info(
                f"{len(gaps)} gaps, {len(clusters)} clusters, "
                f"{len(insights)} insights, {len(opportunities)} keyword opportunities"
            )

        return ContentAnalysisResult(
            summary=summary,
            content_gaps=gaps,
            content_clusters=clusters,
            seo_insights=insights,
            keyword_opportunities=opportunities,
            competitor_analysis=comparison,
        )


def analyze_content(
    website: Union[WebsiteAnalysisResult, Dict[str, Any], None],
    competitor: Union[WebsiteAnalysisResult, Dict[str, Any], None] = None,
) -> ContentAnalysisResult:
    """
    Analyze a site given as a snapshot or as raw crawler output.

    Args:
        website: Own site (model or dict)
        competitor: Optional competitor (model or dict)

    Returns:
        ContentAnalysisResult
    """
    if isinstance(website, dict):
        website = WebsiteAnalysisResult.from_dict(website)
    if isinstance(competitor, dict):
        competitor = WebsiteAnalysisResult.from_dict(competitor)

    return ContentAnalyzer().analyze(website, competitor)
