"""
Competitive Intelligence Report

Rolls per-competitor analyses up into a market-level report and turns
competitor advantages into counter content topics.

Usage:
    from competitor_intel.services.intelligence_report import analyze_competitors

    report = analyze_competitors(own_site, [competitor_a, competitor_b], location="Austin")
    print(report.competitive_gaps["content_gaps"])
"""

import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

from competitor_intel.config import (
    MAX_MARKET_LEADERS,
    SEASONAL_PATTERNS,
    DIFFERENTIATION_TACTICS,
    MARKET_POSITIONING,
    SWOT_OPPORTUNITIES,
    SWOT_THREATS,
    MAX_EMERGING_TRENDS,
    RECENT_TOPIC_WINDOW,
    MAX_TOPIC_PRIORITIES,
    MAX_GAPS_IN_RECOMMENDATION,
    PLACEHOLDER_DOMAIN,
    DEFAULT_LINKING_SCORE,
)
from competitor_intel.services.competitor_analyzer import (
    CompetitiveAdvantage,
    CompetitorAnalysis,
    CompetitorAnalyzer,
    extract_keywords,
    find_unmatched_topics,
)
from competitor_intel.services.service_extractor import OfferingExtractor
from content_intelligence.models.site import WebsiteAnalysisResult
from content_intelligence.utils import ordered_unique
from runner.logging_setup import log_analysis_run

logger = logging.getLogger(__name__)


@dataclass
class CompetitiveIntelligenceReport:
    """Market-level view across all analyzed competitors."""
    competitors: List[CompetitorAnalysis] = field(default_factory=list)
    market_analysis: Dict[str, Any] = field(default_factory=dict)
    competitive_gaps: Dict[str, List[str]] = field(default_factory=dict)
    strategic_recommendations: Dict[str, List[str]] = field(default_factory=dict)
    swot_analysis: Dict[str, List[str]] = field(default_factory=dict)
    competitor_advantages: Dict[str, List[CompetitiveAdvantage]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "competitors": [c.to_dict() for c in self.competitors],
            "market_analysis": dict(self.market_analysis),
            "competitive_gaps": {k: list(v) for k, v in self.competitive_gaps.items()},
            "strategic_recommendations": {k: list(v) for k, v in self.strategic_recommendations.items()},
            "swot_analysis": {k: list(v) for k, v in self.swot_analysis.items()},
            "competitor_advantages": {
                k: [adv.to_dict() for adv in v] for k, v in self.competitor_advantages.items()
            },
        }


@dataclass
class CounterTopic:
    """Content idea that answers a competitor advantage."""
    topic: str
    type: str  # counter, comparison, differentiator, value_proposition
    target_advantage: str
    reasoning: str
    search_intent: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "topic": self.topic,
            "type": self.type,
            "target_advantage": self.target_advantage,
            "reasoning": self.reasoning,
            "search_intent": self.search_intent,
        }


class CompetitorIntelligenceAnalyzer:
    """
    Builds a CompetitiveIntelligenceReport for one site and its competitors.

    Competitors are analyzed independently and in input order.
    """

    def __init__(
        self,
        competitor_analyzer: Optional[CompetitorAnalyzer] = None,
        extractor: Optional[OfferingExtractor] = None,
    ):
        self.extractor = extractor or OfferingExtractor()
        self.competitor_analyzer = competitor_analyzer or CompetitorAnalyzer(extractor=self.extractor)

    def analyze_competitors(
        self,
        own: WebsiteAnalysisResult,
        competitors: List[WebsiteAnalysisResult],
        industry_context: Optional[str] = None,
        location: Optional[str] = None,
    ) -> CompetitiveIntelligenceReport:
        """
        Analyze every competitor and aggregate the results.

        Args:
            own: Our site snapshot
            competitors: Competitor site snapshots
            industry_context: Free-text industry label, logged only
            location: Market location used for local dynamics

        Returns:
            CompetitiveIntelligenceReport
        """
        context = {"domain": own.domain, "competitors": len(competitors)}
        if industry_context:
            context["industry"] = industry_context

        with log_analysis_run(logger, "competitor analysis", **context):
            own_offerings = self.extractor.extract(own)
            analyses = [
                self.competitor_analyzer.analyze(competitor, own, own_offerings=own_offerings)
                for competitor in competitors
            ]

            gaps = self._competitive_gaps(own, own_offerings, analyses)

            return CompetitiveIntelligenceReport(
                competitors=analyses,
                market_analysis=self._market_analysis(analyses, location),
                competitive_gaps=gaps,
                strategic_recommendations=self._recommendations(gaps),
                swot_analysis=self._swot(own),
                competitor_advantages=self._aggregate_advantages(analyses),
            )

    def _market_analysis(self, analyses: List[CompetitorAnalysis], location: Optional[str]) -> Dict[str, Any]:
        leaders = sorted(analyses, key=lambda a: a.competitor_info.authority_score, reverse=True)

        all_clusters = [
            topic for a in analyses for topic in a.content_strategy.topic_clusters
        ]
        recent = all_clusters[-RECENT_TOPIC_WINDOW:]

        local_dynamics = []
        if location:
            local_dynamics.append(f"{location} market competition")
            location_lower = location.lower()
            if any(
                location_lower in area.lower()
                for a in analyses
                for area in a.market_position.service_areas
            ):
                local_dynamics.append("Strong local competition")

        return {
            "total_market_size": sum(a.competitor_info.estimated_traffic for a in analyses),
            "market_leaders": [a.competitor_info.name for a in leaders[:MAX_MARKET_LEADERS]],
            "emerging_trends": recent[:MAX_EMERGING_TRENDS],
            "seasonal_patterns": list(SEASONAL_PATTERNS),
            "local_market_dynamics": local_dynamics,
        }

    def _competitive_gaps(self, own, own_offerings, analyses: List[CompetitorAnalysis]) -> Dict[str, List[str]]:
        own_keywords = set(extract_keywords(own))
        own_usps = set(own_offerings.unique_selling_points)
        own_areas = set(own_offerings.service_areas)

        content_gaps = []
        service_gaps = []
        keyword_gaps = []
        geographic_gaps = []

        for analysis in analyses:
            content_gaps.extend(find_unmatched_topics(analysis.content_strategy.topic_clusters, own.topics))
            service_gaps.extend(
                usp for usp in analysis.market_position.unique_value_props if usp not in own_usps
            )
            keyword_gaps.extend(
                k for k in analysis.seo_performance.top_ranking_topics if k not in own_keywords
            )
            geographic_gaps.extend(
                area for area in analysis.market_position.service_areas if area not in own_areas
            )

        return {
            "content_gaps": ordered_unique(content_gaps),
            "service_gaps": ordered_unique(service_gaps),
            "keyword_gaps": ordered_unique(keyword_gaps),
            "geographic_gaps": ordered_unique(geographic_gaps),
        }

    def _recommendations(self, gaps: Dict[str, List[str]]) -> Dict[str, List[str]]:
        content_strategy = []
        if gaps["content_gaps"]:
            content_strategy.append(
                "Address content gaps: " + ", ".join(gaps["content_gaps"][:MAX_GAPS_IN_RECOMMENDATION])
            )
        if gaps["keyword_gaps"]:
            content_strategy.append(
                "Target missing keywords: " + ", ".join(gaps["keyword_gaps"][:MAX_GAPS_IN_RECOMMENDATION])
            )

        return {
            "content_strategy": content_strategy,
            "topic_priorities": gaps["keyword_gaps"][:MAX_TOPIC_PRIORITIES],
            "differentiation_tactics": list(DIFFERENTIATION_TACTICS),
            "market_positioning": list(MARKET_POSITIONING),
        }

    def _swot(self, own: WebsiteAnalysisResult) -> Dict[str, List[str]]:
        strengths = []
        if own.linking_score > 70:
            strengths.append("Strong internal linking structure")
        if own.page_count > 20:
            strengths.append("Comprehensive content library")

        weaknesses = []
        if own.technical_issues:
            weaknesses.append("Technical SEO improvements needed")

        return {
            "strengths": strengths,
            "weaknesses": weaknesses,
            "opportunities": list(SWOT_OPPORTUNITIES),
            "threats": list(SWOT_THREATS),
        }

    def _aggregate_advantages(self, analyses: List[CompetitorAnalysis]) -> Dict[str, List[CompetitiveAdvantage]]:
        advantages = [adv for a in analyses for adv in a.advantages]

        return {
            "critical_threats": [
                a for a in advantages if a.impact_level == "critical" and a.targetable
            ],
            "addressable_advantages": [
                a for a in advantages if a.targetable and a.impact_level in ("high", "medium")
            ],
            "strategic_counters": [
                a for a in advantages if a.targetable and "strategic" in a.counter_strategy.lower()
            ],
            "comparison_opportunities": [
                a for a in advantages if a.type in ("pricing", "service_quality", "expertise")
            ],
        }


def analyze_competitors(
    own: WebsiteAnalysisResult,
    competitors: List[WebsiteAnalysisResult],
    industry_context: Optional[str] = None,
    location: Optional[str] = None,
) -> CompetitiveIntelligenceReport:
    """Convenience wrapper around CompetitorIntelligenceAnalyzer."""
    return CompetitorIntelligenceAnalyzer().analyze_competitors(
        own, competitors, industry_context=industry_context, location=location
    )


def placeholder_site() -> WebsiteAnalysisResult:
    """Stand-in own site when only competitors are known."""
    return WebsiteAnalysisResult(
        url=f"https://{PLACEHOLDER_DOMAIN}",
        domain=PLACEHOLDER_DOMAIN,
        internal_linking_score=DEFAULT_LINKING_SCORE,
    )


def perform_competitor_analysis(
    competitors: List[WebsiteAnalysisResult],
    industry_context: Optional[str] = None,
    location: Optional[str] = None,
    own: Optional[WebsiteAnalysisResult] = None,
) -> CompetitiveIntelligenceReport:
    """
    Analyze competitors, using a placeholder own site when none is given.

    Args:
        competitors: Competitor site snapshots
        industry_context: Free-text industry label
        location: Market location
        own: Our site snapshot (optional)

    Returns:
        CompetitiveIntelligenceReport
    """
    return analyze_competitors(
        own or placeholder_site(),
        competitors,
        industry_context=industry_context,
        location=location,
    )


# =============================================================================
# COUNTER TOPICS
# =============================================================================

def _counter_topics_for(
    adv: CompetitiveAdvantage,
    bt: str,
    location: Optional[str],
    uvps: List[str],
) -> List[CounterTopic]:
    topics = []
    advantage_lower = adv.advantage.lower()

    if adv.type == "pricing":
        if adv.impact_level == "critical":
            topics.append(CounterTopic(
                topic=f"Why Premium {bt} Services Are Worth The Investment",
                type="value_proposition",
                target_advantage=adv.advantage,
                reasoning="Counters competitor budget positioning by emphasizing value over price",
                search_intent="commercial",
            ))
            if location:
                topics.append(CounterTopic(
                    topic=f"The True Cost of Cheap {bt} in {location}",
                    type="counter",
                    target_advantage=adv.advantage,
                    reasoning="Highlights risks and hidden costs of budget competitors",
                    search_intent="informational",
                ))
        topics.append(CounterTopic(
            topic=f"{bt} Price vs Value: What You're Really Paying For",
            type="comparison",
            target_advantage=adv.advantage,
            reasoning="Direct comparison focusing on long-term value",
            search_intent="commercial",
        ))

    elif adv.type == "service_quality":
        topics.append(CounterTopic(
            topic=f"What Sets Top-Quality {bt} Services Apart",
            type="differentiator",
            target_advantage=adv.advantage,
            reasoning="Establishes quality criteria where competitor may fall short",
            search_intent="informational",
        ))
        if uvps:
            topics.append(CounterTopic(
                topic=f"{uvps[0]}: The {bt} Quality Difference",
                type="value_proposition",
                target_advantage=adv.advantage,
                reasoning="Highlights unique quality aspects competitors lack",
                search_intent="commercial",
            ))

    elif adv.type == "expertise":
        topics.append(CounterTopic(
            topic=f"Specialized vs General {bt}: When Expertise Matters",
            type="comparison",
            target_advantage=adv.advantage,
            reasoning="Positions specialized expertise as superior to general knowledge",
            search_intent="informational",
        ))
        topics.append(CounterTopic(
            topic=f"Questions to Ask Before Hiring a {bt} Professional",
            type="differentiator",
            target_advantage=adv.advantage,
            reasoning="Educates customers on expertise indicators competitors may lack",
            search_intent="informational",
        ))

    elif adv.type == "coverage":
        if "24/7" in advantage_lower:
            topics.append(CounterTopic(
                topic=f"Quality {bt} Service vs 24/7 Availability: What's More Important?",
                type="comparison",
                target_advantage=adv.advantage,
                reasoning="Questions the value of 24/7 service vs business-hours quality",
                search_intent="informational",
            ))
        if "service area" in advantage_lower:
            topics.append(CounterTopic(
                topic=f"Local {bt} Expert: Better Than Large Service Areas",
                type="value_proposition",
                target_advantage=adv.advantage,
                reasoning="Positions local expertise as superior to broad coverage",
                search_intent="commercial",
            ))

    elif adv.type == "speed":
        topics.append(CounterTopic(
            topic=f"Fast vs Right: Why {bt} Quality Beats Speed",
            type="counter",
            target_advantage=adv.advantage,
            reasoning="Challenges competitor speed advantage with quality focus",
            search_intent="informational",
        ))
        topics.append(CounterTopic(
            topic=f"How to Spot Rushed {bt} Work (And Avoid It)",
            type="counter",
            target_advantage=adv.advantage,
            reasoning="Educates on risks of fast service that may lack quality",
            search_intent="informational",
        ))

    elif adv.type == "customer_service":
        topics.append(CounterTopic(
            topic=f"What Makes Exceptional {bt} Customer Service",
            type="differentiator",
            target_advantage=adv.advantage,
            reasoning="Sets higher customer service standards than competitors",
            search_intent="informational",
        ))
        topics.append(CounterTopic(
            topic=f"{bt} Service: Beyond Basic Customer Support",
            type="value_proposition",
            target_advantage=adv.advantage,
            reasoning="Positions superior customer service as key differentiator",
            search_intent="commercial",
        ))

    elif adv.type == "technology":
        topics.append(CounterTopic(
            topic=f"Modern Tools vs Proven Methods in {bt}",
            type="comparison",
            target_advantage=adv.advantage,
            reasoning="Questions the value of new technology over proven approaches",
            search_intent="informational",
        ))
        topics.append(CounterTopic(
            topic=f"Does Your {bt} Need the Latest Technology?",
            type="counter",
            target_advantage=adv.advantage,
            reasoning="Challenges assumption that technology equals better service",
            search_intent="informational",
        ))

    else:
        topics.append(CounterTopic(
            topic=f"Choosing the Right {bt}: More Than Just {adv.advantage}",
            type="counter",
            target_advantage=adv.advantage,
            reasoning="Minimizes importance of competitor advantage",
            search_intent="informational",
        ))

    return topics


def generate_counter_topics(
    advantages: List[CompetitiveAdvantage],
    business_type: str,
    target_audience: str,
    location: Optional[str] = None,
    unique_value_props: Optional[List[str]] = None,
) -> List[CounterTopic]:
    """
    Turn competitor advantages into counter content topics.

    Args:
        advantages: Competitor advantages
        business_type: Our business type, used in topic titles
        target_audience: Our target audience (carried for callers, not used in titles)
        location: Market location for local topics
        unique_value_props: Our value propositions

    Returns:
        list: CounterTopic records in advantage order
    """
    uvps = list(unique_value_props or [])
    topics = []

    for adv in advantages:
        topics.extend(_counter_topics_for(adv, business_type, location, uvps))

    logger.debug(f"Generated {len(topics)} counter topics from {len(advantages)} advantages")

    return topics
