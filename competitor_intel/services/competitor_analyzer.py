"""
Competitor Analyzer

Analyzes a single competitor website against our own site.

Sections of a CompetitorAnalysis:
- competitor_info: name, description, traffic and authority estimates
- content_strategy: topic clusters, gaps, strengths, frequency, tone
- seo_performance: keywords, keyword gaps, backlink and technical tiers
- market_position: value props, differentiators, audiences, pricing
- content_opportunities: underserved, seasonal, local, question, comparison
- strategic_insights: advantages, weaknesses, opportunities, threats
- advantages: CompetitiveAdvantage records sorted by impact

Each analysis is computed from its inputs only; no state is shared
between competitors.
"""

import re
import logging
from collections import Counter
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

from competitor_intel.config import (
    CONTENT_FREQUENCY_TIERS,
    BACKLINK_TIERS,
    TECHNICAL_SEO_TIERS,
    DEFAULT_LINKING_SCORE,
    MIN_ESTIMATED_TRAFFIC,
    TRAFFIC_PER_PAGE,
    TRAFFIC_PER_LINKING_POINT,
    MAX_CONTENT_BONUS,
    LARGE_SITE_WORDS,
    TOPIC_CLUSTER_MIN_WORD_LENGTH,
    MAX_TOPIC_CLUSTERS,
    MAX_CONTENT_STRENGTHS,
    KEYWORD_MIN_LENGTH,
    KEYWORD_MIN_FREQUENCY,
    MAX_KEYWORDS,
    MAX_TOP_RANKING_TOPICS,
    EXPECTED_TOPICS,
    SEASONAL_KEYWORDS,
    LOCAL_INTENT_INDICATORS,
    MAX_QUESTIONS,
    MAX_COMPARISON_SERVICES,
    MAX_DIFFERENTIATORS,
    IMPACT_ORDER,
    QUALITY_INDICATORS,
    PRICING_INDICATORS,
    EXPERTISE_INDICATORS,
    TECHNOLOGY_INDICATORS,
    CUSTOMER_SERVICE_INDICATORS,
    SPEED_INDICATORS,
    ADVANTAGE_MIN_HITS,
    SERVICE_RANGE_RATIO,
)
from competitor_intel.services.brand_voice import BrandVoiceAnalyzer, BrandVoiceProfile
from competitor_intel.services.service_extractor import BusinessOfferings, OfferingExtractor
from content_intelligence.models.site import WebsiteAnalysisResult
from content_intelligence.utils import clamp, lower_set, ordered_unique, split_sentences

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass
class CompetitiveAdvantage:
    """Something a competitor does better, and how to answer it."""
    type: str  # service_quality, pricing, expertise, coverage, technology, customer_service, speed
    advantage: str
    evidence: List[str] = field(default_factory=list)
    impact_level: str = "medium"  # low, medium, high, critical
    targetable: bool = True
    counter_strategy: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "advantage": self.advantage,
            "evidence": list(self.evidence),
            "impact_level": self.impact_level,
            "targetable": self.targetable,
            "counter_strategy": self.counter_strategy,
        }


@dataclass
class CompetitorInfo:
    domain: str
    name: str
    description: str
    estimated_traffic: int
    authority_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "domain": self.domain,
            "name": self.name,
            "description": self.description,
            "estimated_traffic": self.estimated_traffic,
            "authority_score": self.authority_score,
        }


@dataclass
class ContentStrategy:
    topic_clusters: List[str]
    content_gaps: List[str]
    content_strengths: List[str]
    content_frequency: str  # high, medium, low
    avg_content_length: int
    content_tone: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "topic_clusters": list(self.topic_clusters),
            "content_gaps": list(self.content_gaps),
            "content_strengths": list(self.content_strengths),
            "content_frequency": self.content_frequency,
            "avg_content_length": self.avg_content_length,
            "content_tone": self.content_tone,
        }


@dataclass
class SEOPerformance:
    ranking_keywords: int
    top_ranking_topics: List[str]
    keyword_gaps: List[str]
    backlink_profile: str  # strong, moderate, weak
    technical_seo: str  # excellent, good, fair, poor

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ranking_keywords": self.ranking_keywords,
            "top_ranking_topics": list(self.top_ranking_topics),
            "keyword_gaps": list(self.keyword_gaps),
            "backlink_profile": self.backlink_profile,
            "technical_seo": self.technical_seo,
        }


@dataclass
class MarketPosition:
    unique_value_props: List[str]
    differentiators: List[str]
    target_audience: List[str]
    pricing_position: str  # premium, mid-range, budget
    service_areas: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unique_value_props": list(self.unique_value_props),
            "differentiators": list(self.differentiators),
            "target_audience": list(self.target_audience),
            "pricing_position": self.pricing_position,
            "service_areas": list(self.service_areas),
        }


@dataclass
class ContentOpportunities:
    underserved_topics: List[str]
    seasonal_opportunities: List[str]
    local_intent_gaps: List[str]
    question_based_content: List[str]
    comparison_opportunities: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "underserved_topics": list(self.underserved_topics),
            "seasonal_opportunities": list(self.seasonal_opportunities),
            "local_intent_gaps": list(self.local_intent_gaps),
            "question_based_content": list(self.question_based_content),
            "comparison_opportunities": list(self.comparison_opportunities),
        }


@dataclass
class StrategicInsights:
    competitive_advantages: List[str]
    weaknesses: List[str]
    market_opportunities: List[str]
    threats: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "competitive_advantages": list(self.competitive_advantages),
            "weaknesses": list(self.weaknesses),
            "market_opportunities": list(self.market_opportunities),
            "threats": list(self.threats),
        }


@dataclass
class CompetitorAnalysis:
    """Full analysis of one competitor."""
    competitor_info: CompetitorInfo
    content_strategy: ContentStrategy
    seo_performance: SEOPerformance
    market_position: MarketPosition
    content_opportunities: ContentOpportunities
    strategic_insights: StrategicInsights
    advantages: List[CompetitiveAdvantage] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "competitor_info": self.competitor_info.to_dict(),
            "content_strategy": self.content_strategy.to_dict(),
            "seo_performance": self.seo_performance.to_dict(),
            "market_position": self.market_position.to_dict(),
            "content_opportunities": self.content_opportunities.to_dict(),
            "strategic_insights": self.strategic_insights.to_dict(),
            "advantages": [adv.to_dict() for adv in self.advantages],
        }


# =============================================================================
# SCORING HELPERS
# =============================================================================

def _tier(value: float, tiers, default: str) -> str:
    """First label whose threshold the value reaches."""
    for threshold, label in tiers:
        if value >= threshold:
            return label
    return default


def extract_company_name(website: WebsiteAnalysisResult) -> str:
    """Homepage title text before the first separator, else the domain."""
    title = website.crawled_pages[0].title if website.crawled_pages else ""
    match = re.match(r'^([^|–-]+)', title or "")
    name = match.group(1).strip() if match else ""
    return name or website.domain


def extract_company_description(website: WebsiteAnalysisResult) -> str:
    """First reasonably sized sentence of the homepage."""
    homepage = next((p for p in website.crawled_pages if p.url == website.url), None)
    if homepage is None:
        return ""

    for sentence in split_sentences(homepage.content or ""):
        if 50 < len(sentence) < 200:
            return sentence.strip()

    return ""


def estimate_traffic(website: WebsiteAnalysisResult) -> int:
    """
    Estimate monthly traffic from content volume and linking quality.

    Args:
        website: Site snapshot

    Returns:
        int: Estimated visits, at least MIN_ESTIMATED_TRAFFIC
    """
    content_score = website.page_count * TRAFFIC_PER_PAGE
    quality_score = website.linking_score * TRAFFIC_PER_LINKING_POINT
    return int(round(max(content_score + quality_score, MIN_ESTIMATED_TRAFFIC)))


def calculate_authority_score(website: WebsiteAnalysisResult) -> float:
    """
    Estimate domain authority.

    Linking score (50 when unknown) plus a content-volume bonus and a
    word-count bonus.

    Args:
        website: Site snapshot

    Returns:
        float: Authority score (0-100)
    """
    linking = website.internal_linking_score
    if linking is None:
        linking = DEFAULT_LINKING_SCORE

    content_bonus = min(website.page_count * 2, MAX_CONTENT_BONUS)
    quality_bonus = 20 if website.total_word_count > LARGE_SITE_WORDS else 10

    return clamp(linking + content_bonus + quality_bonus)


def identify_topic_clusters(topics: List[str]) -> List[str]:
    """
    Bucket topics by shared long words.

    Args:
        topics: Site topics

    Returns:
        list: Shared words of the largest buckets (at least two topics each)
    """
    buckets: Dict[str, List[str]] = {}
    for topic in topics:
        for word in topic.lower().split():
            if len(word) >= TOPIC_CLUSTER_MIN_WORD_LENGTH:
                buckets.setdefault(word, []).append(topic)

    ranked = sorted(
        ((word, members) for word, members in buckets.items() if len(members) >= 2),
        key=lambda item: len(item[1]),
        reverse=True,
    )
    return [word for word, _ in ranked[:MAX_TOPIC_CLUSTERS]]


def _two_way_match(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return a in b or b in a


def find_unmatched_topics(candidates: List[str], topics: List[str]) -> List[str]:
    """Candidates with no two-way substring match among the topics."""
    topics = [t for t in topics if t]
    return [
        candidate for candidate in candidates
        if not any(_two_way_match(candidate, topic) for topic in topics)
    ]


def extract_keywords(website: WebsiteAnalysisResult) -> List[str]:
    """
    Most frequent content words.

    Args:
        website: Site snapshot

    Returns:
        list: Up to MAX_KEYWORDS words seen at least KEYWORD_MIN_FREQUENCY times
    """
    text = re.sub(r'[^\w\s]', ' ', website.all_content(lower=True))
    counts = Counter(word for word in text.split() if len(word) >= KEYWORD_MIN_LENGTH)

    frequent = [(word, count) for word, count in counts.items() if count >= KEYWORD_MIN_FREQUENCY]
    frequent.sort(key=lambda item: item[1], reverse=True)

    return [word for word, _ in frequent[:MAX_KEYWORDS]]


def assess_technical_seo(website: WebsiteAnalysisResult) -> str:
    """Tier from issue count and internal linking score."""
    issues = len(website.technical_issues)
    structure = website.linking_score

    for max_issues, min_linking, label in TECHNICAL_SEO_TIERS:
        if issues <= max_issues and structure >= min_linking:
            return label
    return "poor"


def assess_pricing_position(offerings: BusinessOfferings) -> str:
    """Majority vote of premium vs budget services; ties are mid-range."""
    premium = sum(1 for s in offerings.services if s.price_indicator == "premium")
    budget = sum(1 for s in offerings.services if s.price_indicator == "budget")

    if premium > budget:
        return "premium"
    if budget > premium:
        return "budget"
    return "mid-range"


def average_content_length(website: WebsiteAnalysisResult) -> int:
    if not website.crawled_pages:
        return 0
    total = sum(len((page.content or "").split()) for page in website.crawled_pages)
    return round(total / website.page_count)


def find_questions(website: WebsiteAnalysisResult) -> List[str]:
    """Question sentences in the site's content."""
    questions = re.findall(r'[^.!?]*\?', website.all_content())
    return [q.strip() for q in questions if q.strip()][:MAX_QUESTIONS]


# =============================================================================
# ANALYZER
# =============================================================================

class CompetitorAnalyzer:
    """
    Analyzes one competitor site against our own.

    Uses the offering extractor and brand voice analyzer as collaborators.
    """

    def __init__(
        self,
        extractor: Optional[OfferingExtractor] = None,
        voice_analyzer: Optional[BrandVoiceAnalyzer] = None,
    ):
        self.extractor = extractor or OfferingExtractor()
        self.voice_analyzer = voice_analyzer or BrandVoiceAnalyzer()

    def analyze(
        self,
        competitor: WebsiteAnalysisResult,
        own: WebsiteAnalysisResult,
        own_offerings: Optional[BusinessOfferings] = None,
    ) -> CompetitorAnalysis:
        """
        Analyze a competitor.

        Args:
            competitor: Competitor site snapshot
            own: Our site snapshot
            own_offerings: Our offerings, extracted here if not given

        Returns:
            CompetitorAnalysis
        """
        offerings = self.extractor.extract(competitor)
        own_offerings = own_offerings or self.extractor.extract(own)
        voice = self.voice_analyzer.analyze(competitor)

        analysis = CompetitorAnalysis(
            competitor_info=self._competitor_info(competitor),
            content_strategy=self._content_strategy(competitor, voice),
            seo_performance=self._seo_performance(competitor, own),
            market_position=self._market_position(offerings, voice),
            content_opportunities=self._content_opportunities(competitor, own, offerings),
            strategic_insights=self._strategic_insights(competitor, own, offerings),
            advantages=self.analyze_advantages(competitor, offerings, own_offerings),
        )

        logger.info(
            f"Analyzed competitor {competitor.domain}: authority "
            f"{analysis.competitor_info.authority_score}, {len(analysis.advantages)} advantages"
        )

        return analysis

    def _competitor_info(self, website: WebsiteAnalysisResult) -> CompetitorInfo:
        return CompetitorInfo(
            domain=website.domain,
            name=extract_company_name(website),
            description=extract_company_description(website),
            estimated_traffic=estimate_traffic(website),
            authority_score=calculate_authority_score(website),
        )

    def _content_strategy(self, website: WebsiteAnalysisResult, voice: BrandVoiceProfile) -> ContentStrategy:
        topics = website.topics

        return ContentStrategy(
            topic_clusters=identify_topic_clusters(topics),
            content_gaps=find_unmatched_topics(EXPECTED_TOPICS, topics),
            content_strengths=[f"{topic} (comprehensive coverage)" for topic in topics[:MAX_CONTENT_STRENGTHS]],
            content_frequency=_tier(website.page_count, CONTENT_FREQUENCY_TIERS, "low"),
            avg_content_length=average_content_length(website),
            content_tone=voice.primary_tone,
        )

    def _seo_performance(self, competitor: WebsiteAnalysisResult, own: WebsiteAnalysisResult) -> SEOPerformance:
        competitor_keywords = extract_keywords(competitor)
        own_keywords = set(extract_keywords(own))

        return SEOPerformance(
            ranking_keywords=len(competitor_keywords),
            top_ranking_topics=competitor_keywords[:MAX_TOP_RANKING_TOPICS],
            keyword_gaps=[k for k in competitor_keywords if k not in own_keywords],
            backlink_profile=_tier(calculate_authority_score(competitor), BACKLINK_TIERS, "weak"),
            technical_seo=assess_technical_seo(competitor),
        )

    def _market_position(self, offerings: BusinessOfferings, voice: BrandVoiceProfile) -> MarketPosition:
        differentiators = list(offerings.unique_selling_points)
        if voice.primary_tone == "professional":
            differentiators.append("Professional brand voice")
        differentiators.extend(voice.competitive_differentiators)

        return MarketPosition(
            unique_value_props=list(offerings.unique_selling_points),
            differentiators=differentiators[:MAX_DIFFERENTIATORS],
            target_audience=list(offerings.target_audiences),
            pricing_position=assess_pricing_position(offerings),
            service_areas=list(offerings.service_areas),
        )

    def _content_opportunities(
        self,
        competitor: WebsiteAnalysisResult,
        own: WebsiteAnalysisResult,
        offerings: BusinessOfferings,
    ) -> ContentOpportunities:
        competitor_topics = lower_set(competitor.topics)
        competitor_content = competitor.all_content(lower=True)
        own_content = own.all_content(lower=True)
        offers_local = any(s.local_service for s in offerings.services)

        return ContentOpportunities(
            underserved_topics=ordered_unique(
                t for t in own.topics if t.lower() not in competitor_topics
            ),
            seasonal_opportunities=[
                k for k in SEASONAL_KEYWORDS if offers_local and k not in competitor_content
            ],
            local_intent_gaps=[
                i for i in LOCAL_INTENT_INDICATORS if i in competitor_content and i not in own_content
            ],
            question_based_content=find_questions(competitor),
            comparison_opportunities=[
                f"{service.name} vs alternatives comparison"
                for service in offerings.services[:MAX_COMPARISON_SERVICES]
            ],
        )

    def _strategic_insights(
        self,
        competitor: WebsiteAnalysisResult,
        own: WebsiteAnalysisResult,
        offerings: BusinessOfferings,
    ) -> StrategicInsights:
        advantages = []
        if competitor.page_count > own.page_count:
            advantages.append("Larger content library")
        if competitor.linking_score > own.linking_score:
            advantages.append("Better internal linking structure")

        weaknesses = []
        if len(competitor.technical_issues) > 3:
            weaknesses.append("Technical SEO issues")
        if competitor.page_count < 10:
            weaknesses.append("Limited content volume")

        opportunities = []
        if offerings.emergency_services:
            opportunities.append("Emergency services market")
        if any(s.local_service for s in offerings.services):
            opportunities.append("Local service expansion")

        threats = []
        if competitor.linking_score > 80:
            threats.append("Strong SEO authority")
        if competitor.page_count > 50:
            threats.append("Extensive content coverage")

        return StrategicInsights(
            competitive_advantages=advantages,
            weaknesses=weaknesses,
            market_opportunities=opportunities,
            threats=threats,
        )

    # -------------------------------------------------------------------------
    # Competitive advantages
    # -------------------------------------------------------------------------

    def analyze_advantages(
        self,
        competitor: WebsiteAnalysisResult,
        offerings: BusinessOfferings,
        own_offerings: BusinessOfferings,
    ) -> List[CompetitiveAdvantage]:
        """
        Detect competitor advantages from indicator vocabularies and offerings.

        Args:
            competitor: Competitor site snapshot
            offerings: Competitor offerings
            own_offerings: Our offerings

        Returns:
            list: CompetitiveAdvantage records, highest impact first
        """
        content = competitor.all_content(lower=True)

        advantages = []
        advantages.extend(self._quality_advantages(offerings, content))
        advantages.extend(self._pricing_advantages(offerings, own_offerings, content))
        advantages.extend(self._expertise_advantages(offerings, content))
        advantages.extend(self._coverage_advantages(offerings, own_offerings))
        advantages.extend(self._indicator_advantage(
            "technology", TECHNOLOGY_INDICATORS, content,
            "Advanced technology and equipment", "medium",
            "Focus on proven methods and customer service over technology",
        ))
        advantages.extend(self._indicator_advantage(
            "customer_service", CUSTOMER_SERVICE_INDICATORS, content,
            "Strong customer service focus", "medium",
            "Highlight unique customer service approaches and personalization",
        ))
        advantages.extend(self._indicator_advantage(
            "speed", SPEED_INDICATORS, content,
            "Fast service and quick response times", "high",
            "Emphasize quality over speed and thorough service",
        ))

        advantages.sort(key=lambda adv: IMPACT_ORDER.get(adv.impact_level, 0), reverse=True)

        return advantages

    def _indicator_advantage(
        self,
        advantage_type: str,
        indicators: List[str],
        content: str,
        advantage: str,
        impact: str,
        counter: str,
    ) -> List[CompetitiveAdvantage]:
        found = [i for i in indicators if i in content]
        if len(found) < ADVANTAGE_MIN_HITS[advantage_type]:
            return []

        return [CompetitiveAdvantage(
            type=advantage_type,
            advantage=advantage,
            evidence=found[:4],
            impact_level=impact,
            targetable=True,
            counter_strategy=counter,
        )]

    def _quality_advantages(self, offerings: BusinessOfferings, content: str) -> List[CompetitiveAdvantage]:
        advantages = []

        found = [i for i in QUALITY_INDICATORS if i in content]
        if len(found) >= ADVANTAGE_MIN_HITS["service_quality"]:
            advantages.append(CompetitiveAdvantage(
                type="service_quality",
                advantage="Strong quality credentials and guarantees",
                evidence=found[:5],
                impact_level="high",
                counter_strategy="Highlight unique quality aspects and differentiators",
            ))

        certified = [s.name for s in offerings.services if s.quality_indicators]
        if certified:
            advantages.append(CompetitiveAdvantage(
                type="service_quality",
                advantage="Service-specific quality certifications",
                evidence=certified,
                impact_level="medium",
                counter_strategy="Create comparison content showing quality differences",
            ))

        return advantages

    def _pricing_advantages(
        self,
        offerings: BusinessOfferings,
        own_offerings: BusinessOfferings,
        content: str,
    ) -> List[CompetitiveAdvantage]:
        found = [i for i in PRICING_INDICATORS if i in content]
        if len(found) < ADVANTAGE_MIN_HITS["pricing"]:
            return []

        competitor_position = assess_pricing_position(offerings)
        own_position = assess_pricing_position(own_offerings)

        impact = "medium"
        if competitor_position == "budget" and own_position == "premium":
            impact = "critical"
        elif competitor_position == "budget" and own_position == "mid-range":
            impact = "high"

        if impact == "critical":
            counter = "Create value-focused content justifying premium positioning"
        else:
            counter = "Develop comparison content highlighting value vs price"

        return [CompetitiveAdvantage(
            type="pricing",
            advantage=f"Competitive pricing positioning ({competitor_position})",
            evidence=found[:4],
            impact_level=impact,
            counter_strategy=counter,
        )]

    def _expertise_advantages(self, offerings: BusinessOfferings, content: str) -> List[CompetitiveAdvantage]:
        advantages = []

        found = [i for i in EXPERTISE_INDICATORS if i in content]
        if len(found) >= ADVANTAGE_MIN_HITS["expertise"]:
            advantages.append(CompetitiveAdvantage(
                type="expertise",
                advantage="Strong expertise and experience credentials",
                evidence=found[:4],
                impact_level="medium",
                counter_strategy="Highlight unique expertise areas and specializations",
            ))

        specialized = [
            s.name for s in offerings.services
            if s.specialization or "specialized" in s.categories
        ]
        if specialized:
            advantages.append(CompetitiveAdvantage(
                type="expertise",
                advantage="Specialized service offerings",
                evidence=specialized,
                impact_level="high",
                counter_strategy="Create content addressing niche vs general service trade-offs",
            ))

        return advantages

    def _coverage_advantages(
        self,
        offerings: BusinessOfferings,
        own_offerings: BusinessOfferings,
    ) -> List[CompetitiveAdvantage]:
        advantages = []

        if len(offerings.service_areas) > len(own_offerings.service_areas):
            advantages.append(CompetitiveAdvantage(
                type="coverage",
                advantage="Broader service area coverage",
                evidence=offerings.service_areas[:5],
                impact_level="medium",
                counter_strategy="Emphasize quality of service in focused areas",
            ))

        if len(offerings.services) > len(own_offerings.services) * SERVICE_RANGE_RATIO:
            advantages.append(CompetitiveAdvantage(
                type="coverage",
                advantage="Comprehensive service range",
                evidence=[
                    f"Offers {len(offerings.services)} services vs {len(own_offerings.services)}"
                ],
                impact_level="medium",
                counter_strategy="Create content on depth vs breadth of services",
            ))

        emergency = offerings.emergency_services
        if any("24/7" in (s.availability or "") for s in emergency):
            advantages.append(CompetitiveAdvantage(
                type="coverage",
                advantage="24/7 emergency service availability",
                evidence=[s.name for s in emergency],
                impact_level="high",
                counter_strategy="Highlight response time and service quality during business hours",
            ))

        return advantages
