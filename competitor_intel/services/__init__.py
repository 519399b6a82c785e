"""
Competitor Intelligence Services

Business logic for competitor analysis:
- Service/offering extraction
- Brand voice profiling
- Per-competitor analysis and competitive advantages
- Market-level intelligence report and counter topics
"""

from competitor_intel.services.service_extractor import (
    BusinessService,
    BusinessOfferings,
    OfferingExtractor,
    extract_business_offerings,
)
from competitor_intel.services.brand_voice import (
    BrandVoiceProfile,
    BrandVoiceAnalyzer,
    analyze_brand_voice,
)
from competitor_intel.services.competitor_analyzer import (
    CompetitiveAdvantage,
    CompetitorAnalysis,
    CompetitorAnalyzer,
    calculate_authority_score,
    estimate_traffic,
)
from competitor_intel.services.intelligence_report import (
    CompetitiveIntelligenceReport,
    CompetitorIntelligenceAnalyzer,
    CounterTopic,
    analyze_competitors,
    perform_competitor_analysis,
    generate_counter_topics,
)

__all__ = [
    "BusinessService",
    "BusinessOfferings",
    "OfferingExtractor",
    "extract_business_offerings",
    "BrandVoiceProfile",
    "BrandVoiceAnalyzer",
    "analyze_brand_voice",
    "CompetitiveAdvantage",
    "CompetitorAnalysis",
    "CompetitorAnalyzer",
    "calculate_authority_score",
    "estimate_traffic",
    "CompetitiveIntelligenceReport",
    "CompetitorIntelligenceAnalyzer",
    "CounterTopic",
    "analyze_competitors",
    "perform_competitor_analysis",
    "generate_counter_topics",
]
