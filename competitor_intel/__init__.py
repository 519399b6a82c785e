"""
Competitor Intelligence Module

Analyzes competitor websites against our own site with:
- Offering and brand voice extraction
- Content strategy, SEO and market position comparisons
- Competitive advantages and counter content topics
- A market-level report with gaps, recommendations and SWOT

Shares the site models and text utilities of content_intelligence.
"""

__version__ = "0.1.0"

from competitor_intel.config import (
    EXPECTED_TOPICS,
    IMPACT_ORDER,
)

__all__ = [
    "EXPECTED_TOPICS",
    "IMPACT_ORDER",
]
