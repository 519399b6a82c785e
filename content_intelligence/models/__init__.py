"""
Input models for the content intelligence engine.
"""

from content_intelligence.models.site import (
    CrawledPage,
    SiteKeyword,
    TechnicalIssue,
    WebsiteAnalysisResult,
)

__all__ = [
    "CrawledPage",
    "SiteKeyword",
    "TechnicalIssue",
    "WebsiteAnalysisResult",
]
