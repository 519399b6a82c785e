"""
Content Intelligence Module

Deterministic content analysis over crawled website snapshots:
- Content gaps against essential, industry and competitor topics
- Topic clusters with suggested pages and linking opportunities
- Internal linking suggestions for a target topic
- SEO insights, keyword opportunities and summary scores

Every analysis is a pure function of its inputs; nothing is cached
between calls.
"""

__version__ = "0.1.0"

from content_intelligence.exceptions import (
    ContentIntelError,
    AuthRequiredError,
    AnalysisNotFoundError,
    ConfigurationError,
)
from content_intelligence.models import (
    CrawledPage,
    SiteKeyword,
    TechnicalIssue,
    WebsiteAnalysisResult,
)

__all__ = [
    "ContentIntelError",
    "AuthRequiredError",
    "AnalysisNotFoundError",
    "ConfigurationError",
    "CrawledPage",
    "SiteKeyword",
    "TechnicalIssue",
    "WebsiteAnalysisResult",
]
