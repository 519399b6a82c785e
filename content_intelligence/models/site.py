"""
Website snapshot models.

These are the crawler's output as seen by the engine. The engine never
mutates them; `from_dict` accepts both snake_case and the crawler's
camelCase keys and fills anything missing with empty defaults so one
malformed page cannot abort the analysis of the rest.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List

from content_intelligence.utils import pick


def _to_int(value: Any, fallback: int) -> int:
    """Integer crawler field, or the fallback when the value is missing or not numeric."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def _to_float(value: Any, fallback: Optional[float]) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return fallback


@dataclass
class CrawledPage:
    """A single crawled page."""
    url: str
    title: str = ""
    content: str = ""
    headings: Dict[str, List[str]] = field(default_factory=dict)
    internal_links: List[str] = field(default_factory=list)
    word_count: int = 0
    meta_description: str = ""
    external_links: List[str] = field(default_factory=list)

    @property
    def h1(self) -> List[str]:
        return self.headings.get("h1") or []

    @property
    def h2(self) -> List[str]:
        return self.headings.get("h2") or []

    def heading_text(self) -> str:
        """All headings joined in level order."""
        parts = []
        for level in sorted(self.headings):
            parts.extend(self.headings.get(level) or [])
        return " ".join(parts)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CrawledPage":
        """Build a page from crawler output, tolerating missing fields."""
        raw_headings = data.get("headings") or {}
        headings = {}
        if isinstance(raw_headings, dict):
            for level, values in raw_headings.items():
                headings[str(level)] = [str(v) for v in (values or []) if v is not None]

        content = data.get("content") or ""
        word_count = _to_int(pick(data, "word_count", "wordCount"), len(content.split()))

        return cls(
            url=data.get("url") or "",
            title=data.get("title") or "",
            content=content,
            headings=headings,
            internal_links=list(pick(data, "internal_links", "internalLinks", default=[])),
            word_count=word_count,
            meta_description=pick(data, "meta_description", "metaDescription", default=""),
            external_links=list(pick(data, "external_links", "externalLinks", default=[])),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "url": self.url,
            "title": self.title,
            "meta_description": self.meta_description,
            "headings": {level: list(values) for level, values in self.headings.items()},
            "content": self.content,
            "word_count": self.word_count,
            "internal_links": list(self.internal_links),
            "external_links": list(self.external_links),
        }


@dataclass
class SiteKeyword:
    """Keyword frequency entry computed by the crawler."""
    keyword: str
    frequency: int = 0
    density: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SiteKeyword":
        return cls(
            keyword=data.get("keyword") or "",
            frequency=_to_int(data.get("frequency"), 0),
            density=_to_float(data.get("density"), 0.0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"keyword": self.keyword, "frequency": self.frequency, "density": self.density}


@dataclass
class TechnicalIssue:
    """Technical SEO issue found during the crawl."""
    severity: str  # low, medium, high
    description: str = ""
    type: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TechnicalIssue":
        return cls(
            severity=(data.get("severity") or "low").lower(),
            description=data.get("description") or "",
            type=data.get("type") or "",
            url=data.get("url") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "url": self.url,
            "severity": self.severity,
            "description": self.description,
        }


@dataclass
class WebsiteAnalysisResult:
    """Crawl snapshot of one site (own or competitor)."""
    url: str
    domain: str
    crawled_pages: List[CrawledPage] = field(default_factory=list)
    topics: List[str] = field(default_factory=list)
    keywords: List[SiteKeyword] = field(default_factory=list)
    total_word_count: int = 0
    internal_linking_score: Optional[float] = None
    technical_issues: List[TechnicalIssue] = field(default_factory=list)
    crawled_at: str = ""

    @property
    def page_count(self) -> int:
        return len(self.crawled_pages)

    @property
    def linking_score(self) -> float:
        """Internal linking score with a missing value read as 0."""
        return self.internal_linking_score or 0.0

    def all_content(self, lower: bool = False) -> str:
        """Content of every page joined with spaces."""
        text = " ".join(page.content for page in self.crawled_pages)
        return text.lower() if lower else text

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebsiteAnalysisResult":
        """Build a snapshot from crawler/persistence output."""
        pages = [
            CrawledPage.from_dict(page)
            for page in (pick(data, "crawled_pages", "crawledPages", default=[]))
            if isinstance(page, dict)
        ]
        total_words = _to_int(
            pick(data, "total_word_count", "totalWordCount"),
            sum(page.word_count for page in pages),
        )
        linking = _to_float(pick(data, "internal_linking_score", "internalLinkingScore"), None)

        return cls(
            url=data.get("url") or "",
            domain=data.get("domain") or "",
            crawled_pages=pages,
            topics=[str(t) for t in (data.get("topics") or []) if t is not None],
            keywords=[SiteKeyword.from_dict(k) for k in (data.get("keywords") or []) if isinstance(k, dict)],
            total_word_count=total_words,
            internal_linking_score=linking,
            technical_issues=[
                TechnicalIssue.from_dict(issue)
                for issue in (pick(data, "technical_issues", "technicalIssues", default=[]))
                if isinstance(issue, dict)
            ],
            crawled_at=pick(data, "crawled_at", "crawledAt", default=""),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "url": self.url,
            "domain": self.domain,
            "crawled_pages": [page.to_dict() for page in self.crawled_pages],
            "topics": list(self.topics),
            "keywords": [kw.to_dict() for kw in self.keywords],
            "total_word_count": self.total_word_count,
            "internal_linking_score": self.internal_linking_score,
            "technical_issues": [issue.to_dict() for issue in self.technical_issues],
            "crawled_at": self.crawled_at,
        }
