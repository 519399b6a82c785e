"""
Database models for the content intelligence engine using SQLAlchemy 2.0 style.

Models:
- WebsiteAnalysisRecord: Stored crawl snapshot of one site, owned by a user
- CrawledPageRecord: One crawled page belonging to a website analysis
"""

from typing import List, Optional

from sqlalchemy import (
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.types import JSON

# JSON with PostgreSQL variant for cross-database compatibility (SQLite tests + PostgreSQL production)
JSONType = JSON().with_variant(JSONB, "postgresql")


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class WebsiteAnalysisRecord(Base):
    """
    Crawl snapshot of one website.

    Attributes:
        id: Primary key
        user_id: Owner of the analysis
        url: Site root URL
        domain: Site domain
        topics: Ordered topic strings
        keywords: List of {keyword, frequency, density}
        total_word_count: Words across all pages
        internal_linking_score: 0-100, null when not measured
        technical_issues: List of {type, severity, description, url}
        crawled_at: Crawl timestamp as ISO text
    """

    __tablename__ = "website_analyses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)

    url: Mapped[str] = mapped_column(Text, nullable=False)
    domain: Mapped[str] = mapped_column(Text, index=True, nullable=False)

    topics: Mapped[Optional[list]] = mapped_column(JSONType, nullable=True)
    keywords: Mapped[Optional[list]] = mapped_column(JSONType, nullable=True)
    total_word_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    internal_linking_score: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    technical_issues: Mapped[Optional[list]] = mapped_column(JSONType, nullable=True)
    crawled_at: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    pages: Mapped[List["CrawledPageRecord"]] = relationship(
        back_populates="website_analysis",
        cascade="all, delete-orphan",
        order_by="CrawledPageRecord.id",
    )

    def __repr__(self) -> str:
        return f"<WebsiteAnalysisRecord(id={self.id}, domain='{self.domain}', user_id='{self.user_id}')>"


class CrawledPageRecord(Base):
    """
    One crawled page of a website analysis.

    Attributes:
        id: Primary key
        website_analysis_id: Owning analysis
        url: Page URL
        title: Page title
        meta_description: Meta description
        content: Plain-text content
        headings: {h1: [...], h2: [...], h3: [...]}
        internal_links: Internal link URLs
        external_links: External link URLs
        word_count: Words on the page
    """

    __tablename__ = "crawled_pages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    website_analysis_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("website_analyses.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    url: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    meta_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    headings: Mapped[Optional[dict]] = mapped_column(JSONType, nullable=True)
    internal_links: Mapped[Optional[list]] = mapped_column(JSONType, nullable=True)
    external_links: Mapped[Optional[list]] = mapped_column(JSONType, nullable=True)
    word_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    website_analysis: Mapped[WebsiteAnalysisRecord] = relationship(back_populates="pages")

    def __repr__(self) -> str:
        return f"<CrawledPageRecord(id={self.id}, url='{self.url}')>"
