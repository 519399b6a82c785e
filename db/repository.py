"""
Crawl repository.

Loads and stores website crawl snapshots for the engine. Analyses are
scoped to their owning user; a lookup for another user's analysis
behaves as if it did not exist.

Usage:
    repo = CrawlRepository(DatabaseManager())
    analysis_id = repo.save_analysis_result(snapshot, user_id="user-1")
    pages = repo.get_crawled_pages(analysis_id)
"""

from typing import List, Optional

from sqlalchemy import select

from content_intelligence.exceptions import AnalysisNotFoundError
from content_intelligence.models.site import (
    CrawledPage,
    SiteKeyword,
    TechnicalIssue,
    WebsiteAnalysisResult,
)
from db.database_manager import DatabaseManager
from db.models import CrawledPageRecord, WebsiteAnalysisRecord
from runner.logging_setup import get_logger


def _page_from_record(record: CrawledPageRecord) -> CrawledPage:
    return CrawledPage(
        url=record.url or "",
        title=record.title or "",
        content=record.content or "",
        headings=dict(record.headings or {}),
        internal_links=list(record.internal_links or []),
        word_count=record.word_count or 0,
        meta_description=record.meta_description or "",
        external_links=list(record.external_links or []),
    )


class CrawlRepository:
    """Persistence boundary for website analyses and crawled pages."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
        self.logger = get_logger("crawl_repository")

    def get_website_analysis(self, website_analysis_id: int, user_id: str) -> Optional[WebsiteAnalysisRecord]:
        """
        Fetch an analysis owned by the user.

        Args:
            website_analysis_id: Analysis ID
            user_id: Owning user

        Returns:
            WebsiteAnalysisRecord, or None if missing or owned by someone else
        """
        with self.db_manager.get_session() as session:
            stmt = select(WebsiteAnalysisRecord).where(
                WebsiteAnalysisRecord.id == website_analysis_id,
                WebsiteAnalysisRecord.user_id == user_id,
            )
            return session.execute(stmt).scalar_one_or_none()

    def get_crawled_pages(self, website_analysis_id: int) -> List[CrawledPage]:
        """Pages of an analysis in crawl order."""
        with self.db_manager.get_session() as session:
            stmt = (
                select(CrawledPageRecord)
                .where(CrawledPageRecord.website_analysis_id == website_analysis_id)
                .order_by(CrawledPageRecord.id)
            )
            records = session.execute(stmt).scalars().all()
            return [_page_from_record(record) for record in records]

    def load_analysis_result(self, website_analysis_id: int, user_id: str) -> WebsiteAnalysisResult:
        """
        Load a full snapshot.

        Raises:
            AnalysisNotFoundError: If the analysis does not exist for the user
        """
        record = self.get_website_analysis(website_analysis_id, user_id)
        if record is None:
            raise AnalysisNotFoundError(website_analysis_id)

        pages = self.get_crawled_pages(website_analysis_id)

        return WebsiteAnalysisResult(
            url=record.url,
            domain=record.domain,
            crawled_pages=pages,
            topics=list(record.topics or []),
            keywords=[SiteKeyword.from_dict(k) for k in (record.keywords or [])],
            total_word_count=record.total_word_count or 0,
            internal_linking_score=record.internal_linking_score,
            technical_issues=[TechnicalIssue.from_dict(i) for i in (record.technical_issues or [])],
            crawled_at=record.crawled_at or "",
        )

    def save_analysis_result(self, result: WebsiteAnalysisResult, user_id: str) -> int:
        """
        Store a snapshot for a user.

        Args:
            result: Snapshot to store
            user_id: Owning user

        Returns:
            int: New analysis ID
        """
        with self.db_manager.get_session() as session:
            record = WebsiteAnalysisRecord(
                user_id=user_id,
                url=result.url,
                domain=result.domain,
                topics=list(result.topics),
                keywords=[k.to_dict() for k in result.keywords],
                total_word_count=result.total_word_count,
                internal_linking_score=result.internal_linking_score,
                technical_issues=[i.to_dict() for i in result.technical_issues],
                crawled_at=result.crawled_at,
            )
            for page in result.crawled_pages:
                record.pages.append(CrawledPageRecord(
                    url=page.url,
                    title=page.title,
                    meta_description=page.meta_description,
                    content=page.content,
                    headings={level: list(values) for level, values in page.headings.items()},
                    internal_links=list(page.internal_links),
                    external_links=list(page.external_links),
                    word_count=page.word_count,
                ))

            session.add(record)
            session.flush()
            analysis_id = record.id

        self.logger.info(
            f"Saved analysis {analysis_id} for {result.domain} ({result.page_count} pages)"
        )

        return analysis_id
