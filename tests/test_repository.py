"""
Crawl repository tests against an in-memory SQLite database.

Run with: python3 -m pytest tests/test_repository.py -v
"""

import pytest

from content_intelligence.exceptions import AnalysisNotFoundError, ConfigurationError
from content_intelligence.models import SiteKeyword, TechnicalIssue
from content_intelligence.services.linking_suggestions import LinkingSuggestionEngine
from db import DatabaseManager, WebsiteAnalysisRecord


pytestmark = pytest.mark.integration


@pytest.fixture
def stored_site(site_factory, page_factory):
    pages = [
        page_factory(
            "https://acme.com",
            title="Acme Roofing",
            content="Roof repair and gutter cleaning in Austin.",
            headings={"h1": ["Acme Roofing"], "h2": ["Roof Repair"]},
            internal_links=["https://acme.com/blog"],
        ),
        page_factory(
            "https://acme.com/blog",
            title="Blog",
            content="Our roof repair process",
            meta_description="Roofing news",
        ),
    ]
    return site_factory(
        "acme.com",
        pages=pages,
        topics=["Roof Repair", "Gutters"],
        keywords=[SiteKeyword(keyword="roof", frequency=4, density=1.2)],
        technical_issues=[TechnicalIssue(severity="medium", description="Slow pages")],
        internal_linking_score=65,
        crawled_at="2024-05-01T12:00:00",
    )


class TestCrawlRepository:
    """Test saving and loading snapshots."""

    def test_round_trip(self, repository, stored_site):
        analysis_id = repository.save_analysis_result(stored_site, user_id="user-1")

        loaded = repository.load_analysis_result(analysis_id, "user-1")

        assert loaded.domain == "acme.com"
        assert loaded.topics == ["Roof Repair", "Gutters"]
        assert loaded.keywords[0].keyword == "roof"
        assert loaded.technical_issues[0].severity == "medium"
        assert loaded.internal_linking_score == 65
        assert loaded.total_word_count == stored_site.total_word_count
        assert loaded.crawled_at == "2024-05-01T12:00:00"
        assert [p.url for p in loaded.crawled_pages] == ["https://acme.com", "https://acme.com/blog"]

    def test_page_fields(self, repository, stored_site):
        analysis_id = repository.save_analysis_result(stored_site, user_id="user-1")

        home, blog = repository.get_crawled_pages(analysis_id)

        assert home.h2 == ["Roof Repair"]
        assert home.internal_links == ["https://acme.com/blog"]
        assert home.word_count == 7
        assert blog.meta_description == "Roofing news"

    def test_scoped_to_user(self, repository, stored_site):
        analysis_id = repository.save_analysis_result(stored_site, user_id="user-1")

        assert repository.get_website_analysis(analysis_id, "user-2") is None
        with pytest.raises(AnalysisNotFoundError):
            repository.load_analysis_result(analysis_id, "user-2")

    def test_unknown_id(self, repository):
        assert repository.get_website_analysis(999, "user-1") is None
        assert repository.get_crawled_pages(999) == []

    def test_pages_deleted_with_analysis(self, db_manager, repository, stored_site):
        analysis_id = repository.save_analysis_result(stored_site, user_id="user-1")

        with db_manager.get_session() as session:
            session.delete(session.get(WebsiteAnalysisRecord, analysis_id))

        assert repository.get_crawled_pages(analysis_id) == []


class TestLinkingOverRepository:
    """Test linking suggestions backed by stored pages."""

    def test_suggestions(self, repository, stored_site):
        analysis_id = repository.save_analysis_result(stored_site, user_id="user-1")
        engine = LinkingSuggestionEngine(repository)

        suggestions = engine.generate_internal_linking_suggestions(
            analysis_id, "roof repair", user_id="user-1"
        )

        assert any(s.source_url == "https://acme.com/blog" for s in suggestions)

    def test_other_users_analysis(self, repository, stored_site):
        analysis_id = repository.save_analysis_result(stored_site, user_id="user-1")
        engine = LinkingSuggestionEngine(repository)

        with pytest.raises(AnalysisNotFoundError):
            engine.generate_internal_linking_suggestions(analysis_id, "roof repair", user_id="user-2")


class TestDatabaseManager:
    """Test configuration handling."""

    def test_missing_database_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ConfigurationError):
            DatabaseManager()

    def test_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")

        manager = DatabaseManager()
        try:
            assert manager.database_url == "sqlite:///:memory:"
        finally:
            manager.close()

    def test_session_rolls_back_on_error(self, db_manager):
        with pytest.raises(RuntimeError):
            with db_manager.get_session() as session:
                session.add(WebsiteAnalysisRecord(user_id="user-1", url="https://x.com", domain="x.com"))
                raise RuntimeError("boom")

        with db_manager.get_session() as session:
            assert session.query(WebsiteAnalysisRecord).count() == 0
