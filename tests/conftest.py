"""
Pytest configuration and shared fixtures for content intelligence tests.

Provides sample crawl snapshots, a site factory and an in-memory SQLite
repository.
"""

import pytest

from content_intelligence.models import CrawledPage, SiteKeyword, TechnicalIssue, WebsiteAnalysisResult
from db import CrawlRepository, DatabaseManager


# Test markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that touch the database"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def make_page(url, title="", content="", **kwargs):
    """Build a CrawledPage with a computed word count."""
    kwargs.setdefault("word_count", len(content.split()))
    return CrawledPage(url=url, title=title, content=content, **kwargs)


def make_site(domain, pages=None, topics=None, **kwargs):
    """Build a WebsiteAnalysisResult rooted at https://{domain}."""
    pages = pages or []
    kwargs.setdefault("total_word_count", sum(p.word_count for p in pages))
    return WebsiteAnalysisResult(
        url=f"https://{domain}",
        domain=domain,
        crawled_pages=pages,
        topics=topics or [],
        **kwargs,
    )


@pytest.fixture
def site_factory():
    """Factory for ad-hoc site snapshots."""
    return make_site


@pytest.fixture
def page_factory():
    """Factory for ad-hoc pages."""
    return make_page


@pytest.fixture
def own_site():
    """A small roofing site with two unrelated pages."""
    pages = [
        make_page(
            "https://acmeroofing.com",
            title="Acme Roofing | Roof Repair",
            content="We fix leaking roofs quickly for homeowners in Austin.",
        ),
        make_page(
            "https://acmeroofing.com/contact",
            title="Contact",
            content="Call our office today.",
        ),
    ]
    return make_site(
        "acmeroofing.com",
        pages=pages,
        topics=["Roof Repair", "Contact", "Gutters"],
        keywords=[
            SiteKeyword(keyword="roof", frequency=3, density=2.5),
            SiteKeyword(keyword="gutter", frequency=12, density=0.3),
        ],
        internal_linking_score=50,
    )


@pytest.fixture
def competitor_site():
    """A larger competitor with strong linking and a professional voice."""
    pages = [
        make_page(
            "https://rivalroofing.com",
            title="Rival Roofing | Austin Roofers",
            content=(
                "Rival Roofing has provided certified and licensed roof repair across Austin since 1998. "
                "We are insured and every job carries a warranty. Serving Austin and Round Rock. "
                "Need a new roof? Our expert roofers deliver quality results."
            ),
        ),
    ]
    for index in range(11):
        pages.append(make_page(
            f"https://rivalroofing.com/services/{index}",
            title=f"Roofing Guide {index}",
            content="Roofing tips for shingles and roofing repair. Shingles last longer with roofing care.",
        ))

    return make_site(
        "rivalroofing.com",
        pages=pages,
        topics=["Roof Repair", "Roof Replacement", "Shingle Repair", "Pricing"],
        internal_linking_score=85,
    )


@pytest.fixture
def site_with_issues():
    """Two thin pages and two high-severity technical issues."""
    pages = [
        make_page("https://thin.com/a", title="Alpha", content="alpha " * 200),
        make_page("https://thin.com/b", title="Beta", content="beta " * 200),
    ]
    return make_site(
        "thin.com",
        pages=pages,
        topics=["Alpha", "Beta"],
        technical_issues=[
            TechnicalIssue(severity="high", description="Missing title tags"),
            TechnicalIssue(severity="high", description="Broken canonical links"),
        ],
        internal_linking_score=60,
    )


# Database fixtures
@pytest.fixture
def db_manager():
    """In-memory SQLite database with all tables created."""
    manager = DatabaseManager("sqlite:///:memory:")
    manager.init_db()
    yield manager
    manager.close()


@pytest.fixture
def repository(db_manager):
    """Crawl repository over the in-memory database."""
    return CrawlRepository(db_manager)
