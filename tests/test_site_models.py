"""
Tests for crawl snapshot parsing.

Run with: python3 -m pytest tests/test_site_models.py -v
"""

from content_intelligence.models import CrawledPage, SiteKeyword, WebsiteAnalysisResult


class TestCrawledPageFromDict:
    """Test tolerant page parsing."""

    def test_non_numeric_word_count_falls_back_to_content(self):
        page = CrawledPage.from_dict({"url": "https://a.com", "content": "one two three", "wordCount": "n/a"})

        assert page.word_count == 3

    def test_numeric_string_word_count(self):
        page = CrawledPage.from_dict({"url": "https://a.com", "content": "one", "word_count": "42"})

        assert page.word_count == 42

    def test_missing_fields(self):
        page = CrawledPage.from_dict({"title": None, "headings": {"h2": ["Tips", None]}})

        assert page.url == ""
        assert page.title == ""
        assert page.word_count == 0
        assert page.h1 == []
        assert page.h2 == ["Tips"]


class TestWebsiteAnalysisResultFromDict:
    """Test tolerant snapshot parsing."""

    def test_bad_numbers_do_not_abort_the_load(self):
        site = WebsiteAnalysisResult.from_dict({
            "url": "https://a.com",
            "domain": "a.com",
            "crawledPages": [
                {"url": "https://a.com", "content": "roof repair today", "wordCount": "n/a"},
                {"url": "https://a.com/about", "content": "about us", "wordCount": 2},
            ],
            "totalWordCount": "unknown",
            "internalLinkingScore": "high",
            "keywords": [{"keyword": "roof", "frequency": "many", "density": "?"}],
        })

        assert [p.word_count for p in site.crawled_pages] == [3, 2]
        assert site.total_word_count == 5
        assert site.internal_linking_score is None
        assert site.keywords == [SiteKeyword(keyword="roof", frequency=0, density=0.0)]

    def test_numeric_strings(self):
        site = WebsiteAnalysisResult.from_dict({
            "url": "https://a.com",
            "domain": "a.com",
            "total_word_count": "120",
            "internal_linking_score": "72.5",
        })

        assert site.total_word_count == 120
        assert site.internal_linking_score == 72.5

    def test_to_dict_keys(self):
        data = WebsiteAnalysisResult(url="https://a.com", domain="a.com").to_dict()

        assert set(data) == {
            "url",
            "domain",
            "crawled_pages",
            "topics",
            "keywords",
            "total_word_count",
            "internal_linking_score",
            "technical_issues",
            "crawled_at",
        }
