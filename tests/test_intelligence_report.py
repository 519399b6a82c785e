"""
Competitive intelligence report and counter topic tests.

Run with: python3 -m pytest tests/test_intelligence_report.py -v
"""

from types import SimpleNamespace

import pytest

from competitor_intel.config import SEASONAL_PATTERNS, SWOT_OPPORTUNITIES, SWOT_THREATS
from competitor_intel.services.competitor_analyzer import CompetitiveAdvantage
from competitor_intel.services.intelligence_report import (
    CompetitorIntelligenceAnalyzer,
    analyze_competitors,
    generate_counter_topics,
    perform_competitor_analysis,
)


@pytest.fixture
def ranked_competitors(site_factory, page_factory):
    """Four competitors with distinct authority scores."""
    def competitor(name, linking):
        domain = name.lower().replace(" ", "") + ".com"
        pages = [
            page_factory(f"https://{domain}", title=f"{name} | Home", content="Roof repair."),
            page_factory(f"https://{domain}/about", title="About", content="About us."),
        ]
        return site_factory(domain, pages=pages, internal_linking_score=linking)

    return [
        competitor("Beta Roofing", 40),
        competitor("Alpha Roofing", 90),
        competitor("Delta Roofing", 10),
        competitor("Gamma Roofing", 70),
    ]


class TestMarketAnalysis:
    """Test market-level aggregation."""

    def test_market_leaders_and_size(self, own_site, ranked_competitors):
        report = analyze_competitors(own_site, ranked_competitors)
        market = report.market_analysis

        assert market["market_leaders"] == ["Alpha Roofing", "Gamma Roofing", "Beta Roofing"]
        # Alpha: 200 + 900; the rest fall back to the 1000 minimum
        assert market["total_market_size"] == 4100
        assert market["seasonal_patterns"] == SEASONAL_PATTERNS
        assert len(report.competitors) == 4

    def test_competitors_kept_in_input_order(self, own_site, ranked_competitors):
        report = analyze_competitors(own_site, ranked_competitors)

        assert [c.competitor_info.domain for c in report.competitors] == [
            "betaroofing.com",
            "alpharoofing.com",
            "deltaroofing.com",
            "gammaroofing.com",
        ]

    def test_local_market_dynamics(self, own_site, site_factory, page_factory):
        competitor = site_factory(
            "rival.com",
            pages=[page_factory("https://rival.com", title="Rival", content="Serving Austin and Round Rock.")],
        )

        market = analyze_competitors(own_site, [competitor], location="Austin").market_analysis

        assert market["local_market_dynamics"] == [
            "Austin market competition",
            "Strong local competition",
        ]

    def test_no_location(self, own_site, ranked_competitors):
        market = analyze_competitors(own_site, ranked_competitors).market_analysis

        assert market["local_market_dynamics"] == []


class TestGapsAndRecommendations:
    """Test competitive gaps, recommendations and SWOT."""

    def test_keyword_gaps_drive_recommendations(self, own_site, competitor_site):
        report = analyze_competitors(own_site, [competitor_site])

        assert "roofing" in report.competitive_gaps["keyword_gaps"]
        assert report.strategic_recommendations["topic_priorities"][0] == "roofing"
        assert any(
            line.startswith("Target missing keywords: roofing")
            for line in report.strategic_recommendations["content_strategy"]
        )

    def test_content_gaps_from_clusters(self, site_factory, competitor_site):
        own = site_factory("own.com", topics=["Gutters"])

        report = analyze_competitors(own, [competitor_site])

        assert report.competitive_gaps["content_gaps"] == ["repair"]
        assert "Address content gaps: repair" in report.strategic_recommendations["content_strategy"]

    def test_recommendations_cap_joined_gaps_at_three(self):
        gaps = {
            "content_gaps": ["repair", "gutter", "siding", "attic"],
            "service_gaps": [],
            "keyword_gaps": ["roofing", "shingles", "repair", "tips", "flashing", "attic"],
            "geographic_gaps": [],
        }

        recommendations = CompetitorIntelligenceAnalyzer()._recommendations(gaps)

        assert recommendations["content_strategy"] == [
            "Address content gaps: repair, gutter, siding",
            "Target missing keywords: roofing, shingles, repair",
        ]
        assert recommendations["topic_priorities"] == ["roofing", "shingles", "repair", "tips", "flashing"]

    def test_gaps_computed_once_per_report(self, monkeypatch, own_site, competitor_site):
        calls = []
        original = CompetitorIntelligenceAnalyzer._competitive_gaps

        def counting(self, *args):
            calls.append(args)
            return original(self, *args)

        monkeypatch.setattr(CompetitorIntelligenceAnalyzer, "_competitive_gaps", counting)

        report = analyze_competitors(own_site, [competitor_site])

        assert len(calls) == 1
        assert report.strategic_recommendations["topic_priorities"] == (
            report.competitive_gaps["keyword_gaps"][:5]
        )

    def test_swot(self, site_factory, page_factory):
        from content_intelligence.models import TechnicalIssue

        pages = [page_factory(f"https://own.com/{i}") for i in range(21)]
        own = site_factory(
            "own.com",
            pages=pages,
            internal_linking_score=75,
            technical_issues=[TechnicalIssue(severity="low")],
        )

        swot = analyze_competitors(own, []).swot_analysis

        assert swot["strengths"] == ["Strong internal linking structure", "Comprehensive content library"]
        assert swot["weaknesses"] == ["Technical SEO improvements needed"]
        assert swot["opportunities"] == SWOT_OPPORTUNITIES
        assert swot["threats"] == SWOT_THREATS


class TestPerformCompetitorAnalysis:
    """Test the placeholder own-site entry point."""

    def test_no_competitors(self):
        report = perform_competitor_analysis([])

        assert report.market_analysis["total_market_size"] == 0
        assert report.market_analysis["market_leaders"] == []
        assert report.swot_analysis["strengths"] == []
        assert report.competitor_advantages["critical_threats"] == []

    def test_with_competitors(self, ranked_competitors):
        report = perform_competitor_analysis(ranked_competitors, industry_context="roofing", location="Austin")

        assert report.market_analysis["market_leaders"][0] == "Alpha Roofing"
        assert report.market_analysis["local_market_dynamics"][0] == "Austin market competition"

    def test_to_dict(self, ranked_competitors):
        data = perform_competitor_analysis(ranked_competitors).to_dict()

        assert set(data) == {
            "competitors",
            "market_analysis",
            "competitive_gaps",
            "strategic_recommendations",
            "swot_analysis",
            "competitor_advantages",
        }
        assert len(data["competitors"]) == 4


class TestAdvantageAggregation:
    """Test grouping of competitor advantages."""

    def test_groups(self):
        critical = CompetitiveAdvantage(type="pricing", advantage="Cheap", impact_level="critical")
        high = CompetitiveAdvantage(type="speed", advantage="Fast", impact_level="high")
        low = CompetitiveAdvantage(type="expertise", advantage="Old", impact_level="low")
        analyses = [SimpleNamespace(advantages=[critical, high]), SimpleNamespace(advantages=[low])]

        groups = CompetitorIntelligenceAnalyzer()._aggregate_advantages(analyses)

        assert groups["critical_threats"] == [critical]
        assert groups["addressable_advantages"] == [high]
        assert groups["strategic_counters"] == []
        assert groups["comparison_opportunities"] == [critical, low]


class TestCounterTopics:
    """Test counter topic templates."""

    def test_critical_pricing_with_location(self):
        advantage = CompetitiveAdvantage(
            type="pricing",
            advantage="Competitive pricing positioning (budget)",
            impact_level="critical",
        )

        topics = generate_counter_topics([advantage], "Roofing", "homeowners", location="Austin")

        assert [t.topic for t in topics] == [
            "Why Premium Roofing Services Are Worth The Investment",
            "The True Cost of Cheap Roofing in Austin",
            "Roofing Price vs Value: What You're Really Paying For",
        ]
        assert [t.type for t in topics] == ["value_proposition", "counter", "comparison"]
        assert all(t.target_advantage == advantage.advantage for t in topics)

    def test_medium_pricing_without_location(self):
        advantage = CompetitiveAdvantage(type="pricing", advantage="Pricing", impact_level="medium")

        topics = generate_counter_topics([advantage], "Roofing", "homeowners")

        assert [t.topic for t in topics] == ["Roofing Price vs Value: What You're Really Paying For"]

    def test_quality_uses_value_props(self):
        advantage = CompetitiveAdvantage(type="service_quality", advantage="Strong quality credentials")

        topics = generate_counter_topics(
            [advantage], "Roofing", "homeowners", unique_value_props=["Lifetime Warranty"]
        )

        assert [t.topic for t in topics] == [
            "What Sets Top-Quality Roofing Services Apart",
            "Lifetime Warranty: The Roofing Quality Difference",
        ]

    def test_coverage_topics(self):
        areas = CompetitiveAdvantage(type="coverage", advantage="Broader service area coverage")
        emergency = CompetitiveAdvantage(type="coverage", advantage="24/7 emergency service availability")
        breadth = CompetitiveAdvantage(type="coverage", advantage="Comprehensive service range")

        topics = generate_counter_topics([areas, emergency, breadth], "Roofing", "homeowners")

        assert [t.topic for t in topics] == [
            "Local Roofing Expert: Better Than Large Service Areas",
            "Quality Roofing Service vs 24/7 Availability: What's More Important?",
        ]

    def test_generic_fallback(self):
        advantage = CompetitiveAdvantage(type="reputation", advantage="Famous Brand")

        topics = generate_counter_topics([advantage], "Roofing", "homeowners")

        assert len(topics) == 1
        assert topics[0].topic == "Choosing the Right Roofing: More Than Just Famous Brand"
        assert topics[0].to_dict()["search_intent"] == "informational"

    def test_two_topics_per_standard_type(self):
        for advantage_type in ("expertise", "speed", "customer_service", "technology"):
            advantage = CompetitiveAdvantage(type=advantage_type, advantage="Something")
            assert len(generate_counter_topics([advantage], "Roofing", "homeowners")) == 2
