"""
Tests for the offering extractor.

Run with: python3 -m pytest tests/test_service_extractor.py -v
"""

import pytest

from competitor_intel.services.service_extractor import (
    BusinessService,
    OfferingExtractor,
    capitalize_words,
    extract_business_offerings,
)


@pytest.fixture
def repair_site(site_factory, page_factory):
    page = page_factory(
        "https://acme.com",
        title="Roof Repair Services",
        content="We offer emergency roof repair. Serving Austin and Round Rock. Homeowners trust us.",
    )
    return site_factory("acme.com", pages=[page])


class TestServiceExtraction:
    """Test service detection from content and titles."""

    def test_services_in_match_order(self, repair_site):
        offerings = OfferingExtractor().extract(repair_site)

        assert [s.name for s in offerings.services] == [
            "Emergency Roof Repair",
            "Emergency Roof",
            "Roof Repair",
        ]

    def test_service_details(self, repair_site):
        services = {s.name: s for s in extract_business_offerings(repair_site).services}

        roof_repair = services["Roof Repair"]
        assert roof_repair.category == "maintenance"
        assert roof_repair.categories == ["maintenance", "general"]
        assert roof_repair.urgency_level == "emergency"
        assert roof_repair.availability == "emergency"
        assert roof_repair.price_indicator == "mid-range"
        assert roof_repair.description == "We Offer Emergency Roof Repair"
        assert roof_repair.local_service is False
        assert roof_repair.specialization is None

        assert services["Emergency Roof"].category == "general"

    def test_emergency_services(self, repair_site):
        offerings = OfferingExtractor().extract(repair_site)

        assert len(offerings.emergency_services) == 3
        assert len(offerings.to_dict()["emergency_services"]) == 3

    def test_services_unique_case_insensitive(self, site_factory, page_factory):
        page = page_factory(
            "https://acme.com",
            title="Roof Repair Services",
            content="We offer roof repair. Roof repair done right.",
        )

        names = [s.name.lower() for s in OfferingExtractor().extract(site_factory("acme.com", pages=[page])).services]

        assert len(names) == len(set(names))
        assert names.count("roof repair") == 1

    def test_no_services(self, site_factory, page_factory):
        page = page_factory("https://quiet.com", title="Welcome", content="Hello there.")

        offerings = OfferingExtractor().extract(site_factory("quiet.com", pages=[page]))

        assert offerings.services == []
        assert offerings.business_type == "general business"


class TestSiteSignals:
    """Test site-wide positioning signals."""

    def test_positioning(self, repair_site):
        offerings = OfferingExtractor().extract(repair_site)

        assert offerings.business_type == "repair services"
        assert offerings.primary_categories == ["maintenance", "general"]
        assert offerings.service_areas == ["Austin and Round Rock"]
        assert offerings.target_audiences == ["homeowners"]
        assert offerings.value_propositions == ["Emergency Roof Repair"]
        assert offerings.unique_selling_points == []

    def test_empty_site(self, site_factory):
        offerings = OfferingExtractor().extract(site_factory("empty.com"))

        assert offerings.to_dict() == {
            "services": [],
            "business_type": "general business",
            "primary_categories": [],
            "value_propositions": [],
            "target_audiences": [],
            "service_areas": [],
            "emergency_services": [],
            "unique_selling_points": [],
        }


class TestHelpers:
    """Test small helpers."""

    def test_capitalize_words(self):
        assert capitalize_words("roof repair in austin") == "Roof Repair In Austin"

    def test_service_defaults(self):
        service = BusinessService(name="Gutter Cleaning")

        assert service.to_dict()["price_indicator"] == "mid-range"
        assert service.urgency_level == "routine"
