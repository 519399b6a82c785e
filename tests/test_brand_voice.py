"""
Tests for brand voice profiling.

Run with: python3 -m pytest tests/test_brand_voice.py -v
"""

import pytest

from competitor_intel.services.brand_voice import BrandVoiceAnalyzer, analyze_brand_voice


@pytest.fixture
def voice_of(site_factory, page_factory):
    """Profile a single-page site built from the given copy."""
    def build(content, title=""):
        page = page_factory("https://brand.com", title=title, content=content)
        return analyze_brand_voice(site_factory("brand.com", pages=[page]))
    return build


class TestTone:
    """Test tone scoring and ranking."""

    def test_tone_scores(self):
        scores = BrandVoiceAnalyzer().tone_scores("Expert, certified, quality solutions.")

        assert scores["professional"] == 4
        assert scores["casual"] == 0

    def test_casual_primary(self, voice_of):
        profile = voice_of("Hey folks, this is awesome and easy. Cool stuff, yeah.")

        assert profile.primary_tone == "casual"
        assert profile.formality_level == "casual"

    def test_silent_copy_defaults(self, voice_of):
        profile = voice_of("")

        assert profile.primary_tone == "professional"
        assert profile.secondary_tones == ["casual", "friendly", "authoritative"]
        assert profile.formality_level == "semi-formal"
        assert profile.perspective == "mixed"
        assert profile.uses_questions is False


class TestFormalityAndPerspective:
    """Test formality level and writing perspective."""

    def test_formal(self):
        text = "Furthermore, the results are proven. Moreover, we act; therefore it works."

        assert BrandVoiceAnalyzer().formality_level(text) == "formal"

    @pytest.mark.parametrize("text,expected", [
        ("We help our clients and we listen to us.", "first-person"),
        ("You will love your new roof. You deserve it.", "second-person"),
        ("They fixed their roof and it held.", "third-person"),
        ("Nothing here.", "mixed"),
    ])
    def test_perspective(self, text, expected):
        assert BrandVoiceAnalyzer().perspective(text) == expected


class TestCharacteristics:
    """Test voice characteristics and differentiators."""

    def test_statistics_and_testimonials(self, voice_of):
        profile = voice_of("98% of customers leave a five-star review. Why wait?")

        assert profile.uses_statistics is True
        assert profile.uses_testimonials is True
        assert profile.uses_questions is True
        assert profile.competitive_differentiators == [
            "Customer testimonial integration",
            "Data-driven approach",
        ]

    def test_value_props_lead_differentiators(self, voice_of):
        profile = voice_of("We offer lifetime roof warranties, and more.")

        assert profile.unique_value_props == ["lifetime roof warranties"]
        assert profile.competitive_differentiators[0] == "lifetime roof warranties"

    def test_branded_terms(self, voice_of):
        profile = voice_of(
            "Acme Roofing Pros fixes roofs. Call Acme Roofing Pros today.",
            title="Acme Roofing Pros",
        )

        assert profile.branded_terms == ["Acme Roofing Pros"]
        assert "Unique branding: Acme Roofing Pros" in profile.to_dict()["competitive_differentiators"]
