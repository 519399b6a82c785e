"""
Brand Voice Analyzer

Reads a website's copy and profiles how it speaks:
- Tone scores, primary and secondary tones
- Formality level and writing perspective
- Voice characteristics (testimonials, statistics, questions)
- Competitive differentiators implied by the voice
"""

import re
import logging
from typing import Dict, List, Any
from dataclasses import dataclass, field

from competitor_intel.config import (
    TONE_INDICATORS,
    FORMALITY_INDICATORS,
    MAX_SECONDARY_TONES,
    MAX_DIFFERENTIATORS,
)
from content_intelligence.models.site import WebsiteAnalysisResult
from content_intelligence.utils import ordered_unique

logger = logging.getLogger(__name__)


UVP_PATTERNS = [
    r'(?:we offer|we provide|we deliver|we guarantee)\s+([^,.!?]+)',
    r'(?:unique|special|exclusive|only we)\s+([^,.!?]+)',
    r'(?:what makes us different|why choose us|our advantage)\s+is\s+([^,.!?]+)',
]

TESTIMONIAL_PATTERN = r'\b(?:testimonial|review|rating|customer says|what our clients say)\b'
STATISTICS_PATTERN = r'\d+%|\d+\s*(?:percent|million|billion|thousand)|\$\d+'
BRANDED_TERM_PATTERN = r'\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b'


@dataclass
class BrandVoiceProfile:
    """How a site talks to its customers."""
    primary_tone: str
    secondary_tones: List[str] = field(default_factory=list)
    tone_scores: Dict[str, int] = field(default_factory=dict)
    formality_level: str = "semi-formal"
    perspective: str = "mixed"
    uses_questions: bool = False
    uses_testimonials: bool = False
    uses_statistics: bool = False
    unique_value_props: List[str] = field(default_factory=list)
    branded_terms: List[str] = field(default_factory=list)
    competitive_differentiators: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary_tone": self.primary_tone,
            "secondary_tones": list(self.secondary_tones),
            "tone_scores": dict(self.tone_scores),
            "formality_level": self.formality_level,
            "perspective": self.perspective,
            "uses_questions": self.uses_questions,
            "uses_testimonials": self.uses_testimonials,
            "uses_statistics": self.uses_statistics,
            "unique_value_props": list(self.unique_value_props),
            "branded_terms": list(self.branded_terms),
            "competitive_differentiators": list(self.competitive_differentiators),
        }


def _count_words(words: List[str], text_lower: str) -> int:
    """Whole-word occurrences of every indicator."""
    return sum(
        len(re.findall(r'\b' + re.escape(word) + r'\b', text_lower))
        for word in words
    )


class BrandVoiceAnalyzer:
    """
    Profiles brand voice from page content.

    Tone ties resolve to the tone listed first in TONE_INDICATORS.
    """

    def tone_scores(self, text: str) -> Dict[str, int]:
        """Indicator hits per tone."""
        text_lower = text.lower()
        return {tone: _count_words(words, text_lower) for tone, words in TONE_INDICATORS.items()}

    def formality_level(self, text: str) -> str:
        text_lower = text.lower()
        scores = {level: _count_words(words, text_lower) for level, words in FORMALITY_INDICATORS.items()}
        if not any(scores.values()):
            return "semi-formal"
        return max(scores, key=scores.get)

    def perspective(self, text: str) -> str:
        first = len(re.findall(r'\b(?:we|our|us|i|my|me)\b', text, re.IGNORECASE))
        second = len(re.findall(r'\b(?:you|your|yours)\b', text, re.IGNORECASE))
        third = len(re.findall(r'\b(?:they|their|them|he|she|it|its)\b', text, re.IGNORECASE))

        total = first + second + third
        if total == 0:
            return "mixed"
        if first / total > 0.5:
            return "first-person"
        if second / total > 0.5:
            return "second-person"
        if first / total > 0.3 and second / total > 0.3:
            return "mixed"
        return "third-person"

    def _unique_value_props(self, text: str) -> List[str]:
        props = []
        for pattern in UVP_PATTERNS:
            for match in re.finditer(pattern, text, re.IGNORECASE):
                prop = match.group(1).strip()
                if 10 < len(prop) < 100:
                    props.append(prop)
        return ordered_unique(props)[:5]

    def _branded_terms(self, text: str, titles: List[str]) -> List[str]:
        """Capitalized title phrases that recur in the copy."""
        candidates = []
        for title in titles:
            candidates.extend(t for t in re.findall(BRANDED_TERM_PATTERN, title) if len(t) > 6)

        text_lower = text.lower()
        terms = [t for t in ordered_unique(candidates) if text_lower.count(t.lower()) >= 2]
        return terms[:8]

    def analyze(self, website: WebsiteAnalysisResult) -> BrandVoiceProfile:
        """
        Build a brand voice profile.

        Args:
            website: Crawled site snapshot

        Returns:
            BrandVoiceProfile
        """
        text = website.all_content()
        titles = [page.title for page in website.crawled_pages if page.title]

        scores = self.tone_scores(text)
        ranked = sorted(scores, key=lambda tone: scores[tone], reverse=True)

        uvps = self._unique_value_props(text)
        branded = self._branded_terms(text, titles)
        uses_testimonials = re.search(TESTIMONIAL_PATTERN, text, re.IGNORECASE) is not None
        uses_statistics = re.search(STATISTICS_PATTERN, text, re.IGNORECASE) is not None

        differentiators = list(uvps)
        if branded:
            differentiators.append(f"Unique branding: {', '.join(branded)}")
        if uses_testimonials:
            differentiators.append("Customer testimonial integration")
        if uses_statistics:
            differentiators.append("Data-driven approach")

        profile = BrandVoiceProfile(
            primary_tone=ranked[0],
            secondary_tones=ranked[1:1 + MAX_SECONDARY_TONES],
            tone_scores=scores,
            formality_level=self.formality_level(text),
            perspective=self.perspective(text),
            uses_questions="?" in text,
            uses_testimonials=uses_testimonials,
            uses_statistics=uses_statistics,
            unique_value_props=uvps,
            branded_terms=branded,
            competitive_differentiators=differentiators[:MAX_DIFFERENTIATORS],
        )

        logger.debug(f"Brand voice for {website.domain}: {profile.primary_tone}, {profile.formality_level}")

        return profile


def analyze_brand_voice(website: WebsiteAnalysisResult) -> BrandVoiceProfile:
    """Profile a site's brand voice with a fresh analyzer."""
    return BrandVoiceAnalyzer().analyze(website)
