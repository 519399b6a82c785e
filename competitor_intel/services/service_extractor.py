"""
Offering Extractor

Extracts business offerings from a crawled website's text.
Uses pattern matching over page content, titles and headings to identify:
- Services offered (with category, price tier, urgency, audiences)
- Local-service and specialization signals
- Quality indicators and availability
- Service areas, target audiences and unique selling points
"""

import re
import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

from competitor_intel.config import (
    SERVICE_INDICATORS,
    EMERGENCY_INDICATORS,
    PRICE_TIERS,
    DEFAULT_PRICE_TIER,
    SERVICE_CATEGORIES,
    LOCAL_SERVICE_INDICATORS,
    SPECIALIZATION_INDICATORS,
    QUALITY_TERMS,
    AVAILABILITY_TERMS,
    AUDIENCE_KEYWORDS,
    INVALID_SERVICE_NAMES,
    MAX_SERVICES,
    MAX_AUDIENCES,
    MAX_SERVICE_AREAS,
    MAX_SELLING_POINTS,
    MAX_VALUE_PROPOSITIONS,
)
from content_intelligence.models.site import CrawledPage, WebsiteAnalysisResult
from content_intelligence.utils import ordered_unique, split_sentences

logger = logging.getLogger(__name__)


@dataclass
class BusinessService:
    """A service detected on a website."""
    name: str
    category: str = "general"
    description: str = ""
    price_indicator: str = DEFAULT_PRICE_TIER  # budget, mid-range, premium, enterprise
    target_audience: List[str] = field(default_factory=list)
    urgency_level: str = "routine"  # emergency, urgent, routine, consultation
    local_service: bool = False
    specialization: Optional[str] = None
    categories: List[str] = field(default_factory=list)
    quality_indicators: List[str] = field(default_factory=list)
    availability: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "price_indicator": self.price_indicator,
            "target_audience": list(self.target_audience),
            "urgency_level": self.urgency_level,
            "local_service": self.local_service,
            "specialization": self.specialization,
            "categories": list(self.categories),
            "quality_indicators": list(self.quality_indicators),
            "availability": self.availability,
        }


@dataclass
class BusinessOfferings:
    """Everything the extractor learned about a site's offerings."""
    services: List[BusinessService] = field(default_factory=list)
    business_type: str = "general business"
    primary_categories: List[str] = field(default_factory=list)
    value_propositions: List[str] = field(default_factory=list)
    target_audiences: List[str] = field(default_factory=list)
    service_areas: List[str] = field(default_factory=list)
    unique_selling_points: List[str] = field(default_factory=list)

    @property
    def emergency_services(self) -> List[BusinessService]:
        return [s for s in self.services if s.urgency_level == "emergency"]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "services": [s.to_dict() for s in self.services],
            "business_type": self.business_type,
            "primary_categories": list(self.primary_categories),
            "value_propositions": list(self.value_propositions),
            "target_audiences": list(self.target_audiences),
            "service_areas": list(self.service_areas),
            "emergency_services": [s.to_dict() for s in self.emergency_services],
            "unique_selling_points": list(self.unique_selling_points),
        }


def capitalize_words(text: str) -> str:
    """Upper-case the first letter of every word."""
    return re.sub(r'\b\w', lambda m: m.group(0).upper(), text)


class OfferingExtractor:
    """
    Extracts services and positioning from crawled website content.

    Uses pattern matching to identify:
    - Service names from content, titles and headings
    - Price tiers, urgency and quality signals per service
    - Site-wide audiences, service areas and selling points
    """

    # Service patterns over lowercased content
    SERVICE_PATTERNS = [
        # "We offer [service]"
        r'(?:we offer|our services include|we provide|specializing in)\s+([^,.!?]+)',
        # "[Service] services"
        r'(\w+(?:\s+\w+)?)\s+(?:service|services|solution|solutions)\b',
        # "Professional [service]"
        r'(?:professional|expert|certified)\s+(\w+(?:\s+\w+)?)',
        # Action-based services
        r'(\w+(?:\s+\w+)?)\s+(?:repair|install|installation|maintenance|cleaning|support|consulting)\b',
    ]

    # Patterns anchored on a whole title or heading
    HEADING_PATTERNS = [
        r'^(.+) (?:service|services|solution|solutions)$',
        r'^(?:professional|expert|certified) (.+)$',
        r'^(.+) (?:repair|install|installation|maintenance|cleaning)$',
    ]

    SERVICE_AREA_PATTERNS = [
        r'(?:serving|service area|locations?) ([^.!?]+)',
        r'(?:located in|based in) ([^.!?]+)',
        r'(?:we serve|covering) ([^.!?]+)',
    ]

    USP_PATTERNS = [
        r'(?:what makes us different|why choose us|our advantage) ([^.!?]+)',
        r'(?:unlike|different from|better than) ([^.!?]+)',
        r'(?:unique|special|exclusive) ([^.!?]+)',
    ]

    VALUE_PATTERNS = [
        r'(?:we offer|we provide|our) ([^.!?]+)',
        r'(?:specialize in|expert in|focused on) ([^.!?]+)',
        r'(?:committed to|dedicated to) ([^.!?]+)',
    ]

    def extract(self, website: WebsiteAnalysisResult) -> BusinessOfferings:
        """
        Extract business offerings from a site.

        Args:
            website: Crawled site snapshot

        Returns:
            BusinessOfferings
        """
        content = website.all_content()
        content_lower = content.lower()

        services = self._extract_services(website, content_lower)

        offerings = BusinessOfferings(
            services=services,
            business_type=self._infer_business_type(website, services, content_lower),
            primary_categories=self._primary_categories(website, services),
            value_propositions=self._match_phrases(
                self.VALUE_PATTERNS, content, 10, 100, MAX_VALUE_PROPOSITIONS, capitalize=True
            ),
            target_audiences=[a for a in AUDIENCE_KEYWORDS if a in content_lower][:MAX_AUDIENCES],
            service_areas=self._match_phrases(
                self.SERVICE_AREA_PATTERNS, content, 3, 50, MAX_SERVICE_AREAS
            ),
            unique_selling_points=self._match_phrases(
                self.USP_PATTERNS, content, 10, 100, MAX_SELLING_POINTS, capitalize=True
            ),
        )

        logger.debug(
            f"Extracted {len(services)} services, {len(offerings.service_areas)} areas "
            f"for {website.domain}"
        )

        return offerings

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    def _extract_services(self, website: WebsiteAnalysisResult, content_lower: str) -> List[BusinessService]:
        sentences = split_sentences(content_lower)
        names = []

        for pattern in self.SERVICE_PATTERNS:
            for match in re.finditer(pattern, content_lower, re.IGNORECASE):
                names.append(self._clean_service_name(match.group(1)))

        for page in website.crawled_pages:
            names.extend(self._services_from_page(page))

        services = []
        seen = set()
        for name in names:
            if not self._is_valid_service(name) or name.lower() in seen:
                continue
            seen.add(name.lower())
            services.append(self._build_service(name, content_lower, sentences))
            if len(services) >= MAX_SERVICES:
                break

        return services

    def _services_from_page(self, page: CrawledPage) -> List[str]:
        page_text = " ".join([page.title or ""] + page.h1 + page.h2).lower()
        if not any(indicator in page_text for indicator in SERVICE_INDICATORS):
            return []

        names = []
        for text in [page.title or ""] + page.h1 + page.h2:
            name = self._service_from_text(text)
            if name:
                names.append(name)

        return names

    def _service_from_text(self, text: str) -> Optional[str]:
        clean = text.lower().strip()
        if not any(indicator in clean for indicator in SERVICE_INDICATORS):
            return None

        for pattern in self.HEADING_PATTERNS:
            match = re.match(pattern, clean)
            if match:
                return self._clean_service_name(match.group(1))

        if 5 < len(clean) < 50:
            return self._clean_service_name(clean)

        return None

    def _clean_service_name(self, name: str) -> str:
        name = re.sub(r'^(the |a |an )', '', name.strip(), flags=re.IGNORECASE)
        name = re.sub(r'\s+(service|services|solution|solutions)$', '', name, flags=re.IGNORECASE)
        return re.sub(r'\s+', ' ', name).strip()

    def _is_valid_service(self, name: str) -> bool:
        return (
            3 < len(name) < 50
            and name.lower() not in INVALID_SERVICE_NAMES
            and not name.isdigit()
        )

    def _build_service(self, name: str, content_lower: str, sentences: List[str]) -> BusinessService:
        name_lower = name.lower()
        category = self._service_category(name_lower)
        description = self._service_description(name_lower, sentences)
        signal_text = f"{name_lower} {description.lower()}"
        local_text = f"{name_lower} {content_lower}"

        return BusinessService(
            name=capitalize_words(name),
            category=category,
            description=description,
            price_indicator=self._price_indicator(signal_text),
            target_audience=self._service_audience(name_lower, content_lower),
            urgency_level=self._urgency_level(signal_text),
            local_service=any(i in local_text for i in LOCAL_SERVICE_INDICATORS),
            specialization=(
                "specialized" if any(i in local_text for i in SPECIALIZATION_INDICATORS) else None
            ),
            categories=[category, "general"],
            quality_indicators=ordered_unique(t for t in QUALITY_TERMS if t in signal_text),
            availability=next((t for t in AVAILABILITY_TERMS if t in signal_text), None),
        )

    def _service_category(self, name_lower: str) -> str:
        for category, keywords in SERVICE_CATEGORIES.items():
            if any(keyword in name_lower for keyword in keywords):
                return category
        return "general"

    def _service_description(self, name_lower: str, sentences: List[str]) -> str:
        for sentence in sentences:
            if name_lower in sentence and 20 < len(sentence) < 200:
                return capitalize_words(sentence.strip())
        return f"Professional {name_lower} solutions for your business needs."

    def _price_indicator(self, text: str) -> str:
        for tier, keywords in PRICE_TIERS:
            if any(keyword in text for keyword in keywords):
                return tier
        return DEFAULT_PRICE_TIER

    def _service_audience(self, name_lower: str, content_lower: str) -> List[str]:
        context = next((s for s in content_lower.split(".") if name_lower in s), "")
        return [a for a in AUDIENCE_KEYWORDS if a in context][:3]

    def _urgency_level(self, text: str) -> str:
        if any(indicator in text for indicator in EMERGENCY_INDICATORS):
            return "emergency"
        if "consultation" in text or "advisory" in text:
            return "consultation"
        return "routine"

    # -------------------------------------------------------------------------
    # Site-wide signals
    # -------------------------------------------------------------------------

    def _infer_business_type(
        self,
        website: WebsiteAnalysisResult,
        services: List[BusinessService],
        content_lower: str,
    ) -> str:
        if not services:
            return "general business"

        domain = (website.domain or "").lower()
        for keyword, business_type in [
            ("consulting", "consulting"),
            ("repair", "repair services"),
            ("cleaning", "cleaning services"),
            ("design", "design agency"),
            ("marketing", "marketing agency"),
        ]:
            if keyword in domain or keyword in content_lower:
                return business_type

        return "service business"

    def _primary_categories(self, website: WebsiteAnalysisResult, services: List[BusinessService]) -> List[str]:
        categories = [s.category for s in services]
        for topic in website.topics[:10]:
            category = self._service_category(topic.lower())
            if category != "general":
                categories.append(category)
        return ordered_unique(categories)[:5]

    def _match_phrases(
        self,
        patterns: List[str],
        text: str,
        min_len: int,
        max_len: int,
        limit: int,
        capitalize: bool = False,
    ) -> List[str]:
        """Collect captured phrases within a length window, unique, in match order."""
        phrases = []
        for pattern in patterns:
            for match in re.finditer(pattern, text, re.IGNORECASE):
                phrase = match.group(1).strip()
                if min_len < len(phrase) < max_len:
                    phrases.append(capitalize_words(phrase) if capitalize else phrase)
        return ordered_unique(phrases)[:limit]


def extract_business_offerings(website: WebsiteAnalysisResult) -> BusinessOfferings:
    """Extract offerings with a fresh extractor."""
    return OfferingExtractor().extract(website)
