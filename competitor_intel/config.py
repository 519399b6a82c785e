"""
Competitor Intelligence Configuration

Vocabularies and tier thresholds for competitor analysis:
- Offering extraction indicators (services, pricing, urgency, quality)
- Brand voice tone indicators
- Competitor tiers (content frequency, backlinks, technical SEO)
- Competitive advantage indicator lists
- Templated strategic recommendations
"""


# =============================================================================
# OFFERING EXTRACTION
# =============================================================================

SERVICE_INDICATORS = [
    "service", "services", "solution", "solutions", "offering", "offerings",
    "repair", "install", "installation", "maintenance", "support", "consulting",
    "cleaning", "delivery", "training", "coaching", "advisory", "assessment",
    "audit", "inspection", "testing", "analysis", "design", "development",
    "management", "optimization", "implementation", "configuration",
]

EMERGENCY_INDICATORS = [
    "emergency", "24/7", "24 hour", "urgent", "immediate", "same day",
    "asap", "critical", "priority", "rush", "express", "after hours",
]

# Checked in order; first tier with a hit wins
PRICE_TIERS = [
    ("budget", ["affordable", "budget", "cheap", "low cost", "economy", "starter"]),
    ("mid-range", ["professional", "standard", "business", "commercial"]),
    ("premium", ["premium", "luxury", "high-end", "elite", "enterprise", "advanced"]),
    ("enterprise", ["enterprise", "corporate", "large scale", "organization"]),
]
DEFAULT_PRICE_TIER = "mid-range"

SERVICE_CATEGORIES = {
    "maintenance": ["maintenance", "repair", "fix", "service", "upkeep"],
    "installation": ["install", "installation", "setup", "configure", "implement"],
    "consulting": ["consulting", "advisory", "coaching", "guidance", "expert advice"],
    "cleaning": ["cleaning", "janitorial", "maid", "housekeeping", "pressure wash"],
    "design": ["design", "creative", "branding", "graphic", "web design"],
    "technology": ["tech", "software", "hardware", "network", "security"],
    "marketing": ["marketing", "seo", "advertising", "promotion", "social media"],
    "financial": ["accounting", "bookkeeping", "tax", "financial", "payroll"],
    "legal": ["legal", "law", "attorney", "compliance", "contract"],
    "education": ["training", "education", "tutoring", "courses", "learning"],
}

LOCAL_SERVICE_INDICATORS = [
    "local", "near me", "service area", "your area",
    "on-site", "in-home", "at your location", "we come to you",
]

SPECIALIZATION_INDICATORS = [
    "specialized", "specialist", "expert", "certified", "licensed",
    "professional", "master", "advanced", "expertise", "niche",
]

QUALITY_TERMS = [
    "certified", "licensed", "insured", "guaranteed", "warranty",
    "quality", "professional", "expert", "trained", "experienced",
    "award winning", "best rated", "top rated", "5 star", "five star",
    "approved", "accredited", "verified", "trusted",
]

AVAILABILITY_TERMS = [
    "24/7", "24 hours", "24 hour", "around the clock",
    "same day", "next day", "emergency", "after hours",
    "weekends", "holidays", "on call",
]

AUDIENCE_KEYWORDS = [
    "small businesses", "large enterprises", "homeowners", "business owners",
    "professionals", "individuals", "families", "students", "seniors",
    "startups", "established businesses", "consumers", "enterprise",
]

INVALID_SERVICE_NAMES = {"click", "here", "more", "info", "contact", "about", "home"}

MAX_SERVICES = 15
MAX_AUDIENCES = 5
MAX_SERVICE_AREAS = 5
MAX_SELLING_POINTS = 3
MAX_VALUE_PROPOSITIONS = 3


# =============================================================================
# BRAND VOICE
# =============================================================================

# Tone -> indicator words; each whole-word hit scores one point
TONE_INDICATORS = {
    "professional": ["expert", "professional", "specialized", "certified", "quality",
                     "solutions", "comprehensive", "strategic"],
    "casual": ["hey", "guys", "folks", "awesome", "cool", "great", "simple", "easy"],
    "friendly": ["welcome", "hello", "friend", "help", "support", "care", "happy", "glad"],
    "authoritative": ["leading", "premier", "trusted", "proven", "guaranteed", "results",
                      "evidence", "data"],
    "conversational": ["let's", "we're", "you'll", "think about", "imagine", "consider",
                       "what if"],
    "inspirational": ["transform", "elevate", "empower", "unlock", "discover", "achieve",
                      "success", "potential"],
    "humorous": ["fun", "funny", "laugh", "joke", "hilarious", "amusing", "entertaining"],
}

FORMALITY_INDICATORS = {
    "formal": ["additionally", "furthermore", "moreover", "consequently", "therefore",
               "thus", "hence"],
    "semi-formal": ["also", "because", "so", "but", "however", "while", "since"],
    "casual": ["yeah", "nah", "cool", "awesome", "great", "stuff", "things", "got"],
    "very-casual": ["lol", "haha", "omg", "btw", "tbh", "ngl"],
}

MAX_SECONDARY_TONES = 3
MAX_DIFFERENTIATORS = 5


# =============================================================================
# COMPETITOR TIERS
# =============================================================================

CONTENT_FREQUENCY_TIERS = [(20, "high"), (10, "medium")]   # pages >= threshold
BACKLINK_TIERS = [(80, "strong"), (60, "moderate")]        # authority >= threshold

# (max issues, min linking score, label)
TECHNICAL_SEO_TIERS = [
    (0, 90, "excellent"),
    (2, 70, "good"),
    (5, 50, "fair"),
]

DEFAULT_LINKING_SCORE = 50
MIN_ESTIMATED_TRAFFIC = 1000
TRAFFIC_PER_PAGE = 100
TRAFFIC_PER_LINKING_POINT = 10
MAX_CONTENT_BONUS = 30
LARGE_SITE_WORDS = 5000

TOPIC_CLUSTER_MIN_WORD_LENGTH = 5
MAX_TOPIC_CLUSTERS = 8
MAX_CONTENT_STRENGTHS = 5

KEYWORD_MIN_LENGTH = 4
KEYWORD_MIN_FREQUENCY = 3
MAX_KEYWORDS = 20
MAX_TOP_RANKING_TOPICS = 5

EXPECTED_TOPICS = ["services", "about", "contact", "pricing", "testimonials"]

SEASONAL_KEYWORDS = ["spring", "summer", "fall", "winter", "holiday", "seasonal"]
LOCAL_INTENT_INDICATORS = ["near me", "local", "service area", "your area"]

MAX_QUESTIONS = 5
MAX_COMPARISON_SERVICES = 3
MAX_MARKET_LEADERS = 3


# =============================================================================
# COMPETITIVE ADVANTAGES
# =============================================================================

IMPACT_ORDER = {"critical": 4, "high": 3, "medium": 2, "low": 1}

QUALITY_INDICATORS = [
    "certified", "licensed", "insured", "guarantee", "warranty",
    "quality", "professional", "expert", "trained", "experienced",
    "award winning", "best rated", "top rated", "5 star", "five star",
]

PRICING_INDICATORS = [
    "affordable", "cheap", "low cost", "budget", "discount",
    "competitive pricing", "best price", "price match", "free estimate",
    "financing", "payment plans", "affordable payment",
]

EXPERTISE_INDICATORS = [
    "years experience", "decades experience", "since 19", "established",
    "specialist", "expert", "master", "certified technician", "licensed",
    "trained", "skilled", "knowledgeable", "professional",
]

TECHNOLOGY_INDICATORS = [
    "modern equipment", "latest technology", "advanced tools",
    "state of the art", "cutting edge", "innovative", "digital",
    "software", "technology", "equipment", "tools", "modern",
]

CUSTOMER_SERVICE_INDICATORS = [
    "customer service", "customer satisfaction", "satisfaction guaranteed",
    "friendly service", "professional service", "responsive", "available",
    "support", "help", "assistance", "customer care",
]

SPEED_INDICATORS = [
    "fast", "quick", "rapid", "same day", "next day", "immediate",
    "emergency", "urgent", "prompt", "efficient", "timely",
]

# Minimum indicator hits before an advantage is reported
ADVANTAGE_MIN_HITS = {
    "service_quality": 3,
    "pricing": 2,
    "expertise": 3,
    "technology": 3,
    "customer_service": 3,
    "speed": 3,
}

SERVICE_RANGE_RATIO = 1.5


# =============================================================================
# REPORT TEMPLATES
# =============================================================================

SEASONAL_PATTERNS = [
    "Seasonal content planning",
    "Holiday promotions",
    "Weather-related services",
]

DIFFERENTIATION_TACTICS = [
    "Focus on unique value propositions",
    "Create comparison content",
    "Highlight differentiators in all content",
    "Develop proprietary methodologies",
]

MARKET_POSITIONING = [
    "Establish authority in niche areas",
    "Position as local expert",
    "Develop thought leadership content",
    "Create comprehensive guides",
]

SWOT_OPPORTUNITIES = [
    "Expand into underserved topic areas",
    "Develop seasonal content strategies",
    "Create local-focused content",
    "Build authority in emerging trends",
]

SWOT_THREATS = [
    "Increasing competition in key areas",
    "Competitive content saturation",
    "Changing market dynamics",
]

MAX_EMERGING_TRENDS = 5
RECENT_TOPIC_WINDOW = 10
MAX_TOPIC_PRIORITIES = 5
MAX_GAPS_IN_RECOMMENDATION = 3

# Placeholder own site when only competitors are supplied
PLACEHOLDER_DOMAIN = "your-business.com"
