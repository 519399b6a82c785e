"""
Content Intelligence Configuration

Thresholds, caps and vocabularies for the website content analysis engine:
- Relevance scoring vocabularies
- Clustering and linking thresholds
- Essential and industry topic lists for gap analysis
- Score penalties for the summary scores
"""

# =============================================================================
# RELEVANCE SCORING
# =============================================================================

# Words shorter than this are ignored by the similarity tokenizer
SIMILARITY_MIN_WORD_LENGTH = 3

# Words that signal supporting/explanatory content
SUPPORTING_CONCEPTS = [
    "guide", "tutorial", "example", "how", "what", "why", "best", "top",
    "tools", "resources", "tips", "tricks", "strategies", "techniques",
    "benefits", "advantages", "disadvantages", "comparison", "vs",
]

SUPPORTING_CONCEPT_WEIGHT = 0.1
COMPLEMENTARY_KEYWORD_WEIGHT = 0.5
COMPLEMENTARY_MAX_SCORE = 0.8


# =============================================================================
# TOPIC CLUSTERING
# =============================================================================

CLUSTER_SIMILARITY_THRESHOLD = 0.3    # Pages above this similarity share a cluster
CLUSTER_MIN_PAGES = 2
CLUSTER_RELEVANCE_THRESHOLD = 0.2     # Minimum score for the most relevant cluster
MAIN_TOPIC_TITLE_WORDS = 3

CLUSTER_PAGE_TEMPLATES = [
    "{topic} overview",
    "{topic} guide",
    "{topic} best practices",
    "{topic} examples",
    "{topic} comparison",
    "how to {topic}",
    "{topic} tutorial",
    "{topic} tips",
    "{topic} mistakes to avoid",
    "{topic} tools and resources",
]

MAX_SUGGESTED_PAGES = 5
MAX_CLUSTER_LINKING_OPPORTUNITIES = 10


# =============================================================================
# CONTENT GAPS
# =============================================================================

ESSENTIAL_TOPICS = [
    {"topic": "About Us", "reason": "Builds trust and credibility", "priority": "high"},
    {"topic": "Services/Products", "reason": "Core business offerings", "priority": "high"},
    {"topic": "Contact Information", "reason": "Essential for lead generation", "priority": "high"},
    {"topic": "Pricing", "reason": "Qualifies leads and sets expectations", "priority": "medium"},
    {"topic": "FAQ", "reason": "Reduces support burden and addresses objections", "priority": "medium"},
    {"topic": "Testimonials/Reviews", "reason": "Social proof and trust building", "priority": "medium"},
    {"topic": "Case Studies/Portfolio", "reason": "Demonstrates expertise and results", "priority": "medium"},
    {"topic": "Blog/Resources", "reason": "SEO value and thought leadership", "priority": "low"},
]

# Domain substrings -> gaps suggested for that industry
INDUSTRY_GAPS = [
    {
        "domain_signals": ["restaurant", "cafe", "food"],
        "topic_signal": None,
        "gaps": [
            ("Menu with Prices", "Essential for restaurant customers", "high", "easy"),
            ("Location and Hours", "Critical information for visitors", "high", "easy"),
            ("Online Ordering/Reservation", "Modern customer expectation", "medium", "hard"),
        ],
    },
    {
        "domain_signals": ["shop", "store"],
        "topic_signal": None,
        "gaps": [
            ("Product Categories", "Helps users navigate products", "high", "medium"),
            ("Shipping Information", "Reduces cart abandonment", "medium", "easy"),
            ("Return Policy", "Builds purchase confidence", "medium", "easy"),
        ],
    },
    {
        "domain_signals": ["service"],
        "topic_signal": "service",
        "gaps": [
            ("Service Areas", "Defines geographic coverage", "medium", "easy"),
            ("Process Overview", "Sets customer expectations", "medium", "medium"),
        ],
    },
]

HARD_TOPIC_WORDS = ["best", "top", "vs", "review", "comparison", "guide"]
EASY_TOPIC_WORDS = ["how to", "what is", "tutorial", "basics"]

PRIORITY_ORDER = {"high": 3, "medium": 2, "low": 1}


# =============================================================================
# LINKING SUGGESTIONS
# =============================================================================

SOURCE_RELEVANCE_THRESHOLD = 0.3
DUPLICATE_SIMILARITY_THRESHOLD = 0.8
COMPLEMENTARY_THRESHOLD = 0.2
CONTEXTUAL_RELEVANCE_THRESHOLD = 0.4
CONTEXTUAL_RELEVANCE_SCORE = 0.6
STRONG_RELEVANCE = 0.7
MODERATE_RELEVANCE = 0.4
MAX_LINKING_SUGGESTIONS = 20


# =============================================================================
# SUMMARY SCORES
# =============================================================================

CONTENT_QUALITY_PENALTIES = {"high": 20, "medium": 10, "low": 5}
TECHNICAL_SEO_PENALTIES = {"high": 25, "medium": 15, "low": 5}

THIN_CONTENT_WORDS = 300
THIN_CONTENT_PENALTY = 15
SHALLOW_CONTENT_WORDS = 500
SHALLOW_CONTENT_PENALTY = 5

MAX_TOPIC_AUTHORITY_POINTS = 40
TOPIC_AUTHORITY_PER_TOPIC = 2
TOPIC_AUTHORITY_PER_CLUSTER = 10
TOPIC_AUTHORITY_LINKING_WEIGHT = 0.3

INTERNAL_LINKING_WEAK_SCORE = 50


# =============================================================================
# KEYWORD OPPORTUNITIES
# =============================================================================

MAX_KEYWORDS_CONSIDERED = 10
MAX_POTENTIAL_USAGE = 10

# Competitor comparison caps
MAX_MISSING_TOPICS = 10
MAX_WEAKER_CONTENT = 10
MAX_COMPETITOR_OPPORTUNITIES = 5
