"""
Content Intelligence Services

This module contains the engine's services:
- relevance_scorer: Keyword relevance and word-overlap similarity
- topic_clusterer: Greedy page clustering and cluster enrichment
- content_gap_analyzer: Essential, industry and competitor content gaps
- linking_suggestions: Internal linking suggestions for a target topic
- content_analyzer: Orchestrator producing the full content analysis
"""

from .relevance_scorer import (
    keyword_relevance,
    similarity,
    complementary_relevance,
    topic_relevance,
)
from .topic_clusterer import (
    TopicClusterer,
    PageCluster,
    ContentCluster,
    LinkingOpportunity,
    identify_topic_clusters,
    find_most_relevant_cluster,
)
from .content_gap_analyzer import ContentGap, ContentGapAnalyzer, identify_content_gaps
from .linking_suggestions import (
    LinkingSuggestion,
    LinkingSuggestionEngine,
    suggest_internal_links,
)
from .content_analyzer import (
    ContentAnalyzer,
    ContentAnalysisResult,
    AnalysisSummary,
    SEOInsight,
    KeywordOpportunity,
    CompetitorComparison,
    analyze_content,
)

__all__ = [
    "keyword_relevance",
    "similarity",
    "complementary_relevance",
    "topic_relevance",
    "TopicClusterer",
    "PageCluster",
    "ContentCluster",
    "LinkingOpportunity",
    "identify_topic_clusters",
    "find_most_relevant_cluster",
    "ContentGap",
    "ContentGapAnalyzer",
    "identify_content_gaps",
    "LinkingSuggestion",
    "LinkingSuggestionEngine",
    "suggest_internal_links",
    "ContentAnalyzer",
    "ContentAnalysisResult",
    "AnalysisSummary",
    "SEOInsight",
    "KeywordOpportunity",
    "CompetitorComparison",
    "analyze_content",
]
