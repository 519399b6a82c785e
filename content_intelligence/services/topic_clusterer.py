"""
Topic Clustering Service

Groups crawled pages into topic clusters for content strategy.
Uses text-based similarity without external APIs.

Clustering Methods:
- Greedy word-overlap (Jaccard) grouping of pages
- Keyword relevance scoring of whole clusters
- Template-based cluster page suggestions
- Cross-linking opportunities inside a cluster

Usage:
    from content_intelligence.services.topic_clusterer import TopicClusterer

    clusterer = TopicClusterer()
    clusters = clusterer.identify_topic_clusters(website.crawled_pages)
    best = clusterer.find_most_relevant_cluster("roof repair", ["shingles"], clusters)

Complexity is O(n^2) over the page set; crawl size is capped upstream.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from runner.logging_setup import get_logger
from content_intelligence.config import (
    CLUSTER_SIMILARITY_THRESHOLD,
    CLUSTER_MIN_PAGES,
    CLUSTER_RELEVANCE_THRESHOLD,
    MAIN_TOPIC_TITLE_WORDS,
    CLUSTER_PAGE_TEMPLATES,
    MAX_SUGGESTED_PAGES,
    MAX_CLUSTER_LINKING_OPPORTUNITIES,
)
from content_intelligence.models.site import CrawledPage
from content_intelligence.services.relevance_scorer import (
    keyword_relevance,
    similarity,
    topic_words,
)
from content_intelligence.utils import capitalize_topic


@dataclass
class PageCluster:
    """A group of textually related pages."""
    topic: str  # First words of the seed page title
    pages: List[CrawledPage]

    @property
    def urls(self) -> List[str]:
        return [page.url for page in self.pages]

    def text(self) -> str:
        """Titles and content of every member page."""
        return " ".join(page_text(page) for page in self.pages)


@dataclass
class LinkingOpportunity:
    """A missing link between two pages of the same cluster."""
    from_url: str
    to_url: str
    anchor_text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.from_url, "to": self.to_url, "anchor_text": self.anchor_text}


@dataclass
class ContentCluster:
    """A topic cluster with content and linking recommendations."""
    main_topic: str
    pages: List[str]
    suggested_pages: List[str] = field(default_factory=list)
    internal_linking_opportunities: List[LinkingOpportunity] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "main_topic": self.main_topic,
            "pages": list(self.pages),
            "suggested_pages": list(self.suggested_pages),
            "internal_linking_opportunities": [
                opp.to_dict() for opp in self.internal_linking_opportunities
            ],
        }


def page_text(page: CrawledPage) -> str:
    """Title and content of a page."""
    return f"{page.title or ''} {page.content or ''}"


class TopicClusterer:
    """
    Groups pages into topic clusters.

    Uses text-based similarity measures without external APIs.
    """

    def __init__(self, similarity_threshold: float = CLUSTER_SIMILARITY_THRESHOLD):
        """
        Initialize topic clusterer.

        Args:
            similarity_threshold: Minimum similarity to group pages (0-1)
        """
        self.similarity_threshold = similarity_threshold
        self.logger = get_logger("topic_clusterer")

    def _extract_main_topic(self, page: CrawledPage) -> str:
        """Take the first few words of the page title."""
        return " ".join((page.title or "").split()[:MAIN_TOPIC_TITLE_WORDS])

    def identify_topic_clusters(self, pages: List[CrawledPage]) -> List[PageCluster]:
        """
        Group pages by word-overlap similarity.

        Walks pages in input order; each unprocessed page seeds a cluster
        and absorbs every other unprocessed page similar enough to it.

        Args:
            pages: Crawled pages

        Returns:
            list: PageCluster groups with at least two pages
        """
        clusters = []
        processed = set()

        for index, page in enumerate(pages):
            if index in processed:
                continue

            processed.add(index)
            members = [page]
            seed_text = page_text(page)

            for other_index, other in enumerate(pages):
                if other_index in processed:
                    continue

                if similarity(seed_text, page_text(other)) > self.similarity_threshold:
                    members.append(other)
                    processed.add(other_index)

            if len(members) >= CLUSTER_MIN_PAGES:
                clusters.append(PageCluster(topic=self._extract_main_topic(page), pages=members))

        self.logger.debug(f"Clustered {len(pages)} pages into {len(clusters)} clusters")

        return clusters

    def find_most_relevant_cluster(
        self,
        target_topic: str,
        target_keywords: List[str],
        clusters: List[PageCluster],
    ) -> List[CrawledPage]:
        """
        Find the cluster most relevant to a target topic.

        Args:
            target_topic: Topic of the new content
            target_keywords: Supporting keywords
            clusters: Candidate clusters

        Returns:
            list: Pages of the best cluster, or empty if none is relevant enough
        """
        if not clusters:
            return []

        words = topic_words(target_topic, target_keywords)
        best_cluster: List[CrawledPage] = []
        best_score = 0.0

        for cluster in clusters:
            score = keyword_relevance(words, cluster.text().lower())
            if score > best_score:
                best_score = score
                best_cluster = cluster.pages

        return best_cluster if best_score > CLUSTER_RELEVANCE_THRESHOLD else []

    def _cluster_topics(self, cluster: PageCluster, topics: List[str]) -> List[str]:
        """Site topics found in a member's title, H1 or H2."""
        found = []
        for topic in topics:
            topic_lower = topic.lower()
            if not topic_lower:
                continue
            for page in cluster.pages:
                candidates = [page.title or ""] + page.h1 + page.h2
                if any(topic_lower in c.lower() for c in candidates):
                    found.append(topic)
                    break

        if not found and cluster.topic:
            found.append(cluster.topic)

        return found

    def _suggest_cluster_pages(self, base_topic: str, pages: List[CrawledPage]) -> List[str]:
        """
        Suggest supporting pages for a cluster.

        Args:
            base_topic: Lowercased cluster topic
            pages: Existing member pages

        Returns:
            list: Up to MAX_SUGGESTED_PAGES page ideas not already covered
        """
        if not base_topic:
            return []

        suggestions = []
        for template in CLUSTER_PAGE_TEMPLATES:
            suggestion = template.format(topic=base_topic)
            exists = any(
                suggestion in (page.title or "").lower() or suggestion in (page.content or "").lower()
                for page in pages
            )
            if not exists:
                suggestions.append(suggestion)

        return suggestions[:MAX_SUGGESTED_PAGES]

    def _find_linking_opportunities(
        self,
        pages: List[CrawledPage],
        topics: List[str],
    ) -> List[LinkingOpportunity]:
        """
        Find member pages that mention a cluster topic but do not yet link
        to the other members.

        Args:
            pages: Cluster member pages
            topics: Cluster topics usable as anchor text

        Returns:
            list: Up to MAX_CLUSTER_LINKING_OPPORTUNITIES opportunities
        """
        opportunities = []

        for from_page in pages:
            from_content = (from_page.content or "").lower()

            for to_page in pages:
                if to_page is from_page:
                    continue

                # Skip pairs that are already linked
                if to_page.url in from_page.internal_links:
                    continue

                for topic in topics:
                    if topic.lower() in from_content:
                        opportunities.append(LinkingOpportunity(
                            from_url=from_page.url,
                            to_url=to_page.url,
                            anchor_text=capitalize_topic(topic),
                        ))

                        if len(opportunities) >= MAX_CLUSTER_LINKING_OPPORTUNITIES:
                            return opportunities

        return opportunities

    def build_content_clusters(
        self,
        pages: List[CrawledPage],
        topics: Optional[List[str]] = None,
    ) -> List[ContentCluster]:
        """
        Build full content clusters with page suggestions and linking
        opportunities.

        Args:
            pages: Crawled pages
            topics: Site topics used to name anchors

        Returns:
            list: ContentCluster records
        """
        topics = topics or []
        content_clusters = []

        for cluster in self.identify_topic_clusters(pages):
            cluster_topics = self._cluster_topics(cluster, topics)
            base_topic = cluster.topic or (cluster_topics[0] if cluster_topics else "")
            main_topic = capitalize_topic(base_topic) or cluster.pages[0].url

            content_clusters.append(ContentCluster(
                main_topic=main_topic,
                pages=cluster.urls,
                suggested_pages=self._suggest_cluster_pages(base_topic.lower(), cluster.pages),
                internal_linking_opportunities=self._find_linking_opportunities(
                    cluster.pages, cluster_topics
                ),
            ))

        self.logger.info(f"Built {len(content_clusters)} content clusters from {len(pages)} pages")

        return content_clusters


def identify_topic_clusters(pages: List[CrawledPage]) -> List[PageCluster]:
    """Group pages into clusters with the default threshold."""
    return TopicClusterer().identify_topic_clusters(pages)


def find_most_relevant_cluster(
    target_topic: str,
    target_keywords: List[str],
    clusters: List[PageCluster],
) -> List[CrawledPage]:
    """Pages of the cluster most relevant to the target topic."""
    return TopicClusterer().find_most_relevant_cluster(target_topic, target_keywords, clusters)
