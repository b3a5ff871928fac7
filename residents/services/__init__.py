"""
Services layer - business logic for the topic catalog.
Routes translate service exceptions into HTTP responses.
"""

from residents.services.category_resolver import resolve_category, resolve_category_by_id
from residents.services.topic_catalog import TopicCatalog, get_catalog, load_catalog
from residents.services.topic_search import rank_topics, search_issue_topics

__all__ = [
    "TopicCatalog",
    "get_catalog",
    "load_catalog",
    "rank_topics",
    "search_issue_topics",
    "resolve_category",
    "resolve_category_by_id",
]
