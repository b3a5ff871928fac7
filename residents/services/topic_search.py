"""
Issue Topic Search - map a resident's free text to ranked catalog topics.

Matching is case-insensitive substring containment against a topic's
title, keywords and department name. Ranking puts title matches first,
then orders each tier alphabetically by title.

DESIGN PRINCIPLES:
- Deterministic: same query and catalog always give the same order
- No hidden state: every call is independent
- Empty query is "no search yet", not an error
- Failures surface as TopicSearchError, never as an empty result
"""

import asyncio
import logging
from typing import Iterable, List, Optional

from residents.core.errors import CatalogError, TopicSearchError
from residents.core.settings import settings
from residents.models.topic import IssueTopic
from residents.services.topic_catalog import TopicCatalog, get_catalog

logger = logging.getLogger(__name__)


def normalize_query(query: Optional[str]) -> str:
    """Trim and lowercase a query for comparison. None becomes ''."""
    if not query:
        return ""
    return query.strip().lower()


def title_matches(topic: IssueTopic, normalized_query: str) -> bool:
    return normalized_query in topic.title.lower()


def is_candidate(topic: IssueTopic, normalized_query: str) -> bool:
    """
    A topic is a candidate if the query is a substring of its title,
    any keyword, or its department name.
    """
    if title_matches(topic, normalized_query):
        return True
    if any(normalized_query in keyword.lower() for keyword in topic.keywords):
        return True
    return normalized_query in topic.department.lower()


def _rank_key(topic: IssueTopic, normalized_query: str):
    # Tier 0 = title match. Within a tier: title alphabetical, id breaks exact ties
    tier = 0 if title_matches(topic, normalized_query) else 1
    return (tier, topic.title.lower(), topic.title, topic.id)


def rank_topics(
    topics: Iterable[IssueTopic],
    query: Optional[str],
    limit: int = 10
) -> List[IssueTopic]:
    """
    Rank topics against a free-text query.

    Args:
        topics: Topics to search (catalog order is irrelevant to the result)
        query: Raw user input, may be empty or whitespace
        limit: Maximum number of results

    Returns:
        Ranked list of at most `limit` topics; empty for an empty query
    """
    normalized = normalize_query(query)
    if not normalized or limit <= 0:
        return []

    candidates = [topic for topic in topics if is_candidate(topic, normalized)]
    candidates.sort(key=lambda topic: _rank_key(topic, normalized))
    return candidates[:limit]


async def search_issue_topics(
    query: Optional[str],
    limit: Optional[int] = None,
    catalog: Optional[TopicCatalog] = None,
    timeout: Optional[float] = None
) -> List[IssueTopic]:
    """
    Search the topic catalog.

    Suspends once for the configured simulated latency, standing in for
    a remote search call. The whole operation is bounded by `timeout`.

    Args:
        query: Raw user input
        limit: Maximum number of results (default: SEARCH_DEFAULT_LIMIT)
        catalog: Catalog to search (default: process-wide catalog)
        timeout: Deadline in seconds (default: SEARCH_TIMEOUT_SECONDS)

    Returns:
        Ranked topics (possibly empty)

    Raises:
        TopicSearchError: If the deadline passes or the catalog is unavailable
    """
    if limit is None:
        limit = settings.SEARCH_DEFAULT_LIMIT
    if timeout is None:
        timeout = settings.SEARCH_TIMEOUT_SECONDS

    async def _run() -> List[IssueTopic]:
        if settings.SEARCH_LATENCY_SECONDS > 0:
            await asyncio.sleep(settings.SEARCH_LATENCY_SECONDS)
        source = catalog if catalog is not None else get_catalog()
        return rank_topics(source.topics, query, limit)

    try:
        results = await asyncio.wait_for(_run(), timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.warning(f"Topic search timed out after {timeout}s: query={query!r}")
        raise TopicSearchError(f"Topic search timed out after {timeout}s", query=query) from e
    except CatalogError as e:
        logger.error(f"Topic search failed, catalog unavailable: {e}")
        raise TopicSearchError(f"Topic catalog unavailable: {e}", query=query) from e

    logger.debug(f"Topic search query={query!r} limit={limit} -> {len(results)} results")
    return results
