"""
Issue topic endpoints - search, lookup and category listing used by the
mobile client's report flow.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from residents.core.errors import TopicNotFoundError, TopicSearchError
from residents.core.settings import settings
from residents.models.topic import (
    Department,
    IssueCategory,
    IssueTopic,
    ReportCategory,
    TopicSearchResponse,
)
from residents.services.analytics_service import get_analytics
from residents.services.category_resolver import resolve_category_by_id
from residents.services.topic_catalog import get_catalog
from residents.services.topic_search import search_issue_topics

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/issue-topics", tags=["Issue Topics"])
departments_router = APIRouter(prefix="/departments", tags=["Departments"])


@router.get("/search", response_model=TopicSearchResponse)
async def search_topics(
    q: str = Query("", description="Free-text description of the issue"),
    limit: Optional[int] = Query(None, ge=1, le=settings.SEARCH_MAX_LIMIT, description="Maximum results")
):
    """
    Search issue topics by free text.

    An empty query returns no results. Minimum query length and debouncing
    are the client's concern.

    A failed search returns 503 so the client can offer a retry instead of
    showing "no matches".
    """
    effective_limit = limit or settings.SEARCH_DEFAULT_LIMIT
    try:
        results = await search_issue_topics(q, limit=effective_limit)
    except TopicSearchError as e:
        logger.error(f"❌ GET /issue-topics/search failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Topic search unavailable: {e}"
        )

    if q.strip():
        get_analytics().track_search(q.strip(), len(results))

    return TopicSearchResponse(
        query=q,
        limit=effective_limit,
        count=len(results),
        results=results,
    )


@router.get("/category/{category}", response_model=List[IssueTopic])
async def topics_by_category(category: IssueCategory):
    """All topics tagged with a category, in catalog order."""
    return get_catalog().get_by_category(category)


@router.get("/{topic_id}", response_model=IssueTopic)
async def get_topic(topic_id: str):
    topic = get_catalog().get_by_id(topic_id)
    if topic is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Issue topic not found: {topic_id}"
        )
    get_analytics().track_topic_view(topic_id)
    return topic


@router.get("/{topic_id}/category", response_model=ReportCategory)
async def get_topic_category(topic_id: str):
    """Routing payload (department, contact, category) for a topic."""
    try:
        return resolve_category_by_id(topic_id)
    except TopicNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@departments_router.get("", response_model=List[Department])
async def list_departments():
    """Distinct departments with head and email, sorted by name."""
    return get_catalog().list_departments()
