"""
Category Resolver - project a chosen topic onto the routing payload
attached to a new report.
"""

from typing import Optional

from residents.core.errors import TopicNotFoundError
from residents.models.topic import IssueTopic, ReportCategory
from residents.services.topic_catalog import TopicCatalog, get_catalog


def resolve_category(topic: IssueTopic) -> ReportCategory:
    """Copy the department, contact and category fields of a topic."""
    return ReportCategory(
        department=topic.department,
        department_head=topic.department_head,
        department_email=topic.department_email,
        category=topic.category,
    )


def resolve_category_by_id(
    topic_id: str,
    catalog: Optional[TopicCatalog] = None
) -> ReportCategory:
    """
    Resolve the routing payload for a topic id.

    Raises:
        TopicNotFoundError: If the id is not in the catalog
    """
    source = catalog if catalog is not None else get_catalog()
    topic = source.get_by_id(topic_id)
    if topic is None:
        raise TopicNotFoundError(topic_id)
    return resolve_category(topic)
