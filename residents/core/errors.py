"""
Exception types raised by the topic services.

Routes translate these into HTTP responses; services never return
sentinel error values.
"""

from typing import Optional


class ResidentsError(Exception):
    """Base class for all service errors."""


class CatalogError(ResidentsError):
    """The topic catalog data file is missing, malformed, or inconsistent."""


class TopicNotFoundError(ResidentsError):
    """No topic with the requested id exists in the catalog."""

    def __init__(self, topic_id: str):
        self.topic_id = topic_id
        super().__init__(f"Issue topic not found: {topic_id}")


class TopicSearchError(ResidentsError):
    """
    A search could not be completed (deadline exceeded or backend failure).

    Distinct from an empty result: callers must be able to tell
    "nothing matched" from "search failed".
    """

    def __init__(self, message: str, query: Optional[str] = None):
        self.query = query
        super().__init__(message)
