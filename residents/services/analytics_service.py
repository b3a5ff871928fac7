"""
Analytics Service - in-process usage events for searches and report routing.

Events are held in a bounded buffer; the oldest are evicted once
ANALYTICS_MAX_EVENTS is reached.
"""

import logging
from collections import deque
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Optional

from pydantic import BaseModel, Field

from residents.core.settings import settings

logger = logging.getLogger(__name__)


class AnalyticsEvent(BaseModel):
    name: str
    properties: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class AnalyticsService:
    """Service for recording usage events."""

    def __init__(self, max_events: Optional[int] = None, enabled: Optional[bool] = None):
        self.max_events = max_events if max_events is not None else settings.ANALYTICS_MAX_EVENTS
        self.enabled = enabled if enabled is not None else settings.ANALYTICS_ENABLED
        self._events: Deque[AnalyticsEvent] = deque(maxlen=self.max_events)

    def track_event(self, name: str, properties: Optional[Dict[str, Any]] = None) -> None:
        if not self.enabled:
            return
        event = AnalyticsEvent(name=name, properties=properties or {})
        self._events.append(event)
        logger.info(f"📊 Event: {name} {event.properties}")

    def track_search(self, query: str, result_count: int) -> None:
        self.track_event("search_performed", {"query": query, "result_count": result_count})

    def track_topic_view(self, topic_id: str) -> None:
        self.track_event("topic_viewed", {"topic_id": topic_id})

    def track_report_routed(self, topic_id: str, category: str, council: Optional[str] = None) -> None:
        self.track_event("report_routed", {
            "topic_id": topic_id,
            "category": category,
            "council": council,
        })

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled
        logger.info(f"Analytics {'enabled' if enabled else 'disabled'}")

    def get_recent_events(self, limit: int = 10) -> List[AnalyticsEvent]:
        """Most recent `limit` events, oldest first."""
        if limit <= 0:
            return []
        return list(self._events)[-limit:]

    def __len__(self) -> int:
        return len(self._events)


# Global service instance (singleton)
_analytics: Optional[AnalyticsService] = None


def get_analytics() -> AnalyticsService:
    global _analytics
    if _analytics is None:
        _analytics = AnalyticsService()
    return _analytics
