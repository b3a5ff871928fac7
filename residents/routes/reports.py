"""
Report endpoints - resolve where a new report should go.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from residents.core.errors import TopicNotFoundError
from residents.models.report import ReportRoutingRequest, ReportRoutingResponse
from residents.services.analytics_service import get_analytics
from residents.services.report_routing import route_report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.post("/routing", response_model=ReportRoutingResponse)
async def route_new_report(report: ReportRoutingRequest):
    """
    Resolve the department and category for a report.

    Returns the routing payload to attach to the stored report and an
    email draft addressed to the department. Nothing is sent.
    """
    try:
        logger.info(f"📝 POST /reports/routing - topic_id={report.topic_id}, council={report.council}")
        result = route_report(report)
    except TopicNotFoundError as e:
        logger.warning(f"POST /reports/routing - {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    get_analytics().track_report_routed(
        report.topic_id,
        result.category.category.value,
        council=report.council,
    )
    return result
