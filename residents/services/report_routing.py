"""
Report Routing Service - attach the resolved category to a new report and
draft the department-facing email.

The draft is returned to the client; this service never sends mail.
"""

import logging
from typing import Optional
from urllib.parse import quote

from residents.models.report import (
    DepartmentEmailDraft,
    ReportRoutingRequest,
    ReportRoutingResponse,
)
from residents.models.topic import ReportCategory
from residents.services.category_resolver import resolve_category_by_id
from residents.services.topic_catalog import TopicCatalog

logger = logging.getLogger(__name__)

APP_SIGNATURE = "Submitted via Active Residents App"


def build_email_body(report: ReportRoutingRequest, routing: ReportCategory) -> str:
    lines = [
        f"Dear {routing.department},",
        "",
        "I would like to report the following issue:",
        "",
        f"Category: {routing.category.value}",
        f"Title: {report.title}",
        "",
        "Description:",
        report.description,
        "",
    ]
    if report.address:
        lines += [f"Location: {report.address}", ""]
    if report.council:
        lines += [f"Council: {report.council}", ""]
    lines += [
        "Please investigate and take appropriate action.",
        "",
        "Thank you,",
        APP_SIGNATURE,
    ]
    return "\n".join(lines)


def build_email_draft(report: ReportRoutingRequest, routing: ReportCategory) -> DepartmentEmailDraft:
    subject = f"Report: {report.title}"
    body = build_email_body(report, routing)
    mailto_url = (
        f"mailto:{routing.department_email}"
        f"?subject={quote(subject)}&body={quote(body)}"
    )
    return DepartmentEmailDraft(
        recipient=routing.department_email,
        department=routing.department,
        subject=subject,
        body=body,
        mailto_url=mailto_url,
    )


def route_report(
    report: ReportRoutingRequest,
    catalog: Optional[TopicCatalog] = None
) -> ReportRoutingResponse:
    """
    Resolve the routing payload for a report and draft its email.

    Raises:
        TopicNotFoundError: If report.topic_id is not in the catalog
    """
    routing = resolve_category_by_id(report.topic_id, catalog=catalog)
    draft = build_email_draft(report, routing)
    logger.info(
        f"Routed report '{report.title}' (topic {report.topic_id}) "
        f"to {routing.department} <{routing.department_email}>"
    )
    return ReportRoutingResponse(category=routing, email=draft)
