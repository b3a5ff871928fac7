"""
Pydantic models for routing a new report to the responsible department.
"""

from typing import Optional

from pydantic import BaseModel, Field

from residents.models.topic import ReportCategory


class ReportRoutingRequest(BaseModel):
    """
    Report details sent by the client once a topic has been chosen.
    """
    topic_id: str = Field(..., min_length=1, description="Id of the selected issue topic")
    title: str = Field(..., min_length=1, max_length=200, description="Short report title")
    description: str = Field(..., min_length=1, max_length=2000, description="What the resident observed")
    council: Optional[str] = Field(None, max_length=200, description="Council selected during onboarding")
    address: Optional[str] = Field(None, max_length=500, description="Human-readable location")

    class Config:
        json_schema_extra = {
            "example": {
                "topic_id": "rt_001",
                "title": "Deep pothole outside school",
                "description": "Large pothole near the zebra crossing, getting worse after rain.",
                "council": "Camden Council",
                "address": "12 High Street, London",
            }
        }
        extra = "ignore"


class DepartmentEmailDraft(BaseModel):
    """Pre-filled correspondence for the department. Not sent by this service."""
    recipient: str
    department: str
    subject: str
    body: str
    mailto_url: str


class ReportRoutingResponse(BaseModel):
    category: ReportCategory
    email: DepartmentEmailDraft
