"""
Pydantic models for the issue-topic catalog.

Field names follow the mobile client's wire format (camelCase) through
aliases; Python code uses the snake_case attribute names.
"""

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator


class IssueCategory(str, Enum):
    """
    Closed set of category tags used to filter and route reports.
    Adding a category is a catalog change, not a matcher change.
    """
    ROADS = "roads"
    RUBBISH = "rubbish"
    LIGHTING = "lighting"
    PARKS = "parks"
    NOISE = "noise"
    GRAFFITI = "graffiti"
    PARKING = "parking"
    OTHER = "other"


class IssueTopic(BaseModel):
    """
    A single reportable issue type with its routing metadata.
    Immutable once loaded from the catalog.
    """
    id: str = Field(..., min_length=1, description="Stable topic identifier, never reused")
    title: str = Field(..., min_length=1, description="Short human-readable label")
    keywords: Tuple[str, ...] = Field(default_factory=tuple, description="Extra terms used for matching")
    department: str = Field(..., min_length=1, description="Responsible organisational unit")
    department_head: str = Field(..., min_length=1, alias="departmentHead", description="Accountable person for the department")
    department_email: str = Field(..., min_length=1, alias="departmentEmail", description="Department contact address")
    category: IssueCategory = Field(..., description="Canonical category tag")
    description: str = Field("", description="One-line explanation shown to the user")

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "rt_001",
                "title": "Pothole on road",
                "keywords": ["pothole", "road", "hole"],
                "department": "Roads & Transport",
                "departmentHead": "John Mitchell",
                "departmentEmail": "roads@citycouncil.gov",
                "category": "roads",
                "description": "Report potholes and road surface damage",
            }
        }

    @field_validator("keywords", mode="before")
    @classmethod
    def _dedupe_keywords(cls, value):
        # Duplicates carry no meaning; keep first occurrence
        if value is None:
            return ()
        if isinstance(value, str):
            raise ValueError("keywords must be a list of strings, not a single string")
        if not isinstance(value, (list, tuple)):
            return value
        seen = set()
        unique = []
        for keyword in value:
            if isinstance(keyword, str):
                if keyword in seen:
                    continue
                seen.add(keyword)
            unique.append(keyword)
        return tuple(unique)


class Department(BaseModel):
    """Derived view: one distinct department with its contact data."""
    name: str
    head: str
    email: str

    class Config:
        frozen = True


class ReportCategory(BaseModel):
    """Routing payload attached verbatim to a new report."""
    department: str
    department_head: str = Field(..., alias="departmentHead")
    department_email: str = Field(..., alias="departmentEmail")
    category: IssueCategory

    class Config:
        frozen = True
        populate_by_name = True


class TopicSearchResponse(BaseModel):
    """Response body for the topic search endpoint."""
    query: str
    limit: int
    count: int
    results: List[IssueTopic] = Field(default_factory=list)
