"""
Health check endpoints.
Used for monitoring, deployment readiness checks, and basic connectivity tests.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from residents.core.errors import CatalogError
from residents.core.settings import settings
from residents.services.topic_catalog import get_catalog


router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if service is running.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/catalog")
async def catalog_health():
    """
    Topic catalog readiness check.
    Reports topic and department counts, 503 if the catalog cannot be loaded.
    """
    try:
        catalog = get_catalog()
    except CatalogError as e:
        raise HTTPException(
            status_code=503,
            detail=f"Topic catalog unavailable: {str(e)}"
        )

    return {
        "status": "healthy",
        "catalog_version": catalog.version,
        "topics_count": len(catalog),
        "departments_count": len(catalog.list_departments()),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
