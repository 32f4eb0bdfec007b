"""
Health check router.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from ..dependencies import get_search_service
from ..services.faq_search_service import FAQSearchService

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    service: str
    version: str
    faq_count: int


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns 200 with the FAQ corpus size if the service is running",
)
async def health_check(service: FAQSearchService = Depends(get_search_service)):
    """
    Basic health check.

    Used by load balancers and orchestrators for liveness probes.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        service=service.settings.SERVICE_NAME,
        version=service.settings.VERSION,
        faq_count=await service.repository.count(),
    )
