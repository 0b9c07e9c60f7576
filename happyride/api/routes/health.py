"""
Liveness endpoints
==================

GET /api/health -- health check with the list of endpoints
GET /api/test   -- plain connectivity check for the website
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from happyride.api.errors import AVAILABLE_ENDPOINTS
from happyride.api.schemas import HealthResponse, PingResponse
from happyride.config import settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse(
        timestamp=datetime.now(timezone.utc), endpoints=AVAILABLE_ENDPOINTS
    )


@router.get("/test", response_model=PingResponse, summary="Connectivity check")
async def ping():
    return PingResponse(
        timestamp=datetime.now(timezone.utc), server=f"{settings.business_name} API"
    )
