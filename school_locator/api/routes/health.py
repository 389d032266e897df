"""
Observability endpoints
=======================

GET /health -- simple liveness check
"""

from fastapi import APIRouter

from school_locator.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
