"""
Health check API endpoints.

Routes: GET /health

Dependencies: ragchat.models
System role: Health check HTTP API
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from ragchat.models.health import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness check."""
    return HealthResponse(
        status="ok",
        message="RAG Chat API is running",
        timestamp=datetime.now(timezone.utc),
    )
