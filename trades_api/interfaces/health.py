"""
Health check router.

Liveness probe. Does not touch the database or the event bus.
"""

from fastapi import APIRouter, Request

from trades_api.interfaces.trading.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=request.app.state.settings.version)
