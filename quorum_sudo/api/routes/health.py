"""Health check endpoint for the Quorum Sudo API."""

from fastapi import APIRouter

from quorum_sudo.api.models.health import HealthResponse

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return health status."""
    return HealthResponse(status="healthy")
