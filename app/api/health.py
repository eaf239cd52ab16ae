"""
Health check endpoint.
"""
from fastapi import APIRouter, status
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Basic health check response."""
    ok: bool


@router.get(
    "/api/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Returns 200 if the service is alive"
)
async def health_check() -> HealthResponse:
    """Used by the seed script before it prints instructions."""
    return HealthResponse(ok=True)
