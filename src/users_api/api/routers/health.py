"""Liveness probe."""

from fastapi import APIRouter

from users_api.api.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Report that the API is up; does not touch the repository."""
    return HealthResponse()
