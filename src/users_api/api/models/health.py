"""Pydantic models for the liveness probe."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Fixed status payload returned by ``/health``."""

    status: str = "OK"
    message: str = "API is running correctly"
