"""Pydantic models for request/response validation."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str
