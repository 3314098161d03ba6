"""Pydantic schema for the health endpoint."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str
    version: str
    uptime: int = Field(..., ge=0)
