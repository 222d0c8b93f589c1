"""
Health check schemas.

Dependencies: pydantic
System role: Health API contract
"""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    timestamp: datetime
