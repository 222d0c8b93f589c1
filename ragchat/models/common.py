"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned by every failing route."""

    error: str = Field(description="Error message")
