"""
Shared pydantic schemas for API error responses.
"""

from typing import Literal

from pydantic import BaseModel


class ValidationErrorDetail(BaseModel):
    """A single validation error."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Response for validation errors."""

    error: Literal["validation_error"]
    details: list[ValidationErrorDetail]
