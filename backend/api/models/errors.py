"""
Error response models.

Every failure leaves the API as one of these two bodies. ``code`` is the
stable, machine-readable part; ``detail`` is for humans and is generic for
server-side failures.
"""

from http import HTTPStatus
from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="HTTP reason phrase")
    detail: Optional[str] = None
    code: Optional[str] = Field(None, description="Error code, e.g. TWEET_NOT_FOUND")

    @classmethod
    def for_status(
        cls,
        status_code: int,
        detail: Optional[str] = None,
        code: Optional[str] = None,
    ) -> "ErrorResponse":
        return cls(error=HTTPStatus(status_code).phrase, detail=detail, code=code)


class ValidationErrorResponse(BaseModel):
    """Validation error response format (HTTP 400)."""

    error: str = "Validation Error"
    detail: list[dict[str, Any]]


# OpenAPI documentation for routers that require a token
AUTH_ERROR_RESPONSES: dict[int, dict[str, Any]] = {
    401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    404: {"model": ErrorResponse, "description": "Not found, or not yours"},
}
