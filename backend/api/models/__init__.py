"""API models package."""

from .errors import AUTH_ERROR_RESPONSES, ErrorResponse, ValidationErrorResponse

__all__ = [
    "AUTH_ERROR_RESPONSES",
    "ErrorResponse",
    "ValidationErrorResponse",
]
