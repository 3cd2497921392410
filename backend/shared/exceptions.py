"""
Base exception classes for the Chirp backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps every base class to one HTTP status, so a module only
has to pick the right parent.
"""

from typing import Optional, Any


class ChirpError(Exception):
    """
    Base exception for all Chirp errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(ChirpError):
    """Resource not found, or not owned by the caller."""

    pass


class ValidationError(ChirpError):
    """Input validation failed."""

    pass


class AuthenticationError(ChirpError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(ChirpError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConflictError(ChirpError):
    """The request conflicts with existing state (e.g. a unique key)."""

    pass


class ConfigurationError(ChirpError):
    """The server is missing required configuration."""

    pass


class ExternalServiceError(ChirpError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StoreError(ExternalServiceError):
    """The resource store rejected or failed a query."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, service="store", code="STORE_ERROR", details=details)


class StoreUnavailableError(ExternalServiceError):
    """The resource store did not answer in time or could not be reached."""

    def __init__(self, message: str = "Store is unavailable"):
        super().__init__(message, service="store", code="STORE_UNAVAILABLE")
