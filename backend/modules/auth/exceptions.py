"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API error
handlers to return appropriate HTTP responses. Token and credential
failures deliberately carry a single fixed message each, so a client cannot
tell which check failed.
"""

from shared.exceptions import (
    AuthenticationError,
    ChirpError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, forged, expired or of the wrong kind."""

    def __init__(self):
        super().__init__("Invalid authentication token", code="INVALID_TOKEN")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self):
        super().__init__("Authentication required", code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """Raised for an unknown email, a deleted account or a wrong password."""

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when an email is already used by a live account."""

    def __init__(self):
        super().__init__("Email already registered", code="EMAIL_TAKEN")


class UserNotFoundError(NotFoundError):
    """Raised when a user doesn't exist or has been deleted."""

    def __init__(self, user_id: int):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class CorruptPasswordHashError(ChirpError):
    """Raised when a stored password digest cannot be parsed."""

    def __init__(self):
        super().__init__("Stored password hash is malformed", code="CORRUPT_PASSWORD_HASH")


class PasswordTooLongError(ValidationError):
    """Raised when a password is longer than bcrypt can hash."""

    def __init__(self, max_bytes: int):
        super().__init__(
            f"Password must be at most {max_bytes} bytes in UTF-8",
            code="PASSWORD_TOO_LONG",
            details={"max_bytes": max_bytes},
        )
