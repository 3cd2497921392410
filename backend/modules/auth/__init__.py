"""
Authentication module.

Handles accounts, credentials, session and reset tokens.

Public API:
- IAuthService: Interface for account operations
- TokenService: Issues and verifies signed tokens
- PasswordHasher: bcrypt hashing of passwords
- UserProfile: Public view of an account
- Auth exceptions: InvalidTokenError, MissingTokenError, etc.
"""

from .interfaces import IAuthService
from .models import IdentityClaim, TokenPurpose, UserProfile
from .password import PasswordHasher
from .tokens import TokenService
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
    UserNotFoundError,
    PasswordTooLongError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Services
    "PasswordHasher",
    "TokenService",
    # Models
    "IdentityClaim",
    "TokenPurpose",
    "UserProfile",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
    "UserNotFoundError",
    "PasswordTooLongError",
]
