"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Optional
from pydantic import AfterValidator, BaseModel, EmailStr, Field

from shared.models import AuthenticatedUser, PartialUpdate

EMAIL_MAX_LENGTH = 60
PASSWORD_MAX_LENGTH = 30

# bcrypt only reads the first 72 bytes of its input
PASSWORD_MAX_BYTES = 72


def _check_email_length(value: str) -> str:
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
    return value


Email = Annotated[EmailStr, AfterValidator(_check_email_length)]


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes in UTF-8")
    return value


# Passwords that get hashed and stored
NewPassword = Annotated[
    str,
    Field(min_length=1, max_length=PASSWORD_MAX_LENGTH),
    AfterValidator(_check_password_bytes),
]


class TokenPurpose(str, Enum):
    """What a token may be used for."""

    SESSION = "session"
    PASSWORD_RESET = "password_reset"


class IdentityClaim(BaseModel):
    """
    The identity embedded in a token: ``{"user": {...}}``.

    Never contains the password hash.
    """

    user: AuthenticatedUser

    model_config = {"frozen": True, "extra": "ignore"}


class TokenPayload(IdentityClaim):
    """Full decoded token payload."""

    purpose: TokenPurpose = TokenPurpose.SESSION
    iat: int = Field(..., description="Issued at timestamp")
    exp: Optional[int] = Field(None, description="Expiration timestamp")


class UserRecord(BaseModel):
    """A row of the ``users`` table, as the credential store holds it."""

    id: int
    email: str
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    password_hash: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def to_identity(self) -> AuthenticatedUser:
        """Project the record onto the identity carried by tokens."""
        return AuthenticatedUser(
            id=self.id,
            email=self.email,
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
        )

    def to_profile(self) -> "UserProfile":
        """Project the record onto its public profile."""
        return UserProfile(**self.model_dump(exclude={"password_hash"}))


class UserProfile(BaseModel):
    """Public view of an account. Never includes the password hash."""

    id: int
    email: str
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------


class SignUpRequest(BaseModel):
    """Request to create an account."""

    username: str = Field(..., min_length=1, max_length=30)
    first_name: str = Field(..., min_length=1, max_length=15)
    last_name: str = Field(..., min_length=1, max_length=15)
    age: int = Field(..., ge=0, le=999)
    email: Email
    password: NewPassword


class LoginRequest(BaseModel):
    """
    Email and password login.

    The email is normalized the same way as at sign-up, so the lookup
    matches what was stored.
    """

    email: Email
    password: str = Field(..., max_length=30)


class ResetPasswordRequest(BaseModel):
    """
    Authenticated password change.

    The account is always the caller's; an ``email`` sent by older clients
    is ignored.
    """

    old_password: str = Field(..., max_length=30)
    new_password: NewPassword


class ForgetPasswordRequest(BaseModel):
    """Ask for a password-reset token. The email is normalized as at sign-up."""

    email: Email


class ForgetResetRequest(BaseModel):
    """Set a new password using a password-reset token."""

    new_password: NewPassword


class UpdateUserRequest(PartialUpdate):
    """Profile update. Absent fields keep their stored value."""

    username: Optional[str] = Field(None, min_length=1, max_length=30)
    first_name: Optional[str] = Field(None, min_length=1, max_length=15)
    last_name: Optional[str] = Field(None, min_length=1, max_length=15)
    age: Optional[int] = Field(None, ge=0, le=999)
    email: Optional[Email] = None


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------


class LoginResponse(BaseModel):
    """Session token plus the logged-in profile."""

    token: str
    user: UserProfile


class ForgetPasswordResponse(BaseModel):
    """
    Identical for known and unknown emails.

    ``reset_token`` is only filled in when the server runs with
    ``expose_reset_token`` enabled.
    """

    message: str = "If the account exists, a password reset has been issued"
    reset_token: Optional[str] = None
