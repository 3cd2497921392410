"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents the acting user of a request.

    Populated by the auth middleware after the bearer token has been
    verified and the account re-loaded, then handed to route handlers via
    dependency injection. Every ownership check compares against ``id``.
    """

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    username: Optional[str] = Field(None, description="Username")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    age: Optional[int] = Field(None, description="Age")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from JWT
    }


class PartialUpdate(BaseModel):
    """
    Base for PATCH-style request bodies.

    Every field of a subclass is optional. A field is part of the update
    only if the client sent it with a non-null value.
    """

    def changes(self) -> dict[str, Any]:
        """Return the fields that are present, ready to be written."""
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)
