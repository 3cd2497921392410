"""
Tweets module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, HttpUrl

from shared.models import PartialUpdate

TEXT_MAX_LENGTH = 500


class Tweet(BaseModel):
    """A tweet as stored."""

    id: int
    user_id: int = Field(..., description="Author's user ID")
    text: str
    photo: Optional[str] = Field(None, description="Photo URL")
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


class CreateTweetRequest(BaseModel):
    """
    Request to post a tweet.

    The author is always the caller; a ``user_id`` in the body is ignored.
    """

    text: str = Field(..., min_length=1, max_length=TEXT_MAX_LENGTH)
    photo: Optional[HttpUrl] = None


class UpdateTweetRequest(PartialUpdate):
    """Tweet edit. Absent fields keep their stored value."""

    text: Optional[str] = Field(None, min_length=1, max_length=TEXT_MAX_LENGTH)
    photo: Optional[HttpUrl] = None
