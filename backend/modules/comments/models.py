"""
Comments module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

COMMENT_MAX_LENGTH = 500


class Comment(BaseModel):
    """A comment on a tweet, as stored."""

    id: int
    user_id: int = Field(..., description="Author's user ID")
    tweet_id: int = Field(..., description="ID of the tweet commented on")
    text: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


class CreateCommentRequest(BaseModel):
    """
    Request to comment on a tweet.

    The author is the caller and the tweet comes from the path.
    """

    text: str = Field(..., min_length=1, max_length=COMMENT_MAX_LENGTH)


class UpdateCommentRequest(BaseModel):
    """Replace the text of a comment."""

    text: str = Field(..., min_length=1, max_length=COMMENT_MAX_LENGTH)
