"""
Followers module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Follow(BaseModel):
    """
    A follow relationship.

    ``follower_id`` follows ``following_id``.
    """

    id: int
    follower_id: int = Field(..., description="ID of the user who follows")
    following_id: int = Field(..., description="ID of the user being followed")
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
