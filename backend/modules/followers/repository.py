"""
Follower repository for database operations.

Encapsulates all Supabase queries against the ``followers`` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Follow

FOLLOWERS_TABLE = "followers"


class FollowerRepository(BaseRepository[Follow]):
    """Repository for follow relationships. Unfollowed rows are never listed."""

    def list_follows(self) -> list[Follow]:
        result = self._execute(self._select_live(FOLLOWERS_TABLE).order("id"))
        return [self._map_to_follow(row) for row in result.data]

    def list_followers(self, user_id: int) -> list[Follow]:
        """Live follows pointing at ``user_id``."""
        result = self._execute(
            self._select_live(FOLLOWERS_TABLE).eq("following_id", user_id).order("id")
        )
        return [self._map_to_follow(row) for row in result.data]

    def list_followings(self, user_id: int) -> list[Follow]:
        """Live follows made by ``user_id``."""
        result = self._execute(
            self._select_live(FOLLOWERS_TABLE).eq("follower_id", user_id).order("id")
        )
        return [self._map_to_follow(row) for row in result.data]

    def find(self, follower_id: int, following_id: int) -> Optional[Follow]:
        """Get the live follow from one user to another, if any."""
        result = self._execute(
            self._select_live(FOLLOWERS_TABLE)
            .eq("follower_id", follower_id)
            .eq("following_id", following_id)
            .limit(1)
        )
        if not result.data:
            return None
        return self._map_to_follow(result.data[0])

    def insert(self, follower_id: int, following_id: int) -> Follow:
        row = self._insert(
            FOLLOWERS_TABLE,
            {"follower_id": follower_id, "following_id": following_id},
        )
        return self._map_to_follow(row)

    def soft_delete_owned(self, follower_id: int, following_id: int) -> Optional[Follow]:
        """End ``follower_id``'s follow of ``following_id``."""
        row = self._soft_delete_owned(
            FOLLOWERS_TABLE,
            "follower_id",
            follower_id,
            match={"following_id": following_id},
        )
        return self._map_to_follow(row) if row else None

    def _map_to_follow(self, data: dict[str, Any]) -> Follow:
        """Map database row to Follow model."""
        return Follow(
            id=data["id"],
            follower_id=data["follower_id"],
            following_id=data["following_id"],
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
            deleted_at=data.get("deleted_at"),
        )
