"""
Comment repository for database operations.

Encapsulates all Supabase queries against the ``comments`` table.
Comment lists read oldest first, in conversation order.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Comment

COMMENTS_TABLE = "comments"


class CommentRepository(BaseRepository[Comment]):
    """Repository for comments."""

    def list_comments(self) -> list[Comment]:
        result = self._execute(self._select_live(COMMENTS_TABLE).order("id"))
        return [self._map_to_comment(row) for row in result.data]

    def find_by_id(self, comment_id: int) -> Optional[Comment]:
        """Get a live comment by id."""
        result = self._execute(
            self._select_live(COMMENTS_TABLE).eq("id", comment_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_comment(result.data[0])

    def list_by_tweet(self, tweet_id: int) -> list[Comment]:
        result = self._execute(
            self._select_live(COMMENTS_TABLE).eq("tweet_id", tweet_id).order("id")
        )
        return [self._map_to_comment(row) for row in result.data]

    def list_by_user(self, user_id: int) -> list[Comment]:
        result = self._execute(
            self._select_live(COMMENTS_TABLE).eq("user_id", user_id).order("id")
        )
        return [self._map_to_comment(row) for row in result.data]

    def insert(self, user_id: int, tweet_id: int, text: str) -> Comment:
        row = self._insert(
            COMMENTS_TABLE,
            {"user_id": user_id, "tweet_id": tweet_id, "text": text},
        )
        return self._map_to_comment(row)

    def update_owned(self, user_id: int, comment_id: int, text: str) -> Optional[Comment]:
        """Replace the text of one of ``user_id``'s comments."""
        row = self._update_owned(
            COMMENTS_TABLE, "user_id", user_id, {"text": text}, match={"id": comment_id}
        )
        return self._map_to_comment(row) if row else None

    def soft_delete_owned(self, user_id: int, comment_id: int) -> Optional[Comment]:
        """Mark one of ``user_id``'s comments deleted."""
        row = self._soft_delete_owned(
            COMMENTS_TABLE, "user_id", user_id, match={"id": comment_id}
        )
        return self._map_to_comment(row) if row else None

    def _map_to_comment(self, data: dict[str, Any]) -> Comment:
        """Map database row to Comment model."""
        return Comment(
            id=data["id"],
            user_id=data["user_id"],
            tweet_id=data["tweet_id"],
            text=data["text"],
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
            deleted_at=data.get("deleted_at"),
        )
