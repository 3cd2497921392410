"""
Tweet repository for database operations.

Encapsulates all Supabase queries against the ``tweets`` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Tweet

TWEETS_TABLE = "tweets"


class TweetRepository(BaseRepository[Tweet]):
    """Repository for tweets. Reads only ever see live rows."""

    def list_tweets(self) -> list[Tweet]:
        """All live tweets, newest first."""
        result = self._execute(
            self._select_live(TWEETS_TABLE).order("id", desc=True)
        )
        return [self._map_to_tweet(row) for row in result.data]

    def find_by_id(self, tweet_id: int) -> Optional[Tweet]:
        """Get a live tweet by id."""
        result = self._execute(
            self._select_live(TWEETS_TABLE).eq("id", tweet_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_tweet(result.data[0])

    def list_by_user(self, user_id: int) -> list[Tweet]:
        """A user's live tweets, newest first."""
        result = self._execute(
            self._select_live(TWEETS_TABLE)
            .eq("user_id", user_id)
            .order("id", desc=True)
        )
        return [self._map_to_tweet(row) for row in result.data]

    def insert(self, user_id: int, data: dict[str, Any]) -> Tweet:
        """Create a tweet authored by ``user_id``."""
        return self._map_to_tweet(self._insert(TWEETS_TABLE, {**data, "user_id": user_id}))

    def update_owned(
        self,
        user_id: int,
        tweet_id: int,
        changes: dict[str, Any],
    ) -> Optional[Tweet]:
        """
        Update one tweet if ``user_id`` wrote it.

        Returns:
            The updated tweet, or None if it is missing, deleted or
            someone else's
        """
        row = self._update_owned(
            TWEETS_TABLE, "user_id", user_id, changes, match={"id": tweet_id}
        )
        return self._map_to_tweet(row) if row else None

    def soft_delete_owned(self, user_id: int, tweet_id: int) -> Optional[Tweet]:
        """Mark one of ``user_id``'s tweets deleted."""
        row = self._soft_delete_owned(
            TWEETS_TABLE, "user_id", user_id, match={"id": tweet_id}
        )
        return self._map_to_tweet(row) if row else None

    def _map_to_tweet(self, data: dict[str, Any]) -> Tweet:
        """Map database row to Tweet model."""
        return Tweet(
            id=data["id"],
            user_id=data["user_id"],
            text=data["text"],
            photo=data.get("photo"),
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
            deleted_at=data.get("deleted_at"),
        )
