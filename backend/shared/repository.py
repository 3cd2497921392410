"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access, store error translation, soft-delete filtering and
the ownership-scoped mutations every write path goes through.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ConflictError, StoreError, StoreUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def utcnow_iso() -> str:
    """Current UTC time as an ISO-8601 string, the format the store expects."""
    return datetime.now(timezone.utc).isoformat()


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Translation of store failures into ChirpError subclasses
    - Live-row selection (``deleted_at IS NULL``)
    - Ownership-scoped conditional update and soft delete

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally. Nothing here is retried:
    a failed write is reported, never replayed.

    Example:
        class TweetRepository(BaseRepository[Tweet]):
            def find_by_id(self, tweet_id: int) -> Optional[Tweet]:
                result = self._execute(self._select_live("tweets").eq("id", tweet_id))
                if not result.data:
                    return None
                return self._map_to_tweet(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any) -> Any:
        """Run a query builder, translating store failures."""
        try:
            return query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise ConflictError(
                    "Resource already exists",
                    code="DUPLICATE",
                    details={"constraint": e.details},
                ) from e
            logger.error("Store query failed: %s (code=%s)", e.message, e.code)
            raise StoreError("Store query failed", details={"code": e.code}) from e
        except httpx.TransportError as e:
            logger.error("Store unreachable: %s", e)
            raise StoreUnavailableError() from e

    def _select_live(self, table: str) -> Any:
        """Select query over rows that are not soft-deleted."""
        return self._db.table(table).select("*").is_("deleted_at", "null")

    def _insert(self, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a row and return it as stored."""
        result = self._execute(self._db.table(table).insert(data))
        return result.data[0]

    def _update_owned(
        self,
        table: str,
        owner_column: str,
        owner_id: int,
        data: dict[str, Any],
        match: dict[str, Any],
    ) -> Optional[dict[str, Any]]:
        """
        Update a live row only if it belongs to ``owner_id``.

        Issues a single conditional statement, equivalent to
        ``UPDATE table SET data WHERE match AND owner_column = owner_id
        AND deleted_at IS NULL``.

        Args:
            table: Table name.
            owner_column: Column holding the owning user's id.
            owner_id: The acting user's id.
            data: Columns to set.
            match: Additional equality conditions identifying the row(s).

        Returns:
            The first updated row, or None when nothing matched (missing,
            deleted, or owned by someone else).
        """
        query = self._db.table(table).update({**data, "updated_at": utcnow_iso()})
        for column, value in match.items():
            query = query.eq(column, value)
        query = query.eq(owner_column, owner_id).is_("deleted_at", "null")

        result = self._execute(query)
        if not result.data:
            return None
        return result.data[0]

    def _soft_delete_owned(
        self,
        table: str,
        owner_column: str,
        owner_id: int,
        match: dict[str, Any],
    ) -> Optional[dict[str, Any]]:
        """Mark a live row owned by ``owner_id`` as deleted."""
        return self._update_owned(
            table,
            owner_column,
            owner_id,
            {"deleted_at": utcnow_iso()},
            match,
        )
