"""
User repository: the credential store.

Encapsulates all Supabase queries against the ``users`` table. Soft-deleted
accounts are invisible to every lookup here, so they can neither log in nor
be resolved from a token.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import UserRecord

USERS_TABLE = "users"


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user accounts.

    Writes are keyed by the stable user id, never by email: the id comes
    from the verified acting identity and cannot change under a request.
    """

    def list_users(self) -> list[UserRecord]:
        """All live accounts, oldest first."""
        result = self._execute(self._select_live(USERS_TABLE).order("id"))
        return [self._map_to_user(row) for row in result.data]

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a live account by email."""
        result = self._execute(self._select_live(USERS_TABLE).eq("email", email).limit(1))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        """Get a live account by id."""
        result = self._execute(self._select_live(USERS_TABLE).eq("id", user_id).limit(1))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def insert(self, data: dict[str, Any]) -> UserRecord:
        """
        Create an account.

        Raises:
            ConflictError: If the email is already used by a live account
        """
        return self._map_to_user(self._insert(USERS_TABLE, data))

    def update_password(self, user_id: int, password_hash: str) -> Optional[UserRecord]:
        """Store a new password hash. Returns None if the account is gone."""
        row = self._update_owned(
            USERS_TABLE, "id", user_id, {"password_hash": password_hash}, match={}
        )
        return self._map_to_user(row) if row else None

    def update_profile(self, user_id: int, changes: dict[str, Any]) -> Optional[UserRecord]:
        """Apply a partial profile update. Returns None if the account is gone."""
        row = self._update_owned(USERS_TABLE, "id", user_id, changes, match={})
        return self._map_to_user(row) if row else None

    def soft_delete(self, user_id: int) -> Optional[UserRecord]:
        """Mark an account deleted. Returns None if it already was."""
        row = self._soft_delete_owned(USERS_TABLE, "id", user_id, match={})
        return self._map_to_user(row) if row else None

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=data["id"],
            email=data["email"],
            username=data.get("username"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            age=data.get("age"),
            password_hash=data["password_hash"],
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
            deleted_at=data.get("deleted_at"),
        )
