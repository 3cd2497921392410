"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic salting and a configurable
work factor. bcrypt digests are self-describing (``$2b$<rounds>$...``), so
raising the work factor never invalidates existing hashes; old ones are
upgraded on the next successful login.

bcrypt ignores everything past 72 bytes of input. Nothing is truncated
here: longer passwords cannot be hashed and never verify.
"""

import bcrypt

from .exceptions import CorruptPasswordHashError, PasswordTooLongError
from .models import PASSWORD_MAX_BYTES


class PasswordHasher:
    """bcrypt hasher bound to a work factor."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """
        Hash a password with a fresh salt.

        Raises:
            PasswordTooLongError: If the password exceeds 72 UTF-8 bytes
        """
        encoded = password.encode("utf-8")
        if len(encoded) > PASSWORD_MAX_BYTES:
            raise PasswordTooLongError(PASSWORD_MAX_BYTES)
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Constant-time comparison against a bcrypt hash.

        Returns False on mismatch, and for passwords too long to have been
        hashed. A digest bcrypt cannot parse means the stored record is
        corrupt, which is not a login failure.

        Raises:
            CorruptPasswordHashError: If ``password_hash`` is malformed
        """
        encoded = password.encode("utf-8")
        if len(encoded) > PASSWORD_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode())
        except (ValueError, TypeError, AttributeError) as e:
            raise CorruptPasswordHashError() from e

    def needs_rehash(self, password_hash: str) -> bool:
        """True if the hash was made with a lower work factor than configured."""
        parts = password_hash.split("$")
        # ["", "2b", "12", "<salt+digest>"]
        if len(parts) != 4 or not parts[2].isdigit():
            raise CorruptPasswordHashError()
        return int(parts[2]) < self._rounds
