"""
Followers module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class SelfFollowError(ValidationError):
    """Raised when a user tries to follow themselves."""

    def __init__(self, user_id: int):
        super().__init__(
            "You cannot follow yourself",
            code="SELF_FOLLOW",
            details={"user_id": user_id},
        )


class AlreadyFollowingError(ConflictError):
    """Raised when the follow already exists."""

    def __init__(self, following_id: int):
        super().__init__(
            f"Already following user: {following_id}",
            code="ALREADY_FOLLOWING",
            details={"following_id": following_id},
        )


class FollowNotFoundError(NotFoundError):
    """Raised when the acting user does not follow the given user."""

    def __init__(self, following_id: int):
        super().__init__(
            f"Not following user: {following_id}",
            code="FOLLOW_NOT_FOUND",
            details={"following_id": following_id},
        )
