"""
Followers module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Follow


@runtime_checkable
class IFollowerService(Protocol):
    """
    Interface for follow operations.

    The follower side of a new or removed follow is always the acting user.
    """

    async def list_follows(self) -> list[Follow]:
        ...

    async def list_followers(self, user_id: int) -> list[Follow]:
        """List the live follows pointing at a user."""
        ...

    async def list_followings(self, user_id: int) -> list[Follow]:
        """List the live follows a user has made."""
        ...

    async def follow(self, user: AuthenticatedUser, target_id: int) -> Follow:
        """
        Make the acting user follow ``target_id``.

        Raises:
            SelfFollowError: If ``target_id`` is the acting user
            UserNotFoundError: If the target doesn't exist or is deleted
            AlreadyFollowingError: If the follow already exists
        """
        ...

    async def unfollow(self, user: AuthenticatedUser, target_id: int) -> Follow:
        """
        Stop the acting user following ``target_id``.

        Raises:
            FollowNotFoundError: If the acting user does not follow the target
        """
        ...
