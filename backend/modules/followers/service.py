"""
Follower service implementation.
"""

import logging

from modules.auth.exceptions import UserNotFoundError
from modules.auth.repository import UserRepository
from shared.exceptions import ConflictError
from shared.models import AuthenticatedUser

from .exceptions import AlreadyFollowingError, FollowNotFoundError, SelfFollowError
from .interfaces import IFollowerService
from .models import Follow
from .repository import FollowerRepository

logger = logging.getLogger(__name__)


class FollowerService(IFollowerService):
    """Implementation of the follower service."""

    def __init__(self, repository: FollowerRepository, users: UserRepository):
        self._repo = repository
        self._users = users

    async def list_follows(self) -> list[Follow]:
        return self._repo.list_follows()

    async def list_followers(self, user_id: int) -> list[Follow]:
        return self._repo.list_followers(user_id)

    async def list_followings(self, user_id: int) -> list[Follow]:
        return self._repo.list_followings(user_id)

    async def follow(self, user: AuthenticatedUser, target_id: int) -> Follow:
        if target_id == user.id:
            raise SelfFollowError(user.id)

        if self._users.find_by_id(target_id) is None:
            raise UserNotFoundError(target_id)

        if self._repo.find(user.id, target_id) is not None:
            raise AlreadyFollowingError(target_id)

        try:
            follow = self._repo.insert(user.id, target_id)
        except ConflictError:
            # Lost a race with a concurrent follow of the same user
            raise AlreadyFollowingError(target_id)

        logger.info("User %s followed user %s", user.id, target_id)
        return follow

    async def unfollow(self, user: AuthenticatedUser, target_id: int) -> Follow:
        follow = self._repo.soft_delete_owned(user.id, target_id)
        if follow is None:
            raise FollowNotFoundError(target_id)
        logger.info("User %s unfollowed user %s", user.id, target_id)
        return follow
