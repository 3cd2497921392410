"""
Followers module.

Public API:
- IFollowerService: Interface for follow operations
- Follow: Follow relationship model
- Follower exceptions: SelfFollowError, AlreadyFollowingError, FollowNotFoundError
"""

from .interfaces import IFollowerService
from .models import Follow
from .exceptions import AlreadyFollowingError, FollowNotFoundError, SelfFollowError

__all__ = [
    "IFollowerService",
    "Follow",
    "AlreadyFollowingError",
    "FollowNotFoundError",
    "SelfFollowError",
]
