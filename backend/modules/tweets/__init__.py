"""
Tweets module.

Public API:
- ITweetService: Interface for tweet operations
- Tweet: Tweet model
- TweetNotFoundError
"""

from .interfaces import ITweetService
from .models import Tweet, CreateTweetRequest, UpdateTweetRequest
from .exceptions import TweetNotFoundError

__all__ = [
    "ITweetService",
    "Tweet",
    "CreateTweetRequest",
    "UpdateTweetRequest",
    "TweetNotFoundError",
]
