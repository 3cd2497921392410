"""
Tweet service implementation.
"""

import logging

from shared.models import AuthenticatedUser

from .exceptions import TweetNotFoundError
from .interfaces import ITweetService
from .models import CreateTweetRequest, Tweet, UpdateTweetRequest
from .repository import TweetRepository

logger = logging.getLogger(__name__)


class TweetService(ITweetService):
    """
    Implementation of the tweet service.

    An ownership miss is reported as not-found, so callers cannot discover
    which tweets belong to whom.
    """

    def __init__(self, repository: TweetRepository):
        self._repo = repository

    async def list_tweets(self) -> list[Tweet]:
        return self._repo.list_tweets()

    async def get_tweet(self, tweet_id: int) -> Tweet:
        tweet = self._repo.find_by_id(tweet_id)
        if tweet is None:
            raise TweetNotFoundError(tweet_id)
        return tweet

    async def list_user_tweets(self, user_id: int) -> list[Tweet]:
        return self._repo.list_by_user(user_id)

    async def create_tweet(
        self,
        user: AuthenticatedUser,
        request: CreateTweetRequest,
    ) -> Tweet:
        tweet = self._repo.insert(user.id, request.model_dump(mode="json"))
        logger.info("User %s posted tweet %s", user.id, tweet.id)
        return tweet

    async def update_tweet(
        self,
        user: AuthenticatedUser,
        tweet_id: int,
        request: UpdateTweetRequest,
    ) -> Tweet:
        tweet = self._repo.update_owned(user.id, tweet_id, request.changes())
        if tweet is None:
            logger.info("User %s could not update tweet %s", user.id, tweet_id)
            raise TweetNotFoundError(tweet_id)
        logger.info("User %s updated tweet %s", user.id, tweet_id)
        return tweet

    async def delete_tweet(self, user: AuthenticatedUser, tweet_id: int) -> Tweet:
        tweet = self._repo.soft_delete_owned(user.id, tweet_id)
        if tweet is None:
            logger.info("User %s could not delete tweet %s", user.id, tweet_id)
            raise TweetNotFoundError(tweet_id)
        logger.info("User %s deleted tweet %s", user.id, tweet_id)
        return tweet
