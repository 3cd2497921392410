"""
Tweets module interface.

The API layer depends on ITweetService for all tweet operations.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import CreateTweetRequest, Tweet, UpdateTweetRequest


@runtime_checkable
class ITweetService(Protocol):
    """
    Interface for tweet operations.

    Reads are public. Writes take the acting user and only ever touch
    that user's tweets.
    """

    async def list_tweets(self) -> list[Tweet]:
        """List live tweets, newest first."""
        ...

    async def get_tweet(self, tweet_id: int) -> Tweet:
        """
        Get a live tweet.

        Raises:
            TweetNotFoundError: If the tweet doesn't exist or is deleted
        """
        ...

    async def list_user_tweets(self, user_id: int) -> list[Tweet]:
        """List a user's live tweets, newest first."""
        ...

    async def create_tweet(
        self,
        user: AuthenticatedUser,
        request: CreateTweetRequest,
    ) -> Tweet:
        """Post a tweet as the acting user."""
        ...

    async def update_tweet(
        self,
        user: AuthenticatedUser,
        tweet_id: int,
        request: UpdateTweetRequest,
    ) -> Tweet:
        """
        Edit one of the acting user's tweets.

        Raises:
            TweetNotFoundError: If the tweet is missing, deleted or not the
                acting user's
        """
        ...

    async def delete_tweet(self, user: AuthenticatedUser, tweet_id: int) -> Tweet:
        """
        Soft-delete one of the acting user's tweets.

        Raises:
            TweetNotFoundError: If the tweet is missing, deleted or not the
                acting user's
        """
        ...
