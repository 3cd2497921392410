"""
Tweets module exceptions.
"""

from shared.exceptions import NotFoundError


class TweetNotFoundError(NotFoundError):
    """
    Raised when a tweet doesn't exist, has been deleted, or is not owned by
    the user trying to change it.
    """

    def __init__(self, tweet_id: int):
        super().__init__(
            f"Tweet not found: {tweet_id}",
            code="TWEET_NOT_FOUND",
            details={"tweet_id": tweet_id},
        )
