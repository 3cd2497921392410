"""
Comment service implementation.
"""

import logging

from modules.tweets.exceptions import TweetNotFoundError
from modules.tweets.repository import TweetRepository
from shared.models import AuthenticatedUser

from .exceptions import CommentNotFoundError
from .interfaces import ICommentService
from .models import Comment, CreateCommentRequest, UpdateCommentRequest
from .repository import CommentRepository

logger = logging.getLogger(__name__)


class CommentService(ICommentService):
    """Implementation of the comment service."""

    def __init__(self, repository: CommentRepository, tweets: TweetRepository):
        self._repo = repository
        self._tweets = tweets

    async def list_comments(self) -> list[Comment]:
        return self._repo.list_comments()

    async def get_comment(self, comment_id: int) -> Comment:
        comment = self._repo.find_by_id(comment_id)
        if comment is None:
            raise CommentNotFoundError(comment_id)
        return comment

    async def list_tweet_comments(self, tweet_id: int) -> list[Comment]:
        return self._repo.list_by_tweet(tweet_id)

    async def list_user_comments(self, user_id: int) -> list[Comment]:
        return self._repo.list_by_user(user_id)

    async def create_comment(
        self,
        user: AuthenticatedUser,
        tweet_id: int,
        request: CreateCommentRequest,
    ) -> Comment:
        if self._tweets.find_by_id(tweet_id) is None:
            raise TweetNotFoundError(tweet_id)

        comment = self._repo.insert(user.id, tweet_id, request.text)
        logger.info("User %s commented %s on tweet %s", user.id, comment.id, tweet_id)
        return comment

    async def update_comment(
        self,
        user: AuthenticatedUser,
        comment_id: int,
        request: UpdateCommentRequest,
    ) -> Comment:
        comment = self._repo.update_owned(user.id, comment_id, request.text)
        if comment is None:
            logger.info("User %s could not update comment %s", user.id, comment_id)
            raise CommentNotFoundError(comment_id)
        logger.info("User %s updated comment %s", user.id, comment_id)
        return comment

    async def delete_comment(self, user: AuthenticatedUser, comment_id: int) -> Comment:
        comment = self._repo.soft_delete_owned(user.id, comment_id)
        if comment is None:
            logger.info("User %s could not delete comment %s", user.id, comment_id)
            raise CommentNotFoundError(comment_id)
        logger.info("User %s deleted comment %s", user.id, comment_id)
        return comment
