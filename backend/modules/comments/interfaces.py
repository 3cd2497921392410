"""
Comments module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Comment, CreateCommentRequest, UpdateCommentRequest


@runtime_checkable
class ICommentService(Protocol):
    """Interface for comment operations."""

    async def list_comments(self) -> list[Comment]:
        ...

    async def get_comment(self, comment_id: int) -> Comment:
        """
        Get a live comment.

        Raises:
            CommentNotFoundError: If the comment doesn't exist or is deleted
        """
        ...

    async def list_tweet_comments(self, tweet_id: int) -> list[Comment]:
        ...

    async def list_user_comments(self, user_id: int) -> list[Comment]:
        ...

    async def create_comment(
        self,
        user: AuthenticatedUser,
        tweet_id: int,
        request: CreateCommentRequest,
    ) -> Comment:
        """
        Comment on a tweet as the acting user.

        Raises:
            TweetNotFoundError: If the tweet doesn't exist or is deleted
        """
        ...

    async def update_comment(
        self,
        user: AuthenticatedUser,
        comment_id: int,
        request: UpdateCommentRequest,
    ) -> Comment:
        """
        Edit one of the acting user's comments.

        Raises:
            CommentNotFoundError: If the comment is missing, deleted or not
                the acting user's
        """
        ...

    async def delete_comment(self, user: AuthenticatedUser, comment_id: int) -> Comment:
        """
        Soft-delete one of the acting user's comments.

        Raises:
            CommentNotFoundError: If the comment is missing, deleted or not
                the acting user's
        """
        ...
