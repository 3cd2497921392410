"""
Comments module.

Public API:
- ICommentService: Interface for comment operations
- Comment: Comment model
- CommentNotFoundError
"""

from .interfaces import ICommentService
from .models import Comment, CreateCommentRequest, UpdateCommentRequest
from .exceptions import CommentNotFoundError

__all__ = [
    "ICommentService",
    "Comment",
    "CreateCommentRequest",
    "UpdateCommentRequest",
    "CommentNotFoundError",
]
