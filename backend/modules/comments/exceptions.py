"""
Comments module exceptions.
"""

from shared.exceptions import NotFoundError


class CommentNotFoundError(NotFoundError):
    """
    Raised when a comment doesn't exist, has been deleted, or is not owned
    by the user trying to change it.
    """

    def __init__(self, comment_id: int):
        super().__init__(
            f"Comment not found: {comment_id}",
            code="COMMENT_NOT_FOUND",
            details={"comment_id": comment_id},
        )
