"""
Comment API endpoints.
"""

from fastapi import APIRouter, Depends, Path

from api.dependencies import get_comment_service
from api.middleware.auth import RequireAuth, get_current_user
from shared.models import AuthenticatedUser

from .interfaces import ICommentService
from .models import Comment, CreateCommentRequest, UpdateCommentRequest

public_router = APIRouter()
router = APIRouter(dependencies=[RequireAuth])


@public_router.get("/comments", response_model=list[Comment])
async def list_comments(
    service: ICommentService = Depends(get_comment_service),
) -> list[Comment]:
    """List all comments."""
    return await service.list_comments()


@public_router.get("/comments/{comment_id}", response_model=Comment)
async def get_comment(
    comment_id: int = Path(..., ge=1),
    service: ICommentService = Depends(get_comment_service),
) -> Comment:
    """Get a specific comment."""
    return await service.get_comment(comment_id)


@public_router.get("/tweets/{tweet_id}/comments", response_model=list[Comment])
async def list_tweet_comments(
    tweet_id: int = Path(..., ge=1),
    service: ICommentService = Depends(get_comment_service),
) -> list[Comment]:
    """List the comments on a tweet."""
    return await service.list_tweet_comments(tweet_id)


@public_router.get("/users/{user_id}/comments", response_model=list[Comment])
async def list_user_comments(
    user_id: int = Path(..., ge=1),
    service: ICommentService = Depends(get_comment_service),
) -> list[Comment]:
    """List the comments a user has written."""
    return await service.list_user_comments(user_id)


@router.post("/tweets/{tweet_id}/comments", response_model=Comment, status_code=201)
async def create_comment(
    request: CreateCommentRequest,
    tweet_id: int = Path(..., ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICommentService = Depends(get_comment_service),
) -> Comment:
    """Comment on a tweet."""
    return await service.create_comment(user, tweet_id, request)


@router.put("/comments/{comment_id}", response_model=Comment)
async def update_comment(
    request: UpdateCommentRequest,
    comment_id: int = Path(..., ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICommentService = Depends(get_comment_service),
) -> Comment:
    """Edit one of your comments."""
    return await service.update_comment(user, comment_id, request)


@router.delete("/comments/{comment_id}", response_model=Comment)
async def delete_comment(
    comment_id: int = Path(..., ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICommentService = Depends(get_comment_service),
) -> Comment:
    """
    Delete one of your comments and return it.

    Someone else's comment is reported as not found and left untouched.
    """
    return await service.delete_comment(user, comment_id)
