"""
Follower API endpoints.
"""

from fastapi import APIRouter, Depends, Path

from api.dependencies import get_follower_service
from api.middleware.auth import RequireAuth, get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IFollowerService
from .models import Follow

public_router = APIRouter()
router = APIRouter(dependencies=[RequireAuth])


@public_router.get("/followers", response_model=list[Follow])
async def list_follows(
    service: IFollowerService = Depends(get_follower_service),
) -> list[Follow]:
    """List all follow relationships."""
    return await service.list_follows()


@public_router.get("/users/{user_id}/followers", response_model=list[Follow])
async def list_followers(
    user_id: int = Path(..., ge=1),
    service: IFollowerService = Depends(get_follower_service),
) -> list[Follow]:
    """List who follows a user."""
    return await service.list_followers(user_id)


@public_router.get("/users/{user_id}/followings", response_model=list[Follow])
async def list_followings(
    user_id: int = Path(..., ge=1),
    service: IFollowerService = Depends(get_follower_service),
) -> list[Follow]:
    """List who a user follows."""
    return await service.list_followings(user_id)


@router.post("/users/{user_id}/followers", response_model=Follow, status_code=201)
async def follow_user(
    user_id: int = Path(..., ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFollowerService = Depends(get_follower_service),
) -> Follow:
    """Follow a user."""
    return await service.follow(user, user_id)


@router.delete("/followers/{user_id}", response_model=Follow)
async def unfollow_user(
    user_id: int = Path(..., ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFollowerService = Depends(get_follower_service),
) -> Follow:
    """Stop following a user. The path holds the followed user's id."""
    return await service.unfollow(user, user_id)
