"""
Tweet API endpoints.

Reads are on ``public_router``; every route on ``router`` requires a
session token.
"""

from fastapi import APIRouter, Depends, Path

from api.dependencies import get_tweet_service
from api.middleware.auth import RequireAuth, get_current_user
from shared.models import AuthenticatedUser

from .interfaces import ITweetService
from .models import CreateTweetRequest, Tweet, UpdateTweetRequest

public_router = APIRouter()
router = APIRouter(dependencies=[RequireAuth])


@public_router.get("/tweets", response_model=list[Tweet])
async def list_tweets(
    service: ITweetService = Depends(get_tweet_service),
) -> list[Tweet]:
    """List all tweets, most recent first."""
    return await service.list_tweets()


@public_router.get("/tweets/{tweet_id}", response_model=Tweet)
async def get_tweet(
    tweet_id: int = Path(..., ge=1),
    service: ITweetService = Depends(get_tweet_service),
) -> Tweet:
    """Get a specific tweet."""
    return await service.get_tweet(tweet_id)


@public_router.get("/users/{user_id}/tweets", response_model=list[Tweet])
async def list_user_tweets(
    user_id: int = Path(..., ge=1),
    service: ITweetService = Depends(get_tweet_service),
) -> list[Tweet]:
    """List a user's tweets, most recent first."""
    return await service.list_user_tweets(user_id)


@router.post("/tweets", response_model=Tweet, status_code=201)
async def create_tweet(
    request: CreateTweetRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITweetService = Depends(get_tweet_service),
) -> Tweet:
    """Post a tweet."""
    return await service.create_tweet(user, request)


@router.put("/tweets/{tweet_id}", response_model=Tweet)
async def update_tweet(
    request: UpdateTweetRequest,
    tweet_id: int = Path(..., ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITweetService = Depends(get_tweet_service),
) -> Tweet:
    """
    Edit one of your tweets.

    Someone else's tweet is reported as not found.
    """
    return await service.update_tweet(user, tweet_id, request)


@router.delete("/tweets/{tweet_id}", response_model=Tweet)
async def delete_tweet(
    tweet_id: int = Path(..., ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITweetService = Depends(get_tweet_service),
) -> Tweet:
    """Delete one of your tweets and return it."""
    return await service.delete_tweet(user, tweet_id)
