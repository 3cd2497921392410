"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

One container is built per application from the startup settings and kept
on ``app.state``; there is no process-wide service singleton.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Request

from shared.config import Settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.auth.password import PasswordHasher
    from modules.auth.repository import UserRepository
    from modules.auth.tokens import TokenService
    from modules.comments.interfaces import ICommentService
    from modules.comments.repository import CommentRepository
    from modules.followers.interfaces import IFollowerService
    from modules.followers.repository import FollowerRepository
    from modules.tweets.interfaces import ITweetService
    from modules.tweets.repository import TweetRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access and cached
    for the lifetime of the container.

    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Settings, db: "Optional[Client]" = None) -> None:
        self._settings = settings
        self._db = db
        self._tokens: "TokenService | None" = None
        self._hasher: "PasswordHasher | None" = None
        self._user_repository: "UserRepository | None" = None
        self._tweet_repository: "TweetRepository | None" = None
        self._comment_repository: "CommentRepository | None" = None
        self._follower_repository: "FollowerRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._tweet_service: "ITweetService | None" = None
        self._comment_service: "ICommentService | None" = None
        self._follower_service: "IFollowerService | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def db(self) -> "Client":
        """Get the store client."""
        if self._db is None:
            from shared.database import create_supabase_client
            self._db = create_supabase_client(self._settings)
        return self._db

    @property
    def tokens(self) -> "TokenService":
        """Get the token service, bound to the configured secret."""
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            self._tokens = TokenService.from_settings(self._settings)
        return self._tokens

    @property
    def hasher(self) -> "PasswordHasher":
        """Get the password hasher, bound to the configured work factor."""
        if self._hasher is None:
            from modules.auth.password import PasswordHasher
            self._hasher = PasswordHasher(rounds=self._settings.bcrypt_rounds)
        return self._hasher

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def tweet_repository(self) -> "TweetRepository":
        if self._tweet_repository is None:
            from modules.tweets.repository import TweetRepository
            self._tweet_repository = TweetRepository(self.db)
        return self._tweet_repository

    @property
    def comment_repository(self) -> "CommentRepository":
        if self._comment_repository is None:
            from modules.comments.repository import CommentRepository
            self._comment_repository = CommentRepository(self.db)
        return self._comment_repository

    @property
    def follower_repository(self) -> "FollowerRepository":
        if self._follower_repository is None:
            from modules.followers.repository import FollowerRepository
            self._follower_repository = FollowerRepository(self.db)
        return self._follower_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                repository=self.user_repository,
                hasher=self.hasher,
                tokens=self.tokens,
                expose_reset_token=self._settings.expose_reset_token,
            )
        return self._auth_service

    @property
    def tweets(self) -> "ITweetService":
        """Get the tweet service instance."""
        if self._tweet_service is None:
            from modules.tweets.service import TweetService
            self._tweet_service = TweetService(repository=self.tweet_repository)
        return self._tweet_service

    @property
    def comments(self) -> "ICommentService":
        """Get the comment service instance."""
        if self._comment_service is None:
            from modules.comments.service import CommentService
            self._comment_service = CommentService(
                repository=self.comment_repository,
                tweets=self.tweet_repository,
            )
        return self._comment_service

    @property
    def followers(self) -> "IFollowerService":
        """Get the follower service instance."""
        if self._follower_service is None:
            from modules.followers.service import FollowerService
            self._follower_service = FollowerService(
                repository=self.follower_repository,
                users=self.user_repository,
            )
        return self._follower_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies. The store
        client passed at construction is kept.
        """
        self._tokens = None
        self._hasher = None
        self._user_repository = None
        self._tweet_repository = None
        self._comment_repository = None
        self._follower_repository = None
        self._auth_service = None
        self._tweet_service = None
        self._comment_service = None
        self._follower_service = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """The container of the application serving this request."""
    return request.app.state.container


def get_token_service(request: Request) -> "TokenService":
    """FastAPI dependency for the token service."""
    return get_container(request).tokens


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_tweet_service(request: Request) -> "ITweetService":
    """FastAPI dependency for tweet service."""
    return get_container(request).tweets


def get_comment_service(request: Request) -> "ICommentService":
    """FastAPI dependency for comment service."""
    return get_container(request).comments


def get_follower_service(request: Request) -> "IFollowerService":
    """FastAPI dependency for follower service."""
    return get_container(request).followers
