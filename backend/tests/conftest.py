"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Every fixture builds its own settings, store and container: nothing is read
from the environment and nothing is shared between tests.
"""

from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from fake_supabase import FakeSupabase
from modules.auth.models import IdentityClaim, TokenPurpose
from modules.auth.password import PasswordHasher
from modules.auth.tokens import TokenService
from shared.config import Settings
from shared.models import AuthenticatedUser


# Test JWT secret (only for testing). Long enough for HS256.
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"
TEST_PASSWORD = "p1-secret"


def make_settings(**overrides: Any) -> Settings:
    """Settings for tests: fast bcrypt, reset tokens returned in responses."""
    values: dict[str, Any] = {
        "jwt_secret": TEST_JWT_SECRET,
        "bcrypt_rounds": 4,
        "expose_reset_token": True,
        "supabase_url": "http://store.test",
        "supabase_service_role_key": "test-service-role-key",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def create_test_token(
    user: AuthenticatedUser,
    purpose: TokenPurpose = TokenPurpose.SESSION,
    secret: str = TEST_JWT_SECRET,
    expires_in: Optional[int] = None,
) -> str:
    """
    Create a signed token for ``user``.

    Args:
        user: Identity to embed
        purpose: Session or password reset
        secret: Signing secret
        expires_in: Lifetime in seconds; negative for an already expired token
    """
    tokens = TokenService(secret=secret)
    return tokens.issue(IdentityClaim(user=user), purpose=purpose, expires_in=expires_in)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def fake_db() -> FakeSupabase:
    """Empty in-memory store."""
    return FakeSupabase()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return TokenService.from_settings(settings)


@pytest.fixture
def container(settings: Settings, fake_db: FakeSupabase) -> ServiceContainer:
    """Service container wired to the in-memory store."""
    return ServiceContainer(settings, db=fake_db)


@pytest.fixture
def client(container: ServiceContainer) -> TestClient:
    """Test client for an app built around ``container``."""
    return TestClient(create_app(container=container))


@pytest.fixture
def make_user(fake_db: FakeSupabase, hasher: PasswordHasher) -> Callable[..., AuthenticatedUser]:
    """
    Factory that stores an account directly and returns its identity.

    Usage:
        alice = make_user("alice@example.com")
    """

    def _make_user(email: str, password: str = TEST_PASSWORD, **fields: Any) -> AuthenticatedUser:
        row = {
            "email": email,
            "username": fields.get("username", email.split("@")[0]),
            "first_name": fields.get("first_name", "Test"),
            "last_name": fields.get("last_name", "User"),
            "age": fields.get("age", 30),
            "password_hash": hasher.hash(password),
        }
        stored = fake_db.table("users").insert(row).execute().data[0]
        return AuthenticatedUser(**stored)

    return _make_user


@pytest.fixture
def auth_headers() -> Callable[[AuthenticatedUser], dict[str, str]]:
    """Build ``Authorization`` headers carrying a session token for a user."""

    def _auth_headers(user: AuthenticatedUser) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_test_token(user)}"}

    return _auth_headers
