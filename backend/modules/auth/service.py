"""
Authentication service implementation.

Sign-up, login, the password lifecycle and profile management, on top of
the user repository, the bcrypt hasher and the token service.
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from shared.exceptions import ConflictError
from shared.models import AuthenticatedUser

from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from .interfaces import IAuthService
from .models import (
    ForgetPasswordResponse,
    ForgetResetRequest,
    IdentityClaim,
    LoginRequest,
    LoginResponse,
    ResetPasswordRequest,
    SignUpRequest,
    TokenPurpose,
    UpdateUserRequest,
    UserProfile,
    UserRecord,
)
from .password import PasswordHasher
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    bcrypt work runs in the thread pool so the event loop stays free.
    """

    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
        expose_reset_token: bool = False,
    ):
        self._repo = repository
        self._hasher = hasher
        self._tokens = tokens
        self._expose_reset_token = expose_reset_token
        self._dummy_hash: Optional[str] = None

    async def sign_up(self, request: SignUpRequest) -> UserProfile:
        """Hash the password and create the account."""
        if self._repo.find_by_email(request.email) is not None:
            raise EmailAlreadyRegisteredError()

        data = request.model_dump(exclude={"password"})
        data["password_hash"] = await run_in_threadpool(self._hasher.hash, request.password)

        try:
            record = self._repo.insert(data)
        except ConflictError:
            raise EmailAlreadyRegisteredError()

        logger.info("Registered user %s", record.id)
        return record.to_profile()

    async def login(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a session token."""
        record = self._repo.find_by_email(request.email)

        if record is None:
            # Spend the same bcrypt time as a real check before failing
            await run_in_threadpool(self._hasher.verify, request.password, await self._get_dummy_hash())
            logger.info("Login failed: unknown account")
            raise InvalidCredentialsError()

        if not await run_in_threadpool(self._hasher.verify, request.password, record.password_hash):
            logger.info("Login failed for user %s", record.id)
            raise InvalidCredentialsError()

        if self._hasher.needs_rehash(record.password_hash):
            await self._store_password(record.id, request.password)
            logger.info("Upgraded password hash for user %s", record.id)

        token = self._tokens.issue(IdentityClaim(user=record.to_identity()))
        logger.info("Login: user %s", record.id)
        return LoginResponse(token=token, user=record.to_profile())

    async def reset_password(
        self,
        user: AuthenticatedUser,
        request: ResetPasswordRequest,
    ) -> UserProfile:
        """Change the acting user's password after checking the old one."""
        record = self._repo.find_by_id(user.id)
        if record is None:
            raise InvalidCredentialsError()

        if not await run_in_threadpool(self._hasher.verify, request.old_password, record.password_hash):
            logger.info("Password change refused for user %s", user.id)
            raise InvalidCredentialsError()

        updated = await self._store_password(user.id, request.new_password)
        logger.info("Password changed for user %s", user.id)
        return updated.to_profile()

    async def forget_password(self, email: str) -> ForgetPasswordResponse:
        """Issue a reset token; respond identically for unknown emails."""
        token = await self.issue_reset_token(email)
        # TODO: send the token by email once a mail provider is configured
        return ForgetPasswordResponse(
            reset_token=token if self._expose_reset_token else None,
        )

    async def issue_reset_token(self, email: str) -> Optional[str]:
        """
        Create a password-reset token for a live account.

        The token itself is the capability to reset the password.

        Returns:
            The token, or None if no live account has this email
        """
        record = self._repo.find_by_email(email)
        if record is None:
            logger.info("Password reset requested for unknown account")
            return None

        token = self._tokens.issue(
            IdentityClaim(user=record.to_identity()),
            purpose=TokenPurpose.PASSWORD_RESET,
        )
        logger.info("Issued password reset token for user %s", record.id)
        return token

    async def forget_reset(
        self,
        user: AuthenticatedUser,
        request: ForgetResetRequest,
    ) -> UserProfile:
        """Store a new password for the user named by a verified reset token."""
        updated = await self._store_password(user.id, request.new_password)
        logger.info("Password reset completed for user %s", user.id)
        return updated.to_profile()

    async def update_user(
        self,
        user: AuthenticatedUser,
        request: UpdateUserRequest,
    ) -> UserProfile:
        """Apply the present fields of ``request`` to the acting user."""
        changes = request.changes()
        if not changes:
            return await self.get_profile(user.id)

        new_email = changes.get("email")
        if new_email is not None and new_email != user.email:
            existing = self._repo.find_by_email(new_email)
            if existing is not None and existing.id != user.id:
                raise EmailAlreadyRegisteredError()

        try:
            record = self._repo.update_profile(user.id, changes)
        except ConflictError:
            raise EmailAlreadyRegisteredError()

        if record is None:
            raise UserNotFoundError(user.id)
        logger.info("Updated profile of user %s (%s)", user.id, ", ".join(sorted(changes)))
        return record.to_profile()

    async def delete_user(self, user: AuthenticatedUser) -> UserProfile:
        """Soft-delete the acting user's account."""
        record = self._repo.soft_delete(user.id)
        if record is None:
            raise UserNotFoundError(user.id)
        logger.info("Deleted user %s", user.id)
        return record.to_profile()

    async def list_users(self) -> list[UserProfile]:
        return [record.to_profile() for record in self._repo.list_users()]

    async def get_profile(self, user_id: int) -> UserProfile:
        record = self._repo.find_by_id(user_id)
        if record is None:
            raise UserNotFoundError(user_id)
        return record.to_profile()

    async def get_acting_user(self, user_id: int) -> Optional[AuthenticatedUser]:
        record = self._repo.find_by_id(user_id)
        if record is None:
            return None
        return record.to_identity()

    async def _store_password(self, user_id: int, password: str) -> UserRecord:
        password_hash = await run_in_threadpool(self._hasher.hash, password)
        record = self._repo.update_password(user_id, password_hash)
        if record is None:
            raise UserNotFoundError(user_id)
        return record

    async def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = await run_in_threadpool(self._hasher.hash, "chirp-dummy-password")
        return self._dummy_hash
