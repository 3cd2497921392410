"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and future extraction to a microservice.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    ForgetPasswordResponse,
    ForgetResetRequest,
    LoginRequest,
    LoginResponse,
    ResetPasswordRequest,
    SignUpRequest,
    UpdateUserRequest,
    UserProfile,
)


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account and credential operations.

    Every operation that changes an account takes the acting user, as
    resolved by the auth middleware, and only ever touches that account.
    """

    async def sign_up(self, request: SignUpRequest) -> UserProfile:
        """
        Create an account.

        Raises:
            EmailAlreadyRegisteredError: If the email belongs to a live account
        """
        ...

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Check credentials and issue a session token.

        Raises:
            InvalidCredentialsError: For an unknown email, a deleted account
                or a wrong password alike
        """
        ...

    async def reset_password(
        self,
        user: AuthenticatedUser,
        request: ResetPasswordRequest,
    ) -> UserProfile:
        """
        Change the acting user's password, given the current one.

        Raises:
            InvalidCredentialsError: If the old password does not match
        """
        ...

    async def forget_password(self, email: str) -> ForgetPasswordResponse:
        """
        Issue a password-reset token if the email belongs to a live account.

        The response is the same whether or not it does.
        """
        ...

    async def forget_reset(
        self,
        user: AuthenticatedUser,
        request: ForgetResetRequest,
    ) -> UserProfile:
        """
        Set a new password for the user a verified reset token names.
        """
        ...

    async def update_user(
        self,
        user: AuthenticatedUser,
        request: UpdateUserRequest,
    ) -> UserProfile:
        """
        Apply a partial profile update to the acting user.

        Raises:
            EmailAlreadyRegisteredError: If the new email is taken
        """
        ...

    async def delete_user(self, user: AuthenticatedUser) -> UserProfile:
        """Soft-delete the acting user's account."""
        ...

    async def list_users(self) -> list[UserProfile]:
        """List live accounts."""
        ...

    async def get_profile(self, user_id: int) -> UserProfile:
        """
        Get a live account's profile.

        Raises:
            UserNotFoundError: If there is no live account with this id
        """
        ...

    async def get_acting_user(self, user_id: int) -> Optional[AuthenticatedUser]:
        """
        Load the current identity for a verified token's user id.

        Returns:
            The identity built from the stored account, or None if the
            account no longer exists
        """
        ...
