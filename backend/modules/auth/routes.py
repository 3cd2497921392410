"""
Account API endpoints.

Three routers, by what they require:
- public_router: nothing (sign-up, login, forgot-password, listing)
- reset_router: a password-reset token
- router: a session token
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import RequireAuth, RequireResetToken, get_current_user, get_reset_user
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import (
    ForgetPasswordRequest,
    ForgetPasswordResponse,
    ForgetResetRequest,
    LoginRequest,
    LoginResponse,
    ResetPasswordRequest,
    SignUpRequest,
    UpdateUserRequest,
    UserProfile,
)

public_router = APIRouter()
reset_router = APIRouter(dependencies=[RequireResetToken])
router = APIRouter(dependencies=[RequireAuth])


@public_router.get("/users", response_model=list[UserProfile])
async def list_users(
    service: IAuthService = Depends(get_auth_service),
) -> list[UserProfile]:
    """List all live accounts."""
    return await service.list_users()


@public_router.post("/users/signup", response_model=UserProfile, status_code=201)
async def sign_up(
    request: SignUpRequest,
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """Create an account."""
    return await service.sign_up(request)


@public_router.post("/users/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Exchange email and password for a session token.

    Unknown emails and wrong passwords get the same 401.
    """
    return await service.login(request)


@public_router.post("/users/forgetPassword", response_model=ForgetPasswordResponse)
async def forget_password(
    request: ForgetPasswordRequest,
    service: IAuthService = Depends(get_auth_service),
) -> ForgetPasswordResponse:
    """
    Request a password-reset token.

    Always 200 with the same message, whether or not the email is known.
    """
    return await service.forget_password(request.email)


@reset_router.post("/users/forget/reset", response_model=UserProfile)
async def forget_reset(
    request: ForgetResetRequest,
    user: AuthenticatedUser = Depends(get_reset_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """
    Set a new password, authorized by a reset token in the
    ``Authorization`` header.
    """
    return await service.forget_reset(user, request)


@router.post("/users/resetPassword", response_model=UserProfile)
async def reset_password(
    request: ResetPasswordRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """Change the caller's password, given the current one."""
    return await service.reset_password(user, request)


@router.get("/users/me", response_model=UserProfile)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """Get the caller's profile."""
    return await service.get_profile(user.id)


@router.put("/users", response_model=UserProfile)
async def update_user(
    request: UpdateUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """Update the caller's profile. Omitted fields are left unchanged."""
    return await service.update_user(user, request)


@router.delete("/users", response_model=UserProfile)
async def delete_user(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """Delete the caller's account."""
    return await service.delete_user(user)
