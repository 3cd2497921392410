"""
Bearer token authentication.

Verifies the token, re-loads the account it names and exposes the result
as the acting user. Handlers must take identity from these dependencies
(or ``request.state.user``), never from the request body or path.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import InvalidTokenError, MissingTokenError
from modules.auth.interfaces import IAuthService
from modules.auth.models import TokenPurpose
from modules.auth.tokens import TokenService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service, get_token_service

logger = logging.getLogger(__name__)

# Bearer token extractor. A missing header or another scheme yields None.
bearer_scheme = HTTPBearer(auto_error=False)


async def authenticate(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    tokens: TokenService,
    auth: IAuthService,
    purpose: TokenPurpose = TokenPurpose.SESSION,
) -> AuthenticatedUser:
    """
    Resolve the acting user of a request.

    Args:
        request: Current request; receives ``state.user`` and ``state.token``
        credentials: Parsed ``Authorization`` header, if any
        tokens: Token service holding the signing secret
        auth: Auth service used to re-load the account
        purpose: Kind of token the route accepts

    Returns:
        The identity built from the current stored account

    Raises:
        MissingTokenError: No bearer token was sent
        InvalidTokenError: The token failed verification, or its account
            no longer exists
    """
    if credentials is None:
        raise MissingTokenError()

    claim = tokens.verify(credentials.credentials, purpose)

    user = await auth.get_acting_user(claim.user.id)
    if user is None:
        logger.info("Rejected token for missing account %s", claim.user.id)
        raise InvalidTokenError()

    request.state.user = user
    request.state.token = credentials.credentials
    return user


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires a session token.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return await authenticate(request, credentials, tokens, auth)


async def get_reset_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires a password-reset token.

    Session tokens are rejected, and reset tokens are rejected everywhere
    else.
    """
    return await authenticate(
        request, credentials, tokens, auth, purpose=TokenPurpose.PASSWORD_RESET
    )


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
RequireResetToken = Depends(get_reset_user)
