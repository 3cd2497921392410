"""
Session token issuance and verification.

Tokens are JWTs signed with the configured secret. The payload carries the
identity claim, the token's purpose and its issue time; ``exp`` is only
present when a lifetime applies, so adding expiry never changes how tokens
are verified.
"""

import logging
import time
from typing import Any, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings
from shared.exceptions import ConfigurationError

from .exceptions import InvalidTokenError
from .models import IdentityClaim, TokenPayload, TokenPurpose

logger = logging.getLogger(__name__)


class TokenService:
    """
    Issues and verifies signed, stateless tokens.

    The secret is fixed at construction; build one instance per process
    from the startup settings.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        session_ttl_seconds: Optional[int] = None,
        reset_ttl_seconds: int = 900,
    ):
        if not secret:
            raise ConfigurationError(
                "Server authentication not configured",
                code="AUTH_NOT_CONFIGURED",
            )
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = {
            TokenPurpose.SESSION: session_ttl_seconds,
            TokenPurpose.PASSWORD_RESET: reset_ttl_seconds,
        }

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            session_ttl_seconds=settings.session_token_ttl_seconds,
            reset_ttl_seconds=settings.reset_token_ttl_seconds,
        )

    def issue(
        self,
        claim: IdentityClaim,
        purpose: TokenPurpose = TokenPurpose.SESSION,
        expires_in: Optional[int] = None,
    ) -> str:
        """
        Sign a token for ``claim``.

        Args:
            claim: Identity to embed
            purpose: What the token may be used for
            expires_in: Lifetime in seconds; defaults to the configured
                lifetime for ``purpose`` (none for session tokens unless set)

        Returns:
            Encoded JWT
        """
        now = int(time.time())
        if expires_in is None:
            expires_in = self._ttl[purpose]

        payload: dict[str, Any] = {
            "user": claim.user.model_dump(),
            "purpose": purpose.value,
            "iat": now,
        }
        if expires_in is not None:
            payload["exp"] = now + expires_in

        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(
        self,
        token: Optional[str],
        purpose: TokenPurpose = TokenPurpose.SESSION,
    ) -> IdentityClaim:
        """
        Verify signature, expiry and purpose, and return the identity claim.

        Raises:
            InvalidTokenError: For every kind of failure. The reason is only
                logged, never returned.
        """
        if not token:
            raise InvalidTokenError()

        try:
            data = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["iat"]},
            )
        except jwt.PyJWTError as e:
            logger.debug("Token rejected: %s", e.__class__.__name__)
            raise InvalidTokenError() from e

        payload = self._parse(data)
        if payload.purpose != purpose:
            logger.debug("Token rejected: purpose %s, expected %s", payload.purpose.value, purpose.value)
            raise InvalidTokenError()

        return IdentityClaim(user=payload.user)

    def decode(self, token: str) -> IdentityClaim:
        """
        Read the identity claim WITHOUT checking the signature.

        Only for inspecting tokens whose trust has been established some
        other way. Never use this to decide who is making a request.
        """
        try:
            data = jwt.decode(token, options={"verify_signature": False})
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e
        return IdentityClaim(user=self._parse(data).user)

    @staticmethod
    def _parse(data: dict[str, Any]) -> TokenPayload:
        try:
            return TokenPayload.model_validate(data)
        except PydanticValidationError as e:
            logger.debug("Token rejected: malformed claim (%d errors)", e.error_count())
            raise InvalidTokenError() from e
