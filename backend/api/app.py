"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import Settings, get_settings
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ChirpError,
    ConflictError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)

from .dependencies import ServiceContainer
from .middleware.request_logging import configure_logging, register_request_logging
from .models.errors import AUTH_ERROR_RESPONSES, ErrorResponse, ValidationErrorResponse
from .routes import health
from modules.auth.routes import (
    router as users_router,
    public_router as users_public_router,
    reset_router as users_reset_router,
)
from modules.tweets.routes import router as tweets_router, public_router as tweets_public_router
from modules.comments.routes import router as comments_router, public_router as comments_public_router
from modules.followers.routes import router as followers_router, public_router as followers_public_router

logger = logging.getLogger(__name__)

# First match wins; anything unlisted is a 500
_ERROR_STATUS: list[tuple[type[ChirpError], int]] = [
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
    (ConflictError, 409),
    (StoreUnavailableError, 503),
]


def status_for(exc: ChirpError) -> int:
    """HTTP status for a ChirpError."""
    for error_class, status_code in _ERROR_STATUS:
        if isinstance(exc, error_class):
            return status_code
    return 500


async def chirp_error_handler(request: Request, exc: ChirpError) -> JSONResponse:
    """Turn any ChirpError into an ErrorResponse."""
    status_code = status_for(exc)
    headers = None

    if status_code >= 500:
        logger.error(
            "%s %s failed with %s",
            request.method,
            request.url.path,
            exc.code,
            exc_info=exc,
        )
        # Server-side failures never leak their message
        detail = HTTPStatus(status_code).phrase
    else:
        detail = exc.message

    if status_code == 401:
        headers = {"WWW-Authenticate": "Bearer"}

    body = ErrorResponse.for_status(status_code, detail=detail, code=exc.code)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400."""
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    container: ServiceContainer = app.state.container
    settings = container.settings
    # Raises ConfigurationError here, not on the first request, if the secret is missing
    tokens = container.tokens
    logger.info(
        "Starting %s on %s:%s (%s tokens)",
        settings.app_name,
        settings.host,
        settings.port,
        tokens.algorithm,
    )
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment if omitted
        container: Prebuilt service container (tests); built from
            ``settings`` if omitted

    Returns:
        Configured FastAPI instance
    """
    if container is None:
        container = ServiceContainer(settings or get_settings())
    settings = container.settings

    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Tweets, comments and follows with token authentication",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.container = container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    register_request_logging(app)

    app.add_exception_handler(ChirpError, chirp_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Register routes. Protected routers require a session token on every
    # route; public ones are reads plus sign-up, login and forgot-password.
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users_public_router, prefix="/api", tags=["users"])
    app.include_router(tweets_public_router, prefix="/api", tags=["tweets"])
    app.include_router(comments_public_router, prefix="/api", tags=["comments"])
    app.include_router(followers_public_router, prefix="/api", tags=["followers"])

    protected = [
        (users_reset_router, "users"),
        (users_router, "users"),
        (tweets_router, "tweets"),
        (comments_router, "comments"),
        (followers_router, "followers"),
    ]
    for router, tag in protected:
        app.include_router(router, prefix="/api", tags=[tag], responses=AUTH_ERROR_RESPONSES)

    return app
