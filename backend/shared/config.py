"""
Centralized configuration for the Chirp backend.

All settings are loaded from environment variables (prefixed ``CHIRP_``)
with sensible defaults. The settings object is frozen: it is built once at
startup and handed to the services that need it.
"""

from functools import lru_cache
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHIRP_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "Chirp API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (resource and credential store)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    store_timeout_seconds: float = Field(default=10.0, gt=0)

    # Session tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    session_token_ttl_seconds: Optional[int] = Field(default=None, gt=0)
    reset_token_ttl_seconds: int = Field(default=900, gt=0)

    # Password hashing
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Return the password-reset token in the forgetPassword response.
    # Development only: there is no mail delivery.
    expose_reset_token: bool = False


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
