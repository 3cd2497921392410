"""Tests for shared/config.py."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "Chirp API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.jwt_algorithm == "HS256"
        assert settings.session_token_ttl_seconds is None
        assert settings.reset_token_ttl_seconds == 900
        assert settings.bcrypt_rounds == 12
        assert settings.expose_reset_token is False

    def test_loads_from_prefixed_env(self):
        """Settings should load CHIRP_-prefixed environment variables."""
        with patch.dict(os.environ, {
            "CHIRP_DEBUG": "true",
            "CHIRP_PORT": "9000",
            "CHIRP_JWT_SECRET": "from-env",
            "CHIRP_SESSION_TOKEN_TTL_SECONDS": "3600",
        }):
            settings = Settings(_env_file=None)
        assert settings.debug is True
        assert settings.port == 9000
        assert settings.jwt_secret == "from-env"
        assert settings.session_token_ttl_seconds == 3600

    def test_ignores_unprefixed_env(self):
        with patch.dict(os.environ, {"JWT_SECRET": "unprefixed"}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.jwt_secret == ""

    def test_settings_are_frozen(self):
        settings = Settings(_env_file=None, jwt_secret="a")
        with pytest.raises(ValidationError):
            settings.jwt_secret = "b"

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_bounds(self, rounds):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, bcrypt_rounds=rounds)

    def test_store_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, store_timeout_seconds=0)


class TestGetSettings:
    def test_get_settings_is_cached(self):
        """get_settings should return the same instance each time."""
        get_settings.cache_clear()
        try:
            assert isinstance(get_settings(), Settings)
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
