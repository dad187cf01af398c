"""Tests for shared/config.py."""

import logging
import os
from datetime import timedelta
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from shared.config import Settings, TokenSettings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Roadmap API"
        assert settings.debug is False
        assert settings.port == 8080
        assert settings.host == "0.0.0.0"
        assert settings.app_version == "0.1.0"
        assert settings.jwt_expires_in_hours == 24
        assert settings.bcrypt_rounds == 10
        assert settings.store_timeout_seconds is None
        assert settings.cors_max_age == 43200

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_jwt_config_from_env(self):
        with patch.dict(os.environ, {
            "JWT_SECRET_KEY": "env-secret",
            "JWT_EXPIRES_IN_HOURS": "2",
        }):
            settings = Settings(_env_file=None)
            assert settings.jwt_secret_key == "env-secret"
            assert settings.jwt_expires_in_hours == 2

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "STORE_TIMEOUT_SECONDS": "2.5",
        }):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"
            assert settings.store_timeout_seconds == 2.5

    @pytest.mark.parametrize("rounds", ["3", "32"])
    def test_bcrypt_rounds_bounds(self, rounds):
        with patch.dict(os.environ, {"BCRYPT_ROUNDS": rounds}):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestTokenSettings:
    def test_token_settings(self):
        settings = Settings(_env_file=None, jwt_secret_key="s", jwt_expires_in_hours=6)
        token_settings = settings.token_settings()

        assert token_settings.secret_key == "s"
        assert token_settings.expires_in == timedelta(hours=6)

    @pytest.mark.parametrize("hours", [0, -5])
    def test_non_positive_lifetime_falls_back(self, hours, caplog):
        """Zero or negative hours fall back to the default with a warning."""
        settings = Settings(_env_file=None, jwt_expires_in_hours=hours)

        with caplog.at_level(logging.WARNING, logger="shared.config"):
            token_settings = settings.token_settings()

        assert token_settings.expires_in == timedelta(hours=24)
        assert "JWT_EXPIRES_IN_HOURS" in caplog.text

    def test_token_settings_are_immutable(self):
        token_settings = TokenSettings(secret_key="s", expires_in=timedelta(hours=1))
        with pytest.raises(Exception):
            token_settings.secret_key = "other"


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
