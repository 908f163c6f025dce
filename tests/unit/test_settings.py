"""
Unit tests for backend/settings.py
"""
import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings

pytestmark = pytest.mark.unit


class TestDefaults:

    def test_defaults(self, monkeypatch):
        for var in ("PORT", "HOST", "ENVIRONMENT", "SUPABASE_URL", "USERS_TABLE", "EXERCISES_TABLE"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.environment == "development"
        assert settings.users_table == "users"
        assert settings.exercises_table == "exercises"
        assert settings.supabase_url is None

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings(_env_file=None).port == 8080

    def test_invalid_port_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(port=0, _env_file=None)


class TestSupabaseKey:

    def test_service_role_key_preferred(self):
        settings = Settings(
            supabase_service_role_key="service",
            supabase_anon_key="anon",
            _env_file=None,
        )
        assert settings.supabase_key == "service"

    def test_falls_back_to_anon_key(self):
        settings = Settings(supabase_anon_key="anon", supabase_service_role_key=None, _env_file=None)
        assert settings.supabase_key == "anon"


class TestValidators:

    def test_environment_is_normalized(self):
        assert Settings(environment="PRODUCTION", _env_file=None).is_production

    def test_unknown_environment_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(environment="qa", _env_file=None)

    def test_log_level_is_normalized(self):
        assert Settings(log_level="DEBUG", _env_file=None).log_level == "debug"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty", _env_file=None)


class TestCorsOrigins:

    def test_empty_means_wildcard(self):
        assert Settings(cors_allowed_origins="", _env_file=None).cors_origins_list == ["*"]

    def test_parsed_and_normalized(self):
        settings = Settings(cors_allowed_origins="http://a.test/, ,http://b.test", _env_file=None)
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
