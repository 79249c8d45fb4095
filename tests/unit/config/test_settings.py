"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from store_admin.config.settings import Settings, get_settings


def make_settings(**overrides) -> Settings:
    values = {"DATABASE_URL": None, "DEBUG": False, "ENVIRONMENT": "production", **overrides}
    return Settings(_env_file=None, **values)


@pytest.mark.unit
class TestDatabaseUrl:
    def test_built_from_parts(self):
        settings = make_settings(DB_HOST="db", DB_PORT=5433, DB_NAME="shop", DB_USER="admin", DB_PASSWORD=None)

        assert settings.database_url == "postgresql+asyncpg://admin@db:5433/shop"

    def test_password_is_quoted(self):
        settings = make_settings(DB_USER="admin", DB_PASSWORD="p@ss/word")

        assert "admin:p%40ss%2Fword@" in settings.database_url

    def test_explicit_url_wins(self):
        url = "postgresql+asyncpg://other@remote:5432/other"

        assert make_settings(DATABASE_URL=url, DB_HOST="ignored").database_url == url


@pytest.mark.unit
class TestValidation:
    def test_log_level_is_normalized(self):
        assert make_settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            make_settings(LOG_LEVEL="verbose")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            make_settings(LOG_FORMAT="xml")

    @pytest.mark.parametrize("pool_size", [0, 101])
    def test_pool_size_bounds(self, pool_size):
        with pytest.raises(ValidationError):
            make_settings(DB_POOL_SIZE=pool_size)


@pytest.mark.unit
class TestEnvironment:
    def test_production_is_not_development(self):
        assert make_settings().is_development is False

    @pytest.mark.parametrize("environment", ["development", "local", "Test"])
    def test_development_environments(self, environment):
        assert make_settings(ENVIRONMENT=environment).is_development is True

    def test_debug_implies_development(self):
        assert make_settings(DEBUG=True).is_development is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
