"""
Tests for application creation and lifecycle.
"""

import pytest
from fastapi.testclient import TestClient

from store_admin.config.settings import Settings
from store_admin.core.app_factory import create_app


@pytest.mark.unit
class TestAppFactory:
    def test_settings_are_attached(self, app, test_settings):
        assert app.state.settings is test_settings

    def test_docs_only_in_debug(self):
        debug_app = create_app(Settings(_env_file=None, DEBUG=True, LOG_FORMAT="plain"))
        production_app = create_app(Settings(_env_file=None, DEBUG=False, LOG_FORMAT="plain"))

        assert debug_app.docs_url == "/api/v1/docs"
        assert production_app.docs_url is None

    def test_routes_are_mounted_under_api_prefix(self, app):
        paths = {route.path for route in app.routes}

        assert "/health" in paths
        assert "/api/v1/stores/{store_id}/domains-configuration" in paths
        assert "/api/v1/stores/{store_id}/policies-configuration" in paths

    def test_lifespan_runs_without_database(self, app):
        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "environment": "test"}
