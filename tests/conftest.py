"""
Shared pytest fixtures for all tests.

Provides an in-memory configuration repository, deterministic id
generation and a FastAPI test client wired to the in-memory storage.
"""

import itertools
import os
from collections.abc import Callable
from typing import Any

import pytest
from fastapi.testclient import TestClient

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

from store_admin.config.settings import Settings  # noqa: E402
from store_admin.core.app_factory import create_app  # noqa: E402
from store_admin.core.domain import ConcurrencyException  # noqa: E402
from store_admin.domains.store_config.api.dependencies import (  # noqa: E402
    get_apps_channels_repository,
    get_domains_repository,
    get_policies_repository,
    get_shipping_repository,
)
from store_admin.domains.store_config.domain.entities import (  # noqa: E402
    AppsAndChannelsConfiguration,
    ConfigurationAggregate,
    DomainsConfiguration,
    PoliciesConfiguration,
    ShippingConfiguration,
)

STORE_ID = "store-1"


# ============================================================================
# IN-MEMORY STORAGE
# ============================================================================


class InMemoryConfigurationRepository:
    """
    Dict-backed repository keeping persisted shapes, like the SQL row payload.

    Every load goes through reconstruct, so tests exercise the same
    round-trip as the real storage.
    """

    def __init__(self, aggregate_cls: type[ConfigurationAggregate]):
        self.aggregate_cls = aggregate_cls
        self.rows: dict[str, dict[str, Any]] = {}

    async def find_by_store_id(self, store_id: str):
        shape = self.rows.get(store_id)
        return self.aggregate_cls.reconstruct(shape) if shape else None

    async def exists_by_store_id(self, store_id: str) -> bool:
        return store_id in self.rows

    async def create(self, configuration):
        self.rows[configuration.store_id] = configuration.to_persisted_shape()
        return configuration

    async def save(self, configuration):
        stored = self.rows[configuration.store_id]
        if stored["version"] != configuration.version:
            raise ConcurrencyException(
                configuration.ENTITY_TYPE, configuration.store_id, configuration.version, stored["version"]
            )
        configuration.increment_version()
        self.rows[configuration.store_id] = configuration.to_persisted_shape()
        return configuration

    async def delete_by_store_id(self, store_id: str) -> bool:
        return self.rows.pop(store_id, None) is not None


@pytest.fixture
def domains_repository() -> InMemoryConfigurationRepository:
    return InMemoryConfigurationRepository(DomainsConfiguration)


@pytest.fixture
def apps_channels_repository() -> InMemoryConfigurationRepository:
    return InMemoryConfigurationRepository(AppsAndChannelsConfiguration)


@pytest.fixture
def shipping_repository() -> InMemoryConfigurationRepository:
    return InMemoryConfigurationRepository(ShippingConfiguration)


@pytest.fixture
def policies_repository() -> InMemoryConfigurationRepository:
    return InMemoryConfigurationRepository(PoliciesConfiguration)


# ============================================================================
# ID GENERATION
# ============================================================================


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Sequential ids: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture
def test_settings() -> Settings:
    return Settings(DEBUG=True, ENVIRONMENT="test", LOG_FORMAT="plain")


@pytest.fixture
def app(
    test_settings,
    domains_repository,
    apps_channels_repository,
    shipping_repository,
    policies_repository,
):
    """Application with every repository replaced by in-memory storage."""
    application = create_app(test_settings)
    application.dependency_overrides[get_domains_repository] = lambda: domains_repository
    application.dependency_overrides[get_apps_channels_repository] = lambda: apps_channels_repository
    application.dependency_overrides[get_shipping_repository] = lambda: shipping_repository
    application.dependency_overrides[get_policies_repository] = lambda: policies_repository
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def api_prefix(test_settings) -> str:
    return f"{test_settings.API_V1_STR}/stores/{STORE_ID}"
