"""
Tests for SQLAlchemyConfigurationRepository with a mocked async session.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from store_admin.core.domain import ConcurrencyException, DuplicateEntityException
from store_admin.domains.store_config.domain.entities import DomainsConfiguration, ShippingConfiguration
from store_admin.domains.store_config.infrastructure.repositories import (
    SQLAlchemyDomainsConfigurationRepository,
    SQLAlchemyShippingConfigurationRepository,
)
from store_admin.models.db import ConfigurationSection, StoreConfigurationModel

# ===== FIXTURES =====


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def repository(mock_session) -> SQLAlchemyDomainsConfigurationRepository:
    return SQLAlchemyDomainsConfigurationRepository(mock_session)


@pytest.fixture
def configuration(id_factory) -> DomainsConfiguration:
    return DomainsConfiguration.create(
        "store-1",
        {"domains": [{"name": "a.com", "kind": "principal", "connection_state": "connected", "source": "external"}]},
        id_factory=id_factory,
    )


def execute_result(*, scalar=None, rowcount: int = 1) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar
    result.rowcount = rowcount
    return result


# ===== READS =====


@pytest.mark.unit
class TestFind:
    """Tests for find_by_store_id and exists_by_store_id."""

    @pytest.mark.asyncio
    async def test_returns_none_when_absent(self, repository, mock_session):
        mock_session.execute.return_value = execute_result(scalar=None)

        assert await repository.find_by_store_id("store-1") is None

    @pytest.mark.asyncio
    async def test_row_version_wins_over_payload(self, repository, mock_session, configuration):
        model = StoreConfigurationModel(
            id=configuration.id,
            store_id="store-1",
            section=ConfigurationSection.DOMAINS.value,
            payload=configuration.to_persisted_shape(),
            version=7,
        )
        mock_session.execute.return_value = execute_result(scalar=model)

        found = await repository.find_by_store_id("store-1")

        assert isinstance(found, DomainsConfiguration)
        assert found.version == 7
        assert found.principal_domain == "a.com"

    @pytest.mark.asyncio
    async def test_database_errors_propagate(self, repository, mock_session):
        mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(OperationalError):
            await repository.find_by_store_id("store-1")

    @pytest.mark.asyncio
    async def test_exists(self, repository, mock_session):
        mock_session.execute.return_value = execute_result(scalar="id-1")
        assert await repository.exists_by_store_id("store-1") is True

        mock_session.execute.return_value = execute_result(scalar=None)
        assert await repository.exists_by_store_id("store-1") is False


# ===== WRITES =====


@pytest.mark.unit
class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_adds_model_with_snapshot(self, repository, mock_session, configuration):
        await repository.create(configuration)

        model = mock_session.add.call_args.args[0]
        assert isinstance(model, StoreConfigurationModel)
        assert model.section == "domains"
        assert model.payload["principal_domain"] == "a.com"
        assert model.version == 0
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_integrity_error_is_duplicate(self, repository, mock_session, configuration):
        mock_session.flush.side_effect = IntegrityError("INSERT", {}, Exception("unique violation"))

        with pytest.raises(DuplicateEntityException) as exc_info:
            await repository.create(configuration)

        assert exc_info.value.code == "CONFIGURATION_ALREADY_EXISTS"
        mock_session.rollback.assert_awaited_once()


@pytest.mark.unit
class TestSave:
    """Tests for the optimistic save."""

    @pytest.mark.asyncio
    async def test_increments_version(self, repository, mock_session, configuration):
        mock_session.execute.return_value = execute_result(rowcount=1)

        saved = await repository.save(configuration)

        assert saved.version == 1
        mock_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_stale_version_is_a_conflict(self, repository, mock_session, configuration):
        mock_session.execute.return_value = execute_result(rowcount=0)

        with pytest.raises(ConcurrencyException) as exc_info:
            await repository.save(configuration)

        assert exc_info.value.details["expected_version"] == 0
        assert configuration.version == 0


@pytest.mark.unit
class TestDelete:
    """Tests for delete_by_store_id."""

    @pytest.mark.asyncio
    async def test_reports_whether_a_row_was_deleted(self, mock_session):
        repository = SQLAlchemyShippingConfigurationRepository(mock_session)

        mock_session.execute.return_value = execute_result(rowcount=1)
        assert await repository.delete_by_store_id("store-1") is True

        mock_session.execute.return_value = execute_result(rowcount=0)
        assert await repository.delete_by_store_id("store-1") is False

    def test_subclasses_bind_section(self, mock_session):
        assert SQLAlchemyShippingConfigurationRepository(mock_session).section == ConfigurationSection.SHIPPING
        assert SQLAlchemyShippingConfigurationRepository.aggregate_cls is ShippingConfiguration
