"""
Configuration Repository Implementation

SQLAlchemy implementation of IConfigurationRepository. Each aggregate is
stored as one JSON snapshot row per (store, section).
"""

from typing import ClassVar, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.domain import ConcurrencyException, DuplicateEntityException
from store_admin.core.shared import get_repository_logger
from store_admin.domains.store_config.domain.entities import (
    AppsAndChannelsConfiguration,
    ConfigurationAggregate,
    DomainsConfiguration,
    PoliciesConfiguration,
    ShippingConfiguration,
)
from store_admin.models.db import ConfigurationSection, StoreConfigurationModel

logger = get_repository_logger("store_configurations")

TAggregate = TypeVar("TAggregate", bound=ConfigurationAggregate)


class SQLAlchemyConfigurationRepository(Generic[TAggregate]):
    """
    SQLAlchemy implementation of the configuration repository.

    Subclasses bind the aggregate class and the section it is stored under.
    The session is committed by the caller (request scope).
    """

    aggregate_cls: ClassVar[type[ConfigurationAggregate]]
    section: ClassVar[ConfigurationSection]

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _scope(self, store_id: str):
        return (
            StoreConfigurationModel.store_id == store_id,
            StoreConfigurationModel.section == self.section.value,
        )

    async def find_by_store_id(self, store_id: str) -> TAggregate | None:
        """Find the configuration of a store."""
        try:
            result = await self.session.execute(select(StoreConfigurationModel).where(*self._scope(store_id)))
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error loading configuration: {e}", exc_info=True, store_id=store_id, section=self.section.value)
            raise
        return self._to_entity(model) if model else None

    async def exists_by_store_id(self, store_id: str) -> bool:
        """Check whether the store already has this configuration."""
        result = await self.session.execute(
            select(StoreConfigurationModel.id).where(*self._scope(store_id)).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def create(self, configuration: TAggregate) -> TAggregate:
        """Insert a new configuration row."""
        self.session.add(self._to_model(configuration))
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(
                "Configuration already exists",
                store_id=configuration.store_id,
                section=self.section.value,
            )
            raise DuplicateEntityException(
                configuration.ENTITY_TYPE, "store_id", configuration.store_id, "CONFIGURATION_ALREADY_EXISTS"
            ) from e
        except SQLAlchemyError as e:
            logger.error(
                f"Error creating configuration: {e}",
                exc_info=True,
                store_id=configuration.store_id,
                section=self.section.value,
            )
            raise
        return configuration

    async def save(self, configuration: TAggregate) -> TAggregate:
        """
        Persist the aggregate if nobody saved it since it was loaded.

        Raises:
            ConcurrencyException: If the stored version moved on
        """
        expected_version = configuration.version
        payload = configuration.to_persisted_shape()
        payload["version"] = expected_version + 1
        try:
            result = await self.session.execute(
                update(StoreConfigurationModel)
                .where(
                    *self._scope(configuration.store_id),
                    StoreConfigurationModel.version == expected_version,
                )
                .values(
                    payload=payload,
                    version=expected_version + 1,
                    updated_at=configuration.updated_at,
                )
            )
        except SQLAlchemyError as e:
            logger.error(
                f"Error saving configuration: {e}",
                exc_info=True,
                store_id=configuration.store_id,
                section=self.section.value,
            )
            raise

        if result.rowcount == 0:
            raise ConcurrencyException(configuration.ENTITY_TYPE, configuration.store_id, expected_version)

        configuration.increment_version()
        return configuration

    async def delete_by_store_id(self, store_id: str) -> bool:
        """Delete the configuration; False when there was none."""
        result = await self.session.execute(delete(StoreConfigurationModel).where(*self._scope(store_id)))
        return result.rowcount > 0

    def _to_entity(self, model: StoreConfigurationModel) -> TAggregate:
        """Rebuild the aggregate; the row's version column wins over the payload."""
        shape = {**model.payload, "version": model.version}
        return self.aggregate_cls.reconstruct(shape)

    def _to_model(self, configuration: TAggregate) -> StoreConfigurationModel:
        return StoreConfigurationModel(
            id=configuration.id,
            store_id=configuration.store_id,
            section=self.section.value,
            payload=configuration.to_persisted_shape(),
            version=configuration.version,
            created_at=configuration.created_at,
            updated_at=configuration.updated_at,
        )


class SQLAlchemyDomainsConfigurationRepository(SQLAlchemyConfigurationRepository[DomainsConfiguration]):
    aggregate_cls = DomainsConfiguration
    section = ConfigurationSection.DOMAINS


class SQLAlchemyAppsAndChannelsConfigurationRepository(SQLAlchemyConfigurationRepository[AppsAndChannelsConfiguration]):
    aggregate_cls = AppsAndChannelsConfiguration
    section = ConfigurationSection.APPS_CHANNELS


class SQLAlchemyShippingConfigurationRepository(SQLAlchemyConfigurationRepository[ShippingConfiguration]):
    aggregate_cls = ShippingConfiguration
    section = ConfigurationSection.SHIPPING


class SQLAlchemyPoliciesConfigurationRepository(SQLAlchemyConfigurationRepository[PoliciesConfiguration]):
    aggregate_cls = PoliciesConfiguration
    section = ConfigurationSection.POLICIES
