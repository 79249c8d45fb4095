"""
Configuration Repository Ports

Interfaces for loading and persisting configuration aggregates.
"""

from typing import Protocol, TypeVar, runtime_checkable

from store_admin.domains.store_config.domain.entities import (
    AppsAndChannelsConfiguration,
    ConfigurationAggregate,
    DomainsConfiguration,
    PoliciesConfiguration,
    ShippingConfiguration,
)

TAggregate = TypeVar("TAggregate", bound=ConfigurationAggregate)


@runtime_checkable
class IConfigurationRepository(Protocol[TAggregate]):
    """
    Repository interface shared by every configuration aggregate.

    Implementations persist the full aggregate snapshot. `save` must fail
    with ConcurrencyException when the stored version no longer matches
    the version the aggregate was loaded with.
    """

    async def find_by_store_id(self, store_id: str) -> TAggregate | None:
        """
        Load the configuration of a store.

        Returns:
            The aggregate, or None when the store has none
        """
        ...

    async def exists_by_store_id(self, store_id: str) -> bool:
        """Check whether the store already has this configuration."""
        ...

    async def create(self, configuration: TAggregate) -> TAggregate:
        """
        Persist a brand-new configuration.

        Raises:
            DuplicateEntityException: If the store already has one
        """
        ...

    async def save(self, configuration: TAggregate) -> TAggregate:
        """
        Persist a mutated configuration and bump its version.

        Raises:
            ConcurrencyException: If another writer saved first
        """
        ...

    async def delete_by_store_id(self, store_id: str) -> bool:
        """
        Delete the whole configuration.

        Returns:
            True if a configuration was deleted
        """
        ...


@runtime_checkable
class IDomainsConfigurationRepository(IConfigurationRepository[DomainsConfiguration], Protocol):
    """Repository of DomainsConfiguration aggregates."""


@runtime_checkable
class IAppsAndChannelsConfigurationRepository(IConfigurationRepository[AppsAndChannelsConfiguration], Protocol):
    """Repository of AppsAndChannelsConfiguration aggregates."""


@runtime_checkable
class IShippingConfigurationRepository(IConfigurationRepository[ShippingConfiguration], Protocol):
    """Repository of ShippingConfiguration aggregates."""


@runtime_checkable
class IPoliciesConfigurationRepository(IConfigurationRepository[PoliciesConfiguration], Protocol):
    """Repository of PoliciesConfiguration aggregates."""
