"""
Store Configuration Repositories

SQLAlchemy implementations of the configuration repository ports.
"""

from store_admin.domains.store_config.infrastructure.repositories.configuration_repository import (
    SQLAlchemyAppsAndChannelsConfigurationRepository,
    SQLAlchemyConfigurationRepository,
    SQLAlchemyDomainsConfigurationRepository,
    SQLAlchemyPoliciesConfigurationRepository,
    SQLAlchemyShippingConfigurationRepository,
)

__all__ = [
    "SQLAlchemyConfigurationRepository",
    "SQLAlchemyDomainsConfigurationRepository",
    "SQLAlchemyAppsAndChannelsConfigurationRepository",
    "SQLAlchemyShippingConfigurationRepository",
    "SQLAlchemyPoliciesConfigurationRepository",
]
