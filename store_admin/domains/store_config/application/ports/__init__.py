"""
Store Configuration Ports

Interfaces (ports) for the store configuration domain following Clean Architecture.
"""

from store_admin.domains.store_config.application.ports.configuration_repository import (
    IAppsAndChannelsConfigurationRepository,
    IConfigurationRepository,
    IDomainsConfigurationRepository,
    IPoliciesConfigurationRepository,
    IShippingConfigurationRepository,
)
from store_admin.domains.store_config.application.ports.id_generator import IIdGenerator

__all__ = [
    "IConfigurationRepository",
    "IDomainsConfigurationRepository",
    "IAppsAndChannelsConfigurationRepository",
    "IShippingConfigurationRepository",
    "IPoliciesConfigurationRepository",
    "IIdGenerator",
]
