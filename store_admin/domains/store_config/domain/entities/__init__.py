"""
Store Configuration Entities

Configuration aggregates and the sub-entities they own.
"""

from store_admin.domains.store_config.domain.entities.aggregate import ConfigurationAggregate
from store_admin.domains.store_config.domain.entities.apps import (
    DevelopmentApp,
    InstalledApp,
    SalesChannel,
    UninstalledApp,
)
from store_admin.domains.store_config.domain.entities.apps_channels_configuration import (
    AppsAndChannelsConfiguration,
)
from store_admin.domains.store_config.domain.entities.base import ConfigRecord
from store_admin.domains.store_config.domain.entities.domain import Domain
from store_admin.domains.store_config.domain.entities.domains_configuration import DomainsConfiguration
from store_admin.domains.store_config.domain.entities.policies import ReturnRule
from store_admin.domains.store_config.domain.entities.policies_configuration import PoliciesConfiguration
from store_admin.domains.store_config.domain.entities.shipping import (
    DeliveryMethod,
    DocumentationTemplate,
    Packaging,
    ShippingProfile,
    TransportProvider,
)
from store_admin.domains.store_config.domain.entities.shipping_configuration import ShippingConfiguration

__all__ = [
    # Base
    "ConfigRecord",
    "ConfigurationAggregate",
    # Aggregates
    "DomainsConfiguration",
    "AppsAndChannelsConfiguration",
    "ShippingConfiguration",
    "PoliciesConfiguration",
    # Sub-entities
    "Domain",
    "InstalledApp",
    "SalesChannel",
    "DevelopmentApp",
    "UninstalledApp",
    "ShippingProfile",
    "DeliveryMethod",
    "Packaging",
    "TransportProvider",
    "DocumentationTemplate",
    "ReturnRule",
]
