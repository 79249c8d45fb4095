"""
Store Configuration Value Objects

Enumerations and immutable value objects used by the configuration aggregates.
"""

from store_admin.domains.store_config.domain.value_objects.app_types import (
    AppKind,
    ChannelKind,
    DevelopmentAppState,
    ReviewState,
)
from store_admin.domains.store_config.domain.value_objects.domain_types import (
    ConnectionState,
    DomainChange,
    DomainKind,
    DomainSource,
)
from store_admin.domains.store_config.domain.value_objects.policy_types import (
    ContactInfo,
    PolicyDocument,
    ReturnRulesState,
    ReturnRuleType,
)
from store_admin.domains.store_config.domain.value_objects.shipping_types import (
    DeliveryType,
    Dimensions,
    PackagingType,
    RateType,
    ShippingRate,
    ShippingZone,
)

__all__ = [
    # Domains
    "DomainKind",
    "ConnectionState",
    "DomainSource",
    "DomainChange",
    # Apps and channels
    "AppKind",
    "ChannelKind",
    "DevelopmentAppState",
    "ReviewState",
    # Shipping
    "RateType",
    "DeliveryType",
    "PackagingType",
    "ShippingZone",
    "ShippingRate",
    "Dimensions",
    # Policies
    "ReturnRulesState",
    "ReturnRuleType",
    "PolicyDocument",
    "ContactInfo",
]
