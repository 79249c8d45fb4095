"""
Sub-entities of ShippingConfiguration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, ClassVar, Self

from store_admin.core.domain import guards
from store_admin.domains.store_config.domain.entities.base import (
    ConfigRecord,
    FieldParser,
    name_key,
    require_items,
)
from store_admin.domains.store_config.domain.value_objects import (
    DeliveryType,
    Dimensions,
    PackagingType,
    RateType,
    ShippingRate,
    ShippingZone,
)


@dataclass(frozen=True)
class ShippingProfile(ConfigRecord):
    """Named set of zones and rates applied to a group of products."""

    name: str
    zones: tuple[ShippingZone, ...]
    rates: tuple[ShippingRate, ...]
    product_ids: tuple[str, ...] = ()

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "name": lambda v: guards.require_string(v, "name"),
        "zones": lambda v: require_items(v, "zones", ShippingZone.from_dict),
        "rates": lambda v: require_items(v, "rates", ShippingRate.from_dict),
        "product_ids": lambda v: guards.optional_string_list(v, "product_ids"),
    }

    @property
    def key(self) -> str:
        return name_key(self.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            **cls.stored_identity(data),
            name=data["name"],
            zones=tuple(
                ShippingZone(
                    country=zone["country"],
                    region=zone.get("region"),
                    postal_codes=tuple(zone.get("postal_codes", ())),
                )
                for zone in data.get("zones", [])
            ),
            rates=tuple(
                ShippingRate(
                    type=RateType(rate["type"]),
                    amount=rate.get("amount"),
                    conditions=dict(rate.get("conditions") or {}),
                )
                for rate in data.get("rates", [])
            ),
            product_ids=tuple(data.get("product_ids", ())),
        )


@dataclass(frozen=True)
class DeliveryMethod(ConfigRecord):
    """Delivery option, identified within the configuration by its type."""

    type: DeliveryType
    active: bool = True
    customization: dict[str, Any] = field(default_factory=dict)

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "type": lambda v: guards.require_enum(v, DeliveryType, "type"),
        "active": lambda v: guards.optional_bool(v, "active", default=True),
        "customization": lambda v: guards.optional_mapping(v, "customization"),
    }

    def with_active(self, active: bool, now: datetime) -> Self:
        return replace(self, active=active, updated_at=now)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            **cls.stored_identity(data),
            type=DeliveryType(data["type"]),
            active=data.get("active", True),
            customization=dict(data.get("customization") or {}),
        )


@dataclass(frozen=True)
class Packaging(ConfigRecord):
    """Box, envelope, package or tube used to ship orders."""

    type: PackagingType
    dimensions: Dimensions
    weight: float
    is_default: bool = False

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "type": lambda v: guards.require_enum(v, PackagingType, "type"),
        "dimensions": Dimensions.from_dict,
        "weight": lambda v: guards.require_positive(v, "weight"),
        "is_default": lambda v: guards.optional_bool(v, "is_default", default=False),
    }

    def with_default(self, is_default: bool, now: datetime) -> Self:
        if self.is_default == is_default:
            return self
        return replace(self, is_default=is_default, updated_at=now)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        dimensions = data["dimensions"]
        return cls(
            **cls.stored_identity(data),
            type=PackagingType(data["type"]),
            dimensions=Dimensions(
                length=dimensions["length"],
                width=dimensions["width"],
                height=dimensions["height"],
            ),
            weight=data["weight"],
            is_default=data.get("is_default", False),
        )


@dataclass(frozen=True)
class TransportProvider(ConfigRecord):
    """Carrier account; provider name and account are unique in the configuration."""

    provider_name: str
    account: str
    active: bool = True
    api_url: str | None = None
    api_key: str | None = None

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "provider_name": lambda v: guards.require_string(v, "provider_name"),
        "account": lambda v: guards.require_string(v, "account"),
        "active": lambda v: guards.optional_bool(v, "active", default=True),
        "api_url": lambda v: guards.optional_url(v, "api_url"),
        "api_key": lambda v: guards.optional_string(v, "api_key"),
    }

    @property
    def key(self) -> str:
        return name_key(self.provider_name)

    @property
    def account_key(self) -> str:
        return name_key(self.account)

    def with_active(self, active: bool, now: datetime) -> Self:
        return replace(self, active=active, updated_at=now)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            **cls.stored_identity(data),
            provider_name=data["provider_name"],
            account=data["account"],
            active=data.get("active", True),
            api_url=data.get("api_url"),
            api_key=data.get("api_key"),
        )


@dataclass(frozen=True)
class DocumentationTemplate(ConfigRecord):
    """Delivery note and shipping label settings."""

    delivery_note_template: str | None = None
    label_store_name: str | None = None

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "delivery_note_template": lambda v: guards.optional_string(v, "delivery_note_template"),
        "label_store_name": lambda v: guards.optional_string(v, "label_store_name"),
    }

    @property
    def label_key(self) -> str | None:
        return name_key(self.label_store_name) if self.label_store_name else None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            **cls.stored_identity(data),
            delivery_note_template=data.get("delivery_note_template"),
            label_store_name=data.get("label_store_name"),
        )
