"""
Value objects for shipping and delivery configuration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from store_admin.core.domain import InvalidValueException, MissingValueException, StatusEnum, ValueObject
from store_admin.core.domain import guards


class RateType(StatusEnum):
    FIXED = "fixed"
    CALCULATED = "calculated"
    FREE = "free"


class DeliveryType(StatusEnum):
    DOMESTIC_SHIPPING = "domestic_shipping"
    INTERNATIONAL_SHIPPING = "international_shipping"
    LOCAL_DELIVERY = "local_delivery"
    STORE_PICKUP = "store_pickup"


class PackagingType(StatusEnum):
    BOX = "box"
    ENVELOPE = "envelope"
    PACKAGE = "package"
    TUBE = "tube"


@dataclass(frozen=True)
class ShippingZone(ValueObject):
    """Country, optional region and postal codes covered by a shipping profile."""

    country: str
    region: str | None = None
    postal_codes: tuple[str, ...] = ()

    def _validate(self) -> None:
        guards.require_string(self.country, "zones.country")

    @property
    def key(self) -> tuple[str, str, tuple[str, ...]]:
        """Identity used to detect the same zone in two profiles."""
        return (self.country.lower(), (self.region or "").lower(), self.postal_codes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        if not isinstance(data, Mapping):
            raise InvalidValueException("zones", None, "Each zone must be an object")
        return cls(
            country=guards.require_string(data.get("country"), "zones.country"),
            region=guards.optional_string(data.get("region"), "zones.region"),
            postal_codes=guards.optional_string_list(data.get("postal_codes"), "zones.postal_codes"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "country": self.country,
            "region": self.region,
            "postal_codes": list(self.postal_codes),
        }


@dataclass(frozen=True)
class ShippingRate(ValueObject):
    """
    Price rule of a shipping profile.

    Fixed rates need an amount greater than zero; calculated rates need
    conditions. The conditions map is opaque to the domain.
    """

    type: RateType
    amount: float | None = None
    conditions: dict[str, Any] = field(default_factory=dict)

    def _validate(self) -> None:
        if self.amount is not None:
            guards.require_non_negative(self.amount, "rates.amount")
        if self.type == RateType.FIXED and (self.amount is None or self.amount <= 0):
            raise InvalidValueException(
                "rates.amount", self.amount, "Fixed rates must have an amount greater than 0"
            )
        if self.type == RateType.CALCULATED and not self.conditions:
            raise InvalidValueException(
                "rates.conditions", None, "Calculated rates must define conditions"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        if not isinstance(data, Mapping):
            raise InvalidValueException("rates", None, "Each rate must be an object")
        return cls(
            type=guards.require_enum(data.get("type"), RateType, "rates.type"),
            amount=data.get("amount"),
            conditions=guards.optional_mapping(data.get("conditions"), "rates.conditions"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "amount": self.amount,
            "conditions": dict(self.conditions),
        }


@dataclass(frozen=True)
class Dimensions(ValueObject):
    """Packaging dimensions; every side must be greater than zero."""

    length: float
    width: float
    height: float

    def _validate(self) -> None:
        guards.require_positive(self.length, "dimensions.length")
        guards.require_positive(self.width, "dimensions.width")
        guards.require_positive(self.height, "dimensions.height")

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        if data is None:
            raise MissingValueException("dimensions")
        if not isinstance(data, Mapping):
            raise InvalidValueException("dimensions", None, "Dimensions must be an object")
        return cls(
            length=data.get("length"),
            width=data.get("width"),
            height=data.get("height"),
        )

    def to_dict(self) -> dict[str, float]:
        return {"length": self.length, "width": self.width, "height": self.height}
