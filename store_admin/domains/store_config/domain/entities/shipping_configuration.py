"""
ShippingConfiguration aggregate.

Shipping profiles, delivery methods, packagings, transport providers and
documentation templates of a store.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Self

from store_admin.core.domain import (
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidValueException,
    guards,
    utc_now,
)
from store_admin.domains.store_config.domain.entities.aggregate import (
    ConfigurationAggregate,
    create_records,
    ensure_all_unique,
    locate,
    replaced,
    without,
)
from store_admin.domains.store_config.domain.entities.shipping import (
    DeliveryMethod,
    DocumentationTemplate,
    Packaging,
    ShippingProfile,
    TransportProvider,
)
from store_admin.domains.store_config.domain.value_objects import DeliveryType

PROFILE_NOT_FOUND = "SHIPPING.PROFILE_NOT_FOUND"
DUPLICATE_PROFILE = "SHIPPING.DUPLICATE_PROFILE"
DUPLICATE_ZONE = "SHIPPING.DUPLICATE_ZONE"
METHOD_NOT_FOUND = "SHIPPING.DELIVERY_METHOD_NOT_FOUND"
DUPLICATE_METHOD = "SHIPPING.DUPLICATE_DELIVERY_METHOD"
NO_ACTIVE_METHOD = "SHIPPING.NO_ACTIVE_DELIVERY_METHOD"
PACKAGING_NOT_FOUND = "SHIPPING.PACKAGING_NOT_FOUND"
MULTIPLE_DEFAULT_PACKAGINGS = "SHIPPING.MULTIPLE_DEFAULT_PACKAGINGS"
PROVIDER_NOT_FOUND = "SHIPPING.TRANSPORT_PROVIDER_NOT_FOUND"
DUPLICATE_PROVIDER = "SHIPPING.DUPLICATE_TRANSPORT_PROVIDER"
DUPLICATE_PROVIDER_ACCOUNT = "SHIPPING.DUPLICATE_PROVIDER_ACCOUNT"
TEMPLATE_NOT_FOUND = "SHIPPING.TEMPLATE_NOT_FOUND"
DUPLICATE_LABEL_NAME = "SHIPPING.DUPLICATE_LABEL_STORE_NAME"


def check_profiles(profiles: Sequence[ShippingProfile]) -> None:
    """Profile names are unique and no zone is covered twice."""
    ensure_all_unique(
        profiles, key=lambda p: p.key, entity_type="ShippingProfile", field="name", code=DUPLICATE_PROFILE
    )
    seen = set()
    for profile in profiles:
        for zone in profile.zones:
            if zone.key in seen:
                raise DuplicateEntityException("ShippingZone", "country", zone.country, DUPLICATE_ZONE)
            seen.add(zone.key)


def check_delivery_methods(methods: Sequence[DeliveryMethod]) -> None:
    """One method per type; while any exist, at least one is active."""
    ensure_all_unique(
        methods, key=lambda m: m.type, entity_type="DeliveryMethod", field="type", code=DUPLICATE_METHOD
    )
    if methods and not any(method.active for method in methods):
        raise InvalidValueException(
            "active", False, "At least one delivery method must remain active", NO_ACTIVE_METHOD
        )


def check_packagings(packagings: Sequence[Packaging]) -> None:
    defaults = [packaging for packaging in packagings if packaging.is_default]
    if len(defaults) > 1:
        raise InvalidValueException(
            "is_default", True, "Only one packaging can be the default", MULTIPLE_DEFAULT_PACKAGINGS
        )


def check_transport_providers(providers: Sequence[TransportProvider]) -> None:
    ensure_all_unique(
        providers,
        key=lambda p: p.key,
        entity_type="TransportProvider",
        field="provider_name",
        code=DUPLICATE_PROVIDER,
    )
    ensure_all_unique(
        providers,
        key=lambda p: p.account_key,
        entity_type="TransportProvider",
        field="account",
        code=DUPLICATE_PROVIDER_ACCOUNT,
    )


def check_documentation_templates(templates: Sequence[DocumentationTemplate]) -> None:
    ensure_all_unique(
        templates,
        key=lambda t: t.label_key,
        entity_type="DocumentationTemplate",
        field="label_store_name",
        code=DUPLICATE_LABEL_NAME,
    )


def _single_default(packagings: Sequence[Packaging], default_id: str, now: datetime) -> list[Packaging]:
    """Clear every default flag except the one of default_id."""
    return [packaging.with_default(packaging.id == default_id, now) for packaging in packagings]


@dataclass(eq=False)
class ShippingConfiguration(ConfigurationAggregate):
    """
    Shipping and delivery settings of a store.

    At most one packaging is flagged default at any time; delivery
    methods are keyed by their type.
    """

    shipping_profiles: list[ShippingProfile] = field(default_factory=list)
    delivery_methods: list[DeliveryMethod] = field(default_factory=list)
    packagings: list[Packaging] = field(default_factory=list)
    transport_providers: list[TransportProvider] = field(default_factory=list)
    documentation_templates: list[DocumentationTemplate] = field(default_factory=list)

    ENTITY_TYPE: ClassVar[str] = "ShippingConfiguration"

    # Collection attribute -> (record class, whole-collection check)
    COLLECTIONS: ClassVar[dict[str, tuple[type, Callable[[Sequence[Any]], None]]]] = {
        "shipping_profiles": (ShippingProfile, check_profiles),
        "delivery_methods": (DeliveryMethod, check_delivery_methods),
        "packagings": (Packaging, check_packagings),
        "transport_providers": (TransportProvider, check_transport_providers),
        "documentation_templates": (DocumentationTemplate, check_documentation_templates),
    }

    # ===== CONSTRUCTION =====

    @classmethod
    def create(
        cls,
        store_id: str,
        data: Mapping[str, Any] | None = None,
        *,
        id_factory: Callable[[], str] | None = None,
        now: datetime | None = None,
    ) -> Self:
        identity, id_factory, now = cls._start(store_id, id_factory=id_factory, now=now)
        data = cls._input(data)
        collections = {}
        for attr, (record_cls, check) in cls.COLLECTIONS.items():
            records = create_records(record_cls, data.get(attr), attr, id_factory, now)
            check(records)
            collections[attr] = records
        return cls(**identity, **collections)

    @classmethod
    def reconstruct(cls, shape: Mapping[str, Any]) -> Self:
        return cls(
            **cls._stored_identity(shape),
            **{
                attr: [record_cls.from_dict(item) for item in shape.get(attr, [])]
                for attr, (record_cls, _) in cls.COLLECTIONS.items()
            },
        )

    def _state_to_dict(self) -> dict[str, Any]:
        return {attr: [record.to_dict() for record in getattr(self, attr)] for attr in self.COLLECTIONS}

    def _commit(self, attr: str, records: list[Any], now: datetime) -> None:
        _, check = self.COLLECTIONS[attr]
        check(records)
        setattr(self, attr, records)
        self.touch(now)

    # ===== SHIPPING PROFILES =====

    def add_shipping_profile(self, data: Mapping[str, Any]) -> ShippingProfile:
        now = utc_now()
        profile = ShippingProfile.create(data, record_id=self.next_id(), now=now)
        self._commit("shipping_profiles", [*self.shipping_profiles, profile], now)
        return profile

    def update_shipping_profile(self, profile_id: str, patch: Mapping[str, Any]) -> ShippingProfile:
        index = locate(self.shipping_profiles, profile_id, "ShippingProfile", PROFILE_NOT_FOUND)
        now = utc_now()
        updated = self.shipping_profiles[index].apply_patch(patch, now=now)
        self._commit("shipping_profiles", replaced(self.shipping_profiles, index, updated), now)
        return updated

    def remove_shipping_profile(self, profile_id: str) -> ShippingProfile:
        index = locate(self.shipping_profiles, profile_id, "ShippingProfile", PROFILE_NOT_FOUND)
        removed = self.shipping_profiles[index]
        self._commit("shipping_profiles", without(self.shipping_profiles, index), utc_now())
        return removed

    def get_shipping_profile(self, profile_id: str) -> ShippingProfile:
        return self.shipping_profiles[locate(self.shipping_profiles, profile_id, "ShippingProfile", PROFILE_NOT_FOUND)]

    # ===== DELIVERY METHODS =====

    def _method_index(self, delivery_type: DeliveryType | str) -> int:
        delivery_type = guards.require_enum(delivery_type, DeliveryType, "type")
        for index, method in enumerate(self.delivery_methods):
            if method.type == delivery_type:
                return index
        raise EntityNotFoundException("DeliveryMethod", delivery_type.value, code=METHOD_NOT_FOUND)

    def add_delivery_method(self, data: Mapping[str, Any]) -> DeliveryMethod:
        now = utc_now()
        method = DeliveryMethod.create(data, record_id=self.next_id(), now=now)
        self._commit("delivery_methods", [*self.delivery_methods, method], now)
        return method

    def update_delivery_method(self, delivery_type: DeliveryType | str, patch: Mapping[str, Any]) -> DeliveryMethod:
        index = self._method_index(delivery_type)
        now = utc_now()
        updated = self.delivery_methods[index].apply_patch(patch, now=now)
        self._commit("delivery_methods", replaced(self.delivery_methods, index, updated), now)
        return updated

    def remove_delivery_method(self, delivery_type: DeliveryType | str) -> DeliveryMethod:
        index = self._method_index(delivery_type)
        removed = self.delivery_methods[index]
        self._commit("delivery_methods", without(self.delivery_methods, index), utc_now())
        return removed

    def toggle_delivery_method(self, delivery_type: DeliveryType | str, active: bool) -> DeliveryMethod:
        """Turn the method of the given type on or off."""
        active = guards.require_bool(active, "active")
        index = self._method_index(delivery_type)
        now = utc_now()
        updated = self.delivery_methods[index].with_active(active, now)
        self._commit("delivery_methods", replaced(self.delivery_methods, index, updated), now)
        return updated

    def get_delivery_method(self, delivery_type: DeliveryType | str) -> DeliveryMethod:
        return self.delivery_methods[self._method_index(delivery_type)]

    # ===== PACKAGINGS =====

    def add_packaging(self, data: Mapping[str, Any]) -> Packaging:
        """Add a packaging; flagged default, it takes the flag from the previous default."""
        now = utc_now()
        packaging = Packaging.create(data, record_id=self.next_id(), now=now)
        candidate = [*self.packagings, packaging]
        if packaging.is_default:
            candidate = _single_default(candidate, packaging.id, now)
        self._commit("packagings", candidate, now)
        return packaging

    def update_packaging(self, packaging_id: str, patch: Mapping[str, Any]) -> Packaging:
        index = locate(self.packagings, packaging_id, "Packaging", PACKAGING_NOT_FOUND)
        now = utc_now()
        updated = self.packagings[index].apply_patch(patch, now=now)
        candidate = replaced(self.packagings, index, updated)
        if updated.is_default:
            candidate = _single_default(candidate, updated.id, now)
        self._commit("packagings", candidate, now)
        return updated

    def remove_packaging(self, packaging_id: str) -> Packaging:
        index = locate(self.packagings, packaging_id, "Packaging", PACKAGING_NOT_FOUND)
        removed = self.packagings[index]
        self._commit("packagings", without(self.packagings, index), utc_now())
        return removed

    def set_default_packaging(self, packaging_id: str) -> Packaging:
        """Make one packaging the default, clearing the flag on all others."""
        index = locate(self.packagings, packaging_id, "Packaging", PACKAGING_NOT_FOUND)
        now = utc_now()
        candidate = _single_default(self.packagings, packaging_id, now)
        self._commit("packagings", candidate, now)
        return candidate[index]

    def get_packaging(self, packaging_id: str) -> Packaging:
        return self.packagings[locate(self.packagings, packaging_id, "Packaging", PACKAGING_NOT_FOUND)]

    # ===== TRANSPORT PROVIDERS =====

    def add_transport_provider(self, data: Mapping[str, Any]) -> TransportProvider:
        now = utc_now()
        provider = TransportProvider.create(data, record_id=self.next_id(), now=now)
        self._commit("transport_providers", [*self.transport_providers, provider], now)
        return provider

    def update_transport_provider(self, provider_id: str, patch: Mapping[str, Any]) -> TransportProvider:
        index = locate(self.transport_providers, provider_id, "TransportProvider", PROVIDER_NOT_FOUND)
        now = utc_now()
        updated = self.transport_providers[index].apply_patch(patch, now=now)
        self._commit("transport_providers", replaced(self.transport_providers, index, updated), now)
        return updated

    def remove_transport_provider(self, provider_id: str) -> TransportProvider:
        index = locate(self.transport_providers, provider_id, "TransportProvider", PROVIDER_NOT_FOUND)
        removed = self.transport_providers[index]
        self._commit("transport_providers", without(self.transport_providers, index), utc_now())
        return removed

    def toggle_transport_provider(self, provider_id: str, active: bool) -> TransportProvider:
        active = guards.require_bool(active, "active")
        index = locate(self.transport_providers, provider_id, "TransportProvider", PROVIDER_NOT_FOUND)
        now = utc_now()
        updated = self.transport_providers[index].with_active(active, now)
        self._commit("transport_providers", replaced(self.transport_providers, index, updated), now)
        return updated

    def get_transport_provider(self, provider_id: str) -> TransportProvider:
        return self.transport_providers[
            locate(self.transport_providers, provider_id, "TransportProvider", PROVIDER_NOT_FOUND)
        ]

    # ===== DOCUMENTATION TEMPLATES =====

    def add_documentation_template(self, data: Mapping[str, Any]) -> DocumentationTemplate:
        now = utc_now()
        template = DocumentationTemplate.create(data, record_id=self.next_id(), now=now)
        self._commit("documentation_templates", [*self.documentation_templates, template], now)
        return template

    def update_documentation_template(self, template_id: str, patch: Mapping[str, Any]) -> DocumentationTemplate:
        index = locate(self.documentation_templates, template_id, "DocumentationTemplate", TEMPLATE_NOT_FOUND)
        now = utc_now()
        updated = self.documentation_templates[index].apply_patch(patch, now=now)
        self._commit("documentation_templates", replaced(self.documentation_templates, index, updated), now)
        return updated

    def remove_documentation_template(self, template_id: str) -> DocumentationTemplate:
        index = locate(self.documentation_templates, template_id, "DocumentationTemplate", TEMPLATE_NOT_FOUND)
        removed = self.documentation_templates[index]
        self._commit("documentation_templates", without(self.documentation_templates, index), utc_now())
        return removed

    # ===== QUERIES =====

    def active_delivery_methods(self) -> list[DeliveryMethod]:
        return [method for method in self.delivery_methods if method.active]

    def default_packaging(self) -> Packaging | None:
        return next((packaging for packaging in self.packagings if packaging.is_default), None)

    def active_transport_providers(self) -> list[TransportProvider]:
        return [provider for provider in self.transport_providers if provider.active]

    def count_shipping_profiles(self) -> int:
        return len(self.shipping_profiles)
