"""
Manage Shipping Use Case

Shipping profiles, delivery methods, packagings, transport providers
and documentation templates.
"""

from collections.abc import Mapping
from typing import Any

from store_admin.domains.store_config.application.use_cases.base import ManageConfigurationUseCase, MutationResult
from store_admin.domains.store_config.domain.entities import (
    DeliveryMethod,
    DocumentationTemplate,
    Packaging,
    ShippingConfiguration,
    ShippingProfile,
    TransportProvider,
)
from store_admin.domains.store_config.domain.value_objects import DeliveryType


class ManageShippingUseCase(ManageConfigurationUseCase[ShippingConfiguration]):
    """Shipping mutations of a store. Delivery methods are addressed by type, the rest by id."""

    ENTITY_TYPE = ShippingConfiguration.ENTITY_TYPE

    # ===== SHIPPING PROFILES =====

    async def add_shipping_profile(
        self, store_id: str, data: Mapping[str, Any]
    ) -> MutationResult[ShippingConfiguration, ShippingProfile]:
        return await self._mutate(store_id, "add_shipping_profile", lambda c: c.add_shipping_profile(data))

    async def update_shipping_profile(
        self, store_id: str, profile_id: str, patch: Mapping[str, Any]
    ) -> MutationResult[ShippingConfiguration, ShippingProfile]:
        return await self._mutate(
            store_id, "update_shipping_profile", lambda c: c.update_shipping_profile(profile_id, patch)
        )

    async def remove_shipping_profile(
        self, store_id: str, profile_id: str
    ) -> MutationResult[ShippingConfiguration, ShippingProfile]:
        return await self._mutate(store_id, "remove_shipping_profile", lambda c: c.remove_shipping_profile(profile_id))

    # ===== DELIVERY METHODS =====

    async def add_delivery_method(
        self, store_id: str, data: Mapping[str, Any]
    ) -> MutationResult[ShippingConfiguration, DeliveryMethod]:
        return await self._mutate(store_id, "add_delivery_method", lambda c: c.add_delivery_method(data))

    async def update_delivery_method(
        self, store_id: str, delivery_type: DeliveryType | str, patch: Mapping[str, Any]
    ) -> MutationResult[ShippingConfiguration, DeliveryMethod]:
        return await self._mutate(
            store_id, "update_delivery_method", lambda c: c.update_delivery_method(delivery_type, patch)
        )

    async def remove_delivery_method(
        self, store_id: str, delivery_type: DeliveryType | str
    ) -> MutationResult[ShippingConfiguration, DeliveryMethod]:
        return await self._mutate(
            store_id, "remove_delivery_method", lambda c: c.remove_delivery_method(delivery_type)
        )

    async def toggle_delivery_method(
        self, store_id: str, delivery_type: DeliveryType | str, active: bool
    ) -> MutationResult[ShippingConfiguration, DeliveryMethod]:
        return await self._mutate(
            store_id, "toggle_delivery_method", lambda c: c.toggle_delivery_method(delivery_type, active)
        )

    # ===== PACKAGINGS =====

    async def add_packaging(self, store_id: str, data: Mapping[str, Any]) -> MutationResult[ShippingConfiguration, Packaging]:
        return await self._mutate(store_id, "add_packaging", lambda c: c.add_packaging(data))

    async def update_packaging(
        self, store_id: str, packaging_id: str, patch: Mapping[str, Any]
    ) -> MutationResult[ShippingConfiguration, Packaging]:
        return await self._mutate(store_id, "update_packaging", lambda c: c.update_packaging(packaging_id, patch))

    async def remove_packaging(self, store_id: str, packaging_id: str) -> MutationResult[ShippingConfiguration, Packaging]:
        return await self._mutate(store_id, "remove_packaging", lambda c: c.remove_packaging(packaging_id))

    async def set_default_packaging(
        self, store_id: str, packaging_id: str
    ) -> MutationResult[ShippingConfiguration, Packaging]:
        return await self._mutate(store_id, "set_default_packaging", lambda c: c.set_default_packaging(packaging_id))

    # ===== TRANSPORT PROVIDERS =====

    async def add_transport_provider(
        self, store_id: str, data: Mapping[str, Any]
    ) -> MutationResult[ShippingConfiguration, TransportProvider]:
        return await self._mutate(store_id, "add_transport_provider", lambda c: c.add_transport_provider(data))

    async def update_transport_provider(
        self, store_id: str, provider_id: str, patch: Mapping[str, Any]
    ) -> MutationResult[ShippingConfiguration, TransportProvider]:
        return await self._mutate(
            store_id, "update_transport_provider", lambda c: c.update_transport_provider(provider_id, patch)
        )

    async def remove_transport_provider(
        self, store_id: str, provider_id: str
    ) -> MutationResult[ShippingConfiguration, TransportProvider]:
        return await self._mutate(
            store_id, "remove_transport_provider", lambda c: c.remove_transport_provider(provider_id)
        )

    async def toggle_transport_provider(
        self, store_id: str, provider_id: str, active: bool
    ) -> MutationResult[ShippingConfiguration, TransportProvider]:
        return await self._mutate(
            store_id, "toggle_transport_provider", lambda c: c.toggle_transport_provider(provider_id, active)
        )

    # ===== DOCUMENTATION TEMPLATES =====

    async def add_documentation_template(
        self, store_id: str, data: Mapping[str, Any]
    ) -> MutationResult[ShippingConfiguration, DocumentationTemplate]:
        return await self._mutate(
            store_id, "add_documentation_template", lambda c: c.add_documentation_template(data)
        )

    async def update_documentation_template(
        self, store_id: str, template_id: str, patch: Mapping[str, Any]
    ) -> MutationResult[ShippingConfiguration, DocumentationTemplate]:
        return await self._mutate(
            store_id,
            "update_documentation_template",
            lambda c: c.update_documentation_template(template_id, patch),
        )

    async def remove_documentation_template(
        self, store_id: str, template_id: str
    ) -> MutationResult[ShippingConfiguration, DocumentationTemplate]:
        return await self._mutate(
            store_id, "remove_documentation_template", lambda c: c.remove_documentation_template(template_id)
        )
