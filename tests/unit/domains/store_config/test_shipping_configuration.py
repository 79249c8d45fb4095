"""
Tests for the ShippingConfiguration aggregate.
"""

from datetime import UTC, datetime

import pytest

from store_admin.core.domain import (
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidValueException,
    MissingValueException,
)
from store_admin.domains.store_config.domain.entities import ShippingConfiguration
from store_admin.domains.store_config.domain.value_objects import DeliveryType, RateType


def profile(name: str = "National", country: str = "AR", **overrides) -> dict:
    return {
        "name": name,
        "zones": [{"country": country, "region": "Buenos Aires"}],
        "rates": [{"type": "fixed", "amount": 1500}],
        **overrides,
    }


def packaging(is_default: bool = False, **overrides) -> dict:
    return {
        "type": "box",
        "dimensions": {"length": 30, "width": 20, "height": 10},
        "weight": 0.5,
        "is_default": is_default,
        **overrides,
    }


def provider(name: str = "Andreani", account: str = "ACC-1", **overrides) -> dict:
    return {"provider_name": name, "account": account, **overrides}


CREATED_AT = datetime(2024, 1, 1, tzinfo=UTC)

# ===== FIXTURES =====


@pytest.fixture
def configuration(id_factory) -> ShippingConfiguration:
    return ShippingConfiguration.create("store-1", id_factory=id_factory)


# ===== SHIPPING PROFILES =====


@pytest.mark.unit
class TestShippingProfiles:
    """Tests for shipping profiles, zones and rates."""

    def test_add_profile(self, configuration):
        created = configuration.add_shipping_profile(profile(product_ids=["p-1"]))

        assert created.zones[0].country == "AR"
        assert created.rates[0].type == RateType.FIXED
        assert created.product_ids == ("p-1",)

    def test_profile_needs_zones_and_rates(self, configuration):
        with pytest.raises(MissingValueException) as exc_info:
            configuration.add_shipping_profile(profile(zones=[]))
        assert exc_info.value.field == "zones"

        with pytest.raises(MissingValueException):
            configuration.add_shipping_profile(profile(rates=None))

    def test_fixed_rate_needs_positive_amount(self, configuration):
        with pytest.raises(InvalidValueException) as exc_info:
            configuration.add_shipping_profile(profile(rates=[{"type": "fixed", "amount": 0}]))

        assert exc_info.value.field == "rates.amount"

    def test_calculated_rate_needs_conditions(self, configuration):
        with pytest.raises(InvalidValueException):
            configuration.add_shipping_profile(profile(rates=[{"type": "calculated"}]))

    def test_free_rate(self, configuration):
        created = configuration.add_shipping_profile(profile(rates=[{"type": "free"}]))

        assert created.rates[0].amount is None

    def test_duplicate_profile_name(self, configuration):
        configuration.add_shipping_profile(profile("National", "AR"))

        with pytest.raises(DuplicateEntityException):
            configuration.add_shipping_profile(profile("national", "UY"))

    def test_zone_cannot_be_in_two_profiles(self, configuration):
        configuration.add_shipping_profile(profile("National", "AR"))

        with pytest.raises(DuplicateEntityException) as exc_info:
            configuration.add_shipping_profile(profile("Other", "ar"))

        assert exc_info.value.code == "SHIPPING.DUPLICATE_ZONE"
        assert configuration.count_shipping_profiles() == 1

    def test_update_and_remove_profile(self, configuration):
        created = configuration.add_shipping_profile(profile())

        updated = configuration.update_shipping_profile(created.id, {"name": "Nacional"})
        assert updated.name == "Nacional"
        assert updated.zones == created.zones

        configuration.remove_shipping_profile(created.id)
        assert configuration.count_shipping_profiles() == 0


# ===== DELIVERY METHODS =====


@pytest.mark.unit
class TestDeliveryMethods:
    """Tests for delivery methods, keyed by type."""

    def test_one_method_per_type(self, configuration):
        configuration.add_delivery_method({"type": "store_pickup"})

        with pytest.raises(DuplicateEntityException):
            configuration.add_delivery_method({"type": "store_pickup", "active": False})

    def test_last_active_method_cannot_be_disabled(self, configuration):
        configuration.add_delivery_method({"type": "store_pickup"})

        with pytest.raises(InvalidValueException) as exc_info:
            configuration.toggle_delivery_method("store_pickup", False)

        assert exc_info.value.code == "SHIPPING.NO_ACTIVE_DELIVERY_METHOD"
        assert configuration.get_delivery_method(DeliveryType.STORE_PICKUP).active is True

    def test_toggle_with_another_active_method(self, configuration):
        configuration.add_delivery_method({"type": "store_pickup"})
        configuration.add_delivery_method({"type": "local_delivery"})

        configuration.toggle_delivery_method(DeliveryType.STORE_PICKUP, False)

        assert [m.type for m in configuration.active_delivery_methods()] == [DeliveryType.LOCAL_DELIVERY]

    def test_first_method_cannot_be_inactive(self, configuration):
        with pytest.raises(InvalidValueException):
            configuration.add_delivery_method({"type": "store_pickup", "active": False})

    def test_removing_every_method_is_allowed(self, configuration):
        configuration.add_delivery_method({"type": "store_pickup"})

        configuration.remove_delivery_method("store_pickup")

        assert configuration.delivery_methods == []

    def test_unknown_type(self, configuration):
        with pytest.raises(InvalidValueException):
            configuration.get_delivery_method("teleport")

        with pytest.raises(EntityNotFoundException):
            configuration.get_delivery_method("store_pickup")


# ===== PACKAGINGS =====


@pytest.mark.unit
class TestPackagings:
    """Tests for packagings and the single default flag."""

    def test_exactly_one_default(self, configuration):
        first = configuration.add_packaging(packaging(is_default=True))
        second = configuration.add_packaging(packaging(is_default=True, type="envelope"))

        defaults = [p for p in configuration.packagings if p.is_default]
        assert [p.id for p in defaults] == [second.id]
        assert configuration.get_packaging(first.id).is_default is False

    def test_set_default(self, configuration):
        first = configuration.add_packaging(packaging(is_default=True))
        second = configuration.add_packaging(packaging())

        configuration.set_default_packaging(second.id)

        assert configuration.default_packaging().id == second.id
        assert configuration.get_packaging(first.id).is_default is False

    def test_update_to_default_clears_others(self, configuration):
        configuration.add_packaging(packaging(is_default=True))
        second = configuration.add_packaging(packaging())

        configuration.update_packaging(second.id, {"is_default": True})

        assert sum(p.is_default for p in configuration.packagings) == 1
        assert configuration.default_packaging().id == second.id

    def test_create_rejects_two_defaults(self):
        with pytest.raises(InvalidValueException) as exc_info:
            ShippingConfiguration.create(
                "store-1", {"packagings": [packaging(is_default=True), packaging(is_default=True)]}
            )

        assert exc_info.value.code == "SHIPPING.MULTIPLE_DEFAULT_PACKAGINGS"

    def test_dimensions_must_be_positive(self, configuration):
        with pytest.raises(InvalidValueException) as exc_info:
            configuration.add_packaging(packaging(dimensions={"length": 0, "width": 1, "height": 1}))

        assert exc_info.value.field == "dimensions.length"

    def test_dimensions_required(self, configuration):
        with pytest.raises(MissingValueException):
            configuration.add_packaging(packaging(dimensions=None))


# ===== TRANSPORT PROVIDERS AND TEMPLATES =====


@pytest.mark.unit
class TestTransportProviders:
    """Tests for transport providers."""

    def test_duplicate_name(self, configuration):
        configuration.add_transport_provider(provider())

        with pytest.raises(DuplicateEntityException) as exc_info:
            configuration.add_transport_provider(provider("andreani", "ACC-2"))

        assert exc_info.value.code == "SHIPPING.DUPLICATE_TRANSPORT_PROVIDER"

    def test_duplicate_account(self, configuration):
        configuration.add_transport_provider(provider())

        with pytest.raises(DuplicateEntityException) as exc_info:
            configuration.add_transport_provider(provider("OCA", "acc-1"))

        assert exc_info.value.code == "SHIPPING.DUPLICATE_PROVIDER_ACCOUNT"

    def test_toggle(self, configuration):
        created = configuration.add_transport_provider(provider())

        configuration.toggle_transport_provider(created.id, False)

        assert configuration.active_transport_providers() == []

    def test_invalid_api_url(self, configuration):
        with pytest.raises(InvalidValueException):
            configuration.add_transport_provider(provider(api_url="ftp://carrier"))


@pytest.mark.unit
class TestDocumentationTemplates:
    """Tests for documentation templates."""

    def test_label_store_name_is_unique(self, configuration):
        configuration.add_documentation_template({"label_store_name": "My Shop"})

        with pytest.raises(DuplicateEntityException):
            configuration.add_documentation_template({"label_store_name": "my shop"})

    def test_templates_without_label_do_not_collide(self, configuration):
        configuration.add_documentation_template({"delivery_note_template": "A"})
        configuration.add_documentation_template({"delivery_note_template": "B"})

        assert len(configuration.documentation_templates) == 2

    def test_update_and_remove(self, configuration):
        template = configuration.add_documentation_template({"label_store_name": "My Shop"})

        updated = configuration.update_documentation_template(template.id, {"delivery_note_template": "X"})
        assert updated.label_store_name == "My Shop"

        configuration.remove_documentation_template(template.id)
        assert configuration.documentation_templates == []


@pytest.mark.unit
class TestPersistedShape:
    """Tests for to_persisted_shape / reconstruct."""

    def test_round_trip(self, configuration):
        configuration.add_shipping_profile(profile(rates=[{"type": "calculated", "conditions": {"by": "weight"}}]))
        configuration.add_delivery_method({"type": "local_delivery", "customization": {"slot": "pm"}})
        configuration.add_packaging(packaging(is_default=True))
        configuration.add_transport_provider(provider())
        configuration.add_documentation_template({"label_store_name": "My Shop"})

        restored = ShippingConfiguration.reconstruct(configuration.to_persisted_shape())

        assert restored.to_persisted_shape() == configuration.to_persisted_shape()
        assert restored.default_packaging().id == configuration.default_packaging().id


@pytest.mark.unit
class TestUpdatedAt:
    """Successful mutations refresh updated_at; rejected ones leave the state alone."""

    @pytest.fixture
    def created_earlier(self, id_factory) -> ShippingConfiguration:
        return ShippingConfiguration.create(
            "store-1",
            {"delivery_methods": [{"type": "store_pickup"}], "packagings": [packaging(is_default=True)]},
            id_factory=id_factory,
            now=CREATED_AT,
        )

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda c: c.add_shipping_profile(profile()),
            lambda c: c.add_delivery_method({"type": "local_delivery"}),
            lambda c: c.add_packaging(packaging(is_default=True)),
            lambda c: c.set_default_packaging(c.packagings[0].id),
            lambda c: c.add_transport_provider(provider()),
        ],
    )
    def test_success_refreshes_updated_at(self, created_earlier, mutate):
        mutate(created_earlier)

        assert created_earlier.updated_at > CREATED_AT
        assert created_earlier.created_at == CREATED_AT

    def test_last_active_method_changes_nothing(self, created_earlier):
        before = created_earlier.to_persisted_shape()

        with pytest.raises(InvalidValueException):
            created_earlier.toggle_delivery_method("store_pickup", False)

        assert created_earlier.to_persisted_shape() == before
        assert created_earlier.updated_at == CREATED_AT

    def test_rejected_packaging_keeps_default(self, created_earlier):
        default_id = created_earlier.default_packaging().id
        flat_box = packaging(is_default=True, dimensions={"length": 0, "width": 1, "height": 1})

        with pytest.raises(InvalidValueException):
            created_earlier.add_packaging(flat_box)

        assert created_earlier.default_packaging().id == default_id
        assert len(created_earlier.packagings) == 1
        assert created_earlier.updated_at == CREATED_AT
