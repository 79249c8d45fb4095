"""
Tests for the AppsAndChannelsConfiguration aggregate.
"""

from datetime import UTC, datetime

import pytest

from store_admin.core.domain import (
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidValueException,
    MissingValueException,
)
from store_admin.domains.store_config.domain.entities import AppsAndChannelsConfiguration
from store_admin.domains.store_config.domain.value_objects import (
    AppKind,
    ChannelKind,
    DevelopmentAppState,
    ReviewState,
)


def installed_app(name: str = "Shipper", **overrides) -> dict:
    return {"name": name, "kind": "shipping", "permissions": ["read_orders"], **overrides}


def sales_channel(name: str = "Main store", **overrides) -> dict:
    return {"name": name, "kind": "online_store", "url": "https://shop.example.com", **overrides}


def development_app(name: str = "Sync tool", **overrides) -> dict:
    return {
        "name": name,
        "state": "in_development",
        "dev_token": "tok-123",
        "responsible": "dev@example.com",
        "scopes": ["read_products"],
        **overrides,
    }


CREATED_AT = datetime(2024, 1, 1, tzinfo=UTC)

# ===== FIXTURES =====


@pytest.fixture
def configuration(id_factory) -> AppsAndChannelsConfiguration:
    return AppsAndChannelsConfiguration.create("store-1", id_factory=id_factory)


# ===== INSTALLED APPS =====


@pytest.mark.unit
class TestInstalledApps:
    """Tests for installed app operations."""

    def test_case_insensitive_duplicate(self, configuration):
        app = configuration.add_installed_app(installed_app("Shipper"))

        assert configuration.count_installed_apps() == 1
        assert app.kind == AppKind.SHIPPING
        assert app.installed is True

        with pytest.raises(DuplicateEntityException) as exc_info:
            configuration.add_installed_app(installed_app("shipper"))

        assert exc_info.value.code == "APPS.DUPLICATE_INSTALLED_APP"
        assert configuration.count_installed_apps() == 1

    def test_permissions_cannot_be_empty(self, configuration):
        with pytest.raises(MissingValueException) as exc_info:
            configuration.add_installed_app(installed_app(permissions=[]))

        assert exc_info.value.field == "permissions"

    def test_invalid_config_url(self, configuration):
        with pytest.raises(InvalidValueException):
            configuration.add_installed_app(installed_app(config_url="nope"))

    def test_update_keeps_unpatched_fields(self, configuration):
        app = configuration.add_installed_app(installed_app(version="1.0"))

        updated = configuration.update_installed_app(app.id, {"version": "2.0"})

        assert updated.version == "2.0"
        assert updated.permissions == ("read_orders",)
        assert updated.installed_at == app.installed_at

    def test_update_with_empty_permissions_is_rejected(self, configuration):
        app = configuration.add_installed_app(installed_app())

        with pytest.raises(MissingValueException):
            configuration.update_installed_app(app.id, {"permissions": []})

    def test_remove_unknown(self, configuration):
        with pytest.raises(EntityNotFoundException) as exc_info:
            configuration.remove_installed_app("missing")

        assert exc_info.value.code == "APPS.INSTALLED_APP_NOT_FOUND"

    def test_uninstall_moves_app(self, configuration):
        app = configuration.add_installed_app(installed_app())

        record = configuration.uninstall_app(app.id, "Too expensive")

        assert configuration.installed_apps == []
        assert record.name == "Shipper"
        assert record.reason == "Too expensive"
        assert record.snapshot["permissions"] == ["read_orders"]
        assert configuration.uninstalled_apps == [record]

    def test_uninstall_supersedes_previous_record(self, configuration):
        first = configuration.add_installed_app(installed_app())
        configuration.uninstall_app(first.id, "first")
        second = configuration.add_installed_app(installed_app())

        record = configuration.uninstall_app(second.id, "second")

        assert len(configuration.uninstalled_apps) == 1
        assert configuration.uninstalled_apps[0].id == record.id

    def test_uninstall_requires_reason(self, configuration):
        app = configuration.add_installed_app(installed_app())

        with pytest.raises(MissingValueException):
            configuration.uninstall_app(app.id, "")

        assert configuration.count_installed_apps() == 1


# ===== SALES CHANNELS =====


@pytest.mark.unit
class TestSalesChannels:
    """Tests for sales channel operations."""

    def test_configuration_is_opaque(self, configuration):
        channel = configuration.add_sales_channel(sales_channel(configuration={"nested": {"any": [1, 2]}}))

        assert channel.configuration == {"nested": {"any": [1, 2]}}
        assert channel.kind == ChannelKind.ONLINE_STORE

    def test_set_active(self, configuration):
        channel = configuration.add_sales_channel(sales_channel())

        configuration.set_sales_channel_active(channel.id, False)

        assert configuration.count_active_sales_channels() == 0
        assert configuration.get_sales_channel(channel.id).active is False

    def test_same_name_allowed_across_collections(self, configuration):
        configuration.add_installed_app(installed_app("Shared"))
        configuration.add_sales_channel(sales_channel("Shared"))

        assert configuration.count_installed_apps() == 1
        assert len(configuration.sales_channels) == 1

    def test_filter_by_kind(self, configuration):
        configuration.add_sales_channel(sales_channel())
        configuration.add_sales_channel(sales_channel("Insta", kind="instagram", url=None))

        assert [c.name for c in configuration.sales_channels_by_kind("instagram")] == ["Insta"]


# ===== DEVELOPMENT APPS =====


@pytest.mark.unit
class TestDevelopmentApps:
    """Tests for development app operations."""

    def test_starts_pending_review(self, configuration):
        app = configuration.add_development_app(development_app())

        assert app.review_state == ReviewState.PENDING
        assert app.state == DevelopmentAppState.IN_DEVELOPMENT

    def test_responsible_must_be_email(self, configuration):
        with pytest.raises(InvalidValueException) as exc_info:
            configuration.add_development_app(development_app(responsible="not-an-email"))

        assert exc_info.value.field == "responsible"

    def test_update_review_state(self, configuration):
        app = configuration.add_development_app(development_app())

        updated = configuration.update_development_app(
            app.id, {"review_state": "approved", "review_notes": "ok", "state": "published"}
        )

        assert updated.review_state == ReviewState.APPROVED
        assert updated.review_notes == "ok"
        assert updated.state == DevelopmentAppState.PUBLISHED
        assert [a.id for a in configuration.development_apps_by_review_state("approved")] == [app.id]


@pytest.mark.unit
class TestCreateAndReconstruct:
    """Tests for full-configuration creation and the persisted shape."""

    def test_create_with_collections(self, id_factory):
        configuration = AppsAndChannelsConfiguration.create(
            "store-1",
            {
                "installed_apps": [installed_app()],
                "sales_channels": [sales_channel()],
                "development_apps": [development_app()],
                "uninstalled_apps": [{"name": "Old", "reason": "unused"}],
            },
            id_factory=id_factory,
        )

        assert configuration.count_installed_apps() == 1
        assert configuration.count_development_apps() == 1
        assert configuration.uninstalled_apps[0].uninstalled_at == configuration.created_at

    def test_create_rejects_duplicates(self):
        with pytest.raises(DuplicateEntityException):
            AppsAndChannelsConfiguration.create(
                "store-1", {"sales_channels": [sales_channel("POS"), sales_channel("pos")]}
            )

    def test_round_trip(self, configuration):
        app = configuration.add_installed_app(installed_app())
        configuration.add_sales_channel(sales_channel())
        configuration.add_development_app(development_app())
        configuration.uninstall_app(app.id, "reason")

        restored = AppsAndChannelsConfiguration.reconstruct(configuration.to_persisted_shape())

        assert restored.to_persisted_shape() == configuration.to_persisted_shape()


@pytest.mark.unit
class TestUpdatedAt:
    """Successful mutations refresh updated_at; rejected ones leave the state alone."""

    @pytest.fixture
    def created_earlier(self, id_factory) -> AppsAndChannelsConfiguration:
        return AppsAndChannelsConfiguration.create(
            "store-1", {"installed_apps": [installed_app()]}, id_factory=id_factory, now=CREATED_AT
        )

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda c: c.add_installed_app(installed_app("Mailer", kind="marketing")),
            lambda c: c.update_installed_app(c.installed_apps[0].id, {"version": "2.0"}),
            lambda c: c.uninstall_app(c.installed_apps[0].id, "Not needed"),
            lambda c: c.add_sales_channel(sales_channel()),
            lambda c: c.add_development_app(development_app()),
        ],
    )
    def test_success_refreshes_updated_at(self, created_earlier, mutate):
        mutate(created_earlier)

        assert created_earlier.updated_at > CREATED_AT
        assert created_earlier.created_at == CREATED_AT

    def test_duplicate_add_changes_nothing(self, created_earlier):
        before = created_earlier.to_persisted_shape()

        with pytest.raises(DuplicateEntityException):
            created_earlier.add_installed_app(installed_app("SHIPPER"))

        assert created_earlier.to_persisted_shape() == before
        assert created_earlier.updated_at == CREATED_AT
