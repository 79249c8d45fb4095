"""
AppsAndChannelsConfiguration aggregate.

Four independent collections (installed apps, sales channels, development
apps, uninstalled apps). Names are unique case-insensitively inside each
collection; the same name may appear in different collections.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Self

from store_admin.core.domain import guards, utc_now
from store_admin.domains.store_config.domain.entities.aggregate import (
    ConfigurationAggregate,
    create_records,
    ensure_all_unique,
    ensure_unique,
    locate,
    replaced,
    without,
)
from store_admin.domains.store_config.domain.entities.apps import (
    DevelopmentApp,
    InstalledApp,
    SalesChannel,
    UninstalledApp,
)
from store_admin.domains.store_config.domain.entities.base import ConfigRecord
from store_admin.domains.store_config.domain.value_objects import (
    AppKind,
    ChannelKind,
    DevelopmentAppState,
    ReviewState,
)


@dataclass(frozen=True)
class _Collection:
    attr: str
    record_cls: type[ConfigRecord]
    entity_type: str
    duplicate_code: str
    not_found_code: str


INSTALLED = _Collection(
    "installed_apps", InstalledApp, "InstalledApp", "APPS.DUPLICATE_INSTALLED_APP", "APPS.INSTALLED_APP_NOT_FOUND"
)
CHANNELS = _Collection(
    "sales_channels", SalesChannel, "SalesChannel", "APPS.DUPLICATE_SALES_CHANNEL", "APPS.SALES_CHANNEL_NOT_FOUND"
)
DEVELOPMENT = _Collection(
    "development_apps",
    DevelopmentApp,
    "DevelopmentApp",
    "APPS.DUPLICATE_DEVELOPMENT_APP",
    "APPS.DEVELOPMENT_APP_NOT_FOUND",
)
UNINSTALLED = _Collection(
    "uninstalled_apps",
    UninstalledApp,
    "UninstalledApp",
    "APPS.DUPLICATE_UNINSTALLED_APP",
    "APPS.UNINSTALLED_APP_NOT_FOUND",
)


def _name_key(record: Any) -> str:
    return record.key


@dataclass(eq=False)
class AppsAndChannelsConfiguration(ConfigurationAggregate):
    """Installed apps, sales channels, development apps and uninstall history of a store."""

    installed_apps: list[InstalledApp] = field(default_factory=list)
    sales_channels: list[SalesChannel] = field(default_factory=list)
    development_apps: list[DevelopmentApp] = field(default_factory=list)
    uninstalled_apps: list[UninstalledApp] = field(default_factory=list)

    ENTITY_TYPE: ClassVar[str] = "AppsAndChannelsConfiguration"
    COLLECTIONS: ClassVar[tuple[_Collection, ...]] = (INSTALLED, CHANNELS, DEVELOPMENT, UNINSTALLED)

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
        for rules in cls.COLLECTIONS:
            records = create_records(rules.record_cls, data.get(rules.attr), rules.attr, id_factory, now)
            ensure_all_unique(
                records, key=_name_key, entity_type=rules.entity_type, field="name", code=rules.duplicate_code
            )
            collections[rules.attr] = records
        return cls(**identity, **collections)

    @classmethod
    def reconstruct(cls, shape: Mapping[str, Any]) -> Self:
        return cls(
            **cls._stored_identity(shape),
            installed_apps=[InstalledApp.from_dict(item) for item in shape.get("installed_apps", [])],
            sales_channels=[SalesChannel.from_dict(item) for item in shape.get("sales_channels", [])],
            development_apps=[DevelopmentApp.from_dict(item) for item in shape.get("development_apps", [])],
            uninstalled_apps=[UninstalledApp.from_dict(item) for item in shape.get("uninstalled_apps", [])],
        )

    def _state_to_dict(self) -> dict[str, Any]:
        return {
            rules.attr: [record.to_dict() for record in getattr(self, rules.attr)]
            for rules in self.COLLECTIONS
        }

    # ===== GENERIC COLLECTION OPERATIONS =====

    def _add(self, rules: _Collection, data: Mapping[str, Any]) -> Any:
        now = utc_now()
        records = getattr(self, rules.attr)
        record = rules.record_cls.create(data, record_id=self.next_id(), now=now)
        ensure_unique(record, records, key=_name_key, entity_type=rules.entity_type, field="name", code=rules.duplicate_code)
        setattr(self, rules.attr, [*records, record])
        self.touch(now)
        return record

    def _update(self, rules: _Collection, record_id: str, patch: Mapping[str, Any]) -> Any:
        records = getattr(self, rules.attr)
        index = locate(records, record_id, rules.entity_type, rules.not_found_code)
        now = utc_now()
        updated = records[index].apply_patch(patch, now=now)
        ensure_unique(updated, records, key=_name_key, entity_type=rules.entity_type, field="name", code=rules.duplicate_code)
        setattr(self, rules.attr, replaced(records, index, updated))
        self.touch(now)
        return updated

    def _remove(self, rules: _Collection, record_id: str) -> Any:
        records = getattr(self, rules.attr)
        index = locate(records, record_id, rules.entity_type, rules.not_found_code)
        removed = records[index]
        setattr(self, rules.attr, without(records, index))
        self.touch()
        return removed

    def _get(self, rules: _Collection, record_id: str) -> Any:
        records = getattr(self, rules.attr)
        return records[locate(records, record_id, rules.entity_type, rules.not_found_code)]

    # ===== INSTALLED APPS =====

    def add_installed_app(self, data: Mapping[str, Any]) -> InstalledApp:
        return self._add(INSTALLED, data)

    def update_installed_app(self, app_id: str, patch: Mapping[str, Any]) -> InstalledApp:
        return self._update(INSTALLED, app_id, patch)

    def remove_installed_app(self, app_id: str) -> InstalledApp:
        return self._remove(INSTALLED, app_id)

    def uninstall_app(self, app_id: str, reason: str) -> UninstalledApp:
        """
        Move an installed app to the uninstalled collection.

        The app's prior data is kept as snapshot. An earlier uninstall
        record with the same name is superseded by the new one.
        """
        index = locate(self.installed_apps, app_id, INSTALLED.entity_type, INSTALLED.not_found_code)
        app = self.installed_apps[index]
        now = utc_now()
        record = UninstalledApp.create(
            {"name": app.name, "reason": reason, "snapshot": app.to_dict()},
            record_id=self.next_id(),
            now=now,
        )
        self.uninstalled_apps = [
            *(previous for previous in self.uninstalled_apps if previous.key != record.key),
            record,
        ]
        self.installed_apps = without(self.installed_apps, index)
        self.touch(now)
        return record

    # ===== SALES CHANNELS =====

    def add_sales_channel(self, data: Mapping[str, Any]) -> SalesChannel:
        return self._add(CHANNELS, data)

    def update_sales_channel(self, channel_id: str, patch: Mapping[str, Any]) -> SalesChannel:
        return self._update(CHANNELS, channel_id, patch)

    def remove_sales_channel(self, channel_id: str) -> SalesChannel:
        return self._remove(CHANNELS, channel_id)

    def set_sales_channel_active(self, channel_id: str, active: bool) -> SalesChannel:
        active = guards.require_bool(active, "active")
        index = locate(self.sales_channels, channel_id, CHANNELS.entity_type, CHANNELS.not_found_code)
        now = utc_now()
        updated = self.sales_channels[index].with_active(active, now)
        self.sales_channels = replaced(self.sales_channels, index, updated)
        self.touch(now)
        return updated

    # ===== DEVELOPMENT APPS =====

    def add_development_app(self, data: Mapping[str, Any]) -> DevelopmentApp:
        return self._add(DEVELOPMENT, data)

    def update_development_app(self, app_id: str, patch: Mapping[str, Any]) -> DevelopmentApp:
        return self._update(DEVELOPMENT, app_id, patch)

    def remove_development_app(self, app_id: str) -> DevelopmentApp:
        return self._remove(DEVELOPMENT, app_id)

    # ===== UNINSTALLED APPS =====

    def add_uninstalled_app(self, data: Mapping[str, Any]) -> UninstalledApp:
        return self._add(UNINSTALLED, data)

    def update_uninstalled_app(self, app_id: str, patch: Mapping[str, Any]) -> UninstalledApp:
        return self._update(UNINSTALLED, app_id, patch)

    def remove_uninstalled_app(self, app_id: str) -> UninstalledApp:
        return self._remove(UNINSTALLED, app_id)

    # ===== QUERIES =====

    def get_installed_app(self, app_id: str) -> InstalledApp:
        return self._get(INSTALLED, app_id)

    def get_sales_channel(self, channel_id: str) -> SalesChannel:
        return self._get(CHANNELS, channel_id)

    def get_development_app(self, app_id: str) -> DevelopmentApp:
        return self._get(DEVELOPMENT, app_id)

    def get_uninstalled_app(self, app_id: str) -> UninstalledApp:
        return self._get(UNINSTALLED, app_id)

    def installed_apps_by_kind(self, kind: AppKind | str) -> list[InstalledApp]:
        kind = AppKind(kind)
        return [app for app in self.installed_apps if app.kind == kind]

    def sales_channels_by_kind(self, kind: ChannelKind | str) -> list[SalesChannel]:
        kind = ChannelKind(kind)
        return [channel for channel in self.sales_channels if channel.kind == kind]

    def active_sales_channels(self) -> list[SalesChannel]:
        return [channel for channel in self.sales_channels if channel.active]

    def development_apps_by_state(self, state: DevelopmentAppState | str) -> list[DevelopmentApp]:
        state = DevelopmentAppState(state)
        return [app for app in self.development_apps if app.state == state]

    def development_apps_by_review_state(self, review_state: ReviewState | str) -> list[DevelopmentApp]:
        review_state = ReviewState(review_state)
        return [app for app in self.development_apps if app.review_state == review_state]

    def count_installed_apps(self) -> int:
        return len(self.installed_apps)

    def count_active_sales_channels(self) -> int:
        return len(self.active_sales_channels())

    def count_development_apps(self) -> int:
        return len(self.development_apps)
