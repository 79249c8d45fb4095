"""
Sub-entities of AppsAndChannelsConfiguration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, ClassVar, Self

from store_admin.core.domain import guards, parse_datetime
from store_admin.domains.store_config.domain.entities.base import ConfigRecord, FieldParser, name_key
from store_admin.domains.store_config.domain.value_objects import (
    AppKind,
    ChannelKind,
    DevelopmentAppState,
    ReviewState,
)


def _optional_date(value: Any) -> datetime | None:
    return parse_datetime(value) if value else None


@dataclass(frozen=True)
class InstalledApp(ConfigRecord):
    """App installed in the store; permissions may never be empty."""

    name: str
    kind: AppKind
    permissions: tuple[str, ...]
    installed_at: datetime
    installed: bool = True
    version: str | None = None
    access_token: str | None = None
    config_url: str | None = None

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "name": lambda v: guards.require_string(v, "name"),
        "kind": lambda v: guards.require_enum(v, AppKind, "kind"),
        "permissions": lambda v: guards.require_string_list(v, "permissions"),
        "installed": lambda v: guards.optional_bool(v, "installed", default=True),
        "version": lambda v: guards.optional_string(v, "version"),
        "access_token": lambda v: guards.optional_string(v, "access_token"),
        "config_url": lambda v: guards.optional_url(v, "config_url"),
    }

    @classmethod
    def _defaults(cls, values: dict[str, Any], now: datetime) -> dict[str, Any]:
        return {**values, "installed_at": now}

    @property
    def key(self) -> str:
        return name_key(self.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            **cls.stored_identity(data),
            name=data["name"],
            kind=AppKind(data["kind"]),
            permissions=tuple(data.get("permissions", ())),
            installed_at=parse_datetime(data["installed_at"]),
            installed=data.get("installed", True),
            version=data.get("version"),
            access_token=data.get("access_token"),
            config_url=data.get("config_url"),
        )


@dataclass(frozen=True)
class SalesChannel(ConfigRecord):
    """
    Place where the store sells (online store, marketplace, social network...).

    `configuration` is an opaque key/value map the domain never interprets.
    """

    name: str
    kind: ChannelKind
    url: str | None = None
    active: bool = True
    configuration: dict[str, Any] = field(default_factory=dict)

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "name": lambda v: guards.require_string(v, "name"),
        "kind": lambda v: guards.require_enum(v, ChannelKind, "kind"),
        "url": lambda v: guards.optional_url(v, "url"),
        "active": lambda v: guards.optional_bool(v, "active", default=True),
        "configuration": lambda v: guards.optional_mapping(v, "configuration"),
    }

    @property
    def key(self) -> str:
        return name_key(self.name)

    def with_active(self, active: bool, now: datetime) -> Self:
        return replace(self, active=active, updated_at=now)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            **cls.stored_identity(data),
            name=data["name"],
            kind=ChannelKind(data["kind"]),
            url=data.get("url"),
            active=data.get("active", True),
            configuration=dict(data.get("configuration") or {}),
        )


@dataclass(frozen=True)
class DevelopmentApp(ConfigRecord):
    """
    App being developed for the store.

    review_state tracks moderation and starts as pending; state tracks
    the functional lifecycle.
    """

    name: str
    state: DevelopmentAppState
    dev_token: str
    responsible: str
    scopes: tuple[str, ...]
    review_state: ReviewState = ReviewState.PENDING
    version: str | None = None
    sandbox: bool = False
    sandbox_endpoint: str | None = None
    error_webhook: str | None = None
    env_vars: dict[str, Any] = field(default_factory=dict)
    review_notes: str | None = None
    published_at: datetime | None = None

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "name": lambda v: guards.require_string(v, "name"),
        "state": lambda v: guards.require_enum(v, DevelopmentAppState, "state"),
        "dev_token": lambda v: guards.require_string(v, "dev_token"),
        "responsible": lambda v: guards.require_email(v, "responsible"),
        "scopes": lambda v: guards.require_string_list(v, "scopes"),
        "version": lambda v: guards.optional_string(v, "version"),
        "sandbox": lambda v: guards.optional_bool(v, "sandbox", default=False),
        "sandbox_endpoint": lambda v: guards.optional_url(v, "sandbox_endpoint"),
        "error_webhook": lambda v: guards.optional_url(v, "error_webhook"),
        "env_vars": lambda v: guards.optional_mapping(v, "env_vars"),
    }

    # Only updates may move the review forward
    PATCH_PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "review_state": lambda v: guards.require_enum(v, ReviewState, "review_state"),
        "review_notes": lambda v: guards.optional_string(v, "review_notes"),
        "published_at": lambda v: guards.optional_datetime(v, "published_at"),
    }

    def apply_patch(self, patch: Mapping[str, Any], *, now: datetime) -> Self:
        updated = super().apply_patch(patch, now=now)
        review_changes = {
            name: parser(patch[name]) for name, parser in self.PATCH_PARSERS.items() if name in patch
        }
        return replace(updated, **review_changes) if review_changes else updated

    @property
    def key(self) -> str:
        return name_key(self.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            **cls.stored_identity(data),
            name=data["name"],
            state=DevelopmentAppState(data["state"]),
            dev_token=data["dev_token"],
            responsible=data["responsible"],
            scopes=tuple(data.get("scopes", ())),
            review_state=ReviewState(data.get("review_state", ReviewState.PENDING.value)),
            version=data.get("version"),
            sandbox=data.get("sandbox", False),
            sandbox_endpoint=data.get("sandbox_endpoint"),
            error_webhook=data.get("error_webhook"),
            env_vars=dict(data.get("env_vars") or {}),
            review_notes=data.get("review_notes"),
            published_at=_optional_date(data.get("published_at")),
        )


@dataclass(frozen=True)
class UninstalledApp(ConfigRecord):
    """App removed from the store, with a snapshot of its prior data."""

    name: str
    reason: str
    uninstalled_at: datetime
    snapshot: dict[str, Any] = field(default_factory=dict)

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "name": lambda v: guards.require_string(v, "name"),
        "reason": lambda v: guards.require_string(v, "reason"),
        "uninstalled_at": lambda v: guards.optional_datetime(v, "uninstalled_at"),
        "snapshot": lambda v: guards.optional_mapping(v, "snapshot"),
    }

    @classmethod
    def _defaults(cls, values: dict[str, Any], now: datetime) -> dict[str, Any]:
        if values["uninstalled_at"] is None:
            values["uninstalled_at"] = now
        return values

    def _patch_defaults(self, changes: dict[str, Any]) -> dict[str, Any]:
        if "uninstalled_at" in changes and changes["uninstalled_at"] is None:
            del changes["uninstalled_at"]
        return changes

    @property
    def key(self) -> str:
        return name_key(self.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            **cls.stored_identity(data),
            name=data["name"],
            reason=data["reason"],
            uninstalled_at=parse_datetime(data["uninstalled_at"]),
            snapshot=dict(data.get("snapshot") or {}),
        )
