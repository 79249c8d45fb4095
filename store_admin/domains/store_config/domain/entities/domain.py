"""
Domain (hostname) sub-entity of DomainsConfiguration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, ClassVar, Self

from store_admin.core.domain import InvalidValueException, guards, parse_datetime
from store_admin.domains.store_config.domain.entities.base import ConfigRecord, FieldParser, name_key
from store_admin.domains.store_config.domain.value_objects import (
    ConnectionState,
    DomainChange,
    DomainKind,
    DomainSource,
)


@dataclass(frozen=True)
class Domain(ConfigRecord):
    """
    A hostname attached to the store.

    Attributes:
        name: Hostname (e.g. "shop.example.com"), unique case-insensitively
        kind: principal, secondary or subdomain
        connection_state: DNS connection state
        source: Where the domain was obtained
        connected_at: Connection time, defaults to creation time
        redirection: Whether this domain redirects to the principal
        purchased: Whether the domain was bought through the platform
        subdomain: Optional subdomain label
        ssl_active: Whether an SSL certificate is active
        https: Whether HTTPS is enforced
        history: Ordered change history
    """

    name: str
    kind: DomainKind
    connection_state: ConnectionState
    source: DomainSource
    connected_at: datetime
    redirection: bool = False
    purchased: bool = False
    subdomain: str | None = None
    ssl_active: bool = False
    https: bool = False
    history: tuple[DomainChange, ...] = ()

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "name": lambda v: guards.require_hostname(v, "name"),
        "kind": lambda v: guards.require_enum(v, DomainKind, "kind"),
        "connection_state": lambda v: guards.require_enum(v, ConnectionState, "connection_state"),
        "source": lambda v: guards.require_enum(v, DomainSource, "source"),
        "connected_at": lambda v: guards.optional_datetime(v, "connected_at"),
        "redirection": lambda v: guards.optional_bool(v, "redirection", default=False),
        "purchased": lambda v: guards.optional_bool(v, "purchased", default=False),
        "subdomain": lambda v: guards.optional_string(v, "subdomain"),
        "ssl_active": lambda v: guards.optional_bool(v, "ssl_active", default=False),
        "https": lambda v: guards.optional_bool(v, "https", default=False),
    }

    @classmethod
    def _defaults(cls, values: dict[str, Any], now: datetime) -> dict[str, Any]:
        if values["connected_at"] is None:
            values["connected_at"] = now
        return values

    def _patch_defaults(self, changes: dict[str, Any]) -> dict[str, Any]:
        if "connected_at" in changes and changes["connected_at"] is None:
            del changes["connected_at"]
        return changes

    def _check(self) -> None:
        if self.kind == DomainKind.PRINCIPAL and self.https and not self.ssl_active:
            raise InvalidValueException(
                "ssl_active",
                self.ssl_active,
                "A principal domain served over HTTPS needs an active SSL certificate",
                "DOMAINS.SSL_REQUIRED",
            )

    @property
    def key(self) -> str:
        return name_key(self.name)

    def is_connected(self) -> bool:
        return self.connection_state == ConnectionState.CONNECTED

    def with_kind(self, kind: DomainKind, now: datetime) -> Self:
        if self.kind == kind:
            return self
        record = replace(self, kind=kind, updated_at=now)
        record._check()
        return record

    def with_change(self, change: DomainChange, now: datetime) -> Self:
        return replace(self, history=(*self.history, change), updated_at=now)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Rebuild a stored domain without re-validating it."""
        return cls(
            **cls.stored_identity(data),
            name=data["name"],
            kind=DomainKind(data["kind"]),
            connection_state=ConnectionState(data["connection_state"]),
            source=DomainSource(data["source"]),
            connected_at=parse_datetime(data["connected_at"]),
            redirection=data.get("redirection", False),
            purchased=data.get("purchased", False),
            subdomain=data.get("subdomain"),
            ssl_active=data.get("ssl_active", False),
            https=data.get("https", False),
            history=tuple(DomainChange.from_dict(item) for item in data.get("history", [])),
        )
