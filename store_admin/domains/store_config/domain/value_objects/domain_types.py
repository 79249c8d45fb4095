"""
Value objects for store domains (hostnames).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self

from store_admin.core.domain import StatusEnum, ValueObject
from store_admin.core.domain import guards


class DomainKind(StatusEnum):
    """Role a hostname plays for the store."""

    PRINCIPAL = "principal"
    SECONDARY = "secondary"
    SUBDOMAIN = "subdomain"


class ConnectionState(StatusEnum):
    """DNS connection state of a domain."""

    CONNECTED = "connected"
    VERIFYING = "verifying"
    DISCONNECTED = "disconnected"


class DomainSource(StatusEnum):
    """Where the domain comes from."""

    PURCHASED_IN_PLATFORM = "purchased_in_platform"
    EXTERNAL = "external"
    PLATFORM_SUBDOMAIN = "platform_subdomain"


@dataclass(frozen=True)
class DomainChange(ValueObject):
    """
    One entry of a domain's change history.

    Attributes:
        changed_at: When the change happened
        change_type: What changed (e.g. "connection", "ssl_renewal")
        responsible: Who made the change
        details: Optional free text
    """

    changed_at: datetime
    change_type: str
    responsible: str
    details: str | None = None

    def _validate(self) -> None:
        guards.require_string(self.change_type, "change_type")
        guards.require_string(self.responsible, "responsible")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            changed_at=guards.require_datetime(data.get("changed_at"), "changed_at"),
            change_type=guards.require_string(data.get("change_type"), "change_type"),
            responsible=guards.require_string(data.get("responsible"), "responsible"),
            details=guards.optional_string(data.get("details"), "details"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "changed_at": self.changed_at.isoformat(),
            "change_type": self.change_type,
            "responsible": self.responsible,
            "details": self.details,
        }
