"""
Base Entity Classes for Domain-Driven Design

Entities are domain objects with identity and lifecycle.
They maintain their identity regardless of their attributes.
"""

from abc import ABC
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar
from uuid import uuid4

# Type variable for entity ID (int, str, UUID, etc.)
TId = TypeVar("TId")


def utc_now() -> datetime:
    """Current wall-clock time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def generate_uuid_str() -> str:
    """Generate a new UUID as string."""
    return str(uuid4())


@dataclass(eq=False)
class Entity(ABC, Generic[TId]):
    """
    Base class for all domain entities.

    An entity is a domain object that has a distinct identity
    that runs through time and different states.

    Type Parameters:
        TId: Type of entity identifier (int, str, UUID)
    """

    id: TId | None = field(default=None)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID."""
        if not isinstance(other, Entity):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id) if self.id is not None else id(self)

    def touch(self, at: datetime | None = None) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = at or utc_now()


@dataclass(eq=False)
class AggregateRoot(Entity[TId], Generic[TId]):
    """
    Base class for aggregate roots.

    An aggregate root is the entry point to an aggregate.
    It controls access to all members of the aggregate
    and ensures invariants are maintained.

    Example:
        ```python
        @dataclass(eq=False)
        class DomainsConfiguration(AggregateRoot[str]):
            domains: list[Domain] = field(default_factory=list)

            def add_domain(self, data: Mapping[str, Any]) -> Domain:
                now = utc_now()
                domain = Domain.create(data, record_id=self.next_id(), now=now)
                self.domains = [*self.domains, domain]
                self.touch(now)
                return domain
        ```
    """

    version: int = field(default=0)
    id_factory: Callable[[], str] = field(default=generate_uuid_str, repr=False, compare=False)

    def next_id(self) -> str:
        """Produce an identifier for a new member of the aggregate."""
        return self.id_factory()

    def increment_version(self) -> None:
        """Increment version for optimistic concurrency."""
        self.version += 1


def parse_datetime(value: datetime | str) -> datetime:
    """Read a stored or wire timestamp; naive values are taken as UTC."""
    parsed = value if isinstance(value, datetime) else datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
