"""
Shared machinery of the configuration aggregates.

Every mutation builds candidate collections, validates them completely
and only then assigns them, so a failed call leaves the aggregate untouched.
"""

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Self, TypeVar

from store_admin.core.domain import (
    AggregateRoot,
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidValueException,
    generate_uuid_str,
    guards,
    parse_datetime,
    utc_now,
)
from store_admin.domains.store_config.domain.entities.base import ConfigRecord, find_index

TRecord = TypeVar("TRecord", bound=ConfigRecord)


def ensure_unique(
    candidate: TRecord,
    others: Iterable[TRecord],
    *,
    key: Callable[[TRecord], Hashable | None],
    entity_type: str,
    field: str,
    code: str,
) -> None:
    """Raise DuplicateEntityException when another record shares the candidate's key."""
    candidate_key = key(candidate)
    if candidate_key is None:
        return
    for other in others:
        if other.id != candidate.id and key(other) == candidate_key:
            raise DuplicateEntityException(entity_type, field, getattr(candidate, field), code)


def ensure_all_unique(
    records: Sequence[TRecord],
    *,
    key: Callable[[TRecord], Hashable | None],
    entity_type: str,
    field: str,
    code: str,
) -> None:
    for index, record in enumerate(records):
        ensure_unique(record, records[:index], key=key, entity_type=entity_type, field=field, code=code)


def locate(records: Sequence[TRecord], record_id: str, entity_type: str, code: str) -> int:
    """Index of the record with record_id, or EntityNotFoundException."""
    index = find_index(records, record_id)
    if index is None:
        raise EntityNotFoundException(entity_type, record_id, code=code)
    return index


def replaced(records: Sequence[TRecord], index: int, record: TRecord) -> list[TRecord]:
    return [*records[:index], record, *records[index + 1 :]]


def without(records: Sequence[TRecord], index: int) -> list[TRecord]:
    return [*records[:index], *records[index + 1 :]]


def create_records(
    record_cls: type[TRecord],
    items: Any,
    field: str,
    id_factory: Callable[[], str],
    now: datetime,
) -> list[TRecord]:
    """Create every sub-entity of an input collection (absent means empty)."""
    if items is None:
        return []
    if not isinstance(items, list | tuple):
        raise InvalidValueException(field, None, f"Field '{field}' must be a list")
    return [record_cls.create(item, record_id=id_factory(), now=now) for item in items]


@dataclass(eq=False)
class ConfigurationAggregate(AggregateRoot[str]):
    """
    Base of the per-store configuration aggregates.

    Subclasses implement `create` (full validation), `reconstruct`
    (trusts the stored shape) and `_state_to_dict`.
    """

    store_id: str = ""

    ENTITY_TYPE: ClassVar[str] = "Configuration"

    @classmethod
    def _start(
        cls,
        store_id: str,
        *,
        id_factory: Callable[[], str] | None,
        now: datetime | None,
    ) -> tuple[dict[str, Any], Callable[[], str], datetime]:
        """Validated identity fields for a brand-new aggregate."""
        id_factory = id_factory or generate_uuid_str
        now = now or utc_now()
        identity = {
            "id": id_factory(),
            "store_id": guards.require_string(store_id, "store_id"),
            "created_at": now,
            "updated_at": now,
            "id_factory": id_factory,
        }
        return identity, id_factory, now

    @staticmethod
    def _stored_identity(shape: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "id": shape["id"],
            "store_id": shape["store_id"],
            "version": shape.get("version", 0),
            "created_at": parse_datetime(shape["created_at"]),
            "updated_at": parse_datetime(shape["updated_at"]),
        }

    @staticmethod
    def _input(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise InvalidValueException("data", None, "Configuration input must be an object")
        return data

    def _state_to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_persisted_shape(self) -> dict[str, Any]:
        """JSON-compatible snapshot accepted by `reconstruct`."""
        return {
            "id": self.id,
            "store_id": self.store_id,
            "version": self.version,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            **self._state_to_dict(),
        }

    @classmethod
    def reconstruct(cls, shape: Mapping[str, Any]) -> Self:
        raise NotImplementedError
