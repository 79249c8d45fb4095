"""
Base record for sub-entities owned by a configuration aggregate.

Records are immutable. `create` validates every field and fails on the
first violation; `apply_patch` validates only the supplied fields and
returns a new record.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Self, TypeVar

from store_admin.core.domain import InvalidValueException, MissingValueException, ValueObject, parse_datetime

FieldParser = Callable[[Any], Any]
TRecord = TypeVar("TRecord", bound="ConfigRecord")
TItem = TypeVar("TItem")


def serialize(value: Any) -> Any:
    """Convert domain values to JSON-compatible primitives."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, ValueObject):
        return value.to_dict()
    if isinstance(value, list | tuple):
        return [serialize(item) for item in value]
    if isinstance(value, Mapping):
        return {key: serialize(item) for key, item in value.items()}
    return value


def ensure_mapping(data: Any, field: str = "data") -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise InvalidValueException(field, None, f"Field '{field}' must be an object")
    return data


def parse_input(parsers: Mapping[str, FieldParser], data: Mapping[str, Any]) -> dict[str, Any]:
    """Run every parser in declaration order; absent keys are parsed as None."""
    return {name: parser(data.get(name)) for name, parser in parsers.items()}


def parse_patch(parsers: Mapping[str, FieldParser], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Run only the parsers of the supplied fields."""
    return {name: parser(patch[name]) for name, parser in parsers.items() if name in patch}


def require_items(
    value: Any,
    field: str,
    parse: Callable[[Any], TItem],
) -> tuple[TItem, ...]:
    """Non-empty list of nested values, each parsed with `parse`."""
    if value is None or (isinstance(value, list | tuple) and not value):
        raise MissingValueException(field)
    if not isinstance(value, list | tuple):
        raise InvalidValueException(field, None, f"Field '{field}' must be a list")
    return tuple(parse(item) for item in value)


@dataclass(frozen=True)
class ConfigRecord:
    """
    Sub-entity of a configuration aggregate, addressed by a stable id.

    Subclasses declare PARSERS (field name -> validating parser) and may
    override `_defaults` for values derived from the mutation time and
    `_check` for rules spanning several of their own fields.
    """

    id: str
    created_at: datetime
    updated_at: datetime

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {}

    @classmethod
    def create(cls, data: Mapping[str, Any], *, record_id: str, now: datetime) -> Self:
        values = parse_input(cls.PARSERS, ensure_mapping(data))
        record = cls(id=record_id, created_at=now, updated_at=now, **cls._defaults(values, now))
        record._check()
        return record

    def apply_patch(self, patch: Mapping[str, Any], *, now: datetime) -> Self:
        changes = parse_patch(self.PARSERS, ensure_mapping(patch))
        record = replace(self, **self._patch_defaults(changes), updated_at=now)
        record._check()
        return record

    @classmethod
    def _defaults(cls, values: dict[str, Any], now: datetime) -> dict[str, Any]:
        return values

    def _patch_defaults(self, changes: dict[str, Any]) -> dict[str, Any]:
        return changes

    def _check(self) -> None:
        pass

    def to_dict(self) -> dict[str, Any]:
        return {f.name: serialize(getattr(self, f.name)) for f in fields(self)}

    @staticmethod
    def stored_identity(data: Mapping[str, Any]) -> dict[str, Any]:
        """id and timestamps of a stored record."""
        return {
            "id": data["id"],
            "created_at": parse_datetime(data["created_at"]),
            "updated_at": parse_datetime(data["updated_at"]),
        }


def find_index(records: Iterable[TRecord], record_id: str) -> int | None:
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    return None


def name_key(name: str) -> str:
    """Key used for case-insensitive name uniqueness."""
    return name.strip().casefold()
