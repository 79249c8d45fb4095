"""
Domain guards.

Raising counterparts of the shared validation predicates. Sub-entity
factories use them to fail fast on the first violated field.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from store_admin.core.domain.entities import parse_datetime
from store_admin.core.domain.exceptions import InvalidValueException, MissingValueException
from store_admin.core.shared import validators

TEnum = TypeVar("TEnum", bound=Enum)


def is_missing(value: Any) -> bool:
    """Absent, None, or a blank string."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require(data: Mapping[str, Any], field: str, code: str | None = None) -> Any:
    """Return data[field] or raise MissingValueException."""
    value = data.get(field)
    if is_missing(value):
        raise MissingValueException(field, code=code)
    return value


def require_string(value: Any, field: str, code: str | None = None, max_length: int | None = None) -> str:
    """Return the stripped string, failing on missing, non-string or over-long input."""
    if is_missing(value):
        raise MissingValueException(field, code=code)
    if not isinstance(value, str):
        raise InvalidValueException(field, value, f"Field '{field}' must be a string", code)
    value = value.strip()
    if max_length is not None and not validators.is_within_length(value, max_length):
        raise InvalidValueException(
            field, value, f"Field '{field}' must be at most {max_length} characters", code
        )
    return value


def optional_string(value: Any, field: str, code: str | None = None, max_length: int | None = None) -> str | None:
    if is_missing(value):
        return None
    return require_string(value, field, code, max_length)


def require_enum(value: Any, enum_cls: type[TEnum], field: str, code: str | None = None) -> TEnum:
    """Coerce value to a member of enum_cls."""
    if is_missing(value):
        raise MissingValueException(field, code=code)
    if not validators.is_enum_member(value, enum_cls):
        allowed = ", ".join(str(member.value) for member in enum_cls)
        raise InvalidValueException(field, value, f"Field '{field}' must be one of: {allowed}", code)
    return enum_cls(value)


def require_url(value: Any, field: str, code: str | None = None) -> str:
    if is_missing(value):
        raise MissingValueException(field, code=code)
    if not validators.is_valid_url(value):
        raise InvalidValueException(field, value, f"Field '{field}' must be a valid URL", code)
    return value.strip()


def optional_url(value: Any, field: str, code: str | None = None) -> str | None:
    """Validate the URL only when one is supplied."""
    if is_missing(value):
        return None
    return require_url(value, field, code)


def require_email(value: Any, field: str, code: str | None = None) -> str:
    if is_missing(value):
        raise MissingValueException(field, code=code)
    if not validators.is_valid_email(value):
        raise InvalidValueException(field, value, f"Field '{field}' must be a valid email", code)
    return value.strip()


def require_hostname(value: Any, field: str, code: str | None = None) -> str:
    if is_missing(value):
        raise MissingValueException(field, code=code)
    if not validators.is_valid_hostname(value):
        raise InvalidValueException(field, value, f"Field '{field}' must be a valid hostname", code)
    return value.strip()


def require_bool(value: Any, field: str, code: str | None = None) -> bool:
    if value is None:
        raise MissingValueException(field, code=code)
    if not isinstance(value, bool):
        raise InvalidValueException(field, value, f"Field '{field}' must be a boolean", code)
    return value


def optional_bool(value: Any, field: str, default: bool, code: str | None = None) -> bool:
    if value is None:
        return default
    return require_bool(value, field, code)


def require_in_range(
    value: Any,
    min_value: int | float,
    max_value: int | float,
    field: str,
    code: str | None = None,
) -> int | float:
    if value is None:
        raise MissingValueException(field, code=code)
    if not validators.is_in_range(value, min_value, max_value):
        raise InvalidValueException(
            field, value, f"Field '{field}' must be between {min_value} and {max_value}", code
        )
    return value


def require_positive(value: Any, field: str, code: str | None = None) -> int | float:
    if value is None:
        raise MissingValueException(field, code=code)
    if not validators.is_positive_number(value):
        raise InvalidValueException(field, value, f"Field '{field}' must be greater than 0", code)
    return value


def require_non_negative(value: Any, field: str, code: str | None = None) -> int | float:
    if value is None:
        raise MissingValueException(field, code=code)
    if not validators.is_non_negative_number(value):
        raise InvalidValueException(field, value, f"Field '{field}' cannot be negative", code)
    return value


def require_string_list(value: Any, field: str, code: str | None = None, max_length: int | None = None) -> tuple[str, ...]:
    """Non-empty list of non-empty strings, returned as a tuple."""
    if value is None or (isinstance(value, list | tuple) and not value):
        raise MissingValueException(field, code=code)
    if not validators.is_non_empty_list(value):
        raise InvalidValueException(field, value, f"Field '{field}' must be a list", code)
    return tuple(require_string(item, field, code, max_length) for item in value)


def optional_string_list(value: Any, field: str, code: str | None = None) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list | tuple):
        raise InvalidValueException(field, value, f"Field '{field}' must be a list", code)
    return tuple(require_string(item, field, code) for item in value)


def optional_mapping(value: Any, field: str, code: str | None = None) -> dict[str, Any]:
    """Opaque key/value blob; copied, never interpreted."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidValueException(field, None, f"Field '{field}' must be an object", code)
    return dict(value)


def require_datetime(value: Any, field: str, code: str | None = None) -> datetime:
    """Accept a datetime or an ISO-8601 string."""
    if is_missing(value):
        raise MissingValueException(field, code=code)
    if not isinstance(value, datetime | str):
        raise InvalidValueException(field, value, f"Field '{field}' must be a date", code)
    try:
        return parse_datetime(value)
    except ValueError:
        raise InvalidValueException(field, value, f"Field '{field}' must be an ISO-8601 date", code) from None


def optional_datetime(value: Any, field: str, code: str | None = None) -> datetime | None:
    if is_missing(value):
        return None
    return require_datetime(value, field, code)
