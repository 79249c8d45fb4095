"""
Shared Validators

Pure validation predicates used by every configuration aggregate.
They never raise: callers decide how to fail (see core.domain.guards).
"""

import re
from enum import Enum
from typing import Any
from urllib.parse import urlparse

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Labels of 1-63 chars, alphanumeric at both ends, hyphens inside
HOSTNAME_PATTERN = re.compile(
    r"^(?=.{1,253}$)([a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,63}$"
)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_non_empty_string(value: Any) -> bool:
    """True for a string with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


def is_non_empty_list(value: Any) -> bool:
    """True for a list or tuple with at least one element."""
    return isinstance(value, list | tuple) and len(value) > 0


def is_valid_url(value: Any) -> bool:
    """True for an absolute http(s) URL with a host."""
    if not is_non_empty_string(value):
        return False
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_valid_email(value: Any) -> bool:
    """True for something shaped like local@host.tld."""
    return is_non_empty_string(value) and bool(EMAIL_PATTERN.match(value.strip()))


def is_valid_hostname(value: Any) -> bool:
    """True for a syntactically valid DNS hostname (e.g. shop.example.com)."""
    return is_non_empty_string(value) and bool(HOSTNAME_PATTERN.match(value.strip()))


def is_enum_member(value: Any, enum_cls: type[Enum]) -> bool:
    """True when value is a member of enum_cls or one of its values."""
    if isinstance(value, enum_cls):
        return True
    return any(member.value == value for member in enum_cls)


def is_in_range(value: Any, min_value: int | float, max_value: int | float) -> bool:
    """Inclusive numeric range check."""
    return _is_number(value) and min_value <= value <= max_value


def is_positive_number(value: Any) -> bool:
    return _is_number(value) and value > 0


def is_non_negative_number(value: Any) -> bool:
    return _is_number(value) and value >= 0


def is_within_length(value: Any, max_length: int) -> bool:
    """True for a string no longer than max_length characters."""
    return isinstance(value, str) and len(value) <= max_length
