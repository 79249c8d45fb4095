"""
Return rule sub-entity of PoliciesConfiguration.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Self

from store_admin.core.domain import InvalidValueException, MissingValueException, guards
from store_admin.domains.store_config.domain.entities.base import ConfigRecord, FieldParser, name_key
from store_admin.domains.store_config.domain.value_objects import ReturnRuleType

CONDITION_MAX_LENGTH = 500
DAYS_WINDOW_RANGE = (1, 365)
RETURN_FEE_RANGE = (0, 100)


def _optional_number(value: Any) -> int | float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidValueException("value", value, "Field 'value' must be a number")
    return value


@dataclass(frozen=True)
class ReturnRule(ConfigRecord):
    """
    Single return/refund rule.

    days_window rules carry the window length in `value` (1..365) and
    return_fee rules carry a percentage (0..100).
    """

    type: ReturnRuleType
    condition: str
    value: int | float | None = None
    description: str | None = None
    active: bool = True

    PARSERS: ClassVar[Mapping[str, FieldParser]] = {
        "type": lambda v: guards.require_enum(v, ReturnRuleType, "type"),
        "condition": lambda v: guards.require_string(v, "condition", max_length=CONDITION_MAX_LENGTH),
        "value": _optional_number,
        "description": lambda v: guards.optional_string(v, "description"),
        "active": lambda v: guards.optional_bool(v, "active", default=True),
    }

    def _check(self) -> None:
        bounds = {
            ReturnRuleType.DAYS_WINDOW: DAYS_WINDOW_RANGE,
            ReturnRuleType.RETURN_FEE: RETURN_FEE_RANGE,
        }.get(self.type)
        if bounds is None:
            return
        if self.value is None:
            raise MissingValueException("value", message=f"Rules of type '{self.type.value}' need a value")
        guards.require_in_range(self.value, *bounds, "value")

    @property
    def key(self) -> tuple[ReturnRuleType, str]:
        """(type, condition) pair that must be unique in the configuration."""
        return (self.type, name_key(self.condition))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            **cls.stored_identity(data),
            type=ReturnRuleType(data["type"]),
            condition=data["condition"],
            value=data.get("value"),
            description=data.get("description"),
            active=data.get("active", True),
        )
