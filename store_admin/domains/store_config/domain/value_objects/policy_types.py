"""
Value objects for return/refund policies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self

from store_admin.core.domain import InvalidValueException, StatusEnum, ValueObject
from store_admin.core.domain import guards

POLICY_TITLE_MAX_LENGTH = 200
PHONE_MAX_LENGTH = 20
ADDRESS_MAX_LENGTH = 500
BUSINESS_HOURS_MAX_LENGTH = 100


class ReturnRulesState(StatusEnum):
    ENABLED = "enabled"
    DISABLED = "disabled"


class ReturnRuleType(StatusEnum):
    DAYS_WINDOW = "days_window"
    PRODUCT_CONDITION = "product_condition"
    RETURN_FEE = "return_fee"
    RETURN_SHIPPING = "return_shipping"
    FINAL_SALE = "final_sale"


@dataclass(frozen=True)
class PolicyDocument(ValueObject):
    """Privacy policy, terms of service or shipping policy text."""

    title: str
    content: str
    updated_on: datetime
    active: bool = True

    def _validate(self) -> None:
        guards.require_string(self.title, "title", max_length=POLICY_TITLE_MAX_LENGTH)
        guards.require_string(self.content, "content")

    @classmethod
    def from_dict(cls, data: Any, field: str) -> Self:
        """Parse a document; field prefixes error fields (e.g. 'privacy_policy.title')."""
        if not isinstance(data, Mapping):
            raise InvalidValueException(field, None, f"Field '{field}' must be an object")
        return cls(
            title=guards.require_string(
                data.get("title"), f"{field}.title", max_length=POLICY_TITLE_MAX_LENGTH
            ),
            content=guards.require_string(data.get("content"), f"{field}.content"),
            updated_on=guards.require_datetime(data.get("updated_on"), f"{field}.updated_on"),
            active=guards.optional_bool(data.get("active"), f"{field}.active", default=True),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "updated_on": self.updated_on.isoformat(),
            "active": self.active,
        }


@dataclass(frozen=True)
class ContactInfo(ValueObject):
    """Store contact details shown alongside the policies."""

    email: str
    phone: str | None = None
    address: str | None = None
    business_hours: str | None = None

    def _validate(self) -> None:
        guards.require_email(self.email, "contact_info.email")

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        if not isinstance(data, Mapping):
            raise InvalidValueException("contact_info", None, "Field 'contact_info' must be an object")
        return cls(
            email=guards.require_email(data.get("email"), "contact_info.email"),
            phone=guards.optional_string(
                data.get("phone"), "contact_info.phone", max_length=PHONE_MAX_LENGTH
            ),
            address=guards.optional_string(
                data.get("address"), "contact_info.address", max_length=ADDRESS_MAX_LENGTH
            ),
            business_hours=guards.optional_string(
                data.get("business_hours"),
                "contact_info.business_hours",
                max_length=BUSINESS_HOURS_MAX_LENGTH,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "business_hours": self.business_hours,
        }
