"""
PoliciesConfiguration aggregate.

Return rules, policy documents, contact information and final-sale products.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Self

from store_admin.core.domain import (
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidValueException,
    guards,
    parse_datetime,
    utc_now,
)
from store_admin.domains.store_config.domain.entities.aggregate import (
    ConfigurationAggregate,
    create_records,
    ensure_all_unique,
    locate,
    replaced,
    without,
)
from store_admin.domains.store_config.domain.entities.policies import ReturnRule
from store_admin.domains.store_config.domain.value_objects import (
    ContactInfo,
    PolicyDocument,
    ReturnRulesState,
)

RULE_NOT_FOUND = "POLICIES.RETURN_RULE_NOT_FOUND"
DUPLICATE_RULE = "POLICIES.DUPLICATE_RETURN_RULE"
PRODUCT_NOT_FOUND = "POLICIES.FINAL_SALE_PRODUCT_NOT_FOUND"
DUPLICATE_PRODUCT = "POLICIES.DUPLICATE_FINAL_SALE_PRODUCT"

PRODUCT_ID_MAX_LENGTH = 50
DOCUMENT_FIELDS = ("privacy_policy", "terms_of_service", "shipping_policy")


def check_return_rules(rules: list[ReturnRule]) -> None:
    ensure_all_unique(rules, key=lambda r: r.key, entity_type="ReturnRule", field="condition", code=DUPLICATE_RULE)


def parse_product_id(value: Any) -> str:
    return guards.require_string(value, "product_id", max_length=PRODUCT_ID_MAX_LENGTH)


def parse_product_ids(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list | tuple):
        raise InvalidValueException(
            "final_sale_product_ids", None, "Field 'final_sale_product_ids' must be a list"
        )
    product_ids: list[str] = []
    for item in value:
        product_id = parse_product_id(item)
        if product_id in product_ids:
            raise DuplicateEntityException("FinalSaleProduct", "product_id", product_id, DUPLICATE_PRODUCT)
        product_ids.append(product_id)
    return product_ids


def _optional_document(value: Any, field: str) -> PolicyDocument | None:
    return None if value is None else PolicyDocument.from_dict(value, field)


def _optional_contact(value: Any) -> ContactInfo | None:
    return None if value is None else ContactInfo.from_dict(value)


def _stored_document(data: Mapping[str, Any] | None) -> PolicyDocument | None:
    if not data:
        return None
    return PolicyDocument(
        title=data["title"],
        content=data["content"],
        updated_on=parse_datetime(data["updated_on"]),
        active=data.get("active", True),
    )


@dataclass(eq=False)
class PoliciesConfiguration(ConfigurationAggregate):
    """
    Return/refund policies of a store.

    (type, condition) pairs of return rules are unique, and so are the
    final-sale product ids.
    """

    return_rules_state: ReturnRulesState = ReturnRulesState.DISABLED
    return_rules: list[ReturnRule] = field(default_factory=list)
    privacy_policy: PolicyDocument | None = None
    terms_of_service: PolicyDocument | None = None
    shipping_policy: PolicyDocument | None = None
    contact_info: ContactInfo | None = None
    final_sale_product_ids: list[str] = field(default_factory=list)

    ENTITY_TYPE: ClassVar[str] = "PoliciesConfiguration"

    # ===== CONSTRUCTION =====

    @classmethod
    def create(
        cls,
        store_id: str,
        data: Mapping[str, Any] | None = None,
        *,
        id_factory: Callable[[], str] | None = None,
        now: datetime | None = None,
    ) -> Self:
        identity, id_factory, now = cls._start(store_id, id_factory=id_factory, now=now)
        state = cls._parse_state(cls._input(data), id_factory, now, partial=False)
        return cls(**identity, **state)

    @classmethod
    def _parse_state(
        cls,
        data: Mapping[str, Any],
        id_factory: Callable[[], str],
        now: datetime,
        *,
        partial: bool,
    ) -> dict[str, Any]:
        """Validate whole-configuration input; with partial=True only supplied keys are returned."""
        parsers: dict[str, Callable[[Any], Any]] = {
            "return_rules_state": lambda v: (
                ReturnRulesState.DISABLED
                if v is None
                else guards.require_enum(v, ReturnRulesState, "return_rules_state")
            ),
            "return_rules": lambda v: cls._checked_rules(
                create_records(ReturnRule, v, "return_rules", id_factory, now)
            ),
            "privacy_policy": lambda v: _optional_document(v, "privacy_policy"),
            "terms_of_service": lambda v: _optional_document(v, "terms_of_service"),
            "shipping_policy": lambda v: _optional_document(v, "shipping_policy"),
            "contact_info": _optional_contact,
            "final_sale_product_ids": parse_product_ids,
        }
        return {
            name: parser(data.get(name))
            for name, parser in parsers.items()
            if not partial or name in data
        }

    @staticmethod
    def _checked_rules(rules: list[ReturnRule]) -> list[ReturnRule]:
        check_return_rules(rules)
        return rules

    @classmethod
    def reconstruct(cls, shape: Mapping[str, Any]) -> Self:
        contact = shape.get("contact_info")
        return cls(
            **cls._stored_identity(shape),
            return_rules_state=ReturnRulesState(shape.get("return_rules_state", ReturnRulesState.DISABLED.value)),
            return_rules=[ReturnRule.from_dict(item) for item in shape.get("return_rules", [])],
            privacy_policy=_stored_document(shape.get("privacy_policy")),
            terms_of_service=_stored_document(shape.get("terms_of_service")),
            shipping_policy=_stored_document(shape.get("shipping_policy")),
            contact_info=ContactInfo(**contact) if contact else None,
            final_sale_product_ids=list(shape.get("final_sale_product_ids", [])),
        )

    def _state_to_dict(self) -> dict[str, Any]:
        return {
            "return_rules_state": self.return_rules_state.value,
            "return_rules": [rule.to_dict() for rule in self.return_rules],
            **{
                name: document.to_dict() if (document := getattr(self, name)) else None
                for name in DOCUMENT_FIELDS
            },
            "contact_info": self.contact_info.to_dict() if self.contact_info else None,
            "final_sale_product_ids": list(self.final_sale_product_ids),
        }

    # ===== WHOLE-CONFIGURATION UPDATE =====

    def update(self, patch: Mapping[str, Any]) -> None:
        """
        Partially update the configuration.

        Every supplied section is validated before any of them is applied.
        A supplied return_rules list replaces the current rules.
        """
        now = utc_now()
        changes = self._parse_state(self._input(patch), self.id_factory, now, partial=True)
        for name, value in changes.items():
            setattr(self, name, value)
        self.touch(now)

    # ===== RETURN RULES =====

    def enable_return_rules(self) -> None:
        self.return_rules_state = ReturnRulesState.ENABLED
        self.touch()

    def disable_return_rules(self) -> None:
        self.return_rules_state = ReturnRulesState.DISABLED
        self.touch()

    def add_return_rule(self, data: Mapping[str, Any]) -> ReturnRule:
        now = utc_now()
        rule = ReturnRule.create(data, record_id=self.next_id(), now=now)
        self.return_rules = self._checked_rules([*self.return_rules, rule])
        self.touch(now)
        return rule

    def update_return_rule(self, rule_id: str, patch: Mapping[str, Any]) -> ReturnRule:
        index = locate(self.return_rules, rule_id, "ReturnRule", RULE_NOT_FOUND)
        now = utc_now()
        updated = self.return_rules[index].apply_patch(patch, now=now)
        self.return_rules = self._checked_rules(replaced(self.return_rules, index, updated))
        self.touch(now)
        return updated

    def remove_return_rule(self, rule_id: str) -> ReturnRule:
        index = locate(self.return_rules, rule_id, "ReturnRule", RULE_NOT_FOUND)
        removed = self.return_rules[index]
        self.return_rules = without(self.return_rules, index)
        self.touch()
        return removed

    def get_return_rule(self, rule_id: str) -> ReturnRule:
        return self.return_rules[locate(self.return_rules, rule_id, "ReturnRule", RULE_NOT_FOUND)]

    # ===== FINAL-SALE PRODUCTS =====

    def add_final_sale_product(self, product_id: str) -> None:
        product_id = parse_product_id(product_id)
        if product_id in self.final_sale_product_ids:
            raise DuplicateEntityException("FinalSaleProduct", "product_id", product_id, DUPLICATE_PRODUCT)
        self.final_sale_product_ids = [*self.final_sale_product_ids, product_id]
        self.touch()

    def remove_final_sale_product(self, product_id: str) -> None:
        if product_id not in self.final_sale_product_ids:
            raise EntityNotFoundException("FinalSaleProduct", product_id, code=PRODUCT_NOT_FOUND)
        self.final_sale_product_ids = [item for item in self.final_sale_product_ids if item != product_id]
        self.touch()

    # ===== QUERIES =====

    def return_rules_enabled(self) -> bool:
        return self.return_rules_state == ReturnRulesState.ENABLED

    def active_return_rules(self) -> list[ReturnRule]:
        return [rule for rule in self.return_rules if rule.active]

    def is_final_sale_product(self, product_id: str) -> bool:
        return product_id in self.final_sale_product_ids

    def count_return_rules(self) -> int:
        return len(self.return_rules)
