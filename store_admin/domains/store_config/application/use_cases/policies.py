"""
Manage Policies Use Case

Return rules, policy documents, contact information and final-sale products.
"""

from collections.abc import Mapping
from typing import Any

from store_admin.domains.store_config.application.use_cases.base import ManageConfigurationUseCase, MutationResult
from store_admin.domains.store_config.domain.entities import PoliciesConfiguration, ReturnRule

PolicyUpdate = MutationResult[PoliciesConfiguration, None]
RuleResult = MutationResult[PoliciesConfiguration, ReturnRule]


class ManagePoliciesUseCase(ManageConfigurationUseCase[PoliciesConfiguration]):
    """Policy mutations of a store."""

    ENTITY_TYPE = PoliciesConfiguration.ENTITY_TYPE

    async def update(self, store_id: str, patch: Mapping[str, Any]) -> PolicyUpdate:
        """Partial whole-configuration update; every supplied section is validated first."""
        return await self._mutate(store_id, "update_policies", lambda c: c.update(patch))

    async def enable_return_rules(self, store_id: str) -> PolicyUpdate:
        return await self._mutate(store_id, "enable_return_rules", lambda c: c.enable_return_rules())

    async def disable_return_rules(self, store_id: str) -> PolicyUpdate:
        return await self._mutate(store_id, "disable_return_rules", lambda c: c.disable_return_rules())

    async def add_return_rule(self, store_id: str, data: Mapping[str, Any]) -> RuleResult:
        return await self._mutate(store_id, "add_return_rule", lambda c: c.add_return_rule(data))

    async def update_return_rule(self, store_id: str, rule_id: str, patch: Mapping[str, Any]) -> RuleResult:
        return await self._mutate(store_id, "update_return_rule", lambda c: c.update_return_rule(rule_id, patch))

    async def remove_return_rule(self, store_id: str, rule_id: str) -> RuleResult:
        return await self._mutate(store_id, "remove_return_rule", lambda c: c.remove_return_rule(rule_id))

    async def add_final_sale_product(self, store_id: str, product_id: str) -> PolicyUpdate:
        return await self._mutate(
            store_id, "add_final_sale_product", lambda c: c.add_final_sale_product(product_id)
        )

    async def remove_final_sale_product(self, store_id: str, product_id: str) -> PolicyUpdate:
        return await self._mutate(
            store_id, "remove_final_sale_product", lambda c: c.remove_final_sale_product(product_id)
        )
