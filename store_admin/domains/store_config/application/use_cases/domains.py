"""
Manage Domains Use Case

Every domain operation as load -> mutate -> save.
"""

from collections.abc import Mapping
from typing import Any

from store_admin.domains.store_config.application.use_cases.base import ManageConfigurationUseCase, MutationResult
from store_admin.domains.store_config.domain.entities import Domain, DomainsConfiguration

DomainsResult = MutationResult[DomainsConfiguration, Domain]


class ManageDomainsUseCase(ManageConfigurationUseCase[DomainsConfiguration]):
    """Domain mutations of a store. Domains are addressed by name (case-insensitive)."""

    ENTITY_TYPE = DomainsConfiguration.ENTITY_TYPE

    async def add_domain(self, store_id: str, data: Mapping[str, Any]) -> DomainsResult:
        return await self._mutate(store_id, "add_domain", lambda c: c.add_domain(data))

    async def update_domain(self, store_id: str, name: str, patch: Mapping[str, Any]) -> DomainsResult:
        return await self._mutate(store_id, "update_domain", lambda c: c.update_domain(name, patch))

    async def remove_domain(self, store_id: str, name: str) -> DomainsResult:
        return await self._mutate(store_id, "remove_domain", lambda c: c.remove_domain(name))

    async def set_principal_domain(self, store_id: str, name: str) -> DomainsResult:
        return await self._mutate(store_id, "set_principal_domain", lambda c: c.set_principal_domain(name))

    async def toggle_global_redirection(
        self, store_id: str, enabled: bool
    ) -> MutationResult[DomainsConfiguration, None]:
        return await self._mutate(
            store_id, "toggle_global_redirection", lambda c: c.toggle_global_redirection(enabled)
        )

    async def add_domain_history(
        self,
        store_id: str,
        name: str,
        change_type: str,
        responsible: str,
        details: str | None = None,
    ) -> DomainsResult:
        return await self._mutate(
            store_id,
            "add_domain_history",
            lambda c: c.add_domain_history(name, change_type, responsible, details),
        )

    async def replace_domains(
        self,
        store_id: str,
        domains: list[Mapping[str, Any]],
        principal_domain: str | None = None,
        global_redirection: bool | None = None,
    ) -> MutationResult[DomainsConfiguration, None]:
        """Replace the whole domain collection through full aggregate validation."""
        return await self._mutate(
            store_id,
            "replace_domains",
            lambda c: c.replace_domains(domains, principal_domain, global_redirection),
        )
