"""
Domains API Routes

FastAPI router for the domains configuration of a store.
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from store_admin.domains.store_config.api.dependencies import (
    get_create_domains_use_case,
    get_delete_domains_use_case,
    get_get_domains_use_case,
    get_manage_domains_use_case,
)
from store_admin.domains.store_config.api.schemas import (
    DomainHistoryRequest,
    DomainRequest,
    DomainsConfigurationRequest,
    DomainUpdateRequest,
    GlobalRedirectionRequest,
    MutationResponse,
    PrincipalDomainRequest,
)
from store_admin.domains.store_config.application.mappers import (
    DOMAIN_FIELDS,
    domains_configuration_input,
    domains_configuration_response,
    mutation_response,
    record_response,
    to_internal,
)
from store_admin.domains.store_config.application.use_cases import (
    CreateConfigurationUseCase,
    DeleteConfigurationUseCase,
    GetConfigurationUseCase,
    ManageDomainsUseCase,
)
from store_admin.domains.store_config.domain.entities import DomainsConfiguration
from store_admin.domains.store_config.domain.value_objects import ConnectionState, DomainKind

router = APIRouter(prefix="/stores/{store_id}", tags=["Domains"])

GetDomains = GetConfigurationUseCase[DomainsConfiguration]


# ============================================================================
# Configuration
# ============================================================================


@router.post("/domains-configuration", status_code=status.HTTP_201_CREATED)
async def create_domains_configuration(
    store_id: str,
    request: DomainsConfigurationRequest,
    use_case: CreateConfigurationUseCase[DomainsConfiguration] = Depends(get_create_domains_use_case),
) -> dict[str, Any]:
    """Create the domains configuration of a store."""
    configuration = await use_case.execute(store_id, domains_configuration_input(request))
    return domains_configuration_response(configuration)


@router.get("/domains-configuration")
async def get_domains_configuration(
    store_id: str,
    use_case: GetDomains = Depends(get_get_domains_use_case),
) -> dict[str, Any]:
    return domains_configuration_response(await use_case.execute(store_id))


@router.put("/domains-configuration", response_model=MutationResponse)
async def replace_domains(
    store_id: str,
    request: DomainsConfigurationRequest,
    use_case: ManageDomainsUseCase = Depends(get_manage_domains_use_case),
):
    """Replace every domain at once; an omitted global_redirection keeps its current value."""
    data = domains_configuration_input(request)
    outcome = await use_case.replace_domains(
        store_id,
        data.get("domains", []),
        principal_domain=data.get("principal_domain"),
        global_redirection=data.get("global_redirection"),
    )
    return mutation_response(outcome, domains_configuration_response)


@router.delete("/domains-configuration", status_code=status.HTTP_204_NO_CONTENT)
async def delete_domains_configuration(
    store_id: str,
    use_case: DeleteConfigurationUseCase[DomainsConfiguration] = Depends(get_delete_domains_use_case),
) -> None:
    await use_case.execute(store_id)


@router.put("/domains-configuration/principal-domain", response_model=MutationResponse)
async def set_principal_domain(
    store_id: str,
    request: PrincipalDomainRequest,
    use_case: ManageDomainsUseCase = Depends(get_manage_domains_use_case),
):
    """Make a domain the principal one; the previous principal becomes secondary."""
    outcome = await use_case.set_principal_domain(store_id, request.domain_name)
    return mutation_response(outcome, domains_configuration_response, DOMAIN_FIELDS)


@router.put("/domains-configuration/global-redirection", response_model=MutationResponse)
async def toggle_global_redirection(
    store_id: str,
    request: GlobalRedirectionRequest,
    use_case: ManageDomainsUseCase = Depends(get_manage_domains_use_case),
):
    outcome = await use_case.toggle_global_redirection(store_id, request.enabled)
    return mutation_response(outcome, domains_configuration_response)


# ============================================================================
# Domains
# ============================================================================


@router.get("/domains")
async def list_domains(
    store_id: str,
    kind: DomainKind | None = None,
    state: ConnectionState | None = None,
    use_case: GetDomains = Depends(get_get_domains_use_case),
) -> dict[str, Any]:
    """List domains, optionally filtered by kind and connection state."""
    configuration = await use_case.execute(store_id)
    domains = configuration.domains_by_kind(kind) if kind else list(configuration.domains)
    if state:
        domains = [domain for domain in domains if domain.connection_state == state]
    return {
        "domains": [record_response(domain, DOMAIN_FIELDS) for domain in domains],
        "total": len(domains),
    }


@router.post("/domains", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_domain(
    store_id: str,
    request: DomainRequest,
    use_case: ManageDomainsUseCase = Depends(get_manage_domains_use_case),
):
    outcome = await use_case.add_domain(store_id, to_internal(request, DOMAIN_FIELDS))
    return mutation_response(outcome, domains_configuration_response, DOMAIN_FIELDS)


@router.get("/domains/{domain_name}")
async def get_domain(
    store_id: str,
    domain_name: str,
    use_case: GetDomains = Depends(get_get_domains_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return record_response(configuration.get_domain(domain_name), DOMAIN_FIELDS)


@router.get("/domains/{domain_name}/connected")
async def is_domain_connected(
    store_id: str,
    domain_name: str,
    use_case: GetDomains = Depends(get_get_domains_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return {"domain_name": domain_name, "connected": configuration.is_domain_connected(domain_name)}


@router.patch("/domains/{domain_name}", response_model=MutationResponse)
async def update_domain(
    store_id: str,
    domain_name: str,
    request: DomainUpdateRequest,
    use_case: ManageDomainsUseCase = Depends(get_manage_domains_use_case),
):
    outcome = await use_case.update_domain(store_id, domain_name, to_internal(request, DOMAIN_FIELDS))
    return mutation_response(outcome, domains_configuration_response, DOMAIN_FIELDS)


@router.delete("/domains/{domain_name}", response_model=MutationResponse)
async def remove_domain(
    store_id: str,
    domain_name: str,
    use_case: ManageDomainsUseCase = Depends(get_manage_domains_use_case),
):
    """Remove a domain. The principal cannot go while global redirection is on."""
    outcome = await use_case.remove_domain(store_id, domain_name)
    return mutation_response(outcome, domains_configuration_response, DOMAIN_FIELDS)


@router.post("/domains/{domain_name}/history", response_model=MutationResponse)
async def add_domain_history(
    store_id: str,
    domain_name: str,
    request: DomainHistoryRequest,
    use_case: ManageDomainsUseCase = Depends(get_manage_domains_use_case),
):
    outcome = await use_case.add_domain_history(
        store_id, domain_name, request.change_type, request.responsible, request.details
    )
    return mutation_response(outcome, domains_configuration_response, DOMAIN_FIELDS)
