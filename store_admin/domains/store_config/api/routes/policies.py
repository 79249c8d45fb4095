"""
Policies API Routes

FastAPI router for return rules, policy documents, contact information
and final-sale products of a store.
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from store_admin.domains.store_config.api.dependencies import (
    get_create_policies_use_case,
    get_delete_policies_use_case,
    get_get_policies_use_case,
    get_manage_policies_use_case,
)
from store_admin.domains.store_config.api.schemas import (
    FinalSaleProductRequest,
    MutationResponse,
    PoliciesConfigurationRequest,
    ReturnRuleRequest,
    ReturnRuleUpdateRequest,
)
from store_admin.domains.store_config.application.mappers import (
    RETURN_RULE_FIELDS,
    mutation_response,
    policies_configuration_input,
    policies_configuration_response,
    record_response,
    to_internal,
)
from store_admin.domains.store_config.application.use_cases import (
    CreateConfigurationUseCase,
    DeleteConfigurationUseCase,
    GetConfigurationUseCase,
    ManagePoliciesUseCase,
)
from store_admin.domains.store_config.domain.entities import PoliciesConfiguration

router = APIRouter(prefix="/stores/{store_id}", tags=["Policies"])

GetPolicies = GetConfigurationUseCase[PoliciesConfiguration]


# ============================================================================
# Configuration
# ============================================================================


@router.post("/policies-configuration", status_code=status.HTTP_201_CREATED)
async def create_policies_configuration(
    store_id: str,
    request: PoliciesConfigurationRequest,
    use_case: CreateConfigurationUseCase[PoliciesConfiguration] = Depends(get_create_policies_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id, policies_configuration_input(request))
    return policies_configuration_response(configuration)


@router.get("/policies-configuration")
async def get_policies_configuration(
    store_id: str,
    use_case: GetPolicies = Depends(get_get_policies_use_case),
) -> dict[str, Any]:
    return policies_configuration_response(await use_case.execute(store_id))


@router.patch("/policies-configuration", response_model=MutationResponse)
async def update_policies_configuration(
    store_id: str,
    request: PoliciesConfigurationRequest,
    use_case: ManagePoliciesUseCase = Depends(get_manage_policies_use_case),
):
    """Partial update; a sent return_rules list replaces the current rules."""
    outcome = await use_case.update(store_id, policies_configuration_input(request))
    return mutation_response(outcome, policies_configuration_response)


@router.delete("/policies-configuration", status_code=status.HTTP_204_NO_CONTENT)
async def delete_policies_configuration(
    store_id: str,
    use_case: DeleteConfigurationUseCase[PoliciesConfiguration] = Depends(get_delete_policies_use_case),
) -> None:
    await use_case.execute(store_id)


# ============================================================================
# Return rules
# ============================================================================


@router.post("/return-rules/enable", response_model=MutationResponse)
async def enable_return_rules(
    store_id: str,
    use_case: ManagePoliciesUseCase = Depends(get_manage_policies_use_case),
):
    outcome = await use_case.enable_return_rules(store_id)
    return mutation_response(outcome, policies_configuration_response)


@router.post("/return-rules/disable", response_model=MutationResponse)
async def disable_return_rules(
    store_id: str,
    use_case: ManagePoliciesUseCase = Depends(get_manage_policies_use_case),
):
    outcome = await use_case.disable_return_rules(store_id)
    return mutation_response(outcome, policies_configuration_response)


@router.get("/return-rules")
async def list_return_rules(
    store_id: str,
    active_only: bool = False,
    use_case: GetPolicies = Depends(get_get_policies_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    rules = configuration.active_return_rules() if active_only else configuration.return_rules
    return {
        "enabled": configuration.return_rules_enabled(),
        "return_rules": [record_response(rule, RETURN_RULE_FIELDS) for rule in rules],
        "total": len(rules),
    }


@router.post("/return-rules", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_return_rule(
    store_id: str,
    request: ReturnRuleRequest,
    use_case: ManagePoliciesUseCase = Depends(get_manage_policies_use_case),
):
    outcome = await use_case.add_return_rule(store_id, to_internal(request, RETURN_RULE_FIELDS))
    return mutation_response(outcome, policies_configuration_response, RETURN_RULE_FIELDS)


@router.get("/return-rules/{rule_id}")
async def get_return_rule(
    store_id: str,
    rule_id: str,
    use_case: GetPolicies = Depends(get_get_policies_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return record_response(configuration.get_return_rule(rule_id), RETURN_RULE_FIELDS)


@router.patch("/return-rules/{rule_id}", response_model=MutationResponse)
async def update_return_rule(
    store_id: str,
    rule_id: str,
    request: ReturnRuleUpdateRequest,
    use_case: ManagePoliciesUseCase = Depends(get_manage_policies_use_case),
):
    outcome = await use_case.update_return_rule(store_id, rule_id, to_internal(request, RETURN_RULE_FIELDS))
    return mutation_response(outcome, policies_configuration_response, RETURN_RULE_FIELDS)


@router.delete("/return-rules/{rule_id}", response_model=MutationResponse)
async def remove_return_rule(
    store_id: str,
    rule_id: str,
    use_case: ManagePoliciesUseCase = Depends(get_manage_policies_use_case),
):
    outcome = await use_case.remove_return_rule(store_id, rule_id)
    return mutation_response(outcome, policies_configuration_response, RETURN_RULE_FIELDS)


# ============================================================================
# Final-sale products
# ============================================================================


@router.post("/final-sale-products", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_final_sale_product(
    store_id: str,
    request: FinalSaleProductRequest,
    use_case: ManagePoliciesUseCase = Depends(get_manage_policies_use_case),
):
    outcome = await use_case.add_final_sale_product(store_id, request.product_id)
    return mutation_response(outcome, policies_configuration_response)


@router.get("/final-sale-products/{product_id}")
async def is_final_sale_product(
    store_id: str,
    product_id: str,
    use_case: GetPolicies = Depends(get_get_policies_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return {"product_id": product_id, "final_sale": configuration.is_final_sale_product(product_id)}


@router.delete("/final-sale-products/{product_id}", response_model=MutationResponse)
async def remove_final_sale_product(
    store_id: str,
    product_id: str,
    use_case: ManagePoliciesUseCase = Depends(get_manage_policies_use_case),
):
    outcome = await use_case.remove_final_sale_product(store_id, product_id)
    return mutation_response(outcome, policies_configuration_response)
