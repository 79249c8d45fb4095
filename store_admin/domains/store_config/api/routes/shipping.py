"""
Shipping API Routes

FastAPI router for the shipping and delivery configuration of a store.
Delivery methods are addressed by their type, everything else by id.
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from store_admin.domains.store_config.api.dependencies import (
    get_create_shipping_use_case,
    get_delete_shipping_use_case,
    get_get_shipping_use_case,
    get_manage_shipping_use_case,
)
from store_admin.domains.store_config.api.schemas import (
    ActiveRequest,
    DeliveryMethodRequest,
    DeliveryMethodUpdateRequest,
    DocumentationTemplateRequest,
    MutationResponse,
    PackagingRequest,
    PackagingUpdateRequest,
    ShippingConfigurationRequest,
    ShippingProfileRequest,
    ShippingProfileUpdateRequest,
    TransportProviderRequest,
    TransportProviderUpdateRequest,
)
from store_admin.domains.store_config.application.mappers import (
    DELIVERY_METHOD_FIELDS,
    DOCUMENTATION_TEMPLATE_FIELDS,
    PACKAGING_FIELDS,
    SHIPPING_PROFILE_FIELDS,
    TRANSPORT_PROVIDER_FIELDS,
    mutation_response,
    record_response,
    shipping_configuration_input,
    shipping_configuration_response,
    to_internal,
)
from store_admin.domains.store_config.application.use_cases import (
    CreateConfigurationUseCase,
    DeleteConfigurationUseCase,
    GetConfigurationUseCase,
    ManageShippingUseCase,
)
from store_admin.domains.store_config.domain.entities import ShippingConfiguration
from store_admin.domains.store_config.domain.value_objects import DeliveryType

router = APIRouter(prefix="/stores/{store_id}", tags=["Shipping"])

GetShipping = GetConfigurationUseCase[ShippingConfiguration]


# ============================================================================
# Configuration
# ============================================================================


@router.post("/shipping-configuration", status_code=status.HTTP_201_CREATED)
async def create_shipping_configuration(
    store_id: str,
    request: ShippingConfigurationRequest,
    use_case: CreateConfigurationUseCase[ShippingConfiguration] = Depends(get_create_shipping_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id, shipping_configuration_input(request))
    return shipping_configuration_response(configuration)


@router.get("/shipping-configuration")
async def get_shipping_configuration(
    store_id: str,
    use_case: GetShipping = Depends(get_get_shipping_use_case),
) -> dict[str, Any]:
    return shipping_configuration_response(await use_case.execute(store_id))


@router.delete("/shipping-configuration", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shipping_configuration(
    store_id: str,
    use_case: DeleteConfigurationUseCase[ShippingConfiguration] = Depends(get_delete_shipping_use_case),
) -> None:
    await use_case.execute(store_id)


# ============================================================================
# Shipping profiles
# ============================================================================


@router.get("/shipping-profiles")
async def list_shipping_profiles(
    store_id: str,
    use_case: GetShipping = Depends(get_get_shipping_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return {
        "shipping_profiles": [
            record_response(profile, SHIPPING_PROFILE_FIELDS) for profile in configuration.shipping_profiles
        ],
        "total": configuration.count_shipping_profiles(),
    }


@router.post("/shipping-profiles", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_shipping_profile(
    store_id: str,
    request: ShippingProfileRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.add_shipping_profile(store_id, to_internal(request, SHIPPING_PROFILE_FIELDS))
    return mutation_response(outcome, shipping_configuration_response, SHIPPING_PROFILE_FIELDS)


@router.get("/shipping-profiles/{profile_id}")
async def get_shipping_profile(
    store_id: str,
    profile_id: str,
    use_case: GetShipping = Depends(get_get_shipping_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return record_response(configuration.get_shipping_profile(profile_id), SHIPPING_PROFILE_FIELDS)


@router.patch("/shipping-profiles/{profile_id}", response_model=MutationResponse)
async def update_shipping_profile(
    store_id: str,
    profile_id: str,
    request: ShippingProfileUpdateRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.update_shipping_profile(
        store_id, profile_id, to_internal(request, SHIPPING_PROFILE_FIELDS)
    )
    return mutation_response(outcome, shipping_configuration_response, SHIPPING_PROFILE_FIELDS)


@router.delete("/shipping-profiles/{profile_id}", response_model=MutationResponse)
async def remove_shipping_profile(
    store_id: str,
    profile_id: str,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.remove_shipping_profile(store_id, profile_id)
    return mutation_response(outcome, shipping_configuration_response, SHIPPING_PROFILE_FIELDS)


# ============================================================================
# Delivery methods
# ============================================================================


@router.get("/delivery-methods")
async def list_delivery_methods(
    store_id: str,
    active_only: bool = False,
    use_case: GetShipping = Depends(get_get_shipping_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    methods = configuration.active_delivery_methods() if active_only else configuration.delivery_methods
    return {
        "delivery_methods": [record_response(method, DELIVERY_METHOD_FIELDS) for method in methods],
        "total": len(methods),
    }


@router.post("/delivery-methods", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_delivery_method(
    store_id: str,
    request: DeliveryMethodRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.add_delivery_method(store_id, to_internal(request, DELIVERY_METHOD_FIELDS))
    return mutation_response(outcome, shipping_configuration_response, DELIVERY_METHOD_FIELDS)


@router.get("/delivery-methods/{delivery_type}")
async def get_delivery_method(
    store_id: str,
    delivery_type: DeliveryType,
    use_case: GetShipping = Depends(get_get_shipping_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return record_response(configuration.get_delivery_method(delivery_type), DELIVERY_METHOD_FIELDS)


@router.patch("/delivery-methods/{delivery_type}", response_model=MutationResponse)
async def update_delivery_method(
    store_id: str,
    delivery_type: DeliveryType,
    request: DeliveryMethodUpdateRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.update_delivery_method(
        store_id, delivery_type, to_internal(request, DELIVERY_METHOD_FIELDS)
    )
    return mutation_response(outcome, shipping_configuration_response, DELIVERY_METHOD_FIELDS)


@router.put("/delivery-methods/{delivery_type}/active", response_model=MutationResponse)
async def toggle_delivery_method(
    store_id: str,
    delivery_type: DeliveryType,
    request: ActiveRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    """Turn a delivery method on or off; the last active method cannot be turned off."""
    outcome = await use_case.toggle_delivery_method(store_id, delivery_type, request.active)
    return mutation_response(outcome, shipping_configuration_response, DELIVERY_METHOD_FIELDS)


@router.delete("/delivery-methods/{delivery_type}", response_model=MutationResponse)
async def remove_delivery_method(
    store_id: str,
    delivery_type: DeliveryType,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.remove_delivery_method(store_id, delivery_type)
    return mutation_response(outcome, shipping_configuration_response, DELIVERY_METHOD_FIELDS)


# ============================================================================
# Packagings
# ============================================================================


@router.get("/packagings")
async def list_packagings(
    store_id: str,
    use_case: GetShipping = Depends(get_get_shipping_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return {
        "packagings": [record_response(packaging, PACKAGING_FIELDS) for packaging in configuration.packagings],
        "total": len(configuration.packagings),
    }


@router.get("/packagings/default")
async def get_default_packaging(
    store_id: str,
    use_case: GetShipping = Depends(get_get_shipping_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    default = configuration.default_packaging()
    return {"packaging": record_response(default, PACKAGING_FIELDS) if default else None}


@router.post("/packagings", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_packaging(
    store_id: str,
    request: PackagingRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.add_packaging(store_id, to_internal(request, PACKAGING_FIELDS))
    return mutation_response(outcome, shipping_configuration_response, PACKAGING_FIELDS)


@router.get("/packagings/{packaging_id}")
async def get_packaging(
    store_id: str,
    packaging_id: str,
    use_case: GetShipping = Depends(get_get_shipping_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return record_response(configuration.get_packaging(packaging_id), PACKAGING_FIELDS)


@router.patch("/packagings/{packaging_id}", response_model=MutationResponse)
async def update_packaging(
    store_id: str,
    packaging_id: str,
    request: PackagingUpdateRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.update_packaging(store_id, packaging_id, to_internal(request, PACKAGING_FIELDS))
    return mutation_response(outcome, shipping_configuration_response, PACKAGING_FIELDS)


@router.put("/packagings/{packaging_id}/default", response_model=MutationResponse)
async def set_default_packaging(
    store_id: str,
    packaging_id: str,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    """Flag a packaging as default; any previous default is cleared in the same save."""
    outcome = await use_case.set_default_packaging(store_id, packaging_id)
    return mutation_response(outcome, shipping_configuration_response, PACKAGING_FIELDS)


@router.delete("/packagings/{packaging_id}", response_model=MutationResponse)
async def remove_packaging(
    store_id: str,
    packaging_id: str,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.remove_packaging(store_id, packaging_id)
    return mutation_response(outcome, shipping_configuration_response, PACKAGING_FIELDS)


# ============================================================================
# Transport providers
# ============================================================================


@router.get("/transport-providers")
async def list_transport_providers(
    store_id: str,
    active_only: bool = False,
    use_case: GetShipping = Depends(get_get_shipping_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    providers = (
        configuration.active_transport_providers() if active_only else configuration.transport_providers
    )
    return {
        "transport_providers": [record_response(p, TRANSPORT_PROVIDER_FIELDS) for p in providers],
        "total": len(providers),
    }


@router.post("/transport-providers", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_transport_provider(
    store_id: str,
    request: TransportProviderRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.add_transport_provider(store_id, to_internal(request, TRANSPORT_PROVIDER_FIELDS))
    return mutation_response(outcome, shipping_configuration_response, TRANSPORT_PROVIDER_FIELDS)


@router.get("/transport-providers/{provider_id}")
async def get_transport_provider(
    store_id: str,
    provider_id: str,
    use_case: GetShipping = Depends(get_get_shipping_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return record_response(configuration.get_transport_provider(provider_id), TRANSPORT_PROVIDER_FIELDS)


@router.patch("/transport-providers/{provider_id}", response_model=MutationResponse)
async def update_transport_provider(
    store_id: str,
    provider_id: str,
    request: TransportProviderUpdateRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.update_transport_provider(
        store_id, provider_id, to_internal(request, TRANSPORT_PROVIDER_FIELDS)
    )
    return mutation_response(outcome, shipping_configuration_response, TRANSPORT_PROVIDER_FIELDS)


@router.put("/transport-providers/{provider_id}/active", response_model=MutationResponse)
async def toggle_transport_provider(
    store_id: str,
    provider_id: str,
    request: ActiveRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.toggle_transport_provider(store_id, provider_id, request.active)
    return mutation_response(outcome, shipping_configuration_response, TRANSPORT_PROVIDER_FIELDS)


@router.delete("/transport-providers/{provider_id}", response_model=MutationResponse)
async def remove_transport_provider(
    store_id: str,
    provider_id: str,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.remove_transport_provider(store_id, provider_id)
    return mutation_response(outcome, shipping_configuration_response, TRANSPORT_PROVIDER_FIELDS)


# ============================================================================
# Documentation templates
# ============================================================================


@router.post("/documentation-templates", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_documentation_template(
    store_id: str,
    request: DocumentationTemplateRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.add_documentation_template(
        store_id, to_internal(request, DOCUMENTATION_TEMPLATE_FIELDS)
    )
    return mutation_response(outcome, shipping_configuration_response, DOCUMENTATION_TEMPLATE_FIELDS)


@router.patch("/documentation-templates/{template_id}", response_model=MutationResponse)
async def update_documentation_template(
    store_id: str,
    template_id: str,
    request: DocumentationTemplateRequest,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.update_documentation_template(
        store_id, template_id, to_internal(request, DOCUMENTATION_TEMPLATE_FIELDS)
    )
    return mutation_response(outcome, shipping_configuration_response, DOCUMENTATION_TEMPLATE_FIELDS)


@router.delete("/documentation-templates/{template_id}", response_model=MutationResponse)
async def remove_documentation_template(
    store_id: str,
    template_id: str,
    use_case: ManageShippingUseCase = Depends(get_manage_shipping_use_case),
):
    outcome = await use_case.remove_documentation_template(store_id, template_id)
    return mutation_response(outcome, shipping_configuration_response, DOCUMENTATION_TEMPLATE_FIELDS)
