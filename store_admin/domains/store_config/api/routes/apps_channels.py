"""
Apps and Sales Channels API Routes

FastAPI router for installed apps, sales channels, development apps
and the uninstall history of a store.
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from store_admin.domains.store_config.api.dependencies import (
    get_create_apps_channels_use_case,
    get_delete_apps_channels_use_case,
    get_get_apps_channels_use_case,
    get_manage_apps_channels_use_case,
)
from store_admin.domains.store_config.api.schemas import (
    ActiveRequest,
    AppsChannelsConfigurationRequest,
    DevelopmentAppRequest,
    DevelopmentAppUpdateRequest,
    InstalledAppRequest,
    InstalledAppUpdateRequest,
    MutationResponse,
    SalesChannelRequest,
    SalesChannelUpdateRequest,
    UninstallAppRequest,
    UninstalledAppRequest,
    UninstalledAppUpdateRequest,
)
from store_admin.domains.store_config.application.mappers import (
    DEVELOPMENT_APP_FIELDS,
    INSTALLED_APP_FIELDS,
    SALES_CHANNEL_FIELDS,
    UNINSTALLED_APP_FIELDS,
    apps_channels_configuration_input,
    apps_channels_configuration_response,
    mutation_response,
    record_response,
    to_internal,
)
from store_admin.domains.store_config.application.use_cases import (
    CreateConfigurationUseCase,
    DeleteConfigurationUseCase,
    GetConfigurationUseCase,
    ManageAppsAndChannelsUseCase,
)
from store_admin.domains.store_config.domain.entities import AppsAndChannelsConfiguration
from store_admin.domains.store_config.domain.value_objects import (
    AppKind,
    ChannelKind,
    DevelopmentAppState,
    ReviewState,
)

router = APIRouter(prefix="/stores/{store_id}", tags=["Apps and Sales Channels"])

GetAppsChannels = GetConfigurationUseCase[AppsAndChannelsConfiguration]
Manage = ManageAppsAndChannelsUseCase


# ============================================================================
# Configuration
# ============================================================================


@router.post("/apps-channels-configuration", status_code=status.HTTP_201_CREATED)
async def create_apps_channels_configuration(
    store_id: str,
    request: AppsChannelsConfigurationRequest,
    use_case: CreateConfigurationUseCase[AppsAndChannelsConfiguration] = Depends(get_create_apps_channels_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id, apps_channels_configuration_input(request))
    return apps_channels_configuration_response(configuration)


@router.get("/apps-channels-configuration")
async def get_apps_channels_configuration(
    store_id: str,
    use_case: GetAppsChannels = Depends(get_get_apps_channels_use_case),
) -> dict[str, Any]:
    return apps_channels_configuration_response(await use_case.execute(store_id))


@router.delete("/apps-channels-configuration", status_code=status.HTTP_204_NO_CONTENT)
async def delete_apps_channels_configuration(
    store_id: str,
    use_case: DeleteConfigurationUseCase[AppsAndChannelsConfiguration] = Depends(get_delete_apps_channels_use_case),
) -> None:
    await use_case.execute(store_id)


# ============================================================================
# Installed apps
# ============================================================================


@router.get("/installed-apps")
async def list_installed_apps(
    store_id: str,
    kind: AppKind | None = None,
    use_case: GetAppsChannels = Depends(get_get_apps_channels_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    apps = configuration.installed_apps_by_kind(kind) if kind else configuration.installed_apps
    return {"installed_apps": [record_response(app, INSTALLED_APP_FIELDS) for app in apps], "total": len(apps)}


@router.post("/installed-apps", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_installed_app(
    store_id: str,
    request: InstalledAppRequest,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.add_installed_app(store_id, to_internal(request, INSTALLED_APP_FIELDS))
    return mutation_response(outcome, apps_channels_configuration_response, INSTALLED_APP_FIELDS)


@router.get("/installed-apps/{app_id}")
async def get_installed_app(
    store_id: str,
    app_id: str,
    use_case: GetAppsChannels = Depends(get_get_apps_channels_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return record_response(configuration.get_installed_app(app_id), INSTALLED_APP_FIELDS)


@router.patch("/installed-apps/{app_id}", response_model=MutationResponse)
async def update_installed_app(
    store_id: str,
    app_id: str,
    request: InstalledAppUpdateRequest,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.update_installed_app(store_id, app_id, to_internal(request, INSTALLED_APP_FIELDS))
    return mutation_response(outcome, apps_channels_configuration_response, INSTALLED_APP_FIELDS)


@router.delete("/installed-apps/{app_id}", response_model=MutationResponse)
async def remove_installed_app(
    store_id: str,
    app_id: str,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.remove_installed_app(store_id, app_id)
    return mutation_response(outcome, apps_channels_configuration_response, INSTALLED_APP_FIELDS)


@router.post("/installed-apps/{app_id}/uninstall", response_model=MutationResponse)
async def uninstall_app(
    store_id: str,
    app_id: str,
    request: UninstallAppRequest,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    """Move an installed app to the uninstall history, keeping its data as a snapshot."""
    outcome = await use_case.uninstall_app(store_id, app_id, request.uninstall_reason)
    return mutation_response(outcome, apps_channels_configuration_response, UNINSTALLED_APP_FIELDS)


# ============================================================================
# Sales channels
# ============================================================================


@router.get("/sales-channels")
async def list_sales_channels(
    store_id: str,
    kind: ChannelKind | None = None,
    active_only: bool = False,
    use_case: GetAppsChannels = Depends(get_get_apps_channels_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    channels = configuration.sales_channels_by_kind(kind) if kind else configuration.sales_channels
    if active_only:
        channels = [channel for channel in channels if channel.active]
    return {
        "sales_channels": [record_response(channel, SALES_CHANNEL_FIELDS) for channel in channels],
        "total": len(channels),
    }


@router.post("/sales-channels", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_sales_channel(
    store_id: str,
    request: SalesChannelRequest,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.add_sales_channel(store_id, to_internal(request, SALES_CHANNEL_FIELDS))
    return mutation_response(outcome, apps_channels_configuration_response, SALES_CHANNEL_FIELDS)


@router.get("/sales-channels/{channel_id}")
async def get_sales_channel(
    store_id: str,
    channel_id: str,
    use_case: GetAppsChannels = Depends(get_get_apps_channels_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return record_response(configuration.get_sales_channel(channel_id), SALES_CHANNEL_FIELDS)


@router.patch("/sales-channels/{channel_id}", response_model=MutationResponse)
async def update_sales_channel(
    store_id: str,
    channel_id: str,
    request: SalesChannelUpdateRequest,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.update_sales_channel(store_id, channel_id, to_internal(request, SALES_CHANNEL_FIELDS))
    return mutation_response(outcome, apps_channels_configuration_response, SALES_CHANNEL_FIELDS)


@router.put("/sales-channels/{channel_id}/active", response_model=MutationResponse)
async def set_sales_channel_active(
    store_id: str,
    channel_id: str,
    request: ActiveRequest,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.set_sales_channel_active(store_id, channel_id, request.active)
    return mutation_response(outcome, apps_channels_configuration_response, SALES_CHANNEL_FIELDS)


@router.delete("/sales-channels/{channel_id}", response_model=MutationResponse)
async def remove_sales_channel(
    store_id: str,
    channel_id: str,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.remove_sales_channel(store_id, channel_id)
    return mutation_response(outcome, apps_channels_configuration_response, SALES_CHANNEL_FIELDS)


# ============================================================================
# Development apps
# ============================================================================


@router.get("/development-apps")
async def list_development_apps(
    store_id: str,
    state: DevelopmentAppState | None = None,
    review_state: ReviewState | None = None,
    use_case: GetAppsChannels = Depends(get_get_apps_channels_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    apps = configuration.development_apps_by_state(state) if state else configuration.development_apps
    if review_state:
        apps = [app for app in apps if app.review_state == review_state]
    return {
        "development_apps": [record_response(app, DEVELOPMENT_APP_FIELDS) for app in apps],
        "total": len(apps),
    }


@router.post("/development-apps", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_development_app(
    store_id: str,
    request: DevelopmentAppRequest,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.add_development_app(store_id, to_internal(request, DEVELOPMENT_APP_FIELDS))
    return mutation_response(outcome, apps_channels_configuration_response, DEVELOPMENT_APP_FIELDS)


@router.get("/development-apps/{app_id}")
async def get_development_app(
    store_id: str,
    app_id: str,
    use_case: GetAppsChannels = Depends(get_get_apps_channels_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return record_response(configuration.get_development_app(app_id), DEVELOPMENT_APP_FIELDS)


@router.patch("/development-apps/{app_id}", response_model=MutationResponse)
async def update_development_app(
    store_id: str,
    app_id: str,
    request: DevelopmentAppUpdateRequest,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    """Update a development app; review status and notes can only change here."""
    outcome = await use_case.update_development_app(store_id, app_id, to_internal(request, DEVELOPMENT_APP_FIELDS))
    return mutation_response(outcome, apps_channels_configuration_response, DEVELOPMENT_APP_FIELDS)


@router.delete("/development-apps/{app_id}", response_model=MutationResponse)
async def remove_development_app(
    store_id: str,
    app_id: str,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.remove_development_app(store_id, app_id)
    return mutation_response(outcome, apps_channels_configuration_response, DEVELOPMENT_APP_FIELDS)


# ============================================================================
# Uninstalled apps
# ============================================================================


@router.get("/uninstalled-apps")
async def list_uninstalled_apps(
    store_id: str,
    use_case: GetAppsChannels = Depends(get_get_apps_channels_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    apps = configuration.uninstalled_apps
    return {
        "uninstalled_apps": [record_response(app, UNINSTALLED_APP_FIELDS) for app in apps],
        "total": len(apps),
    }


@router.post("/uninstalled-apps", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def add_uninstalled_app(
    store_id: str,
    request: UninstalledAppRequest,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.add_uninstalled_app(store_id, to_internal(request, UNINSTALLED_APP_FIELDS))
    return mutation_response(outcome, apps_channels_configuration_response, UNINSTALLED_APP_FIELDS)


@router.get("/uninstalled-apps/{app_id}")
async def get_uninstalled_app(
    store_id: str,
    app_id: str,
    use_case: GetAppsChannels = Depends(get_get_apps_channels_use_case),
) -> dict[str, Any]:
    configuration = await use_case.execute(store_id)
    return record_response(configuration.get_uninstalled_app(app_id), UNINSTALLED_APP_FIELDS)


@router.patch("/uninstalled-apps/{app_id}", response_model=MutationResponse)
async def update_uninstalled_app(
    store_id: str,
    app_id: str,
    request: UninstalledAppUpdateRequest,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.update_uninstalled_app(store_id, app_id, to_internal(request, UNINSTALLED_APP_FIELDS))
    return mutation_response(outcome, apps_channels_configuration_response, UNINSTALLED_APP_FIELDS)


@router.delete("/uninstalled-apps/{app_id}", response_model=MutationResponse)
async def remove_uninstalled_app(
    store_id: str,
    app_id: str,
    use_case: Manage = Depends(get_manage_apps_channels_use_case),
):
    outcome = await use_case.remove_uninstalled_app(store_id, app_id)
    return mutation_response(outcome, apps_channels_configuration_response, UNINSTALLED_APP_FIELDS)
