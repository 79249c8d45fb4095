"""
Store Configuration API Dependencies

FastAPI dependencies wiring repositories and use cases to the request session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.database import get_async_db
from store_admin.domains.store_config.application.ports import (
    IAppsAndChannelsConfigurationRepository,
    IDomainsConfigurationRepository,
    IPoliciesConfigurationRepository,
    IShippingConfigurationRepository,
)
from store_admin.domains.store_config.application.use_cases import (
    CreateConfigurationUseCase,
    DeleteConfigurationUseCase,
    GetConfigurationUseCase,
    ManageAppsAndChannelsUseCase,
    ManageDomainsUseCase,
    ManagePoliciesUseCase,
    ManageShippingUseCase,
)
from store_admin.domains.store_config.domain.entities import (
    AppsAndChannelsConfiguration,
    DomainsConfiguration,
    PoliciesConfiguration,
    ShippingConfiguration,
)
from store_admin.domains.store_config.infrastructure.repositories import (
    SQLAlchemyAppsAndChannelsConfigurationRepository,
    SQLAlchemyDomainsConfigurationRepository,
    SQLAlchemyPoliciesConfigurationRepository,
    SQLAlchemyShippingConfigurationRepository,
)

# ============================================================================
# Repositories
# ============================================================================


def get_domains_repository(db: AsyncSession = Depends(get_async_db)) -> IDomainsConfigurationRepository:
    return SQLAlchemyDomainsConfigurationRepository(db)


def get_apps_channels_repository(db: AsyncSession = Depends(get_async_db)) -> IAppsAndChannelsConfigurationRepository:
    return SQLAlchemyAppsAndChannelsConfigurationRepository(db)


def get_shipping_repository(db: AsyncSession = Depends(get_async_db)) -> IShippingConfigurationRepository:
    return SQLAlchemyShippingConfigurationRepository(db)


def get_policies_repository(db: AsyncSession = Depends(get_async_db)) -> IPoliciesConfigurationRepository:
    return SQLAlchemyPoliciesConfigurationRepository(db)


# ============================================================================
# Domains
# ============================================================================


def get_create_domains_use_case(
    repository: IDomainsConfigurationRepository = Depends(get_domains_repository),
) -> CreateConfigurationUseCase[DomainsConfiguration]:
    return CreateConfigurationUseCase(repository, DomainsConfiguration)


def get_get_domains_use_case(
    repository: IDomainsConfigurationRepository = Depends(get_domains_repository),
) -> GetConfigurationUseCase[DomainsConfiguration]:
    return GetConfigurationUseCase(repository, DomainsConfiguration.ENTITY_TYPE)


def get_delete_domains_use_case(
    repository: IDomainsConfigurationRepository = Depends(get_domains_repository),
) -> DeleteConfigurationUseCase[DomainsConfiguration]:
    return DeleteConfigurationUseCase(repository, DomainsConfiguration.ENTITY_TYPE)


def get_manage_domains_use_case(
    repository: IDomainsConfigurationRepository = Depends(get_domains_repository),
) -> ManageDomainsUseCase:
    return ManageDomainsUseCase(repository)


# ============================================================================
# Apps and sales channels
# ============================================================================


def get_create_apps_channels_use_case(
    repository: IAppsAndChannelsConfigurationRepository = Depends(get_apps_channels_repository),
) -> CreateConfigurationUseCase[AppsAndChannelsConfiguration]:
    return CreateConfigurationUseCase(repository, AppsAndChannelsConfiguration)


def get_get_apps_channels_use_case(
    repository: IAppsAndChannelsConfigurationRepository = Depends(get_apps_channels_repository),
) -> GetConfigurationUseCase[AppsAndChannelsConfiguration]:
    return GetConfigurationUseCase(repository, AppsAndChannelsConfiguration.ENTITY_TYPE)


def get_delete_apps_channels_use_case(
    repository: IAppsAndChannelsConfigurationRepository = Depends(get_apps_channels_repository),
) -> DeleteConfigurationUseCase[AppsAndChannelsConfiguration]:
    return DeleteConfigurationUseCase(repository, AppsAndChannelsConfiguration.ENTITY_TYPE)


def get_manage_apps_channels_use_case(
    repository: IAppsAndChannelsConfigurationRepository = Depends(get_apps_channels_repository),
) -> ManageAppsAndChannelsUseCase:
    return ManageAppsAndChannelsUseCase(repository)


# ============================================================================
# Shipping
# ============================================================================


def get_create_shipping_use_case(
    repository: IShippingConfigurationRepository = Depends(get_shipping_repository),
) -> CreateConfigurationUseCase[ShippingConfiguration]:
    return CreateConfigurationUseCase(repository, ShippingConfiguration)


def get_get_shipping_use_case(
    repository: IShippingConfigurationRepository = Depends(get_shipping_repository),
) -> GetConfigurationUseCase[ShippingConfiguration]:
    return GetConfigurationUseCase(repository, ShippingConfiguration.ENTITY_TYPE)


def get_delete_shipping_use_case(
    repository: IShippingConfigurationRepository = Depends(get_shipping_repository),
) -> DeleteConfigurationUseCase[ShippingConfiguration]:
    return DeleteConfigurationUseCase(repository, ShippingConfiguration.ENTITY_TYPE)


def get_manage_shipping_use_case(
    repository: IShippingConfigurationRepository = Depends(get_shipping_repository),
) -> ManageShippingUseCase:
    return ManageShippingUseCase(repository)


# ============================================================================
# Policies
# ============================================================================


def get_create_policies_use_case(
    repository: IPoliciesConfigurationRepository = Depends(get_policies_repository),
) -> CreateConfigurationUseCase[PoliciesConfiguration]:
    return CreateConfigurationUseCase(repository, PoliciesConfiguration)


def get_get_policies_use_case(
    repository: IPoliciesConfigurationRepository = Depends(get_policies_repository),
) -> GetConfigurationUseCase[PoliciesConfiguration]:
    return GetConfigurationUseCase(repository, PoliciesConfiguration.ENTITY_TYPE)


def get_delete_policies_use_case(
    repository: IPoliciesConfigurationRepository = Depends(get_policies_repository),
) -> DeleteConfigurationUseCase[PoliciesConfiguration]:
    return DeleteConfigurationUseCase(repository, PoliciesConfiguration.ENTITY_TYPE)


def get_manage_policies_use_case(
    repository: IPoliciesConfigurationRepository = Depends(get_policies_repository),
) -> ManagePoliciesUseCase:
    return ManagePoliciesUseCase(repository)
