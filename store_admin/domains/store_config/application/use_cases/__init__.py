"""
Store Configuration Use Cases

Application layer use cases for the store configuration domain.
"""

from store_admin.domains.store_config.application.use_cases.apps_channels import ManageAppsAndChannelsUseCase
from store_admin.domains.store_config.application.use_cases.base import (
    ConfigurationUseCase,
    CreateConfigurationUseCase,
    DeleteConfigurationUseCase,
    GetConfigurationUseCase,
    ManageConfigurationUseCase,
    MutationResult,
)
from store_admin.domains.store_config.application.use_cases.domains import ManageDomainsUseCase
from store_admin.domains.store_config.application.use_cases.policies import ManagePoliciesUseCase
from store_admin.domains.store_config.application.use_cases.shipping import ManageShippingUseCase

__all__ = [
    "ConfigurationUseCase",
    "CreateConfigurationUseCase",
    "GetConfigurationUseCase",
    "DeleteConfigurationUseCase",
    "ManageConfigurationUseCase",
    "MutationResult",
    "ManageDomainsUseCase",
    "ManageAppsAndChannelsUseCase",
    "ManageShippingUseCase",
    "ManagePoliciesUseCase",
]
