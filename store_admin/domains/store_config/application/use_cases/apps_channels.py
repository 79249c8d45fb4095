"""
Manage Apps and Channels Use Case

Installed apps, sales channels, development apps and uninstall history.
Sub-entities are addressed by their stable id.
"""

from collections.abc import Mapping
from typing import Any

from store_admin.domains.store_config.application.use_cases.base import ManageConfigurationUseCase, MutationResult
from store_admin.domains.store_config.domain.entities import (
    AppsAndChannelsConfiguration,
    DevelopmentApp,
    InstalledApp,
    SalesChannel,
    UninstalledApp,
)


class ManageAppsAndChannelsUseCase(ManageConfigurationUseCase[AppsAndChannelsConfiguration]):
    """Apps and sales channel mutations of a store."""

    ENTITY_TYPE = AppsAndChannelsConfiguration.ENTITY_TYPE

    # ===== INSTALLED APPS =====

    async def add_installed_app(
        self, store_id: str, data: Mapping[str, Any]
    ) -> MutationResult[AppsAndChannelsConfiguration, InstalledApp]:
        return await self._mutate(store_id, "add_installed_app", lambda c: c.add_installed_app(data))

    async def update_installed_app(
        self, store_id: str, app_id: str, patch: Mapping[str, Any]
    ) -> MutationResult[AppsAndChannelsConfiguration, InstalledApp]:
        return await self._mutate(store_id, "update_installed_app", lambda c: c.update_installed_app(app_id, patch))

    async def remove_installed_app(
        self, store_id: str, app_id: str
    ) -> MutationResult[AppsAndChannelsConfiguration, InstalledApp]:
        return await self._mutate(store_id, "remove_installed_app", lambda c: c.remove_installed_app(app_id))

    async def uninstall_app(
        self, store_id: str, app_id: str, reason: str
    ) -> MutationResult[AppsAndChannelsConfiguration, UninstalledApp]:
        return await self._mutate(store_id, "uninstall_app", lambda c: c.uninstall_app(app_id, reason))

    # ===== SALES CHANNELS =====

    async def add_sales_channel(
        self, store_id: str, data: Mapping[str, Any]
    ) -> MutationResult[AppsAndChannelsConfiguration, SalesChannel]:
        return await self._mutate(store_id, "add_sales_channel", lambda c: c.add_sales_channel(data))

    async def update_sales_channel(
        self, store_id: str, channel_id: str, patch: Mapping[str, Any]
    ) -> MutationResult[AppsAndChannelsConfiguration, SalesChannel]:
        return await self._mutate(
            store_id, "update_sales_channel", lambda c: c.update_sales_channel(channel_id, patch)
        )

    async def remove_sales_channel(
        self, store_id: str, channel_id: str
    ) -> MutationResult[AppsAndChannelsConfiguration, SalesChannel]:
        return await self._mutate(store_id, "remove_sales_channel", lambda c: c.remove_sales_channel(channel_id))

    async def set_sales_channel_active(
        self, store_id: str, channel_id: str, active: bool
    ) -> MutationResult[AppsAndChannelsConfiguration, SalesChannel]:
        return await self._mutate(
            store_id, "set_sales_channel_active", lambda c: c.set_sales_channel_active(channel_id, active)
        )

    # ===== DEVELOPMENT APPS =====

    async def add_development_app(
        self, store_id: str, data: Mapping[str, Any]
    ) -> MutationResult[AppsAndChannelsConfiguration, DevelopmentApp]:
        return await self._mutate(store_id, "add_development_app", lambda c: c.add_development_app(data))

    async def update_development_app(
        self, store_id: str, app_id: str, patch: Mapping[str, Any]
    ) -> MutationResult[AppsAndChannelsConfiguration, DevelopmentApp]:
        return await self._mutate(
            store_id, "update_development_app", lambda c: c.update_development_app(app_id, patch)
        )

    async def remove_development_app(
        self, store_id: str, app_id: str
    ) -> MutationResult[AppsAndChannelsConfiguration, DevelopmentApp]:
        return await self._mutate(store_id, "remove_development_app", lambda c: c.remove_development_app(app_id))

    # ===== UNINSTALLED APPS =====

    async def add_uninstalled_app(
        self, store_id: str, data: Mapping[str, Any]
    ) -> MutationResult[AppsAndChannelsConfiguration, UninstalledApp]:
        return await self._mutate(store_id, "add_uninstalled_app", lambda c: c.add_uninstalled_app(data))

    async def update_uninstalled_app(
        self, store_id: str, app_id: str, patch: Mapping[str, Any]
    ) -> MutationResult[AppsAndChannelsConfiguration, UninstalledApp]:
        return await self._mutate(
            store_id, "update_uninstalled_app", lambda c: c.update_uninstalled_app(app_id, patch)
        )

    async def remove_uninstalled_app(
        self, store_id: str, app_id: str
    ) -> MutationResult[AppsAndChannelsConfiguration, UninstalledApp]:
        return await self._mutate(store_id, "remove_uninstalled_app", lambda c: c.remove_uninstalled_app(app_id))
