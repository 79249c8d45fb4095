"""
Configuration Module

Application configuration settings.
"""

from store_admin.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
