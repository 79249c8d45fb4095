"""
Database models
"""

from store_admin.models.db.base import Base, TimestampMixin
from store_admin.models.db.store_configuration import ConfigurationSection, StoreConfigurationModel

__all__ = [
    "Base",
    "TimestampMixin",
    "ConfigurationSection",
    "StoreConfigurationModel",
]
