"""
StoreConfigurationModel - one JSON snapshot per (store, section).

Each configuration aggregate is persisted whole: the payload column holds
the aggregate's persisted shape, and the version column backs optimistic
concurrency on save.
"""

from enum import Enum

from sqlalchemy import JSON, Column, Index, Integer, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB

from store_admin.models.db.base import Base, TimestampMixin


class ConfigurationSection(str, Enum):
    DOMAINS = "domains"
    APPS_CHANNELS = "apps_channels"
    SHIPPING = "shipping"
    POLICIES = "policies"


class StoreConfigurationModel(Base, TimestampMixin):
    """
    Persisted configuration aggregate.

    Attributes:
        id: Aggregate identifier
        store_id: Owning store
        section: Which configuration aggregate the payload holds
        payload: Aggregate snapshot (JSONB on PostgreSQL)
        version: Optimistic concurrency counter
    """

    __tablename__ = "store_configurations"

    id = Column(String(36), primary_key=True, comment="Aggregate identifier")

    store_id = Column(String(100), nullable=False, comment="Store that owns the configuration")

    section = Column(
        String(20),
        nullable=False,
        comment="Configuration section: domains, apps_channels, shipping, policies",
    )

    payload = Column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        default=dict,
        comment="Persisted aggregate snapshot",
    )

    version = Column(Integer, nullable=False, default=0, comment="Optimistic concurrency version")

    __table_args__ = (
        UniqueConstraint("store_id", "section", name="uq_store_configurations_store_section"),
        Index("idx_store_configurations_store", "store_id"),
    )

    def __repr__(self) -> str:
        return f"<StoreConfigurationModel(store_id='{self.store_id}', section='{self.section}', version={self.version})>"
