"""Create store_configurations table

Revision ID: 001_store_configurations
Revises:
Create Date: 2026-10-17

One row per (store, configuration section) holding the aggregate
snapshot as JSONB and the optimistic concurrency version.
"""

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision = "001_store_configurations"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the store_configurations table."""
    op.create_table(
        "store_configurations",
        sa.Column("id", sa.String(36), primary_key=True, comment="Aggregate identifier"),
        sa.Column("store_id", sa.String(100), nullable=False, comment="Store that owns the configuration"),
        sa.Column(
            "section",
            sa.String(20),
            nullable=False,
            comment="Configuration section: domains, apps_channels, shipping, policies",
        ),
        sa.Column(
            "payload",
            JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
            comment="Persisted aggregate snapshot",
        ),
        sa.Column(
            "version",
            sa.Integer(),
            nullable=False,
            server_default=sa.text("0"),
            comment="Optimistic concurrency version",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.UniqueConstraint("store_id", "section", name="uq_store_configurations_store_section"),
    )
    op.create_index("idx_store_configurations_store", "store_configurations", ["store_id"])


def downgrade() -> None:
    """Drop the store_configurations table."""
    op.drop_index("idx_store_configurations_store", table_name="store_configurations")
    op.drop_table("store_configurations")
