"""shared wheels and moderation

Revision ID: 5f2c8a1d9e03
Revises:
Create Date: 2026-10-19 10:12:41.503218

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5f2c8a1d9e03"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create shared wheel, admin and settings tables."""
    op.create_table(
        "shared_wheels",
        sa.Column("path", sa.String(length=7), nullable=False),
        sa.Column("owner", sa.Text(), nullable=False),
        sa.Column("config", sa.JSON(), nullable=False),
        sa.Column("copyable", sa.Boolean(), nullable=False),
        sa.Column("review_status", sa.String(length=16), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_read", sa.DateTime(timezone=True), nullable=True),
        sa.Column("read_count", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("path"),
    )
    op.create_index("ix_shared_wheels_owner", "shared_wheels", ["owner"])
    op.create_index(
        "ix_shared_wheels_review_queue",
        "shared_wheels",
        ["review_status", "read_count"],
    )
    op.create_table(
        "admins",
        sa.Column("uid", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("total_reviews", sa.Integer(), nullable=False),
        sa.Column("session_reviews", sa.Integer(), nullable=False),
        sa.Column("last_review", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("uid"),
    )
    op.create_table(
        "settings",
        sa.Column("key", sa.Text(), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("key"),
    )


def downgrade() -> None:
    """Drop shared wheel, admin and settings tables."""
    op.drop_table("settings")
    op.drop_table("admins")
    op.drop_index("ix_shared_wheels_review_queue", table_name="shared_wheels")
    op.drop_index("ix_shared_wheels_owner", table_name="shared_wheels")
    op.drop_table("shared_wheels")
