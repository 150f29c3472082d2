"""issued paths

Revision ID: b81e4c7a2d56
Revises: 5f2c8a1d9e03
Create Date: 2026-10-19 15:40:07.118204

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "b81e4c7a2d56"
down_revision: Union[str, Sequence[str], None] = "5f2c8a1d9e03"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Reserve every path handed out so far, including live ones."""
    op.create_table(
        "issued_paths",
        sa.Column("path", sa.String(length=7), nullable=False),
        sa.Column("issued_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("path"),
    )
    op.execute(
        "INSERT INTO issued_paths (path, issued_at) "
        "SELECT path, created FROM shared_wheels"
    )


def downgrade() -> None:
    """Drop the issued path registry."""
    op.drop_table("issued_paths")
