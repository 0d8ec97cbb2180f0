"""Create projects and palettes tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `projects` and `palettes` (palettes.project_id → projects.id).
How:   Integer identity keys, store-maintained timestamps, no cascade on delete.

Rollback: downgrade() drops both tables (palettes first).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "palettes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("color1", sa.String(32), nullable=True),
        sa.Column("color2", sa.String(32), nullable=True),
        sa.Column("color3", sa.String(32), nullable=True),
        sa.Column("color4", sa.String(32), nullable=True),
        sa.Column("color5", sa.String(32), nullable=True),
        sa.Column("project_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        # No ON DELETE CASCADE: a project with palettes cannot be deleted
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
    )

    op.create_index("idx_palettes_project_id", "palettes", ["project_id"])


def downgrade() -> None:
    op.drop_index("idx_palettes_project_id", table_name="palettes")
    op.drop_table("palettes")
    op.drop_table("projects")
