"""Create users, planes and plane_parts tables.

Revision ID: 20250301000000
Revises:
Create Date: 2025-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20250301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_name"), "users", ["name"], unique=True)

    op.create_table(
        "planes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tail_number", sa.String(length=50), nullable=False),
        sa.Column("model", sa.String(length=100), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_planes_tail_number"), "planes", ["tail_number"], unique=True)

    op.create_table(
        "plane_parts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("plane_id", sa.Integer(), nullable=False),
        sa.Column("part_name", sa.String(length=255), nullable=False),
        sa.Column("serial_number", sa.String(length=100), nullable=False),
        sa.Column("category", sa.String(length=150), nullable=False),
        sa.Column("usage_hours", sa.Float(), nullable=False, server_default="0"),
        sa.Column("usage_limit_hours", sa.Float(), nullable=False),
        sa.Column(
            "installed_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint("usage_hours >= 0", name="ck_plane_parts_usage_hours_non_negative"),
        sa.ForeignKeyConstraint(["plane_id"], ["planes.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_plane_parts_plane_id"), "plane_parts", ["plane_id"], unique=False)
    op.create_index(
        op.f("ix_plane_parts_serial_number"), "plane_parts", ["serial_number"], unique=True
    )
    op.create_index(op.f("ix_plane_parts_category"), "plane_parts", ["category"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_plane_parts_category"), table_name="plane_parts")
    op.drop_index(op.f("ix_plane_parts_serial_number"), table_name="plane_parts")
    op.drop_index(op.f("ix_plane_parts_plane_id"), table_name="plane_parts")
    op.drop_table("plane_parts")
    op.drop_index(op.f("ix_planes_tail_number"), table_name="planes")
    op.drop_table("planes")
    op.drop_index(op.f("ix_users_name"), table_name="users")
    op.drop_table("users")
