"""add categories and user settings

Revision ID: c5d81f2a9e47
Revises: a3c91e5d7b10
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "c5d81f2a9e47"
down_revision = "a3c91e5d7b10"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("workspace_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("color", sa.String(length=7), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["workspace_id"], ["workspaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "user_settings",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("default_project_id", sa.String(), nullable=True),
        sa.Column("default_tag_ids", sa.JSON(), nullable=True),
        sa.Column("default_duration_minutes", sa.Integer(), nullable=False),
        sa.Column("default_start_time", sa.String(length=5), nullable=False),
        sa.Column("theme", sa.Enum("LIGHT", "DARK", "SYSTEM", name="theme"), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    with op.batch_alter_table("time_entries") as batch_op:
        batch_op.add_column(sa.Column("category_id", sa.String(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("time_entries") as batch_op:
        batch_op.drop_column("category_id")
    op.drop_table("user_settings")
    op.drop_table("categories")
