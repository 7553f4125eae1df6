"""initial closet schema

Revision ID: 0001_init
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "clothing_item",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("colors", sa.JSON(), nullable=True),
        sa.Column("seasons", sa.JSON(), nullable=True),
        sa.Column("occasions", sa.JSON(), nullable=True),
        sa.Column("wear_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_worn", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_clothing_item_user_id", "clothing_item", ["user_id"])

    op.create_table(
        "outfit",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("occasion", sa.String(length=32), nullable=True),
        sa.Column("weather", sa.String(length=32), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_outfit_user_id", "outfit", ["user_id"])

    op.create_table(
        "outfit_item",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("outfit_id", sa.Integer(), sa.ForeignKey("outfit.id", ondelete="CASCADE"), nullable=False),
        sa.Column("item_id", sa.Integer(), sa.ForeignKey("clothing_item.id", ondelete="CASCADE"), nullable=False),
        sa.Column("slot", sa.String(length=32), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_outfit_item_outfit_id", "outfit_item", ["outfit_id"])

    op.create_table(
        "outfit_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("outfit_id", sa.Integer(), sa.ForeignKey("outfit.id", ondelete="SET NULL"), nullable=True),
        sa.Column("occasion", sa.String(length=32), nullable=True),
        sa.Column("weather", sa.String(length=32), nullable=True),
        sa.Column("worn_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_outfit_history_user_id", "outfit_history", ["user_id"])
    op.create_index("ix_outfit_history_worn_at", "outfit_history", ["worn_at"])

    op.create_table(
        "outfit_history_item",
        sa.Column("history_id", sa.Integer(), sa.ForeignKey("outfit_history.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("item_id", sa.Integer(), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )


def downgrade() -> None:
    op.drop_table("outfit_history_item")
    op.drop_index("ix_outfit_history_worn_at", table_name="outfit_history")
    op.drop_index("ix_outfit_history_user_id", table_name="outfit_history")
    op.drop_table("outfit_history")
    op.drop_index("ix_outfit_item_outfit_id", table_name="outfit_item")
    op.drop_table("outfit_item")
    op.drop_index("ix_outfit_user_id", table_name="outfit")
    op.drop_table("outfit")
    op.drop_index("ix_clothing_item_user_id", table_name="clothing_item")
    op.drop_table("clothing_item")
