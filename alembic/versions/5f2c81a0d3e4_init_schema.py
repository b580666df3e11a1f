"""init_schema

Revision ID: 5f2c81a0d3e4
Revises:
Create Date: 2026-10-19 10:02:11.482190

"""
from alembic import op
import sqlalchemy as sa



revision = '5f2c81a0d3e4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "category",
        sa.Column("category_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user.user_id"]),
        sa.PrimaryKeyConstraint("category_id"),
    )
    op.create_index("ix_category_user_id", "category", ["user_id"], unique=False)

    op.create_table(
        "task",
        sa.Column("task_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False),
        sa.Column("priority", sa.String(), nullable=False),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("category_id", sa.Uuid(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user.user_id"]),
        sa.ForeignKeyConstraint(["category_id"], ["category.category_id"]),
        sa.PrimaryKeyConstraint("task_id"),
    )
    op.create_index("ix_task_user_id", "task", ["user_id"], unique=False)
    op.create_index("ix_task_category_id", "task", ["category_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_task_category_id", table_name="task")
    op.drop_index("ix_task_user_id", table_name="task")
    op.drop_table("task")

    op.drop_index("ix_category_user_id", table_name="category")
    op.drop_table("category")

    op.drop_index("ix_user_email", table_name="user")
    op.drop_table("user")
