"""initial_schema

Create the schema for daily content voting:
- Users (portal accounts, read-only here)
- Categories (movie / series / both)
- Suggestions (pending -> approved | rejected)
- Suggestion votes (one per user per suggestion)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-18 10:12:04.512331

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13; older servers need pgcrypto
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="guest"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="users_username_key"),
        sa.CheckConstraint("role IN ('guest', 'admin')", name="user_role_valid"),
    )

    # ========================================================================
    # CATEGORIES table
    # ========================================================================
    op.create_table(
        "categories",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "type IN ('movie', 'series', 'both')", name="category_type_valid"
        ),
    )

    # ========================================================================
    # SUGGESTIONS table
    # ========================================================================
    op.create_table(
        "suggestions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("category_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("resolved_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("votes >= 0", name="suggestion_votes_non_negative"),
        sa.CheckConstraint(
            "type IN ('movie', 'series')", name="suggestion_type_valid"
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="suggestion_status_valid",
        ),
        sa.CheckConstraint(
            "(status = 'pending') = (resolved_at IS NULL)",
            name="suggestion_resolved_at_matches_status",
        ),
    )
    # Today's pending list and the per-user daily count
    op.create_index(
        "idx_suggestions_status_created_at", "suggestions", ["status", "created_at"]
    )
    op.create_index(
        "idx_suggestions_user_created_at", "suggestions", ["user_id", "created_at"]
    )

    # ========================================================================
    # SUGGESTION_VOTES table
    # ========================================================================
    op.create_table(
        "suggestion_votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("suggestion_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["suggestion_id"], ["suggestions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "suggestion_id", name="unique_suggestion_vote"),
    )
    op.create_index(
        "idx_suggestion_votes_suggestion_id", "suggestion_votes", ["suggestion_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_index("idx_suggestion_votes_suggestion_id", table_name="suggestion_votes")
    op.drop_table("suggestion_votes")
    op.drop_index("idx_suggestions_user_created_at", table_name="suggestions")
    op.drop_index("idx_suggestions_status_created_at", table_name="suggestions")
    op.drop_table("suggestions")
    op.drop_table("categories")
    op.drop_table("users")
