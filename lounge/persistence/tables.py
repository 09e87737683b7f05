"""SQLAlchemy table definitions for Lounge.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the portal, read here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("username", String(255), nullable=False, unique=True),
    Column("display_name", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="guest"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint("role IN ('guest', 'admin')", name="user_role_valid"),
)

# ============================================================================
# CATEGORIES TABLE (owned by the portal, read here)
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(100), nullable=False),
    Column("type", String(20), nullable=False),
    CheckConstraint("type IN ('movie', 'series', 'both')", name="category_type_valid"),
)

# ============================================================================
# SUGGESTIONS TABLE
# ============================================================================
suggestions_table = Table(
    "suggestions",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("title", String(300), nullable=False),
    Column("type", String(20), nullable=False),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("votes", Integer, nullable=False, server_default="0"),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("resolved_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("votes >= 0", name="suggestion_votes_non_negative"),
    CheckConstraint("type IN ('movie', 'series')", name="suggestion_type_valid"),
    CheckConstraint(
        "status IN ('pending', 'approved', 'rejected')", name="suggestion_status_valid"
    ),
    CheckConstraint(
        "(status = 'pending') = (resolved_at IS NULL)",
        name="suggestion_resolved_at_matches_status",
    ),
)

Index(
    "idx_suggestions_status_created_at",
    suggestions_table.c.status,
    suggestions_table.c.created_at,
)
Index(
    "idx_suggestions_user_created_at",
    suggestions_table.c.user_id,
    suggestions_table.c.created_at,
)

# ============================================================================
# SUGGESTION VOTES TABLE
# ============================================================================
suggestion_votes_table = Table(
    "suggestion_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "suggestion_id",
        UUID,
        ForeignKey("suggestions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("user_id", "suggestion_id", name="unique_suggestion_vote"),
)

Index("idx_suggestion_votes_suggestion_id", suggestion_votes_table.c.suggestion_id)
