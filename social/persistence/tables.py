"""SQLAlchemy table definitions.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, ForeignKey, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (profile embedded)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(20), nullable=False, unique=True),
    Column("password", String(20), nullable=False),
    Column("headline", String(100), nullable=True),
    Column("bio", Text, nullable=True),
    Column("contacts", JSONB, nullable=False, server_default="[]"),
    # Both directions of the like relation, kept in insertion order
    Column("liked", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column("liked_by", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username, unique=True)

# ============================================================================
# REFRESH TOKEN LEDGERS TABLE
# ============================================================================
refresh_token_ledgers_table = Table(
    "refresh_token_ledgers",
    metadata,
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "token_ids", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"
    ),
)
