"""initial_schema

Create the schema for the social backend:
- Users (credentials plus embedded profile and both like directions)
- Refresh token ledgers (currently valid refresh token ids per user)

Revision ID: 3c2f9a61d0e4
Revises:
Create Date: 2026-10-19 10:12:04.518233

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c2f9a61d0e4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(20), nullable=False),
        sa.Column("password", sa.String(20), nullable=False),
        sa.Column("headline", sa.String(100), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column(
            "contacts",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "liked",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "liked_by",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_username", "users", ["username"], unique=True)
    # GIN indexes back the "contains" lookups used when a user is deleted
    op.create_index(
        "idx_users_liked", "users", ["liked"], postgresql_using="gin"
    )
    op.create_index(
        "idx_users_liked_by", "users", ["liked_by"], postgresql_using="gin"
    )

    # ========================================================================
    # REFRESH_TOKEN_LEDGERS table
    # ========================================================================
    op.create_table(
        "refresh_token_ledgers",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "token_ids",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("refresh_token_ledgers")
    op.drop_index("idx_users_liked_by", table_name="users")
    op.drop_index("idx_users_liked", table_name="users")
    op.drop_index("idx_users_username", table_name="users")
    op.drop_table("users")
