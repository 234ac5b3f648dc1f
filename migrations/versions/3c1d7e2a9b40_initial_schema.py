"""initial_schema

Create the member roster schema:
- Pending invitations (one row per normalized email)
- Profiles (keyed by identity platform user id)
- User roles (capability roles per identity)

Revision ID: 3c1d7e2a9b40
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d7e2a9b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE public_role AS ENUM (
                'president',
                'vice_president',
                'executive_board',
                'board_of_directors',
                'state_representative',
                'advisor',
                'alumni'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE app_role AS ENUM ('admin', 'blogger', 'member');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    public_role = postgresql.ENUM(
        "president",
        "vice_president",
        "executive_board",
        "board_of_directors",
        "state_representative",
        "advisor",
        "alumni",
        name="public_role",
        create_type=False,
    )
    app_role = postgresql.ENUM(
        "admin", "blogger", "member", name="app_role", create_type=False
    )

    # ========================================================================
    # PENDING_INVITATIONS table
    # ========================================================================
    op.create_table(
        "pending_invitations",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(320), nullable=False),  # Normalized
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("public_role", public_role, nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("organization", sa.String(255), nullable=True),
        sa.Column("current_projects", sa.Text(), nullable=True),
        sa.Column("duties_and_responsibilities", sa.Text(), nullable=True),
        sa.Column("biography", sa.Text(), nullable=True),
        sa.Column("linkedin", sa.Text(), nullable=True),
        sa.Column("invited_by", sa.UUID(), nullable=False),
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
        sa.UniqueConstraint("email", name="uq_pending_invitations_email"),
    )

    # ========================================================================
    # PROFILES table (id = identity platform user id)
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("public_role", public_role, nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("organization", sa.String(255), nullable=True),
        sa.Column("current_projects", sa.Text(), nullable=True),
        sa.Column("duties_and_responsibilities", sa.Text(), nullable=True),
        sa.Column("biography", sa.Text(), nullable=True),
        sa.Column("linkedin", sa.Text(), nullable=True),
        sa.Column(
            "contact_visibility", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column("profile_photo_url", sa.Text(), nullable=True),
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
    op.create_index("idx_profiles_full_name", "profiles", ["full_name"])
    op.create_index("idx_profiles_email", "profiles", ["email"])

    # ========================================================================
    # USER_ROLES table
    # ========================================================================
    op.create_table(
        "user_roles",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("role", app_role, nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )
    op.create_index("idx_user_roles_user_id", "user_roles", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("user_roles")
    op.drop_table("profiles")
    op.drop_table("pending_invitations")

    op.execute("DROP TYPE IF EXISTS app_role")
    op.execute("DROP TYPE IF EXISTS public_role")
