"""SQLAlchemy table definitions for the member roster.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ENUM, TIMESTAMP, UUID

from roster.domain.value import PublicRole, Role

# Metadata object for all tables
metadata = MetaData()

PUBLIC_ROLE_VALUES = [r.value for r in PublicRole]
ROLE_VALUES = [r.value for r in Role]

# ============================================================================
# PENDING INVITATIONS TABLE (one row per normalized email)
# ============================================================================
pending_invitations_table = Table(
    "pending_invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(320), nullable=False, unique=True),  # Normalized
    Column("full_name", String(255), nullable=False),
    Column(
        "public_role",
        ENUM(*PUBLIC_ROLE_VALUES, name="public_role", create_type=False),
        nullable=False,
    ),
    Column("phone", String(50), nullable=True),
    Column("state", String(100), nullable=True),
    Column("organization", String(255), nullable=True),
    Column("current_projects", Text, nullable=True),
    Column("duties_and_responsibilities", Text, nullable=True),
    Column("biography", Text, nullable=True),
    Column("linkedin", Text, nullable=True),
    Column("invited_by", UUID, nullable=False),  # Identity of the inviting admin
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PROFILES TABLE (id is the identity platform's user id)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(320), nullable=False),
    Column("full_name", String(255), nullable=False),
    Column(
        "public_role",
        ENUM(*PUBLIC_ROLE_VALUES, name="public_role", create_type=False),
        nullable=False,
    ),
    Column("phone", String(50), nullable=True),
    Column("state", String(100), nullable=True),
    Column("organization", String(255), nullable=True),
    Column("current_projects", Text, nullable=True),
    Column("duties_and_responsibilities", Text, nullable=True),
    Column("biography", Text, nullable=True),
    Column("linkedin", Text, nullable=True),
    Column("contact_visibility", Boolean, nullable=False, server_default="true"),
    Column("profile_photo_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_profiles_full_name", profiles_table.c.full_name)
Index("idx_profiles_email", profiles_table.c.email)

# ============================================================================
# USER ROLES TABLE (capability roles, unique per identity and role)
# ============================================================================
user_roles_table = Table(
    "user_roles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, nullable=False),
    Column(
        "role",
        ENUM(*ROLE_VALUES, name="app_role", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
)

Index("idx_user_roles_user_id", user_roles_table.c.user_id)
