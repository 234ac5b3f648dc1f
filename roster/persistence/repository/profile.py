"""PostgreSQL implementation of Profile repository."""

from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.error import NotFoundError
from roster.domain.model import MEMBER_DETAIL_FIELDS, Invitation, Profile
from roster.domain.repository import ProfileRepository
from roster.domain.value import Email, IdentityId
from roster.persistence.error import translate_errors
from roster.persistence.mappers import (
    invitation_to_profile_dict,
    profile_to_dict,
    row_to_profile,
)
from roster.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, identity_id: IdentityId) -> Profile | None:
        """Find a profile by its identity ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == identity_id)
        async with translate_errors("profile.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Profile | None:
        """Find the profile registered under an email."""
        stmt = select(profiles_table).where(profiles_table.c.email == email.root)
        async with translate_errors("profile.find_by_email"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def list_all(self) -> list[Profile]:
        """List all profiles ordered by full name."""
        stmt = select(profiles_table).order_by(
            profiles_table.c.full_name.asc(), profiles_table.c.id.asc()
        )
        async with translate_errors("profile.list_all"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_profile(dict(row)) for row in rows]

    async def upsert_from_invitation(
        self, identity_id: IdentityId, invitation: Invitation
    ) -> Profile:
        """Create the profile for an identity from an invitation, or refresh it.

        INSERT ... ON CONFLICT (id) DO UPDATE over the invitation's detail
        columns only.
        """
        stmt = insert(profiles_table).values(
            **invitation_to_profile_dict(identity_id, invitation)
        )
        refreshed = {field: stmt.excluded[field] for field in MEMBER_DETAIL_FIELDS}
        refreshed["updated_at"] = datetime.now()
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.id],
            set_=refreshed,
        ).returning(profiles_table)

        async with translate_errors("profile.upsert_from_invitation"):
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.flush()
        return row_to_profile(dict(row))

    async def save(self, profile: Profile) -> Profile:
        """Update an existing profile.

        Raises:
            NotFoundError: If the profile no longer exists
        """
        values = profile_to_dict(profile)
        del values["id"]
        del values["created_at"]
        stmt = (
            update(profiles_table)
            .where(profiles_table.c.id == profile.id)
            .values(**values)
            .returning(profiles_table)
        )
        async with translate_errors("profile.save"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()
        if not row:
            raise NotFoundError("Profile", str(profile.id))
        return row_to_profile(dict(row))

    async def delete(self, identity_id: IdentityId) -> bool:
        """Delete a profile."""
        stmt = delete(profiles_table).where(profiles_table.c.id == identity_id)
        async with translate_errors("profile.delete"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0
