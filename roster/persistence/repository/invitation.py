"""PostgreSQL implementation of Invitation repository."""

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.model import Invitation
from roster.domain.repository import InvitationRepository
from roster.domain.value import Email
from roster.persistence.error import translate_errors
from roster.persistence.mappers import invitation_to_dict, row_to_invitation
from roster.persistence.tables import pending_invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_email(self, email: Email) -> Invitation | None:
        """Find the pending invitation for an email."""
        stmt = select(pending_invitations_table).where(
            pending_invitations_table.c.email == email.root
        )
        async with translate_errors("invitation.find_by_email"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def exists_for_email(self, email: Email) -> bool:
        """Check if a pending invitation exists for an email.

        Selects the id column only.
        """
        stmt = select(pending_invitations_table.c.id).where(
            pending_invitations_table.c.email == email.root
        )
        async with translate_errors("invitation.exists_for_email"):
            result = await self.session.execute(stmt)
            return result.first() is not None

    async def upsert(self, invitation: Invitation, commit: bool = False) -> Invitation:
        """Insert the invitation or overwrite the row for its email.

        Uses INSERT ... ON CONFLICT (email) DO UPDATE so concurrent writers
        converge on one row. With ``commit`` the row is durable, and its lock
        released, before the method returns.
        """
        values = invitation_to_dict(invitation)
        stmt = insert(pending_invitations_table).values(**values)
        overwrite = {
            key: stmt.excluded[key]
            for key in values
            if key not in ("id", "email", "created_at")
        }
        stmt = stmt.on_conflict_do_update(
            index_elements=[pending_invitations_table.c.email],
            set_=overwrite,
        ).returning(pending_invitations_table)

        async with translate_errors("invitation.upsert"):
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            if commit:
                await self.session.commit()
            else:
                await self.session.flush()
        return row_to_invitation(dict(row))

    async def delete_by_email(self, email: Email, commit: bool = False) -> bool:
        """Delete the invitation for an email.

        Runs inside a SAVEPOINT so a failure here leaves the rest of the
        request's transaction intact.
        """
        stmt = delete(pending_invitations_table).where(
            pending_invitations_table.c.email == email.root
        )
        async with translate_errors("invitation.delete_by_email"):
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
            if commit:
                await self.session.commit()
        return result.rowcount > 0
