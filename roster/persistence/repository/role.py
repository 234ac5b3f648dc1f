"""PostgreSQL implementation of Role repository."""

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.repository import RoleRepository
from roster.domain.value import IdentityId, Role
from roster.persistence.error import translate_errors
from roster.persistence.tables import user_roles_table


class PostgresRoleRepository(RoleRepository):
    """PostgreSQL implementation of RoleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def grant(self, identity_id: IdentityId, role: Role) -> bool:
        """Add a role to an identity.

        INSERT ... ON CONFLICT (user_id, role) DO NOTHING; the returned row
        count tells whether the grant was new.
        """
        stmt = (
            insert(user_roles_table)
            .values(user_id=identity_id, role=role.value)
            .on_conflict_do_nothing(
                index_elements=[user_roles_table.c.user_id, user_roles_table.c.role]
            )
        )
        async with translate_errors("role.grant"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0

    async def revoke(self, identity_id: IdentityId, role: Role) -> bool:
        """Remove a role from an identity."""
        stmt = delete(user_roles_table).where(
            and_(
                user_roles_table.c.user_id == identity_id,
                user_roles_table.c.role == role.value,
            )
        )
        async with translate_errors("role.revoke"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0

    async def revoke_all(self, identity_id: IdentityId) -> None:
        """Remove every role held by an identity."""
        stmt = delete(user_roles_table).where(user_roles_table.c.user_id == identity_id)
        async with translate_errors("role.revoke_all"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def has_role(self, identity_id: IdentityId, role: Role) -> bool:
        """Check whether an identity holds a role."""
        stmt = select(user_roles_table.c.id).where(
            and_(
                user_roles_table.c.user_id == identity_id,
                user_roles_table.c.role == role.value,
            )
        )
        async with translate_errors("role.has_role"):
            result = await self.session.execute(stmt)
            return result.first() is not None

    async def roles_of(self, identity_id: IdentityId) -> set[Role]:
        """Get all roles held by an identity."""
        stmt = select(user_roles_table.c.role).where(
            user_roles_table.c.user_id == identity_id
        )
        async with translate_errors("role.roles_of"):
            result = await self.session.execute(stmt)
            return {Role(value) for value in result.scalars().all()}
