"""In-memory role repository for testing."""

from roster.domain.repository import RoleRepository
from roster.domain.value import IdentityId, Role


class InMemoryRoleRepository(RoleRepository):
    """In-memory implementation of RoleRepository for testing."""

    def __init__(self) -> None:
        self._roles: dict[IdentityId, set[Role]] = {}

    async def grant(self, identity_id: IdentityId, role: Role) -> bool:
        """Add a role to an identity."""
        held = self._roles.setdefault(identity_id, set())
        if role in held:
            return False
        held.add(role)
        return True

    async def revoke(self, identity_id: IdentityId, role: Role) -> bool:
        """Remove a role from an identity."""
        held = self._roles.get(identity_id, set())
        if role not in held:
            return False
        held.discard(role)
        return True

    async def revoke_all(self, identity_id: IdentityId) -> None:
        """Remove every role held by an identity."""
        self._roles.pop(identity_id, None)

    async def has_role(self, identity_id: IdentityId, role: Role) -> bool:
        """Check whether an identity holds a role."""
        return role in self._roles.get(identity_id, set())

    async def roles_of(self, identity_id: IdentityId) -> set[Role]:
        """Get all roles held by an identity."""
        return set(self._roles.get(identity_id, set()))
