"""Directory access control.

Every capability check in the service goes through this module. The
module-level predicates are pure functions of the viewer's id, the viewer's
roles and the target profile; ``AccessService`` looks the roles up and
delegates to them.
"""

import logfire

from roster.domain.error import AuthorizationError
from roster.domain.model import Profile
from roster.domain.value import FieldVisibility, IdentityId, IdentitySession, Role

from .base import Service
from .role_service import RoleService

# Profile fields withheld from viewers with restricted visibility
PRIVATE_CONTACT_FIELDS: frozenset[str] = frozenset({"email", "phone"})


def visible_fields(
    viewer_id: IdentityId, viewer_roles: set[Role], profile: Profile
) -> FieldVisibility:
    """Compute how much of a profile the viewer may see.

    Full for the owner, for admins, and for any viewer when the owner left
    ``contact_visibility`` on. Restricted hides email and phone.
    """
    if viewer_id == profile.id:
        return FieldVisibility.FULL
    if Role.ADMIN in viewer_roles:
        return FieldVisibility.FULL
    if profile.contact_visibility:
        return FieldVisibility.FULL
    return FieldVisibility.RESTRICTED


def can_edit(viewer_id: IdentityId, viewer_roles: set[Role], profile: Profile) -> bool:
    """Owners and admins may edit a profile."""
    return viewer_id == profile.id or Role.ADMIN in viewer_roles


def can_change_public_role(viewer_roles: set[Role]) -> bool:
    """Only admins may change a public role, including their own."""
    return Role.ADMIN in viewer_roles


def can_change_contact_visibility(viewer_id: IdentityId, profile: Profile) -> bool:
    """Contact visibility belongs to the profile owner alone."""
    return viewer_id == profile.id


def can_delete(
    viewer_id: IdentityId, viewer_roles: set[Role], profile: Profile
) -> bool:
    """Admins may delete other members, never themselves."""
    return Role.ADMIN in viewer_roles and viewer_id != profile.id


def can_invite(viewer_roles: set[Role]) -> bool:
    """Only admins may issue invitations."""
    return Role.ADMIN in viewer_roles


def can_manage_roles(viewer_roles: set[Role]) -> bool:
    """Only admins may grant or revoke roles."""
    return Role.ADMIN in viewer_roles


def can_access_content_studio(viewer_roles: set[Role]) -> bool:
    """Admins and bloggers may use the content studio."""
    return Role.ADMIN in viewer_roles or Role.BLOGGER in viewer_roles


class AccessService(Service):
    """Domain service gating directory reads and writes by role and ownership."""

    def __init__(self, role_service: RoleService) -> None:
        """Initialize access service.

        Args:
            role_service: Role domain service
        """
        self.role_service = role_service

    async def roles_of(self, viewer: IdentitySession) -> set[Role]:
        """Roles held by the session's identity."""
        return await self.role_service.roles_of(viewer.identity_id)

    async def visible_fields(
        self, viewer: IdentitySession, profile: Profile
    ) -> FieldVisibility:
        """Visibility of a profile for the viewer."""
        roles = await self.roles_of(viewer)
        return visible_fields(viewer.identity_id, roles, profile)

    async def can_edit(self, viewer: IdentitySession, profile: Profile) -> bool:
        """Whether the viewer may edit the profile."""
        roles = await self.roles_of(viewer)
        return can_edit(viewer.identity_id, roles, profile)

    async def can_delete(self, viewer: IdentitySession, profile: Profile) -> bool:
        """Whether the viewer may delete the profile."""
        roles = await self.roles_of(viewer)
        return can_delete(viewer.identity_id, roles, profile)

    async def can_invite(self, viewer: IdentitySession) -> bool:
        """Whether the viewer may issue invitations."""
        return can_invite(await self.roles_of(viewer))

    async def can_access_content_studio(self, viewer: IdentitySession) -> bool:
        """Whether the viewer may use the content studio."""
        return can_access_content_studio(await self.roles_of(viewer))

    async def require_invite(self, viewer: IdentitySession) -> None:
        """Raise unless the viewer may issue invitations.

        Raises:
            AuthorizationError: If the viewer is not an admin
        """
        if not await self.can_invite(viewer):
            self._deny("invite members", viewer)

    async def require_manage_roles(self, viewer: IdentitySession) -> set[Role]:
        """Raise unless the viewer may manage roles.

        Returns:
            The viewer's roles

        Raises:
            AuthorizationError: If the viewer is not an admin
        """
        roles = await self.roles_of(viewer)
        if not can_manage_roles(roles):
            self._deny("manage roles", viewer)
        return roles

    async def require_edit(self, viewer: IdentitySession, profile: Profile) -> set[Role]:
        """Raise unless the viewer may edit the profile.

        Returns:
            The viewer's roles, for follow-up field-level checks

        Raises:
            AuthorizationError: If the viewer is neither owner nor admin
        """
        roles = await self.roles_of(viewer)
        if not can_edit(viewer.identity_id, roles, profile):
            self._deny(f"edit profile {profile.id}", viewer)
        return roles

    async def require_delete(self, viewer: IdentitySession, profile: Profile) -> None:
        """Raise unless the viewer may delete the profile.

        Raises:
            AuthorizationError: If the viewer is not an admin, or is the owner
        """
        if not await self.can_delete(viewer, profile):
            self._deny(f"delete profile {profile.id}", viewer)

    async def require_content_studio(self, viewer: IdentitySession) -> None:
        """Raise unless the viewer may use the content studio.

        Raises:
            AuthorizationError: If the viewer is neither admin nor blogger
        """
        if not await self.can_access_content_studio(viewer):
            self._deny("access the content studio", viewer)

    @staticmethod
    def _deny(action: str, viewer: IdentitySession) -> None:
        logfire.warn("Access denied", action=action, identity_id=str(viewer.identity_id))
        raise AuthorizationError(action, str(viewer.identity_id))
