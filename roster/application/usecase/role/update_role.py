"""Update role use case."""

import logfire
from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.profile.common import parse_profile_id
from roster.application.usecase.validation import parse_role
from roster.domain.error import ValidationError
from roster.domain.service import AccessService, ProfileService, RoleService
from roster.domain.value import IdentitySession, Role

# Roles an admin may toggle; member is the registration baseline
ASSIGNABLE_ROLES = frozenset({Role.ADMIN, Role.BLOGGER})


class UpdateRoleRequest(BaseModel):
    """Grant or revoke a capability role."""

    session: IdentitySession
    profile_id: str
    role: str
    grant: bool


class UpdateRoleResponse(BaseModel):
    """Roles held after the change."""

    profile_id: str
    roles: list[Role]
    changed: bool


class UpdateRoleUseCase(BaseUseCase):
    """Use case for admins granting and revoking admin or blogger."""

    def __init__(
        self,
        access_service: AccessService,
        profile_service: ProfileService,
        role_service: RoleService,
    ) -> None:
        """Initialize update role use case.

        Args:
            access_service: Access control domain service
            profile_service: Profile domain service
            role_service: Role domain service
        """
        self.access_service = access_service
        self.profile_service = profile_service
        self.role_service = role_service

    async def execute(self, request: UpdateRoleRequest) -> UpdateRoleResponse:
        """Execute update role flow.

        Granting a held role or revoking one that is not held succeeds
        without change.

        Raises:
            AuthorizationError: If the caller is not an admin
            ValidationError: If the role is unknown or not assignable
            NotFoundError: If the target has no profile
        """
        await self.access_service.require_manage_roles(request.session)

        role = parse_role(request.role)
        if role not in ASSIGNABLE_ROLES:
            raise ValidationError(f"Role '{role.value}' cannot be granted or revoked")

        profile = await self.profile_service.get_by_id(parse_profile_id(request.profile_id))

        with logfire.span(
            "update_role",
            admin_id=str(request.session.identity_id),
            profile_id=str(profile.id),
            role=role.value,
            grant=request.grant,
        ):
            if request.grant:
                changed = await self.role_service.grant(profile.id, role)
            else:
                changed = await self.role_service.revoke(profile.id, role)

            roles = await self.role_service.roles_of(profile.id)
            return UpdateRoleResponse(
                profile_id=str(profile.id),
                roles=sorted(roles, key=lambda r: r.value),
                changed=changed,
            )
