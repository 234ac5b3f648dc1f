"""Unit tests for DeleteProfileUseCase."""

import pytest

from roster.adapter.identity import MockIdentityPlatformClient
from roster.application.usecase.profile import DeleteProfileRequest, DeleteProfileUseCase
from roster.domain.error import AuthorizationError, NotFoundError, TransientError
from roster.domain.repository import ProfileRepository, RoleRepository
from roster.domain.value import Role
from tests.conftest import make_profile, make_session, store_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _admin(unit_env):
    role_repo = await unit_env.get(RoleRepository)
    admin = make_session(email="admin@example.org")
    await role_repo.grant(admin.identity_id, Role.ADMIN)
    return admin


class TestDeleteProfile:
    """Tests for removing members."""

    @pytest.mark.asyncio
    async def test_admin_deletes_member_everywhere(self, unit_env):
        """Deleting removes the identity, the profile and all roles."""
        # Arrange
        use_case = await unit_env.get(DeleteProfileUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        role_repo = await unit_env.get(RoleRepository)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        identity_id = identity_client.create_identity("jane@example.org")
        profile = await store_profile(unit_env, make_profile(identity_id=identity_id))
        await role_repo.grant(profile.id, Role.MEMBER)
        await role_repo.grant(profile.id, Role.BLOGGER)
        admin = await _admin(unit_env)

        # Act
        response = await use_case.execute(
            DeleteProfileRequest(session=admin, profile_id=str(profile.id))
        )

        # Assert
        assert response.success is True
        assert await profile_repo.find_by_id(profile.id) is None
        assert await role_repo.roles_of(profile.id) == set()
        assert "jane@example.org" not in identity_client.identities

    @pytest.mark.asyncio
    async def test_admin_cannot_delete_self(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteProfileUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        admin = await _admin(unit_env)
        await store_profile(unit_env, make_profile(identity_id=admin.identity_id))

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await use_case.execute(
                DeleteProfileRequest(session=admin, profile_id=str(admin.identity_id))
            )

        assert await profile_repo.find_by_id(admin.identity_id) is not None

    @pytest.mark.asyncio
    async def test_member_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeleteProfileUseCase)
        profile = await store_profile(unit_env, make_profile())

        with pytest.raises(AuthorizationError):
            await use_case.execute(
                DeleteProfileRequest(session=make_session(), profile_id=str(profile.id))
            )

    @pytest.mark.asyncio
    async def test_missing_profile_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteProfileUseCase)
        admin = await _admin(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteProfileRequest(session=admin, profile_id="not-a-uuid")
            )

    @pytest.mark.asyncio
    async def test_platform_failure_keeps_profile(self, unit_env):
        """If the identity cannot be removed the profile stays, so the call can be repeated."""
        # Arrange
        use_case = await unit_env.get(DeleteProfileUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        profile = await store_profile(unit_env, make_profile())
        admin = await _admin(unit_env)
        identity_client.available = False

        # Act & Assert
        with pytest.raises(TransientError):
            await use_case.execute(
                DeleteProfileRequest(session=admin, profile_id=str(profile.id))
            )

        assert await profile_repo.find_by_id(profile.id) is not None
