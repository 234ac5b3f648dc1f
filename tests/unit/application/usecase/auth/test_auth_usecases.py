"""Unit tests for the auth use cases."""

import pytest

from roster.adapter.identity import MockIdentityPlatformClient
from roster.application.usecase.auth import (
    CheckStudioAccessRequest,
    CheckStudioAccessUseCase,
    GetCurrentMemberRequest,
    GetCurrentMemberUseCase,
    SetPasswordRequest,
    SetPasswordUseCase,
)
from roster.domain.error import AuthorizationError, TransientError, ValidationError
from roster.domain.repository import RoleRepository
from roster.domain.value import Role
from tests.conftest import make_profile, make_session, store_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSetPassword:
    """Tests for choosing a password after following an invite link."""

    @pytest.mark.asyncio
    async def test_password_stored_at_platform(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SetPasswordUseCase)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        session = identity_client.sign_in("jane@example.org")

        # Act
        response = await use_case.execute(
            SetPasswordRequest(session=session, password="hunter22")
        )

        # Assert
        assert response.success is True
        assert identity_client.passwords[session.identity_id] == "hunter22"

    @pytest.mark.asyncio
    async def test_short_password_rejected(self, unit_env):
        """Passwords below the minimum length never reach the platform."""
        # Arrange
        use_case = await unit_env.get(SetPasswordUseCase)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        session = identity_client.sign_in("jane@example.org")

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(SetPasswordRequest(session=session, password="12345"))

        assert identity_client.passwords == {}

    @pytest.mark.asyncio
    async def test_platform_failure_is_transient(self, unit_env):
        use_case = await unit_env.get(SetPasswordUseCase)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        session = identity_client.sign_in("jane@example.org")
        identity_client.available = False

        with pytest.raises(TransientError):
            await use_case.execute(SetPasswordRequest(session=session, password="hunter22"))


class TestGetCurrentMember:
    """Tests for describing the session's identity."""

    @pytest.mark.asyncio
    async def test_unregistered_identity_has_no_profile(self, unit_env):
        """An invitee who has not completed registration has no capabilities."""
        # Arrange
        use_case = await unit_env.get(GetCurrentMemberUseCase)
        session = make_session(email="jane@example.org")

        # Act
        response = await use_case.execute(GetCurrentMemberRequest(session=session))

        # Assert
        assert response.identity_id == str(session.identity_id)
        assert response.email == "jane@example.org"
        assert response.profile is None
        assert response.roles == []
        assert response.capabilities.can_invite is False
        assert response.capabilities.can_access_content_studio is False

    @pytest.mark.asyncio
    async def test_admin_sees_own_profile_and_capabilities(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCurrentMemberUseCase)
        role_repo = await unit_env.get(RoleRepository)
        profile = await store_profile(unit_env, make_profile(contact_visibility=False))
        await role_repo.grant(profile.id, Role.MEMBER)
        await role_repo.grant(profile.id, Role.ADMIN)
        session = make_session(email="jane@example.org", identity_id=profile.id)

        # Act
        response = await use_case.execute(GetCurrentMemberRequest(session=session))

        # Assert
        assert response.profile.email == "jane@example.org"
        assert response.roles == [Role.ADMIN, Role.MEMBER]
        assert response.capabilities.can_invite is True
        assert response.capabilities.can_manage_roles is True
        assert response.capabilities.can_access_content_studio is True


class TestCheckStudioAccess:
    """Tests for the content studio gate."""

    @pytest.mark.asyncio
    async def test_blogger_allowed(self, unit_env):
        use_case = await unit_env.get(CheckStudioAccessUseCase)
        role_repo = await unit_env.get(RoleRepository)
        session = make_session()
        await role_repo.grant(session.identity_id, Role.BLOGGER)

        response = await use_case.execute(CheckStudioAccessRequest(session=session))

        assert response.allowed is True

    @pytest.mark.asyncio
    async def test_member_denied(self, unit_env):
        use_case = await unit_env.get(CheckStudioAccessUseCase)
        role_repo = await unit_env.get(RoleRepository)
        session = make_session()
        await role_repo.grant(session.identity_id, Role.MEMBER)

        with pytest.raises(AuthorizationError):
            await use_case.execute(CheckStudioAccessRequest(session=session))
