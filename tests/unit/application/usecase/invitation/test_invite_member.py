"""Unit tests for InviteMemberUseCase."""

from unittest.mock import patch

import pytest

from roster.adapter.identity import MockIdentityPlatformClient
from roster.application.usecase.invitation import (
    InviteMemberRequest,
    InviteMemberUseCase,
)
from roster.config import Settings
from roster.domain.error import AuthorizationError, TransientError, ValidationError
from roster.domain.repository import (
    InvitationRepository,
    ProfileRepository,
    RoleRepository,
)
from roster.domain.service import InvitationService
from roster.domain.value import Email, PublicRole, Role
from tests.conftest import make_profile, make_session, store_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _admin_session(unit_env):
    role_repo = await unit_env.get(RoleRepository)
    session = make_session(email="admin@example.org")
    await role_repo.grant(session.identity_id, Role.ADMIN)
    return session


def _request(session, **overrides) -> InviteMemberRequest:
    values = {
        "session": session,
        "email": "Jane@Example.org",
        "full_name": "Jane Doe",
        "public_role": "alumni",
        "organization": "Example Labs",
    }
    values.update(overrides)
    return InviteMemberRequest(**values)


class TestInviteMember:
    """Tests for the invite flow."""

    @pytest.mark.asyncio
    async def test_admin_invite_stores_and_dispatches(self, unit_env):
        """An admin's invite is stored and an invite email is requested."""
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        invitation_service = await unit_env.get(InvitationService)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        settings = await unit_env.get(Settings)
        session = await _admin_session(unit_env)

        # Act
        response = await use_case.execute(_request(session))

        # Assert
        assert response.success is True
        assert response.email == "jane@example.org"
        assert response.public_role == PublicRole.ALUMNI
        assert response.already_registered is False

        assert await invitation_service.exists(Email("jane@example.org"))
        assert len(identity_client.dispatches) == 1
        dispatch = identity_client.dispatches[0]
        assert dispatch.email == "jane@example.org"
        assert dispatch.redirect_to == settings.identity.invite_redirect_url
        assert dispatch.data == {"full_name": "Jane Doe", "public_role": "alumni"}

    @pytest.mark.asyncio
    async def test_non_admin_rejected_without_side_effects(self, unit_env):
        """A non-admin invite fails and leaves no invitation behind."""
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        invitation_service = await unit_env.get(InvitationService)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        role_repo = await unit_env.get(RoleRepository)
        session = make_session()
        await role_repo.grant(session.identity_id, Role.MEMBER)

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await use_case.execute(_request(session))

        assert await invitation_service.exists(Email("jane@example.org")) is False
        assert identity_client.dispatches == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"email": "not-an-email"},
            {"email": "   "},
            {"full_name": "  "},
            {"public_role": "treasurer"},
        ],
    )
    async def test_invalid_input_rejected(self, unit_env, overrides):
        """Malformed email, blank name or unknown public role fail validation."""
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        session = await _admin_session(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(_request(session, **overrides))

        assert identity_client.dispatches == []

    @pytest.mark.asyncio
    async def test_reinvite_overwrites_details(self, unit_env):
        """Inviting the same email twice keeps one invitation with the latest details."""
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        invitation_service = await unit_env.get(InvitationService)
        session = await _admin_session(unit_env)
        await use_case.execute(_request(session))

        # Act
        await use_case.execute(_request(session, public_role="advisor", email="jane@example.org"))

        # Assert
        invitation = await invitation_service.get(Email("jane@example.org"))
        assert invitation.public_role == PublicRole.ADVISOR

    @pytest.mark.asyncio
    async def test_dispatch_failure_removes_invitation(self, unit_env):
        """A failed invite email leaves no pending invitation."""
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        invitation_service = await unit_env.get(InvitationService)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        session = await _admin_session(unit_env)
        identity_client.available = False

        # Act & Assert
        with pytest.raises(TransientError):
            await use_case.execute(_request(session))

        assert await invitation_service.exists(Email("jane@example.org")) is False

    @pytest.mark.asyncio
    async def test_already_registered_without_profile_keeps_invitation(self, unit_env):
        """An identity that never completed registration keeps its invitation."""
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        invitation_service = await unit_env.get(InvitationService)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        session = await _admin_session(unit_env)
        existing = identity_client.create_identity("jane@example.org")
        identity_client.passwords[existing] = "secret1"

        # Act
        response = await use_case.execute(_request(session))

        # Assert
        assert response.success is True
        assert response.already_registered is True
        assert identity_client.dispatches == []
        assert await invitation_service.exists(Email("jane@example.org"))

    @pytest.mark.asyncio
    async def test_blank_optional_fields_stored_as_none(self, unit_env):
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        session = await _admin_session(unit_env)

        # Act
        await use_case.execute(_request(session, phone="  ", state=""))

        # Assert
        invitation = await invitation_repo.find_by_email(Email("jane@example.org"))
        assert invitation.phone is None
        assert invitation.state is None


class TestInviteDurability:
    """Tests for committing the invitation around the dispatch."""

    @pytest.mark.asyncio
    async def test_invitation_committed_before_dispatch(self, unit_env):
        """The invitation is made durable before any invite email is requested."""
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        session = await _admin_session(unit_env)
        original_upsert = invitation_repo.upsert
        writes = []

        async def recording_upsert(invitation, commit=False):
            writes.append((commit, len(identity_client.dispatches)))
            return await original_upsert(invitation, commit=commit)

        # Act
        with patch.object(invitation_repo, "upsert", side_effect=recording_upsert):
            await use_case.execute(_request(session))

        # Assert - committed while nothing had been dispatched yet
        assert writes == [(True, 0)]
        assert len(identity_client.dispatches) == 1

    @pytest.mark.asyncio
    async def test_registry_write_failure_skips_dispatch(self, unit_env):
        """No invite email goes out when the invitation cannot be stored."""
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        session = await _admin_session(unit_env)

        # Act & Assert
        with patch.object(
            invitation_repo,
            "upsert",
            side_effect=TransientError("database unavailable"),
        ):
            with pytest.raises(TransientError):
                await use_case.execute(_request(session))

        assert identity_client.dispatches == []
        assert await invitation_repo.exists_for_email(Email("jane@example.org")) is False

    @pytest.mark.asyncio
    async def test_dispatch_failure_commits_removal(self, unit_env):
        """The compensating delete is committed on its own, not with the failed request."""
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        session = await _admin_session(unit_env)
        identity_client.available = False

        # Act
        with patch.object(
            invitation_repo,
            "delete_by_email",
            wraps=invitation_repo.delete_by_email,
        ) as delete_by_email:
            with pytest.raises(TransientError):
                await use_case.execute(_request(session))

        # Assert
        delete_by_email.assert_awaited_once_with(Email("jane@example.org"), commit=True)


class TestReinviteRegisteredMember:
    """Tests for re-inviting a member who already has a profile."""

    @pytest.mark.asyncio
    async def test_details_applied_to_profile_and_invitation_removed(self, unit_env):
        """A registered member's profile is refreshed at once and no invitation lingers."""
        # Arrange
        use_case = await unit_env.get(InviteMemberUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        identity_client = await unit_env.get(MockIdentityPlatformClient)
        session = await _admin_session(unit_env)
        identity_id = identity_client.create_identity("jane@example.org")
        identity_client.passwords[identity_id] = "secret1"
        await store_profile(
            unit_env, make_profile(identity_id=identity_id, contact_visibility=False)
        )

        # Act
        response = await use_case.execute(_request(session, public_role="advisor"))

        # Assert
        assert response.already_registered is True
        profile = await profile_repo.find_by_id(identity_id)
        assert profile.public_role == PublicRole.ADVISOR
        assert profile.contact_visibility is False
        assert await invitation_repo.exists_for_email(Email("jane@example.org")) is False
