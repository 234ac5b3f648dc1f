"""Unit tests for ProfileService."""

from uuid import uuid4

import pytest

from roster.domain.error import NotFoundError
from roster.domain.model import Invitation
from roster.domain.repository import ProfileRepository
from roster.domain.service import ProfileService
from roster.domain.value import Email, IdentityId, InvitationId, PublicRole
from tests.conftest import make_details, make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _invitation(**overrides) -> Invitation:
    details = make_details(**overrides).model_dump()
    return Invitation(
        id=InvitationId(uuid4()),
        email=Email("jane@example.org"),
        invited_by=IdentityId(uuid4()),
        **details,
    )


class TestUpsertFromInvitation:
    """Tests for creating profiles from invitations."""

    @pytest.mark.asyncio
    async def test_creates_profile_with_invitation_details(self, unit_env):
        """A new profile copies the invitation's directory fields."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        identity_id = IdentityId(uuid4())

        # Act
        profile = await profile_service.upsert_from_invitation(identity_id, _invitation())

        # Assert
        assert profile.id == identity_id
        assert profile.email == Email("jane@example.org")
        assert profile.public_role == PublicRole.ALUMNI
        assert profile.organization == "Example Labs"
        assert profile.contact_visibility is True

    @pytest.mark.asyncio
    async def test_refresh_keeps_contact_visibility(self, unit_env):
        """Refreshing from a new invitation never touches contact visibility."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        identity_id = IdentityId(uuid4())
        profile = await profile_service.upsert_from_invitation(identity_id, _invitation())
        await profile_repo.save(profile.model_copy(update={"contact_visibility": False}))

        # Act
        refreshed = await profile_service.upsert_from_invitation(
            identity_id, _invitation(public_role=PublicRole.ADVISOR)
        )

        # Assert
        assert refreshed.public_role == PublicRole.ADVISOR
        assert refreshed.contact_visibility is False


class TestLookupAndDelete:
    """Tests for get_by_id and delete."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.get_by_id(IdentityId(uuid4()))

    @pytest.mark.asyncio
    async def test_save_unknown_profile_raises(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.save(make_profile())

    @pytest.mark.asyncio
    async def test_list_profiles_ordered_by_name(self, unit_env):
        """Listing returns profiles ordered by full name."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        for name in ("Zoe Zed", "Adam Ant"):
            await profile_service.upsert_from_invitation(
                IdentityId(uuid4()), _invitation(full_name=name)
            )

        # Act
        profiles = await profile_service.list_profiles()

        # Assert
        assert [p.full_name for p in profiles] == ["Adam Ant", "Zoe Zed"]

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.delete(IdentityId(uuid4()))
