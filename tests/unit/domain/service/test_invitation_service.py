"""Unit tests for InvitationService."""

from uuid import uuid4

import pytest

from roster.domain.repository import InvitationRepository
from roster.domain.service import InvitationService
from roster.domain.value import Email, IdentityId, PublicRole
from tests.conftest import make_details
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpsert:
    """Tests for upsert method."""

    @pytest.mark.asyncio
    async def test_upsert_stores_invitation(self, unit_env):
        """Upserting should store an invitation keyed by email."""
        # Arrange
        invitation_service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        email = Email("jane@example.org")
        admin_id = IdentityId(uuid4())

        # Act
        result = await invitation_service.upsert(email, make_details(), admin_id)

        # Assert
        assert result.email == email
        assert result.invited_by == admin_id
        assert result.full_name == "Jane Doe"
        assert result.public_role == PublicRole.ALUMNI

        saved = await invitation_repo.find_by_email(email)
        assert saved is not None
        assert saved.id == result.id

    @pytest.mark.asyncio
    async def test_upsert_overwrites_existing_invitation(self, unit_env):
        """Re-inviting keeps one invitation with the latest details."""
        # Arrange
        invitation_service = await unit_env.get(InvitationService)
        email = Email("jane@example.org")
        admin_id = IdentityId(uuid4())
        first = await invitation_service.upsert(email, make_details(), admin_id)

        # Act
        second = await invitation_service.upsert(
            Email("  JANE@example.org "),
            make_details(full_name="Jane Q. Doe", public_role=PublicRole.ADVISOR),
            admin_id,
        )

        # Assert
        assert second.id == first.id
        stored = await invitation_service.get(email)
        assert stored.full_name == "Jane Q. Doe"
        assert stored.public_role == PublicRole.ADVISOR


class TestExistsAndRemove:
    """Tests for exists and remove methods."""

    @pytest.mark.asyncio
    async def test_exists_false_for_unknown_email(self, unit_env):
        invitation_service = await unit_env.get(InvitationService)

        assert await invitation_service.exists(Email("nobody@example.org")) is False

    @pytest.mark.asyncio
    async def test_remove_deletes_and_is_idempotent(self, unit_env):
        """Removing twice succeeds; only the first call deletes a row."""
        # Arrange
        invitation_service = await unit_env.get(InvitationService)
        email = Email("jane@example.org")
        await invitation_service.upsert(email, make_details(), IdentityId(uuid4()))

        # Act
        first = await invitation_service.remove(email)
        second = await invitation_service.remove(email)

        # Assert
        assert first is True
        assert second is False
        assert await invitation_service.exists(email) is False
