"""Invitation domain service (the invitation registry)."""

from datetime import datetime
from uuid import uuid4

import logfire

from roster.domain.model import MEMBER_DETAIL_FIELDS, Invitation, MemberDetails
from roster.domain.repository import InvitationRepository
from roster.domain.value import Email, IdentityId, InvitationId

from .base import Service


class InvitationService(Service):
    """Domain service for pending invitations.

    Holds at most one invitation per normalized email.
    """

    def __init__(self, invitation_repository: InvitationRepository) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
        """
        self.invitation_repository = invitation_repository

    async def upsert(
        self,
        email: Email,
        details: MemberDetails,
        invited_by: IdentityId,
        commit: bool = False,
    ) -> Invitation:
        """Write or overwrite the invitation for an email.

        Args:
            email: Normalized invitee email
            details: Directory fields for the future profile
            invited_by: Identity of the inviting admin
            commit: Make the write durable before returning

        Returns:
            Stored invitation

        Raises:
            TransientError: If the write fails
        """
        with logfire.span(
            "invitation_service.upsert",
            email=email.root,
            invited_by=str(invited_by),
        ):
            now = datetime.now()
            invitation = Invitation(
                id=InvitationId(uuid4()),
                email=email,
                invited_by=invited_by,
                created_at=now,
                updated_at=now,
                **details.model_dump(include=set(MEMBER_DETAIL_FIELDS)),
            )

            saved = await self.invitation_repository.upsert(invitation, commit=commit)
            logfire.info(
                "Invitation stored",
                invitation_id=str(saved.id),
                email=email.root,
                public_role=saved.public_role.value,
            )
            return saved

    async def exists(self, email: Email) -> bool:
        """Check whether a pending invitation exists for an email.

        Args:
            email: Normalized email

        Returns:
            True if an invitation exists, False otherwise
        """
        with logfire.span("invitation_service.exists", email=email.root):
            exists = await self.invitation_repository.exists_for_email(email)
            logfire.info("Invitation existence check", email=email.root, exists=exists)
            return exists

    async def get(self, email: Email) -> Invitation | None:
        """Get the pending invitation for an email.

        Args:
            email: Normalized email

        Returns:
            Invitation if found, None otherwise
        """
        with logfire.span("invitation_service.get", email=email.root):
            invitation = await self.invitation_repository.find_by_email(email)
            if invitation:
                logfire.info(
                    "Invitation found",
                    invitation_id=str(invitation.id),
                    email=email.root,
                )
            else:
                logfire.warn("Invitation not found", email=email.root)
            return invitation

    async def remove(self, email: Email, commit: bool = False) -> bool:
        """Delete the invitation for an email.

        Removing an invitation that is already gone is a no-op.

        Args:
            email: Normalized email
            commit: Make the delete durable before returning

        Returns:
            True if a row was deleted, False if none existed
        """
        with logfire.span("invitation_service.remove", email=email.root):
            deleted = await self.invitation_repository.delete_by_email(
                email, commit=commit
            )
            if deleted:
                logfire.info("Invitation removed", email=email.root)
            else:
                logfire.info("Invitation already absent", email=email.root)
            return deleted
