"""In-memory invitation repository for testing."""

from roster.domain.model import Invitation
from roster.domain.repository import InvitationRepository
from roster.domain.value import Email


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: dict[str, Invitation] = {}

    async def find_by_email(self, email: Email) -> Invitation | None:
        """Find the pending invitation for an email."""
        return self._invitations.get(email.root)

    async def exists_for_email(self, email: Email) -> bool:
        """Check if a pending invitation exists for an email."""
        return email.root in self._invitations

    async def upsert(self, invitation: Invitation, commit: bool = False) -> Invitation:
        """Insert the invitation or overwrite the row for its email."""
        existing = self._invitations.get(invitation.email.root)
        if existing:
            invitation = invitation.model_copy(
                update={"id": existing.id, "created_at": existing.created_at}
            )
        self._invitations[invitation.email.root] = invitation
        return invitation

    async def delete_by_email(self, email: Email, commit: bool = False) -> bool:
        """Delete the invitation for an email."""
        return self._invitations.pop(email.root, None) is not None
