"""Invitation repository interface."""

from abc import ABC, abstractmethod

from roster.domain.model.invitation import Invitation
from roster.domain.value import Email


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    One row per normalized email. Implementations live in the
    infrastructure layer.
    """

    @abstractmethod
    async def find_by_email(self, email: Email) -> Invitation | None:
        """Find the pending invitation for an email.

        Args:
            email: Normalized email

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_for_email(self, email: Email) -> bool:
        """Check if a pending invitation exists for an email.

        Must not load or expose any other invitation field.

        Args:
            email: Normalized email

        Returns:
            True if an invitation exists, False otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, invitation: Invitation, commit: bool = False) -> Invitation:
        """Insert the invitation or overwrite the row for its email.

        Must be a single atomic insert-or-update on the email key so that
        concurrent upserts converge to one row (last write wins). Every
        column is replaced; nothing is merged from the previous row except
        its id and creation time.

        Args:
            invitation: The invitation to write
            commit: Commit the write immediately instead of with the request

        Returns:
            The stored invitation
        """
        pass

    @abstractmethod
    async def delete_by_email(self, email: Email, commit: bool = False) -> bool:
        """Delete the invitation for an email.

        Args:
            email: Normalized email
            commit: Commit the delete immediately instead of with the request

        Returns:
            True if a row was deleted, False if none existed
        """
        pass
