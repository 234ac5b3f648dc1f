"""Invitation entity.

An invitation is a pending offer of membership keyed by email. It is the
pre-image of a profile: once the invitee establishes an identity and
completes registration, the invitation is consumed and deleted.
"""

from datetime import datetime

from pydantic import Field

from roster.domain.model.details import MemberDetails
from roster.domain.value import Email, IdentityId, InvitationId


class Invitation(MemberDetails):
    """Invitation entity.

    Business rules:
    - At most one live invitation per normalized email
    - Re-inviting the same email overwrites the pending invitation
    - Deleted on successful registration, or when the invite email could not
      be dispatched
    """

    id: InvitationId
    email: Email
    invited_by: IdentityId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
