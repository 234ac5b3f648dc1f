"""Strongly typed identifiers for roster domain entities."""

from typing import NewType
from uuid import UUID

# Identity ids are issued by the identity platform; profiles reuse them as
# their primary key.
IdentityId = NewType("IdentityId", UUID)
InvitationId = NewType("InvitationId", UUID)
