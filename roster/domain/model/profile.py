"""Profile aggregate root.

A profile is the durable directory record of a registered member. It shares
its id with the identity that owns it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from roster.domain.model.details import MemberDetails
from roster.domain.value import Email, IdentityId


class Profile(MemberDetails):
    """Profile aggregate root.

    Exists if and only if registration has completed for the identity.
    ``contact_visibility`` is controlled by the owner alone and never copied
    from an invitation.
    """

    id: IdentityId
    email: Email
    contact_visibility: bool = True
    profile_photo_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
