"""Member details shared by invitations and profiles."""

from typing import Optional

from roster.domain.model.common import DomainModel
from roster.domain.value import PublicRole


class MemberDetails(DomainModel):
    """Directory fields an admin fills in when inviting a member.

    An invitation carries these until registration completes, at which point
    they are copied onto the member's profile.
    """

    full_name: str
    public_role: PublicRole
    phone: Optional[str] = None
    state: Optional[str] = None
    organization: Optional[str] = None
    current_projects: Optional[str] = None
    duties_and_responsibilities: Optional[str] = None
    biography: Optional[str] = None
    linkedin: Optional[str] = None


# Fields copied from an invitation onto a profile when registration completes
MEMBER_DETAIL_FIELDS: tuple[str, ...] = tuple(MemberDetails.model_fields)
