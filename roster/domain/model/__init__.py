"""Domain model entities for the member roster."""

from roster.domain.model.details import MEMBER_DETAIL_FIELDS, MemberDetails
from roster.domain.model.invitation import Invitation
from roster.domain.model.profile import Profile

__all__ = [
    "MEMBER_DETAIL_FIELDS",
    "MemberDetails",
    "Invitation",
    "Profile",
]
