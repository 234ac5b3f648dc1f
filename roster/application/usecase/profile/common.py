"""Helpers shared by profile use cases."""

from uuid import UUID

from roster.domain.error import NotFoundError
from roster.domain.value import IdentityId


def parse_profile_id(raw: str) -> IdentityId:
    """Parse a profile ID from a path parameter.

    Raises:
        NotFoundError: If the value is not a UUID, since no profile can match
    """
    try:
        return IdentityId(UUID(raw))
    except ValueError:
        raise NotFoundError("Profile", raw)
