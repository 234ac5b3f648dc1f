"""Domain value objects for the member roster.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from roster.domain.value.common import RootValueObject, ValueObject
from roster.domain.value.identifiers import IdentityId

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Role(str, Enum):
    """Capability roles held by an identity.

    Roles are not mutually exclusive. Only ``admin`` carries authority over
    other members.
    """

    ADMIN = "admin"
    BLOGGER = "blogger"
    MEMBER = "member"


class PublicRole(str, Enum):
    """Directory display label. Carries no system capability."""

    PRESIDENT = "president"
    VICE_PRESIDENT = "vice_president"
    EXECUTIVE_BOARD = "executive_board"
    BOARD_OF_DIRECTORS = "board_of_directors"
    STATE_REPRESENTATIVE = "state_representative"
    ADVISOR = "advisor"
    ALUMNI = "alumni"


class FieldVisibility(str, Enum):
    """How much of a profile a viewer may see."""

    FULL = "full"
    RESTRICTED = "restricted"


class Email(RootValueObject[str]):
    """Normalized email address.

    Surrounding whitespace is stripped and the address is lowercased, so two
    spellings of the same address always produce the same key.
    """

    @field_validator("root")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize and validate email format."""
        normalized = v.strip().lower()
        if len(normalized) > 320 or not EMAIL_PATTERN.match(normalized):
            raise ValueError("Email must be a valid address")
        return normalized


class IdentitySession(ValueObject):
    """An established identity platform session.

    Passed explicitly into every operation that acts on behalf of a caller.
    ``email`` is the platform-verified address and may be missing for
    sessions that have not confirmed one.
    """

    identity_id: IdentityId
    email: str | None = None
    access_token: str | None = None  # Needed to act on the session at the platform

    @property
    def verified_email(self) -> Email | None:
        """Verified email as a normalized value object, if any."""
        if not self.email:
            return None
        try:
            return Email(self.email)
        except ValueError:
            return None
