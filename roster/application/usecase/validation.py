"""Input parsing shared by use cases.

Turns raw request strings into domain values, raising the domain
``ValidationError`` so the interface layer reports them as 400.
"""

from roster.domain.error import ValidationError
from roster.domain.value import Email, PublicRole, Role


def parse_email(raw: str) -> Email:
    """Normalize and validate an email address.

    Raises:
        ValidationError: If the address is empty or malformed
    """
    if not raw or not raw.strip():
        raise ValidationError("Email is required")
    try:
        return Email(raw)
    except ValueError:
        raise ValidationError(f"Invalid email address: {raw.strip()}")


def parse_public_role(raw: str) -> PublicRole:
    """Parse a directory public role.

    Raises:
        ValidationError: If the value is not a known public role
    """
    try:
        return PublicRole(raw)
    except ValueError:
        allowed = ", ".join(r.value for r in PublicRole)
        raise ValidationError(f"Invalid public role '{raw}'. Allowed: {allowed}")


def parse_role(raw: str) -> Role:
    """Parse a capability role.

    Raises:
        ValidationError: If the value is not a known role
    """
    try:
        return Role(raw)
    except ValueError:
        raise ValidationError(f"Invalid role '{raw}'")


def blank_to_none(value: str | None) -> str | None:
    """Treat empty or whitespace-only optional fields as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None
