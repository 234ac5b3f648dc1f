"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from roster.domain.model import MEMBER_DETAIL_FIELDS, Invitation, Profile
from roster.domain.value import Email, IdentityId, InvitationId, PublicRole


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _details_from_row(row: Dict[str, Any]) -> Dict[str, Any]:
    details = {field: row.get(field) for field in MEMBER_DETAIL_FIELDS}
    details["public_role"] = PublicRole(row["public_role"])
    return details


def _details_to_dict(entity: Invitation | Profile) -> Dict[str, Any]:
    details = entity.model_dump(include=set(MEMBER_DETAIL_FIELDS))
    details["public_role"] = entity.public_role.value
    return details


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        email=Email(row["email"]),
        invited_by=IdentityId(_uuid(row["invited_by"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        **_details_from_row(row),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    Args:
        invitation: Invitation domain model

    Returns:
        Dict suitable for database insert/update
    """
    return {
        "id": invitation.id,
        "email": invitation.email.root,
        "invited_by": invitation.invited_by,
        "created_at": invitation.created_at,
        "updated_at": invitation.updated_at,
        **_details_to_dict(invitation),
    }


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=IdentityId(_uuid(row["id"])),
        email=Email(row["email"]),
        contact_visibility=row["contact_visibility"],
        profile_photo_url=row.get("profile_photo_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        **_details_from_row(row),
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Args:
        profile: Profile domain model

    Returns:
        Dict suitable for database insert/update
    """
    return {
        "id": profile.id,
        "email": profile.email.root,
        "contact_visibility": profile.contact_visibility,
        "profile_photo_url": profile.profile_photo_url,
        "created_at": profile.created_at,
        "updated_at": profile.updated_at,
        **_details_to_dict(profile),
    }


def invitation_to_profile_dict(
    identity_id: IdentityId, invitation: Invitation
) -> Dict[str, Any]:
    """Build the profile insert values for an identity consuming an invitation.

    ``contact_visibility`` and ``profile_photo_url`` are left to their
    column defaults.

    Args:
        identity_id: Identity completing registration
        invitation: Invitation being consumed

    Returns:
        Dict suitable for a profile insert
    """
    return {
        "id": identity_id,
        "email": invitation.email.root,
        **_details_to_dict(invitation),
    }
