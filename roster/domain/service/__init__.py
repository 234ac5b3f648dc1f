"""Domain services."""

from .access_service import AccessService
from .base import Service
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .profile_service import ProfileService
from .role_service import RoleService

__all__ = [
    "AccessService",
    "InvitationService",
    "JWTService",
    "ProfileService",
    "RoleService",
    "Service",
]
