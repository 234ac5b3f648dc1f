"""Profile use cases."""

from roster.application.usecase.profile.delete_profile import (
    DeleteProfileRequest,
    DeleteProfileResponse,
    DeleteProfileUseCase,
)
from roster.application.usecase.profile.get_profile import (
    GetProfileRequest,
    GetProfileUseCase,
)
from roster.application.usecase.profile.list_profiles import (
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
)
from roster.application.usecase.profile.update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from roster.application.usecase.profile.view import ProfileView, to_profile_view

__all__ = [
    "DeleteProfileRequest",
    "DeleteProfileResponse",
    "DeleteProfileUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "ListProfilesRequest",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "ProfileView",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
    "to_profile_view",
]
