"""Application layer DI providers."""

from dishka import Scope, provide

from roster.adapter.identity import IdentityPlatformClient
from roster.application.usecase.auth import (
    CheckStudioAccessUseCase,
    GetCurrentMemberUseCase,
    SetPasswordUseCase,
)
from roster.application.usecase.invitation import (
    CompleteRegistrationUseCase,
    InviteMemberUseCase,
    VerifyInvitationUseCase,
)
from roster.application.usecase.profile import (
    DeleteProfileUseCase,
    GetProfileUseCase,
    ListProfilesUseCase,
    UpdateProfileUseCase,
)
from roster.application.usecase.role import UpdateRoleUseCase
from roster.config import Settings
from roster.domain.service import (
    AccessService,
    InvitationService,
    ProfileService,
    RoleService,
)
from roster.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_invite_member_use_case(
        self,
        access_service: AccessService,
        invitation_service: InvitationService,
        profile_service: ProfileService,
        identity_client: IdentityPlatformClient,
        settings: Settings,
    ) -> InviteMemberUseCase:
        """Provide invite member use case."""
        return InviteMemberUseCase(
            access_service=access_service,
            invitation_service=invitation_service,
            profile_service=profile_service,
            identity_client=identity_client,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_verify_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> VerifyInvitationUseCase:
        """Provide verify invitation use case."""
        return VerifyInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_complete_registration_use_case(
        self,
        invitation_service: InvitationService,
        profile_service: ProfileService,
        role_service: RoleService,
    ) -> CompleteRegistrationUseCase:
        """Provide complete registration use case."""
        return CompleteRegistrationUseCase(
            invitation_service=invitation_service,
            profile_service=profile_service,
            role_service=role_service,
        )

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService, access_service: AccessService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(
            profile_service=profile_service, access_service=access_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_profiles_use_case(
        self, profile_service: ProfileService, access_service: AccessService
    ) -> ListProfilesUseCase:
        """Provide list profiles use case."""
        return ListProfilesUseCase(
            profile_service=profile_service, access_service=access_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService, access_service: AccessService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(
            profile_service=profile_service, access_service=access_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_profile_use_case(
        self,
        profile_service: ProfileService,
        role_service: RoleService,
        access_service: AccessService,
        identity_client: IdentityPlatformClient,
    ) -> DeleteProfileUseCase:
        """Provide delete profile use case."""
        return DeleteProfileUseCase(
            profile_service=profile_service,
            role_service=role_service,
            access_service=access_service,
            identity_client=identity_client,
        )

    # Role use cases
    @provide(scope=Scope.REQUEST)
    def get_update_role_use_case(
        self,
        access_service: AccessService,
        profile_service: ProfileService,
        role_service: RoleService,
    ) -> UpdateRoleUseCase:
        """Provide update role use case."""
        return UpdateRoleUseCase(
            access_service=access_service,
            profile_service=profile_service,
            role_service=role_service,
        )

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_member_use_case(
        self, profile_service: ProfileService, access_service: AccessService
    ) -> GetCurrentMemberUseCase:
        """Provide get current member use case."""
        return GetCurrentMemberUseCase(
            profile_service=profile_service, access_service=access_service
        )

    @provide(scope=Scope.REQUEST)
    def get_set_password_use_case(
        self, identity_client: IdentityPlatformClient, settings: Settings
    ) -> SetPasswordUseCase:
        """Provide set password use case."""
        return SetPasswordUseCase(identity_client=identity_client, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_check_studio_access_use_case(
        self, access_service: AccessService
    ) -> CheckStudioAccessUseCase:
        """Provide content studio access use case."""
        return CheckStudioAccessUseCase(access_service=access_service)
