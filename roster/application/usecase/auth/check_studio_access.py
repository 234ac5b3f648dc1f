"""Content studio access use case."""

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.domain.service import AccessService
from roster.domain.value import IdentitySession


class CheckStudioAccessRequest(BaseModel):
    """Content studio access request."""

    session: IdentitySession


class CheckStudioAccessResponse(BaseModel):
    """Content studio access response."""

    allowed: bool


class CheckStudioAccessUseCase(BaseUseCase):
    """Gate for the externally hosted content studio."""

    def __init__(self, access_service: AccessService) -> None:
        self.access_service = access_service

    async def execute(self, request: CheckStudioAccessRequest) -> CheckStudioAccessResponse:
        """Allow admins and bloggers.

        Raises:
            AuthorizationError: If the caller is neither admin nor blogger
        """
        await self.access_service.require_content_studio(request.session)
        return CheckStudioAccessResponse(allowed=True)
