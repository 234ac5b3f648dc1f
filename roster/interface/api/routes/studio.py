"""Content studio access routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from roster.application.usecase.auth import (
    CheckStudioAccessRequest,
    CheckStudioAccessResponse,
    CheckStudioAccessUseCase,
)
from roster.domain.service import JWTService
from roster.interface.api.session import require_session

router = APIRouter(prefix="/studio", tags=["studio"], route_class=DishkaRoute)


@router.get("/access", response_model=CheckStudioAccessResponse)
async def check_studio_access(
    check_studio_access_use_case: FromDishka[CheckStudioAccessUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CheckStudioAccessResponse:
    """Gate for the content studio; 403 unless admin or blogger."""
    session = require_session(authorization, jwt_service)
    return await check_studio_access_use_case.execute(
        CheckStudioAccessRequest(session=session)
    )
