"""Role use cases."""

from roster.application.usecase.role.update_role import (
    UpdateRoleRequest,
    UpdateRoleResponse,
    UpdateRoleUseCase,
)

__all__ = [
    "UpdateRoleRequest",
    "UpdateRoleResponse",
    "UpdateRoleUseCase",
]
