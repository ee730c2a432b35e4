"""Role catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from paytrack.core.exceptions import RoleNotFoundError
from paytrack.models.roles import RoleConfig

router = APIRouter(tags=["roles"])


@router.get("/roles")
async def list_roles(request: Request) -> list[RoleConfig]:
    return request.app.state.role_source.list_roles()


@router.get("/roles/{role_id}")
async def get_role(role_id: str, request: Request) -> RoleConfig:
    role = request.app.state.role_source.get_role(role_id)
    if role is None:
        raise RoleNotFoundError(role_id)
    return role
