"""User id translation endpoint."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

router = APIRouter(tags=["users"])


class ResolvedUser(BaseModel):
    external_id: str
    user_id: str


@router.get("/{external_id}/internal-id")
async def resolve_user(external_id: str, request: Request) -> ResolvedUser:
    resolver = getattr(request.app.state, "user_resolver", None)
    if resolver is None:
        raise HTTPException(status_code=503, detail="User directory not configured")
    return ResolvedUser(external_id=external_id, user_id=resolver.resolve(external_id))
