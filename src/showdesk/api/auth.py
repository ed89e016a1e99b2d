"""Sign-up endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from showdesk.api.schemas import SignUpRequest  # noqa: TC001

if TYPE_CHECKING:
    from showdesk.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup")
async def sign_up(payload: SignUpRequest, request: Request) -> JSONResponse:
    """Create an account and tell the user to confirm their email."""
    container: AppContainer = request.app.state.container
    result = container.auth_service.sign_up(payload.email, payload.password)
    if result.success:
        return JSONResponse({"status": "ok", "message": result.message})
    return JSONResponse(
        {"status": "error", "message": result.message},
        status_code=status.HTTP_400_BAD_REQUEST,
    )
