"""JSON endpoints for team and advancing views and team commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse

from showdesk.api.views import serialize_advancing_page, serialize_team_page
from showdesk.services.organizations import NotFoundError

if TYPE_CHECKING:
    from showdesk.containers import AppContainer
    from showdesk.services.team import CommandResult

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/orgs/{org_slug}/shows/{show_id}/team")
async def show_team(org_slug: str, show_id: str, request: Request) -> dict[str, object]:
    """Return assigned and available people for a show."""
    container: AppContainer = request.app.state.container
    try:
        page = container.show_team_service.get_team_page(org_slug, show_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    return serialize_team_page(page)


@router.get("/orgs/{org_slug}/advancing")
async def advancing_sessions(
    org_slug: str, request: Request, show: str | None = None
) -> dict[str, object]:
    """Return advancing sessions, optionally narrowed to one show."""
    container: AppContainer = request.app.state.container
    try:
        page = container.advancing_service.get_advancing_page(org_slug, show)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    return serialize_advancing_page(page)


@router.post("/orgs/{org_slug}/shows/{show_id}/team/{person_id}")
async def assign_person(
    org_slug: str, show_id: str, person_id: str, request: Request
) -> JSONResponse:
    """Assign a person from the organization to a show."""
    container: AppContainer = request.app.state.container
    try:
        result = container.show_team_service.assign_person(
            org_slug, show_id, person_id
        )
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    return _command_response(result)


@router.delete("/orgs/{org_slug}/shows/{show_id}/team/{person_id}")
async def unassign_person(
    org_slug: str, show_id: str, person_id: str, request: Request
) -> JSONResponse:
    """Remove a person of the organization from a show."""
    container: AppContainer = request.app.state.container
    try:
        result = container.show_team_service.unassign_person(
            org_slug, show_id, person_id
        )
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    return _command_response(result)


def _command_response(result: CommandResult) -> JSONResponse:
    if result.success:
        return JSONResponse({"status": "ok", "message": result.message})
    return JSONResponse(
        {"status": "error", "message": result.message},
        status_code=status.HTTP_400_BAD_REQUEST,
    )
