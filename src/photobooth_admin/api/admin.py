"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from photobooth_admin.api.schemas import (
    DeleteOneRequest,
    serialize_blob,
    serialize_bulk_result,
    serialize_daily_counts,
    serialize_overview,
    serialize_record,
    serialize_session,
)
from photobooth_admin.domain.photos import PhotoKind

if TYPE_CHECKING:
    from photobooth_admin.containers import AppContainer


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("/delete-one")
def delete_one(payload: DeleteOneRequest, request: Request) -> dict[str, object]:
    """Delete a single photo record and its file."""
    container: AppContainer = request.app.state.container
    result = container.deletion_service.delete_one(payload.id, payload.type)
    return {
        "success": True,
        "deleted": serialize_record(result.record),
        "file": serialize_blob(result.blob),
    }


@router.api_route("/delete-all", methods=["POST", "DELETE"])
def delete_all(request: Request) -> dict[str, object]:
    """Delete every photo record and attempt to remove every file."""
    container: AppContainer = request.app.state.container
    return serialize_bulk_result(container.deletion_service.delete_all())


@router.get("/sessions")
def list_sessions(request: Request) -> dict[str, object]:
    """Return distinct photo sessions, newest first."""
    container: AppContainer = request.app.state.container
    sessions = container.session_service.list_sessions()
    return {
        "success": True,
        "sessions": [serialize_session(summary) for summary in sessions],
    }


@router.get("/sessions/count")
def count_sessions(request: Request) -> dict[str, object]:
    """Return the number of distinct photo sessions."""
    container: AppContainer = request.app.state.container
    return {"success": True, "count": container.session_service.count_sessions()}


@router.get("/sessions/{session_id}/photos")
def list_session_photos(session_id: str, request: Request) -> dict[str, object]:
    """Return every photo of a session across all photo kinds."""
    container: AppContainer = request.app.state.container
    photos = container.photo_service.list_session_photos(session_id)
    return {
        "success": True,
        "count": len(photos),
        "photos": [serialize_record(photo) for photo in photos],
    }


@router.get("/queue")
def next_queue(
    request: Request,
    session_id: str = Query(alias="sessionId"),
    kind: str = Query(default=PhotoKind.PHOTO.value, alias="type"),
) -> dict[str, int]:
    """Return the next queue number for a session."""
    container: AppContainer = request.app.state.container
    next_number = container.photo_service.next_queue_number(
        PhotoKind.parse(kind), session_id
    )
    return {"nextQueue": next_number}


@router.get("/stats")
def stats(request: Request) -> dict[str, object]:
    """Return counters for the admin dashboard."""
    container: AppContainer = request.app.state.container
    overview = container.stats_service.get_overview()
    return {"success": True, "stats": serialize_overview(overview)}


@router.get("/stats/photos-by-date")
def photos_by_date(request: Request) -> dict[str, object]:
    """Return per-kind photo counts by creation day for dashboard charts."""
    container: AppContainer = request.app.state.container
    grouped = container.stats_service.photos_by_date()
    return {"success": True, "data": serialize_daily_counts(grouped)}
