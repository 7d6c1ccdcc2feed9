"""Photobooth session photo endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from proof_of_vibes.api.models import PhotoIn, serialize_photo

if TYPE_CHECKING:
    from proof_of_vibes.containers import AppContainer

router = APIRouter(prefix="/photos", tags=["photos"])


@router.post("")
async def save_photo(payload: PhotoIn, request: Request) -> dict[str, object]:
    """Store a captured photo for a session."""
    container: AppContainer = request.app.state.container
    photo = container.photo_service.save(
        payload.image_data, session_id=payload.session_id
    )
    return {"item": serialize_photo(photo), "sessionId": photo.session_id}


@router.get("")
async def list_photos(
    request: Request, session_id: str = Query(alias="sessionId")
) -> dict[str, object]:
    """Return the photos captured in a session."""
    container: AppContainer = request.app.state.container
    photos = container.photo_service.list_session(session_id)
    return {"items": [serialize_photo(photo) for photo in photos]}


@router.delete("")
async def clear_photos(
    request: Request, session_id: str = Query(alias="sessionId")
) -> dict[str, object]:
    """Discard a session's photos."""
    container: AppContainer = request.app.state.container
    return {"deleted": container.photo_service.clear_session(session_id)}
