"""Collectible, edition and claim endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from proof_of_vibes.api.models import (
    ClaimRequest,
    FabricateRequest,
    FanoutRequest,
    serialize_collectible,
)

if TYPE_CHECKING:
    from proof_of_vibes.containers import AppContainer

router = APIRouter(tags=["collectibles"])


@router.get("/collectibles")
async def list_collectibles(
    request: Request, limit: int | None = None, offset: int = 0
) -> dict[str, object]:
    """Return a page of collectibles, newest first."""
    container: AppContainer = request.app.state.container
    records = container.gallery_service.list_page(
        limit=container.settings.default_page_size if limit is None else limit,
        offset=offset,
    )
    return {"items": [serialize_collectible(record) for record in records]}


@router.post("/collectibles")
async def fabricate_collectibles(
    payload: FabricateRequest, request: Request
) -> dict[str, object]:
    """Create one collectible per submitted photo."""
    container: AppContainer = request.app.state.container
    records = container.fabrication_service.fabricate(
        [item.to_draft() for item in payload.items]
    )
    return {
        "message": "Your digital collectibles have been created!",
        "items": [serialize_collectible(record) for record in records],
    }


@router.post("/collectibles/claim")
async def claim_collectible(
    payload: ClaimRequest, request: Request
) -> dict[str, object]:
    """Claim a collectible with its claim token."""
    container: AppContainer = request.app.state.container
    record = container.claim_service.claim(
        payload.token, email=payload.email, recipient_name=payload.recipient_name
    )
    return {
        "message": (
            f"Your {container.settings.event_name} collectible "
            "has been claimed successfully!"
        ),
        "item": serialize_collectible(record),
    }


@router.post("/collectibles/fanout")
async def fanout_editions(
    payload: FanoutRequest, request: Request
) -> dict[str, object]:
    """Create numbered editions of one or more master collectibles."""
    container: AppContainer = request.app.state.container
    result = container.fanout_service.fanout(
        payload.master_ids, payload.edition_count, payload.to_recipients()
    )
    return {
        "message": result.message,
        "collectionId": result.collection_id,
        "items": [serialize_collectible(record) for record in result.items],
    }


@router.get("/collectibles/{collectible_id}")
async def get_collectible(collectible_id: int, request: Request) -> dict[str, object]:
    """Return a single collectible."""
    container: AppContainer = request.app.state.container
    record = container.gallery_service.get(collectible_id)
    return {"item": serialize_collectible(record)}


@router.get("/collections/{collection_id}")
async def get_collection(collection_id: str, request: Request) -> dict[str, object]:
    """Return every collectible in a collection."""
    container: AppContainer = request.app.state.container
    records = container.gallery_service.list_collection(collection_id)
    return {
        "collectionId": collection_id,
        "items": [serialize_collectible(record) for record in records],
    }
