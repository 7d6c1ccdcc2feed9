"""Pydantic request models and JSON serializers for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from proof_of_vibes.domain.collectibles import (
    ChainStatus,
    CollectibleDraft,
    CollectibleRecord,
    Recipient,
)
from proof_of_vibes.domain.photos import PhotoRecord


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ChainStatusPayload(_CamelModel):
    """Simulated chain status attached to a collectible."""

    status: str
    minted_at: datetime | None = Field(default=None, alias="mintedAt")
    recipient_wallet: str | None = Field(default=None, alias="recipientWallet")


class CollectibleIn(_CamelModel):
    """One photo to turn into a collectible."""

    image_url: str = Field(alias="imageUrl")
    template: str
    vibes: list[str]
    message: str | None = None
    claim_email: str | None = Field(default=None, alias="claimEmail")
    chain_status: ChainStatusPayload | None = Field(default=None, alias="chainStatus")

    def to_draft(self) -> CollectibleDraft:
        chain_status = None
        if self.chain_status is not None:
            chain_status = ChainStatus(
                status=self.chain_status.status,
                minted_at=self.chain_status.minted_at,
                recipient_wallet=self.chain_status.recipient_wallet,
            )
        return CollectibleDraft(
            image_url=self.image_url,
            template=self.template,
            vibes=tuple(self.vibes),
            message=self.message,
            claim_email=self.claim_email or None,
            chain_status=chain_status,
        )


class FabricateRequest(_CamelModel):
    """Batch of collectibles to create."""

    items: list[CollectibleIn]


class RecipientIn(_CamelModel):
    """Recipient bound to an edition by position."""

    email: str | None = None
    name: str | None = None


class FanoutRequest(_CamelModel):
    """Edition fanout request."""

    master_ids: list[int] = Field(alias="masterIds")
    edition_count: int = Field(default=1, alias="editionCount")
    recipients: list[RecipientIn] = Field(default_factory=list)

    def to_recipients(self) -> list[Recipient]:
        return [Recipient(email=r.email or None, name=r.name) for r in self.recipients]


class ClaimRequest(_CamelModel):
    """Claim a collectible by token."""

    token: str
    email: str | None = None
    recipient_name: str | None = Field(default=None, alias="recipientName")


class PhotoIn(_CamelModel):
    """Photo captured in the booth."""

    image_data: str = Field(alias="imageData")
    session_id: str | None = Field(default=None, alias="sessionId")


def serialize_collectible(record: CollectibleRecord) -> dict[str, object]:
    """Render a collectible with the camelCase keys the UI expects."""
    return {
        "id": record.id,
        "imageUrl": record.image_url,
        "message": record.message,
        "template": record.template,
        "vibes": list(record.vibes),
        "claimToken": record.claim_token,
        "claimed": record.claimed,
        "claimEmail": record.claim_email,
        "recipientName": record.recipient_name,
        "claimedAt": _isoformat(record.claimed_at),
        "collectionId": record.collection_id,
        "masterNftId": record.master_id,
        "editionNumber": record.edition_number,
        "editionCount": record.edition_count,
        "certificateId": record.certificate_id,
        "eventName": record.event_name,
        "eventDate": record.event_date.isoformat() if record.event_date else None,
        "chainStatus": _serialize_chain_status(record.chain_status),
        "createdAt": record.created_at.isoformat(),
    }


def serialize_photo(photo: PhotoRecord) -> dict[str, object]:
    return {
        "id": photo.id,
        "sessionId": photo.session_id,
        "imageData": photo.image_data,
        "createdAt": photo.created_at.isoformat(),
    }


def _serialize_chain_status(status: ChainStatus | None) -> dict[str, object] | None:
    if status is None:
        return None
    return {
        "status": status.status,
        "mintedAt": _isoformat(status.minted_at),
        "recipientWallet": status.recipient_wallet,
    }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
