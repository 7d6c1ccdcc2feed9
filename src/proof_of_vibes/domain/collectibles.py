"""Domain models for digital collectibles."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class ChainStatus:
    """Simulated on-chain status shown alongside a collectible."""

    status: str
    minted_at: datetime | None = None
    recipient_wallet: str | None = None


@dataclass(frozen=True)
class Recipient:
    """Someone an edition is addressed to."""

    email: str | None
    name: str | None = None


@dataclass(frozen=True)
class CollectibleDraft:
    """Input for creating a collectible record."""

    image_url: str
    template: str
    vibes: tuple[str, ...]
    message: str | None = None
    claim_token: str | None = None
    claimed: bool = False
    claim_email: str | None = None
    recipient_name: str | None = None
    claimed_at: datetime | None = None
    collection_id: str | None = None
    master_id: int | None = None
    edition_number: int | None = None
    edition_count: int | None = None
    certificate_id: str | None = None
    event_name: str | None = None
    event_date: date | None = None
    chain_status: ChainStatus | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class CollectibleRecord:
    """A stored digital collectible."""

    id: int
    image_url: str
    template: str
    vibes: tuple[str, ...]
    claim_token: str
    created_at: datetime
    message: str | None = None
    claimed: bool = False
    claim_email: str | None = None
    recipient_name: str | None = None
    claimed_at: datetime | None = None
    collection_id: str | None = None
    master_id: int | None = None
    edition_number: int | None = None
    edition_count: int | None = None
    certificate_id: str | None = None
    event_name: str | None = None
    event_date: date | None = None
    chain_status: ChainStatus | None = None
