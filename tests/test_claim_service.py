"""Tests for claim resolution."""

from datetime import UTC, datetime

import pytest

from proof_of_vibes.adapters.memory_store import InMemoryRecordStore
from proof_of_vibes.domain.collectibles import Recipient
from proof_of_vibes.domain.errors import ConflictError, NotFoundError, ValidationError
from proof_of_vibes.services.claims import ClaimService
from proof_of_vibes.services.editions import EditionFanoutService
from tests.conftest import fabricate_one, make_draft


@pytest.fixture
def claim_service(store: InMemoryRecordStore) -> ClaimService:
    return ClaimService(
        repository=store,
        certificate_prefix="POV",
        default_recipient_name="Event Attendee",
    )


def test_claim_unknown_token_is_not_found(claim_service: ClaimService) -> None:
    with pytest.raises(NotFoundError):
        claim_service.claim("missing-token")


def test_claim_marks_record_claimed(
    store: InMemoryRecordStore, claim_service: ClaimService
) -> None:
    record = fabricate_one(store)
    before = datetime.now(tz=UTC)

    claimed = claim_service.claim(
        record.claim_token, email="guest@x.com", recipient_name="Guest"
    )

    assert claimed.claimed is True
    assert claimed.claimed_at is not None
    assert claimed.claimed_at >= before
    assert claimed.claim_email == "guest@x.com"
    assert claimed.recipient_name == "Guest"
    assert store.get_collectible(record.id) == claimed


def test_claim_twice_conflicts_without_overwriting(
    store: InMemoryRecordStore, claim_service: ClaimService
) -> None:
    record = fabricate_one(store)
    first = claim_service.claim(
        record.claim_token, email="first@x.com", recipient_name="First"
    )

    with pytest.raises(ConflictError):
        claim_service.claim(
            record.claim_token, email="second@x.com", recipient_name="Second"
        )

    stored = store.get_collectible(record.id)
    assert stored.claim_email == "first@x.com"
    assert stored.recipient_name == "First"
    assert stored.claimed_at == first.claimed_at


def test_claim_defaults_recipient_name_and_keeps_bound_email(
    store: InMemoryRecordStore,
    claim_service: ClaimService,
    fanout_service: EditionFanoutService,
) -> None:
    master = fabricate_one(store)
    editions = fanout_service.fanout(
        [master.id], 2, [Recipient(email="a@x.com"), Recipient(email="b@x.com")]
    ).items

    claimed = claim_service.claim(editions[1].claim_token)

    assert claimed.claim_email == "b@x.com"
    assert claimed.recipient_name == "Event Attendee"
    assert claimed.edition_number == 2
    assert claimed.collection_id == editions[0].collection_id


def test_claim_keeps_existing_certificate_id(
    store: InMemoryRecordStore, claim_service: ClaimService
) -> None:
    record = fabricate_one(store)

    claimed = claim_service.claim(record.claim_token)

    assert claimed.certificate_id == record.certificate_id


def test_claim_assigns_certificate_id_when_missing(
    store: InMemoryRecordStore, claim_service: ClaimService
) -> None:
    record = store.create_collectible(make_draft())

    claimed = claim_service.claim(record.claim_token)

    assert claimed.certificate_id is not None
    assert claimed.certificate_id.startswith(f"POV-{record.id}-")


def test_claim_requires_token(claim_service: ClaimService) -> None:
    with pytest.raises(ValidationError):
        claim_service.claim("  ")


def test_claim_rejects_invalid_email(
    store: InMemoryRecordStore, claim_service: ClaimService
) -> None:
    record = fabricate_one(store)

    with pytest.raises(ValidationError):
        claim_service.claim(record.claim_token, email="not-an-email")

    assert store.get_collectible(record.id).claimed is False
