"""Tests for container wiring and seed data."""

from datetime import UTC, datetime, timedelta
from random import Random

from proof_of_vibes.config import Settings, parse_allowed_origins
from proof_of_vibes.containers import build_container
from proof_of_vibes.seed import sample_collectibles
from tests.conftest import make_draft


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.fanout_service.max_edition_count == 50
    assert container.claim_service.repository is container.store
    assert container.store.all_collectibles() == []


def test_build_container_seeds_sample_collectibles() -> None:
    container = build_container(Settings(admin_token="admin-token"))

    records = container.store.all_collectibles()

    assert len(records) == 9
    assert {record.collection_id for record in records} == {
        "event-1",
        "event-2",
        "event-3",
    }
    assert sum(1 for record in records if record.claimed) == 3


def test_reset_keeps_seed_collectibles() -> None:
    container = build_container(Settings(admin_token="admin-token"))
    container.fabrication_service.fabricate([make_draft()])

    container.admin_service.reset()

    assert len(container.store.all_collectibles()) == 9


def test_sample_collectibles_are_claimed_consistently() -> None:
    now = datetime(2024, 5, 17, 21, 30, tzinfo=UTC)

    drafts = sample_collectibles("Event Attendee", "POV", now=now, rng=Random(7))

    for index, draft in enumerate(drafts):
        assert now - timedelta(minutes=120) <= draft.created_at <= now
        if index % 3 == 0:
            assert draft.claimed is True
            assert draft.claimed_at is not None
            assert draft.recipient_name == "Event Attendee"
        else:
            assert draft.claimed is False
            assert draft.claimed_at is None


def test_parse_allowed_origins() -> None:
    assert parse_allowed_origins("*") == ["*"]
    assert parse_allowed_origins(" https://a.test, https://b.test ,") == [
        "https://a.test",
        "https://b.test",
    ]
    assert parse_allowed_origins(None) == []
