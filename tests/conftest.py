"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from proof_of_vibes.adapters.memory_store import InMemoryRecordStore
from proof_of_vibes.config import Settings
from proof_of_vibes.containers import AppContainer, build_container
from proof_of_vibes.domain.collectibles import CollectibleDraft, CollectibleRecord
from proof_of_vibes.services.collectibles import FabricationService
from proof_of_vibes.services.editions import EditionFanoutService


def make_draft(**overrides: object) -> CollectibleDraft:
    """Return a valid collectible draft with optional overrides."""
    values: dict[str, object] = {
        "image_url": "a.jpg",
        "template": "neon",
        "vibes": ("party", "friends"),
        "message": "Best night ever!",
    }
    values.update(overrides)
    return CollectibleDraft(**values)


def fabricate_one(store: InMemoryRecordStore, **overrides: object) -> CollectibleRecord:
    """Fabricate a single collectible the way the API does."""
    service = FabricationService(
        repository=store, event_name="Proof of Vibes", certificate_prefix="POV"
    )
    return service.fabricate([make_draft(**overrides)])[0]


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_token="admin-token", seed_sample_collectibles=False)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def fanout_service(store: InMemoryRecordStore) -> EditionFanoutService:
    return EditionFanoutService(
        repository=store,
        event_name="Proof of Vibes",
        certificate_prefix="POV",
        default_recipient_name="Event Attendee",
    )


@pytest.fixture
def container(settings: Settings, store: InMemoryRecordStore) -> AppContainer:
    return build_container(settings, store=store)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 5, 17, 21, 30, tzinfo=UTC)
