"""Tests for photobooth session photos."""

from uuid import UUID

import pytest

from proof_of_vibes.adapters.memory_store import InMemoryRecordStore
from proof_of_vibes.domain.errors import ValidationError
from proof_of_vibes.services.photos import PhotoService


def test_save_starts_session_when_missing(store: InMemoryRecordStore) -> None:
    service = PhotoService(store)

    photo = service.save("data:image/jpeg;base64,AAA")

    assert UUID(photo.session_id)
    assert service.list_session(photo.session_id) == [photo]


def test_save_appends_to_existing_session(store: InMemoryRecordStore) -> None:
    service = PhotoService(store)

    first = service.save("AAA", session_id="booth-1")
    second = service.save("BBB", session_id="booth-1")

    assert service.list_session("booth-1") == [first, second]
    assert second.id > first.id


def test_save_requires_image_data(store: InMemoryRecordStore) -> None:
    with pytest.raises(ValidationError):
        PhotoService(store).save("", session_id="booth-1")


def test_clear_session_removes_only_that_session(store: InMemoryRecordStore) -> None:
    service = PhotoService(store)
    service.save("AAA", session_id="booth-1")
    kept = service.save("BBB", session_id="booth-2")

    assert service.clear_session("booth-1") == 1
    assert service.list_session("booth-1") == []
    assert service.list_session("booth-2") == [kept]
