"""In-memory record store for collectibles and session photos."""

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from datetime import UTC, datetime

from proof_of_vibes.domain.collectibles import CollectibleDraft, CollectibleRecord
from proof_of_vibes.domain.errors import ConflictError
from proof_of_vibes.domain.identifiers import new_claim_token
from proof_of_vibes.domain.photos import PhotoRecord
from proof_of_vibes.services.admin import AdminRepository
from proof_of_vibes.services.collectibles import CollectibleRepository
from proof_of_vibes.services.photos import PhotoRepository

_IMMUTABLE_FIELDS = {"id", "claim_token", "created_at"}


@dataclass
class InMemoryRecordStore(CollectibleRepository, PhotoRepository, AdminRepository):
    """Process-local store; state is lost on restart.

    Ids come from counters that only move forward, so an id is never handed
    out twice, not even after ``reset_user_data``. Every public method takes
    the same re-entrant lock, and ``transaction`` lets callers hold it across
    several calls.
    """

    _collectibles: dict[int, CollectibleRecord]
    _claim_index: dict[str, int]
    _photos: dict[int, PhotoRecord]
    _seed_records: dict[int, CollectibleRecord]

    def __init__(self, seed: Iterable[CollectibleDraft] = ()) -> None:
        self._lock = threading.RLock()
        self._collectibles = {}
        self._claim_index = {}
        self._photos = {}
        self._next_collectible_id = 1
        self._next_photo_id = 1
        self._seed_records = {}
        for draft in seed:
            record = self.create_collectible(draft)
            self._seed_records[record.id] = record

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the store lock for the duration of the block."""
        with self._lock:
            yield

    def create_collectible(self, draft: CollectibleDraft) -> CollectibleRecord:
        """Insert a record, assigning id, claim token and creation time."""
        with self._lock:
            claim_token = draft.claim_token or new_claim_token()
            if claim_token in self._claim_index:
                raise ConflictError("Claim token already in use")
            record = CollectibleRecord(
                id=self._next_collectible_id,
                image_url=draft.image_url,
                template=draft.template,
                vibes=tuple(draft.vibes),
                claim_token=claim_token,
                created_at=draft.created_at or datetime.now(tz=UTC),
                message=draft.message,
                claimed=draft.claimed,
                claim_email=draft.claim_email,
                recipient_name=draft.recipient_name,
                claimed_at=draft.claimed_at,
                collection_id=draft.collection_id,
                master_id=draft.master_id,
                edition_number=draft.edition_number,
                edition_count=draft.edition_count,
                certificate_id=draft.certificate_id,
                event_name=draft.event_name,
                event_date=draft.event_date,
                chain_status=draft.chain_status,
            )
            self._next_collectible_id += 1
            self._collectibles[record.id] = record
            self._claim_index[claim_token] = record.id
            return record

    def get_collectible(self, collectible_id: int) -> CollectibleRecord | None:
        """Return a record by id, if present."""
        with self._lock:
            return self._collectibles.get(collectible_id)

    def get_by_claim_token(self, token: str) -> CollectibleRecord | None:
        """Return the record holding the claim token, if present."""
        with self._lock:
            collectible_id = self._claim_index.get(token)
            if collectible_id is None:
                return None
            return self._collectibles.get(collectible_id)

    def update_collectible(
        self, collectible_id: int, **changes: object
    ) -> CollectibleRecord | None:
        """Shallow-merge changes into a record; unspecified fields are kept."""
        locked = _IMMUTABLE_FIELDS.intersection(changes)
        if locked:
            raise ValueError(f"Cannot update immutable fields: {sorted(locked)}")
        with self._lock:
            current = self._collectibles.get(collectible_id)
            if current is None:
                return None
            if current.collection_id is not None and changes.get(
                "collection_id", current.collection_id
            ) != current.collection_id:
                raise ConflictError("Collection id cannot change once set")
            updated = replace(current, **changes)
            self._collectibles[collectible_id] = updated
            return updated

    def list_collectibles(self, limit: int, offset: int) -> list[CollectibleRecord]:
        """Return records newest first."""
        return self.all_collectibles()[offset : offset + limit]

    def all_collectibles(self) -> list[CollectibleRecord]:
        """Return every record newest first, ties broken by newest id."""
        with self._lock:
            records = list(self._collectibles.values())
        return sorted(
            records, key=lambda record: (record.created_at, record.id), reverse=True
        )

    def create_photo(self, session_id: str, image_data: str) -> PhotoRecord:
        """Store a session photo."""
        with self._lock:
            photo = PhotoRecord(
                id=self._next_photo_id,
                session_id=session_id,
                image_data=image_data,
                created_at=datetime.now(tz=UTC),
            )
            self._next_photo_id += 1
            self._photos[photo.id] = photo
            return photo

    def list_photos(self, session_id: str) -> list[PhotoRecord]:
        """Return a session's photos in capture order."""
        with self._lock:
            return [p for p in self._photos.values() if p.session_id == session_id]

    def delete_session_photos(self, session_id: str) -> int:
        """Delete a session's photos and return how many were removed."""
        with self._lock:
            doomed = [p.id for p in self._photos.values() if p.session_id == session_id]
            for photo_id in doomed:
                del self._photos[photo_id]
            return len(doomed)

    def count_photos(self) -> int:
        """Return the number of stored photos."""
        with self._lock:
            return len(self._photos)

    def reset_user_data(self) -> tuple[int, int]:
        """Remove every non-seed collectible and all photos.

        Seed records go back to their initial state, so claims and fanouts
        made on them are undone.
        """
        with self._lock:
            doomed = [
                cid for cid in self._collectibles if cid not in self._seed_records
            ]
            for collectible_id in doomed:
                record = self._collectibles.pop(collectible_id)
                self._claim_index.pop(record.claim_token, None)
            self._collectibles.update(self._seed_records)
            removed_photos = len(self._photos)
            self._photos.clear()
            return len(doomed), removed_photos
