"""Gallery queries with presentation-only enrichment."""

from dataclasses import dataclass, replace

from proof_of_vibes.domain.collectibles import CollectibleRecord
from proof_of_vibes.domain.errors import FieldError, NotFoundError, ValidationError
from proof_of_vibes.domain.identifiers import (
    daily_collection_id,
    derived_certificate_id,
)
from proof_of_vibes.services.collectibles import CollectibleRepository


@dataclass
class GalleryService:
    """Read-side access to collectibles for the gallery UI.

    Records stored without a collection id are grouped by creation day, and
    records stored without a certificate id get one derived from their id and
    creation time. Both values are computed on the returned copies only.
    """

    repository: CollectibleRepository
    certificate_prefix: str
    max_page_size: int = 500

    def list_page(self, limit: int = 100, offset: int = 0) -> list[CollectibleRecord]:
        """Return a page of collectibles, newest first."""
        errors = []
        if limit < 1 or limit > self.max_page_size:
            errors.append(
                FieldError("limit", f"Limit must be between 1 and {self.max_page_size}")
            )
        if offset < 0:
            errors.append(FieldError("offset", "Offset must not be negative"))
        if errors:
            raise ValidationError("Invalid paging parameters", errors)
        records = self.repository.list_collectibles(limit=limit, offset=offset)
        return [self._enrich(record) for record in records]

    def get(self, collectible_id: int) -> CollectibleRecord:
        """Return a single collectible."""
        record = self.repository.get_collectible(collectible_id)
        if record is None:
            raise NotFoundError("Digital collectible not found")
        return self._enrich(record)

    def list_collection(self, collection_id: str) -> list[CollectibleRecord]:
        """Return every collectible grouped under the collection id."""
        enriched = (self._enrich(r) for r in self.repository.all_collectibles())
        return [record for record in enriched if record.collection_id == collection_id]

    def _enrich(self, record: CollectibleRecord) -> CollectibleRecord:
        changes = {}
        if record.collection_id is None:
            changes["collection_id"] = daily_collection_id(
                self.certificate_prefix, record.created_at
            )
        if record.certificate_id is None:
            changes["certificate_id"] = derived_certificate_id(
                self.certificate_prefix, record.id, record.created_at
            )
        return replace(record, **changes) if changes else record
