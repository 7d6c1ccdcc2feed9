"""Collectible persistence interface and fabrication service."""

import logging
from contextlib import AbstractContextManager
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from proof_of_vibes.domain.collectibles import CollectibleDraft, CollectibleRecord
from proof_of_vibes.domain.errors import FieldError, ValidationError
from proof_of_vibes.domain.identifiers import is_valid_email, new_certificate_id

logger = logging.getLogger(__name__)


class CollectibleRepository(Protocol):
    """Persistence interface for collectible records."""

    def transaction(self) -> AbstractContextManager[None]:
        """Hold the store lock for a multi-step read/write sequence."""

    def create_collectible(self, draft: CollectibleDraft) -> CollectibleRecord:
        """Insert a record and return it with its id assigned."""

    def get_collectible(self, collectible_id: int) -> CollectibleRecord | None:
        """Return a record by id, if present."""

    def get_by_claim_token(self, token: str) -> CollectibleRecord | None:
        """Return the record holding the claim token, if present."""

    def update_collectible(
        self, collectible_id: int, **changes: object
    ) -> CollectibleRecord | None:
        """Merge changes into a record and return the updated record."""

    def list_collectibles(self, limit: int, offset: int) -> list[CollectibleRecord]:
        """Return records newest first."""

    def all_collectibles(self) -> list[CollectibleRecord]:
        """Return every record newest first."""


@dataclass
class FabricationService:
    """Creates the primary collectible for each submitted photo."""

    repository: CollectibleRepository
    event_name: str
    certificate_prefix: str

    def fabricate(self, drafts: list[CollectibleDraft]) -> list[CollectibleRecord]:
        """Validate the whole batch, then create one record per draft."""
        if not drafts:
            raise ValidationError(
                "No digital collectibles to create",
                [FieldError("items", "At least one item is required")],
            )
        errors: list[FieldError] = []
        for index, draft in enumerate(drafts):
            errors.extend(_validate_draft(index, draft))
        if errors:
            raise ValidationError("Invalid digital collectible data", errors)

        now = datetime.now(tz=UTC)
        created = []
        with self.repository.transaction():
            for draft in drafts:
                record = self.repository.create_collectible(
                    CollectibleDraft(
                        image_url=draft.image_url.strip(),
                        template=draft.template.strip(),
                        vibes=tuple(draft.vibes),
                        message=draft.message,
                        claim_email=draft.claim_email,
                        certificate_id=new_certificate_id(
                            self.certificate_prefix, now
                        ),
                        event_name=self.event_name,
                        event_date=now.date(),
                        chain_status=draft.chain_status,
                    )
                )
                created.append(record)
        logger.info(
            "Fabricated collectibles",
            extra={"collectible_ids": [record.id for record in created]},
        )
        return created


def _validate_draft(index: int, draft: CollectibleDraft) -> list[FieldError]:
    prefix = f"items.{index}"
    errors = []
    if not draft.image_url or not draft.image_url.strip():
        errors.append(FieldError(f"{prefix}.imageUrl", "Image URL is required"))
    if not draft.template or not draft.template.strip():
        errors.append(FieldError(f"{prefix}.template", "Template is required"))
    if draft.vibes is None:
        errors.append(FieldError(f"{prefix}.vibes", "Vibes are required"))
    if draft.claim_email and not is_valid_email(draft.claim_email):
        errors.append(FieldError(f"{prefix}.claimEmail", "Invalid email address"))
    return errors
