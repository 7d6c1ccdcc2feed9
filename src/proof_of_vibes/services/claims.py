"""Claim resolution for collectibles."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from proof_of_vibes.domain.collectibles import CollectibleRecord
from proof_of_vibes.domain.errors import (
    ConflictError,
    FieldError,
    NotFoundError,
    ValidationError,
)
from proof_of_vibes.domain.identifiers import claim_certificate_id, is_valid_email
from proof_of_vibes.services.collectibles import CollectibleRepository

logger = logging.getLogger(__name__)


@dataclass
class ClaimService:
    """Moves a collectible from unclaimed to claimed, once."""

    repository: CollectibleRepository
    certificate_prefix: str
    default_recipient_name: str

    def claim(
        self,
        token: str,
        email: str | None = None,
        recipient_name: str | None = None,
    ) -> CollectibleRecord:
        """Claim the collectible holding the token."""
        if not token or not token.strip():
            raise ValidationError(
                "Claim token is required",
                [FieldError("token", "Claim token is required")],
            )
        if email and not is_valid_email(email):
            raise ValidationError(
                "Invalid email address", [FieldError("email", "Invalid email address")]
            )

        with self.repository.transaction():
            record = self.repository.get_by_claim_token(token.strip())
            if record is None:
                raise NotFoundError("Digital collectible not found")
            if record.claimed:
                raise ConflictError("This digital collectible has already been claimed")

            now = datetime.now(tz=UTC)
            updated = self.repository.update_collectible(
                record.id,
                claimed=True,
                claimed_at=now,
                claim_email=email.strip() if email else record.claim_email,
                recipient_name=recipient_name or self.default_recipient_name,
                certificate_id=record.certificate_id
                or claim_certificate_id(self.certificate_prefix, record.id, now),
            )
        if updated is None:
            raise NotFoundError("Digital collectible not found")
        logger.info("Collectible claimed", extra={"collectible_id": record.id})
        return updated
