"""Edition fanout: turn master collectibles into numbered edition batches."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from proof_of_vibes.domain.collectibles import (
    CollectibleDraft,
    CollectibleRecord,
    Recipient,
)
from proof_of_vibes.domain.errors import (
    ConflictError,
    FieldError,
    NotFoundError,
    ValidationError,
)
from proof_of_vibes.domain.identifiers import (
    edition_certificate_id,
    is_valid_email,
    new_certificate_id,
    new_edition_collection_id,
)
from proof_of_vibes.services.collectibles import CollectibleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FanoutResult:
    """Records touched by a fanout call plus a user-facing summary."""

    collection_id: str
    items: list[CollectibleRecord]
    message: str


@dataclass
class EditionFanoutService:
    """Creates numbered editions that share one collection id.

    The master becomes edition 1 of N and editions 2..N are new records cloned
    from it. ``recipients[i - 1]`` is bound to edition ``i``; recipients
    without an email are not bound and extra recipients are ignored. When
    several masters are given they share the collection id and each gets its
    own 1..N numbering.
    """

    repository: CollectibleRepository
    event_name: str
    certificate_prefix: str
    default_recipient_name: str
    max_edition_count: int = 50

    def fanout(
        self,
        master_ids: list[int],
        edition_count: int,
        recipients: list[Recipient] | None = None,
    ) -> FanoutResult:
        """Tag each master as edition 1 and create the remaining editions."""
        recipients = list(recipients or [])
        self._validate(master_ids, edition_count, recipients)

        now = datetime.now(tz=UTC)
        collection_id = new_edition_collection_id(now)
        items: list[CollectibleRecord] = []
        sent_to: list[str] = []
        with self.repository.transaction():
            masters = self._load_masters(master_ids)
            if not masters:
                raise NotFoundError("None of the master collectibles exist")
            for master in masters:
                batch, bound = self._fanout_master(
                    master, edition_count, recipients, collection_id, now
                )
                items.extend(batch)
                sent_to.extend(bound)

        logger.info(
            "Created edition batch",
            extra={
                "collection_id": collection_id,
                "master_ids": [master.id for master in masters],
                "edition_count": edition_count,
            },
        )
        return FanoutResult(
            collection_id=collection_id,
            items=items,
            message=self._summary(edition_count, sent_to),
        )

    def _validate(
        self, master_ids: list[int], edition_count: int, recipients: list[Recipient]
    ) -> None:
        errors: list[FieldError] = []
        if not master_ids:
            errors.append(FieldError("masterIds", "Collectible IDs are required"))
        if (
            isinstance(edition_count, bool)
            or not isinstance(edition_count, int)
            or not 1 <= edition_count <= self.max_edition_count
        ):
            errors.append(
                FieldError(
                    "editionCount",
                    f"Edition count must be between 1 and {self.max_edition_count}",
                )
            )
        for index, recipient in enumerate(recipients):
            if recipient.email and not is_valid_email(recipient.email):
                errors.append(
                    FieldError(f"recipients.{index}.email", "Invalid email address")
                )
        if errors:
            raise ValidationError("Invalid edition request", errors)

    def _load_masters(self, master_ids: list[int]) -> list[CollectibleRecord]:
        masters = []
        seen: set[int] = set()
        for master_id in master_ids:
            if master_id in seen:
                continue
            seen.add(master_id)
            master = self.repository.get_collectible(master_id)
            if master is None:
                logger.warning(
                    "Skipping unknown master collectible",
                    extra={"collectible_id": master_id},
                )
                continue
            if master.collection_id is not None:
                raise ConflictError(
                    f"Collectible {master_id} already belongs to collection "
                    f"{master.collection_id}"
                )
            masters.append(master)
        return masters

    def _fanout_master(
        self,
        master: CollectibleRecord,
        edition_count: int,
        recipients: list[Recipient],
        collection_id: str,
        now: datetime,
    ) -> tuple[list[CollectibleRecord], list[str]]:
        """Return the batch and the recipient emails bound to it."""
        changes: dict[str, object] = {
            "collection_id": collection_id,
            "edition_number": 1,
            "edition_count": edition_count,
            "master_id": master.id,
            "certificate_id": master.certificate_id
            or new_certificate_id(self.certificate_prefix, now),
        }
        # A claimed master keeps its owner.
        master_fields = {} if master.claimed else self._recipient_fields(recipients, 1)
        changes.update(master_fields)
        bound = [master_fields["claim_email"]] if master_fields else []
        tagged = self.repository.update_collectible(master.id, **changes)
        batch = [tagged or master]

        for edition_number in range(2, edition_count + 1):
            recipient_fields = self._recipient_fields(recipients, edition_number)
            if recipient_fields:
                bound.append(recipient_fields["claim_email"])
            batch.append(
                self.repository.create_collectible(
                    CollectibleDraft(
                        image_url=master.image_url,
                        template=master.template,
                        vibes=master.vibes,
                        message=master.message,
                        collection_id=collection_id,
                        master_id=master.id,
                        edition_number=edition_number,
                        edition_count=edition_count,
                        certificate_id=edition_certificate_id(
                            self.certificate_prefix, master.id, edition_number, now
                        ),
                        event_name=master.event_name or self.event_name,
                        event_date=now.date(),
                        claim_email=recipient_fields.get("claim_email"),
                        recipient_name=recipient_fields.get("recipient_name"),
                    )
                )
            )
        return batch, bound

    def _recipient_fields(
        self, recipients: list[Recipient], edition_number: int
    ) -> dict[str, str]:
        if edition_number > len(recipients):
            return {}
        recipient = recipients[edition_number - 1]
        if not recipient.email:
            return {}
        return {
            "claim_email": recipient.email.strip(),
            "recipient_name": recipient.name or self.default_recipient_name,
        }

    def _summary(self, edition_count: int, sent_to: list[str]) -> str:
        emails = list(dict.fromkeys(sent_to))
        if emails:
            return f"Your {self.event_name} editions have been sent to " + ", ".join(
                emails
            )
        return (
            f"Your limited edition of {edition_count} {self.event_name} "
            "collectibles has been created"
        )
