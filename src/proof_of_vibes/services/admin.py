"""Admin service for reporting and resets."""

import logging
from dataclasses import dataclass
from typing import Protocol

from proof_of_vibes.services.collectibles import CollectibleRepository

logger = logging.getLogger(__name__)


class AdminRepository(Protocol):
    """Persistence interface for administrative operations."""

    def reset_user_data(self) -> tuple[int, int]:
        """Drop non-seed collectibles and all photos, returning both counts."""

    def count_photos(self) -> int:
        """Return the number of stored session photos."""


@dataclass
class AdminService:
    """Service for admin dashboards."""

    admin_repository: AdminRepository
    collectible_repository: CollectibleRepository

    def summary(self) -> dict[str, object]:
        """Return store counters."""
        records = self.collectible_repository.all_collectibles()
        collections = {r.collection_id for r in records if r.collection_id is not None}
        return {
            "collectibles": len(records),
            "claimed": sum(1 for record in records if record.claimed),
            "collections": len(collections),
            "photos": self.admin_repository.count_photos(),
        }

    def reset(self) -> dict[str, int]:
        """Remove user-generated collectibles and photos."""
        removed_collectibles, removed_photos = self.admin_repository.reset_user_data()
        logger.info(
            "Reset user-generated data",
            extra={
                "removed_collectibles": removed_collectibles,
                "removed_photos": removed_photos,
            },
        )
        return {
            "removed_collectibles": removed_collectibles,
            "removed_photos": removed_photos,
        }
