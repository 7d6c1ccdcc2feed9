"""Dependency container wiring for the application."""

from dataclasses import dataclass

from proof_of_vibes.adapters.memory_store import InMemoryRecordStore
from proof_of_vibes.config import Settings
from proof_of_vibes.seed import sample_collectibles
from proof_of_vibes.services.admin import AdminService
from proof_of_vibes.services.claims import ClaimService
from proof_of_vibes.services.collectibles import FabricationService
from proof_of_vibes.services.editions import EditionFanoutService
from proof_of_vibes.services.gallery import GalleryService
from proof_of_vibes.services.photos import PhotoService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: InMemoryRecordStore
    fabrication_service: FabricationService
    fanout_service: EditionFanoutService
    claim_service: ClaimService
    gallery_service: GalleryService
    photo_service: PhotoService
    admin_service: AdminService


def build_container(
    settings: Settings | None = None, store: InMemoryRecordStore | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if store is None:
        seed = (
            sample_collectibles(
                default_recipient_name=resolved_settings.default_recipient_name,
                certificate_prefix=resolved_settings.certificate_prefix,
            )
            if resolved_settings.seed_sample_collectibles
            else []
        )
        store = InMemoryRecordStore(seed=seed)

    return AppContainer(
        settings=resolved_settings,
        store=store,
        fabrication_service=FabricationService(
            repository=store,
            event_name=resolved_settings.event_name,
            certificate_prefix=resolved_settings.certificate_prefix,
        ),
        fanout_service=EditionFanoutService(
            repository=store,
            event_name=resolved_settings.event_name,
            certificate_prefix=resolved_settings.certificate_prefix,
            default_recipient_name=resolved_settings.default_recipient_name,
            max_edition_count=resolved_settings.max_edition_count,
        ),
        claim_service=ClaimService(
            repository=store,
            certificate_prefix=resolved_settings.certificate_prefix,
            default_recipient_name=resolved_settings.default_recipient_name,
        ),
        gallery_service=GalleryService(
            repository=store,
            certificate_prefix=resolved_settings.certificate_prefix,
            max_page_size=resolved_settings.max_page_size,
        ),
        photo_service=PhotoService(store),
        admin_service=AdminService(
            admin_repository=store,
            collectible_repository=store,
        ),
    )
