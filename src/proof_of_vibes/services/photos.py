"""Photobooth session photo storage."""

from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from proof_of_vibes.domain.errors import FieldError, ValidationError
from proof_of_vibes.domain.photos import PhotoRecord


class PhotoRepository(Protocol):
    """Persistence interface for session photos."""

    def create_photo(self, session_id: str, image_data: str) -> PhotoRecord:
        """Store a photo and return it."""

    def list_photos(self, session_id: str) -> list[PhotoRecord]:
        """Return photos for a session in capture order."""

    def delete_session_photos(self, session_id: str) -> int:
        """Delete every photo of a session and return how many were removed."""


@dataclass
class PhotoService:
    """Application service for photobooth sessions."""

    repository: PhotoRepository

    def save(self, image_data: str, session_id: str | None = None) -> PhotoRecord:
        """Store a captured photo, starting a new session when none is given."""
        if not image_data or not image_data.strip():
            raise ValidationError(
                "Invalid photo data",
                [FieldError("imageData", "Image data is required")],
            )
        return self.repository.create_photo(
            session_id=session_id or str(uuid4()), image_data=image_data
        )

    def list_session(self, session_id: str) -> list[PhotoRecord]:
        """Return the photos captured in a session."""
        return self.repository.list_photos(session_id)

    def clear_session(self, session_id: str) -> int:
        """Discard a session's photos."""
        return self.repository.delete_session_photos(session_id)
