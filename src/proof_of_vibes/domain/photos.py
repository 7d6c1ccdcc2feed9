"""Domain models for photobooth sessions."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PhotoRecord:
    """A photo captured during a photobooth session."""

    id: int
    session_id: str
    image_data: str
    created_at: datetime
