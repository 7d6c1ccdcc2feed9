"""Error taxonomy shared by services and the HTTP layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single invalid input field."""

    field: str
    message: str


class CollectibleError(Exception):
    """Base class for expected collectible failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CollectibleError):
    """Malformed or missing input."""

    def __init__(self, message: str, errors: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class NotFoundError(CollectibleError):
    """Unknown record id or claim token."""


class ConflictError(CollectibleError):
    """The request conflicts with the record's current state."""
