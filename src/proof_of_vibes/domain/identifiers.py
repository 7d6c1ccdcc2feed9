"""Identifier helpers for claim tokens, certificates and collections."""

import re
from datetime import datetime
from uuid import uuid4

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def new_claim_token() -> str:
    """Return an unguessable claim token."""
    return str(uuid4())


def _stamp(moment: datetime) -> str:
    """Last six digits of the epoch milliseconds of ``moment``."""
    return str(int(moment.timestamp() * 1000))[-6:]


def _short_random() -> str:
    return uuid4().hex[:4]


def new_certificate_id(prefix: str, moment: datetime) -> str:
    """Certificate id issued when a collectible is fabricated."""
    return f"{prefix}-{_stamp(moment)}-{_short_random()}"


def claim_certificate_id(prefix: str, record_id: int, moment: datetime) -> str:
    """Certificate id for a record that reached a claim without one."""
    return f"{prefix}-{record_id}-{_stamp(moment)}"


def edition_certificate_id(
    prefix: str, master_id: int, edition_number: int, moment: datetime
) -> str:
    """Certificate id for a newly created edition."""
    return f"{prefix}-{master_id}-E{edition_number}-{_stamp(moment)}"


def new_edition_collection_id(moment: datetime) -> str:
    """Collection id shared by every record of one fanout call."""
    return f"edition-{_stamp(moment)}-{_short_random()}"


def daily_collection_id(prefix: str, created_at: datetime) -> str:
    """Presentation-only collection id grouping records by creation day."""
    return f"{prefix}-{created_at.strftime('%Y%m%d')}"


def derived_certificate_id(prefix: str, record_id: int, created_at: datetime) -> str:
    """Deterministic display certificate id for records stored without one."""
    return f"{prefix}-{record_id}-{_stamp(created_at)}"


def is_valid_email(value: str) -> bool:
    """Return true when the value looks like an email address."""
    return bool(_EMAIL_PATTERN.match(value.strip()))
