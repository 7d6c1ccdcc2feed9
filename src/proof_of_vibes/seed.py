"""Sample collectibles shown in the gallery of a fresh process."""

import random
from datetime import UTC, datetime, timedelta

from proof_of_vibes.domain.collectibles import CollectibleDraft

_TEMPLATES = ["classic", "neon", "retro", "minimal"]
_PHOTOS = [
    "photo-1601288496920-b6154fe3626a",
    "photo-1529156069898-49953e39b3ac",
    "photo-1617802690992-15d93263d3a9",
    "photo-1541546006121-5c3bc5e8c7b9",
    "photo-1470229722913-7c0e2dbbafd3",
    "photo-1496024840928-4c417adf211d",
    "photo-1493225457124-a3eb161ffa5f",
    "photo-1516450360452-9312f5e86fc7",
    "photo-1514525253161-7a46d19cd819",
]
_MESSAGES = [
    "Best night ever!",
    "Squad goals achieved!",
    "Mind = blown!",
    "Neon dreams!",
    "Epic adventure!",
    "Memories made!",
    "VIP experience!",
    "Dance all night!",
    "Forever vibes!",
]
_VIBES = [
    ("excited", "music"),
    ("friends", "memories"),
    ("tech", "future"),
    ("glow", "party"),
    ("adventure", "experience"),
    ("celebration", "fun"),
    ("vip", "exclusive"),
    ("dance", "nightlife"),
    ("forever", "moments"),
]
_EVENT_NAMES = ["VIP Night", "Tech Conference", "Music Festival"]


def sample_collectibles(
    default_recipient_name: str,
    certificate_prefix: str,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> list[CollectibleDraft]:
    """Build nine demo records in three collections of three.

    The first record of each collection is already claimed.
    """
    now = now or datetime.now(tz=UTC)
    rng = rng or random.Random()
    drafts = []
    samples = zip(_PHOTOS, _MESSAGES, _VIBES, strict=True)
    for index, (photo, message, vibes) in enumerate(samples):
        created_at = now - timedelta(minutes=rng.randint(5, 120))
        claimed = index % 3 == 0
        drafts.append(
            CollectibleDraft(
                image_url=f"https://images.unsplash.com/{photo}",
                template=_TEMPLATES[index % len(_TEMPLATES)],
                vibes=vibes,
                message=message,
                claimed=claimed,
                recipient_name=default_recipient_name if claimed else None,
                claimed_at=created_at + timedelta(minutes=rng.randint(1, 5))
                if claimed
                else None,
                collection_id=f"event-{index // 3 + 1}",
                certificate_id=f"{certificate_prefix}-SAMPLE-{index + 1}",
                event_name=_EVENT_NAMES[index // 3],
                event_date=now.date(),
                created_at=created_at,
            )
        )
    return drafts
