"""Home page highlights.

Picks the staff favorites, upcoming events and catalog freshness
shown on the landing page.
"""

import random
from dataclasses import dataclass
from typing import Sequence

from motoclub.content.models import Event, Product

MAX_STAFF_PICKS = 8
MAX_UPCOMING_EVENTS = 5


@dataclass
class Highlights:
    """Landing page data.

    Attributes:
        staff_picks: Shuffled staff favorites.
        upcoming_events: Next events in store order.
        last_updated: Most recent product edit time, if any.
    """

    staff_picks: list[Product]
    upcoming_events: list[Event]
    last_updated: str | None


def build_highlights(
    products: Sequence[Product],
    events: Sequence[Event],
    rng: random.Random | None = None,
) -> Highlights:
    """Assemble landing page data.

    Args:
        products: Full product list.
        events: Events ordered by start date.
        rng: Random source for shuffling staff picks.

    Returns:
        Highlights for the home page.
    """
    rng = rng or random.Random()

    picks = [p for p in products if p.staff_favorite]
    rng.shuffle(picks)

    edit_times = [p.last_edited_time for p in products if p.last_edited_time]

    return Highlights(
        staff_picks=picks[:MAX_STAFF_PICKS],
        upcoming_events=list(events[:MAX_UPCOMING_EVENTS]),
        last_updated=max(edit_times) if edit_times else None,
    )
