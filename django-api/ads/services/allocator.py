"""Ad placement for calendar views.

`place_ads` is a pure function of the calendar context and a catalog
snapshot. When more ads qualify than there are slots, the earliest-created
ads win, with the ad ID as tie-break, so the same inputs always produce the
same ads in the same order.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from ads.domain import EVENTS_PER_AD_SLOT, Ad, CalendarContext

_COLLECTION_TYPES = (list, tuple, set, frozenset)


def max_ad_slots(event_count: int) -> int:
    if event_count < 0:
        raise ValueError("event_count cannot be negative")
    return event_count // EVENTS_PER_AD_SLOT


def criterion_satisfied(required: Any, actual: Any) -> bool:
    """Check one targeting requirement against one viewer attribute.

    - callable requirement: predicate over the attribute
    - collection requirement: any member satisfies
    - collection attribute: requirement is a member
    - otherwise: equality
    """
    if callable(required):
        return bool(required(actual))
    if isinstance(required, _COLLECTION_TYPES):
        return any(criterion_satisfied(option, actual) for option in required)
    if isinstance(actual, _COLLECTION_TYPES):
        return any(required == member for member in actual)
    return required == actual


def matches_targeting(criteria: Mapping[str, Any], interests: Mapping[str, Any]) -> bool:
    # A criterion key missing from the interests is a non-match, never a wildcard.
    return all(
        key in interests and criterion_satisfied(required, interests[key])
        for key, required in criteria.items()
    )


def selection_key(ad: Ad) -> tuple[datetime, str]:
    return (ad.created_at, str(ad.id))


def eligible_candidates(calendar: CalendarContext, catalog: Iterable[Ad]) -> list[Ad]:
    """Eligible, matching ads in selection order, without duplicate IDs."""
    candidates: list[Ad] = []
    seen = set()
    for ad in sorted(catalog, key=selection_key):
        if ad.id in seen:
            continue
        if ad.is_eligible and matches_targeting(ad.target_criteria, calendar.user_interests):
            seen.add(ad.id)
            candidates.append(ad)
    return candidates


def place_ads(calendar: CalendarContext, catalog: Iterable[Ad]) -> list[Ad]:
    """Return the ads to show in a calendar view.

    Exactly min(max_ad_slots(event_count), number of candidates) ads.
    The catalog is not modified; impressions are counted separately.
    """
    limit = max_ad_slots(calendar.event_count)
    if limit == 0:
        return []
    return eligible_candidates(calendar, catalog)[:limit]
