from ads.domain.models import EVENTS_PER_AD_SLOT, Ad, AdId, CalendarContext

__all__ = [
    "Ad",
    "AdId",
    "CalendarContext",
    "EVENTS_PER_AD_SLOT",
]
