"""Ad service - catalog management, placement and impression tracking."""

from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import datetime
from typing import Any

import structlog
from django.utils import timezone

from ads.domain import Ad, AdId, CalendarContext
from ads.domain.errors import AdNotFoundError, InvalidAdIdError
from ads.services.allocator import place_ads
from ads.stores.interfaces import AdStore

logger = structlog.get_logger(__name__)


class AdService:
    """Service for calendar ad operations."""

    def __init__(self, store: AdStore, clock: Callable[[], datetime] = timezone.now) -> None:
        self._store = store
        self._clock = clock

    def create_ad(
        self,
        business_id: str,
        title: str,
        target_criteria: Mapping[str, Any] | None = None,
        view_budget: int | None = None,
    ) -> Ad:
        ad = Ad(
            id=AdId.new(),
            business_id=business_id,
            title=title,
            created_at=self._clock(),
            target_criteria=dict(target_criteria or {}),
            view_budget=view_budget,
        )
        self._store.save_ad(ad)
        logger.info("ad_created", ad_id=str(ad.id), business_id=business_id)
        return ad

    def get_ad(self, ad_id: str) -> Ad:
        """Return an ad by ID.

        Raises:
            InvalidAdIdError: If the ad_id is not a valid UUID.
            AdNotFoundError: If the ad does not exist.
        """
        ad = self._store.get_ad(self._parse_ad_id(ad_id))
        if ad is None:
            raise AdNotFoundError(ad_id)
        return ad

    def deactivate(self, ad_id: str) -> Ad:
        ad = replace(self.get_ad(ad_id), active=False)
        self._store.save_ad(ad)
        logger.info("ad_deactivated", ad_id=ad_id)
        return ad

    def place_ads(self, event_count: int, user_interests: Mapping[str, Any]) -> list[Ad]:
        """Choose ads for one calendar render from a snapshot of the catalog."""
        calendar = CalendarContext(event_count=event_count, user_interests=user_interests)
        placed = place_ads(calendar, self._store.list_active_ads())
        logger.debug("ads_placed", event_count=event_count, placed=len(placed))
        return placed

    def track_view(self, ad_id: str) -> None:
        """Count one impression. Unknown or malformed IDs are ignored."""
        try:
            parsed = self._parse_ad_id(ad_id)
        except InvalidAdIdError:
            logger.warning("view_for_invalid_ad_id", ad_id=ad_id)
            return
        if not self._store.increment_view_count(parsed):
            logger.warning("view_for_unknown_ad", ad_id=ad_id)

    def _parse_ad_id(self, ad_id: str) -> AdId:
        try:
            return AdId.from_string(ad_id)
        except (ValueError, TypeError, AttributeError):
            raise InvalidAdIdError()
