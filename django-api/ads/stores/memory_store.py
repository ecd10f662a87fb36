"""In-memory AdStore used by unit tests and the memory backend."""

import threading
from dataclasses import replace

from ads.domain import Ad, AdId
from ads.stores.interfaces import AdStore


class InMemoryAdStore(AdStore):
    def __init__(self) -> None:
        self._ads: dict[AdId, Ad] = {}
        self._lock = threading.Lock()

    def list_active_ads(self) -> list[Ad]:
        with self._lock:
            return [ad for ad in self._ads.values() if ad.active]

    def get_ad(self, ad_id: AdId) -> Ad | None:
        with self._lock:
            return self._ads.get(ad_id)

    def save_ad(self, ad: Ad) -> None:
        with self._lock:
            existing = self._ads.get(ad.id)
            if existing is not None and existing.view_count > ad.view_count:
                ad = replace(ad, view_count=existing.view_count)
            self._ads[ad.id] = ad

    def increment_view_count(self, ad_id: AdId) -> bool:
        with self._lock:
            ad = self._ads.get(ad_id)
            if ad is None:
                return False
            self._ads[ad_id] = replace(ad, view_count=ad.view_count + 1)
            return True
