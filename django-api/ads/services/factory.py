from functools import lru_cache

from django.conf import settings

from ads.services.ad_service import AdService
from ads.stores.django_store import DjangoAdStore
from ads.stores.memory_store import InMemoryAdStore


@lru_cache(maxsize=1)
def get_ad_service() -> AdService:
    if settings.EVENT_STORE == "memory":
        return AdService(InMemoryAdStore())
    return AdService(DjangoAdStore())
