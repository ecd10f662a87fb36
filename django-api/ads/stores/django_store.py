"""Django ORM implementation of the AdStore."""

from django.db import transaction
from django.db.models import F, PositiveBigIntegerField
from django.db.models.functions import Greatest

from ads import models as orm
from ads.domain import Ad, AdId
from ads.stores.interfaces import AdStore


def _to_domain(row: orm.Ad) -> Ad:
    return Ad(
        id=AdId(row.id),
        business_id=row.business_id,
        title=row.title,
        created_at=row.created_at,
        target_criteria=row.target_criteria,
        view_count=row.view_count,
        active=row.active,
        view_budget=row.view_budget,
    )


class DjangoAdStore(AdStore):
    """Database-backed ad store using Django ORM."""

    def list_active_ads(self) -> list[Ad]:
        return [_to_domain(row) for row in orm.Ad.objects.filter(active=True)]

    def get_ad(self, ad_id: AdId) -> Ad | None:
        row = orm.Ad.objects.filter(id=ad_id.value).first()
        return _to_domain(row) if row else None

    @transaction.atomic
    def save_ad(self, ad: Ad) -> None:
        fields = {
            "business_id": ad.business_id,
            "title": ad.title,
            "target_criteria": dict(ad.target_criteria),
            "view_budget": ad.view_budget,
            "active": ad.active,
            "created_at": ad.created_at,
        }
        updated = orm.Ad.objects.filter(id=ad.id.value).update(
            view_count=Greatest(
                F("view_count"), ad.view_count, output_field=PositiveBigIntegerField()
            ),
            **fields,
        )
        if not updated:
            orm.Ad.objects.create(id=ad.id.value, view_count=ad.view_count, **fields)

    def increment_view_count(self, ad_id: AdId) -> bool:
        updated = orm.Ad.objects.filter(id=ad_id.value).update(view_count=F("view_count") + 1)
        return updated > 0
