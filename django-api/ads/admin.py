from django.contrib import admin

from ads.models import Ad


@admin.register(Ad)
class AdAdmin(admin.ModelAdmin):
    list_display = ["title", "business_id", "active", "view_count", "view_budget", "created_at"]
    list_filter = ["active"]
    search_fields = ["title", "business_id"]
    readonly_fields = ["view_count"]
