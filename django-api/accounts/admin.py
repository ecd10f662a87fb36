from django.contrib import admin

from accounts.models import CampusUser


@admin.register(CampusUser)
class CampusUserAdmin(admin.ModelAdmin):
    list_display = ["user_id", "role", "email", "preferred_channel"]
    list_filter = ["role", "preferred_channel"]
    search_fields = ["user_id", "email"]
