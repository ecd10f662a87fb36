from django.contrib import admin

from events.models import Attendee, Event, Reference


class ReferenceInline(admin.TabularInline):
    model = Reference
    extra = 1


class AttendeeInline(admin.TabularInline):
    model = Attendee
    extra = 0
    readonly_fields = ["student_id", "registered_at"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "organizer_id", "status", "capacity", "created_at"]
    list_filter = ["status"]
    search_fields = ["title", "organizer_id"]
    inlines = [ReferenceInline, AttendeeInline]


@admin.register(Attendee)
class AttendeeAdmin(admin.ModelAdmin):
    list_display = ["student_id", "event", "registered_at"]
    list_filter = ["event"]
