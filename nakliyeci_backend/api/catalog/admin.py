from django.contrib import admin

from .models import (
    AdminNote,
    Announcement,
    AuthDocument,
    CargoTypeOption,
    HeroSlide,
    MembershipPlan,
    TransportMode,
    VehicleTypeOption,
)


@admin.register(VehicleTypeOption, CargoTypeOption)
class NamedOptionAdmin(admin.ModelAdmin):
    list_display = ("name", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name",)


@admin.register(AuthDocument)
class AuthDocumentAdmin(admin.ModelAdmin):
    list_display = ("name", "required_for", "is_active")
    list_filter = ("required_for", "is_active")
    search_fields = ("name",)


@admin.register(TransportMode)
class TransportModeAdmin(admin.ModelAdmin):
    list_display = ("name", "applicable_to", "is_active")
    list_filter = ("applicable_to", "is_active")
    search_fields = ("name",)


@admin.register(MembershipPlan)
class MembershipPlanAdmin(admin.ModelAdmin):
    list_display = ("name", "price", "duration", "duration_unit", "is_active")
    list_filter = ("duration_unit", "is_active")
    ordering = ("price",)


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    list_display = ("title", "target_audience", "start_date", "end_date", "is_active", "created_at")
    list_filter = ("target_audience", "is_active")
    search_fields = ("title", "content")


@admin.register(AdminNote)
class AdminNoteAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "is_important", "last_modified_date")
    list_filter = ("category", "is_important")
    search_fields = ("title", "content")


@admin.register(HeroSlide)
class HeroSlideAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "order", "is_active", "created_at")
    list_filter = ("type", "is_active")
    ordering = ("order",)
