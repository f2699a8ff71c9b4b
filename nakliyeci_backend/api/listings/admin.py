from django.contrib import admin

from .models import Freight


@admin.register(Freight)
class FreightAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "freight_type",
        "company_name",
        "origin_city",
        "destination_city",
        "loading_date",
        "vehicle_needed",
        "is_active",
        "posted_at",
    )
    list_filter = ("freight_type", "is_active", "shipment_scope", "is_continuous_load", "posted_at")
    search_fields = ("company_name", "contact_person", "origin_city", "destination_city", "user__id")
    autocomplete_fields = ("user",)
    list_select_related = ("user",)
    ordering = ("-posted_at",)
    list_per_page = 50
    date_hierarchy = "posted_at"
    readonly_fields = ("posted_at",)
