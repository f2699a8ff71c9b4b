from django.contrib import admin

from .models import TransportOffer


@admin.register(TransportOffer)
class TransportOfferAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "company_name",
        "origin_city",
        "destination_city",
        "vehicle_type",
        "price_try",
        "is_active",
        "posted_at",
    )
    list_filter = ("is_active", "vehicle_type", "posted_at")
    search_fields = ("company_name", "origin_city", "destination_city", "user__id")
    autocomplete_fields = ("user",)
    list_select_related = ("user",)
    ordering = ("-posted_at",)
    list_per_page = 50
    date_hierarchy = "posted_at"
