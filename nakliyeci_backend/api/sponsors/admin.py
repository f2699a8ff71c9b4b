from django.contrib import admin

from .models import Sponsor


@admin.register(Sponsor)
class SponsorAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "company_name",
        "entity_type",
        "entity_name",
        "start_date",
        "end_date",
        "is_active",
        "created_at",
    )
    list_filter = ("entity_type", "is_active")
    search_fields = ("company_name", "entity_name", "company__id")
    autocomplete_fields = ("company",)
    list_select_related = ("company",)
    ordering = ("-created_at",)
    list_per_page = 50
