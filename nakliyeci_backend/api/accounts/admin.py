from django.contrib import admin

from .models import AdminProfile, UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "display_name",
        "email",
        "role",
        "category",
        "address_city",
        "membership_status",
        "membership_end_date",
        "is_active",
        "created_at",
    )
    list_filter = ("role", "is_active", "category", "membership_status", "address_country")
    search_fields = ("id", "email", "username", "name", "company_title", "address_city")
    readonly_fields = ("id", "sort_name", "created_at")
    ordering = ("-created_at",)
    list_per_page = 50
    date_hierarchy = "created_at"

    def display_name(self, obj):
        return obj.display_name

    display_name.short_description = "Ad / Ünvan"


@admin.register(AdminProfile)
class AdminProfileAdmin(admin.ModelAdmin):
    list_display = ("id", "username", "name", "role", "is_active", "created_at")
    list_filter = ("role", "is_active")
    search_fields = ("username", "name")
    exclude = ("password",)
    readonly_fields = ("created_at",)
