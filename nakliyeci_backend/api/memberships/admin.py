from django.contrib import admin

from .models import MembershipRequest


@admin.register(MembershipRequest)
class MembershipRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "company_name", "phone", "email", "status", "created_at")
    list_filter = ("status", "created_at")
    search_fields = ("name", "company_name", "phone", "email")
    ordering = ("-created_at",)
    list_per_page = 50
