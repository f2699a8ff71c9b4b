from django.contrib import admin

from .models import CompanyNote, ConversionMarker, DirectoryContact


@admin.register(DirectoryContact)
class DirectoryContactAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "company_name", "phone", "email", "created_at")
    search_fields = ("name", "company_name", "phone", "email")
    ordering = ("-created_at",)
    list_per_page = 50


@admin.register(CompanyNote)
class CompanyNoteAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "type", "author", "user", "contact", "created_at")
    list_filter = ("type",)
    search_fields = ("title", "content", "user__id", "contact__name")
    list_select_related = ("user", "contact")
    ordering = ("-created_at",)


@admin.register(ConversionMarker)
class ConversionMarkerAdmin(admin.ModelAdmin):
    list_display = ("id", "contact_id", "company", "status", "note_count", "created_at", "updated_at")
    list_filter = ("status",)
    readonly_fields = ("created_at", "updated_at")
