from django.contrib import admin

from .models import Message


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("id", "user_name", "title", "is_read", "created_at")
    list_filter = ("is_read", "created_at")
    search_fields = ("user_name", "title", "content", "user__id")
    list_select_related = ("user",)
    ordering = ("-created_at",)
    list_per_page = 50
    date_hierarchy = "created_at"
