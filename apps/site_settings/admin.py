from __future__ import annotations

from django.contrib import admin

from .models import Setting


@admin.register(Setting)
class SettingAdmin(admin.ModelAdmin):
    list_display = ("key", "category", "is_public", "updated_at")
    list_filter = ("category", "is_public")
    search_fields = ("key", "description")
