from django.contrib import admin

from .models import Editorial, GalleryItem


@admin.register(Editorial)
class EditorialAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "status", "author", "published_at")
    list_filter = ("status", "hero_type")
    search_fields = ("title", "slug", "author")
    prepopulated_fields = {"slug": ("title",)}
    readonly_fields = ("published_at",)


@admin.register(GalleryItem)
class GalleryItemAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "featured", "status", "display_order")
    list_filter = ("category", "featured", "status")
    search_fields = ("title", "description")
