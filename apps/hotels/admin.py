from django.contrib import admin

from .models import Hotel


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ("name", "city", "country", "price", "special_offer", "featured", "popular", "is_active")
    list_filter = ("special_offer", "featured", "popular", "is_active", "country")
    search_fields = ("name", "slug", "city", "location")
    prepopulated_fields = {"slug": ("name",)}
