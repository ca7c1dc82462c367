from __future__ import annotations

from django.contrib import admin

from .models import CartItem


@admin.register(CartItem)
class CartItemAdmin(admin.ModelAdmin):
    list_display = ("product", "variant", "user", "session_id", "quantity", "updated_at")
    search_fields = ("session_id", "user__email", "product__name")
    raw_id_fields = ("user", "product", "variant")
