"""Admin registrations for orders."""

from __future__ import annotations

from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("product_name", "variant_name", "sku", "price", "quantity", "total")


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = (
        "order_number",
        "order_type",
        "status",
        "payment_status",
        "total",
        "customer_email",
        "created_at",
    )
    list_filter = ("order_type", "status", "payment_status", "created_at")
    search_fields = ("order_number", "customer_email", "user__email")
    readonly_fields = ("order_number", "subtotal", "tax_amount", "shipping_amount", "discount_amount", "total")
    inlines = [OrderItemInline]
