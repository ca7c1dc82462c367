"""Serializers validating checkout requests."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore


class CheckoutItemSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    variant_id = serializers.UUIDField(required=False, allow_null=True)
    quantity = serializers.IntegerField(min_value=1)


class OrderAddressSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    company = serializers.CharField(required=False, allow_blank=True, max_length=255)
    address1 = serializers.CharField(max_length=255)
    address2 = serializers.CharField(required=False, allow_blank=True, max_length=255)
    city = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100)
    zip_code = serializers.CharField(max_length=20)
    country = serializers.CharField(max_length=2, default="US")
    phone = serializers.CharField(required=False, allow_blank=True, max_length=20)
    email = serializers.EmailField(required=False, allow_blank=True)

    def validate_country(self, value: str) -> str:
        return value.upper()


class BaseCheckoutSerializer(serializers.Serializer):
    items = CheckoutItemSerializer(many=True, allow_empty=False)
    coupon_code = serializers.CharField(required=False, allow_blank=True, max_length=50)

    def validate_items(self, items: list[dict]) -> list[dict]:
        """Lines for the same product and variant are combined."""
        merged: dict[tuple, dict] = {}
        for item in items:
            key = (item["product_id"], item.get("variant_id"))
            if key in merged:
                merged[key]["quantity"] += item["quantity"]
            else:
                merged[key] = dict(item)
        return list(merged.values())


class CheckoutCalculateSerializer(BaseCheckoutSerializer):
    shipping_address = serializers.DictField(required=False, default=dict)


class CreateOrderSerializer(BaseCheckoutSerializer):
    shipping_address = OrderAddressSerializer()
    billing_address = OrderAddressSerializer(required=False, allow_null=True)
    payment_method = serializers.CharField(max_length=50)
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    clear_cart = serializers.BooleanField(required=False, default=True)


class GuestOrderSerializer(CreateOrderSerializer):
    customer_email = serializers.EmailField()
    customer_name = serializers.CharField(max_length=255)


class ValidateCouponSerializer(serializers.Serializer):
    coupon_code = serializers.CharField(max_length=50)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0"))
