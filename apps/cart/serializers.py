"""Serializers for cart endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.catalog.models import Product, ProductVariant
from apps.catalog.serializers import VARIANT_ATTRIBUTE_SCHEMA
from shared.api.fields import TypedMapField

from .models import CartItem


class CartProductSerializer(serializers.ModelSerializer):
    image = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = ["id", "name", "slug", "price", "compare_price", "is_active", "image"]
        read_only_fields = fields

    def get_image(self, obj: Product) -> str | None:
        image = obj.main_image
        return image.url if image else None


class CartVariantSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductVariant
        fields = ["id", "name", "sku", "price", "image", "attributes"]
        read_only_fields = fields


class CartItemSerializer(serializers.ModelSerializer):
    product = CartProductSerializer(read_only=True)
    variant = CartVariantSerializer(read_only=True)
    unit_price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = CartItem
        fields = [
            "id",
            "product",
            "variant",
            "quantity",
            "price",
            "unit_price",
            "line_total",
            "attributes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CartSummarySerializer(serializers.Serializer):
    items = CartItemSerializer(many=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
    item_count = serializers.IntegerField()


class AddToCartSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    variant_id = serializers.UUIDField(required=False, allow_null=True)
    quantity = serializers.IntegerField(min_value=1, default=1)
    attributes = TypedMapField(VARIANT_ATTRIBUTE_SCHEMA, required=False)


class UpdateCartItemSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)


class MergeCartSerializer(serializers.Serializer):
    session_id = serializers.CharField(max_length=255, required=False, allow_blank=True)
