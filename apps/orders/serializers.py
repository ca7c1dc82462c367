"""Serializers for order endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.api.fields import StringListField

from .domain.status import OrderStatus, PaymentStatus
from .models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(read_only=True, allow_null=True)
    variant_id = serializers.UUIDField(read_only=True, allow_null=True)
    hotel_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "item_type",
            "product_id",
            "variant_id",
            "hotel_id",
            "product_name",
            "variant_name",
            "sku",
            "price",
            "quantity",
            "total",
            "weight",
            "attributes",
            "booking_dates",
        ]
        read_only_fields = fields


class OrderListSerializer(serializers.ModelSerializer):
    item_count = serializers.IntegerField(read_only=True)
    customer = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "order_number",
            "order_type",
            "status",
            "payment_status",
            "payment_method",
            "total",
            "currency",
            "customer",
            "item_count",
            "check_in",
            "check_out",
            "created_at",
        ]
        read_only_fields = fields

    def get_customer(self, obj: Order) -> dict:
        return {"name": obj.contact_name, "email": obj.contact_email}


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)
    user_id = serializers.UUIDField(read_only=True, allow_null=True)
    nights = serializers.IntegerField(read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "order_number",
            "order_type",
            "user_id",
            "status",
            "payment_status",
            "payment_method",
            "subtotal",
            "tax_amount",
            "shipping_amount",
            "discount_amount",
            "total",
            "currency",
            "coupon_code",
            "shipping_address",
            "billing_address",
            "customer_email",
            "customer_name",
            "notes",
            "tracking_number",
            "shipped_at",
            "delivered_at",
            "booking_details",
            "check_in",
            "check_out",
            "nights",
            "guests",
            "special_requests",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OrderTrackingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Order
        fields = ["id", "order_number", "status", "tracking_number", "shipped_at", "delivered_at"]
        read_only_fields = fields


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)
    tracking_number = serializers.CharField(required=False, allow_blank=True, max_length=100)


class BulkOrderStatusSerializer(OrderStatusSerializer):
    order_ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)


class PaymentStatusSerializer(serializers.Serializer):
    payment_status = serializers.ChoiceField(choices=PaymentStatus.choices)


class BulkOrderDeleteSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)


class InquiryContactSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    phone = serializers.CharField(required=False, allow_blank=True, max_length=30)


class InquirySerializer(serializers.Serializer):
    """Event inquiry sent from the public site."""

    contact = InquiryContactSerializer()
    event_type = serializers.CharField(required=False, allow_blank=True, max_length=100)
    event_date = serializers.CharField(required=False, allow_blank=True, max_length=50)
    event_start_time = serializers.CharField(required=False, allow_blank=True, max_length=50)
    event_location_type = serializers.CharField(required=False, allow_blank=True, max_length=100)
    event_full_address = serializers.CharField(required=False, allow_blank=True, max_length=500)
    number_of_guests = serializers.IntegerField(required=False, min_value=0, allow_null=True)
    party_theme = serializers.CharField(required=False, allow_blank=True, max_length=255)
    package_interest = StringListField(required=False)
    product_ids = serializers.ListField(child=serializers.UUIDField(), required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
