"""Serializers for the booking API."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.orders.serializers import OrderSerializer


class BookingCreateSerializer(serializers.Serializer):
    hotel_id = serializers.UUIDField()
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    adults = serializers.IntegerField(min_value=1)
    children = serializers.IntegerField(min_value=0, default=0)
    guest_name = serializers.CharField(max_length=255)
    guest_email = serializers.EmailField()
    guest_phone = serializers.CharField(required=False, allow_blank=True, max_length=30, default="")
    special_requests = serializers.CharField(required=False, allow_blank=True, default="")


class BookingCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, default="")


class BookingSerializer(OrderSerializer):
    """A booking is a hotel order; the hotel item is exposed as ``hotel``."""

    hotel = serializers.SerializerMethodField()

    class Meta(OrderSerializer.Meta):
        fields = OrderSerializer.Meta.fields + ["hotel"]
        read_only_fields = fields

    def get_hotel(self, obj) -> dict | None:
        item = next(iter(obj.items.all()), None)
        if item is None:
            return None
        return {
            "id": item.hotel_id,
            "name": item.product_name,
            "slug": obj.booking_details.get("hotel_slug"),
            "location": obj.booking_details.get("hotel_location"),
            "nightly_price": item.price,
            "nights": item.quantity,
        }
