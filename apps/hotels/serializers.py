"""Serializers for the hotel catalogue."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.core.utils import SLUG_PATTERN
from shared.api.fields import StringListField, TypedMapField

from .models import HOTEL_DETAIL_SCHEMA, Hotel


class HotelSerializer(serializers.ModelSerializer):
    slug = serializers.RegexField(SLUG_PATTERN, max_length=255, required=False, allow_blank=True)
    images = serializers.ListField(child=serializers.URLField(max_length=500), required=False)
    vip_benefits = StringListField(required=False)
    hotel_details = TypedMapField(HOTEL_DETAIL_SCHEMA, required=False)
    offer_blackout_dates = serializers.ListField(child=serializers.DateField(), required=False)
    currency = serializers.RegexField(r"^[A-Za-z]{3}$", required=False)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True)
    has_valid_offer = serializers.BooleanField(read_only=True)

    class Meta:
        model = Hotel
        fields = [
            "id",
            "name",
            "slug",
            "location",
            "city",
            "country",
            "description",
            "short_description",
            "images",
            "main_image",
            "special_offer",
            "offer_title",
            "offer_details",
            "offer_valid_until",
            "offer_booking_deadline",
            "offer_blackout_dates",
            "has_valid_offer",
            "price",
            "currency",
            "vip_benefits",
            "hotel_details",
            "featured",
            "popular",
            "display_order",
            "is_active",
            "meta_title",
            "meta_description",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "has_valid_offer", "created_at", "updated_at"]

    def validate_slug(self, value: str) -> str:
        if value and Hotel.objects.exclude(pk=getattr(self.instance, "pk", None)).filter(slug=value).exists():
            raise serializers.ValidationError("Hotel with this slug already exists.")
        return value

    def validate_offer_blackout_dates(self, value):  # type: ignore
        return sorted({day.isoformat() for day in value})


class HotelListSerializer(serializers.ModelSerializer):
    class Meta:
        model = Hotel
        fields = [
            "id",
            "name",
            "slug",
            "location",
            "city",
            "country",
            "short_description",
            "main_image",
            "price",
            "currency",
            "special_offer",
            "offer_title",
            "offer_valid_until",
            "featured",
            "popular",
            "display_order",
        ]
