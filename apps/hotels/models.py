"""Hotel catalogue for the travel storefront."""

from __future__ import annotations

import uuid
from datetime import date

from django.core.validators import RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils import timezone  # type: ignore

from apps.core.utils import SLUG_PATTERN, unique_slug

# Keys accepted in ``Hotel.hotel_details`` and their value types.
HOTEL_DETAIL_SCHEMA = {
    "rooms": int,
    "amenities": (list, str),
    "check_in_time": str,
    "check_out_time": str,
    "star_rating": int,
    "phone": str,
    "email": str,
    "website": str,
}


class HotelQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def with_valid_offers(self, now=None):
        now = now or timezone.now()
        return self.active().filter(special_offer=True, offer_valid_until__gte=now)


class Hotel(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    slug = models.CharField(
        max_length=255,
        unique=True,
        blank=True,
        validators=[RegexValidator(SLUG_PATTERN, "Slug may contain lowercase letters, digits and hyphens.")],
    )
    location = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    country = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    short_description = models.TextField(blank=True)
    images = models.JSONField(default=list, blank=True)
    main_image = models.URLField(max_length=500, blank=True)
    special_offer = models.BooleanField(default=False)
    offer_title = models.CharField(max_length=255, blank=True)
    offer_details = models.TextField(blank=True)
    offer_valid_until = models.DateTimeField(null=True, blank=True)
    offer_booking_deadline = models.DateTimeField(null=True, blank=True)
    offer_blackout_dates = models.JSONField(default=list, blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    currency = models.CharField(max_length=3, default="USD")
    vip_benefits = models.JSONField(default=list, blank=True)
    hotel_details = models.JSONField(default=dict, blank=True)
    featured = models.BooleanField(default=False)
    popular = models.BooleanField(default=False)
    display_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = HotelQuerySet.as_manager()

    class Meta:
        db_table = "hotels"
        ordering = ["display_order", "-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=Q(price__isnull=True) | Q(price__gte=0),
                name="hotel_price_non_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["city"], name="hotels_city_idx"),
            models.Index(fields=["featured"], name="hotels_featured_idx"),
            models.Index(fields=["is_active", "display_order"], name="hotels_active_order_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.city})"

    def save(self, *args, **kwargs):  # type: ignore
        if not self.slug:
            self.slug = unique_slug(Hotel, self.name, exclude_pk=self.pk)
        if self.currency:
            self.currency = self.currency.upper()
        super().save(*args, **kwargs)

    @property
    def has_valid_offer(self) -> bool:
        return bool(
            self.special_offer and self.offer_valid_until and self.offer_valid_until >= timezone.now()
        )

    def blackout_dates(self) -> set[date]:
        dates = set()
        for value in self.offer_blackout_dates or []:
            try:
                dates.add(date.fromisoformat(str(value)[:10]))
            except ValueError:
                continue
        return dates

    def is_blacked_out(self, day: date) -> bool:
        return day in self.blackout_dates()
