"""Tests for the hotel booking API."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.hotels.models import Hotel
from apps.orders.domain.status import OrderStatus, OrderType
from apps.orders.models import Order
from apps.users.models import User


class BookingAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="traveller@example.com", password="TravelPass123")
        self.hotel = Hotel.objects.create(
            name="Harbour View",
            location="1 Quay Street",
            city="Lisbon",
            country="Portugal",
            price=Decimal("200.00"),
            currency="EUR",
        )
        self.check_in = timezone.localdate() + timedelta(days=10)
        self.client.force_authenticate(self.user)

    def _payload(self, **overrides) -> dict:
        payload = {
            "hotel_id": str(self.hotel.pk),
            "check_in": self.check_in.isoformat(),
            "check_out": (self.check_in + timedelta(days=3)).isoformat(),
            "adults": 2,
            "children": 1,
            "guest_name": "Ana Costa",
            "guest_email": "ana@example.com",
        }
        payload.update(overrides)
        return payload

    def test_create_booking_prices_nights(self) -> None:
        response = self.client.post(reverse("booking-list"), self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        data = response.json()["data"]
        self.assertEqual(Decimal(str(data["total"])), Decimal("600.00"))
        self.assertEqual(data["order_type"], OrderType.HOTEL)
        self.assertEqual(data["status"], OrderStatus.PENDING)
        self.assertEqual(data["nights"], 3)
        self.assertEqual(data["guests"], 3)
        self.assertEqual(data["currency"], "EUR")
        self.assertEqual(data["hotel"]["nights"], 3)
        self.assertTrue(data["order_number"].startswith("ORD-"))

        order = Order.objects.get(pk=data["id"])
        item = order.items.get()
        self.assertEqual(item.sku, f"HOTEL-{self.hotel.slug}")
        self.assertEqual(item.quantity, 3)
        self.assertEqual(item.booking_dates["nights"], 3)

    def test_same_day_checkout_rejected(self) -> None:
        response = self.client.post(
            reverse("booking-list"), self._payload(check_out=self.check_in.isoformat()), format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Order.objects.exists())

    def test_reversed_dates_rejected(self) -> None:
        response = self.client.post(
            reverse("booking-list"),
            self._payload(check_out=(self.check_in - timedelta(days=2)).isoformat()),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_past_check_in_rejected(self) -> None:
        yesterday = timezone.localdate() - timedelta(days=1)
        response = self.client.post(
            reverse("booking-list"),
            self._payload(check_in=yesterday.isoformat(), check_out=(yesterday + timedelta(days=2)).isoformat()),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_inactive_hotel_rejected(self) -> None:
        self.hotel.is_active = False
        self.hotel.save()
        response = self.client.post(reverse("booking-list"), self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Order.objects.exists())

    def test_unpriced_hotel_rejected(self) -> None:
        self.hotel.price = None
        self.hotel.save()
        response = self.client.post(reverse("booking-list"), self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_blackout_check_in_rejected(self) -> None:
        self.hotel.offer_blackout_dates = [self.check_in.isoformat()]
        self.hotel.save()
        response = self.client.post(reverse("booking-list"), self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_hotel_returns_404(self) -> None:
        response = self.client.post(
            reverse("booking-list"),
            self._payload(hotel_id="00000000-0000-0000-0000-000000000000"),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_requires_authentication(self) -> None:
        self.client.force_authenticate(None)
        response = self.client.post(reverse("booking-list"), self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_shows_only_own_bookings(self) -> None:
        self.client.post(reverse("booking-list"), self._payload(), format="json")
        other = User.objects.create_user(email="other@example.com", password="OtherPass123")
        self.client.force_authenticate(other)
        response = self.client.get(reverse("booking-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["data"]["pagination"]["total_items"], 0)

    def test_cancel_pending_booking(self) -> None:
        created = self.client.post(reverse("booking-list"), self._payload(), format="json").json()["data"]
        response = self.client.post(
            reverse("booking-cancel", args=[created["id"]]), {"reason": "Plans changed"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        order = Order.objects.get(pk=created["id"])
        self.assertEqual(order.status, OrderStatus.CANCELLED)
        self.assertIn("Plans changed", order.notes)

    def test_cancel_checked_in_booking_rejected(self) -> None:
        created = self.client.post(reverse("booking-list"), self._payload(), format="json").json()["data"]
        Order.objects.filter(pk=created["id"]).update(status=OrderStatus.CHECKED_IN)
        response = self.client.post(reverse("booking-cancel", args=[created["id"]]), {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Order.objects.get(pk=created["id"]).status, OrderStatus.CHECKED_IN)
