"""Hotel catalogue API tests."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.hotels.models import Hotel
from apps.users.models import User


class HotelAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="admin@example.com", password="AdminPass123", role=User.Role.ADMIN
        )
        self.lisbon = Hotel.objects.create(
            name="Harbour View",
            location="1 Quay Street",
            city="Lisbon",
            country="Portugal",
            price=Decimal("200.00"),
            popular=True,
            special_offer=True,
            offer_valid_until=timezone.now() + timedelta(days=30),
        )
        self.cork = Hotel.objects.create(
            name="Cliff House",
            location="Ridge Road",
            city="Cork",
            country="Ireland",
            price=Decimal("150.00"),
            special_offer=True,
            offer_valid_until=timezone.now() - timedelta(days=1),
        )
        self.closed = Hotel.objects.create(
            name="Closed Inn", location="Nowhere", city="Cork", country="Ireland", is_active=False
        )

    def test_public_list_excludes_inactive(self) -> None:
        response = self.client.get(reverse("hotel-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = {item["name"] for item in response.json()["data"]["items"]}
        self.assertEqual(names, {"Harbour View", "Cliff House"})

    def test_filter_and_sort(self) -> None:
        response = self.client.get(reverse("hotel-list"), {"city": "cork"})
        self.assertEqual([item["slug"] for item in response.json()["data"]["items"]], ["cliff-house"])

        response = self.client.get(reverse("hotel-list"), {"ordering": "price"})
        self.assertEqual([item["slug"] for item in response.json()["data"]["items"]], ["cliff-house", "harbour-view"])

    def test_special_offers_only_valid(self) -> None:
        response = self.client.get(reverse("hotel-special-offers"))
        self.assertEqual([item["slug"] for item in response.json()["data"]], ["harbour-view"])

    def test_popular(self) -> None:
        response = self.client.get(reverse("hotel-popular"))
        self.assertEqual([item["slug"] for item in response.json()["data"]], ["harbour-view"])

    def test_detail_by_uuid_or_slug(self) -> None:
        by_slug = self.client.get(reverse("hotel-detail", args=["harbour-view"]))
        by_id = self.client.get(reverse("hotel-detail", args=[str(self.lisbon.pk)]))
        self.assertEqual(by_slug.status_code, status.HTTP_200_OK)
        self.assertEqual(by_slug.json()["data"]["id"], by_id.json()["data"]["id"])

    def test_inactive_hidden_from_public_detail(self) -> None:
        response = self.client.get(reverse("hotel-detail", args=[self.closed.slug]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("hotel-detail", args=[self.closed.slug]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_admin_create_validates_typed_fields(self) -> None:
        self.client.force_authenticate(self.admin)
        payload = {
            "name": "Dune Lodge",
            "location": "Beach Road",
            "city": "Essaouira",
            "country": "Morocco",
            "price": "120.00",
            "vip_benefits": "Late checkout, Welcome drink",
            "hotel_details": {"rooms": 12, "star_rating": 4, "amenities": ["pool"]},
            "offer_blackout_dates": ["2026-12-25", "2026-12-24", "2026-12-25"],
        }
        response = self.client.post(reverse("hotel-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        data = response.json()["data"]
        self.assertEqual(data["slug"], "dune-lodge")
        self.assertEqual(data["vip_benefits"], ["Late checkout", "Welcome drink"])
        self.assertEqual(data["offer_blackout_dates"], ["2026-12-24", "2026-12-25"])

        payload["hotel_details"] = {"rooms": "twelve"}
        response = self.client.post(reverse("hotel-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        payload["hotel_details"] = {"pool": True}
        response = self.client.post(reverse("hotel-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_admin_delete(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.delete(reverse("hotel-detail", args=[self.cork.slug]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Hotel.objects.filter(pk=self.cork.pk).exists())


def test_blackout_dates_ignore_bad_values():
    hotel = Hotel(offer_blackout_dates=["2026-01-02", "not-a-date", "2026-01-03T00:00:00Z"])
    assert hotel.blackout_dates() == {date(2026, 1, 2), date(2026, 1, 3)}
    assert hotel.is_blacked_out(date(2026, 1, 2))
