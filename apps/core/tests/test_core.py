"""Health probe and demo seeding."""

from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APITestCase

from apps.catalog.models import Category, Product, ProductImage
from apps.editorials.models import Editorial
from apps.hotels.models import Hotel
from apps.site_settings.models import Setting
from apps.users.models import User


class HealthTests(APITestCase):
    def test_health_envelope(self) -> None:
        for name in ("health", "api-health"):
            response = self.client.get(reverse(name))
            self.assertEqual(response.status_code, 200)
            body = response.json()
            self.assertTrue(body["success"])
            self.assertIn("timestamp", body["data"])
            self.assertIn("environment", body["data"])


class SeedDemoTests(TestCase):
    def test_seed_is_idempotent(self) -> None:
        call_command("seed_demo", stdout=StringIO())
        counts = (
            User.objects.count(),
            Category.objects.count(),
            Product.objects.count(),
            ProductImage.objects.count(),
            Hotel.objects.count(),
            Editorial.objects.count(),
            Setting.objects.count(),
        )
        call_command("seed_demo", stdout=StringIO())
        self.assertEqual(
            counts,
            (
                User.objects.count(),
                Category.objects.count(),
                Product.objects.count(),
                ProductImage.objects.count(),
                Hotel.objects.count(),
                Editorial.objects.count(),
                Setting.objects.count(),
            ),
        )
        self.assertTrue(User.objects.get(email="admin@example.com").is_staff)
        self.assertEqual(Category.objects.get(slug="balloons").parent.slug, "party-supplies")
        self.assertIsNotNone(Editorial.objects.get(slug="planning-a-garden-party").published_at)
