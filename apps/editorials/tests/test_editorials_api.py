"""Tests for the editorial and gallery endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.editorials.models import Editorial, GalleryItem
from apps.users.models import User


class EditorialAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="editor@example.com", password="EditorPass123", role=User.Role.ADMIN
        )
        now = timezone.now()
        self.older = Editorial.objects.create(
            title="Packing for the Coast", content="...", status=Editorial.Status.PUBLISHED
        )
        Editorial.objects.filter(pk=self.older.pk).update(published_at=now - timedelta(days=3))
        self.newer = Editorial.objects.create(
            title="Winter City Breaks", content="...", status=Editorial.Status.PUBLISHED
        )
        self.draft = Editorial.objects.create(title="Unfinished", content="...")

    def test_public_list_shows_published_newest_first(self) -> None:
        response = self.client.get(reverse("editorial-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        items = response.json()["data"]["items"]
        self.assertEqual([item["slug"] for item in items], ["winter-city-breaks", "packing-for-the-coast"])
        self.assertNotIn("content", items[0])

    def test_detail_by_slug(self) -> None:
        response = self.client.get(reverse("editorial-detail", args=["winter-city-breaks"]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["data"]["id"], str(self.newer.pk))

    def test_draft_hidden_from_public(self) -> None:
        response = self.client.get(reverse("editorial-detail", args=[self.draft.slug]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_create_requires_admin(self) -> None:
        response = self.client.post(reverse("editorial-list"), {"title": "Hi", "content": "x"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_create_coerces_tags_and_stamps_publication(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse("editorial-list"),
            {"title": "Island Hopping", "content": "<p>Greece</p>", "tags": "travel, islands", "status": "published"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        data = response.json()["data"]
        self.assertEqual(data["slug"], "island-hopping")
        self.assertEqual(data["tags"], ["travel", "islands"])
        self.assertIsNotNone(data["published_at"])

    def test_duplicate_slug_rejected(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse("editorial-list"),
            {"title": "Another", "slug": "winter-city-breaks", "content": "x"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_publishing_a_draft_stamps_published_at(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.patch(
            reverse("editorial-detail", args=[str(self.draft.pk)]), {"status": "published"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        self.draft.refresh_from_db()
        self.assertIsNotNone(self.draft.published_at)

    def test_admin_delete(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.delete(reverse("editorial-detail", args=[str(self.older.pk)]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Editorial.objects.filter(pk=self.older.pk).exists())


class GalleryAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="curator@example.com", password="CuratorPass123", role=User.Role.ADMIN
        )
        self.wedding = GalleryItem.objects.create(
            title="Garden wedding", image_url="https://cdn.example.com/w.jpg", category="wedding", featured=True
        )
        GalleryItem.objects.create(title="Office party", image_url="https://cdn.example.com/o.jpg", category="corporate")
        GalleryItem.objects.create(
            title="Hidden", image_url="https://cdn.example.com/h.jpg", status=GalleryItem.Status.DRAFT
        )

    def test_public_list_shows_active_items(self) -> None:
        response = self.client.get(reverse("gallery-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        titles = {item["title"] for item in response.json()["data"]["items"]}
        self.assertEqual(titles, {"Garden wedding", "Office party"})

    def test_filter_by_category_and_featured(self) -> None:
        response = self.client.get(reverse("gallery-list"), {"category": "wedding", "featured": "true"})
        items = response.json()["data"]["items"]
        self.assertEqual([item["id"] for item in items], [str(self.wedding.pk)])

        response = self.client.get(reverse("gallery-list"), {"category": "all"})
        self.assertEqual(response.json()["data"]["pagination"]["total_items"], 2)

    def test_categories(self) -> None:
        response = self.client.get(reverse("gallery-categories"))
        ids = [category["id"] for category in response.json()["data"]]
        self.assertEqual(ids, ["birthday", "corporate", "wedding", "school", "festival", "other"])

    def test_admin_create_validates_category(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse("gallery-list"),
            {"title": "Fair", "image_url": "https://cdn.example.com/f.jpg", "category": "circus"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.post(
            reverse("gallery-list"),
            {"title": "Fair", "image_url": "https://cdn.example.com/f.jpg", "category": "festival"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
