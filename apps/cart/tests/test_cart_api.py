"""Cart API tests for signed-in customers and guest sessions."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.cart.models import CartItem
from apps.catalog.models import Product, ProductVariant
from apps.users.models import User


class CartAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="jo@example.com", password="JoPass12345")
        self.product = Product.objects.create(name="Canvas Tote", sku="TOTE-1", price=Decimal("20.00"), quantity=5)

    def _add(self, quantity: int = 1, **extra):
        payload = {"product_id": str(self.product.pk), "quantity": quantity}
        return self.client.post(reverse("cart"), payload, format="json", **extra)

    def test_adding_same_product_increments_row(self) -> None:
        self.client.force_authenticate(self.user)
        self.assertEqual(self._add(1).status_code, status.HTTP_201_CREATED)
        response = self._add(2)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        self.assertEqual(CartItem.objects.filter(user=self.user).count(), 1)
        self.assertEqual(CartItem.objects.get(user=self.user).quantity, 3)

        summary = self.client.get(reverse("cart")).json()["data"]
        self.assertEqual(summary["item_count"], 3)
        self.assertEqual(Decimal(summary["total"]), Decimal("60.00"))

    def test_attributes_limited_to_variant_keys(self) -> None:
        self.client.force_authenticate(self.user)
        payload = {"product_id": str(self.product.pk), "quantity": 1, "attributes": {"color": "navy"}}
        response = self.client.post(reverse("cart"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        self.assertEqual(CartItem.objects.get(user=self.user).attributes, {"color": "navy"})

        payload["attributes"] = {"engraving": "JB"}
        response = self.client.post(reverse("cart"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["details"][0]["field"], "attributes")

        payload["attributes"] = {"size": 42}
        response = self.client.post(reverse("cart"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_variant_rows_are_separate(self) -> None:
        variant = ProductVariant.objects.create(
            product=self.product, name="Large", sku="TOTE-1-L", price=Decimal("25.00"), quantity=2
        )
        self.client.force_authenticate(self.user)
        self._add(1)
        response = self.client.post(
            reverse("cart"),
            {"product_id": str(self.product.pk), "variant_id": str(variant.pk), "quantity": 1},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        self.assertEqual(Decimal(response.json()["data"]["unit_price"]), Decimal("25.00"))
        self.assertEqual(CartItem.objects.filter(user=self.user).count(), 2)

    def test_stock_limit(self) -> None:
        self.client.force_authenticate(self.user)
        self._add(4)
        response = self._add(2)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(CartItem.objects.get(user=self.user).quantity, 4)

    def test_inactive_product_rejected(self) -> None:
        self.product.is_active = False
        self.product.save()
        self.client.force_authenticate(self.user)
        response = self._add(1)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_owner_required(self) -> None:
        response = self._add(1)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["error"], "Authentication or X-Session-Id header is required")

    def test_guest_sessions_are_isolated(self) -> None:
        self._add(2, HTTP_X_SESSION_ID="guest-a")
        response = self.client.get(reverse("cart"), HTTP_X_SESSION_ID="guest-b")
        self.assertEqual(response.json()["data"]["items"], [])
        response = self.client.get(reverse("cart-count"), HTTP_X_SESSION_ID="guest-a")
        self.assertEqual(response.json()["data"]["count"], 2)

    def test_update_and_remove_item(self) -> None:
        self.client.force_authenticate(self.user)
        item_id = self._add(1).json()["data"]["id"]
        response = self.client.put(reverse("cart-item", args=[item_id]), {"quantity": 4}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        self.assertEqual(CartItem.objects.get(pk=item_id).quantity, 4)

        response = self.client.put(reverse("cart-item", args=[item_id]), {"quantity": 0}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.delete(reverse("cart-item", args=[item_id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(CartItem.objects.filter(pk=item_id).exists())

    def test_cannot_touch_another_owners_item(self) -> None:
        item_id = self._add(1, HTTP_X_SESSION_ID="guest-a").json()["data"]["id"]
        self.client.force_authenticate(self.user)
        response = self.client.delete(reverse("cart-item", args=[item_id]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertTrue(CartItem.objects.filter(pk=item_id).exists())

    def test_clear_cart(self) -> None:
        self.client.force_authenticate(self.user)
        self._add(1)
        response = self.client.delete(reverse("cart"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(CartItem.objects.filter(user=self.user).exists())

    def test_merge_folds_guest_rows(self) -> None:
        self._add(2, HTTP_X_SESSION_ID="guest-a")
        self.client.force_authenticate(self.user)
        self._add(1)
        response = self.client.post(reverse("cart-merge"), {"session_id": "guest-a"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        self.assertEqual(response.json()["data"]["merged"], 1)
        self.assertEqual(CartItem.objects.get(user=self.user).quantity, 3)
        self.assertEqual(CartItem.objects.count(), 1)

    def test_merge_requires_session_id(self) -> None:
        self.client.force_authenticate(self.user)
        response = self.client.post(reverse("cart-merge"), {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
