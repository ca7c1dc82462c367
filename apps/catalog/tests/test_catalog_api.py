"""Catalog API tests: categories, products, images and variants."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.catalog.models import Category, Product, ProductImage
from apps.users.models import User


class CatalogTestCase(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="admin@example.com", password="AdminPass123", role=User.Role.ADMIN
        )
        self.bags = Category.objects.create(name="Bags")
        self.totes = Category.objects.create(name="Totes", parent=self.bags)
        self.product = Product.objects.create(
            name="Canvas Tote", sku="TOTE-1", price=Decimal("20.00"), quantity=5, category=self.totes
        )


class CategoryAPITests(CatalogTestCase):
    def test_tree_lists_children(self) -> None:
        response = self.client.get(reverse("category-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        roots = response.json()["data"]
        self.assertEqual([root["slug"] for root in roots], ["bags"])
        self.assertEqual([child["slug"] for child in roots[0]["children"]], ["totes"])

    def test_products_include_subcategories(self) -> None:
        response = self.client.get(reverse("category-products", args=[self.bags.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()["data"]
        self.assertEqual([item["sku"] for item in data["items"]], ["TOTE-1"])
        self.assertEqual(data["category"]["slug"], "bags")

    def test_duplicate_slug_rejected(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(reverse("category-list"), {"name": "Other", "slug": "bags"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delete_removes_subtree_and_unfiles_products(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.delete(reverse("category-detail", args=[self.bags.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Category.objects.exists())
        self.product.refresh_from_db()
        self.assertIsNone(self.product.category)

    def test_bulk_delete_requires_cascade_for_parents(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(reverse("category-bulk-delete"), {"ids": [str(self.bags.pk)]}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.post(
            reverse("category-bulk-delete"), {"ids": [str(self.bags.pk)], "cascade": True}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        self.assertFalse(Category.objects.exists())


class ProductAPITests(CatalogTestCase):
    def test_public_list_hides_inactive(self) -> None:
        Product.objects.create(name="Old Bag", sku="OLD-1", price=Decimal("5.00"), is_active=False)
        response = self.client.get(reverse("product-list"))
        skus = [item["sku"] for item in response.json()["data"]["items"]]
        self.assertEqual(skus, ["TOTE-1"])

    def test_filter_by_category_slug_and_price(self) -> None:
        Product.objects.create(name="Mug", sku="MUG-1", price=Decimal("9.00"), quantity=1)
        response = self.client.get(reverse("product-list"), {"category": "bags", "max_price": "25"})
        self.assertEqual([item["sku"] for item in response.json()["data"]["items"]], ["TOTE-1"])

    def test_create_generates_slug(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse("product-list"),
            {"name": "Canvas Tote", "sku": "TOTE-2", "price": "22.00", "category_id": str(self.totes.pk)},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        self.assertEqual(response.json()["data"]["slug"], "canvas-tote-2")

    def test_duplicate_sku_rejected(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse("product-list"), {"name": "Copy", "sku": "TOTE-1", "price": "1.00"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["details"][0]["field"], "sku")

    def test_negative_price_rejected(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse("product-list"), {"name": "Bad", "sku": "BAD-1", "price": "-1.00"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_by_slug(self) -> None:
        response = self.client.get(reverse("product-by-slug", args=["canvas-tote"]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["data"]["sku"], "TOTE-1")

    def test_customer_cannot_create(self) -> None:
        customer = User.objects.create_user(email="jo@example.com", password="JoPass12345")
        self.client.force_authenticate(customer)
        response = self.client.post(
            reverse("product-list"), {"name": "X", "sku": "X-1", "price": "1.00"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class ProductImageAPITests(CatalogTestCase):
    def test_single_main_image(self) -> None:
        self.client.force_authenticate(self.admin)
        url = reverse("product-image-list", args=[self.product.pk])
        first = self.client.post(url, {"url": "https://cdn.example.com/1.jpg"}, format="json").json()["data"]
        self.assertTrue(first["is_main"])
        second = self.client.post(
            url, {"url": "https://cdn.example.com/2.jpg", "is_main": True}, format="json"
        ).json()["data"]

        self.assertTrue(ProductImage.objects.get(pk=second["id"]).is_main)
        self.assertFalse(ProductImage.objects.get(pk=first["id"]).is_main)

    def test_deleting_main_promotes_next_image(self) -> None:
        main = ProductImage.objects.create(product=self.product, url="https://cdn.example.com/1.jpg")
        other = ProductImage.objects.create(product=self.product, url="https://cdn.example.com/2.jpg", sort_order=1)
        self.client.force_authenticate(self.admin)
        response = self.client.delete(reverse("product-image-detail", args=[self.product.pk, main.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        other.refresh_from_db()
        self.assertTrue(other.is_main)


class ProductVariantAPITests(CatalogTestCase):
    def test_attributes_accept_known_string_keys(self) -> None:
        self.client.force_authenticate(self.admin)
        url = reverse("product-variant-list", args=[self.product.pk])
        response = self.client.post(
            url, {"name": "Red", "sku": "TOTE-1-RED", "price": "22.00", "attributes": {"color": "red"}}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()["data"]["attributes"], {"color": "red"})

    def test_wrong_attribute_type_is_validation_error(self) -> None:
        self.client.force_authenticate(self.admin)
        url = reverse("product-variant-list", args=[self.product.pk])
        response = self.client.post(
            url, {"name": "Odd", "sku": "TOTE-1-ODD", "price": "22.00", "attributes": {"color": 7}}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        body = response.json()
        self.assertEqual(body["error"], "Validation Error")
        self.assertEqual(body["details"][0]["field"], "attributes")
        self.assertIn("color", body["details"][0]["msg"])

    def test_unknown_attribute_key_rejected(self) -> None:
        self.client.force_authenticate(self.admin)
        url = reverse("product-variant-list", args=[self.product.pk])
        response = self.client.post(
            url, {"name": "Odd", "sku": "TOTE-1-ODD", "price": "22.00", "attributes": {"pattern": "dots"}}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
