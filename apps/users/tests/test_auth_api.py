"""API tests for authentication, user administration and addresses."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.cart.models import CartItem
from apps.catalog.models import Product
from apps.users.models import Address, User


class AuthAPITests(APITestCase):
    def test_register_returns_tokens(self) -> None:
        payload = {
            "email": "New.User@Example.com",
            "password": "secret1",
            "first_name": "New",
            "last_name": "User",
            "phone": "+1 555 0100",
        }
        response = self.client.post(reverse("auth:register"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        data = response.json()["data"]
        self.assertEqual(data["user"]["email"], "new.user@example.com")
        self.assertEqual(data["user"]["role"], "customer")
        self.assertIn("access", data["tokens"])
        self.assertIn("refresh", data["tokens"])

    def test_register_rejects_short_password_and_duplicate(self) -> None:
        User.objects.create_user(email="taken@example.com", password="secret12")
        response = self.client.post(
            reverse("auth:register"),
            {"email": "taken@example.com", "password": "secret1", "first_name": "A", "last_name": "B"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.post(
            reverse("auth:register"),
            {"email": "short@example.com", "password": "12345", "first_name": "A", "last_name": "B"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["details"][0]["field"], "password")

    def test_register_reactivates_deactivated_account(self) -> None:
        dormant = User.objects.create_user(email="back@example.com", password="oldpass1", is_active=False)
        response = self.client.post(
            reverse("auth:register"),
            {"email": "back@example.com", "password": "newpass1", "first_name": "Back", "last_name": "Again"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        dormant.refresh_from_db()
        self.assertTrue(dormant.is_active)
        self.assertTrue(dormant.check_password("newpass1"))
        self.assertEqual(User.objects.filter(email="back@example.com").count(), 1)

    def test_login(self) -> None:
        User.objects.create_user(email="jo@example.com", password="JoPass12345")
        response = self.client.post(
            reverse("auth:login"), {"email": "jo@example.com", "password": "JoPass12345"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        access = response.json()["data"]["tokens"]["access"]

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        me = self.client.get(reverse("auth:me"))
        self.assertEqual(me.json()["data"]["user"]["email"], "jo@example.com")

    def test_login_rejects_bad_password_and_inactive_user(self) -> None:
        User.objects.create_user(email="jo@example.com", password="JoPass12345")
        User.objects.create_user(email="gone@example.com", password="GonePass123", is_active=False)
        response = self.client.post(
            reverse("auth:login"), {"email": "jo@example.com", "password": "wrong"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json(), {"success": False, "error": "Invalid credentials"})

        response = self.client.post(
            reverse("auth:login"), {"email": "gone@example.com", "password": "GonePass123"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_adopts_guest_cart(self) -> None:
        user = User.objects.create_user(email="jo@example.com", password="JoPass12345")
        product = Product.objects.create(name="Mug", sku="MUG-1", price=Decimal("9.00"), quantity=10)
        CartItem.objects.create(user=user, product=product, quantity=1, price=product.price)
        CartItem.objects.create(session_id="guest-abc", product=product, quantity=2, price=product.price)

        response = self.client.post(
            reverse("auth:login"),
            {"email": "jo@example.com", "password": "JoPass12345"},
            format="json",
            HTTP_X_SESSION_ID="guest-abc",
        )
        self.assertEqual(response.json()["data"]["merged_cart_items"], 1)
        self.assertEqual(CartItem.objects.get(user=user).quantity, 3)
        self.assertFalse(CartItem.objects.filter(session_id="guest-abc").exists())

    def test_profile_and_password(self) -> None:
        user = User.objects.create_user(email="jo@example.com", password="JoPass12345")
        self.client.force_authenticate(user)
        response = self.client.put(reverse("auth:profile"), {"first_name": "Joanna"}, format="json")
        self.assertEqual(response.json()["data"]["user"]["first_name"], "Joanna")

        response = self.client.put(
            reverse("auth:password"), {"current_password": "nope", "new_password": "Another1"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        response = self.client.put(
            reverse("auth:password"), {"current_password": "JoPass12345", "new_password": "Another1"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user.refresh_from_db()
        self.assertTrue(user.check_password("Another1"))


class UserAdminAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="admin@example.com", password="AdminPass123", role=User.Role.ADMIN
        )
        self.customer = User.objects.create_user(email="jo@example.com", password="JoPass12345")

    def test_customer_forbidden(self) -> None:
        self.client.force_authenticate(self.customer)
        response = self.client.get(reverse("user-list"))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_delete_deactivates(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.delete(reverse("user-detail", args=[self.customer.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.customer.refresh_from_db()
        self.assertFalse(self.customer.is_active)

    def test_filter_by_role(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("user-list"), {"role": "admin"})
        emails = [item["email"] for item in response.json()["data"]["items"]]
        self.assertEqual(emails, ["admin@example.com"])


class AddressAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="jo@example.com", password="JoPass12345")
        self.client.force_authenticate(self.user)

    def _payload(self, **overrides) -> dict:
        payload = {
            "type": "shipping",
            "first_name": "Jo",
            "last_name": "Buyer",
            "address1": "1 Main St",
            "city": "Austin",
            "state": "TX",
            "zip_code": "73301",
        }
        payload.update(overrides)
        return payload

    def test_first_address_becomes_default(self) -> None:
        response = self.client.post(reverse("address-list"), self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        self.assertTrue(response.json()["data"]["is_default"])

    def test_single_default_per_type(self) -> None:
        first = self.client.post(reverse("address-list"), self._payload(), format="json").json()["data"]
        second = self.client.post(reverse("address-list"), self._payload(city="Dallas"), format="json").json()["data"]

        response = self.client.put(reverse("address-set-default", args=[second["id"]]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Address.objects.get(pk=first["id"]).is_default)
        self.assertTrue(Address.objects.get(pk=second["id"]).is_default)

    def test_addresses_are_private(self) -> None:
        other = User.objects.create_user(email="sam@example.com", password="SamPass12345")
        address = Address.objects.create(user=other, **self._payload())
        response = self.client.get(reverse("address-detail", args=[address.pk]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
