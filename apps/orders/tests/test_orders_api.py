"""Order listing, tracking, invoices and administrator status changes."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.core import mail
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.catalog.models import Product
from apps.orders.domain.status import OrderStatus, PaymentStatus
from apps.orders.models import Order, OrderItem
from apps.orders.services import save_with_order_number
from apps.users.models import User


def make_order(user=None, **fields) -> Order:
    fields.setdefault("subtotal", Decimal("30.00"))
    fields.setdefault("total", Decimal("32.55"))
    fields.setdefault("customer_email", getattr(user, "email", "guest@example.com"))
    order = save_with_order_number(Order(user=user, **fields))
    OrderItem.objects.create(
        order=order, product_name="Canvas Tote", sku="TOTE-1", price=Decimal("15.00"), quantity=2, total=Decimal("30.00")
    )
    return order


class OrderAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="admin@example.com", password="AdminPass123", role=User.Role.ADMIN
        )
        self.customer = User.objects.create_user(email="jo@example.com", password="JoPass12345")
        self.other = User.objects.create_user(email="sam@example.com", password="SamPass12345")
        self.order = make_order(self.customer)
        self.other_order = make_order(self.other)

    def test_customer_lists_own_orders(self) -> None:
        self.client.force_authenticate(self.customer)
        response = self.client.get(reverse("order-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        items = response.json()["data"]["items"]
        self.assertEqual([item["id"] for item in items], [str(self.order.pk)])
        self.assertEqual(items[0]["item_count"], 1)

    def test_admin_lists_all_orders(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("order-list"))
        self.assertEqual(response.json()["data"]["pagination"]["total_items"], 2)

    def test_customer_cannot_read_foreign_order(self) -> None:
        self.client.force_authenticate(self.customer)
        response = self.client.get(reverse("order-detail", args=[self.other_order.pk]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_filters(self) -> None:
        Order.objects.filter(pk=self.other_order.pk).update(
            status=OrderStatus.SHIPPED, created_at=timezone.now() - timedelta(days=400)
        )
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("order-list"), {"status": "shipped"})
        self.assertEqual(response.json()["data"]["pagination"]["total_items"], 1)
        response = self.client.get(reverse("order-list"), {"date_range": "week"})
        self.assertEqual([item["id"] for item in response.json()["data"]["items"]], [str(self.order.pk)])
        response = self.client.get(reverse("order-list"), {"search": self.order.order_number[-6:]})
        self.assertIn(str(self.order.pk), [item["id"] for item in response.json()["data"]["items"]])

    def test_tracking(self) -> None:
        self.client.force_authenticate(self.customer)
        response = self.client.get(reverse("order-tracking", args=[self.order.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["data"]["order_number"], self.order.order_number)

    def test_invoice_html_and_text(self) -> None:
        self.client.force_authenticate(self.customer)
        response = self.client.get(reverse("order-invoice", args=[self.order.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response["Content-Type"].startswith("text/html"))
        self.assertIn(self.order.order_number, response.content.decode())

        response = self.client.get(reverse("order-invoice", args=[self.order.pk]), {"plain": "1"})
        self.assertTrue(response["Content-Type"].startswith("text/plain"))
        self.assertIn("Canvas Tote", response.content.decode())

    def test_status_change_requires_admin(self) -> None:
        self.client.force_authenticate(self.customer)
        response = self.client.patch(
            reverse("order-update-status", args=[self.order.pk]), {"status": "processing"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_status_change_stamps_shipping(self) -> None:
        self.client.force_authenticate(self.admin)
        url = reverse("order-update-status", args=[self.order.pk])
        self.client.patch(url, {"status": "processing"}, format="json")
        response = self.client.patch(url, {"status": "shipped", "tracking_number": "1Z999"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, OrderStatus.SHIPPED)
        self.assertEqual(self.order.tracking_number, "1Z999")
        self.assertIsNotNone(self.order.shipped_at)

    def test_invalid_transition_rejected(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.patch(
            reverse("order-update-status", args=[self.order.pk]), {"status": "delivered"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["error"], "Cannot change order status from 'pending' to 'delivered'")

    def test_bulk_status_reports_failures(self) -> None:
        Order.objects.filter(pk=self.other_order.pk).update(status=OrderStatus.DELIVERED)
        missing = "00000000-0000-0000-0000-000000000000"
        self.client.force_authenticate(self.admin)
        response = self.client.patch(
            reverse("order-bulk-status"),
            {"order_ids": [str(self.order.pk), str(self.other_order.pk), missing], "status": "cancelled"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        data = response.json()["data"]
        self.assertEqual(data["updated"], [str(self.order.pk)])
        self.assertEqual({failure["id"] for failure in data["failed"]}, {str(self.other_order.pk), missing})

    def test_payment_status(self) -> None:
        self.client.force_authenticate(self.admin)
        url = reverse("order-payment-status", args=[self.order.pk])
        response = self.client.patch(url, {"payment_status": "paid"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        self.assertEqual(Order.objects.get(pk=self.order.pk).payment_status, PaymentStatus.PAID)

        response = self.client.patch(url, {"payment_status": "failed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_bulk_delete(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(reverse("order-bulk-delete"), {"ids": [str(self.order.pk)]}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Order.objects.filter(pk=self.order.pk).exists())
        self.assertFalse(OrderItem.objects.filter(order_id=self.order.pk).exists())

    def test_ordered_product_cannot_be_deleted(self) -> None:
        product = Product.objects.create(name="Mug", sku="MUG-1", price=Decimal("9.00"), quantity=3)
        OrderItem.objects.create(
            order=self.order,
            product=product,
            product_name="Mug",
            sku="MUG-1",
            price=Decimal("9.00"),
            quantity=1,
            total=Decimal("9.00"),
        )
        self.client.force_authenticate(self.admin)
        response = self.client.delete(reverse("product-detail", args=[product.pk]))
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertTrue(Product.objects.filter(pk=product.pk).exists())


class InquiryAPITests(APITestCase):
    def test_inquiry_is_emailed(self) -> None:
        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(
                reverse("order-inquiry"),
                {
                    "contact": {"name": "Sam", "email": "sam@example.com"},
                    "event_type": "Birthday",
                    "number_of_guests": 25,
                    "package_interest": "balloons, cake",
                },
                format="json",
            )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        self.assertEqual(len(mail.outbox), 1)
        self.assertIn("balloons", mail.outbox[0].body)

    def test_inquiry_requires_contact_email(self) -> None:
        response = self.client.post(reverse("order-inquiry"), {"contact": {"name": "Sam"}}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["details"][0]["field"], "contact.email")
