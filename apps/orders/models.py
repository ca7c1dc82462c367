"""Order and order item models shared by product checkout and hotel bookings."""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.db.models import F, Q  # type: ignore
from django.utils import timezone  # type: ignore

from shared.domain.base import EventRecorder

from .domain.events import OrderStatusChanged
from .domain.status import (
    ItemType,
    OrderStatus,
    OrderType,
    PaymentStatus,
    ensure_payment_transition,
    ensure_transition,
    is_terminal,
)

ZERO = Decimal("0.00")


class Order(EventRecorder, models.Model):
    """
    Order aggregate.

    Addresses and item details are snapshots taken at checkout; later
    changes to products, hotels or the customer's address book never
    alter an existing order.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )
    order_number = models.CharField(max_length=32, unique=True, editable=False)
    order_type = models.CharField(max_length=10, choices=OrderType.choices, default=OrderType.PRODUCT)
    status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING)
    payment_status = models.CharField(
        max_length=20, choices=PaymentStatus.choices, default=PaymentStatus.PENDING
    )
    payment_method = models.CharField(max_length=50, blank=True)
    subtotal = models.DecimalField(max_digits=12, decimal_places=2, default=ZERO)
    tax_amount = models.DecimalField(max_digits=12, decimal_places=2, default=ZERO)
    shipping_amount = models.DecimalField(max_digits=12, decimal_places=2, default=ZERO)
    discount_amount = models.DecimalField(max_digits=12, decimal_places=2, default=ZERO)
    total = models.DecimalField(max_digits=12, decimal_places=2, default=ZERO)
    currency = models.CharField(max_length=3, default="USD")
    coupon_code = models.CharField(max_length=50, blank=True)
    shipping_address = models.JSONField(default=dict, blank=True)
    billing_address = models.JSONField(default=dict, blank=True)
    customer_email = models.EmailField(blank=True)
    customer_name = models.CharField(max_length=255, blank=True)
    notes = models.TextField(blank=True)
    tracking_number = models.CharField(max_length=100, blank=True)
    shipped_at = models.DateTimeField(null=True, blank=True)
    delivered_at = models.DateTimeField(null=True, blank=True)
    booking_details = models.JSONField(default=dict, blank=True)
    check_in = models.DateField(null=True, blank=True)
    check_out = models.DateField(null=True, blank=True)
    guests = models.PositiveIntegerField(null=True, blank=True)
    special_requests = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=Q(subtotal__gte=0) & Q(tax_amount__gte=0) & Q(shipping_amount__gte=0)
                & Q(discount_amount__gte=0) & Q(total__gte=0),
                name="order_amounts_non_negative",
            ),
            models.CheckConstraint(
                condition=Q(check_in__isnull=True) | Q(check_out__isnull=True) | Q(check_out__gt=F("check_in")),
                name="order_check_out_after_check_in",
            ),
        ]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["order_type", "-created_at"], name="orders_type_created_idx"),
        ]

    def __str__(self) -> str:
        return self.order_number

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self.status)

    @property
    def contact_email(self) -> str:
        if self.customer_email:
            return self.customer_email
        return self.user.email if self.user_id else ""

    @property
    def contact_name(self) -> str:
        if self.customer_name:
            return self.customer_name
        return self.user.full_name if self.user_id else ""

    @property
    def nights(self) -> int:
        if self.check_in and self.check_out:
            return (self.check_out - self.check_in).days
        return 0

    def transition_to(self, target: str) -> str:
        """Move to ``target`` or raise ``InvalidStatusTransition``. Returns the old status."""
        ensure_transition(self.order_type, self.status, target)
        old_status = self.status
        self.status = target
        now = timezone.now()
        if target == OrderStatus.SHIPPED and self.shipped_at is None:
            self.shipped_at = now
        if target == OrderStatus.DELIVERED and self.delivered_at is None:
            self.delivered_at = now
        self.record_event(
            OrderStatusChanged(
                order_id=self.pk,
                order_number=self.order_number,
                old_status=str(old_status),
                new_status=str(target),
                customer_email=self.contact_email or None,
            )
        )
        return old_status

    def set_payment_status(self, target: str) -> str:
        ensure_payment_transition(self.payment_status, target)
        old_status = self.payment_status
        self.payment_status = target
        return old_status


class OrderItem(models.Model):
    """Line of an order: a product (optionally a variant) or a hotel stay."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    item_type = models.CharField(max_length=10, choices=ItemType.choices, default=ItemType.PRODUCT)
    product = models.ForeignKey(
        "catalog.Product",
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name="order_items",
    )
    variant = models.ForeignKey(
        "catalog.ProductVariant",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="order_items",
    )
    hotel = models.ForeignKey(
        "hotels.Hotel",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="order_items",
    )
    product_name = models.CharField(max_length=255)
    variant_name = models.CharField(max_length=255, blank=True)
    sku = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    quantity = models.PositiveIntegerField()
    total = models.DecimalField(max_digits=12, decimal_places=2)
    weight = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    attributes = models.JSONField(default=dict, blank=True)
    booking_dates = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "order_items"
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(condition=Q(price__gte=0), name="order_item_price_non_negative"),
            models.CheckConstraint(condition=Q(quantity__gte=1), name="order_item_quantity_positive"),
        ]

    def __str__(self) -> str:
        return f"{self.product_name} x{self.quantity}"
