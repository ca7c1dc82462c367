"""Cart rows keyed by owner (user or guest session), product and variant."""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.db.models import Q  # type: ignore


class CartItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="cart_items",
    )
    session_id = models.CharField(max_length=255, blank=True, db_index=True)
    product = models.ForeignKey("catalog.Product", on_delete=models.CASCADE, related_name="cart_items")
    variant = models.ForeignKey(
        "catalog.ProductVariant",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="cart_items",
    )
    quantity = models.PositiveIntegerField(default=1)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    attributes = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "carts"
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(condition=Q(quantity__gte=1), name="cart_quantity_positive"),
            models.CheckConstraint(
                condition=Q(user__isnull=False) | ~Q(session_id=""),
                name="cart_has_owner",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "product", "variant"], name="carts_user_product_idx"),
            models.Index(fields=["session_id", "product", "variant"], name="carts_session_product_idx"),
        ]

    def __str__(self) -> str:
        owner = self.user_id or self.session_id
        return f"{owner}: {self.product_id} x{self.quantity}"

    @property
    def unit_price(self) -> Decimal:
        """Current catalogue price; ``price`` keeps the value at the time of adding."""
        if self.variant_id is not None:
            return self.variant.price
        return self.product.price

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity
