"""
Cart services

A cart row is identified by (owner, product, variant). Adding the same
product and variant again increments the existing row; the product row
is locked for the duration so concurrent adds from one client cannot
insert duplicates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from django.db import transaction  # type: ignore

from apps.catalog.models import Product, ProductVariant
from shared.api.session import get_session_id
from shared.domain.exceptions import CartOwnerRequired, InsufficientStock, ProductUnavailable
from shared.domain.value_objects import quantize

from .models import CartItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartOwner:
    """Authenticated user, or the guest session from the ``X-Session-Id`` header."""

    user: Any = None
    session_id: str = ""

    @classmethod
    def from_request(cls, request) -> "CartOwner":
        user = request.user if request.user.is_authenticated else None
        return cls(user=user, session_id="" if user else (get_session_id(request) or ""))

    @property
    def is_known(self) -> bool:
        return self.user is not None or bool(self.session_id)

    def require(self) -> None:
        if not self.is_known:
            raise CartOwnerRequired()

    def lookup(self) -> dict[str, Any]:
        if self.user is not None:
            return {"user": self.user}
        return {"user__isnull": True, "session_id": self.session_id}

    def new_row_fields(self) -> dict[str, Any]:
        if self.user is not None:
            return {"user": self.user, "session_id": ""}
        return {"user": None, "session_id": self.session_id}


def cart_items(owner: CartOwner):
    if not owner.is_known:
        return CartItem.objects.none()
    return (
        CartItem.objects.filter(**owner.lookup())
        .select_related("product", "variant")
        .prefetch_related("product__images")
    )


def cart_summary(owner: CartOwner) -> dict[str, Any]:
    items = list(cart_items(owner))
    total = sum((item.line_total for item in items), Decimal("0"))
    return {
        "items": items,
        "total": quantize(total),
        "item_count": sum(item.quantity for item in items),
    }


def cart_count(owner: CartOwner) -> int:
    return sum(item.quantity for item in cart_items(owner).filter(product__is_active=True))


def _check_stock(product: Product, variant: Optional[ProductVariant], quantity: int) -> None:
    available = variant.quantity if variant else product.quantity
    if product.track_quantity and available < quantity:
        raise InsufficientStock(product.name, available, quantity)


def add_item(
    owner: CartOwner,
    product_id,
    quantity: int,
    variant_id=None,
    attributes: Optional[dict] = None,
) -> CartItem:
    owner.require()
    with transaction.atomic():
        product = Product.objects.select_for_update().filter(pk=product_id, is_active=True).first()
        if product is None:
            raise ProductUnavailable("Product not found or inactive")
        variant = None
        if variant_id:
            variant = ProductVariant.objects.filter(pk=variant_id, product=product, is_active=True).first()
            if variant is None:
                raise ProductUnavailable("Product variant not found")

        item = (
            CartItem.objects.select_for_update()
            .filter(product=product, variant=variant, **owner.lookup())
            .first()
        )
        new_quantity = quantity + (item.quantity if item else 0)
        _check_stock(product, variant, new_quantity)

        price = variant.price if variant else product.price
        if item is not None:
            item.quantity = new_quantity
            item.price = price
            if attributes:
                item.attributes = attributes
            item.save(update_fields=["quantity", "price", "attributes", "updated_at"])
        else:
            item = CartItem.objects.create(
                product=product,
                variant=variant,
                quantity=quantity,
                price=price,
                attributes=attributes or {},
                **owner.new_row_fields(),
            )
    return item


def update_quantity(owner: CartOwner, item_id, quantity: int) -> CartItem:
    owner.require()
    with transaction.atomic():
        item = CartItem.objects.select_for_update().select_related("product", "variant").get(
            pk=item_id, **owner.lookup()
        )
        _check_stock(item.product, item.variant, quantity)
        item.quantity = quantity
        item.save(update_fields=["quantity", "updated_at"])
    return item


def remove_item(owner: CartOwner, item_id) -> None:
    owner.require()
    CartItem.objects.get(pk=item_id, **owner.lookup()).delete()


def clear_cart(owner: CartOwner) -> int:
    owner.require()
    deleted, _ = CartItem.objects.filter(**owner.lookup()).delete()
    return deleted


def merge_session_cart(user, session_id: str) -> int:
    """
    Move a guest session's rows to ``user``.

    Rows for a product/variant the user already has are folded into the
    user's row. Returns the number of guest rows merged.
    """
    if not session_id:
        return 0
    with transaction.atomic():
        guest_items = list(
            CartItem.objects.select_for_update().filter(user__isnull=True, session_id=session_id)
        )
        for guest_item in guest_items:
            existing = (
                CartItem.objects.select_for_update()
                .filter(user=user, product_id=guest_item.product_id, variant_id=guest_item.variant_id)
                .first()
            )
            if existing is not None:
                existing.quantity += guest_item.quantity
                existing.save(update_fields=["quantity", "updated_at"])
                guest_item.delete()
            else:
                guest_item.user = user
                guest_item.session_id = ""
                guest_item.save(update_fields=["user", "session_id", "updated_at"])
    if guest_items:
        logger.info("Merged %s cart rows from session into user %s", len(guest_items), user.pk)
    return len(guest_items)
