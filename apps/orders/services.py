"""Order services: numbering, checkout placement and status changes."""

from __future__ import annotations

import logging
import secrets
from typing import Any, Callable, Iterable, Optional

from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import F  # type: ignore
from django.utils import timezone  # type: ignore

from apps.cart.models import CartItem
from apps.catalog.models import Product, ProductVariant
from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import DomainError, OrderNumberConflict

from .domain.events import InquiryReceived, OrderPlaced
from .domain.status import OrderStatus, OrderType
from .models import Order, OrderItem
from .pricing import QuoteLine, build_quote

logger = logging.getLogger(__name__)

ORDER_NUMBER_ATTEMPTS = 5


def generate_order_number(today=None) -> str:
    """``ORD-YYYYMMDD-NNNNNN`` with a random six digit suffix."""
    today = today or timezone.localdate()
    return f"ORD-{today:%Y%m%d}-{secrets.randbelow(1_000_000):06d}"


def save_with_order_number(order: Order, number_factory: Callable[[], str] = generate_order_number) -> Order:
    """
    Insert ``order`` under a fresh order number.

    Each attempt runs in its own savepoint so a collision on the unique
    ``order_number`` does not break the surrounding transaction.
    """
    for attempt in range(1, ORDER_NUMBER_ATTEMPTS + 1):
        order.order_number = number_factory()
        try:
            with transaction.atomic():
                order.save(force_insert=True)
            return order
        except IntegrityError:
            if not Order.objects.filter(order_number=order.order_number).exists():
                raise
            logger.warning("Order number %s already taken (attempt %s)", order.order_number, attempt)
    raise OrderNumberConflict("Could not allocate a unique order number, please retry")


def _decrement_stock(line: QuoteLine) -> None:
    if not line.product.track_quantity:
        return
    if line.variant is not None:
        ProductVariant.objects.filter(pk=line.variant.pk).update(quantity=F("quantity") - line.quantity)
    else:
        Product.objects.filter(pk=line.product.pk).update(quantity=F("quantity") - line.quantity)


def place_order(
    *,
    items: Iterable[dict[str, Any]],
    shipping_address: dict[str, Any],
    payment_method: str,
    billing_address: Optional[dict[str, Any]] = None,
    notes: str = "",
    coupon_code: Optional[str] = None,
    user=None,
    customer_email: str = "",
    customer_name: str = "",
    clear_cart: bool = True,
) -> Order:
    """
    Create a product order in one transaction.

    Product and variant rows are locked while stock is verified and
    decremented, so two concurrent checkouts cannot oversell.
    """
    billing_address = billing_address or shipping_address
    if user is None:
        contact = {"customer_name": customer_name, "customer_email": customer_email}
        shipping_address = {**shipping_address, **contact}
        billing_address = {**billing_address, **contact}
        notes = f"{notes or ''}\n[Guest Order] Customer: {customer_name} ({customer_email})".strip()
    else:
        customer_email = customer_email or user.email
        customer_name = customer_name or user.full_name

    with DjangoUnitOfWork() as uow:
        quote = build_quote(items, shipping_address, coupon_code, lock=True)
        order = Order(
            user=user,
            order_type=OrderType.PRODUCT,
            status=OrderStatus.PENDING,
            payment_method=payment_method,
            subtotal=quote.subtotal,
            tax_amount=quote.tax_amount,
            shipping_amount=quote.shipping_amount,
            discount_amount=quote.discount_amount,
            total=quote.total,
            currency=quote.currency,
            coupon_code=quote.coupon.code if quote.coupon else "",
            shipping_address=shipping_address,
            billing_address=billing_address,
            customer_email=customer_email,
            customer_name=customer_name,
            notes=notes or "",
        )
        save_with_order_number(order)
        OrderItem.objects.bulk_create(
            [
                OrderItem(
                    order=order,
                    product=line.product,
                    variant=line.variant,
                    product_name=line.product_name,
                    variant_name=line.variant_name,
                    sku=line.sku,
                    price=line.price,
                    quantity=line.quantity,
                    total=line.total,
                    weight=line.weight,
                    attributes=line.attributes,
                )
                for line in quote.lines
            ]
        )
        for line in quote.lines:
            _decrement_stock(line)
        if user is not None and clear_cart:
            CartItem.objects.filter(user=user).delete()

        order.record_event(
            OrderPlaced(
                order_id=order.pk,
                order_number=order.order_number,
                customer_email=order.contact_email,
                total=order.total,
            )
        )
        uow.collect_events(order)

    logger.info(
        "Order %s placed (user=%s, items=%s, total=%s)",
        order.order_number,
        getattr(user, "pk", None),
        len(quote.lines),
        order.total,
    )
    return order


def transition_order_status(order_id, target: str, *, tracking_number: str = "") -> Order:
    with DjangoUnitOfWork() as uow:
        order = Order.objects.select_for_update().get(pk=order_id)
        old_status = order.transition_to(target)
        if tracking_number:
            order.tracking_number = tracking_number
        order.save()
        uow.collect_events(order)
    logger.info("Order %s status %s -> %s", order.order_number, old_status, target)
    return order


def bulk_transition(order_ids: Iterable, target: str, *, tracking_number: str = "") -> dict[str, list]:
    """
    Apply ``target`` to each order independently.

    Orders that cannot move are reported in ``failed`` with the reason.
    """
    updated: list[str] = []
    failed: list[dict[str, str]] = []
    for order_id in order_ids:
        try:
            order = transition_order_status(order_id, target, tracking_number=tracking_number)
        except Order.DoesNotExist:
            failed.append({"id": str(order_id), "error": "Order not found"})
        except DomainError as exc:
            failed.append({"id": str(order_id), "error": exc.message})
        else:
            updated.append(str(order.pk))
    return {"updated": updated, "failed": failed}


def update_payment_status(order_id, target: str) -> Order:
    with transaction.atomic():
        order = Order.objects.select_for_update().get(pk=order_id)
        old_status = order.set_payment_status(target)
        order.save(update_fields=["payment_status", "updated_at"])
    logger.info("Order %s payment %s -> %s", order.order_number, old_status, target)
    return order


def submit_inquiry(contact: dict[str, str], details: dict[str, Any]) -> None:
    """Nothing is persisted; the administrator is notified after commit."""
    with DjangoUnitOfWork() as uow:
        uow.add_event(
            InquiryReceived(
                contact_name=contact["name"],
                contact_email=contact["email"],
                contact_phone=contact.get("phone", ""),
                details=details,
            )
        )
    logger.info("Inquiry received from %s", contact["email"])
