"""
Order Status State Machine

Product orders and hotel booking orders share one ``orders`` table but
follow different flows:

- product: PENDING -> PROCESSING | CONFIRMED, CONFIRMED -> PROCESSING | SHIPPED,
  PROCESSING -> SHIPPED, SHIPPED -> DELIVERED
- hotel:   PENDING -> CONFIRMED -> CHECKED_IN -> CHECKED_OUT

CANCELLED and REFUNDED are reachable from any non-terminal state.
DELIVERED, CHECKED_OUT, CANCELLED and REFUNDED are terminal.
"""

from typing import FrozenSet

from django.db import models
from django.utils.translation import gettext_lazy as _

from shared.domain.exceptions import InvalidStatusTransition


class OrderType(models.TextChoices):
    PRODUCT = 'product', _('Product order')
    HOTEL = 'hotel', _('Hotel booking')


class ItemType(models.TextChoices):
    PRODUCT = 'product', _('Product')
    HOTEL = 'hotel', _('Hotel')


class OrderStatus(models.TextChoices):
    PENDING = 'pending', _('Pending')
    PROCESSING = 'processing', _('Processing')
    CONFIRMED = 'confirmed', _('Confirmed')
    SHIPPED = 'shipped', _('Shipped')
    DELIVERED = 'delivered', _('Delivered')
    CHECKED_IN = 'checked_in', _('Checked in')
    CHECKED_OUT = 'checked_out', _('Checked out')
    CANCELLED = 'cancelled', _('Cancelled')
    REFUNDED = 'refunded', _('Refunded')


class PaymentStatus(models.TextChoices):
    PENDING = 'pending', _('Pending')
    PAID = 'paid', _('Paid')
    FAILED = 'failed', _('Failed')
    REFUNDED = 'refunded', _('Refunded')


TERMINAL_STATUSES: FrozenSet[str] = frozenset({
    OrderStatus.DELIVERED,
    OrderStatus.CHECKED_OUT,
    OrderStatus.CANCELLED,
    OrderStatus.REFUNDED,
})

SIDE_EXITS: FrozenSet[str] = frozenset({OrderStatus.CANCELLED, OrderStatus.REFUNDED})

PRODUCT_FLOW = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CONFIRMED},
    OrderStatus.CONFIRMED: {OrderStatus.PROCESSING, OrderStatus.SHIPPED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
}

HOTEL_FLOW = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED},
    OrderStatus.CONFIRMED: {OrderStatus.CHECKED_IN},
    OrderStatus.CHECKED_IN: {OrderStatus.CHECKED_OUT},
}

PAYMENT_FLOW = {
    PaymentStatus.PENDING: {PaymentStatus.PAID, PaymentStatus.FAILED},
    PaymentStatus.PAID: {PaymentStatus.REFUNDED},
}


def is_terminal(status: str) -> bool:
    return status in TERMINAL_STATUSES


def allowed_transitions(order_type: str, current: str) -> FrozenSet[str]:
    """Statuses reachable in one step from ``current``"""
    if is_terminal(current):
        return frozenset()
    flow = HOTEL_FLOW if order_type == OrderType.HOTEL else PRODUCT_FLOW
    return frozenset(flow.get(current, set())) | SIDE_EXITS


def can_transition(order_type: str, current: str, target: str) -> bool:
    return target in allowed_transitions(order_type, current)


def ensure_transition(order_type: str, current: str, target: str) -> None:
    if not can_transition(order_type, current, target):
        raise InvalidStatusTransition(current, target)


def ensure_payment_transition(current: str, target: str) -> None:
    if target not in PAYMENT_FLOW.get(current, set()):
        raise InvalidStatusTransition(current, target, kind='payment')
