"""Order and payment state machine rules."""

from datetime import datetime, timezone as dt_timezone

import pytest

from apps.orders.domain.status import (
    OrderStatus,
    OrderType,
    PaymentStatus,
    allowed_transitions,
    can_transition,
    ensure_payment_transition,
    ensure_transition,
)
from apps.orders.filters import date_range_start
from shared.domain.exceptions import InvalidStatusTransition


@pytest.mark.parametrize(
    "current, target",
    [
        (OrderStatus.PENDING, OrderStatus.PROCESSING),
        (OrderStatus.PENDING, OrderStatus.CONFIRMED),
        (OrderStatus.CONFIRMED, OrderStatus.SHIPPED),
        (OrderStatus.PROCESSING, OrderStatus.SHIPPED),
        (OrderStatus.SHIPPED, OrderStatus.DELIVERED),
        (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
        (OrderStatus.PENDING, OrderStatus.REFUNDED),
    ],
)
def test_product_flow_allows(current, target):
    assert can_transition(OrderType.PRODUCT, current, target)


@pytest.mark.parametrize(
    "current, target",
    [
        (OrderStatus.PENDING, OrderStatus.DELIVERED),
        (OrderStatus.DELIVERED, OrderStatus.SHIPPED),
        (OrderStatus.CANCELLED, OrderStatus.PENDING),
        (OrderStatus.PENDING, OrderStatus.CHECKED_IN),
    ],
)
def test_product_flow_rejects(current, target):
    with pytest.raises(InvalidStatusTransition) as excinfo:
        ensure_transition(OrderType.PRODUCT, current, target)
    assert excinfo.value.status_code == 400
    assert f"'{current}'" in excinfo.value.message


def test_hotel_flow():
    assert allowed_transitions(OrderType.HOTEL, OrderStatus.PENDING) == {
        OrderStatus.CONFIRMED,
        OrderStatus.CANCELLED,
        OrderStatus.REFUNDED,
    }
    assert can_transition(OrderType.HOTEL, OrderStatus.CHECKED_IN, OrderStatus.CHECKED_OUT)
    assert not can_transition(OrderType.HOTEL, OrderStatus.PENDING, OrderStatus.SHIPPED)


def test_terminal_states_have_no_exits():
    for status in (OrderStatus.DELIVERED, OrderStatus.CHECKED_OUT, OrderStatus.CANCELLED, OrderStatus.REFUNDED):
        assert allowed_transitions(OrderType.PRODUCT, status) == frozenset()
        assert allowed_transitions(OrderType.HOTEL, status) == frozenset()


def test_payment_flow():
    ensure_payment_transition(PaymentStatus.PENDING, PaymentStatus.PAID)
    ensure_payment_transition(PaymentStatus.PAID, PaymentStatus.REFUNDED)
    with pytest.raises(InvalidStatusTransition, match="payment"):
        ensure_payment_transition(PaymentStatus.FAILED, PaymentStatus.PAID)


def test_date_range_start():
    now = datetime(2026, 8, 20, 15, 30, tzinfo=dt_timezone.utc)
    with pytest.MonkeyPatch.context() as patch:
        patch.setattr("django.utils.timezone.localtime", lambda value=None: value)
        assert date_range_start("today", now) == datetime(2026, 8, 20, tzinfo=dt_timezone.utc)
        assert date_range_start("month", now) == datetime(2026, 8, 1, tzinfo=dt_timezone.utc)
        assert date_range_start("quarter", now) == datetime(2026, 7, 1, tzinfo=dt_timezone.utc)
        assert date_range_start("year", now) == datetime(2026, 1, 1, tzinfo=dt_timezone.utc)
        assert date_range_start("forever", now) is None
