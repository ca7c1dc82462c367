"""FilterSet for order listings."""

from __future__ import annotations

from datetime import datetime, timedelta

import django_filters  # type: ignore
from django.utils import timezone  # type: ignore

from .domain.status import OrderStatus, OrderType, PaymentStatus
from .models import Order

DATE_RANGE_CHOICES = (
    ("today", "Today"),
    ("week", "Last 7 days"),
    ("month", "This month"),
    ("quarter", "This quarter"),
    ("year", "This year"),
)


def date_range_start(value: str, now: datetime | None = None) -> datetime | None:
    """Start of the named reporting window, in the current timezone."""
    now = timezone.localtime(now)
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if value == "today":
        return today
    if value == "week":
        return now - timedelta(days=7)
    if value == "month":
        return today.replace(day=1)
    if value == "quarter":
        return today.replace(month=3 * ((today.month - 1) // 3) + 1, day=1)
    if value == "year":
        return today.replace(month=1, day=1)
    return None


class OrderFilterSet(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=OrderStatus.choices)
    payment_status = django_filters.ChoiceFilter(choices=PaymentStatus.choices)
    order_type = django_filters.ChoiceFilter(choices=OrderType.choices)
    search = django_filters.CharFilter(field_name="order_number", lookup_expr="icontains")
    date_range = django_filters.ChoiceFilter(choices=DATE_RANGE_CHOICES, method="filter_date_range")

    class Meta:
        model = Order
        fields = ["status", "payment_status", "order_type"]

    def filter_date_range(self, queryset, name, value):  # type: ignore
        start = date_range_start(value)
        if start is None:
            return queryset
        return queryset.filter(created_at__gte=start)
