"""Celery tasks delivering notification emails."""

from __future__ import annotations

import logging
from smtplib import SMTPException

from celery import shared_task  # type: ignore

from apps.orders.models import Order

from . import services

logger = logging.getLogger(__name__)

RETRY_OPTIONS = {
    "autoretry_for": (SMTPException, ConnectionError),
    "retry_backoff": True,
    "max_retries": 3,
}


def _load_order(order_id: str) -> Order | None:
    order = Order.objects.select_related("user").prefetch_related("items").filter(pk=order_id).first()
    if order is None:
        logger.warning("Order %s no longer exists; notification skipped", order_id)
    return order


@shared_task(name="notifications.order_confirmation", **RETRY_OPTIONS)
def send_order_confirmation(order_id: str) -> bool:
    order = _load_order(order_id)
    if order is None:
        return False
    return services.send_order_confirmation_email(order)


@shared_task(name="notifications.admin_new_order", **RETRY_OPTIONS)
def send_new_order_admin_notification(order_id: str) -> bool:
    order = _load_order(order_id)
    if order is None:
        return False
    return services.send_new_order_admin_email(order)


@shared_task(name="notifications.booking_confirmation", **RETRY_OPTIONS)
def send_booking_confirmation(order_id: str) -> bool:
    order = _load_order(order_id)
    if order is None:
        return False
    return services.send_booking_confirmation_email(order)


@shared_task(name="notifications.order_status", **RETRY_OPTIONS)
def send_order_status_update(order_id: str, old_status: str, new_status: str) -> bool:
    order = _load_order(order_id)
    if order is None:
        return False
    return services.send_order_status_email(order, old_status, new_status)


@shared_task(name="notifications.inquiry", **RETRY_OPTIONS)
def send_inquiry_notification(contact: dict, details: dict) -> bool:
    return services.send_inquiry_email(contact, details)
