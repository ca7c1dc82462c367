"""Email notifications for orders, bookings and inquiries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.template.loader import render_to_string  # type: ignore
from django.utils.html import strip_tags  # type: ignore

from apps.site_settings.manager import settings_manager

if TYPE_CHECKING:  # pragma: no cover
    from apps.orders.models import Order

logger = logging.getLogger(__name__)


def send_email_notification(
    recipient_email: str,
    subject: str,
    template_name: str,
    context: dict,
) -> bool:
    """
    Render ``template_name`` and send it as an HTML email with a plain text part.

    Returns False when there is no recipient. Delivery errors propagate
    so the calling task can retry.
    """
    if not recipient_email:
        logger.warning("Email '%s' skipped: no recipient", subject)
        return False

    context = {"store_name": settings_manager.store_name(), **context}
    html_message = render_to_string(template_name, context)
    send_mail(
        subject=subject,
        message=strip_tags(html_message),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[recipient_email],
        html_message=html_message,
        fail_silently=False,
    )
    logger.info("Email sent to %s: %s", recipient_email, subject)
    return True


def send_order_confirmation_email(order: "Order") -> bool:
    """Order summary for the customer who checked out."""
    return send_email_notification(
        recipient_email=order.contact_email,
        subject=f"Order {order.order_number} confirmed",
        template_name="notifications/order_confirmation.html",
        context={"order": order, "items": order.items.all(), "customer_name": order.contact_name},
    )


def send_new_order_admin_email(order: "Order") -> bool:
    return send_email_notification(
        recipient_email=settings.STORE_ADMIN_EMAIL,
        subject=f"New order {order.order_number}",
        template_name="notifications/admin_new_order.html",
        context={"order": order, "items": order.items.all()},
    )


def send_booking_confirmation_email(order: "Order") -> bool:
    """Stay details for the guest of a hotel booking."""
    item = order.items.first()
    return send_email_notification(
        recipient_email=order.contact_email,
        subject=f"Booking {order.order_number} received",
        template_name="notifications/booking_confirmation.html",
        context={
            "order": order,
            "guest_name": order.contact_name,
            "hotel_name": item.product_name if item else order.booking_details.get("hotel_name", ""),
            "hotel_location": order.booking_details.get("hotel_location", ""),
        },
    )


def send_order_status_email(order: "Order", old_status: str, new_status: str) -> bool:
    return send_email_notification(
        recipient_email=order.contact_email,
        subject=f"Order {order.order_number} is now {order.get_status_display().lower()}",
        template_name="notifications/order_status.html",
        context={
            "order": order,
            "customer_name": order.contact_name,
            "old_status": old_status,
            "new_status": new_status,
        },
    )


def send_inquiry_email(contact: dict, details: dict) -> bool:
    """Forward a public event inquiry to the store administrator."""
    return send_email_notification(
        recipient_email=settings.STORE_ADMIN_EMAIL,
        subject=f"New event inquiry from {contact.get('name', '')}",
        template_name="notifications/inquiry.html",
        context={"contact": contact, "details": sorted((key, value) for key, value in details.items() if value)},
    )
