"""
Message bus handlers queuing notification tasks.

Handlers run after commit, so the rows a task loads are visible to the
worker. Task arguments are plain JSON values.
"""

import logging

from django.core.serializers.json import DjangoJSONEncoder

from apps.bookings.domain.events import BookingCreated
from apps.orders.domain.events import InquiryReceived, OrderPlaced, OrderStatusChanged
from shared.application.message_bus import message_bus

from . import tasks

logger = logging.getLogger(__name__)

_encoder = DjangoJSONEncoder()


def _plain(value):
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return _encoder.default(value)


def on_order_placed(event: OrderPlaced):
    # customer and admin emails retry independently
    tasks.send_order_confirmation.delay(str(event.order_id))
    tasks.send_new_order_admin_notification.delay(str(event.order_id))


def on_booking_created(event: BookingCreated):
    tasks.send_booking_confirmation.delay(str(event.order_id))


def on_order_status_changed(event: OrderStatusChanged):
    tasks.send_order_status_update.delay(str(event.order_id), event.old_status, event.new_status)


def on_inquiry_received(event: InquiryReceived):
    contact = {'name': event.contact_name, 'email': event.contact_email, 'phone': event.contact_phone}
    tasks.send_inquiry_notification.delay(contact, _plain(event.details))


def register_handlers():
    message_bus.register_event_handler(OrderPlaced, on_order_placed)
    message_bus.register_event_handler(BookingCreated, on_booking_created)
    message_bus.register_event_handler(OrderStatusChanged, on_order_status_changed)
    message_bus.register_event_handler(InquiryReceived, on_inquiry_received)
    logger.debug("Notification handlers registered")
