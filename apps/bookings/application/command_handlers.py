"""
Booking Command Handlers

These are the use cases for the booking domain.
They orchestrate domain operations within transactions.

Commands:
- CreateBookingCommand: Book a hotel stay (creates a hotel order)
- CancelBookingCommand: Cancel a pending or confirmed stay
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID
import logging

from django.utils import timezone

from apps.hotels.models import Hotel
from apps.orders.domain.status import ItemType, OrderStatus, OrderType
from apps.orders.models import Order, OrderItem
from apps.orders.services import save_with_order_number
from apps.bookings.domain.events import BookingCreated
from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import (
    HotelNotFound,
    HotelUnavailable,
    InvalidBookingDates,
    InvalidStatusTransition,
)
from shared.domain.value_objects import DateRange, quantize

logger = logging.getLogger(__name__)

CANCELLABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.CONFIRMED})


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    """Command to book a hotel stay for a signed-in customer"""
    user_id: UUID
    hotel_id: UUID
    check_in: date
    check_out: date
    adults: int
    guest_name: str
    guest_email: str
    children: int = 0
    guest_phone: str = ''
    special_requests: str = ''


@dataclass
class CancelBookingCommand:
    """Command to cancel a booking"""
    order_id: UUID
    reason: str = ''


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Rules:
    - check-out after check-in, check-in not in the past
    - hotel active and priced
    - check-in not on one of the hotel's offer blackout dates

    total = nightly price x nights; no tax or shipping on stays.
    """

    def handle(self, command: CreateBookingCommand, *, user=None) -> Order:
        logger.info(
            "Creating booking for hotel %s, user %s, dates %s - %s",
            command.hotel_id, command.user_id, command.check_in, command.check_out,
        )

        dates = DateRange(command.check_in, command.check_out)
        if command.check_in < timezone.localdate():
            raise InvalidBookingDates('Check-in date cannot be in the past')

        hotel = self._get_hotel(command.hotel_id)
        price = hotel.price
        if price is None:
            raise HotelUnavailable('Hotel has no nightly price configured')
        if hotel.is_blacked_out(command.check_in):
            raise HotelUnavailable(
                f"Check-in on {command.check_in.isoformat()} is not available for this offer"
            )

        nights = dates.nights
        total = quantize(price * nights)
        guests = command.adults + command.children
        guest_address = {
            'full_name': command.guest_name,
            'email': command.guest_email,
            'phone': command.guest_phone or getattr(user, 'phone', '') or '',
            'address1': hotel.location,
            'city': hotel.city,
            'state': '',
            'zip_code': '',
            'country': hotel.country,
        }

        with DjangoUnitOfWork() as uow:
            order = Order(
                user_id=command.user_id,
                order_type=OrderType.HOTEL,
                status=OrderStatus.PENDING,
                subtotal=total,
                total=total,
                currency=hotel.currency or 'USD',
                shipping_address=guest_address,
                billing_address=guest_address,
                customer_email=command.guest_email,
                customer_name=command.guest_name,
                notes=command.special_requests,
                check_in=dates.start_date,
                check_out=dates.end_date,
                guests=guests,
                special_requests=command.special_requests,
                booking_details={
                    'adults': command.adults,
                    'children': command.children,
                    'hotel_slug': hotel.slug,
                    'hotel_name': hotel.name,
                    'hotel_location': hotel.location,
                },
            )
            save_with_order_number(order)
            OrderItem.objects.create(
                order=order,
                item_type=ItemType.HOTEL,
                hotel=hotel,
                product_name=hotel.name,
                sku=f"HOTEL-{hotel.slug}",
                price=quantize(price),
                quantity=nights,
                total=total,
                attributes={'adults': command.adults, 'children': command.children, 'guests': guests},
                booking_dates={**dates.as_dict(), 'nights': nights},
            )
            order.record_event(
                BookingCreated(
                    order_id=order.pk,
                    order_number=order.order_number,
                    hotel_name=hotel.name,
                    check_in=dates.start_date,
                    check_out=dates.end_date,
                    nights=nights,
                    total=total,
                    currency=order.currency,
                    guest_name=command.guest_name,
                    guest_email=command.guest_email,
                )
            )
            uow.collect_events(order)

        logger.info("Booking %s created: %s nights at %s, total %s", order.order_number, nights, hotel.slug, total)
        return order

    @staticmethod
    def _get_hotel(hotel_id: UUID) -> Hotel:
        hotel: Optional[Hotel] = Hotel.objects.filter(pk=hotel_id).first()
        if hotel is None:
            raise HotelNotFound('Hotel not found')
        if not hotel.is_active:
            raise HotelUnavailable('Hotel is not available for booking')
        return hotel


class CancelBookingHandler:
    """Handler for CancelBooking command: pending or confirmed stays only"""

    def handle(self, command: CancelBookingCommand) -> Order:
        with DjangoUnitOfWork() as uow:
            order = Order.objects.select_for_update().get(pk=command.order_id, order_type=OrderType.HOTEL)
            if order.status not in CANCELLABLE_STATUSES:
                raise InvalidStatusTransition(order.status, OrderStatus.CANCELLED, kind='booking')
            order.transition_to(OrderStatus.CANCELLED)
            if command.reason:
                order.notes = f"{order.notes}\nCancelled: {command.reason}".strip()
            order.save()
            uow.collect_events(order)

        logger.info("Booking %s cancelled", order.order_number)
        return order
