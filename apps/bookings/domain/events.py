"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from shared.domain.base import DomainEvent


@dataclass
class BookingCreated(DomainEvent):
    """
    Event: A hotel stay was booked

    Triggers:
    - Send booking confirmation email to the guest
    """
    order_id: UUID
    order_number: str
    hotel_name: str
    check_in: date
    check_out: date
    nights: int
    total: Decimal
    currency: str
    guest_name: str
    guest_email: str
