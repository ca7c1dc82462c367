"""
Order Domain Events

Recorded on the Order aggregate (or directly on a unit of work) and
published after the surrounding transaction commits.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.domain.base import DomainEvent


@dataclass
class OrderPlaced(DomainEvent):
    """
    Event: A product order was placed through checkout

    Triggers:
    - Send order confirmation email to the customer
    - Notify the store administrator
    """
    order_id: UUID
    order_number: str
    customer_email: str
    total: Decimal


@dataclass
class OrderStatusChanged(DomainEvent):
    """
    Event: An order moved along its status state machine

    Triggers:
    - Send status update email to the customer
    """
    order_id: UUID
    order_number: str
    old_status: str
    new_status: str
    customer_email: Optional[str] = None


@dataclass
class InquiryReceived(DomainEvent):
    """
    Event: A visitor sent an event/contact inquiry

    Nothing is stored; the administrator is emailed.
    """
    contact_name: str
    contact_email: str
    contact_phone: str = ''
    details: dict = field(default_factory=dict)
