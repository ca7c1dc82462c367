"""
Domain exceptions

Raised by services and state machines; the API exception handler maps
them to client errors using ``status_code`` and ``error``.
"""

from typing import Any, Optional


class DomainError(Exception):
    status_code = 400
    error = 'Bad Request'

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidStatusTransition(DomainError):
    error = 'Invalid Status Transition'

    def __init__(self, current: str, target: str, *, kind: str = 'order'):
        super().__init__(f"Cannot change {kind} status from '{current}' to '{target}'")
        self.current = current
        self.target = target


class InvalidBookingDates(DomainError):
    error = 'Invalid Booking Dates'


class HotelUnavailable(DomainError):
    error = 'Hotel Unavailable'


class InsufficientStock(DomainError):
    error = 'Insufficient Stock'

    def __init__(self, name: str, available: int, requested: int):
        super().__init__(
            f"Insufficient stock for {name}. Available: {available}, requested: {requested}"
        )
        self.available = available
        self.requested = requested


class CartOwnerRequired(DomainError):
    error = 'Cart Owner Required'

    def __init__(self, message: str = 'Authentication or X-Session-Id header is required'):
        super().__init__(message)


class InvalidCoupon(DomainError):
    error = 'Invalid Coupon'


class OrderNumberConflict(DomainError):
    status_code = 409
    error = 'Order Number Conflict'


class ProductUnavailable(DomainError):
    error = 'Product Unavailable'


class HotelNotFound(DomainError):
    status_code = 404
    error = 'Not Found'
