"""
Common Value Objects

Value objects used across multiple domains:
- to_decimal / quantize: money arithmetic rounded half-up to cents
- DateRange: Stay period (check-in to check-out)
"""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from shared.domain.base import ValueObject
from shared.domain.exceptions import InvalidBookingDates

CENT = Decimal('0.01')


def to_decimal(value) -> Decimal:
    """Coerce ints, strings and floats to Decimal without binary float noise"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize(value) -> Decimal:
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a stay from start_date (inclusive) to end_date (exclusive).
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date >= self.end_date:
            raise InvalidBookingDates('Check-out date must be after check-in date')

    def contains(self, check_date: date) -> bool:
        """start_date is inclusive, end_date is exclusive"""
        return self.start_date <= check_date < self.end_date

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def __len__(self) -> int:
        return self.nights

    def as_dict(self) -> dict:
        return {'check_in': self.start_date.isoformat(), 'check_out': self.end_date.isoformat()}

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
