"""
Common Value Objects

Value objects used across the pricing domain:
- BookingDates: An inclusive range of civil dates (first day to last day)
- round_money: Rounding of monetary amounts to the configured quantum
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator

from config.settings.base import MONEY_PLACES
from shared.domain.base import ValueObject


def round_money(amount: Decimal, places: Decimal = MONEY_PLACES) -> Decimal:
    """Round a non-negative amount half-up to ``places`` (cents by default)."""
    return amount.quantize(places, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class BookingDates(ValueObject):
    """
    Booking dates value object

    Represents a range from start (inclusive) to end (inclusive).
    A booking that starts and ends on the same day lasts one day.
    """
    start: date
    end: date

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(f"End date ({self.end}) must be on or after start date ({self.start})")

    @property
    def total_days(self) -> int:
        """Number of calendar days covered, both ends included."""
        return (self.end - self.start).days + 1

    def overlaps_with(self, other: 'BookingDates') -> bool:
        """
        Check if this range overlaps with another

        Both ends are inclusive, so a booking starting on the last day
        of another one overlaps it.

        Examples:
            - 20..23 overlaps with 23..25 -> True
            - 20..23 overlaps with 24..26 -> False
        """
        if not isinstance(other, BookingDates):
            raise TypeError("Can only check overlap with another BookingDates")

        return self.start <= other.end and self.end >= other.start

    def contains(self, check_date: date) -> bool:
        """Check if a date is within this range (both ends inclusive)"""
        return self.start <= check_date <= self.end

    def days(self) -> Iterator[date]:
        """Yield every date of the range in order"""
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        return self.total_days

    def __str__(self):
        return f"{self.start.isoformat()} - {self.end.isoformat()}"

    def __repr__(self):
        return f"BookingDates({self.start}, {self.end})"
