"""
Booking Date Validation

Turns raw start/end inputs into civil dates of the reference time zone and
checks that they form a bookable range:
- both inputs parse to calendar dates
- the end is not before the start
- the start is not before today in the reference zone
"""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo

from apps.pricing.domain.exceptions import (
    EmptyRangeError,
    InvalidDateFormatError,
    InvalidRangeError,
    PastStartDateError,
)
from config import get_settings
from shared.domain.value_objects import BookingDates

DateInput = date | datetime | str
ZoneInput = tzinfo | str | None


def reference_zone(tz: ZoneInput = None) -> tzinfo:
    """Return the zone booking dates are read in (configured one by default)."""
    if tz is None:
        return ZoneInfo(get_settings().PRICING_TIME_ZONE)
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def current_date(tz: ZoneInput = None) -> date:
    """Today's civil date in the reference zone."""
    return datetime.now(reference_zone(tz)).date()


def parse_civil_date(value: DateInput, field_name: str = 'Date', tz: ZoneInput = None) -> date:
    """
    Normalize a raw date input to a civil date in the reference zone

    Accepts ``date`` objects, ``datetime`` objects and ISO 8601 strings.
    Aware datetimes are converted into the reference zone first, naive ones
    are read as reference-zone wall time. The time of day is dropped.

    Raises:
        InvalidDateFormatError: If the value is not a recognizable date
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        return value
    elif isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            # fromisoformat() only understands the "Z" suffix from Python 3.11
            moment = datetime.fromisoformat(text.replace('Z', '+00:00'))
        except ValueError as exc:
            raise InvalidDateFormatError(
                f"{field_name} is not a valid date: {value!r}. Use YYYY-MM-DD"
            ) from exc
    else:
        raise InvalidDateFormatError(
            f"{field_name} must be a date, datetime or YYYY-MM-DD string, "
            f"got {type(value).__name__}"
        )

    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(reference_zone(tz)).date()


def validate_date_range(
    start_date: DateInput,
    end_date: DateInput,
    *,
    today: date | datetime | None = None,
    tz: ZoneInput = None,
) -> BookingDates:
    """
    Validate a requested booking range

    ``today`` is sampled once, before any check, unless the caller pins it.
    A pinned datetime counts by its calendar date.

    Returns:
        The normalized range; ``total_days`` counts both ends

    Raises:
        InvalidDateFormatError: Either date cannot be parsed
        InvalidRangeError: End date precedes start date
        PastStartDateError: Start date is before today
        EmptyRangeError: Range covers less than one day
    """
    zone = reference_zone(tz)
    if today is None:
        today = current_date(zone)
    elif isinstance(today, datetime):
        today = today.date()

    start = parse_civil_date(start_date, 'Start date', zone)
    end = parse_civil_date(end_date, 'End date', zone)

    if end < start:
        raise InvalidRangeError(
            f"End date ({end.isoformat()}) must be on or after start date ({start.isoformat()})"
        )

    if start < today:
        raise PastStartDateError(
            f"Start date ({start.isoformat()}) cannot be in the past (today is {today.isoformat()})"
        )

    total_days = (end - start).days + 1
    if total_days < 1:
        raise EmptyRangeError("Booking must be at least 1 day")

    return BookingDates(start=start, end=end)
