"""Service entry points for booking price calculation."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Sequence, Type

import structlog

from apps.pricing.domain.breakdown import PriceBreakdown
from apps.pricing.domain.dates import DateInput, ZoneInput, validate_date_range
from apps.pricing.domain.exceptions import PricingError
from apps.pricing.domain.rates import DEFAULT_RATE_SOURCES, RateSource, resolve_rates
from apps.pricing.domain.strategies import select_strategy
from config import get_settings
from shared.domain.value_objects import BookingDates

logger = structlog.get_logger(__name__)


def validate_booking_dates(
    start_date: DateInput,
    end_date: DateInput,
    *,
    today: date | datetime | None = None,
    tz: ZoneInput = None,
) -> BookingDates:
    """Validate a requested range before any listing is loaded."""

    try:
        return validate_date_range(start_date, end_date, today=today, tz=tz)
    except PricingError as exc:
        logger.warning("pricing.dates.rejected", code=exc.code, error=str(exc))
        raise


def compute_booking_price(
    listing: Any,
    start_date: DateInput,
    end_date: DateInput,
    *,
    today: date | datetime | None = None,
    tz: ZoneInput = None,
    sources: Sequence[Type[RateSource]] | None = None,
) -> PriceBreakdown:
    """
    Compute the price of booking ``listing`` from ``start_date`` to ``end_date``.

    ``listing`` is a mapping or an object carrying the pricing terms in any
    shape the rate sources understand. ``today`` and ``tz`` default to the
    current date in the configured reference zone.

    Raises:
        PricingError: One of its subclasses when no price can be computed.
    """

    settings = get_settings()
    try:
        dates = validate_date_range(start_date, end_date, today=today, tz=tz)
        rates = resolve_rates(listing, sources or DEFAULT_RATE_SOURCES)
        charge = select_strategy(
            rates.daily_rate,
            rates.monthly_rate,
            dates.total_days,
            days_per_month=settings.DAYS_PER_MONTH,
            places=settings.MONEY_PLACES,
        )
    except PricingError as exc:
        logger.warning("pricing.quote.rejected", code=exc.code, error=str(exc))
        raise

    breakdown = PriceBreakdown.build(dates, rates, charge, places=settings.MONEY_PLACES)
    logger.info(
        "pricing.quote.computed",
        start=breakdown.start.isoformat(),
        end=breakdown.end.isoformat(),
        total_days=breakdown.total_days,
        method=breakdown.method.value,
        total_price=str(breakdown.total_price),
    )
    return breakdown
