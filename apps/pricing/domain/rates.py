"""
Listing Rate Resolution

Listings reach the calculator in several shapes: a nested ``price`` object
(``price.perDay``), flat top-level fields (``pricePerDay``) or ORM model
attributes (``price_per_day``). Each shape is read by one ``RateSource`` and
the sources are consulted in a fixed order until one of them carries a value.

Supporting a new listing shape means adding a ``RateSource`` subclass and
listing it in ``DEFAULT_RATE_SOURCES``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Sequence, Type

import structlog

from shared.domain.base import ValueObject

logger = structlog.get_logger(__name__)

ZERO = Decimal('0')


def lookup(container: Any, name: str) -> Any:
    """Read ``name`` from a mapping key or an object attribute."""
    if container is None:
        return None
    if isinstance(container, Mapping):
        return container.get(name)
    return getattr(container, name, None)


def is_present(value: Any) -> bool:
    """True for a value that ends the lookup chain: anything but None, False, 0, "" or NaN."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, Decimal):
        return not (value.is_nan() or value.is_zero())
    if isinstance(value, (int, float)):
        return not (value == 0 or value != value)
    return True


def to_rate(value: Any) -> Decimal | None:
    """
    Convert a raw rate to ``Decimal``

    Returns None for an absent value so the lookup moves on. A present value
    that is non-numeric or not positive becomes zero and still ends the lookup.
    """
    if not is_present(value):
        return None
    if isinstance(value, bool):
        return ZERO
    try:
        rate = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    if not rate.is_finite() or rate <= 0:
        return ZERO
    return rate


class RateSource(ABC):
    """Reads daily and monthly rates from one listing shape."""

    def __init__(self, listing: Any):
        self.listing = listing

    @abstractmethod
    def try_daily(self) -> Decimal | None:
        """Return the daily rate this shape carries, if any."""

    @abstractmethod
    def try_monthly(self) -> Decimal | None:
        """Return the monthly rate this shape carries, if any."""


class FieldRateSource(RateSource):
    """
    Rate source backed by named fields

    Subclasses list the field names in priority order and may override
    ``container()`` to point at a nested object.
    """

    daily_fields: Sequence[str] = ()
    monthly_fields: Sequence[str] = ()

    def container(self) -> Any:
        return self.listing

    def _first_rate(self, fields: Iterable[str]) -> Decimal | None:
        container = self.container()
        for name in fields:
            rate = to_rate(lookup(container, name))
            if rate is not None:
                return rate
        return None

    def try_daily(self) -> Decimal | None:
        return self._first_rate(self.daily_fields)

    def try_monthly(self) -> Decimal | None:
        return self._first_rate(self.monthly_fields)


class NestedPriceSource(FieldRateSource):
    """``{"price": {"perDay": ..., "perNight": ..., "perMonth": ...}}``"""

    daily_fields = ('perDay', 'perNight')
    monthly_fields = ('perMonth',)

    def container(self) -> Any:
        return lookup(self.listing, 'price')


class FlatPriceSource(FieldRateSource):
    """``{"pricePerDay": ..., "pricePerNight": ..., "pricePerMonth": ...}``"""

    daily_fields = ('pricePerDay', 'pricePerNight')
    monthly_fields = ('pricePerMonth',)


class ModelFieldSource(FieldRateSource):
    """Model instances exposing ``price_per_day`` / ``price_per_night`` / ``price_per_month``"""

    daily_fields = ('price_per_day', 'price_per_night')
    monthly_fields = ('price_per_month',)


DEFAULT_RATE_SOURCES: tuple[Type[RateSource], ...] = (
    NestedPriceSource,
    FlatPriceSource,
    ModelFieldSource,
)


@dataclass(frozen=True)
class ResolvedRates(ValueObject):
    """Daily and monthly rate of a listing; zero means the rate is not offered."""
    daily_rate: Decimal = ZERO
    monthly_rate: Decimal = ZERO


def resolve_rates(
    listing: Any,
    sources: Sequence[Type[RateSource]] = DEFAULT_RATE_SOURCES,
) -> ResolvedRates:
    """
    Resolve a listing's daily and monthly rate

    Sources are tried in order, separately for the daily and the monthly
    rate, and the first value present in the listing wins. A value that is
    present but negative or non-numeric resolves to zero rather than
    falling through, as does a rate no source provides. A listing without
    any rate is rejected by the pricing strategy.
    """
    bound = [source(listing) for source in sources]

    daily = next((rate for rate in (s.try_daily() for s in bound) if rate is not None), ZERO)
    monthly = next((rate for rate in (s.try_monthly() for s in bound) if rate is not None), ZERO)

    logger.debug("pricing.rates.resolved", daily_rate=str(daily), monthly_rate=str(monthly))
    return ResolvedRates(daily_rate=daily, monthly_rate=monthly)
