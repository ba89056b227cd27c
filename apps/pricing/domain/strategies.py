"""
Pricing Strategies

Chooses how a stay is charged from the rates a listing offers:

- both rates, 30 days or more: whole billing months at the monthly rate,
  the remainder at the daily rate
- both rates, under 30 days: the cheaper of the daily rate and the
  monthly-derived rate (monthly rate / 30) for the whole stay
- daily rate only: every day at the daily rate
- monthly rate only: every day at the monthly-derived rate

Amounts produced here are exact; rounding happens once, when the
breakdown is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from apps.pricing.domain.exceptions import EmptyRangeError, NoPricingAvailableError
from config.settings.base import DAYS_PER_MONTH, MONEY_PLACES
from shared.domain.value_objects import round_money

ZERO = Decimal('0')


class PricingMethod(Enum):
    """Branch of the decision tree that priced a stay"""
    MONTHLY_CHUNKS = 'monthly_chunks'      # whole months + remaining days
    DAILY_RATE = 'daily_rate'              # every day at the daily rate
    MONTHLY_DERIVED = 'monthly_derived'    # every day at monthly rate / 30


@dataclass(frozen=True)
class StayCharge:
    """Unrounded outcome of a pricing strategy."""
    method: PricingMethod
    description: str
    total_price: Decimal
    daily_charge: Decimal
    monthly_charge: Decimal = ZERO
    monthly_periods: int = 0
    remaining_days: int = 0


def _format_amount(amount: Decimal) -> str:
    return f"{amount.normalize():f}"


def _derived_description(
    total_days: int,
    monthly_rate: Decimal,
    days_per_month: int,
    places: Decimal,
) -> str:
    effective = round_money(monthly_rate / days_per_month, places)
    return (
        f"{total_days} day(s) at monthly-derived rate "
        f"({_format_amount(monthly_rate)}/{days_per_month} = {effective}/day)"
    )


def charge_monthly_chunks(
    daily_rate: Decimal,
    monthly_rate: Decimal,
    total_days: int,
    days_per_month: int = DAYS_PER_MONTH,
) -> StayCharge:
    """Charge whole billing months at the monthly rate and the rest per day."""
    monthly_periods, remaining_days = divmod(total_days, days_per_month)
    monthly_charge = monthly_periods * monthly_rate
    daily_charge = remaining_days * daily_rate

    return StayCharge(
        method=PricingMethod.MONTHLY_CHUNKS,
        description=f"{monthly_periods} month(s) + {remaining_days} day(s)",
        total_price=monthly_charge + daily_charge,
        daily_charge=daily_charge,
        monthly_charge=monthly_charge,
        monthly_periods=monthly_periods,
        remaining_days=remaining_days,
    )


def charge_cheaper_rate(
    daily_rate: Decimal,
    monthly_rate: Decimal,
    total_days: int,
    days_per_month: int = DAYS_PER_MONTH,
    places: Decimal = MONEY_PLACES,
) -> StayCharge:
    """
    Charge a short stay at whichever of the two rates is cheaper

    On equal totals the daily rate wins: the monthly-derived rate is only
    used when it is strictly cheaper.
    """
    daily_method = total_days * daily_rate
    monthly_derived = total_days * monthly_rate / days_per_month

    if monthly_derived < daily_method:
        return StayCharge(
            method=PricingMethod.MONTHLY_DERIVED,
            description=_derived_description(total_days, monthly_rate, days_per_month, places),
            total_price=monthly_derived,
            daily_charge=monthly_derived,
        )

    return charge_daily_rate(daily_rate, total_days)


def charge_daily_rate(daily_rate: Decimal, total_days: int) -> StayCharge:
    """Charge every day at the daily rate."""
    daily_charge = total_days * daily_rate
    return StayCharge(
        method=PricingMethod.DAILY_RATE,
        description=f"{total_days} day(s) at daily rate",
        total_price=daily_charge,
        daily_charge=daily_charge,
    )


def charge_monthly_derived(
    monthly_rate: Decimal,
    total_days: int,
    days_per_month: int = DAYS_PER_MONTH,
    places: Decimal = MONEY_PLACES,
) -> StayCharge:
    """Charge every day at the monthly rate spread over a billing month."""
    daily_charge = total_days * monthly_rate / days_per_month
    return StayCharge(
        method=PricingMethod.MONTHLY_DERIVED,
        description=_derived_description(total_days, monthly_rate, days_per_month, places),
        total_price=daily_charge,
        daily_charge=daily_charge,
    )


def select_strategy(
    daily_rate: Decimal,
    monthly_rate: Decimal,
    total_days: int,
    days_per_month: int = DAYS_PER_MONTH,
    places: Decimal = MONEY_PLACES,
) -> StayCharge:
    """
    Price a stay of ``total_days`` days

    ``places`` only rounds the effective daily rate quoted in the
    description; the amounts themselves stay exact.

    Raises:
        EmptyRangeError: If ``total_days`` is below 1
        NoPricingAvailableError: If neither rate is positive
    """
    if total_days < 1:
        raise EmptyRangeError("Booking must be at least 1 day")

    has_daily = daily_rate > 0
    has_monthly = monthly_rate > 0

    if has_daily and has_monthly:
        if total_days >= days_per_month:
            return charge_monthly_chunks(daily_rate, monthly_rate, total_days, days_per_month)
        return charge_cheaper_rate(daily_rate, monthly_rate, total_days, days_per_month, places)

    if has_daily:
        return charge_daily_rate(daily_rate, total_days)

    if has_monthly:
        return charge_monthly_derived(monthly_rate, total_days, days_per_month, places)

    raise NoPricingAvailableError("No pricing information available for this listing")
