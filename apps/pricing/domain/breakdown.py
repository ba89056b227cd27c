"""
Price Breakdown

The immutable result of a price calculation. It has no identity of its own:
the same listing rates, dates and "today" always produce an equal breakdown.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from apps.pricing.domain.rates import ResolvedRates
from apps.pricing.domain.strategies import PricingMethod, StayCharge
from config.settings.base import MONEY_PLACES
from shared.domain.base import ValueObject
from shared.domain.value_objects import BookingDates, round_money


@dataclass(frozen=True)
class PriceBreakdown(ValueObject):
    """
    Price breakdown value object

    ``monthly_charge`` and ``daily_charge`` are rounded independently of
    ``total_price``, so their sum may differ from it by one cent.
    """
    total_price: Decimal
    total_days: int
    monthly_periods: int
    remaining_days: int
    monthly_charge: Decimal
    daily_charge: Decimal
    daily_rate: Decimal
    monthly_rate: Decimal
    calculation_method: str
    method: PricingMethod
    start: date
    end: date

    @classmethod
    def build(
        cls,
        dates: BookingDates,
        rates: ResolvedRates,
        charge: StayCharge,
        places: Decimal = MONEY_PLACES,
    ) -> 'PriceBreakdown':
        """Round a strategy's charge and attach the inputs that produced it"""
        return cls(
            total_price=round_money(charge.total_price, places),
            total_days=dates.total_days,
            monthly_periods=charge.monthly_periods,
            remaining_days=charge.remaining_days,
            monthly_charge=round_money(charge.monthly_charge, places),
            daily_charge=round_money(charge.daily_charge, places),
            daily_rate=rates.daily_rate,
            monthly_rate=rates.monthly_rate,
            calculation_method=charge.description,
            method=charge.method,
            start=dates.start,
            end=dates.end,
        )

    @property
    def dates(self) -> BookingDates:
        return BookingDates(start=self.start, end=self.end)

    def to_dict(self) -> dict:
        """Convert the breakdown to a JSON-ready payload (amounts as strings)"""
        return {
            'totalPrice': str(self.total_price),
            'breakdown': {
                'totalDays': self.total_days,
                'monthlyPeriods': self.monthly_periods,
                'remainingDays': self.remaining_days,
                'monthlyCharge': str(self.monthly_charge),
                'dailyCharge': str(self.daily_charge),
                'dailyRate': str(self.daily_rate),
                'monthlyRate': str(self.monthly_rate),
                'calculationMethod': self.calculation_method,
                'method': self.method.value,
            },
            'dates': {
                'start': self.start.isoformat(),
                'end': self.end.isoformat(),
            },
        }

    def __str__(self):
        return f"{self.total_price} for {self.total_days} day(s) ({self.calculation_method})"
