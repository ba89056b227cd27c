"""Tests for the booking price calculator entry points."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

import pytest
from structlog.testing import capture_logs

from apps.pricing.domain.exceptions import (
    InvalidDateFormatError,
    InvalidRangeError,
    NoPricingAvailableError,
    PastStartDateError,
    PricingError,
)
from apps.pricing.domain.strategies import PricingMethod
from apps.pricing.services import compute_booking_price, validate_booking_dates

TODAY = date(2030, 1, 15)


def _quote(listing, days: int, start: date = TODAY):
    end = start + timedelta(days=days - 1)
    return compute_booking_price(listing, start.isoformat(), end.isoformat(), today=TODAY, tz="Asia/Kolkata")


def _cents(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


@pytest.fixture
def apartment() -> dict:
    return {"price": {"perDay": 1000, "perMonth": 25000}}


def test_short_stay_uses_cheaper_monthly_derived_rate(apartment):
    breakdown = _quote(apartment, 10)

    assert breakdown.total_price == Decimal("8333.33")
    assert breakdown.daily_charge == Decimal("8333.33")
    assert breakdown.monthly_charge == Decimal("0.00")
    assert breakdown.monthly_periods == 0
    assert breakdown.remaining_days == 0
    assert breakdown.method is PricingMethod.MONTHLY_DERIVED
    assert "monthly-derived" in breakdown.calculation_method
    assert "833.33/day" in breakdown.calculation_method


def test_long_stay_is_chunked_into_months(apartment):
    breakdown = _quote(apartment, 35)

    assert breakdown.monthly_periods == 1
    assert breakdown.remaining_days == 5
    assert breakdown.monthly_charge == Decimal("25000.00")
    assert breakdown.daily_charge == Decimal("5000.00")
    assert breakdown.total_price == Decimal("30000.00")
    assert breakdown.method is PricingMethod.MONTHLY_CHUNKS
    assert breakdown.calculation_method == "1 month(s) + 5 day(s)"


def test_exactly_thirty_days_is_one_month(apartment):
    breakdown = _quote(apartment, 30)

    assert breakdown.monthly_periods == 1
    assert breakdown.remaining_days == 0
    assert breakdown.total_price == Decimal("25000.00")


def test_daily_only_listing():
    breakdown = _quote({"pricePerDay": 500}, 3)

    assert breakdown.total_price == Decimal("1500.00")
    assert breakdown.daily_rate == Decimal("500")
    assert breakdown.monthly_rate == Decimal("0")
    assert breakdown.method is PricingMethod.DAILY_RATE
    assert breakdown.calculation_method == "3 day(s) at daily rate"


def test_monthly_only_listing():
    breakdown = _quote({"pricePerMonth": 3000}, 45)

    assert breakdown.total_price == Decimal("4500.00")
    assert breakdown.monthly_periods == 0
    assert breakdown.monthly_charge == Decimal("0.00")
    assert breakdown.method is PricingMethod.MONTHLY_DERIVED
    assert "3000/30 = 100.00/day" in breakdown.calculation_method


def test_equal_totals_prefer_daily_rate():
    breakdown = _quote({"price": {"perDay": 1000, "perMonth": 30000}}, 10)

    assert breakdown.total_price == Decimal("10000.00")
    assert breakdown.method is PricingMethod.DAILY_RATE


def test_cheaper_daily_rate_wins_for_short_stay():
    breakdown = _quote({"price": {"perDay": 700, "perMonth": 25000}}, 7)

    assert breakdown.total_price == Decimal("4900.00")
    assert breakdown.method is PricingMethod.DAILY_RATE


@pytest.mark.parametrize("daily_rate", ["500", "899.99", "0.37", "12345.678"])
@pytest.mark.parametrize("days", [1, 7, 29, 30, 61])
def test_daily_only_total_matches_days_times_rate(daily_rate, days):
    rate = Decimal(daily_rate)

    breakdown = _quote({"pricePerDay": daily_rate}, days)

    assert breakdown.total_price == _cents(days * rate)


@pytest.mark.parametrize("monthly_rate", ["25000", "999.99", "100"])
@pytest.mark.parametrize("days", [1, 10, 30, 47])
def test_monthly_only_total_matches_derived_rate(monthly_rate, days):
    rate = Decimal(monthly_rate)

    breakdown = _quote({"pricePerMonth": monthly_rate}, days)

    assert breakdown.total_price == _cents(days * rate / 30)


@pytest.mark.parametrize("days", [30, 31, 59, 60, 95])
def test_both_rates_long_stay_total(days):
    daily, monthly = Decimal("850"), Decimal("21000")

    breakdown = _quote({"pricePerDay": daily, "pricePerMonth": monthly}, days)

    assert breakdown.total_price == _cents((days // 30) * monthly + (days % 30) * daily)


@pytest.mark.parametrize("days", [1, 5, 24, 25, 26, 29])
def test_both_rates_short_stay_total(days):
    daily, monthly = Decimal("1000"), Decimal("25000")

    breakdown = _quote({"pricePerDay": daily, "pricePerMonth": monthly}, days)

    assert breakdown.total_price == _cents(min(days * daily, days * monthly / 30))


def test_sub_charges_are_rounded_independently():
    listing = {"pricePerDay": "10.005", "pricePerMonth": "100.005"}

    breakdown = _quote(listing, 31)

    assert breakdown.monthly_charge == Decimal("100.01")
    assert breakdown.daily_charge == Decimal("10.01")
    assert breakdown.total_price == Decimal("110.01")
    assert breakdown.monthly_charge + breakdown.daily_charge - breakdown.total_price == Decimal("0.01")


def test_same_inputs_give_equal_breakdowns(apartment):
    first = _quote(apartment, 12)
    second = _quote(apartment, 12)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_today_is_a_valid_start(apartment):
    breakdown = _quote(apartment, 1)

    assert breakdown.start == TODAY
    assert breakdown.end == TODAY
    assert breakdown.total_days == 1


def test_rejects_end_before_start(apartment):
    with pytest.raises(InvalidRangeError):
        compute_booking_price(apartment, "2030-01-20", "2030-01-19", today=TODAY)


def test_rejects_past_start(apartment):
    yesterday = TODAY - timedelta(days=1)

    with pytest.raises(PastStartDateError):
        compute_booking_price(apartment, yesterday, TODAY, today=TODAY)


def test_rejects_listing_without_rates():
    with pytest.raises(NoPricingAvailableError):
        compute_booking_price({"title": "Studio"}, TODAY, TODAY, today=TODAY)


def test_rejects_zero_rates():
    listing = {"price": {"perDay": 0, "perMonth": 0}, "pricePerDay": None}

    with pytest.raises(NoPricingAvailableError):
        compute_booking_price(listing, TODAY, TODAY, today=TODAY)


def test_negative_nested_rate_is_not_priced_from_flat_field():
    listing = {"price": {"perDay": -10}, "pricePerDay": 450}

    with pytest.raises(NoPricingAvailableError):
        compute_booking_price(listing, TODAY, TODAY, today=TODAY)


def test_today_may_be_given_as_datetime(apartment):
    breakdown = compute_booking_price(apartment, TODAY, TODAY, today=datetime(2030, 1, 15, 10, 0))

    assert breakdown.total_days == 1


def test_datetime_today_still_rejects_past_start(apartment):
    with pytest.raises(PastStartDateError):
        compute_booking_price(apartment, "2030-01-14", TODAY, today=datetime(2030, 1, 15, 0, 30))


@pytest.mark.parametrize("raw", ["not-a-date", "2030-02-30", "", "15.01.2030"])
def test_rejects_unparseable_dates(apartment, raw):
    with pytest.raises(InvalidDateFormatError):
        compute_booking_price(apartment, raw, "2030-03-01", today=TODAY)


def test_date_errors_win_over_missing_rates():
    with pytest.raises(InvalidRangeError):
        compute_booking_price({}, "2030-01-20", "2030-01-18", today=TODAY)


def test_errors_share_a_base_class_and_code():
    with pytest.raises(PricingError) as excinfo:
        compute_booking_price({}, TODAY, TODAY, today=TODAY)

    assert excinfo.value.code == "no_pricing_available"
    assert isinstance(excinfo.value, ValueError)


def test_rejection_is_logged():
    with capture_logs() as logs:
        with pytest.raises(PastStartDateError):
            compute_booking_price({"pricePerDay": 10}, "2030-01-01", "2030-01-02", today=TODAY)

    assert logs[-1]["event"] == "pricing.quote.rejected"
    assert logs[-1]["log_level"] == "warning"
    assert logs[-1]["code"] == "past_start_date"


def test_computed_quote_is_logged(apartment):
    with capture_logs() as logs:
        _quote(apartment, 35)

    computed = [entry for entry in logs if entry["event"] == "pricing.quote.computed"]
    assert len(computed) == 1
    assert computed[0]["total_price"] == "30000.00"
    assert computed[0]["method"] == "monthly_chunks"


def test_to_dict_payload(apartment):
    payload = _quote(apartment, 35).to_dict()

    assert payload == {
        "totalPrice": "30000.00",
        "breakdown": {
            "totalDays": 35,
            "monthlyPeriods": 1,
            "remainingDays": 5,
            "monthlyCharge": "25000.00",
            "dailyCharge": "5000.00",
            "dailyRate": "1000",
            "monthlyRate": "25000",
            "calculationMethod": "1 month(s) + 5 day(s)",
            "method": "monthly_chunks",
        },
        "dates": {"start": "2030-01-15", "end": "2030-02-18"},
    }


def test_custom_sources_limit_recognized_shapes(apartment):
    from apps.pricing.domain.rates import FlatPriceSource

    with pytest.raises(NoPricingAvailableError):
        compute_booking_price(apartment, TODAY, TODAY, today=TODAY, sources=(FlatPriceSource,))


def test_validate_booking_dates_standalone():
    dates = validate_booking_dates("2030-01-15", "2030-01-21", today=TODAY)

    assert dates.start == date(2030, 1, 15)
    assert dates.end == date(2030, 1, 21)
    assert dates.total_days == 7


def test_validate_booking_dates_logs_rejection():
    with capture_logs() as logs:
        with pytest.raises(InvalidRangeError):
            validate_booking_dates("2030-01-21", "2030-01-15", today=TODAY)

    assert logs[-1]["event"] == "pricing.dates.rejected"
    assert logs[-1]["code"] == "invalid_range"
