"""
Pricing Domain Errors

Every failure of a price calculation is caused by invalid input, so none of
these errors is retryable and no partial breakdown ever accompanies them.
"""


class PricingError(ValueError):
    """Base error for a booking price that cannot be computed."""

    code = 'pricing_error'


class InvalidDateFormatError(PricingError):
    """Raised when a start or end date cannot be parsed into a calendar date."""

    code = 'invalid_date_format'


class InvalidRangeError(PricingError):
    """Raised when the end date precedes the start date."""

    code = 'invalid_range'


class PastStartDateError(PricingError):
    """Raised when the start date is earlier than today."""

    code = 'past_start_date'


class EmptyRangeError(PricingError):
    """Raised when a range covers less than one day."""

    code = 'empty_range'


class NoPricingAvailableError(PricingError):
    """Raised when a listing has neither a daily nor a monthly rate."""

    code = 'no_pricing_available'
