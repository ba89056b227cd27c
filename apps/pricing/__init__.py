"""Pricing app package.

This app encapsulates the booking price calculator: validation of the
requested booking dates, resolution of a listing's daily and monthly rates
and selection of the pricing strategy that produces the final breakdown.
Callers hand in already loaded listing records and raw date inputs, and
persist or display the returned breakdown themselves.
"""
