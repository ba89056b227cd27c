"""
Shared Kernel

Value objects reused by the pricing domain: the inclusive booking date range
and money rounding.
"""
