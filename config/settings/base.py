"""Base settings for all environments.

This configuration file defines the common settings used by the booking
price calculator in both development and production. Values that differ
between deployments are read from environment variables. Environment
specific overrides live in `dev.py` or `prod.py`.
"""

import os
from decimal import Decimal

# Booking dates are civil dates in this zone, whatever the caller's locale.
PRICING_TIME_ZONE = os.environ.get('PRICING_TIME_ZONE', 'Asia/Kolkata')

# Billing month length used for monthly chunks and monthly-derived rates
DAYS_PER_MONTH = 30

# Quantum for every monetary amount in a price breakdown
MONEY_PLACES = Decimal('0.01')

# Logging
LOG_LEVEL = os.environ.get('PRICING_LOG_LEVEL', 'INFO').upper()
LOG_RENDERER = 'json'
