"""Production settings for the booking price calculator.

This module extends the base settings with production specific
configuration. The reference time zone must be provided via the
environment when it differs from the default.
"""

from .base import *  # noqa: F401,F403

LOG_LEVEL = os.environ.get('PRICING_LOG_LEVEL', 'WARNING').upper()  # noqa: F405

LOG_RENDERER = 'json'
