"""Development settings for the booking price calculator.

This module extends the base settings with development specific
configuration, such as verbose logging rendered for a terminal.
Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

LOG_LEVEL = 'DEBUG'

# Human readable log lines in the console
LOG_RENDERER = 'console'
