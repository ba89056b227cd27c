"""Top-level package for the calculator configuration.

This package exposes configuration for the booking price calculator. It
contains settings modules for different environments and the logging
set-up used by processes that embed the calculator.
"""

import importlib
import os
from types import ModuleType

SETTINGS_MODULE_ENV = 'PRICING_SETTINGS_MODULE'
DEFAULT_SETTINGS_MODULE = 'config.settings.base'


def get_settings() -> ModuleType:
    """Return the active settings module.

    The module is chosen through ``PRICING_SETTINGS_MODULE`` the same way
    ``DJANGO_SETTINGS_MODULE`` selects a Django settings module.
    """
    return importlib.import_module(
        os.environ.get(SETTINGS_MODULE_ENV, DEFAULT_SETTINGS_MODULE)
    )
