"""structlog configuration shared by every process embedding the calculator."""

import logging
import logging.config

import structlog

from config import get_settings

_configured = False


def build_logging_config(level: str, renderer: str) -> dict:
    """Return a ``dictConfig`` payload routing stdlib logging through structlog."""
    if renderer == 'console':
        processor = structlog.dev.ConsoleRenderer()
    else:
        processor = structlog.processors.JSONRenderer()

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "()": "structlog.stdlib.ProcessorFormatter",
                "processor": processor,
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "level": level,
            }
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
        "loggers": {
            "apps.pricing": {"handlers": ["console"], "level": level, "propagate": False},
            "shared": {"handlers": ["console"], "level": level, "propagate": False},
        },
    }


def configure_logging(force: bool = False) -> None:
    """Configure structlog and stdlib logging once per process."""
    global _configured
    if _configured and not force:
        return

    settings = get_settings()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.config.dictConfig(
        build_logging_config(settings.LOG_LEVEL, settings.LOG_RENDERER)
    )
    _configured = True
