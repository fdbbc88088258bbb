"""
Observability helpers.

Configures the package logger and hands out correlation IDs so every
record emitted during one driver run can be tied together.
"""

import logging
import sys
import uuid

from order_delivery.app.core.config import Settings, settings as default_settings

# Configure structured logger
LOGGER_NAME = "order_delivery"
logger = logging.getLogger(LOGGER_NAME)

_HANDLER_MARK = "_order_delivery_handler"


def configure_logging(settings: Settings = None) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Status lines go to stdout, so log output must never share that stream.
    Calling this more than once replaces the previous handler. Records stop
    at this logger so a configured root logger does not print them again.
    """
    settings = settings or default_settings
    level = logging.DEBUG if settings.debug else settings.log_level

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(settings.log_format))
    setattr(handler, _HANDLER_MARK, True)

    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(level)
    return logger


def new_correlation_id() -> str:
    """Generate a correlation ID for one run."""
    return str(uuid.uuid4())
