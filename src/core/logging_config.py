"""Structured logging configuration.

This module initializes a structlog logger with a stable JSON format.
The minimum level is read from the runtime config when an event is
emitted, so importing a module never parses the environment.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

import structlog

from core.config import load_config

_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
}


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            drop_below_configured_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
    )
    return structlog.get_logger(name)


def drop_below_configured_level(
    logger: Any,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Drop events below the configured minimum level.

    Raises:
        structlog.DropEvent: If the event level is below the threshold.
        CubeConfigError: If the configured level is invalid.
    """
    threshold = logging.getLevelName(load_config().log_level)
    if _METHOD_LEVELS.get(method_name, logging.CRITICAL) < threshold:
        raise structlog.DropEvent
    return event_dict
