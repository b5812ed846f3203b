"""Diagnostics channel used by daybook to report its own failures.

Logging must never crash the host application, so write, sweep and listener
failures are reported here (through `loguru`) instead of being raised.
"""

from __future__ import annotations

import sys

from loguru import logger

from daybook.config import settings


def get_diagnostics(component: str):
    """Return the loguru logger bound to a daybook component name.

    Args:
        component (str): Short name of the reporting component, e.g. `file_sink`.

    Returns:
        loguru.Logger: A bound logger; records carry `extra["component"]`.

    """
    return logger.bind(daybook=True, component=component)


def configure_logging(level: str | None = None) -> int:
    """Route daybook diagnostics to stderr.

    Unlike application-wide setup, this only adds a handler filtered to records
    emitted through `get_diagnostics`, leaving other loguru handlers alone.

    Args:
        level (str | None): Minimum loguru level; defaults to
            `settings.diagnostics_level`.

    Returns:
        int: The loguru handler id, usable with `logger.remove`.

    """
    return logger.add(
        sys.stderr,
        level=level or settings.diagnostics_level,
        format="{time:YYYY-MM-DD HH:mm:ss} {level} daybook.{extra[component]}: {message}",
        filter=lambda record: record["extra"].get("daybook", False),
        backtrace=False,
        diagnose=False,
    )
