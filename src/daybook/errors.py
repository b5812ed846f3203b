"""Exceptions raised by daybook.

Only sink initialization raises to its caller; every other failure in the
logging path is reported through the diagnostics logger and swallowed.
"""

from __future__ import annotations


class DaybookError(Exception):
    """Base class for daybook errors."""


class SinkInitializationError(DaybookError, OSError):
    """The log directory could not be created or accessed."""

    def __init__(self, directory, cause: BaseException | None = None):
        self.directory = directory
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Cannot prepare log directory {directory}{detail}")
