"""Day-partitioned file sink with rotation and one-shot retention sweep.

`RotatingFileSink` keeps at most one open handle, keyed by the calendar day of
the injected clock. When the day changes the old handle is flushed and closed
before `<directory>/<yyyyMMdd>.log` for the new day is opened. Rotation and
the write that triggered it happen under one lock, so concurrent callers never
write into a handle that is being closed.
"""

from __future__ import annotations

import datetime
import pathlib
import threading
from collections.abc import Callable
from typing import TextIO

from daybook.errors import SinkInitializationError
from daybook.formatting import day_key
from daybook.retention import DEFAULT_WINDOW_DAYS, sweep
from daybook.utils.logging import get_diagnostics

Clock = Callable[[], datetime.datetime]


class RotatingFileSink:
    """Append-only writer for `<yyyyMMdd>.log` files in a single directory.

    Write failures are reported through the diagnostics logger and never raised,
    so a full disk or a revoked permission cannot crash the host application.
    """

    def __init__(
        self,
        directory: pathlib.Path | str,
        *,
        retention_days: int = DEFAULT_WINDOW_DAYS,
        clock: Clock | None = None,
    ):
        """Create an uninitialized sink; call `initialize()` before appending.

        Args:
            directory (pathlib.Path | str): Directory holding the log files.
            retention_days (int): Age in whole days after which files are swept.
            clock (Clock | None): Source of "now"; defaults to the local wall clock.

        """
        self.directory = pathlib.Path(directory)
        self.retention_days = retention_days
        self.clock = clock or datetime.datetime.now
        self._lock = threading.Lock()
        self._initialized = False
        self._handle: TextIO | None = None
        self._date: str | None = None
        self._path: pathlib.Path | None = None
        self.logger = get_diagnostics("file_sink")

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def active_date(self) -> str | None:
        """Day key of the open file, or `None` when no file is open."""
        return self._date

    @property
    def active_path(self) -> pathlib.Path | None:
        return self._path

    def initialize(self) -> None:
        """Create the log directory and sweep expired files.

        The sweep completes before the sink accepts writes. Calling this again
        after a successful initialization does nothing.

        Raises:
            SinkInitializationError: The directory cannot be created or is not
                a directory. The sink stays uninitialized and appends are no-ops.

        """
        with self._lock:
            if self._initialized:
                return
            try:
                self.directory.mkdir(parents=True, exist_ok=True)
                usable = self.directory.is_dir()
            except OSError as e:
                raise SinkInitializationError(self.directory, e) from e
            if not usable:
                raise SinkInitializationError(self.directory)
            try:
                sweep(self.directory, self.retention_days, now=self.clock())
            except Exception as e:
                self.logger.warning("Retention sweep of {} failed: {}", self.directory, e)
            self._initialized = True

    def append(self, line: str) -> bool:
        """Write `line` plus a newline to today's file, rotating when needed.

        Rotation only moves forward: if the clock steps back across midnight the
        line goes to the file that is already open, so a day that was rotated
        away is never reopened.

        Returns:
            bool: True when the line was written, False when it was dropped
                (sink not initialized, or an I/O failure that was reported).

        """
        with self._lock:
            if not self._initialized:
                return False
            try:
                today = day_key(self.clock())
                if self._handle is None or today > self._date:
                    self._rotate(today)
                self._handle.write(line + "\n")
            except Exception as e:
                self.logger.warning("Failed to write log line to {}: {}", self._path, e)
                return False
            return True

    def _rotate(self, today: str) -> None:
        # caller holds self._lock
        previous = self._handle
        self._handle = None
        self._date = None
        self._path = None
        if previous is not None:
            try:
                previous.flush()
            finally:
                previous.close()
        path = self.directory / f"{today}.log"
        self._handle = path.open("a", encoding="utf-8", errors="backslashreplace", buffering=1)
        self._date = today
        self._path = path

    def dispose(self) -> None:
        """Flush and close the open file, if any. Safe to call repeatedly.

        The sink returns to the uninitialized state; later appends are dropped
        until `initialize()` is called again.
        """
        with self._lock:
            self._initialized = False
            handle = self._handle
            self._handle = None
            self._date = None
            self._path = None
            if handle is None:
                return
            try:
                try:
                    handle.flush()
                finally:
                    handle.close()
            except Exception as e:
                self.logger.warning("Failed to close log file: {}", e)

    def __enter__(self) -> RotatingFileSink:
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
