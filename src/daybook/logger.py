"""Leveled logging facade routing records to a console or a daily log file.

`TagLogger` is the public entry point. Each call goes to exactly one sink:
the console in the interactive/debug context, the day-rotating file sink
otherwise. File output only keeps records at or above a minimum level, while
the console shows every enabled call. An optional listener sees every line
that reached its sink; lines the file sink drops are not reported to it.

Example:
    log = TagLogger("payments", output_mode=OutputMode.FILE)
    log.i("ignored in file mode")
    log.e("card declined")
    log.dispose()

"""

from __future__ import annotations

import datetime
import pathlib
from collections.abc import Callable
from typing import Any

from daybook.caller import CallerInfo, resolve_caller
from daybook.config import settings
from daybook.errors import SinkInitializationError
from daybook.formatting import LogRecord, format_console_line, format_file_line
from daybook.levels import Level
from daybook.modes import ConsoleBackend, OutputMode
from daybook.sinks.console import ConsoleSink
from daybook.sinks.file import Clock, RotatingFileSink
from daybook.utils.logging import get_diagnostics

LogListener = Callable[[Level, str], Any]


class TagLogger:
    """Tagged logger with `v/d/i/w/e` methods and a single routed sink.

    Logging is fail-open: sink, caller lookup and listener failures are reported
    through the diagnostics logger and never reach the calling code.
    """

    def __init__(
        self,
        tag: str,
        *,
        enable_log: bool = True,
        enable_file_line_number: bool | None = None,
        listener: LogListener | None = None,
        output_mode: OutputMode | str | None = None,
        log_dir: pathlib.Path | str | None = None,
        file_min_level: Level | str | int | None = None,
        console_backend: ConsoleBackend | str | None = None,
        retention_days: int | None = None,
        clock: Clock | None = None,
    ):
        """Create a logger; in file mode the file sink is initialized here.

        Options left as `None` fall back to `daybook.config.settings`.

        Args:
            tag (str): Name written in front of every file line.
            enable_log (bool): Initial state of the global enable gate.
            enable_file_line_number (bool | None): Show `[file:line]` on console lines.
            listener (LogListener | None): Called with `(level, line)` after dispatch.
            output_mode (OutputMode | str | None): Explicit routing; defaults to
                console when `settings.debug` is true, file otherwise.
            log_dir (pathlib.Path | str | None): Directory for daily log files.
            file_min_level (Level | str | int | None): Lowest level persisted in file mode.
            console_backend (ConsoleBackend | str | None): Console writer backend.
            retention_days (int | None): Retention window applied at startup.
            clock (Clock | None): Source of "now"; defaults to the local wall clock.

        """
        self.tag = tag
        self.enable_log = enable_log
        self.enable_file_line_number = (
            settings.enable_file_line_number
            if enable_file_line_number is None
            else enable_file_line_number
        )
        self.log_listener = listener
        if output_mode is None:
            output_mode = OutputMode.CONSOLE if settings.debug else OutputMode.FILE
        self.output_mode = OutputMode(output_mode)
        self.file_min_level = Level.parse(
            settings.file_min_level if file_min_level is None else file_min_level
        )
        self.clock = clock or datetime.datetime.now
        self.logger = get_diagnostics("logger")

        self.console_sink: ConsoleSink | None = None
        self.file_sink: RotatingFileSink | None = None
        if self.output_mode is OutputMode.CONSOLE:
            self.console_sink = ConsoleSink(console_backend or settings.console_backend, tag=tag)
        else:
            self.file_sink = RotatingFileSink(
                log_dir or settings.log_dir,
                retention_days=(
                    settings.retention_days if retention_days is None else retention_days
                ),
                clock=self.clock,
            )
            try:
                self.file_sink.initialize()
            except SinkInitializationError as e:
                self.logger.error("File logging disabled for [{}]: {}", tag, e)

    def set_enable(self, enable: bool) -> None:
        self.enable_log = enable

    def set_log_listener(self, listener: LogListener | None) -> None:
        self.log_listener = listener

    def v(self, message: Any = None) -> None:
        self._log(Level.VERBOSE, message)

    def t(self, message: Any = None) -> None:
        self._log(Level.TRACE, message)

    def d(self, message: Any = None) -> None:
        self._log(Level.DEBUG, message)

    def i(self, message: Any = None) -> None:
        self._log(Level.INFO, message)

    def w(self, message: Any = None) -> None:
        self._log(Level.WARNING, message)

    def e(self, message: Any = None) -> None:
        self._log(Level.ERROR, message)

    def f(self, message: Any = None) -> None:
        self._log(Level.FATAL, message)

    def log(self, level: Level | str | int, message: Any = None) -> None:
        """Log `message` at an arbitrary level; `OFF` is never emitted."""
        self._log(Level.parse(level), message)

    def _log(self, level: Level, message: Any) -> None:
        if not self.enable_log or level is Level.OFF:
            return

        if self.output_mode is OutputMode.CONSOLE:
            caller = self._caller() if self.enable_file_line_number else None
            record = LogRecord(level, self.tag, self.clock(), message, caller)
            line = format_console_line(record, show_caller=self.enable_file_line_number)
            try:
                self.console_sink.write(level, line)
            except Exception:
                self.logger.exception("Console write failed for [{}]", self.tag)
                return
        else:
            if level < self.file_min_level:
                return
            record = LogRecord(level, self.tag, self.clock(), message, self._caller())
            line = format_file_line(record)
            if not self.file_sink.append(line):
                return

        self._notify(level, line)

    def _caller(self) -> CallerInfo | None:
        try:
            return resolve_caller(depth=2)
        except Exception:
            return None

    def _notify(self, level: Level, line: str) -> None:
        listener = self.log_listener
        if listener is None:
            return
        try:
            listener(level, line)
        except Exception:
            self.logger.exception("Log listener raised for [{}]", self.tag)

    def dispose(self) -> None:
        """Flush and close the file sink, if this logger has one."""
        if self.file_sink is not None:
            self.file_sink.dispose()

    def __enter__(self) -> TagLogger:
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
