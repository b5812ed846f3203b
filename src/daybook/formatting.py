"""Pure formatting of log records into display lines.

Nothing in this module writes anywhere; sinks receive the finished string.
"""

from __future__ import annotations

import dataclasses
import datetime
from typing import Any

from daybook.caller import CallerInfo
from daybook.levels import Level

CONSOLE_TIME_FORMAT = "%H:%M:%S"
FILE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DAY_KEY_FORMAT = "%Y%m%d"


@dataclasses.dataclass(frozen=True)
class LogRecord:
    """A single logging call, built at call time and dropped once dispatched."""

    level: Level
    tag: str
    timestamp: datetime.datetime
    message: Any = None
    caller: CallerInfo | None = None


def render_message(message: Any) -> str:
    """Render an arbitrary object as message text; `None` becomes `""`."""
    if message is None:
        return ""
    try:
        return str(message)
    except Exception:
        return f"<unprintable {type(message).__name__}>"


def day_key(timestamp: datetime.datetime) -> str:
    """Return the `yyyyMMdd` key naming the log file for `timestamp`'s day."""
    return timestamp.strftime(DAY_KEY_FORMAT)


def format_console_line(record: LogRecord, show_caller: bool = True) -> str:
    """Render `<emoji> [<file>:<line>] [<HH:MM:SS>] <message>`.

    The location segment is omitted when `show_caller` is false or the record
    carries no caller.
    """
    parts = [record.level.emoji]
    if show_caller and record.caller is not None:
        parts.append(f"[{record.caller}]")
    parts.append(f"[{record.timestamp.strftime(CONSOLE_TIME_FORMAT)}]")
    parts.append(render_message(record.message))
    return " ".join(parts)


def format_file_line(record: LogRecord) -> str:
    """Render `[<tag>] <LEVEL> [<file>:<line>] [<YYYY-MM-DD HH:MM:SS>] <message>`."""
    parts = [f"[{record.tag}]", record.level.name]
    if record.caller is not None:
        parts.append(f"[{record.caller}]")
    parts.append(f"[{record.timestamp.strftime(FILE_TIME_FORMAT)}]")
    parts.append(render_message(record.message))
    return " ".join(parts)
