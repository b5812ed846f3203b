"""Retention sweep for date-partitioned log directories.

Files named `<yyyyMMdd>.log` whose day lies more than `window_days` whole days
before "now" are deleted. Anything else in the directory is left alone.
"""

from __future__ import annotations

import datetime
import pathlib
import re

from daybook.utils.logging import get_diagnostics

DEFAULT_WINDOW_DAYS = 7

_LOG_NAME = re.compile(r"^(\d{8})\.log$")

_diag = get_diagnostics("retention")


def parse_log_date(name: str) -> datetime.datetime | None:
    """Return midnight of the day encoded in a log file name, or `None`.

    Args:
        name (str): A bare file name such as `20240115.log`.

    Returns:
        datetime.datetime | None: The parsed day, or `None` when the name does
            not match the pattern or encodes an impossible date.

    """
    match = _LOG_NAME.match(name)
    if match is None:
        return None
    try:
        return datetime.datetime.strptime(match.group(1), "%Y%m%d")
    except ValueError:
        return None


def sweep(
    directory: pathlib.Path | str,
    window_days: int = DEFAULT_WINDOW_DAYS,
    now: datetime.datetime | None = None,
) -> list[pathlib.Path]:
    """Delete log files older than the retention window.

    Deletion failures are reported per file and do not stop the sweep.

    Args:
        directory (pathlib.Path | str): The log directory to scan.
        window_days (int): Maximum age in whole days a file may reach.
        now (datetime.datetime | None): Reference time; defaults to the local
            wall clock.

    Returns:
        list[pathlib.Path]: Paths that were deleted.

    """
    directory = pathlib.Path(directory)
    now = now or datetime.datetime.now()
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        _diag.warning("Cannot list log directory {}: {}", directory, e)
        return []

    deleted: list[pathlib.Path] = []
    for entry in entries:
        file_date = parse_log_date(entry.name)
        if file_date is None:
            continue
        try:
            if not entry.is_file():
                continue
        except OSError as e:
            _diag.warning("Cannot inspect log file {}: {}", entry, e)
            continue
        # compare in now's timezone so aware clocks work too
        age = now - file_date.replace(tzinfo=now.tzinfo)
        if age.days <= window_days:
            continue
        try:
            entry.unlink()
        except OSError as e:
            _diag.warning("Failed to delete old log file {}: {}", entry, e)
            continue
        _diag.debug("Deleted expired log file {}", entry)
        deleted.append(entry)
    return deleted
