"""Best-effort lookup of the source location that issued a logging call.

The resolver walks the interpreter stack and skips frames that belong to the
daybook package itself, so the reported location is the application code that
called the facade. It never raises; when nothing usable is found the caller
simply gets `None` and the location segment is left out of the line.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import os
from pathlib import Path

_PACKAGE_DIR = str(Path(__file__).resolve().parent)


@dataclasses.dataclass(frozen=True)
class CallerInfo:
    """File name (without directories) and line number of a call site."""

    file_name: str
    line_number: int

    def __str__(self) -> str:
        return f"{self.file_name}:{self.line_number}"


@functools.lru_cache(maxsize=1024)
def _is_internal(filename: str) -> bool:
    # code filenames are stable per process, so each is resolved once
    try:
        return str(Path(filename).resolve()).startswith(_PACKAGE_DIR + os.sep)
    except (OSError, ValueError):
        return False


def _has_path(filename: str) -> bool:
    # `<string>`, `<stdin>` and `<frozen ...>` frames have no file behind them
    return bool(filename) and not filename.startswith("<")


def resolve_caller(depth: int = 1) -> CallerInfo | None:
    """Return the location of the first application frame on the stack.

    Args:
        depth (int): Number of frames above this function to skip before the
            search starts.

    Returns:
        CallerInfo | None: The first frame outside daybook that has a real
            path; failing that, the first frame after the skipped ones; `None`
            when the stack cannot be inspected at all.

    """
    frame = first = None
    try:
        frame = inspect.currentframe()
        if frame is None:
            return None
        frame = frame.f_back
        for _ in range(max(depth, 0)):
            if frame is None:
                return None
            frame = frame.f_back
        first = frame
        while frame is not None:
            filename = frame.f_code.co_filename
            if _has_path(filename) and not _is_internal(filename):
                return CallerInfo(Path(filename).name, frame.f_lineno or 0)
            frame = frame.f_back
        if first is None:
            return None
        return CallerInfo(Path(first.f_code.co_filename).name, first.f_lineno or 0)
    except Exception:
        return None
    finally:
        # break the frame reference cycle
        del frame, first
