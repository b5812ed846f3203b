"""Routing and console-backend choices for a `TagLogger`."""

from __future__ import annotations

import enum


class OutputMode(str, enum.Enum):
    """Which single sink a logger routes every record to."""

    CONSOLE = "console"
    FILE = "file"


class ConsoleBackend(str, enum.Enum):
    """How a console sink puts text on the console."""

    PRINT = "print"
    TQDM = "tqdm"
    LOGURU = "loguru"
