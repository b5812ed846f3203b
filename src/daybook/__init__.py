"""daybook: a tagged, leveled logging facade with daily log files.

Expose the facade and the pieces it is built from for direct use.
"""

from daybook.caller import CallerInfo, resolve_caller
from daybook.errors import DaybookError, SinkInitializationError
from daybook.levels import Level
from daybook.logger import TagLogger
from daybook.modes import ConsoleBackend, OutputMode
from daybook.retention import sweep
from daybook.sinks import ConsoleSink, RotatingFileSink

__all__ = [
    "CallerInfo",
    "ConsoleBackend",
    "ConsoleSink",
    "DaybookError",
    "Level",
    "OutputMode",
    "RotatingFileSink",
    "SinkInitializationError",
    "TagLogger",
    "resolve_caller",
    "sweep",
]
