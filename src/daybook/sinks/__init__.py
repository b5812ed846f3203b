"""Sinks receiving formatted log lines.

Expose the console writer and the day-rotating file writer.
"""

from .console import ConsoleSink
from .file import RotatingFileSink

__all__ = ["ConsoleSink", "RotatingFileSink"]
