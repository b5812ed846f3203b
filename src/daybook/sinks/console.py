"""Console sink writing formatted lines to the developer console.

The sink is only used when the facade runs in the interactive/debug context.
Its backend is an instance field so different facades may print differently.
"""

from __future__ import annotations

import sys

from loguru import logger
from tqdm import tqdm

from daybook.levels import Level
from daybook.modes import ConsoleBackend

# loguru has no VERBOSE or FATAL level; map onto its built-in ones
_LOGURU_LEVELS = {
    Level.VERBOSE: "TRACE",
    Level.TRACE: "TRACE",
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARNING: "WARNING",
    Level.ERROR: "ERROR",
    Level.FATAL: "CRITICAL",
}


class ConsoleSink:
    """Synchronous, fire-and-forget console writer."""

    def __init__(self, backend: ConsoleBackend | str = ConsoleBackend.PRINT, *, tag: str = ""):
        """Create a console sink.

        Args:
            backend (ConsoleBackend | str): `print` writes to stdout, `tqdm` uses
                `tqdm.write` so active progress bars are not broken, `loguru`
                forwards to the loguru logger with a mapped level.
            tag (str): Name bound to loguru records when the loguru backend is used.

        """
        self.backend = ConsoleBackend(backend)
        self.tag = tag

    def write(self, level: Level, line: str) -> None:
        if self.backend is ConsoleBackend.PRINT:
            print(line, file=sys.stdout, flush=True)
        elif self.backend is ConsoleBackend.TQDM:
            tqdm.write(line, file=sys.stdout)
        else:
            name = _LOGURU_LEVELS.get(level, "INFO")
            logger.bind(tag=self.tag).log(name, line)
