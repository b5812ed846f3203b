"""Environment-aware default configuration for daybook.

This module defines a `Settings` class (pydantic `BaseSettings`) holding the
defaults a `TagLogger` falls back to when an option is not passed explicitly.
Every field may be overridden through environment variables using the
`DAYBOOK_` prefix, e.g. `DAYBOOK_DEBUG=1` or `DAYBOOK_FILE_MIN_LEVEL=warning`.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

from daybook.levels import Level
from daybook.modes import ConsoleBackend


def _default_log_dir() -> Path:
    return Path(tempfile.gettempdir()) / "daybook" / "logs"


class Settings(BaseSettings):
    """Top-level pydantic Settings container for daybook configuration.

    `debug` selects the interactive context: console routing when true, file
    routing otherwise. The remaining fields tune the file sink, the formatter
    and the diagnostics channel.
    """

    # Routing
    debug: bool = False
    console_backend: ConsoleBackend = ConsoleBackend.PRINT
    enable_file_line_number: bool = True

    # File sink
    log_dir: Path = Field(default_factory=_default_log_dir)
    retention_days: int = Field(default=7, ge=0)
    file_min_level: Level = Level.ERROR

    # Level for daybook's own failure reports (loguru level name)
    diagnostics_level: str = "WARNING"

    model_config = ConfigDict(env_prefix="DAYBOOK_")

    @field_validator("file_min_level", mode="before")
    @classmethod
    def _parse_level(cls, value):
        return Level.parse(value)


settings = Settings()
