"""Configuration for daybook.

Expose the module-level `settings` instance and its `Settings` class.
"""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
