"""Core authcore utilities.

This module exports configuration and logging helpers for use throughout
the application.
"""

from authcore.core.config import Settings, get_settings
from authcore.core.logging import LoggingContext, configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
]
