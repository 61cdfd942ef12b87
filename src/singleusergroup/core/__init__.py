"""Core SingleUserGroup utilities.

This module exports configuration and logging helpers for use throughout
the package.
"""

from singleusergroup.core.config import Settings, get_settings
from singleusergroup.core.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
