"""
Runtime configuration for gtkbind

Settings are read from GTKBIND_* environment variables, for example
GTKBIND_LIB_PATH=/opt/gtk/lib/libgtk-4.so.1
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "GTKBIND_"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class Settings:
    """
    Configuration for library discovery and signal diagnostics.

    Attributes:
        lib_path: Explicit path to libgtk-4; skips the search entirely
        search_paths: Extra directories searched before the system defaults
        library_names: File names tried in each search directory
        log_signals: Log every signal emission reaching a Python handler
    """

    lib_path: Optional[str] = None
    search_paths: List[str] = field(default_factory=list)
    library_names: List[str] = field(
        default_factory=lambda: ["libgtk-4.so.1", "libgtk-4.so", "libgtk-4.1.dylib"]
    )
    log_signals: bool = False

    @classmethod
    def from_env(cls, environ=None) -> 'Settings':
        """
        Create settings from environment variables.

        GTKBIND_LIB_PATH, GTKBIND_SEARCH_PATHS (an os.pathsep separated
        list) and GTKBIND_LOG_SIGNALS are recognised.
        """
        environ = os.environ if environ is None else environ
        settings = cls()

        lib_path = environ.get(f"{ENV_PREFIX}LIB_PATH")
        if lib_path:
            settings.lib_path = lib_path

        search_paths = environ.get(f"{ENV_PREFIX}SEARCH_PATHS")
        if search_paths:
            settings.search_paths = [p for p in search_paths.split(os.pathsep) if p]

        log_signals = environ.get(f"{ENV_PREFIX}LOG_SIGNALS")
        if log_signals is not None:
            settings.log_signals = log_signals.strip().lower() in _TRUE_VALUES

        logger.debug("Loaded settings from environment: %s", settings)
        return settings
