"""
High-level library wrapper for GTK
Provides a Pythonic API over toolkit-wide calls: initialisation, version
checks, debug flags and keyboard accelerators
"""

import logging
from typing import FrozenSet, Optional, Tuple

from .bitfields import DebugFlags, ModifierType
from .ffi import ffi, get_lib, to_cstr, from_cstr, take_cstr

logger = logging.getLogger(__name__)


class GtkLibrary:
    """
    High-level wrapper for libgtk-4
    Provides convenient methods for process-wide toolkit state
    """

    def __init__(self):
        """Initialize the wrapper (lazy loads the library on first use)"""
        self._lib = None

    @property
    def lib(self):
        """Get the underlying FFI library"""
        if self._lib is None:
            self._lib = get_lib()
        return self._lib

    # ========================================================================
    # Initialisation
    # ========================================================================

    def init(self):
        """
        Initialise GTK

        Aborts the process if no display can be opened; use init_check()
        to handle that case.
        """
        self.lib.gtk_init()
        logger.info("GTK %d.%d.%d initialised", *self.version)

    def init_check(self) -> bool:
        """
        Initialise GTK without aborting

        Returns:
            True if the windowing system could be initialised
        """
        ok = bool(self.lib.gtk_init_check())
        if not ok:
            logger.warning("gtk_init_check failed: no display available")
        return ok

    def is_initialized(self) -> bool:
        return bool(self.lib.gtk_is_initialized())

    def disable_setlocale(self):
        """Stop GTK from calling setlocale(); must precede init()"""
        self.lib.gtk_disable_setlocale()

    # ========================================================================
    # Version
    # ========================================================================

    @property
    def version(self) -> Tuple[int, int, int]:
        """Runtime (major, minor, micro) version"""
        return (int(self.lib.gtk_get_major_version()),
                int(self.lib.gtk_get_minor_version()),
                int(self.lib.gtk_get_micro_version()))

    def check_version(self, major: int, minor: int = 0, micro: int = 0) -> Optional[str]:
        """
        Check the runtime GTK is compatible with a required version

        Args:
            major: Required major version
            minor: Required minor version
            micro: Required micro version

        Returns:
            None if compatible, otherwise GTK's description of the mismatch
        """
        return from_cstr(self.lib.gtk_check_version(major, minor, micro))

    # ========================================================================
    # Debug Flags
    # ========================================================================

    @property
    def debug_flags(self) -> FrozenSet[DebugFlags]:
        """Flags from GTK_DEBUG as a set"""
        return DebugFlags.decode(self.lib.gtk_get_debug_flags())

    @debug_flags.setter
    def debug_flags(self, flags):
        self.lib.gtk_set_debug_flags(DebugFlags.encode(*flags))

    # ========================================================================
    # Accelerators
    # ========================================================================

    def parse_accelerator(self, accelerator: str) -> Optional[Tuple[int, FrozenSet[ModifierType]]]:
        """
        Parse a string such as "<Control>a" or "<Shift><Alt>F1"

        Args:
            accelerator: Accelerator string

        Returns:
            (keyval, modifiers) or None if the string cannot be parsed
        """
        if accelerator is None:
            return None
        key = ffi.new("guint *")
        mods = ffi.new("guint *")
        if not self.lib.gtk_accelerator_parse(to_cstr(accelerator), key, mods):
            return None
        return int(key[0]), ModifierType.decode(mods[0])

    def accelerator_name(self, keyval: int, *modifiers) -> str:
        """Parseable name for an accelerator, e.g. "<Control>a" """
        return take_cstr(self.lib.gtk_accelerator_name(keyval, ModifierType.encode(*modifiers)))

    def accelerator_label(self, keyval: int, *modifiers) -> str:
        """Localised label for display, e.g. "Ctrl+A" """
        return take_cstr(self.lib.gtk_accelerator_get_label(keyval, ModifierType.encode(*modifiers)))

    def accelerator_valid(self, keyval: int, *modifiers) -> bool:
        return bool(self.lib.gtk_accelerator_valid(keyval, ModifierType.encode(*modifiers)))

    def default_mod_mask(self) -> FrozenSet[ModifierType]:
        """Modifiers that take part in accelerator matching"""
        return ModifierType.decode(self.lib.gtk_accelerator_get_default_mod_mask())


# Global library instance
_library = None


def get_library() -> GtkLibrary:
    """Get the global GtkLibrary instance"""
    global _library
    if _library is None:
        _library = GtkLibrary()
    return _library
