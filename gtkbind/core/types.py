"""
Quark helpers for gtkbind
"""

from enum import Enum
from typing import Optional

from .ffi import get_lib, to_cstr, from_cstr

# ============================================================================
# Known Quarks (string keys registered by GTK and GDK)
# ============================================================================

class KnownQuark(Enum):
    """String keys GTK registers as quarks"""

    # Error domains
    CSS_PARSER_ERROR = "gtk-css-parser-error-quark"
    CSS_PARSER_WARNING = "gtk-css-parser-warning-quark"
    FILE_CHOOSER_ERROR = "gtk-file-chooser-error-quark"
    ICON_THEME_ERROR = "gtk-icon-theme-error-quark"
    PRINT_ERROR = "gtk-print-error-quark"
    DIALOG_ERROR = "gtk-dialog-error-quark"
    BUILDER_ERROR = "gtk-builder-error-quark"
    CONSTRAINT_VFL_PARSER_ERROR = "gtk-constraint-vfl-parser-error-quark"
    PRINT_BACKEND_ERROR = "gtk-print-backend-error-quark"
    RECENT_MANAGER_ERROR = "gtk-recent-manager-error-quark"

    # Object data keys
    PANGO_CONTEXT = "gtk-pango-context"
    MNEMONIC_LABELS = "gtk-mnemonic-labels"
    WIDGET_SIZE_GROUPS = "gtk-widget-size-groups"
    WIDGET_AUTO_CHILDREN = "gtk-widget-auto-children"
    WIDGET_FONT_OPTIONS = "gtk-widget-font-options"
    WIDGET_FONT_MAP = "gtk-widget-font-map"
    BUILDER_SET_ID = "gtk-builder-set-id"
    WINDOW_ICON_INFO = "gtk-window-icon-info"
    LABEL_MNEMONICS_VISIBLE_CONNECTED = "gtk-label-mnemonics-visible-connected"
    FILE_CHOOSER_DELEGATE = "gtk-file-chooser-delegate"
    FONT_CHOOSER_DELEGATE = "gtk-font-chooser-delegate"
    NATIVE_PRIVATE = "gtk-native-private"
    SETTINGS = "gtk-settings"
    SIZE_REQUEST_IN_PROGRESS = "gtk-size-request-in-progress"
    TEXT_VIEW_TEXT_SELECTION_DATA = "gtk-text-view-text-selection-data"
    TEXT_VIEW_CHILD = "gtk-text-view-child"
    SIGNAL = "gtk-signal"
    ENTRY_PASSWORD_HINT = "gtk-entry-password-hint"
    OVERLAY_CHILD_DATA = "gtk-overlay-child-data"

    # GDK
    DISPLAY_CURRENT_TOOLTIP = "gdk-display-current-tooltip"
    X11_NEEDS_ENTER_AFTER_TOUCH_END = "gdk-x11-needs-enter-after-touch-end"
    ICON_NAME_SET = "gdk-icon-name-set"
    SURFACE_MOVE_RESIZE = "gdk-surface-moveresize"

    @classmethod
    def from_string(cls, name: str) -> Optional['KnownQuark']:
        """Known quark for a string, or None"""
        try:
            return cls(name)
        except ValueError:
            return None

    def quark(self) -> 'Quark':
        """Intern this key and return its quark"""
        return Quark.from_string(self.value)


# ============================================================================
# Quark
# ============================================================================

class Quark(int):
    """
    A GQuark: a non-zero integer uniquely naming an interned string

    Quark 0 means "no quark" and never maps to a string.
    """

    @classmethod
    def from_string(cls, string: str) -> 'Quark':
        """
        Intern string, creating the quark if needed

        Args:
            string: Key to intern

        Returns:
            The quark for string
        """
        if string is None:
            raise ValueError("string must not be None")
        return cls(get_lib().g_quark_from_string(to_cstr(string)))

    @classmethod
    def try_string(cls, string: str) -> Optional['Quark']:
        """Quark for string if it was interned before, else None"""
        if string is None:
            return None
        value = get_lib().g_quark_try_string(to_cstr(string))
        return cls(value) if value else None

    def to_string(self) -> Optional[str]:
        """The interned string, or None for quark 0"""
        if self == 0:
            return None
        return from_cstr(get_lib().g_quark_to_string(int(self)))

    def known(self) -> Optional[KnownQuark]:
        """Matching KnownQuark, if any"""
        string = self.to_string()
        return KnownQuark.from_string(string) if string is not None else None

    def __repr__(self):
        return f"Quark({int(self)})"
