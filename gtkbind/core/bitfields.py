"""
Bit-flag family mirrors for GLib, GIO, GTK and GDK

Use encode() to build the native integer passed to a flags parameter and
decode() to turn a returned integer back into a set of members.
"""

from typing import FrozenSet

from .codec import NativeFlags

# ============================================================================
# GLib / GIO
# ============================================================================

class ConnectFlags(NativeFlags):
    """GConnectFlags, passed to g_signal_connect_data"""
    DEFAULT = 0
    AFTER = 1 << 0
    SWAPPED = 1 << 1


class ApplicationFlags(NativeFlags):
    """GApplicationFlags"""
    NONE = 0
    IS_SERVICE = 1 << 0
    IS_LAUNCHER = 1 << 1
    HANDLES_OPEN = 1 << 2
    HANDLES_COMMAND_LINE = 1 << 3
    SEND_ENVIRONMENT = 1 << 4
    NON_UNIQUE = 1 << 5
    CAN_OVERRIDE_APP_ID = 1 << 6
    ALLOW_REPLACEMENT = 1 << 7
    REPLACE = 1 << 8

    # GLib 2.74 name for NONE
    DEFAULT_FLAGS = 0


# ============================================================================
# GTK Application and Builder
# ============================================================================

class ApplicationInhibitFlags(NativeFlags):
    """GtkApplicationInhibitFlags"""
    LOGOUT = 1 << 0
    SWITCH = 1 << 1
    SUSPEND = 1 << 2
    IDLE = 1 << 3


class BuilderClosureFlags(NativeFlags):
    """GtkBuilderClosureFlags"""
    SWAPPED = 1 << 0


class DialogFlags(NativeFlags):
    """GtkDialogFlags"""
    MODAL = 1 << 0
    DESTROY_WITH_PARENT = 1 << 1
    USE_HEADER_BAR = 1 << 2


class DebugFlags(NativeFlags):
    """GtkDebugFlags, as returned by gtk_get_debug_flags"""
    TEXT = 1 << 0
    TREE = 1 << 1
    KEYBINDINGS = 1 << 2
    MODULES = 1 << 3
    GEOMETRY = 1 << 4
    ICONTHEME = 1 << 5
    PRINTING = 1 << 6
    BUILDER = 1 << 7
    SIZE_REQUEST = 1 << 8
    NO_CSS_CACHE = 1 << 9
    INTERACTIVE = 1 << 10
    TOUCHSCREEN = 1 << 11
    ACTIONS = 1 << 12
    LAYOUT = 1 << 13
    SNAPSHOT = 1 << 14
    CONSTRAINTS = 1 << 15
    BUILDER_OBJECTS = 1 << 16
    A11Y = 1 << 17
    ICONFALLBACK = 1 << 18
    INVERT_TEXT_DIR = 1 << 19


# ============================================================================
# Widgets and Input
# ============================================================================

class CellRendererState(NativeFlags):
    """GtkCellRendererState"""
    SELECTED = 1 << 0
    PRELIT = 1 << 1
    INSENSITIVE = 1 << 2
    SORTED = 1 << 3
    FOCUSED = 1 << 4
    EXPANDABLE = 1 << 5
    EXPANDED = 1 << 6


class EventControllerScrollFlags(NativeFlags):
    """GtkEventControllerScrollFlags"""
    NONE = 0
    VERTICAL = 1 << 0
    HORIZONTAL = 1 << 1
    DISCRETE = 1 << 2
    KINETIC = 1 << 3
    BOTH_AXES = VERTICAL | HORIZONTAL


class FontChooserLevel(NativeFlags):
    """GtkFontChooserLevel"""
    FAMILY = 0
    STYLE = 1 << 0
    SIZE = 1 << 1
    VARIATIONS = 1 << 2
    FEATURES = 1 << 3


class IconLookupFlags(NativeFlags):
    """GtkIconLookupFlags"""
    FORCE_REGULAR = 1 << 0
    FORCE_SYMBOLIC = 1 << 1
    PRELOAD = 1 << 2


class InputHints(NativeFlags):
    """GtkInputHints"""
    NONE = 0
    SPELLCHECK = 1 << 0
    NO_SPELLCHECK = 1 << 1
    WORD_COMPLETION = 1 << 2
    LOWERCASE = 1 << 3
    UPPERCASE_CHARS = 1 << 4
    UPPERCASE_WORDS = 1 << 5
    UPPERCASE_SENTENCES = 1 << 6
    INHIBIT_OSK = 1 << 7
    VERTICAL_WRITING = 1 << 8
    EMOJI = 1 << 9
    NO_EMOJI = 1 << 10
    PRIVATE = 1 << 11

    @classmethod
    def none_members(cls) -> FrozenSet['InputHints']:
        """No hints at all decodes to an empty set"""
        return frozenset()


class PickFlags(NativeFlags):
    """GtkPickFlags"""
    DEFAULT = 0
    INSENSITIVE = 1 << 0
    NON_TARGETABLE = 1 << 1


class StateFlags(NativeFlags):
    """GtkStateFlags"""
    NORMAL = 0
    ACTIVE = 1 << 0
    PRELIGHT = 1 << 1
    SELECTED = 1 << 2
    INSENSITIVE = 1 << 3
    INCONSISTENT = 1 << 4
    FOCUSED = 1 << 5
    BACKDROP = 1 << 6
    DIR_LTR = 1 << 7
    DIR_RTL = 1 << 8
    LINK = 1 << 9
    VISITED = 1 << 10
    CHECKED = 1 << 11
    DROP_ACTIVE = 1 << 12
    FOCUS_VISIBLE = 1 << 13
    FOCUS_WITHIN = 1 << 14


class StyleContextPrintFlags(NativeFlags):
    """GtkStyleContextPrintFlags"""
    NONE = 0
    RECURSE = 1 << 0
    SHOW_STYLE = 1 << 1
    SHOW_CHANGE = 1 << 2


class TextSearchFlags(NativeFlags):
    """GtkTextSearchFlags"""
    VISIBLE_ONLY = 1 << 0
    TEXT_ONLY = 1 << 1
    CASE_INSENSITIVE = 1 << 2


class TreeModelFlags(NativeFlags):
    """GtkTreeModelFlags"""
    ITERS_PERSIST = 1 << 0
    LIST_ONLY = 1 << 1


# ============================================================================
# GDK
# ============================================================================

class DragAction(NativeFlags):
    """GdkDragAction"""
    COPY = 1 << 0
    MOVE = 1 << 1
    LINK = 1 << 2
    ASK = 1 << 3


class ModifierType(NativeFlags):
    """GdkModifierType"""
    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    ALT = 1 << 3
    BUTTON1 = 1 << 8
    BUTTON2 = 1 << 9
    BUTTON3 = 1 << 10
    BUTTON4 = 1 << 11
    BUTTON5 = 1 << 12
    SUPER = 1 << 26
    HYPER = 1 << 27
    META = 1 << 28
