"""
gtkbind: Python bindings for GTK 4, GDK and Pango over cffi

Example usage:
    import gtkbind
    from gtkbind import Editable, Entry, GtkLibrary

    GtkLibrary().init()
    entry = Entry.new()

    def on_changed(editable, user_data):
        print(editable.text, user_data)

    with entry.connect(Editable.CHANGED, on_changed, "extra"):
        entry.text = "hello"

Threading: GTK is single-threaded. Every call into this package and every
signal handler must run on the thread that owns the GTK main context;
calls from any other thread are undefined. Nothing here takes a lock.
"""

import logging

from gtkbind.core.ffi import ffi, get_lib, find_library
from gtkbind.core.config import Settings
from gtkbind.core.codec import NativeEnum, NativeFlags
from gtkbind.core.errors import (
    GtkBindError,
    LibraryNotFoundError,
    EnumValueError,
    SignalError,
    NativeError,
)
from gtkbind.core.signals import Signal, SignalRegistration, registry, connect
from gtkbind.core.types import Quark, KnownQuark
from gtkbind.core.library import GtkLibrary, get_library
from gtkbind.core.enums import Orientation, FileChooserAction, ResponseType
from gtkbind.core.bitfields import ConnectFlags, FontChooserLevel, InputHints, ModifierType, StateFlags

from gtkbind.objects import GObject
from gtkbind.gdk import RGBA, Rectangle
from gtkbind.gio import File, ListModel
from gtkbind.pango import (
    TabArray, FontDescription, Color, Attribute, FontFamily, FontFace, FontMap,
)
from gtkbind.interfaces import (
    Editable,
    ColorChooser,
    FileChooser,
    FileFilter,
    FontChooser,
    Orientable,
    SelectionModel,
    NoSelection,
    SingleSelection,
    MultiSelection,
)
from gtkbind.widgets import (
    Widget,
    Entry,
    Text,
    PasswordEntry,
    SearchEntry,
    Box,
    ColorChooserWidget,
    FileChooserWidget,
    FontChooserWidget,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # FFI and configuration
    "ffi", "get_lib", "find_library", "Settings",

    # Constants
    "NativeEnum", "NativeFlags",
    "Orientation", "FileChooserAction", "ResponseType",
    "ConnectFlags", "FontChooserLevel", "InputHints", "ModifierType", "StateFlags",

    # Errors
    "GtkBindError", "LibraryNotFoundError", "EnumValueError", "SignalError", "NativeError",

    # Signals
    "Signal", "SignalRegistration", "registry", "connect",

    # Toolkit
    "Quark", "KnownQuark", "GtkLibrary", "get_library",

    # Objects
    "GObject", "RGBA", "Rectangle", "File", "ListModel",
    "TabArray", "FontDescription", "Color", "Attribute", "FontFamily", "FontFace", "FontMap",

    # Interfaces
    "Editable", "ColorChooser", "FileChooser", "FileFilter", "FontChooser", "Orientable",
    "SelectionModel", "NoSelection", "SingleSelection", "MultiSelection",

    # Widgets
    "Widget", "Entry", "Text", "PasswordEntry", "SearchEntry", "Box",
    "ColorChooserWidget", "FileChooserWidget", "FontChooserWidget",
]
