"""
Core FFI bindings, constant mirrors and signal plumbing
"""

from .ffi import ffi, get_lib, find_library, GtkLib
from .config import Settings
from .codec import NativeEnum, NativeFlags
from .errors import (
    GtkBindError,
    LibraryNotFoundError,
    EnumValueError,
    SignalError,
    NativeError,
    check_error,
)
from .signals import Signal, SignalRegistration, SignalRegistry, registry, connect
from .types import Quark, KnownQuark
from .library import GtkLibrary, get_library

__all__ = [
    "ffi",
    "get_lib",
    "find_library",
    "GtkLib",
    "Settings",
    "NativeEnum",
    "NativeFlags",
    "GtkBindError",
    "LibraryNotFoundError",
    "EnumValueError",
    "SignalError",
    "NativeError",
    "check_error",
    "Signal",
    "SignalRegistration",
    "SignalRegistry",
    "registry",
    "connect",
    "Quark",
    "KnownQuark",
    "GtkLibrary",
    "get_library",
]
