"""
Base wrapper for GObject-derived native objects
"""

import logging
from typing import Optional

from .core.ffi import ffi, get_lib, to_cstr, from_cstr, take_cstr
from .core import signals

logger = logging.getLogger(__name__)

_PROPERTY_CTYPES = {
    str: "char **",
    bool: "gboolean *",
    int: "int *",
}

# G_TYPE_MAKE_FUNDAMENTAL(15)
G_TYPE_DOUBLE = 15 << 2


def _vararg(value, keepalive):
    """Convert a Python value into a cdata usable in a variadic call"""
    if value is None:
        return ffi.cast("void *", ffi.NULL)
    if isinstance(value, ffi.CData):
        return value
    if isinstance(value, GObject):
        return value.handle
    if isinstance(value, bool):
        return ffi.cast("gboolean", value)
    if isinstance(value, int):
        return ffi.cast("int", value)
    if isinstance(value, float):
        return ffi.cast("double", value)
    if isinstance(value, str):
        buf = ffi.new("char[]", value.encode('utf-8'))
        keepalive.append(buf)
        return buf
    raise TypeError(f"Cannot pass {type(value).__name__} through a variadic call")


class GObject:
    """
    Non-owning wrapper around a GObject instance pointer

    The native object belongs to GTK. The wrapper never frees it; use
    ref()/unref() to take or drop a reference explicitly.
    """

    def __init__(self, handle):
        if handle is None or handle == ffi.NULL:
            raise ValueError(f"{type(self).__name__} requires a non-NULL handle")
        self._handle = ffi.cast("void *", handle)

    @classmethod
    def wrap(cls, handle) -> Optional['GObject']:
        """Wrap a possibly-NULL pointer; NULL gives None"""
        if handle is None or handle == ffi.NULL:
            return None
        return cls(handle)

    @property
    def handle(self):
        """The native instance pointer"""
        return self._handle

    @property
    def address(self) -> int:
        return int(ffi.cast("uintptr_t", self._handle))

    @property
    def lib(self):
        return get_lib()

    @property
    def type_name(self) -> Optional[str]:
        """GType name of the instance, e.g. "GtkEntry" """
        return from_cstr(self.lib.g_type_name_from_instance(self._handle))

    # ------------------------------------------------------------------------
    # Signals
    # ------------------------------------------------------------------------

    def connect(self, signal, callback, user_data=None, *flags) -> 'signals.SignalRegistration':
        """
        Connect callback to a signal of this object

        Args:
            signal: Signal descriptor (e.g. Editable.CHANGED) or name
            callback: Called as callback(self, *signal_args, user_data)
            user_data: Passed back unchanged
            flags: ConnectFlags members

        Returns:
            SignalRegistration; call disconnect() on it to stop
        """
        return signals.connect(self, signal, callback, user_data, *flags)

    def emit(self, signal, *args):
        """
        Emit a signal by name with the given arguments

        Args:
            signal: Signal descriptor or plain name. Only a descriptor whose
                handler returns a value gets a return location appended.
            args: The signal's own arguments

        Returns:
            The accumulated handler result for non-void signals, else None
        """
        name = signal.name if isinstance(signal, signals.Signal) else signal
        keepalive = []
        cargs = [_vararg(a, keepalive) for a in args]
        result = None
        if isinstance(signal, signals.Signal) and signal.returns_value:
            result = ffi.new(f"{signal.ctype.result.cname} *")
            cargs.append(result)
        self.lib.g_signal_emit_by_name(self._handle, to_cstr(name), *cargs)
        return result[0] if result is not None else None

    def registrations(self):
        """Live signal registrations on this object"""
        return signals.registry.registrations_for(self)

    # ------------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------------

    def get_property(self, name: str, kind=str):
        """
        Read a string, boolean, integer or floating-point property

        float reads go through a G_TYPE_DOUBLE GValue, so both gfloat and
        gdouble properties come back at full width.

        Args:
            name: Property name
            kind: str, bool, int or float

        Returns:
            Property value (None for a NULL string)
        """
        if kind is float:
            return self._get_double_property(name)
        ctype = _PROPERTY_CTYPES.get(kind)
        if ctype is None:
            raise TypeError(f"Unsupported property type {kind!r}")
        out = ffi.new(ctype)
        self.lib.g_object_get(self._handle, to_cstr(name), out, ffi.cast("void *", ffi.NULL))
        if kind is str:
            return take_cstr(out[0])
        if kind is bool:
            return bool(out[0])
        return kind(out[0])

    def _get_double_property(self, name: str) -> float:
        value = ffi.new("GValue *")
        self.lib.g_value_init(value, G_TYPE_DOUBLE)
        try:
            self.lib.g_object_get_property(self._handle, to_cstr(name), value)
            return float(self.lib.g_value_get_double(value))
        finally:
            self.lib.g_value_unset(value)

    def set_property(self, name: str, value):
        """Write a string, boolean, integer or double property"""
        keepalive = []
        self.lib.g_object_set(self._handle, to_cstr(name),
                              _vararg(value, keepalive),
                              ffi.cast("void *", ffi.NULL))

    # ------------------------------------------------------------------------
    # Reference Counting
    # ------------------------------------------------------------------------

    def ref(self):
        """Take a native reference; returns self"""
        self.lib.g_object_ref(self._handle)
        return self

    def unref(self):
        """Drop a native reference taken with ref() or returned as transfer-full"""
        self.lib.g_object_unref(self._handle)

    # ------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, GObject):
            return NotImplemented
        return self.address == other.address

    def __hash__(self):
        return hash(self.address)

    def __repr__(self):
        return f"<{type(self).__name__} {self.type_name} at 0x{self.address:x}>"
