"""
Signal connection and the native-to-Python callback trampoline

Every connection is recorded in the process-wide registry until it is
disconnected or the native object is finalized, so the cffi callback and
the Python handler stay reachable for as long as GTK may invoke them.

All of this runs on the thread owning the GTK main context. Nothing here
takes a lock.
"""

import logging
from typing import Callable, Dict, Optional, Tuple

from .bitfields import ConnectFlags
from .config import Settings
from .exceptions import SignalError
from .ffi import ffi, get_lib, from_cstr

logger = logging.getLogger(__name__)

_settings = Settings.from_env()


# ============================================================================
# Signal Descriptor
# ============================================================================

class Signal:
    """
    A detailed signal name bound to the C signature of its handler

    The signature lists the instance pointer first and the user-data
    pointer last, with the signal's own arguments in between.

    Args:
        name: Detailed signal name, e.g. "changed" or "notify::text"
        cdecl: C function pointer type of the handler. The default fits
            signals without arguments; "notify::text" needs
            "void (*)(void *, void *, void *)" for its GParamSpec
        converters: Optional per-argument callables applied to the
            signal's own arguments before the handler sees them
    """

    DEFAULT_CDECL = "void (*)(void *, void *)"

    def __init__(self, name: str, cdecl: str = DEFAULT_CDECL,
                 converters: Optional[Tuple[Optional[Callable], ...]] = None):
        self.name = name
        self.cdecl = cdecl
        self.ctype = ffi.typeof(cdecl)
        self.converters = converters or ()

    @property
    def returns_value(self) -> bool:
        return self.ctype.result.kind != 'void'

    def convert_args(self, args):
        """Turn the raw signal arguments into Python values"""
        params = self.ctype.args[1:-1]
        converted = []
        for i, (arg, ctype) in enumerate(zip(args, params)):
            converter = self.converters[i] if i < len(self.converters) else None
            if converter is not None:
                converted.append(converter(arg))
            elif ctype.kind == 'pointer' and ctype.item.cname == 'char':
                converted.append(from_cstr(arg))
            else:
                converted.append(arg)
        return converted

    def __repr__(self):
        return f"Signal({self.name!r}, {self.cdecl!r})"


def _address(handle) -> int:
    return int(ffi.cast("uintptr_t", handle))


# ============================================================================
# Registration
# ============================================================================

class SignalRegistration:
    """
    One connected handler

    Holds the cffi trampoline, the Python callback and the user data.
    Use disconnect() or a with block to end the connection early.
    """

    def __init__(self, emitter, handle, signal: Signal, callback: Callable,
                 user_data, flags):
        self.emitter = emitter
        self.handle = handle
        self.address = _address(handle)
        self.signal = signal
        self.callback = callback
        self.user_data = user_data
        self.flags = ConnectFlags.decode(ConnectFlags.encode(*flags))
        self.handler_id = 0
        self._connected = False
        self._data_handle = ffi.new_handle(user_data)
        self._c_callback = ffi.callback(signal.cdecl, self._invoke)

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def swapped(self) -> bool:
        return ConnectFlags.SWAPPED in self.flags

    def _invoke(self, *args):
        """
        Trampoline called by GTK for each emission

        The first and last pointers are the instance and the data pointer,
        in either order depending on SWAPPED. Neither is read: the emitter
        and user data are the ones stored on this registration.
        """
        signal = self.signal

        if _settings.log_signals:
            logger.debug("Emission of %s on 0x%x", signal.name, self.address)

        try:
            result = self.callback(self.emitter, *signal.convert_args(args[1:-1]),
                                   self.user_data)
            if signal.returns_value:
                return 0 if result is None else int(result)
        except Exception:
            logger.exception("Unhandled exception in %r handler for %s",
                             self.callback, signal.name)
            if signal.returns_value:
                return 0
        return None

    def disconnect(self):
        """Disconnect the handler; calling it again does nothing"""
        if not self._connected:
            return
        self._connected = False
        lib = get_lib()
        if lib.g_signal_handler_is_connected(self.handle, self.handler_id):
            lib.g_signal_handler_disconnect(self.handle, self.handler_id)
        registry.unregister(self)
        logger.debug("Disconnected %s handler %d from 0x%x",
                     self.signal.name, self.handler_id, self.address)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.disconnect()
        return False

    def __repr__(self):
        state = "connected" if self._connected else "disconnected"
        return (f"<SignalRegistration {self.signal.name} id={self.handler_id} "
                f"on 0x{self.address:x} {state}>")


# ============================================================================
# Registry
# ============================================================================

@ffi.callback("GWeakNotify")
def _on_finalize(data, where_the_object_was):
    """GObject weak-reference notification: the native object is gone"""
    try:
        registry.release_handle(_address(where_the_object_was))
    except Exception:
        logger.exception("Failed to release registrations for finalized object")


class SignalRegistry:
    """
    Strong references to every live registration

    Keyed by native object address, then handler id. One GObject weak
    reference per address prunes the entries when the object is finalized.
    """

    def __init__(self):
        self._handles: Dict[int, Dict[int, SignalRegistration]] = {}

    def register(self, registration: SignalRegistration):
        address = registration.address
        handlers = self._handles.get(address)
        if handlers is None:
            handlers = self._handles[address] = {}
            get_lib().g_object_weak_ref(registration.handle, _on_finalize, ffi.NULL)
        handlers[registration.handler_id] = registration
        registration._connected = True

    def unregister(self, registration: SignalRegistration):
        handlers = self._handles.get(registration.address)
        if handlers is None:
            return
        handlers.pop(registration.handler_id, None)
        if not handlers:
            del self._handles[registration.address]
            get_lib().g_object_weak_unref(registration.handle, _on_finalize, ffi.NULL)

    def registrations_for(self, handle) -> Tuple[SignalRegistration, ...]:
        """Live registrations of a handle (wrapper, pointer or address)"""
        address = handle if isinstance(handle, int) else _address(
            getattr(handle, "handle", handle))
        return tuple(self._handles.get(address, {}).values())

    def release_handle(self, address: int):
        """Drop every registration of a finalized object without calling into it"""
        handlers = self._handles.pop(address, {})
        for registration in handlers.values():
            registration._connected = False
        if handlers:
            logger.debug("Pruned %d registration(s) of finalized object 0x%x",
                         len(handlers), address)
        return list(handlers.values())

    def clear(self):
        """Forget every registration (used when tearing down a test library)"""
        for handlers in self._handles.values():
            for registration in handlers.values():
                registration._connected = False
        self._handles.clear()

    def __len__(self):
        return sum(len(h) for h in self._handles.values())

    def __contains__(self, registration):
        handlers = self._handles.get(registration.address, {})
        return handlers.get(registration.handler_id) is registration


registry = SignalRegistry()


# ============================================================================
# Connect
# ============================================================================

def connect(emitter, signal, callback: Callable, user_data=None, *flags) -> SignalRegistration:
    """
    Connect a Python callable to a native signal

    The callback is called as callback(emitter, *signal_args, user_data).

    Args:
        emitter: Wrapper object (anything with a .handle) or raw pointer
        signal: Signal descriptor or plain signal name
        callback: Handler
        user_data: Any Python object handed back on each emission
        flags: ConnectFlags members

    Returns:
        The registration, already recorded in the registry

    Raises:
        ValueError: callback or handle missing
        SignalError: GTK refused the connection (unknown signal)
    """
    if callback is None:
        raise ValueError("callback must not be None")
    if isinstance(signal, str):
        signal = Signal(signal)

    handle = getattr(emitter, "handle", emitter)
    if handle is None or handle == ffi.NULL:
        raise ValueError("cannot connect to a NULL instance")

    registration = SignalRegistration(emitter, handle, signal, callback, user_data, flags)
    handler_id = get_lib().g_signal_connect_data(
        handle,
        signal.name.encode('utf-8'),
        ffi.cast("GCallback", registration._c_callback),
        registration._data_handle,
        ffi.NULL,
        ConnectFlags.encode(*flags),
    )
    if handler_id == 0:
        raise SignalError(f"Could not connect to signal {signal.name!r}")

    registration.handler_id = int(handler_id)
    registry.register(registration)
    logger.debug("Connected %s handler %d on 0x%x",
                 signal.name, registration.handler_id, registration.address)
    return registration
