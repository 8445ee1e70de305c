"""
Exception hierarchy for gtkbind
"""


class GtkBindError(Exception):
    """Base class for every error raised by gtkbind"""


class LibraryNotFoundError(GtkBindError, RuntimeError):
    """libgtk-4 could not be located or loaded"""


class EnumValueError(GtkBindError, ValueError):
    """A native integer has no member in the requested enumeration"""

    def __init__(self, enum_cls, value):
        self.enum_cls = enum_cls
        self.value = value
        super().__init__(f"{value!r} is not a valid {enum_cls.__name__}")


class SignalError(GtkBindError):
    """A signal handler could not be connected"""


class NativeError(GtkBindError):
    """
    A GError reported by a native call

    Attributes:
        domain: GQuark of the error domain
        domain_name: String form of the domain quark
        code: Raw error code
        message: Human readable message from the toolkit
        code_enum: Typed error code when the domain is known, else None
    """

    def __init__(self, domain: int, domain_name: str, code: int, message: str,
                 code_enum=None):
        self.domain = domain
        self.domain_name = domain_name
        self.code = code
        self.message = message
        self.code_enum = code_enum
        super().__init__(message)

    def __str__(self):
        label = self.code_enum.name if self.code_enum is not None else self.code
        return f"{self.domain_name}[{label}]: {self.message}"
