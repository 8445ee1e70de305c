"""
GError handling

Native calls that can fail take a trailing GError ** out-parameter. The
wrappers allocate it with new_error_ptr(), make the call, then hand it to
check_error() which raises NativeError when the toolkit filled it in.
"""

import logging

from .codec import NativeEnum
from .exceptions import (
    GtkBindError,
    LibraryNotFoundError,
    EnumValueError,
    SignalError,
    NativeError,
)
from .ffi import ffi, get_lib, from_cstr

logger = logging.getLogger(__name__)

# ============================================================================
# Error Domains
# ============================================================================

class BuilderError(NativeEnum):
    """GtkBuilderError codes (gtk-builder-error-quark)"""
    INVALID_TYPE_FUNCTION = 0
    UNHANDLED_TAG = 1
    MISSING_ATTRIBUTE = 2
    INVALID_ATTRIBUTE = 3
    INVALID_TAG = 4
    MISSING_PROPERTY_VALUE = 5
    INVALID_VALUE = 6
    VERSION_MISMATCH = 7
    DUPLICATE_ID = 8
    OBJECT_TYPE_REFUSED = 9
    TEMPLATE_MISMATCH = 10
    INVALID_PROPERTY = 11
    INVALID_SIGNAL = 12
    INVALID_ID = 13
    INVALID_FUNCTION = 14


class PrintError(NativeEnum):
    """GtkPrintError codes (gtk-print-error-quark)"""
    GENERAL = 0
    INTERNAL_ERROR = 1
    NOMEM = 2
    INVALID_FILE = 3


class RecentManagerError(NativeEnum):
    """GtkRecentManagerError codes (gtk-recent-manager-error-quark)"""
    NOT_FOUND = 0
    INVALID_URI = 1
    INVALID_ENCODING = 2
    NOT_REGISTERED = 3
    READ = 4
    WRITE = 5
    UNKNOWN = 6


class FileChooserError(NativeEnum):
    """GtkFileChooserError codes (gtk-file-chooser-error-quark)"""
    NONEXISTENT = 0
    BAD_FILENAME = 1
    ALREADY_EXISTS = 2
    INCOMPLETE_HOSTNAME = 3


class IconThemeError(NativeEnum):
    """GtkIconThemeError codes (gtk-icon-theme-error-quark)"""
    NOT_FOUND = 0
    FAILED = 1


class DialogError(NativeEnum):
    """GtkDialogError codes (gtk-dialog-error-quark)"""
    FAILED = 0
    CANCELLED = 1
    DISMISSED = 2


ERROR_DOMAINS = {
    "gtk-builder-error-quark": BuilderError,
    "gtk-print-error-quark": PrintError,
    "gtk-recent-manager-error-quark": RecentManagerError,
    "gtk-file-chooser-error-quark": FileChooserError,
    "gtk-icon-theme-error-quark": IconThemeError,
    "gtk-dialog-error-quark": DialogError,
}


# ============================================================================
# GError ** Helpers
# ============================================================================

def new_error_ptr():
    """Allocate a GError ** initialised to NULL"""
    return ffi.new("GError **")


def check_error(error_ptr):
    """
    Raise NativeError if a native call populated error_ptr

    The GError is copied and freed before raising, so the caller never
    owns native memory afterwards.

    Args:
        error_ptr: GError ** passed to the native call

    Raises:
        NativeError: *error_ptr was set
    """
    if error_ptr == ffi.NULL or error_ptr[0] == ffi.NULL:
        return

    lib = get_lib()
    error = error_ptr[0]
    domain = int(error.domain)
    code = int(error.code)
    message = from_cstr(error.message) or ""
    domain_name = from_cstr(lib.g_quark_to_string(domain)) or str(domain)
    lib.g_error_free(error)
    error_ptr[0] = ffi.NULL

    code_enum = None
    domain_enum = ERROR_DOMAINS.get(domain_name)
    if domain_enum is not None:
        try:
            code_enum = domain_enum.from_native(code)
        except EnumValueError:
            logger.debug("Unknown %s code %d", domain_name, code)

    raise NativeError(domain, domain_name, code, message, code_enum)


__all__ = [
    "GtkBindError",
    "LibraryNotFoundError",
    "EnumValueError",
    "SignalError",
    "NativeError",
    "BuilderError",
    "PrintError",
    "RecentManagerError",
    "FileChooserError",
    "IconThemeError",
    "DialogError",
    "ERROR_DOMAINS",
    "new_error_ptr",
    "check_error",
]
