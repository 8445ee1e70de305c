"""
GtkFontChooser: widgets offering font selection
"""

import logging
from typing import Callable, Dict, Optional

from ..core.bitfields import FontChooserLevel
from ..core.ffi import ffi, to_cstr, take_cstr, handle_or_null
from ..core.signals import Signal
from ..objects import GObject
from ..pango import FontDescription, FontFace, FontFamily, FontMap

logger = logging.getLogger(__name__)

# Filter callbacks GTK still holds, keyed by their user-data address.
# GTK calls _release_filter when it replaces or drops a filter.
_filters: Dict[int, '_FontFilter'] = {}


def _address(ptr) -> int:
    return int(ffi.cast("uintptr_t", ptr))


class _FontFilter:
    """Keeps a Python filter function reachable while GTK may call it"""

    def __init__(self, func: Callable, user_data):
        self.func = func
        self.user_data = user_data
        self.data_handle = ffi.new_handle(self)
        self.c_callback = ffi.callback("GtkFontFilterFunc", self._invoke)

    def _invoke(self, family, face, data):
        try:
            return bool(self.func(FontFamily.wrap(family), FontFace.wrap(face), self.user_data))
        except Exception:
            logger.exception("Unhandled exception in font filter %r", self.func)
            # Show the font rather than hide it
            return True


@ffi.callback("GDestroyNotify")
def _release_filter(data):
    _filters.pop(_address(data), None)


class FontChooser(GObject):
    """Wrapper for the GtkFontChooser interface"""

    #: A font was activated. Handler: (chooser, font_name, user_data)
    FONT_ACTIVATED = Signal("font-activated", "void (*)(void *, const char *, void *)")

    # ------------------------------------------------------------------------
    # Selected Font
    # ------------------------------------------------------------------------

    @property
    def font(self) -> Optional[str]:
        """Selected font as a description string, e.g. "Sans Bold 12" """
        return take_cstr(self.lib.gtk_font_chooser_get_font(self.handle))

    @font.setter
    def font(self, font_name: str):
        if font_name is None:
            raise ValueError("font_name must not be None")
        self.lib.gtk_font_chooser_set_font(self.handle, to_cstr(font_name))

    @property
    def font_desc(self) -> Optional[FontDescription]:
        """Selected font as a FontDescription owned by the caller"""
        ptr = self.lib.gtk_font_chooser_get_font_desc(self.handle)
        if ptr == ffi.NULL:
            return None
        return FontDescription(ptr)

    @font_desc.setter
    def font_desc(self, desc: FontDescription):
        if desc is None:
            raise ValueError("desc must not be None")
        self.lib.gtk_font_chooser_set_font_desc(self.handle, desc.handle)

    @property
    def font_family(self) -> Optional[FontFamily]:
        return FontFamily.wrap(self.lib.gtk_font_chooser_get_font_family(self.handle))

    @property
    def font_face(self) -> Optional[FontFace]:
        return FontFace.wrap(self.lib.gtk_font_chooser_get_font_face(self.handle))

    @property
    def font_size(self) -> Optional[int]:
        """Size in Pango units, None when no font is selected"""
        size = self.lib.gtk_font_chooser_get_font_size(self.handle)
        return int(size) if size >= 0 else None

    @property
    def font_features(self) -> str:
        """Selected OpenType features, e.g. "liga 1, dlig 0" """
        return take_cstr(self.lib.gtk_font_chooser_get_font_features(self.handle)) or ""

    # ------------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------------

    @property
    def font_map(self) -> Optional[FontMap]:
        return FontMap.wrap(self.lib.gtk_font_chooser_get_font_map(self.handle))

    @font_map.setter
    def font_map(self, font_map: Optional[FontMap]):
        self.lib.gtk_font_chooser_set_font_map(self.handle, handle_or_null(font_map))

    @property
    def language(self) -> str:
        """Language used for font features, e.g. "en-us" """
        return take_cstr(self.lib.gtk_font_chooser_get_language(self.handle)) or ""

    @language.setter
    def language(self, language: str):
        self.lib.gtk_font_chooser_set_language(self.handle, to_cstr(language or ""))

    @property
    def level(self):
        """Set of FontChooserLevel members describing what can be chosen"""
        return FontChooserLevel.decode(self.lib.gtk_font_chooser_get_level(self.handle))

    @level.setter
    def level(self, levels):
        if isinstance(levels, int):
            levels = (levels,)
        self.lib.gtk_font_chooser_set_level(self.handle, FontChooserLevel.encode(*levels))

    @property
    def preview_text(self) -> str:
        return take_cstr(self.lib.gtk_font_chooser_get_preview_text(self.handle)) or ""

    @preview_text.setter
    def preview_text(self, text: str):
        self.lib.gtk_font_chooser_set_preview_text(self.handle, to_cstr(text or ""))

    @property
    def show_preview_entry(self) -> bool:
        return bool(self.lib.gtk_font_chooser_get_show_preview_entry(self.handle))

    @show_preview_entry.setter
    def show_preview_entry(self, show: bool):
        self.lib.gtk_font_chooser_set_show_preview_entry(self.handle, bool(show))

    def set_filter_func(self, func: Optional[Callable], user_data=None):
        """
        Restrict the fonts on offer

        Args:
            func: Called as func(family, face, user_data); return True to
                show the font. None removes the filter.
            user_data: Passed back to func
        """
        if func is None:
            self.lib.gtk_font_chooser_set_filter_func(self.handle, ffi.NULL, ffi.NULL, ffi.NULL)
            return
        font_filter = _FontFilter(func, user_data)
        _filters[_address(font_filter.data_handle)] = font_filter
        self.lib.gtk_font_chooser_set_filter_func(
            self.handle, font_filter.c_callback, font_filter.data_handle, _release_filter)
