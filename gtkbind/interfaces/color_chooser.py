"""
GtkColorChooser: widgets offering colour selection
"""

from typing import Sequence

from ..core.enums import Orientation
from ..core.ffi import ffi
from ..core.signals import Signal
from ..gdk import RGBA, rgba_array
from ..objects import GObject


class ColorChooser(GObject):
    """Wrapper for the GtkColorChooser interface"""

    #: A colour was activated (double-click or Enter).
    #: Handler: (chooser, rgba, user_data) with rgba an RGBA copy
    COLOR_ACTIVATED = Signal("color-activated", "void (*)(void *, GdkRGBA *, void *)",
                             (RGBA.from_native,))

    @property
    def rgba(self) -> RGBA:
        """Currently selected colour"""
        native = ffi.new("GdkRGBA *")
        self.lib.gtk_color_chooser_get_rgba(self.handle, native)
        return RGBA.from_native(native)

    @rgba.setter
    def rgba(self, color: RGBA):
        if color is None:
            raise ValueError("color must not be None")
        self.lib.gtk_color_chooser_set_rgba(self.handle, color.to_native())

    @property
    def use_alpha(self) -> bool:
        return bool(self.lib.gtk_color_chooser_get_use_alpha(self.handle))

    @use_alpha.setter
    def use_alpha(self, use_alpha: bool):
        self.lib.gtk_color_chooser_set_use_alpha(self.handle, bool(use_alpha))

    def add_palette(self, orientation: Orientation, colors_per_line: int,
                    colors: Sequence[RGBA] = ()):
        """
        Add a palette of custom colours

        Args:
            orientation: Whether colours are laid out in rows or columns
            colors_per_line: Colours per row or column
            colors: The palette; an empty sequence removes all palettes
        """
        colors = list(colors or ())
        native = rgba_array(colors) if colors else ffi.NULL
        self.lib.gtk_color_chooser_add_palette(
            self.handle, Orientation.to_native(orientation),
            colors_per_line, len(colors), native)
