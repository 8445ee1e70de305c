"""
GDK value types: RGBA colours and rectangles
"""

from dataclasses import dataclass
from typing import Optional

from .core.ffi import ffi, get_lib, to_cstr, take_cstr

# ============================================================================
# RGBA
# ============================================================================

@dataclass
class RGBA:
    """A GdkRGBA colour with float channels in [0, 1]"""
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    @classmethod
    def parse(cls, spec: str) -> Optional['RGBA']:
        """
        Parse a colour with gdk_rgba_parse

        Accepts names ("red"), "#rgb", "#rrggbb", "#rrggbbaa", "rgb(r,g,b)"
        and "rgba(r,g,b,a)".

        Returns:
            The colour, or None if spec is not a colour
        """
        if spec is None:
            return None
        native = ffi.new("GdkRGBA *")
        if not get_lib().gdk_rgba_parse(native, to_cstr(spec)):
            return None
        return cls.from_native(native)

    @classmethod
    def from_native(cls, ptr) -> Optional['RGBA']:
        """Copy a GdkRGBA * into a new RGBA; NULL gives None"""
        if ptr == ffi.NULL:
            return None
        return cls(float(ptr.red), float(ptr.green), float(ptr.blue), float(ptr.alpha))

    def to_native(self):
        """Newly allocated GdkRGBA * holding this colour"""
        return ffi.new("GdkRGBA *", [self.red, self.green, self.blue, self.alpha])

    def to_string(self) -> str:
        """Textual form from gdk_rgba_to_string, e.g. "rgb(255,0,0)" """
        return take_cstr(get_lib().gdk_rgba_to_string(self.to_native()))

    def copy(self) -> 'RGBA':
        return RGBA(self.red, self.green, self.blue, self.alpha)


def rgba_array(colors):
    """Contiguous GdkRGBA[] for the given colours"""
    return ffi.new("GdkRGBA[]", [[c.red, c.green, c.blue, c.alpha] for c in colors])


# ============================================================================
# Rectangle
# ============================================================================

@dataclass
class Rectangle:
    """A GdkRectangle in integer coordinates"""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_native(cls, ptr) -> Optional['Rectangle']:
        if ptr == ffi.NULL:
            return None
        return cls(ptr.x, ptr.y, ptr.width, ptr.height)

    def to_native(self):
        return ffi.new("GdkRectangle *", [self.x, self.y, self.width, self.height])

    def intersect(self, other: 'Rectangle') -> Optional['Rectangle']:
        """Intersection of two rectangles, or None if they do not overlap"""
        dest = ffi.new("GdkRectangle *")
        if not get_lib().gdk_rectangle_intersect(self.to_native(), other.to_native(), dest):
            return None
        return Rectangle.from_native(dest)

    def union(self, other: 'Rectangle') -> 'Rectangle':
        """Smallest rectangle containing both"""
        dest = ffi.new("GdkRectangle *")
        get_lib().gdk_rectangle_union(self.to_native(), other.to_native(), dest)
        return Rectangle.from_native(dest)

    def contains_point(self, x: int, y: int) -> bool:
        return bool(get_lib().gdk_rectangle_contains_point(self.to_native(), x, y))
