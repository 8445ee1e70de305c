"""
Pango wrappers: tab arrays, font descriptions, colours, attributes,
families, faces and maps

Tab arrays, font descriptions and attributes are boxed structs rather than
GObjects. Instances created here own their native memory and release it on
free() or when leaving a with block.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .core.enums import PangoAttrType, PangoTabAlign
from .core.ffi import ffi, get_lib, to_cstr, from_cstr, take_cstr
from .objects import GObject


class _Boxed:
    """Shared handle bookkeeping for Pango boxed types"""

    _free_func = None

    def __init__(self, handle):
        if handle is None or handle == ffi.NULL:
            raise ValueError(f"{type(self).__name__} requires a non-NULL handle")
        self._handle = handle

    @property
    def handle(self):
        if self._handle is None:
            raise ValueError(f"{type(self).__name__} has been freed")
        return self._handle

    @property
    def lib(self):
        return get_lib()

    def free(self):
        """Release the native struct; later calls are no-ops"""
        if self._handle is not None:
            getattr(self.lib, self._free_func)(self._handle)
            self._handle = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.free()
        return False


# ============================================================================
# Tab Arrays
# ============================================================================

class TabArray(_Boxed):
    """A PangoTabArray: tab stop positions and alignments"""

    _free_func = "pango_tab_array_free"

    @classmethod
    def new(cls, initial_size: int = 0, positions_in_pixels: bool = False) -> 'TabArray':
        """
        Create a tab array

        Args:
            initial_size: Number of tab stops to allocate (may be 0)
            positions_in_pixels: Whether positions are pixels rather than Pango units
        """
        if initial_size < 0:
            raise ValueError("initial_size must not be negative")
        return cls(get_lib().pango_tab_array_new(initial_size, positions_in_pixels))

    @classmethod
    def from_string(cls, text: str) -> Optional['TabArray']:
        """Deserialize the format produced by to_string(); None if unparseable"""
        if text is None:
            return None
        ptr = get_lib().pango_tab_array_from_string(to_cstr(text))
        if ptr == ffi.NULL:
            return None
        return cls(ptr)

    def copy(self) -> 'TabArray':
        return TabArray(self.lib.pango_tab_array_copy(self.handle))

    @property
    def size(self) -> int:
        """Number of tab stops"""
        return int(self.lib.pango_tab_array_get_size(self.handle))

    def __len__(self):
        return self.size

    def resize(self, new_size: int):
        """Grow or shrink the array; negative sizes are ignored"""
        if new_size >= 0:
            self.lib.pango_tab_array_resize(self.handle, new_size)

    def get_tab(self, index: int) -> Optional[Tuple[int, PangoTabAlign]]:
        """(location, alignment) of a tab stop, or None for a bad index"""
        if not 0 <= index < self.size:
            return None
        alignment = ffi.new("int *")
        location = ffi.new("gint *")
        self.lib.pango_tab_array_get_tab(self.handle, index, alignment, location)
        return int(location[0]), PangoTabAlign.from_native(alignment[0])

    def set_tab(self, index: int, alignment: PangoTabAlign, location: int):
        """Set a tab stop; the array grows when index is past the end"""
        if alignment is None:
            raise ValueError("alignment must not be None")
        self.lib.pango_tab_array_set_tab(self.handle, index,
                                         PangoTabAlign.to_native(alignment), location)

    @property
    def tabs(self) -> List[Tuple[int, PangoTabAlign]]:
        """Every tab stop as (location, alignment)"""
        return [self.get_tab(i) for i in range(self.size)]

    @property
    def positions_in_pixels(self) -> bool:
        return bool(self.lib.pango_tab_array_get_positions_in_pixels(self.handle))

    @positions_in_pixels.setter
    def positions_in_pixels(self, value: bool):
        self.lib.pango_tab_array_set_positions_in_pixels(self.handle, bool(value))

    def get_decimal_point(self, index: int) -> Optional[str]:
        """Decimal point of a DECIMAL tab; None means the locale default"""
        codepoint = self.lib.pango_tab_array_get_decimal_point(self.handle, index)
        return chr(codepoint) if codepoint else None

    def set_decimal_point(self, index: int, decimal_point: Optional[str]):
        codepoint = ord(decimal_point) if decimal_point else 0
        self.lib.pango_tab_array_set_decimal_point(self.handle, index, codepoint)

    def sort(self):
        """Order tab stops by increasing position"""
        self.lib.pango_tab_array_sort(self.handle)

    def to_string(self) -> str:
        """Debug serialization; the format may change between Pango versions"""
        return take_cstr(self.lib.pango_tab_array_to_string(self.handle))

    def __repr__(self):
        if self._handle is None:
            return "<TabArray freed>"
        return f"<TabArray {self.tabs!r}>"


# ============================================================================
# Font Descriptions
# ============================================================================

class FontDescription(_Boxed):
    """A PangoFontDescription"""

    _free_func = "pango_font_description_free"

    @classmethod
    def from_string(cls, text: str) -> 'FontDescription':
        """Parse "[FAMILY-LIST] [STYLE-OPTIONS] [SIZE]", e.g. "Sans Bold 12" """
        if text is None:
            raise ValueError("text must not be None")
        return cls(get_lib().pango_font_description_from_string(to_cstr(text)))

    def copy(self) -> 'FontDescription':
        return FontDescription(self.lib.pango_font_description_copy(self.handle))

    @property
    def family(self) -> Optional[str]:
        return from_cstr(self.lib.pango_font_description_get_family(self.handle))

    @property
    def size(self) -> Optional[int]:
        """Size in Pango units (points * 1024), or None when unset"""
        size = self.lib.pango_font_description_get_size(self.handle)
        return int(size) if size else None

    def to_string(self) -> str:
        return take_cstr(self.lib.pango_font_description_to_string(self.handle))

    def __str__(self):
        return self.to_string()


# ============================================================================
# Font Families, Faces and Maps
# ============================================================================

class FontFamily(GObject):
    """A PangoFontFamily, e.g. "DejaVu Sans" """

    @property
    def name(self) -> Optional[str]:
        return from_cstr(self.lib.pango_font_family_get_name(self.handle))


class FontFace(GObject):
    """A PangoFontFace, e.g. "Bold Italic" within a family"""

    @property
    def face_name(self) -> Optional[str]:
        return from_cstr(self.lib.pango_font_face_get_face_name(self.handle))


class FontMap(GObject):
    """A PangoFontMap: the set of fonts available to a renderer"""


# ============================================================================
# Colors
# ============================================================================

@dataclass
class Color:
    """A PangoColor with 16-bit channels (0 to 65535)"""
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def parse(cls, spec: str) -> Optional['Color']:
        """Parse a name ("red") or "#rgb" to "#rrrrggggbbbb"; None if invalid"""
        if spec is None:
            return None
        native = ffi.new("PangoColor *")
        if not get_lib().pango_color_parse(native, to_cstr(spec)):
            return None
        return cls.from_native(native)

    @classmethod
    def from_native(cls, ptr) -> 'Color':
        return cls(int(ptr.red), int(ptr.green), int(ptr.blue))

    def to_native(self):
        return ffi.new("PangoColor *", [self.red, self.green, self.blue])

    def to_string(self) -> str:
        """Hex form, e.g. "#ffff00000000" """
        return take_cstr(get_lib().pango_color_to_string(self.to_native()))


# ============================================================================
# Attributes
# ============================================================================

#: start_index of an attribute covering the text from its first byte
ATTR_INDEX_FROM_TEXT_BEGINNING = 0
#: end_index of an attribute covering the text to its last byte
ATTR_INDEX_TO_TEXT_END = 0xFFFFFFFF


class Attribute(_Boxed):
    """
    A PangoAttribute: one styling value over a byte range of text

    The value lives in a type-specific struct named by
    attr_type.attr_class. as_int(), as_float(), as_string() and as_color()
    read it when the attribute has that struct and return None otherwise.
    """

    _free_func = "pango_attribute_destroy"

    def __init__(self, handle):
        super().__init__(handle)
        self._handle = ffi.cast("PangoAttribute *", handle)

    @classmethod
    def family(cls, family: str) -> 'Attribute':
        if family is None:
            raise ValueError("family must not be None")
        return cls(get_lib().pango_attr_family_new(to_cstr(family)))

    @classmethod
    def weight(cls, weight: int) -> 'Attribute':
        """Font weight, e.g. 700 for bold"""
        return cls(get_lib().pango_attr_weight_new(int(weight)))

    @classmethod
    def scale(cls, scale_factor: float) -> 'Attribute':
        return cls(get_lib().pango_attr_scale_new(float(scale_factor)))

    @classmethod
    def foreground(cls, color: Color) -> 'Attribute':
        if color is None:
            raise ValueError("color must not be None")
        return cls(get_lib().pango_attr_foreground_new(color.red, color.green, color.blue))

    @classmethod
    def background(cls, color: Color) -> 'Attribute':
        if color is None:
            raise ValueError("color must not be None")
        return cls(get_lib().pango_attr_background_new(color.red, color.green, color.blue))

    def copy(self) -> 'Attribute':
        return Attribute(self.lib.pango_attribute_copy(self.handle))

    @property
    def attr_type(self) -> PangoAttrType:
        return PangoAttrType.from_native(self.handle.klass.type)

    @property
    def attr_class(self) -> Optional[str]:
        """Name of the struct holding the value, e.g. "PangoAttrInt" """
        return self.attr_type.attr_class

    @property
    def start_index(self) -> int:
        """First byte covered"""
        return int(self.handle.start_index)

    @start_index.setter
    def start_index(self, index: int):
        self.handle.start_index = index

    @property
    def end_index(self) -> int:
        """Byte after the last one covered"""
        return int(self.handle.end_index)

    @end_index.setter
    def end_index(self, index: int):
        self.handle.end_index = index

    def _value(self, struct: str):
        if self.attr_class != struct:
            return None
        return ffi.cast(f"{struct} *", self.handle)

    def as_int(self) -> Optional[int]:
        value = self._value("PangoAttrInt")
        return None if value is None else int(value.value)

    def as_float(self) -> Optional[float]:
        value = self._value("PangoAttrFloat")
        return None if value is None else float(value.value)

    def as_string(self) -> Optional[str]:
        value = self._value("PangoAttrString")
        return None if value is None else from_cstr(value.value)

    def as_color(self) -> Optional[Color]:
        value = self._value("PangoAttrColor")
        return None if value is None else Color.from_native(value.color)

    def __eq__(self, other):
        if not isinstance(other, Attribute):
            return NotImplemented
        return bool(self.lib.pango_attribute_equal(self.handle, other.handle))

    __hash__ = None

    def __repr__(self):
        if self._handle is None:
            return "<Attribute freed>"
        return (f"<Attribute {self.attr_type.name} "
                f"[{self.start_index}, {self.end_index})>")
