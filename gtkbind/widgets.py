"""
Concrete widgets built from the interface wrappers

Constructors call gtk_*_new, so GTK must be initialised first
(GtkLibrary().init()).
"""

from typing import Optional

from .core.bitfields import InputHints, PickFlags, StateFlags
from .core.enums import FileChooserAction, Orientation
from .core.ffi import get_lib, to_cstr, from_cstr
from .interfaces import ColorChooser, Editable, FileChooser, FontChooser, Orientable
from .objects import GObject

# ============================================================================
# Widget
# ============================================================================

class Widget(GObject):
    """A GtkWidget"""

    @property
    def name(self) -> Optional[str]:
        return from_cstr(self.lib.gtk_widget_get_name(self.handle))

    @name.setter
    def name(self, name: str):
        self.lib.gtk_widget_set_name(self.handle, to_cstr(name or ""))

    @property
    def visible(self) -> bool:
        return bool(self.lib.gtk_widget_get_visible(self.handle))

    @visible.setter
    def visible(self, visible: bool):
        self.lib.gtk_widget_set_visible(self.handle, bool(visible))

    @property
    def sensitive(self) -> bool:
        return bool(self.lib.gtk_widget_get_sensitive(self.handle))

    @sensitive.setter
    def sensitive(self, sensitive: bool):
        self.lib.gtk_widget_set_sensitive(self.handle, bool(sensitive))

    @property
    def state_flags(self):
        """Current StateFlags as a set"""
        return StateFlags.decode(self.lib.gtk_widget_get_state_flags(self.handle))

    def set_state_flags(self, *flags, clear: bool = False):
        """Turn on flags; with clear=True every other flag is turned off"""
        self.lib.gtk_widget_set_state_flags(self.handle, StateFlags.encode(*flags), clear)

    def unset_state_flags(self, *flags):
        self.lib.gtk_widget_unset_state_flags(self.handle, StateFlags.encode(*flags))

    def grab_focus(self) -> bool:
        return bool(self.lib.gtk_widget_grab_focus(self.handle))

    def pick(self, x: float, y: float, *flags) -> Optional['Widget']:
        """Descendant at (x, y) in widget coordinates, or None"""
        return Widget.wrap(self.lib.gtk_widget_pick(self.handle, x, y, PickFlags.encode(*flags)))


# ============================================================================
# Text Entry Widgets
# ============================================================================

class Entry(Widget, Editable):
    """A GtkEntry: single line text entry"""

    @classmethod
    def new(cls) -> 'Entry':
        return cls(get_lib().gtk_entry_new())

    @property
    def input_hints(self):
        """InputHints set; empty when no hints are set"""
        return InputHints.decode(self.lib.gtk_entry_get_input_hints(self.handle))

    @input_hints.setter
    def input_hints(self, hints):
        self.lib.gtk_entry_set_input_hints(self.handle, InputHints.encode(*hints))

    @property
    def placeholder_text(self) -> Optional[str]:
        return from_cstr(self.lib.gtk_entry_get_placeholder_text(self.handle))

    @placeholder_text.setter
    def placeholder_text(self, text: Optional[str]):
        self.lib.gtk_entry_set_placeholder_text(self.handle, to_cstr(text))


class Text(Widget, Editable):
    """A GtkText: the bare editing widget inside entries"""

    @classmethod
    def new(cls) -> 'Text':
        return cls(get_lib().gtk_text_new())


class PasswordEntry(Widget, Editable):
    """A GtkPasswordEntry"""

    @classmethod
    def new(cls) -> 'PasswordEntry':
        return cls(get_lib().gtk_password_entry_new())


class SearchEntry(Widget, Editable):
    """A GtkSearchEntry"""

    @classmethod
    def new(cls) -> 'SearchEntry':
        return cls(get_lib().gtk_search_entry_new())


# ============================================================================
# Containers
# ============================================================================

class Box(Widget, Orientable):
    """A GtkBox laying children out in a row or column"""

    @classmethod
    def new(cls, orientation: Orientation = Orientation.HORIZONTAL, spacing: int = 0) -> 'Box':
        return cls(get_lib().gtk_box_new(Orientation.to_native(orientation), spacing))

    def append(self, child: Widget):
        if child is None:
            raise ValueError("child must not be None")
        self.lib.gtk_box_append(self.handle, child.handle)

    def remove(self, child: Widget):
        if child is not None:
            self.lib.gtk_box_remove(self.handle, child.handle)

    @property
    def spacing(self) -> int:
        return int(self.lib.gtk_box_get_spacing(self.handle))

    @spacing.setter
    def spacing(self, spacing: int):
        self.lib.gtk_box_set_spacing(self.handle, spacing)


# ============================================================================
# Choosers
# ============================================================================

class ColorChooserWidget(Widget, ColorChooser):
    """A GtkColorChooserWidget"""

    @classmethod
    def new(cls) -> 'ColorChooserWidget':
        return cls(get_lib().gtk_color_chooser_widget_new())


class FileChooserWidget(Widget, FileChooser):
    """A GtkFileChooserWidget"""

    @classmethod
    def new(cls, action: FileChooserAction = FileChooserAction.OPEN) -> 'FileChooserWidget':
        return cls(get_lib().gtk_file_chooser_widget_new(FileChooserAction.to_native(action)))


class FontChooserWidget(Widget, FontChooser):
    """A GtkFontChooserWidget"""

    @classmethod
    def new(cls) -> 'FontChooserWidget':
        return cls(get_lib().gtk_font_chooser_widget_new())
