"""
GtkEditable: the text-editing interface shared by GtkEntry, GtkText,
GtkPasswordEntry, GtkSearchEntry and GtkSpinButton

Positions are counted in characters, not bytes.
"""

from typing import Optional, Tuple

from ..core.ffi import ffi, to_cstr, from_cstr, take_cstr
from ..core.signals import Signal
from ..objects import GObject


class Editable(GObject):
    """Wrapper for the GtkEditable interface"""

    # ========================================================================
    # Signals
    # ========================================================================

    #: Contents changed. Handler: (editable, user_data)
    CHANGED = Signal("changed")

    #: Text is about to be deleted. Handler: (editable, start_pos, end_pos, user_data)
    DELETE_TEXT = Signal("delete-text", "void (*)(void *, int, int, void *)")

    #: Text is about to be inserted.
    #: Handler: (editable, text, length_in_bytes, position_ptr, user_data)
    INSERT_TEXT = Signal("insert-text", "void (*)(void *, const char *, int, int *, void *)")

    # ========================================================================
    # Text
    # ========================================================================

    @property
    def text(self) -> str:
        """Current contents"""
        return from_cstr(self.lib.gtk_editable_get_text(self.handle)) or ""

    @text.setter
    def text(self, text: Optional[str]):
        # None clears the contents
        self.lib.gtk_editable_set_text(self.handle, to_cstr(text or ""))

    def get_chars(self, start_pos: int = 0, end_pos: int = -1) -> str:
        """
        Text between two positions

        Args:
            start_pos: First character
            end_pos: End character (exclusive); negative means the end of the text

        Returns:
            The characters in [start_pos, end_pos)
        """
        return take_cstr(self.lib.gtk_editable_get_chars(self.handle, start_pos, end_pos)) or ""

    def insert_text(self, text: Optional[str], position: int) -> Optional[int]:
        """
        Insert text at a position

        Args:
            text: Text to insert; None inserts nothing
            position: Character position, clamped to 0 or more

        Returns:
            Position just after the inserted text, or None if nothing was inserted
        """
        if text is None:
            return None
        encoded = text.encode('utf-8')
        pos = ffi.new("int *", max(0, position))
        self.lib.gtk_editable_insert_text(self.handle, encoded, len(encoded), pos)
        return int(pos[0])

    def delete_text(self, start_pos: int, end_pos: int = -1):
        """Delete [start_pos, end_pos); negative end_pos deletes to the end"""
        self.lib.gtk_editable_delete_text(self.handle, start_pos, end_pos)

    def delete_selection(self):
        """Delete the selected text, if any"""
        self.lib.gtk_editable_delete_selection(self.handle)

    # ========================================================================
    # Selection and Cursor
    # ========================================================================

    @property
    def selection_bounds(self) -> Optional[Tuple[int, int]]:
        """(start, end) of the selection, or None when nothing is selected"""
        start = ffi.new("int *")
        end = ffi.new("int *")
        if not self.lib.gtk_editable_get_selection_bounds(self.handle, start, end):
            return None
        return int(start[0]), int(end[0])

    def select_region(self, start_pos: int, end_pos: int = -1):
        """Select [start_pos, end_pos); negative end_pos selects to the end"""
        self.lib.gtk_editable_select_region(self.handle, start_pos, end_pos)

    @property
    def position(self) -> int:
        """Cursor position"""
        return int(self.lib.gtk_editable_get_position(self.handle))

    @position.setter
    def position(self, position: int):
        # -1 moves the cursor to the end
        self.lib.gtk_editable_set_position(self.handle, position)

    # ========================================================================
    # Behaviour
    # ========================================================================

    @property
    def editable(self) -> bool:
        return bool(self.lib.gtk_editable_get_editable(self.handle))

    @editable.setter
    def editable(self, is_editable: bool):
        self.lib.gtk_editable_set_editable(self.handle, bool(is_editable))

    @property
    def enable_undo(self) -> bool:
        return bool(self.lib.gtk_editable_get_enable_undo(self.handle))

    @enable_undo.setter
    def enable_undo(self, enable: bool):
        self.lib.gtk_editable_set_enable_undo(self.handle, bool(enable))

    @property
    def alignment(self) -> float:
        """Horizontal alignment, 0 (left) to 1 (right)"""
        return float(self.lib.gtk_editable_get_alignment(self.handle))

    @alignment.setter
    def alignment(self, xalign: float):
        if 0.0 <= xalign <= 1.0:
            self.lib.gtk_editable_set_alignment(self.handle, xalign)

    @property
    def width_chars(self) -> Optional[int]:
        """Requested width in characters, None when unset"""
        value = self.lib.gtk_editable_get_width_chars(self.handle)
        return int(value) if value >= 0 else None

    @width_chars.setter
    def width_chars(self, n_chars: Optional[int]):
        self.lib.gtk_editable_set_width_chars(self.handle, -1 if n_chars is None else n_chars)

    @property
    def max_width_chars(self) -> Optional[int]:
        """Maximum width in characters, None when unset"""
        value = self.lib.gtk_editable_get_max_width_chars(self.handle)
        return int(value) if value >= 0 else None

    @max_width_chars.setter
    def max_width_chars(self, n_chars: Optional[int]):
        self.lib.gtk_editable_set_max_width_chars(self.handle, -1 if n_chars is None else n_chars)

    # ========================================================================
    # Delegation
    # ========================================================================

    @property
    def delegate(self) -> Optional['Editable']:
        """Editable this one forwards to, if it is a delegating wrapper"""
        return Editable.wrap(self.lib.gtk_editable_get_delegate(self.handle))

    def init_delegate(self):
        self.lib.gtk_editable_init_delegate(self.handle)

    def finish_delegate(self):
        self.lib.gtk_editable_finish_delegate(self.handle)
