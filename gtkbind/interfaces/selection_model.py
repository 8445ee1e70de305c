"""
GtkSelectionModel: list models that track which items are selected,
plus the GtkNoSelection, GtkSingleSelection and GtkMultiSelection models

Selections cross the boundary as GtkBitset. Here they are frozensets of
positions; every bitset gtkbind receives or builds is released before the
call returns.
"""

from typing import FrozenSet, Iterable, Optional, Type

from ..core.ffi import get_lib
from ..core.signals import Signal
from ..gio import ListModel
from ..objects import GObject


def _position(value: int) -> int:
    if value is None or value < 0:
        raise ValueError(f"position must be a non-negative integer, not {value!r}")
    return int(value)


def _take_bitset(bitset) -> FrozenSet[int]:
    """Read every position in a bitset, then unref it"""
    lib = get_lib()
    try:
        size = lib.gtk_bitset_get_size(bitset)
        return frozenset(int(lib.gtk_bitset_get_nth(bitset, i)) for i in range(size))
    finally:
        lib.gtk_bitset_unref(bitset)


def _new_bitset(positions: Iterable[int]):
    lib = get_lib()
    bitset = lib.gtk_bitset_new_empty()
    for position in positions:
        lib.gtk_bitset_add(bitset, _position(position))
    return bitset


class SelectionModel(GObject):
    """
    Wrapper for the GtkSelectionModel interface

    The select/unselect calls return True when the model supports the
    request. That does not promise the selection changed: a single
    selection ignores select_range, for one.
    """

    #: Selection state changed for a range of items.
    #: Handler: (model, position, n_items, user_data)
    SELECTION_CHANGED = Signal("selection-changed", "void (*)(void *, guint, guint, void *)")

    def is_selected(self, position: int) -> bool:
        return bool(self.lib.gtk_selection_model_is_selected(self.handle, _position(position)))

    @property
    def selection(self) -> FrozenSet[int]:
        """Positions of every selected item"""
        return _take_bitset(self.lib.gtk_selection_model_get_selection(self.handle))

    def get_selection_in_range(self, position: int, n_items: int) -> FrozenSet[int]:
        """Selected positions within [position, position + n_items)"""
        position, n_items = _position(position), _position(n_items)
        selected = _take_bitset(
            self.lib.gtk_selection_model_get_selection_in_range(self.handle, position, n_items))
        return frozenset(p for p in selected if position <= p < position + n_items)

    def select_item(self, position: int, unselect_rest: bool = False) -> bool:
        return bool(self.lib.gtk_selection_model_select_item(
            self.handle, _position(position), bool(unselect_rest)))

    def unselect_item(self, position: int) -> bool:
        return bool(self.lib.gtk_selection_model_unselect_item(self.handle, _position(position)))

    def select_range(self, position: int, n_items: int, unselect_rest: bool = False) -> bool:
        return bool(self.lib.gtk_selection_model_select_range(
            self.handle, _position(position), _position(n_items), bool(unselect_rest)))

    def unselect_range(self, position: int, n_items: int) -> bool:
        return bool(self.lib.gtk_selection_model_unselect_range(
            self.handle, _position(position), _position(n_items)))

    def select_all(self) -> bool:
        return bool(self.lib.gtk_selection_model_select_all(self.handle))

    def unselect_all(self) -> bool:
        return bool(self.lib.gtk_selection_model_unselect_all(self.handle))

    def set_selection(self, selected: Optional[Iterable[int]],
                      mask: Optional[Iterable[int]]) -> bool:
        """
        Update every position in mask to whether it is in selected

        Args:
            selected: Positions that should end up selected
            mask: Positions to update; others keep their state

        Returns:
            Whether the model supports the request; False without a call
            when either argument is None
        """
        if selected is None or mask is None:
            return False
        selected_set = _new_bitset(selected)
        mask_set = _new_bitset(mask)
        try:
            return bool(self.lib.gtk_selection_model_set_selection(
                self.handle, selected_set, mask_set))
        finally:
            self.lib.gtk_bitset_unref(selected_set)
            self.lib.gtk_bitset_unref(mask_set)

    def selection_changed(self, position: int, n_items: int):
        """Emit selection-changed; for use by model implementations"""
        self.lib.gtk_selection_model_selection_changed(
            self.handle, _position(position), _position(n_items))


class _SelectionListModel(ListModel, SelectionModel):
    """A selection model wrapping another list model"""

    _constructor = None

    @classmethod
    def new(cls, model: ListModel, item_type: Optional[Type[GObject]] = None):
        """
        Wrap model in a new selection model

        GTK takes over one reference to model; gtkbind adds that reference
        first, so the caller's model stays valid.
        """
        if model is None:
            raise ValueError("model must not be None")
        model.ref()
        handle = getattr(get_lib(), cls._constructor)(model.handle)
        return cls(handle, item_type or model.item_type)


class NoSelection(_SelectionListModel):
    """A GtkNoSelection: nothing can be selected"""

    _constructor = "gtk_no_selection_new"


class SingleSelection(_SelectionListModel):
    """A GtkSingleSelection: at most one item is selected"""

    _constructor = "gtk_single_selection_new"


class MultiSelection(_SelectionListModel):
    """A GtkMultiSelection: any set of items can be selected"""

    _constructor = "gtk_multi_selection_new"
