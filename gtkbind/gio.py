"""
GIO wrappers: files and list models
"""

import os
from typing import Optional, Type

from .core.ffi import ffi, get_lib, to_cstr, take_cstr
from .objects import GObject


class File(GObject):
    """A GFile: an abstract file location"""

    @classmethod
    def for_path(cls, path) -> 'File':
        """GFile for a local path (str or os.PathLike)"""
        if path is None:
            raise ValueError("path must not be None")
        return cls(get_lib().g_file_new_for_path(to_cstr(os.fspath(path))))

    @classmethod
    def for_uri(cls, uri: str) -> 'File':
        """GFile for a URI such as file:///tmp or https://example.org/a"""
        if uri is None:
            raise ValueError("uri must not be None")
        return cls(get_lib().g_file_new_for_uri(to_cstr(uri)))

    @property
    def path(self) -> Optional[str]:
        """Local path, or None when the location has no local path"""
        return take_cstr(self.lib.g_file_get_path(self.handle))

    @property
    def uri(self) -> str:
        return take_cstr(self.lib.g_file_get_uri(self.handle))

    @property
    def parse_name(self) -> str:
        """Name suitable for display and for parsing back into a GFile"""
        return take_cstr(self.lib.g_file_get_parse_name(self.handle))

    def exists(self) -> bool:
        return bool(self.lib.g_file_query_exists(self.handle, ffi.NULL))

    def __fspath__(self):
        path = self.path
        if path is None:
            raise TypeError(f"{self.uri} has no local path")
        return path


class ListModel(GObject):
    """
    A GListModel, read as a Python sequence

    g_list_model_get_item returns a new reference; indexing drops it again
    at once, so items are borrowed from the model like any other wrapper
    and stay valid while the model holds them.

    Args:
        handle: GListModel pointer
        item_type: Wrapper class for the items (GObject by default)
    """

    def __init__(self, handle, item_type: Type[GObject] = GObject):
        super().__init__(handle)
        self.item_type = item_type

    def __len__(self):
        return int(self.lib.g_list_model_get_n_items(self.handle))

    def __getitem__(self, index: int):
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("list model index out of range")
        item = self.lib.g_list_model_get_item(self.handle, index)
        if item != ffi.NULL:
            self.lib.g_object_unref(item)
        return self.item_type.wrap(item)

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]
