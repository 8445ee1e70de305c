"""
GtkFileChooser: file selection, plus the GtkFileFilter it uses
"""

from typing import Optional, Sequence

from ..core.enums import FileChooserAction
from ..core.errors import new_error_ptr, check_error
from ..core.ffi import (
    get_lib, to_cstr, from_cstr, take_cstr, to_cstr_array, handle_or_null,
)
from ..gio import File, ListModel
from ..objects import GObject


class FileFilter(GObject):
    """A GtkFileFilter restricting which files a chooser shows"""

    @classmethod
    def new(cls, name: Optional[str] = None, patterns: Sequence[str] = (),
            mime_types: Sequence[str] = (), suffixes: Sequence[str] = ()) -> 'FileFilter':
        """Create a filter and add the given rules"""
        file_filter = cls(get_lib().gtk_file_filter_new())
        if name is not None:
            file_filter.name = name
        for pattern in patterns:
            file_filter.add_pattern(pattern)
        for mime_type in mime_types:
            file_filter.add_mime_type(mime_type)
        for suffix in suffixes:
            file_filter.add_suffix(suffix)
        return file_filter

    @property
    def name(self) -> Optional[str]:
        return from_cstr(self.lib.gtk_file_filter_get_name(self.handle))

    @name.setter
    def name(self, name: Optional[str]):
        self.lib.gtk_file_filter_set_name(self.handle, to_cstr(name))

    def add_pattern(self, pattern: str):
        """Glob such as "*.png" """
        self.lib.gtk_file_filter_add_pattern(self.handle, to_cstr(pattern))

    def add_mime_type(self, mime_type: str):
        self.lib.gtk_file_filter_add_mime_type(self.handle, to_cstr(mime_type))

    def add_suffix(self, suffix: str):
        """Case-insensitive file suffix without the dot"""
        self.lib.gtk_file_filter_add_suffix(self.handle, to_cstr(suffix))


class FileChooser(GObject):
    """
    Wrapper for the GtkFileChooser interface

    Calls that take a GError ** raise NativeError when GTK reports one.
    """

    # ------------------------------------------------------------------------
    # Mode
    # ------------------------------------------------------------------------

    @property
    def action(self) -> FileChooserAction:
        return FileChooserAction.from_native(self.lib.gtk_file_chooser_get_action(self.handle))

    @action.setter
    def action(self, action: FileChooserAction):
        if action is not None:
            self.lib.gtk_file_chooser_set_action(self.handle, FileChooserAction.to_native(action))

    @property
    def create_folders(self) -> bool:
        return bool(self.lib.gtk_file_chooser_get_create_folders(self.handle))

    @create_folders.setter
    def create_folders(self, value: bool):
        self.lib.gtk_file_chooser_set_create_folders(self.handle, bool(value))

    @property
    def select_multiple(self) -> bool:
        return bool(self.lib.gtk_file_chooser_get_select_multiple(self.handle))

    @select_multiple.setter
    def select_multiple(self, value: bool):
        self.lib.gtk_file_chooser_set_select_multiple(self.handle, bool(value))

    # ------------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------------

    @property
    def current_name(self) -> Optional[str]:
        """Name typed in the entry of a SAVE chooser"""
        return take_cstr(self.lib.gtk_file_chooser_get_current_name(self.handle))

    @current_name.setter
    def current_name(self, name: str):
        if name is None:
            raise ValueError("name must not be None")
        self.lib.gtk_file_chooser_set_current_name(self.handle, to_cstr(name))

    @property
    def current_folder(self) -> Optional[File]:
        return File.wrap(self.lib.gtk_file_chooser_get_current_folder(self.handle))

    def set_current_folder(self, folder: Optional[File]) -> bool:
        """
        Change the folder being shown

        Raises:
            NativeError: the folder could not be shown
        """
        error = new_error_ptr()
        ok = self.lib.gtk_file_chooser_set_current_folder(
            self.handle, handle_or_null(folder), error)
        check_error(error)
        return bool(ok)

    @property
    def file(self) -> Optional[File]:
        """Selected file; the first one when several are selected"""
        return File.wrap(self.lib.gtk_file_chooser_get_file(self.handle))

    def set_file(self, file: Optional[File]) -> bool:
        """
        Select a file, changing folder as needed

        Raises:
            NativeError: the file could not be selected
        """
        error = new_error_ptr()
        ok = self.lib.gtk_file_chooser_set_file(self.handle, handle_or_null(file), error)
        check_error(error)
        return bool(ok)

    @property
    def files(self) -> ListModel:
        """Every selected file"""
        return ListModel(self.lib.gtk_file_chooser_get_files(self.handle), File)

    # ------------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------------

    def add_filter(self, file_filter: FileFilter):
        if file_filter is not None:
            self.lib.gtk_file_chooser_add_filter(self.handle, file_filter.handle)

    def remove_filter(self, file_filter: FileFilter):
        if file_filter is not None:
            self.lib.gtk_file_chooser_remove_filter(self.handle, file_filter.handle)

    @property
    def filter(self) -> Optional[FileFilter]:
        return FileFilter.wrap(self.lib.gtk_file_chooser_get_filter(self.handle))

    @filter.setter
    def filter(self, file_filter: Optional[FileFilter]):
        self.lib.gtk_file_chooser_set_filter(self.handle, handle_or_null(file_filter))

    @property
    def filters(self) -> ListModel:
        return ListModel(self.lib.gtk_file_chooser_get_filters(self.handle), FileFilter)

    # ------------------------------------------------------------------------
    # Choices
    # ------------------------------------------------------------------------

    def add_choice(self, choice_id: str, label: str,
                   options: Optional[Sequence[str]] = None,
                   option_labels: Optional[Sequence[str]] = None):
        """
        Add an extra choice to the chooser

        Without options the choice is a boolean check button; with options
        it is a combo box whose entries are option_labels.
        """
        if choice_id is None:
            raise ValueError("choice_id must not be None")
        if options is not None and option_labels is not None \
                and len(options) != len(option_labels):
            raise ValueError("options and option_labels must have the same length")
        option_array, keep_options = to_cstr_array(options)
        label_array, keep_labels = to_cstr_array(option_labels)
        self.lib.gtk_file_chooser_add_choice(
            self.handle, to_cstr(choice_id), to_cstr(label), option_array, label_array)

    def remove_choice(self, choice_id: str):
        if choice_id is not None:
            self.lib.gtk_file_chooser_remove_choice(self.handle, to_cstr(choice_id))

    def get_choice(self, choice_id: str) -> Optional[str]:
        """Selected option id, "true"/"false" for a boolean choice, or None"""
        if choice_id is None:
            return None
        return from_cstr(self.lib.gtk_file_chooser_get_choice(self.handle, to_cstr(choice_id)))

    def set_choice(self, choice_id: str, option: str):
        if choice_id is not None:
            self.lib.gtk_file_chooser_set_choice(
                self.handle, to_cstr(choice_id), to_cstr(option))

    # ------------------------------------------------------------------------
    # Shortcut Folders
    # ------------------------------------------------------------------------

    def add_shortcut_folder(self, folder: Optional[File]) -> bool:
        """
        Add a folder to the sidebar; None is a no-op returning False

        Raises:
            NativeError: the folder could not be added
        """
        if folder is None:
            return False
        error = new_error_ptr()
        ok = self.lib.gtk_file_chooser_add_shortcut_folder(self.handle, folder.handle, error)
        check_error(error)
        return bool(ok)

    def remove_shortcut_folder(self, folder: Optional[File]) -> bool:
        """
        Remove a sidebar folder; None is a no-op returning False

        Raises:
            NativeError: the folder was not in the list
        """
        if folder is None:
            return False
        error = new_error_ptr()
        ok = self.lib.gtk_file_chooser_remove_shortcut_folder(self.handle, folder.handle, error)
        check_error(error)
        return bool(ok)

    @property
    def shortcut_folders(self) -> ListModel:
        return ListModel(self.lib.gtk_file_chooser_get_shortcut_folders(self.handle), File)
