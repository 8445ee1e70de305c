"""
GTK interface wrappers
"""

from .editable import Editable
from .color_chooser import ColorChooser
from .file_chooser import FileChooser, FileFilter
from .font_chooser import FontChooser
from .orientable import Orientable
from .selection_model import SelectionModel, NoSelection, SingleSelection, MultiSelection

__all__ = [
    "Editable",
    "ColorChooser",
    "FileChooser",
    "FileFilter",
    "FontChooser",
    "Orientable",
    "SelectionModel",
    "NoSelection",
    "SingleSelection",
    "MultiSelection",
]
