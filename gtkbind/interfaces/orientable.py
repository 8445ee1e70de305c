"""
GtkOrientable: widgets that can be laid out horizontally or vertically
"""

from ..core.enums import Orientation
from ..objects import GObject


class Orientable(GObject):
    """Wrapper for the GtkOrientable interface"""

    @property
    def orientation(self) -> Orientation:
        return Orientation.from_native(self.lib.gtk_orientable_get_orientation(self.handle))

    @orientation.setter
    def orientation(self, orientation: Orientation):
        if orientation is None:
            raise ValueError("orientation must not be None")
        self.lib.gtk_orientable_set_orientation(self.handle, Orientation.to_native(orientation))
