"""
Shared fixtures for gtkbind tests

FakeLib stands in for libgtk-4. It exposes the same entry-point names,
keeps per-object state, and stores only the raw addresses of callbacks
it is given, so a test can tell whether gtkbind itself keeps them alive.
"""

import importlib
import os
import re
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

ffi_module = importlib.import_module("gtkbind.core.ffi")
from gtkbind.core.ffi import ffi
from gtkbind.core.signals import registry
from gtkbind.core.enums import PangoAttrType
from gtkbind.interfaces import ColorChooser, Editable, FontChooser, SelectionModel
from gtkbind.interfaces import font_chooser

SIGNAL_CDECLS = {
    "changed": Editable.CHANGED.cdecl,
    "delete-text": Editable.DELETE_TEXT.cdecl,
    "insert-text": Editable.INSERT_TEXT.cdecl,
    "color-activated": ColorChooser.COLOR_ACTIVATED.cdecl,
    "font-activated": FontChooser.FONT_ACTIVATED.cdecl,
    "close-request": "gboolean (*)(void *, void *)",
    "selection-changed": SelectionModel.SELECTION_CHANGED.cdecl,
}

_ACCESSOR = re.compile(
    r"^gtk_(?:editable|color_chooser|file_chooser|font_chooser|orientable|widget|box|entry)"
    r"_(get|set)_(\w+)$"
)

_DEFAULTS = {
    "width_chars": -1,
    "max_width_chars": -1,
    "editable": 1,
    "enable_undo": 1,
    "alignment": 0.0,
    "position": 0,
    "font_size": -1,
    "visible": 1,
    "sensitive": 1,
}

G_TYPE_DOUBLE = 15 << 2

_MODIFIERS = {"shift": 1 << 0, "lock": 1 << 1, "control": 1 << 2, "primary": 1 << 2,
              "ctrl": 1 << 2, "alt": 1 << 3, "super": 1 << 26, "hyper": 1 << 27,
              "meta": 1 << 28}

_COLORS = {"red": (1.0, 0.0, 0.0), "green": (0.0, 0.5019608, 0.0),
           "blue": (0.0, 0.0, 1.0), "black": (0.0, 0.0, 0.0), "white": (1.0, 1.0, 1.0)}


def address(ptr):
    return int(ffi.cast("uintptr_t", ffi.cast("void *", ptr)))


def text_of(value):
    """Decode a const char * argument (bytes from gtkbind, or cdata)"""
    if isinstance(value, bytes):
        return value.decode('utf-8')
    if value == ffi.NULL:
        return None
    return ffi.string(value).decode('utf-8')


class FakeLib:
    """In-process stand-in for the GTK shared library"""

    def __init__(self):
        self.objects = {}
        self.handlers = {}
        self.disconnected = []
        self.weak_refs = {}
        self.freed = []
        self.errors_freed = []
        self.calls = []
        self.quarks = {}
        self.fail_with = {}
        self.refcounts = {}
        self._attr_classes = {}
        self._strings = []
        self._next_handler = 1
        self.initialized = False
        self.debug_flags = 0

    # ------------------------------------------------------------------------
    # Helpers used by tests
    # ------------------------------------------------------------------------

    def new_object(self, type_name="GObject", **state):
        block = ffi.new("char[16]")
        handle = ffi.cast("void *", block)
        self.objects[address(handle)] = {
            "type": ffi.new("char[]", type_name.encode('utf-8')),
            "block": block,
            "state": dict(state),
        }
        return handle

    def state(self, handle):
        return self.objects[address(handle)]["state"]

    def borrowed(self, text):
        """A const char * the fake keeps alive"""
        if text is None:
            return ffi.NULL
        buf = ffi.new("char[]", text.encode('utf-8'))
        self._strings.append(buf)
        return buf

    owned = borrowed

    def handlers_for(self, handle, name=None):
        addr = address(handle)
        return [h for h in self.handlers.values()
                if h["instance"] == addr and (name is None or h["name"] == name)]

    def emit(self, handle, name, *args):
        """Invoke every handler of a signal the way GObject would"""
        results = []
        for handler in self.handlers_for(handle, name):
            fn = ffi.cast(SIGNAL_CDECLS.get(name, "void (*)(void *, void *)"), handler["callback"])
            instance = ffi.cast("void *", handle)
            data = ffi.cast("void *", handler["data"])
            if handler["flags"] & 2:
                results.append(fn(data, *args, instance))
            else:
                results.append(fn(instance, *args, data))
        return results

    def finalize(self, handle):
        """Simulate the last unref of a native object"""
        addr = address(handle)
        for notify, data in self.weak_refs.pop(addr, []):
            ffi.cast("GWeakNotify", notify)(ffi.cast("void *", data), ffi.cast("GObject *", handle))
        for handler_id in [i for i, h in self.handlers.items() if h["instance"] == addr]:
            del self.handlers[handler_id]

    def make_error(self, domain, code, message):
        error = ffi.new("GError *")
        msg = ffi.new("char[]", message.encode('utf-8'))
        error.domain = self.g_quark_from_string(domain.encode('utf-8'))
        error.code = code
        error.message = msg
        self._strings.extend([error, msg])
        return error

    def __getattr__(self, name):
        match = _ACCESSOR.match(name)
        if match is None:
            raise AttributeError(name)
        verb, prop = match.groups()
        if verb == "get":
            return lambda handle: self.state(handle).get(prop, _DEFAULTS.get(prop, 0))

        def setter(handle, value, *rest):
            self.state(handle)[prop] = value
        return setter

    # ------------------------------------------------------------------------
    # GLib
    # ------------------------------------------------------------------------

    def g_free(self, ptr):
        self.freed.append(address(ptr))

    def g_error_free(self, error):
        self.errors_freed.append(address(error))

    def g_quark_from_string(self, string):
        key = text_of(string).encode('utf-8')
        if key not in self.quarks:
            self.quarks[key] = (len(self.quarks) + 1, ffi.new("char[]", key))
        return self.quarks[key][0]

    def g_quark_try_string(self, string):
        entry = self.quarks.get(text_of(string).encode('utf-8'))
        return entry[0] if entry else 0

    def g_quark_to_string(self, quark):
        for value, buf in self.quarks.values():
            if value == quark:
                return buf
        return ffi.NULL

    # ------------------------------------------------------------------------
    # GObject
    # ------------------------------------------------------------------------

    def g_signal_connect_data(self, instance, name, c_handler, data, destroy, flags):
        name = text_of(name)
        if name.split("::")[0] not in SIGNAL_CDECLS:
            return 0
        handler_id = self._next_handler
        self._next_handler += 1
        self.handlers[handler_id] = {
            "instance": address(instance),
            "name": name,
            "callback": address(c_handler),
            "data": address(data),
            "flags": flags,
        }
        return handler_id

    def g_signal_handler_disconnect(self, instance, handler_id):
        self.disconnected.append(handler_id)
        self.handlers.pop(handler_id, None)

    def g_signal_handler_is_connected(self, instance, handler_id):
        return 1 if handler_id in self.handlers else 0

    def g_signal_emit_by_name(self, instance, name, *args):
        name = text_of(name)
        self.calls.append(("emit", name, args))
        cdecl = ffi.typeof(SIGNAL_CDECLS.get(name, "void (*)(void *, void *)"))
        return_slot = None
        if cdecl.result.kind != 'void':
            # GLib reads the return location after the signal arguments
            args, return_slot = args[:-1], args[-1]
        plain = [arg if ffi.typeof(arg).kind != 'primitive' else
                 (float(arg) if ffi.typeof(arg).cname == 'double' else int(arg))
                 for arg in args]
        results = self.emit(instance, name, *plain)
        if return_slot is not None:
            return_slot[0] = results[-1] if results else 0

    def g_object_weak_ref(self, obj, notify, data):
        self.weak_refs.setdefault(address(obj), []).append((address(notify), address(data)))

    def g_object_weak_unref(self, obj, notify, data):
        refs = self.weak_refs.get(address(obj), [])
        refs.remove((address(notify), address(data)))
        if not refs:
            self.weak_refs.pop(address(obj), None)

    def g_object_ref(self, obj):
        self.refcounts[address(obj)] = self.refcounts.get(address(obj), 1) + 1
        return obj

    def g_object_unref(self, obj):
        self.refcounts[address(obj)] = self.refcounts.get(address(obj), 1) - 1

    def g_type_name_from_instance(self, instance):
        return self.objects[address(instance)]["type"]

    def g_object_get(self, obj, name, out, terminator):
        value = self.state(obj)["props"][text_of(name)]
        if isinstance(value, str):
            out[0] = self.owned(value)
        else:
            out[0] = value

    def g_object_set(self, obj, name, value, terminator):
        ctype = ffi.typeof(value)
        if ctype.kind == 'array':
            python_value = text_of(value)
        elif ctype.cname == 'double':
            python_value = float(value)
        elif ctype.kind == 'pointer':
            python_value = None
        else:
            python_value = int(value)
        self.state(obj).setdefault("props", {})[text_of(name)] = python_value

    def g_object_get_property(self, obj, name, value):
        stored = self.state(obj)["props"][text_of(name)]
        if value.g_type != G_TYPE_DOUBLE:
            raise AssertionError(f"unexpected GValue type {value.g_type}")
        value.data[0].v_double = float(stored)

    def g_value_init(self, value, g_type):
        self.calls.append(("value_init", int(g_type)))
        value.g_type = g_type
        return value

    def g_value_get_double(self, value):
        return value.data[0].v_double

    def g_value_unset(self, value):
        self.calls.append(("value_unset", address(value)))
        value.g_type = 0

    # ------------------------------------------------------------------------
    # GIO
    # ------------------------------------------------------------------------

    def g_file_new_for_path(self, path):
        path = text_of(path)
        return self.new_object("GLocalFile", path=path, uri="file://" + path)

    def g_file_new_for_uri(self, uri):
        uri = text_of(uri)
        path = uri[len("file://"):] if uri.startswith("file://") else None
        return self.new_object("GDummyFile", path=path, uri=uri)

    def g_file_get_path(self, file):
        return self.owned(self.state(file)["path"])

    def g_file_get_uri(self, file):
        return self.owned(self.state(file)["uri"])

    def g_file_get_parse_name(self, file):
        state = self.state(file)
        return self.owned(state["path"] or state["uri"])

    def g_file_query_exists(self, file, cancellable):
        path = self.state(file)["path"]
        return 1 if path and os.path.exists(path) else 0

    def new_list_model(self, items):
        return self.new_object("GListStore", items=list(items))

    def g_list_model_get_n_items(self, model):
        return len(self.state(model)["items"])

    def g_list_model_get_item(self, model, position):
        item = self.state(model)["items"][position]
        return self.g_object_ref(item)

    # ------------------------------------------------------------------------
    # GDK
    # ------------------------------------------------------------------------

    def gdk_rgba_parse(self, rgba, spec):
        text = text_of(spec).strip().lower()
        if text in _COLORS:
            rgba.red, rgba.green, rgba.blue = _COLORS[text]
            rgba.alpha = 1.0
            return 1
        if re.fullmatch(r"#[0-9a-f]{6}", text):
            rgba.red, rgba.green, rgba.blue = (int(text[i:i + 2], 16) / 255.0 for i in (1, 3, 5))
            rgba.alpha = 1.0
            return 1
        return 0

    def gdk_rgba_to_string(self, rgba):
        channels = ",".join(str(round(c * 255)) for c in (rgba.red, rgba.green, rgba.blue))
        if rgba.alpha >= 1.0:
            return self.owned(f"rgb({channels})")
        return self.owned(f"rgba({channels},{rgba.alpha:g})")

    def gdk_rectangle_intersect(self, a, b, dest):
        x1, y1 = max(a.x, b.x), max(a.y, b.y)
        x2 = min(a.x + a.width, b.x + b.width)
        y2 = min(a.y + a.height, b.y + b.height)
        if x2 <= x1 or y2 <= y1:
            return 0
        dest.x, dest.y, dest.width, dest.height = x1, y1, x2 - x1, y2 - y1
        return 1

    def gdk_rectangle_union(self, a, b, dest):
        x1, y1 = min(a.x, b.x), min(a.y, b.y)
        x2 = max(a.x + a.width, b.x + b.width)
        y2 = max(a.y + a.height, b.y + b.height)
        dest.x, dest.y, dest.width, dest.height = x1, y1, x2 - x1, y2 - y1

    def gdk_rectangle_contains_point(self, rect, x, y):
        return 1 if rect.x <= x < rect.x + rect.width and rect.y <= y < rect.y + rect.height else 0

    # ------------------------------------------------------------------------
    # Pango
    # ------------------------------------------------------------------------

    def pango_tab_array_new(self, size, pixels):
        return self.new_object("PangoTabArray", tabs=[(0, 0)] * size, pixels=pixels,
                               decimal={})

    def pango_tab_array_from_string(self, text):
        text = text_of(text)
        tabs = []
        pixels = 0
        for token in text.split():
            match = re.fullmatch(r"(?:(left|right|center|decimal):)?(\d+)(px)?", token)
            if match is None:
                return ffi.NULL
            align = ["left", "right", "center", "decimal"].index(match.group(1) or "left")
            tabs.append((align, int(match.group(2))))
            pixels = pixels or bool(match.group(3))
        return self.new_object("PangoTabArray", tabs=tabs, pixels=int(pixels), decimal={})

    def pango_tab_array_copy(self, src):
        state = self.state(src)
        return self.new_object("PangoTabArray", tabs=list(state["tabs"]),
                               pixels=state["pixels"], decimal=dict(state["decimal"]))

    def pango_tab_array_free(self, tab_array):
        self.freed.append(address(tab_array))

    def pango_tab_array_get_size(self, tab_array):
        return len(self.state(tab_array)["tabs"])

    def pango_tab_array_resize(self, tab_array, new_size):
        tabs = self.state(tab_array)["tabs"]
        del tabs[new_size:]
        tabs.extend([(0, 0)] * (new_size - len(tabs)))

    def pango_tab_array_get_tab(self, tab_array, index, alignment, location):
        alignment[0], location[0] = self.state(tab_array)["tabs"][index]

    def pango_tab_array_set_tab(self, tab_array, index, alignment, location):
        tabs = self.state(tab_array)["tabs"]
        if index >= len(tabs):
            tabs.extend([(0, 0)] * (index + 1 - len(tabs)))
        tabs[index] = (alignment, location)

    def pango_tab_array_get_decimal_point(self, tab_array, index):
        return self.state(tab_array)["decimal"].get(index, 0)

    def pango_tab_array_set_decimal_point(self, tab_array, index, codepoint):
        self.state(tab_array)["decimal"][index] = codepoint

    def pango_tab_array_get_positions_in_pixels(self, tab_array):
        return self.state(tab_array)["pixels"]

    def pango_tab_array_set_positions_in_pixels(self, tab_array, pixels):
        self.state(tab_array)["pixels"] = int(pixels)

    def pango_tab_array_sort(self, tab_array):
        self.state(tab_array)["tabs"].sort(key=lambda tab: tab[1])

    def pango_tab_array_to_string(self, tab_array):
        state = self.state(tab_array)
        names = ["left", "right", "center", "decimal"]
        suffix = "px" if state["pixels"] else ""
        return self.owned("\n".join(f"{names[a]}:{loc}{suffix}" for a, loc in state["tabs"]))

    def pango_font_description_from_string(self, text):
        text = text_of(text)
        words = text.split()
        size = 0
        if words and words[-1].isdigit():
            size = int(words.pop()) * 1024
        return self.new_object("PangoFontDescription", text=text,
                               family=" ".join(words) or None, size=size)

    def pango_font_description_copy(self, desc):
        return self.new_object("PangoFontDescription", **self.state(desc))

    def pango_font_description_to_string(self, desc):
        return self.owned(self.state(desc)["text"])

    def pango_font_description_get_family(self, desc):
        return self.borrowed(self.state(desc)["family"])

    def pango_font_description_get_size(self, desc):
        return self.state(desc)["size"]

    def pango_font_description_free(self, desc):
        self.freed.append(address(desc))

    def pango_font_family_get_name(self, family):
        return self.borrowed(self.state(family)["name"])

    def pango_font_face_get_face_name(self, face):
        return self.borrowed(self.state(face)["name"])

    def _new_attr(self, attr_type, struct, value):
        klass = self._attr_classes.get(int(attr_type))
        if klass is None:
            klass = self._attr_classes[int(attr_type)] = ffi.new(
                "PangoAttrClass *", {"type": int(attr_type)})
        attr = ffi.new(f"{struct} *")
        attr.attr.klass = klass
        attr.attr.end_index = 0xFFFFFFFF
        state = {"attr_type": int(attr_type), "struct": struct, "value": value}
        if struct == "PangoAttrColor":
            attr.color.red, attr.color.green, attr.color.blue = value
        elif struct == "PangoAttrString":
            state["buf"] = ffi.new("char[]", value.encode('utf-8'))
            attr.value = state["buf"]
        else:
            attr.value = value
        handle = ffi.cast("PangoAttribute *", attr)
        self.objects[address(handle)] = {
            "type": ffi.new("char[]", struct.encode('utf-8')),
            "block": attr,
            "state": state,
        }
        return handle

    def pango_attr_family_new(self, family):
        return self._new_attr(PangoAttrType.FAMILY, "PangoAttrString", text_of(family))

    def pango_attr_weight_new(self, weight):
        return self._new_attr(PangoAttrType.WEIGHT, "PangoAttrInt", weight)

    def pango_attr_scale_new(self, scale_factor):
        return self._new_attr(PangoAttrType.SCALE, "PangoAttrFloat", scale_factor)

    def pango_attr_foreground_new(self, red, green, blue):
        return self._new_attr(PangoAttrType.FOREGROUND, "PangoAttrColor", (red, green, blue))

    def pango_attr_background_new(self, red, green, blue):
        return self._new_attr(PangoAttrType.BACKGROUND, "PangoAttrColor", (red, green, blue))

    def pango_attribute_copy(self, attr):
        state = self.state(attr)
        copy = self._new_attr(state["attr_type"], state["struct"], state["value"])
        copy.start_index, copy.end_index = attr.start_index, attr.end_index
        return copy

    def pango_attribute_destroy(self, attr):
        self.freed.append(address(attr))

    def pango_attribute_equal(self, attr1, attr2):
        a, b = self.state(attr1), self.state(attr2)
        return 1 if (a["attr_type"], a["value"]) == (b["attr_type"], b["value"]) else 0

    def pango_color_parse(self, color, spec):
        text = text_of(spec).strip().lower()
        if text in _COLORS:
            channels = [round(c * 65535) for c in _COLORS[text]]
        elif re.fullmatch(r"#[0-9a-f]{6}", text):
            channels = [int(text[i:i + 2], 16) * 257 for i in (1, 3, 5)]
        else:
            return 0
        color.red, color.green, color.blue = channels
        return 1

    def pango_color_to_string(self, color):
        return self.owned(f"#{color.red:04x}{color.green:04x}{color.blue:04x}")

    # ------------------------------------------------------------------------
    # GTK: initialisation, version and accelerators
    # ------------------------------------------------------------------------

    def gtk_init(self):
        self.initialized = True

    def gtk_init_check(self):
        self.initialized = True
        return 1

    def gtk_is_initialized(self):
        return 1 if self.initialized else 0

    def gtk_disable_setlocale(self):
        self.calls.append(("disable_setlocale",))

    def gtk_get_major_version(self):
        return 4

    def gtk_get_minor_version(self):
        return 8

    def gtk_get_micro_version(self):
        return 3

    def gtk_check_version(self, major, minor, micro):
        if major != 4:
            return self.borrowed("GTK+ version mismatch")
        if (minor, micro) > (8, 3):
            return self.borrowed("GTK+ version too old (micro mismatch)")
        return ffi.NULL

    def gtk_get_debug_flags(self):
        return self.debug_flags

    def gtk_set_debug_flags(self, flags):
        self.debug_flags = flags

    def gtk_accelerator_parse(self, accelerator, key, mods):
        text = text_of(accelerator)
        mask = 0
        for modifier in re.findall(r"<(\w+)>", text):
            if modifier.lower() not in _MODIFIERS:
                return 0
            mask |= _MODIFIERS[modifier.lower()]
        rest = re.sub(r"<\w+>", "", text)
        if len(rest) != 1:
            return 0
        key[0] = ord(rest)
        mods[0] = mask
        return 1

    def gtk_accelerator_name(self, keyval, mods):
        names = [name.capitalize() for name, bit in _MODIFIERS.items()
                 if mods & bit and name not in ("primary", "ctrl")]
        return self.owned("".join(f"<{n}>" for n in names) + chr(keyval))

    def gtk_accelerator_get_label(self, keyval, mods):
        parts = ["Ctrl"] if mods & (1 << 2) else []
        return self.owned("+".join(parts + [chr(keyval).upper()]))

    def gtk_accelerator_valid(self, keyval, mods):
        return 1 if 0x20 < keyval < 0x7f else 0

    def gtk_accelerator_get_default_mod_mask(self):
        return (1 << 0) | (1 << 2) | (1 << 3) | (1 << 26) | (1 << 27) | (1 << 28)

    # ------------------------------------------------------------------------
    # GTK: widgets
    # ------------------------------------------------------------------------

    def gtk_entry_new(self):
        return self.new_object("GtkEntry", text="")

    def gtk_text_new(self):
        return self.new_object("GtkText", text="")

    def gtk_password_entry_new(self):
        return self.new_object("GtkPasswordEntry", text="")

    def gtk_search_entry_new(self):
        return self.new_object("GtkSearchEntry", text="")

    def gtk_box_new(self, orientation, spacing):
        return self.new_object("GtkBox", orientation=orientation, spacing=spacing, children=[])

    def gtk_color_chooser_widget_new(self):
        return self.new_object("GtkColorChooserWidget", rgba=(1.0, 1.0, 1.0, 1.0))

    def gtk_file_chooser_widget_new(self, action):
        return self.new_object("GtkFileChooserWidget", action=action)

    def gtk_font_chooser_widget_new(self):
        return self.new_object("GtkFontChooserWidget")

    def gtk_widget_get_name(self, widget):
        state = self.state(widget)
        if "name" in state:
            return self.borrowed(state["name"])
        return self.objects[address(widget)]["type"]

    def gtk_widget_set_name(self, widget, name):
        self.state(widget)["name"] = text_of(name)

    def gtk_widget_set_state_flags(self, widget, flags, clear):
        state = self.state(widget)
        state["state_flags"] = flags if clear else state.get("state_flags", 0) | flags

    def gtk_widget_unset_state_flags(self, widget, flags):
        state = self.state(widget)
        state["state_flags"] = state.get("state_flags", 0) & ~flags

    def gtk_widget_grab_focus(self, widget):
        return 1

    def gtk_widget_pick(self, widget, x, y, flags):
        self.calls.append(("pick", x, y, flags))
        return ffi.NULL

    def gtk_box_append(self, box, child):
        self.state(box)["children"].append(address(child))

    def gtk_box_remove(self, box, child):
        self.state(box)["children"].remove(address(child))

    def gtk_entry_get_placeholder_text(self, entry):
        value = self.state(entry).get("placeholder")
        return self.borrowed(value)

    def gtk_entry_set_placeholder_text(self, entry, text):
        self.state(entry)["placeholder"] = None if text == ffi.NULL else text_of(text)

    # ------------------------------------------------------------------------
    # GtkEditable
    # ------------------------------------------------------------------------

    def gtk_editable_get_text(self, editable):
        return self.borrowed(self.state(editable).get("text", ""))

    def gtk_editable_set_text(self, editable, text):
        self.state(editable)["text"] = text_of(text)
        self.emit(editable, "changed")

    def gtk_editable_get_chars(self, editable, start, end):
        text = self.state(editable).get("text", "")
        if end < 0:
            end = len(text)
        return self.owned(text[start:end])

    def gtk_editable_insert_text(self, editable, text, length, position):
        state = self.state(editable)
        raw = bytes(text)[:length] if length >= 0 else bytes(text)
        self.emit(editable, "insert-text", text, length, position)
        inserted = raw.decode('utf-8')
        current = state.get("text", "")
        pos = min(position[0], len(current))
        state["text"] = current[:pos] + inserted + current[pos:]
        position[0] = pos + len(inserted)
        self.emit(editable, "changed")

    def gtk_editable_delete_text(self, editable, start, end):
        state = self.state(editable)
        current = state.get("text", "")
        if end < 0:
            end = len(current)
        self.emit(editable, "delete-text", start, end)
        state["text"] = current[:start] + current[end:]
        self.emit(editable, "changed")

    def gtk_editable_delete_selection(self, editable):
        selection = self.state(editable).pop("selection", None)
        if selection:
            self.gtk_editable_delete_text(editable, *selection)

    def gtk_editable_select_region(self, editable, start, end):
        text = self.state(editable).get("text", "")
        if end < 0:
            end = len(text)
        self.state(editable)["selection"] = (start, end) if start != end else None

    def gtk_editable_get_selection_bounds(self, editable, start, end):
        selection = self.state(editable).get("selection")
        if not selection:
            start[0] = end[0] = self.state(editable).get("position", 0)
            return 0
        start[0], end[0] = selection
        return 1

    def gtk_editable_get_delegate(self, editable):
        return self.state(editable).get("delegate", ffi.NULL)

    def gtk_editable_init_delegate(self, editable):
        self.calls.append(("init_delegate", address(editable)))

    def gtk_editable_finish_delegate(self, editable):
        self.calls.append(("finish_delegate", address(editable)))

    # ------------------------------------------------------------------------
    # GtkColorChooser
    # ------------------------------------------------------------------------

    def gtk_color_chooser_get_rgba(self, chooser, color):
        color.red, color.green, color.blue, color.alpha = self.state(chooser)["rgba"]

    def gtk_color_chooser_set_rgba(self, chooser, color):
        self.state(chooser)["rgba"] = (color.red, color.green, color.blue, color.alpha)

    def gtk_color_chooser_add_palette(self, chooser, orientation, per_line, n_colors, colors):
        palette = None
        if colors != ffi.NULL:
            palette = [(c.red, c.green, c.blue, c.alpha) for c in (colors[i] for i in range(n_colors))]
        self.state(chooser).setdefault("palettes", []).append((orientation, per_line, palette))

    # ------------------------------------------------------------------------
    # GtkFileChooser and GtkFileFilter
    # ------------------------------------------------------------------------

    def _fail(self, file, error):
        failure = self.fail_with.get(address(file)) if file != ffi.NULL else None
        if failure is None:
            return False
        error[0] = self.make_error(*failure)
        return True

    def gtk_file_chooser_set_current_folder(self, chooser, file, error):
        if self._fail(file, error):
            return 0
        self.state(chooser)["current_folder"] = file
        return 1

    def gtk_file_chooser_get_current_folder(self, chooser):
        return self.state(chooser).get("current_folder", ffi.NULL)

    def gtk_file_chooser_set_file(self, chooser, file, error):
        if self._fail(file, error):
            return 0
        self.state(chooser)["file"] = file
        return 1

    def gtk_file_chooser_get_file(self, chooser):
        return self.state(chooser).get("file", ffi.NULL)

    def gtk_file_chooser_get_files(self, chooser):
        file = self.state(chooser).get("file")
        return self.new_list_model([file] if file is not None and file != ffi.NULL else [])

    def gtk_file_chooser_get_current_name(self, chooser):
        return self.owned(self.state(chooser).get("current_name"))

    def gtk_file_chooser_set_current_name(self, chooser, name):
        self.state(chooser)["current_name"] = text_of(name)

    def gtk_file_chooser_add_filter(self, chooser, file_filter):
        self.state(chooser).setdefault("filters", []).append(file_filter)

    def gtk_file_chooser_remove_filter(self, chooser, file_filter):
        filters = self.state(chooser).setdefault("filters", [])
        filters[:] = [f for f in filters if address(f) != address(file_filter)]

    def gtk_file_chooser_get_filter(self, chooser):
        return self.state(chooser).get("filter", ffi.NULL)

    def gtk_file_chooser_set_filter(self, chooser, file_filter):
        self.state(chooser)["filter"] = file_filter

    def gtk_file_chooser_get_filters(self, chooser):
        return self.new_list_model(self.state(chooser).get("filters", []))

    def gtk_file_chooser_add_shortcut_folder(self, chooser, folder, error):
        if self._fail(folder, error):
            return 0
        self.state(chooser).setdefault("shortcuts", []).append(folder)
        return 1

    def gtk_file_chooser_remove_shortcut_folder(self, chooser, folder, error):
        shortcuts = self.state(chooser).setdefault("shortcuts", [])
        remaining = [f for f in shortcuts if address(f) != address(folder)]
        if len(remaining) == len(shortcuts):
            error[0] = self.make_error("gtk-file-chooser-error-quark", 0,
                                       "Folder is not in the list of shortcuts")
            return 0
        shortcuts[:] = remaining
        return 1

    def gtk_file_chooser_get_shortcut_folders(self, chooser):
        return self.new_list_model(self.state(chooser).get("shortcuts", []))

    def gtk_file_chooser_add_choice(self, chooser, choice_id, label, options, option_labels):
        def strings(array):
            if array == ffi.NULL:
                return None
            result = []
            i = 0
            while array[i] != ffi.NULL:
                result.append(text_of(array[i]))
                i += 1
            return result
        self.state(chooser).setdefault("choices", {})[text_of(choice_id)] = {
            "label": text_of(label),
            "options": strings(options),
            "labels": strings(option_labels),
            "selected": None,
        }

    def gtk_file_chooser_remove_choice(self, chooser, choice_id):
        self.state(chooser).get("choices", {}).pop(text_of(choice_id), None)

    def gtk_file_chooser_get_choice(self, chooser, choice_id):
        choice = self.state(chooser).get("choices", {}).get(text_of(choice_id))
        return self.borrowed(choice["selected"] if choice else None)

    def gtk_file_chooser_set_choice(self, chooser, choice_id, option):
        choice = self.state(chooser).get("choices", {}).get(text_of(choice_id))
        if choice is not None:
            choice["selected"] = text_of(option)

    def gtk_file_filter_new(self):
        return self.new_object("GtkFileFilter", rules=[])

    def gtk_file_filter_get_name(self, file_filter):
        return self.borrowed(self.state(file_filter).get("name"))

    def gtk_file_filter_set_name(self, file_filter, name):
        self.state(file_filter)["name"] = None if name == ffi.NULL else text_of(name)

    def gtk_file_filter_add_pattern(self, file_filter, pattern):
        self.state(file_filter)["rules"].append(("pattern", text_of(pattern)))

    def gtk_file_filter_add_mime_type(self, file_filter, mime_type):
        self.state(file_filter)["rules"].append(("mime", text_of(mime_type)))

    def gtk_file_filter_add_suffix(self, file_filter, suffix):
        self.state(file_filter)["rules"].append(("suffix", text_of(suffix)))

    # ------------------------------------------------------------------------
    # GtkFontChooser
    # ------------------------------------------------------------------------

    def gtk_font_chooser_get_font(self, chooser):
        return self.owned(self.state(chooser).get("font"))

    def gtk_font_chooser_set_font(self, chooser, font_name):
        self.state(chooser)["font"] = text_of(font_name)

    def gtk_font_chooser_get_font_desc(self, chooser):
        font = self.state(chooser).get("font")
        if font is None:
            return ffi.NULL
        return self.pango_font_description_from_string(font.encode('utf-8'))

    def gtk_font_chooser_set_font_desc(self, chooser, desc):
        self.state(chooser)["font"] = self.state(desc)["text"]

    def gtk_font_chooser_get_font_family(self, chooser):
        return self.state(chooser).get("family", ffi.NULL)

    def gtk_font_chooser_get_font_face(self, chooser):
        return self.state(chooser).get("face", ffi.NULL)

    def gtk_font_chooser_get_font_map(self, chooser):
        return self.state(chooser).get("font_map", ffi.NULL)

    def gtk_font_chooser_get_font_features(self, chooser):
        return self.owned(self.state(chooser).get("features", ""))

    def gtk_font_chooser_get_language(self, chooser):
        return self.owned(self.state(chooser).get("language", ""))

    def gtk_font_chooser_set_language(self, chooser, language):
        self.state(chooser)["language"] = text_of(language)

    def gtk_font_chooser_get_preview_text(self, chooser):
        return self.owned(self.state(chooser).get("preview", ""))

    def gtk_font_chooser_set_preview_text(self, chooser, text):
        self.state(chooser)["preview"] = text_of(text)

    def gtk_font_chooser_set_filter_func(self, chooser, func, data, destroy):
        state = self.state(chooser)
        previous = state.pop("filter", None)
        if previous is not None and previous["destroy"]:
            ffi.cast("GDestroyNotify", previous["destroy"])(ffi.cast("void *", previous["data"]))
        if func != ffi.NULL:
            state["filter"] = {"func": address(func), "data": address(data),
                               "destroy": address(destroy)}

    def run_font_filter(self, chooser, family, face):
        font_filter = self.state(chooser)["filter"]
        fn = ffi.cast("GtkFontFilterFunc", font_filter["func"])
        return fn(ffi.cast("PangoFontFamily *", family), ffi.cast("PangoFontFace *", face),
                  ffi.cast("void *", font_filter["data"]))

    # ------------------------------------------------------------------------
    # GtkSelectionModel and GtkBitset
    # ------------------------------------------------------------------------

    def _new_selection(self, type_name, model, mode):
        items = self.state(model)["items"]
        selected = {0} if mode == "single" and items else set()
        return self.new_object(type_name, items=items, mode=mode, selected=selected)

    def gtk_no_selection_new(self, model):
        return self._new_selection("GtkNoSelection", model, "none")

    def gtk_single_selection_new(self, model):
        return self._new_selection("GtkSingleSelection", model, "single")

    def gtk_multi_selection_new(self, model):
        return self._new_selection("GtkMultiSelection", model, "multiple")

    def _update_selection(self, model, modes, change):
        """Apply change to the selected set and emit selection-changed"""
        state = self.state(model)
        if state["mode"] not in modes:
            return 0
        before = set(state["selected"])
        change(state["selected"])
        changed = before ^ state["selected"]
        if changed:
            first = min(changed)
            self.emit(model, "selection-changed", first, max(changed) - first + 1)
        return 1

    def gtk_selection_model_is_selected(self, model, position):
        return 1 if position in self.state(model)["selected"] else 0

    def gtk_selection_model_get_selection(self, model):
        return self._bitset(self.state(model)["selected"])

    def gtk_selection_model_get_selection_in_range(self, model, position, n_items):
        # positions outside the range are undefined; hand back all of them
        return self._bitset(self.state(model)["selected"])

    def gtk_selection_model_select_item(self, model, position, unselect_rest):
        state = self.state(model)

        def change(selected):
            if state["mode"] == "single" or unselect_rest:
                selected.clear()
            selected.add(position)
        return self._update_selection(model, ("single", "multiple"), change)

    def gtk_selection_model_unselect_item(self, model, position):
        return self._update_selection(model, ("multiple",),
                                      lambda selected: selected.discard(position))

    def gtk_selection_model_select_range(self, model, position, n_items, unselect_rest):
        def change(selected):
            if unselect_rest:
                selected.clear()
            selected.update(range(position, position + n_items))
        return self._update_selection(model, ("multiple",), change)

    def gtk_selection_model_unselect_range(self, model, position, n_items):
        return self._update_selection(
            model, ("multiple",),
            lambda selected: selected.difference_update(range(position, position + n_items)))

    def gtk_selection_model_select_all(self, model):
        count = len(self.state(model)["items"])
        return self._update_selection(model, ("multiple",),
                                      lambda selected: selected.update(range(count)))

    def gtk_selection_model_unselect_all(self, model):
        return self._update_selection(model, ("multiple",), lambda selected: selected.clear())

    def gtk_selection_model_set_selection(self, model, selected, mask):
        wanted = self.state(selected)["values"]
        updated = self.state(mask)["values"]

        def change(current):
            current.difference_update(updated - wanted)
            current.update(updated & wanted)
        return self._update_selection(model, ("multiple",), change)

    def gtk_selection_model_selection_changed(self, model, position, n_items):
        self.emit(model, "selection-changed", position, n_items)

    def _bitset(self, values):
        return self.new_object("GtkBitset", values=set(values))

    def gtk_bitset_new_empty(self):
        return self._bitset(())

    def gtk_bitset_add(self, bitset, value):
        self.state(bitset)["values"].add(value)

    def gtk_bitset_contains(self, bitset, value):
        return 1 if value in self.state(bitset)["values"] else 0

    def gtk_bitset_get_size(self, bitset):
        return len(self.state(bitset)["values"])

    def gtk_bitset_get_nth(self, bitset, nth):
        return sorted(self.state(bitset)["values"])[nth]

    def gtk_bitset_unref(self, bitset):
        self.freed.append(address(bitset))


@pytest.fixture
def fake_lib(monkeypatch):
    """Install a FakeLib as the loaded GTK library"""
    lib = FakeLib()
    monkeypatch.setattr(ffi_module, "_gtk_lib", lib)
    yield lib
    registry.clear()
    font_chooser._filters.clear()
