"""
GTK 4 FFI bindings using cffi
Provides low-level access to libgtk-4 and the GLib, GIO, GDK and Pango
symbols it links against
"""

import ctypes.util
import logging
from pathlib import Path

import cffi

from .config import Settings
from .exceptions import LibraryNotFoundError

logger = logging.getLogger(__name__)

# ============================================================================
# cffi Definitions
# ============================================================================

ffi = cffi.FFI()

# GLib / GObject fundamentals from glib/gtypes.h, glib/gerror.h, gobject/gsignal.h
ffi.cdef("""
// ============================================================================
// Fundamental Types
// ============================================================================
typedef int gint;
typedef unsigned int guint;
typedef gint gboolean;
typedef char gchar;
typedef float gfloat;
typedef double gdouble;
typedef unsigned long gulong;
typedef uint16_t guint16;
typedef uint32_t guint32;
typedef uint64_t guint64;
typedef uint32_t gunichar;
typedef size_t gsize;
typedef void *gpointer;
typedef const void *gconstpointer;
typedef guint32 GQuark;
typedef gsize GType;

typedef struct _GObject GObject;
typedef struct _GClosure GClosure;

typedef struct _GError {
    GQuark domain;
    gint code;
    gchar *message;
} GError;

typedef struct _GValue {
    GType g_type;
    union {
        gint v_int;
        guint v_uint;
        long v_long;
        gulong v_ulong;
        int64_t v_int64;
        uint64_t v_uint64;
        gfloat v_float;
        gdouble v_double;
        gpointer v_pointer;
    } data[2];
} GValue;

// ============================================================================
// Callback Types
// ============================================================================
typedef void (*GCallback)(void);
typedef void (*GClosureNotify)(gpointer data, GClosure *closure);
typedef void (*GWeakNotify)(gpointer data, GObject *where_the_object_was);
typedef void (*GDestroyNotify)(gpointer data);

// ============================================================================
// Memory, Errors and Quarks
// ============================================================================
void g_free(gpointer mem);
void g_error_free(GError *error);
GQuark g_quark_from_string(const gchar *string);
GQuark g_quark_try_string(const gchar *string);
const gchar *g_quark_to_string(GQuark quark);

// ============================================================================
// Signals
// ============================================================================
gulong g_signal_connect_data(gpointer instance, const gchar *detailed_signal,
                             GCallback c_handler, gpointer data,
                             GClosureNotify destroy_data, int connect_flags);
void g_signal_handler_disconnect(gpointer instance, gulong handler_id);
gboolean g_signal_handler_is_connected(gpointer instance, gulong handler_id);
void g_signal_emit_by_name(gpointer instance, const gchar *detailed_signal, ...);

// ============================================================================
// Objects and Properties
// ============================================================================
gpointer g_object_ref(gpointer object);
gpointer g_object_ref_sink(gpointer object);
void g_object_unref(gpointer object);
void g_object_weak_ref(GObject *object, GWeakNotify notify, gpointer data);
void g_object_weak_unref(GObject *object, GWeakNotify notify, gpointer data);
void g_object_get(gpointer object, const gchar *first_property_name, ...);
void g_object_set(gpointer object, const gchar *first_property_name, ...);
void g_object_get_property(GObject *object, const gchar *property_name, GValue *value);
const gchar *g_type_name_from_instance(void *instance);

GValue *g_value_init(GValue *value, GType g_type);
void g_value_unset(GValue *value);
gdouble g_value_get_double(const GValue *value);
""")

# GIO from gio/gfile.h, gio/glistmodel.h
ffi.cdef("""
typedef struct _GFile GFile;
typedef struct _GListModel GListModel;

GFile *g_file_new_for_path(const char *path);
GFile *g_file_new_for_uri(const char *uri);
char *g_file_get_path(GFile *file);
char *g_file_get_uri(GFile *file);
char *g_file_get_parse_name(GFile *file);
gboolean g_file_query_exists(GFile *file, void *cancellable);

guint g_list_model_get_n_items(GListModel *list);
gpointer g_list_model_get_item(GListModel *list, guint position);
""")

# GDK from gdk/gdkrgba.h, gdk/gdkrectangle.h
ffi.cdef("""
typedef struct _GdkRGBA {
    float red;
    float green;
    float blue;
    float alpha;
} GdkRGBA;

typedef struct _GdkRectangle {
    int x;
    int y;
    int width;
    int height;
} GdkRectangle;

gboolean gdk_rgba_parse(GdkRGBA *rgba, const char *spec);
char *gdk_rgba_to_string(const GdkRGBA *rgba);
gboolean gdk_rgba_equal(gconstpointer p1, gconstpointer p2);

gboolean gdk_rectangle_equal(const GdkRectangle *rect1, const GdkRectangle *rect2);
gboolean gdk_rectangle_intersect(const GdkRectangle *src1, const GdkRectangle *src2,
                                 GdkRectangle *dest);
void gdk_rectangle_union(const GdkRectangle *src1, const GdkRectangle *src2,
                         GdkRectangle *dest);
gboolean gdk_rectangle_contains_point(const GdkRectangle *rect, int x, int y);
""")

# Pango from pango/pango-tabs.h, pango/pango-font.h
ffi.cdef("""
typedef struct _PangoTabArray PangoTabArray;
typedef struct _PangoFontDescription PangoFontDescription;
typedef struct _PangoFontFamily PangoFontFamily;
typedef struct _PangoFontFace PangoFontFace;
typedef struct _PangoFontMap PangoFontMap;

PangoTabArray *pango_tab_array_new(gint initial_size, gboolean positions_in_pixels);
PangoTabArray *pango_tab_array_copy(PangoTabArray *src);
void pango_tab_array_free(PangoTabArray *tab_array);
PangoTabArray *pango_tab_array_from_string(const char *text);
char *pango_tab_array_to_string(PangoTabArray *tab_array);
gint pango_tab_array_get_size(PangoTabArray *tab_array);
void pango_tab_array_resize(PangoTabArray *tab_array, gint new_size);
void pango_tab_array_get_tab(PangoTabArray *tab_array, gint tab_index,
                             int *alignment, gint *location);
void pango_tab_array_set_tab(PangoTabArray *tab_array, gint tab_index,
                             int alignment, gint location);
gunichar pango_tab_array_get_decimal_point(PangoTabArray *tab_array, int tab_index);
void pango_tab_array_set_decimal_point(PangoTabArray *tab_array, int tab_index,
                                       gunichar decimal_point);
gboolean pango_tab_array_get_positions_in_pixels(PangoTabArray *tab_array);
void pango_tab_array_set_positions_in_pixels(PangoTabArray *tab_array,
                                             gboolean positions_in_pixels);
void pango_tab_array_sort(PangoTabArray *tab_array);

PangoFontDescription *pango_font_description_from_string(const char *str);
PangoFontDescription *pango_font_description_copy(const PangoFontDescription *desc);
char *pango_font_description_to_string(const PangoFontDescription *desc);
const char *pango_font_description_get_family(const PangoFontDescription *desc);
gint pango_font_description_get_size(const PangoFontDescription *desc);
void pango_font_description_free(PangoFontDescription *desc);

const char *pango_font_family_get_name(PangoFontFamily *family);
const char *pango_font_face_get_face_name(PangoFontFace *face);
""")

# Pango from pango/pango-attributes.h, pango/pango-color.h
ffi.cdef("""
typedef struct _PangoColor {
    guint16 red;
    guint16 green;
    guint16 blue;
} PangoColor;

typedef struct _PangoAttrClass {
    int type;
    void *copy;
    void *destroy;
    void *equal;
} PangoAttrClass;

typedef struct _PangoAttribute {
    const PangoAttrClass *klass;
    guint start_index;
    guint end_index;
} PangoAttribute;

typedef struct _PangoAttrInt {
    PangoAttribute attr;
    int value;
} PangoAttrInt;

typedef struct _PangoAttrFloat {
    PangoAttribute attr;
    double value;
} PangoAttrFloat;

typedef struct _PangoAttrString {
    PangoAttribute attr;
    char *value;
} PangoAttrString;

typedef struct _PangoAttrColor {
    PangoAttribute attr;
    PangoColor color;
} PangoAttrColor;

gboolean pango_color_parse(PangoColor *color, const char *spec);
char *pango_color_to_string(const PangoColor *color);

PangoAttribute *pango_attribute_copy(const PangoAttribute *attr);
void pango_attribute_destroy(PangoAttribute *attr);
gboolean pango_attribute_equal(const PangoAttribute *attr1, const PangoAttribute *attr2);
PangoAttribute *pango_attr_family_new(const char *family);
PangoAttribute *pango_attr_weight_new(int weight);
PangoAttribute *pango_attr_scale_new(double scale_factor);
PangoAttribute *pango_attr_foreground_new(guint16 red, guint16 green, guint16 blue);
PangoAttribute *pango_attr_background_new(guint16 red, guint16 green, guint16 blue);
""")

# GTK from gtk/gtkmain.h, gtk/gtkaccelgroup.h and the interface headers
ffi.cdef("""
typedef struct _GtkWidget GtkWidget;
typedef struct _GtkBox GtkBox;
typedef struct _GtkEntry GtkEntry;
typedef struct _GtkEditable GtkEditable;
typedef struct _GtkOrientable GtkOrientable;
typedef struct _GtkColorChooser GtkColorChooser;
typedef struct _GtkFileChooser GtkFileChooser;
typedef struct _GtkFileFilter GtkFileFilter;
typedef struct _GtkFontChooser GtkFontChooser;
typedef struct _GtkSelectionModel GtkSelectionModel;
typedef struct _GtkBitset GtkBitset;

typedef gboolean (*GtkFontFilterFunc)(const PangoFontFamily *family,
                                      const PangoFontFace *face,
                                      gpointer data);

// ============================================================================
// Initialization and Version
// ============================================================================
void gtk_init(void);
gboolean gtk_init_check(void);
gboolean gtk_is_initialized(void);
void gtk_disable_setlocale(void);
guint gtk_get_major_version(void);
guint gtk_get_minor_version(void);
guint gtk_get_micro_version(void);
guint gtk_get_binary_age(void);
guint gtk_get_interface_age(void);
const char *gtk_check_version(guint required_major, guint required_minor,
                              guint required_micro);
guint gtk_get_debug_flags(void);
void gtk_set_debug_flags(guint flags);

// ============================================================================
// Accelerators
// ============================================================================
gboolean gtk_accelerator_parse(const char *accelerator, guint *accelerator_key,
                               guint *accelerator_mods);
char *gtk_accelerator_name(guint accelerator_key, guint accelerator_mods);
char *gtk_accelerator_get_label(guint accelerator_key, guint accelerator_mods);
gboolean gtk_accelerator_valid(guint keyval, guint modifiers);
guint gtk_accelerator_get_default_mod_mask(void);

// ============================================================================
// Widgets
// ============================================================================
GtkWidget *gtk_entry_new(void);
GtkWidget *gtk_text_new(void);
GtkWidget *gtk_password_entry_new(void);
GtkWidget *gtk_search_entry_new(void);
GtkWidget *gtk_box_new(int orientation, int spacing);
GtkWidget *gtk_color_chooser_widget_new(void);
GtkWidget *gtk_file_chooser_widget_new(int action);
GtkWidget *gtk_font_chooser_widget_new(void);

const char *gtk_widget_get_name(GtkWidget *widget);
void gtk_widget_set_name(GtkWidget *widget, const char *name);
gboolean gtk_widget_get_visible(GtkWidget *widget);
void gtk_widget_set_visible(GtkWidget *widget, gboolean visible);
gboolean gtk_widget_get_sensitive(GtkWidget *widget);
void gtk_widget_set_sensitive(GtkWidget *widget, gboolean sensitive);
guint gtk_widget_get_state_flags(GtkWidget *widget);
void gtk_widget_set_state_flags(GtkWidget *widget, guint flags, gboolean clear);
void gtk_widget_unset_state_flags(GtkWidget *widget, guint flags);
gboolean gtk_widget_grab_focus(GtkWidget *widget);
GtkWidget *gtk_widget_pick(GtkWidget *widget, double x, double y, guint flags);

void gtk_box_append(GtkBox *box, GtkWidget *child);
void gtk_box_remove(GtkBox *box, GtkWidget *child);
int gtk_box_get_spacing(GtkBox *box);
void gtk_box_set_spacing(GtkBox *box, int spacing);

guint gtk_entry_get_input_hints(GtkEntry *entry);
void gtk_entry_set_input_hints(GtkEntry *entry, guint hints);
const char *gtk_entry_get_placeholder_text(GtkEntry *entry);
void gtk_entry_set_placeholder_text(GtkEntry *entry, const char *text);

// ============================================================================
// GtkOrientable
// ============================================================================
int gtk_orientable_get_orientation(GtkOrientable *orientable);
void gtk_orientable_set_orientation(GtkOrientable *orientable, int orientation);

// ============================================================================
// GtkEditable
// ============================================================================
void gtk_editable_delete_selection(GtkEditable *editable);
void gtk_editable_delete_text(GtkEditable *editable, int start_pos, int end_pos);
void gtk_editable_finish_delegate(GtkEditable *editable);
float gtk_editable_get_alignment(GtkEditable *editable);
char *gtk_editable_get_chars(GtkEditable *editable, int start_pos, int end_pos);
GtkEditable *gtk_editable_get_delegate(GtkEditable *editable);
gboolean gtk_editable_get_editable(GtkEditable *editable);
gboolean gtk_editable_get_enable_undo(GtkEditable *editable);
int gtk_editable_get_max_width_chars(GtkEditable *editable);
int gtk_editable_get_position(GtkEditable *editable);
gboolean gtk_editable_get_selection_bounds(GtkEditable *editable,
                                           int *start_pos, int *end_pos);
const char *gtk_editable_get_text(GtkEditable *editable);
int gtk_editable_get_width_chars(GtkEditable *editable);
void gtk_editable_init_delegate(GtkEditable *editable);
void gtk_editable_insert_text(GtkEditable *editable, const char *text,
                              int length, int *position);
void gtk_editable_select_region(GtkEditable *editable, int start_pos, int end_pos);
void gtk_editable_set_alignment(GtkEditable *editable, float xalign);
void gtk_editable_set_editable(GtkEditable *editable, gboolean is_editable);
void gtk_editable_set_enable_undo(GtkEditable *editable, gboolean enable_undo);
void gtk_editable_set_max_width_chars(GtkEditable *editable, int n_chars);
void gtk_editable_set_position(GtkEditable *editable, int position);
void gtk_editable_set_text(GtkEditable *editable, const char *text);
void gtk_editable_set_width_chars(GtkEditable *editable, int n_chars);

// ============================================================================
// GtkColorChooser
// ============================================================================
void gtk_color_chooser_add_palette(GtkColorChooser *chooser, int orientation,
                                   int colors_per_line, int n_colors,
                                   GdkRGBA *colors);
void gtk_color_chooser_get_rgba(GtkColorChooser *chooser, GdkRGBA *color);
void gtk_color_chooser_set_rgba(GtkColorChooser *chooser, const GdkRGBA *color);
gboolean gtk_color_chooser_get_use_alpha(GtkColorChooser *chooser);
void gtk_color_chooser_set_use_alpha(GtkColorChooser *chooser, gboolean use_alpha);

// ============================================================================
// GtkFileChooser and GtkFileFilter
// ============================================================================
void gtk_file_chooser_add_choice(GtkFileChooser *chooser, const char *id,
                                 const char *label, const char **options,
                                 const char **option_labels);
void gtk_file_chooser_remove_choice(GtkFileChooser *chooser, const char *id);
const char *gtk_file_chooser_get_choice(GtkFileChooser *chooser, const char *id);
void gtk_file_chooser_set_choice(GtkFileChooser *chooser, const char *id,
                                 const char *option);
void gtk_file_chooser_add_filter(GtkFileChooser *chooser, GtkFileFilter *filter);
void gtk_file_chooser_remove_filter(GtkFileChooser *chooser, GtkFileFilter *filter);
GtkFileFilter *gtk_file_chooser_get_filter(GtkFileChooser *chooser);
void gtk_file_chooser_set_filter(GtkFileChooser *chooser, GtkFileFilter *filter);
GListModel *gtk_file_chooser_get_filters(GtkFileChooser *chooser);
gboolean gtk_file_chooser_add_shortcut_folder(GtkFileChooser *chooser, GFile *folder,
                                              GError **error);
gboolean gtk_file_chooser_remove_shortcut_folder(GtkFileChooser *chooser, GFile *folder,
                                                 GError **error);
GListModel *gtk_file_chooser_get_shortcut_folders(GtkFileChooser *chooser);
int gtk_file_chooser_get_action(GtkFileChooser *chooser);
void gtk_file_chooser_set_action(GtkFileChooser *chooser, int action);
gboolean gtk_file_chooser_get_create_folders(GtkFileChooser *chooser);
void gtk_file_chooser_set_create_folders(GtkFileChooser *chooser, gboolean create_folders);
gboolean gtk_file_chooser_get_select_multiple(GtkFileChooser *chooser);
void gtk_file_chooser_set_select_multiple(GtkFileChooser *chooser, gboolean select_multiple);
char *gtk_file_chooser_get_current_name(GtkFileChooser *chooser);
void gtk_file_chooser_set_current_name(GtkFileChooser *chooser, const char *name);
GFile *gtk_file_chooser_get_current_folder(GtkFileChooser *chooser);
gboolean gtk_file_chooser_set_current_folder(GtkFileChooser *chooser, GFile *file,
                                             GError **error);
GFile *gtk_file_chooser_get_file(GtkFileChooser *chooser);
gboolean gtk_file_chooser_set_file(GtkFileChooser *chooser, GFile *file, GError **error);
GListModel *gtk_file_chooser_get_files(GtkFileChooser *chooser);

GtkFileFilter *gtk_file_filter_new(void);
const char *gtk_file_filter_get_name(GtkFileFilter *filter);
void gtk_file_filter_set_name(GtkFileFilter *filter, const char *name);
void gtk_file_filter_add_pattern(GtkFileFilter *filter, const char *pattern);
void gtk_file_filter_add_mime_type(GtkFileFilter *filter, const char *mime_type);
void gtk_file_filter_add_suffix(GtkFileFilter *filter, const char *suffix);

// ============================================================================
// GtkFontChooser
// ============================================================================
char *gtk_font_chooser_get_font(GtkFontChooser *fontchooser);
void gtk_font_chooser_set_font(GtkFontChooser *fontchooser, const char *fontname);
PangoFontDescription *gtk_font_chooser_get_font_desc(GtkFontChooser *fontchooser);
void gtk_font_chooser_set_font_desc(GtkFontChooser *fontchooser,
                                    const PangoFontDescription *font_desc);
PangoFontFace *gtk_font_chooser_get_font_face(GtkFontChooser *fontchooser);
PangoFontFamily *gtk_font_chooser_get_font_family(GtkFontChooser *fontchooser);
char *gtk_font_chooser_get_font_features(GtkFontChooser *fontchooser);
PangoFontMap *gtk_font_chooser_get_font_map(GtkFontChooser *fontchooser);
void gtk_font_chooser_set_font_map(GtkFontChooser *fontchooser, PangoFontMap *fontmap);
int gtk_font_chooser_get_font_size(GtkFontChooser *fontchooser);
char *gtk_font_chooser_get_language(GtkFontChooser *fontchooser);
void gtk_font_chooser_set_language(GtkFontChooser *fontchooser, const char *language);
guint gtk_font_chooser_get_level(GtkFontChooser *fontchooser);
void gtk_font_chooser_set_level(GtkFontChooser *fontchooser, guint level);
char *gtk_font_chooser_get_preview_text(GtkFontChooser *fontchooser);
void gtk_font_chooser_set_preview_text(GtkFontChooser *fontchooser, const char *text);
gboolean gtk_font_chooser_get_show_preview_entry(GtkFontChooser *fontchooser);
void gtk_font_chooser_set_show_preview_entry(GtkFontChooser *fontchooser,
                                             gboolean show_preview_entry);
void gtk_font_chooser_set_filter_func(GtkFontChooser *fontchooser,
                                      GtkFontFilterFunc filter,
                                      gpointer user_data,
                                      GDestroyNotify destroy);

// ============================================================================
// GtkSelectionModel and GtkBitset
// ============================================================================
gboolean gtk_selection_model_is_selected(GtkSelectionModel *model, guint position);
GtkBitset *gtk_selection_model_get_selection(GtkSelectionModel *model);
GtkBitset *gtk_selection_model_get_selection_in_range(GtkSelectionModel *model,
                                                      guint position, guint n_items);
gboolean gtk_selection_model_select_item(GtkSelectionModel *model, guint position,
                                         gboolean unselect_rest);
gboolean gtk_selection_model_unselect_item(GtkSelectionModel *model, guint position);
gboolean gtk_selection_model_select_range(GtkSelectionModel *model, guint position,
                                          guint n_items, gboolean unselect_rest);
gboolean gtk_selection_model_unselect_range(GtkSelectionModel *model, guint position,
                                            guint n_items);
gboolean gtk_selection_model_select_all(GtkSelectionModel *model);
gboolean gtk_selection_model_unselect_all(GtkSelectionModel *model);
gboolean gtk_selection_model_set_selection(GtkSelectionModel *model,
                                           GtkBitset *selected, GtkBitset *mask);
void gtk_selection_model_selection_changed(GtkSelectionModel *model, guint position,
                                           guint n_items);

GtkSelectionModel *gtk_no_selection_new(GListModel *model);
GtkSelectionModel *gtk_single_selection_new(GListModel *model);
GtkSelectionModel *gtk_multi_selection_new(GListModel *model);

GtkBitset *gtk_bitset_new_empty(void);
void gtk_bitset_unref(GtkBitset *self);
void gtk_bitset_add(GtkBitset *self, guint value);
gboolean gtk_bitset_contains(const GtkBitset *self, guint value);
guint64 gtk_bitset_get_size(const GtkBitset *self);
guint gtk_bitset_get_nth(const GtkBitset *self, guint nth);
""")

# ============================================================================
# Library Loading
# ============================================================================

def find_library(settings=None):
    """
    Find libgtk-4 in standard installation paths

    Search order:
    1. GTKBIND_LIB_PATH environment variable
    2. GTKBIND_SEARCH_PATHS directories
    3. Common distribution paths for libgtk-4.so.1
    4. ctypes.util.find_library("gtk-4")
    """
    settings = settings or Settings.from_env()
    if settings.lib_path:
        return settings.lib_path

    search_paths = [Path(d) / name
                    for d in settings.search_paths
                    for name in settings.library_names]
    search_paths += [
        Path("/usr/lib/x86_64-linux-gnu/libgtk-4.so.1"),
        Path("/usr/lib/aarch64-linux-gnu/libgtk-4.so.1"),
        Path("/usr/lib64/libgtk-4.so.1"),
        Path("/usr/lib/libgtk-4.so.1"),
        Path("/usr/local/lib/libgtk-4.so.1"),
        Path("/opt/homebrew/lib/libgtk-4.1.dylib"),
        Path("/usr/local/lib/libgtk-4.1.dylib"),
    ]

    for path in search_paths:
        if path.exists():
            return str(path)

    found = ctypes.util.find_library("gtk-4")
    if found:
        return found

    raise LibraryNotFoundError(
        "Could not find libgtk-4. Tried:\n" +
        "\n".join(f"  - {p}" for p in search_paths) +
        "\n\nSet GTKBIND_LIB_PATH environment variable or install GTK 4."
    )


class GtkLib:
    """Singleton wrapper for the loaded GTK library"""
    _instance = None
    _lib = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._load_library()
            cls._instance = instance
        return cls._instance

    def _load_library(self):
        """Load the libgtk-4 shared library"""
        lib_path = find_library()
        try:
            GtkLib._lib = ffi.dlopen(lib_path)
        except OSError as e:
            raise LibraryNotFoundError(f"Failed to load {lib_path}: {e}") from e
        logger.info("Loaded GTK from %s", lib_path)

    @classmethod
    def get_lib(cls):
        """Get the loaded library instance"""
        if cls._lib is None:
            raise LibraryNotFoundError("Library not loaded. Create a GtkLib instance first.")
        return cls._lib


# Lazy-loaded library instance
_gtk_lib = None


def get_lib():
    """Get the GTK library instance (lazy loading)"""
    global _gtk_lib
    if _gtk_lib is None:
        _gtk_lib = GtkLib().get_lib()
    return _gtk_lib


# ============================================================================
# Marshaling Helpers
# ============================================================================

def to_cstr(text):
    """Encode an optional Python string for a const char * parameter"""
    if text is None:
        return ffi.NULL
    return text.encode('utf-8')


def from_cstr(ptr):
    """Decode a borrowed const char * return value; NULL becomes None"""
    if ptr == ffi.NULL:
        return None
    return ffi.string(ptr).decode('utf-8')


def take_cstr(ptr):
    """Decode an owned char * return value and release it with g_free"""
    if ptr == ffi.NULL:
        return None
    try:
        return ffi.string(ptr).decode('utf-8')
    finally:
        get_lib().g_free(ptr)


def to_cstr_array(items):
    """
    Build a NULL-terminated const char ** array

    Returns:
        (array, keepalive) - keepalive must outlive the native call
    """
    if items is None:
        return ffi.NULL, []
    keepalive = [ffi.new("char[]", item.encode('utf-8')) for item in items]
    array = ffi.new("const char *[]", keepalive + [ffi.NULL])
    return array, keepalive


def handle_or_null(wrapper):
    """Native handle of an optional wrapper object"""
    if wrapper is None:
        return ffi.NULL
    return wrapper.handle
