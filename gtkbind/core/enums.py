"""
Sequential enum mirrors for GTK, GDK and Pango
Values match the GTK 4.8 and Pango 1.50 headers
"""

from .codec import NativeEnum

# ============================================================================
# Layout and Orientation
# ============================================================================

class Orientation(NativeEnum):
    """GtkOrientation"""
    HORIZONTAL = 0
    VERTICAL = 1


class SizeRequestMode(NativeEnum):
    """GtkSizeRequestMode"""
    HEIGHT_FOR_WIDTH = 0
    WIDTH_FOR_HEIGHT = 1
    CONSTANT_SIZE = 2


class Justification(NativeEnum):
    """GtkJustification"""
    LEFT = 0
    RIGHT = 1
    CENTER = 2
    FILL = 3


class TextDirection(NativeEnum):
    """GtkTextDirection"""
    NONE = 0
    LTR = 1
    RTL = 2


class TextWindowType(NativeEnum):
    """GtkTextWindowType (starts at 1)"""
    WIDGET = 1
    TEXT = 2
    LEFT = 3
    RIGHT = 4
    TOP = 5
    BOTTOM = 6


class IconSize(NativeEnum):
    """GtkIconSize"""
    INHERIT = 0
    NORMAL = 1
    LARGE = 2


class CornerType(NativeEnum):
    """GtkCornerType"""
    TOP_LEFT = 0
    BOTTOM_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_RIGHT = 3


class BorderStyle(NativeEnum):
    """GtkBorderStyle"""
    NONE = 0
    HIDDEN = 1
    SOLID = 2
    INSET = 3
    OUTSET = 4
    DOTTED = 5
    DASHED = 6
    DOUBLE = 7
    GROOVE = 8
    RIDGE = 9


# ============================================================================
# Scrolling and Selection
# ============================================================================

class PolicyType(NativeEnum):
    """GtkPolicyType"""
    ALWAYS = 0
    AUTOMATIC = 1
    NEVER = 2
    EXTERNAL = 3


class ScrollType(NativeEnum):
    """GtkScrollType"""
    NONE = 0
    JUMP = 1
    STEP_BACKWARD = 2
    STEP_FORWARD = 3
    PAGE_BACKWARD = 4
    PAGE_FORWARD = 5
    STEP_UP = 6
    STEP_DOWN = 7
    PAGE_UP = 8
    PAGE_DOWN = 9
    STEP_LEFT = 10
    STEP_RIGHT = 11
    PAGE_LEFT = 12
    PAGE_RIGHT = 13
    START = 14
    END = 15


class ScrollablePolicy(NativeEnum):
    """GtkScrollablePolicy"""
    MINIMUM = 0
    NATURAL = 1


class SelectionMode(NativeEnum):
    """GtkSelectionMode"""
    NONE = 0
    SINGLE = 1
    BROWSE = 2
    MULTIPLE = 3


class SpinType(NativeEnum):
    """GtkSpinType"""
    STEP_FORWARD = 0
    STEP_BACKWARD = 1
    PAGE_FORWARD = 2
    PAGE_BACKWARD = 3
    HOME = 4
    END = 5
    USER_DEFINED = 6


# ============================================================================
# Text Editing
# ============================================================================

class DeleteType(NativeEnum):
    """GtkDeleteType"""
    CHARS = 0
    WORD_ENDS = 1
    WORDS = 2
    DISPLAY_LINES = 3
    DISPLAY_LINE_ENDS = 4
    PARAGRAPH_ENDS = 5
    PARAGRAPHS = 6
    WHITESPACE = 7


class MovementStep(NativeEnum):
    """GtkMovementStep"""
    LOGICAL_POSITIONS = 0
    VISUAL_POSITIONS = 1
    WORDS = 2
    DISPLAY_LINES = 3
    DISPLAY_LINE_ENDS = 4
    PARAGRAPHS = 5
    PARAGRAPH_ENDS = 6
    PAGES = 7
    BUFFER_ENDS = 8
    HORIZONTAL_PAGES = 9


class EditableProperties(NativeEnum):
    """GtkEditableProperties, used by delegating editables"""
    PROP_TEXT = 0
    PROP_CURSOR_POSITION = 1
    PROP_SELECTION_BOUND = 2
    PROP_EDITABLE = 3
    PROP_WIDTH_CHARS = 4
    PROP_MAX_WIDTH_CHARS = 5
    PROP_XALIGN = 6
    PROP_ENABLE_UNDO = 7
    NUM_PROPERTIES = 8


# ============================================================================
# Transitions
# ============================================================================

class StackTransitionType(NativeEnum):
    """GtkStackTransitionType"""
    NONE = 0
    CROSSFADE = 1
    SLIDE_RIGHT = 2
    SLIDE_LEFT = 3
    SLIDE_UP = 4
    SLIDE_DOWN = 5
    SLIDE_LEFT_RIGHT = 6
    SLIDE_UP_DOWN = 7
    OVER_UP = 8
    OVER_DOWN = 9
    OVER_LEFT = 10
    OVER_RIGHT = 11
    UNDER_UP = 12
    UNDER_DOWN = 13
    UNDER_LEFT = 14
    UNDER_RIGHT = 15
    OVER_UP_DOWN = 16
    OVER_DOWN_UP = 17
    OVER_LEFT_RIGHT = 18
    OVER_RIGHT_LEFT = 19
    ROTATE_LEFT = 20
    ROTATE_RIGHT = 21
    ROTATE_LEFT_RIGHT = 22


class RevealerTransitionType(NativeEnum):
    """GtkRevealerTransitionType"""
    NONE = 0
    CROSSFADE = 1
    SLIDE_RIGHT = 2
    SLIDE_LEFT = 3
    SLIDE_UP = 4
    SLIDE_DOWN = 5
    SWING_RIGHT = 6
    SWING_LEFT = 7
    SWING_UP = 8
    SWING_DOWN = 9


# ============================================================================
# Dialogs and Choosers
# ============================================================================

class ResponseType(NativeEnum):
    """GtkResponseType (negative values; positive ids are application defined)"""
    NONE = -1
    REJECT = -2
    ACCEPT = -3
    DELETE_EVENT = -4
    OK = -5
    CANCEL = -6
    CLOSE = -7
    YES = -8
    NO = -9
    APPLY = -10
    HELP = -11


class FileChooserAction(NativeEnum):
    """GtkFileChooserAction"""
    OPEN = 0
    SAVE = 1
    SELECT_FOLDER = 2


class ButtonsType(NativeEnum):
    """GtkButtonsType"""
    NONE = 0
    OK = 1
    CLOSE = 2
    CANCEL = 3
    YES_NO = 4
    OK_CANCEL = 5


class AssistantPageType(NativeEnum):
    """GtkAssistantPageType"""
    CONTENT = 0
    INTRO = 1
    CONFIRM = 2
    SUMMARY = 3
    PROGRESS = 4
    CUSTOM = 5


class License(NativeEnum):
    """GtkLicense, as shown by GtkAboutDialog"""
    UNKNOWN = 0
    CUSTOM = 1
    GPL_2_0 = 2
    GPL_3_0 = 3
    LGPL_2_1 = 4
    LGPL_3_0 = 5
    BSD = 6
    MIT_X11 = 7
    ARTISTIC = 8
    GPL_2_0_ONLY = 9
    GPL_3_0_ONLY = 10
    LGPL_2_1_ONLY = 11
    LGPL_3_0_ONLY = 12
    AGPL_3_0 = 13
    AGPL_3_0_ONLY = 14
    BSD_3 = 15
    APACHE_2_0 = 16
    MPL_2_0 = 17


# ============================================================================
# Constraints
# ============================================================================

class ConstraintAttribute(NativeEnum):
    """GtkConstraintAttribute"""
    NONE = 0
    LEFT = 1
    RIGHT = 2
    TOP = 3
    BOTTOM = 4
    START = 5
    END = 6
    WIDTH = 7
    HEIGHT = 8
    CENTER_X = 9
    CENTER_Y = 10
    BASELINE = 11


class ConstraintRelation(NativeEnum):
    """GtkConstraintRelation"""
    LE = -1
    EQ = 0
    GE = 1


class ConstraintStrength(NativeEnum):
    """GtkConstraintStrength"""
    REQUIRED = 1001001000
    STRONG = 1000000000
    MEDIUM = 1000
    WEAK = 1


# ============================================================================
# Accessibility
# ============================================================================

class AccessibleProperty(NativeEnum):
    """GtkAccessibleProperty"""
    AUTOCOMPLETE = 0
    DESCRIPTION = 1
    HAS_POPUP = 2
    KEY_SHORTCUTS = 3
    LABEL = 4
    LEVEL = 5
    MODAL = 6
    MULTI_LINE = 7
    MULTI_SELECTABLE = 8
    ORIENTATION = 9
    PLACEHOLDER = 10
    READ_ONLY = 11
    REQUIRED = 12
    ROLE_DESCRIPTION = 13
    SORT = 14
    VALUE_MAX = 15
    VALUE_MIN = 16
    VALUE_NOW = 17
    VALUE_TEXT = 18


class AccessibleRelation(NativeEnum):
    """GtkAccessibleRelation"""
    ACTIVE_DESCENDANT = 0
    COL_COUNT = 1
    COL_INDEX = 2
    COL_INDEX_TEXT = 3
    COL_SPAN = 4
    CONTROLS = 5
    DESCRIBED_BY = 6
    DETAILS = 7
    ERROR_MESSAGE = 8
    FLOW_TO = 9
    LABELLED_BY = 10
    OWNS = 11
    POS_IN_SET = 12
    ROW_COUNT = 13
    ROW_INDEX = 14
    ROW_INDEX_TEXT = 15
    ROW_SPAN = 16
    SET_SIZE = 17


# ============================================================================
# Lists, Trees and Filters
# ============================================================================

class FilterChange(NativeEnum):
    """GtkFilterChange"""
    DIFFERENT = 0
    LESS_STRICT = 1
    MORE_STRICT = 2


class IconViewDropPosition(NativeEnum):
    """GtkIconViewDropPosition"""
    NO_DROP = 0
    DROP_INTO = 1
    DROP_LEFT = 2
    DROP_RIGHT = 3
    DROP_ABOVE = 4
    DROP_BELOW = 5


class TreeViewDropPosition(NativeEnum):
    """GtkTreeViewDropPosition"""
    BEFORE = 0
    AFTER = 1
    INTO_OR_BEFORE = 2
    INTO_OR_AFTER = 3


# ============================================================================
# Printing
# ============================================================================

class NumberUpLayout(NativeEnum):
    """GtkNumberUpLayout"""
    LEFT_TO_RIGHT_TOP_TO_BOTTOM = 0
    LEFT_TO_RIGHT_BOTTOM_TO_TOP = 1
    RIGHT_TO_LEFT_TOP_TO_BOTTOM = 2
    RIGHT_TO_LEFT_BOTTOM_TO_TOP = 3
    TOP_TO_BOTTOM_LEFT_TO_RIGHT = 4
    TOP_TO_BOTTOM_RIGHT_TO_LEFT = 5
    BOTTOM_TO_TOP_LEFT_TO_RIGHT = 6
    BOTTOM_TO_TOP_RIGHT_TO_LEFT = 7


class PrintStatus(NativeEnum):
    """GtkPrintStatus"""
    INITIAL = 0
    PREPARING = 1
    GENERATING_DATA = 2
    SENDING_DATA = 3
    PENDING = 4
    PENDING_ISSUE = 5
    PRINTING = 6
    FINISHED = 7
    FINISHED_ABORTED = 8


# ============================================================================
# Events and Shortcuts
# ============================================================================

class PropagationLimit(NativeEnum):
    """GtkPropagationLimit"""
    NONE = 0
    SAME_NATIVE = 1


class ShortcutType(NativeEnum):
    """GtkShortcutType"""
    ACCELERATOR = 0
    GESTURE_PINCH = 1
    GESTURE_STRETCH = 2
    GESTURE_ROTATE_CLOCKWISE = 3
    GESTURE_ROTATE_COUNTERCLOCKWISE = 4
    GESTURE_TWO_FINGER_SWIPE_LEFT = 5
    GESTURE_TWO_FINGER_SWIPE_RIGHT = 6
    GESTURE = 7
    GESTURE_SWIPE_LEFT = 8
    GESTURE_SWIPE_RIGHT = 9


# ============================================================================
# Pango
# ============================================================================

class PangoTabAlign(NativeEnum):
    """PangoTabAlign"""
    LEFT = 0
    RIGHT = 1
    CENTER = 2
    DECIMAL = 3


class PangoAttrType(NativeEnum):
    """
    PangoAttrType

    Each member also names the PangoAttribute subtype that carries its
    value, available as attr_class.
    """
    INVALID = 0
    LANGUAGE = 1
    FAMILY = 2
    STYLE = 3
    WEIGHT = 4
    VARIANT = 5
    STRETCH = 6
    SIZE = 7
    FONT_DESC = 8
    FOREGROUND = 9
    BACKGROUND = 10
    UNDERLINE = 11
    STRIKETHROUGH = 12
    RISE = 13
    SHAPE = 14
    SCALE = 15
    FALLBACK = 16
    LETTER_SPACING = 17
    UNDERLINE_COLOR = 18
    STRIKETHROUGH_COLOR = 19
    ABSOLUTE_SIZE = 20
    GRAVITY = 21
    GRAVITY_HINT = 22
    FONT_FEATURES = 23
    FOREGROUND_ALPHA = 24
    BACKGROUND_ALPHA = 25
    ALLOW_BREAKS = 26
    SHOW = 27
    INSERT_HYPHENS = 28
    OVERLINE = 29
    OVERLINE_COLOR = 30
    LINE_HEIGHT = 31
    ABSOLUTE_LINE_HEIGHT = 32
    TEXT_TRANSFORM = 33
    WORD = 34
    SENTENCE = 35
    BASELINE_SHIFT = 36
    FONT_SCALE = 37

    @property
    def attr_class(self):
        """Name of the PangoAttribute struct holding this attribute's value"""
        return _PANGO_ATTR_CLASSES.get(self, "PangoAttrInt")


_PANGO_ATTR_CLASSES = {
    PangoAttrType.INVALID: None,
    PangoAttrType.LANGUAGE: "PangoAttrLanguage",
    PangoAttrType.FAMILY: "PangoAttrString",
    PangoAttrType.SIZE: "PangoAttrSize",
    PangoAttrType.ABSOLUTE_SIZE: "PangoAttrSize",
    PangoAttrType.BASELINE_SHIFT: "PangoAttrSize",
    PangoAttrType.FONT_DESC: "PangoAttrFontDesc",
    PangoAttrType.FOREGROUND: "PangoAttrColor",
    PangoAttrType.BACKGROUND: "PangoAttrColor",
    PangoAttrType.UNDERLINE_COLOR: "PangoAttrColor",
    PangoAttrType.STRIKETHROUGH_COLOR: "PangoAttrColor",
    PangoAttrType.OVERLINE_COLOR: "PangoAttrColor",
    PangoAttrType.SHAPE: "PangoAttrShape",
    PangoAttrType.SCALE: "PangoAttrFloat",
    PangoAttrType.LINE_HEIGHT: "PangoAttrFloat",
    PangoAttrType.FONT_FEATURES: "PangoAttrFontFeatures",
}
