"""Select widget constants."""

DEFAULT_PLACEHOLDER_TEXT = "Please choose..."
# U+25BE, the small down-pointing triangle.
DEFAULT_INDICATOR_MARKUP = "▾"

LIST_ID_PREFIX = "a11y-select"
OPTION_ID_PREFIX = "a11y-select-option"

# Legacy KeyboardEvent.keyCode values.
KEYCODE_TAB = 9
KEYCODE_ENTER = 13
KEYCODE_ESC = 27
KEYCODE_SPACE = 32
KEYCODE_UP = 38
KEYCODE_DOWN = 40

ALLOWED_SELECT_KEYS = {"label", "labelled_by", "placeholder_text", "indicator_markup", "initial_value"}
ALLOWED_OPTION_KEYS = {"value", "label", "disabled", "id", "class"}

SAMPLE_LABEL = "Fruit"
SAMPLE_OPTIONS = (
    {"value": "apple", "label": "Apple"},
    {"value": "banana", "label": "Banana"},
    {"value": "cherry", "label": "Cherry", "disabled": True},
    {"value": "damson", "label": "Damson"},
    {"value": "elderberry", "label": "Elderberry"},
)
