"""Key identifier to user intent mapping."""

from __future__ import annotations

from enum import Enum

from .constants import (
    KEYCODE_DOWN,
    KEYCODE_ENTER,
    KEYCODE_ESC,
    KEYCODE_SPACE,
    KEYCODE_TAB,
    KEYCODE_UP,
)


class Intent(str, Enum):
    MOVE_NEXT = "move_next"
    MOVE_PREVIOUS = "move_previous"
    DISMISS = "dismiss"
    CONFIRM_OR_OPEN = "confirm_or_open"
    CLOSE_ON_LEAVE_FOCUS = "close_on_leave_focus"


# Textual key names, DOM KeyboardEvent.key names and legacy key codes.
_KEY_INTENTS: dict[str | int, Intent] = {
    "down": Intent.MOVE_NEXT,
    "ArrowDown": Intent.MOVE_NEXT,
    KEYCODE_DOWN: Intent.MOVE_NEXT,
    "up": Intent.MOVE_PREVIOUS,
    "ArrowUp": Intent.MOVE_PREVIOUS,
    KEYCODE_UP: Intent.MOVE_PREVIOUS,
    "escape": Intent.DISMISS,
    "Escape": Intent.DISMISS,
    "Esc": Intent.DISMISS,
    KEYCODE_ESC: Intent.DISMISS,
    "space": Intent.CONFIRM_OR_OPEN,
    " ": Intent.CONFIRM_OR_OPEN,
    "Spacebar": Intent.CONFIRM_OR_OPEN,
    KEYCODE_SPACE: Intent.CONFIRM_OR_OPEN,
    "enter": Intent.CONFIRM_OR_OPEN,
    "Enter": Intent.CONFIRM_OR_OPEN,
    KEYCODE_ENTER: Intent.CONFIRM_OR_OPEN,
    "tab": Intent.CLOSE_ON_LEAVE_FOCUS,
    "Tab": Intent.CLOSE_ON_LEAVE_FOCUS,
    KEYCODE_TAB: Intent.CLOSE_ON_LEAVE_FOCUS,
}


def intent_for_key(key: str | int) -> Intent | None:
    """Return the intent bound to ``key``, or None for unrecognized keys."""
    # bool is an int subclass; True must not alias a key code.
    if isinstance(key, bool):
        return None
    return _KEY_INTENTS.get(key)


def suppresses_default(intent: Intent | None) -> bool:
    """Whether the view should cancel the key's default action.

    Tab only closes the list; focus still has to move on.
    """
    return intent is not None and intent is not Intent.CLOSE_ON_LEAVE_FOCUS
