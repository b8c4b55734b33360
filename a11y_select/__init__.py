"""Accessible single-select dropdown: headless state machine plus a Textual view."""

from .controller import SelectionController
from .keys import Intent, intent_for_key, suppresses_default
from .pointer import PressWatcher
from .registry import OptionRegistry
from .state import IndexedOption, OptionDefinition, SelectConfig, SelectState, Transition
from .validate import Diagnostic, OptionFileError, validate_config

__all__ = [
    "Diagnostic",
    "IndexedOption",
    "Intent",
    "OptionDefinition",
    "OptionFileError",
    "OptionRegistry",
    "PressWatcher",
    "SelectConfig",
    "SelectState",
    "SelectionController",
    "Transition",
    "intent_for_key",
    "suppresses_default",
    "validate_config",
]
