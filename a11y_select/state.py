"""State containers for the select widget."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .constants import DEFAULT_INDICATOR_MARKUP, DEFAULT_PLACEHOLDER_TEXT


def _ignore_change(_value: str) -> None:
    pass


@dataclass(frozen=True)
class OptionDefinition:
    """An option as supplied by the host."""

    value: str
    label: str = ""
    disabled: bool = False
    option_id: str | None = None
    css_class: str = ""


@dataclass(frozen=True)
class IndexedOption:
    """An option with its position in the registry it was built into."""

    index: int
    value: str
    label: str = ""
    disabled: bool = False
    option_id: str | None = None
    css_class: str = ""

    @property
    def display_label(self) -> str:
        return self.label or self.value


@dataclass(frozen=True)
class SelectState:
    """Open flag plus the committed selection and the keyboard highlight.

    The highlight only means something while ``open`` is true.
    """

    open: bool = False
    selected_index: int | None = None
    highlighted_index: int | None = None


@dataclass(frozen=True)
class SelectConfig:
    """Host configuration. Read-only for the controller."""

    label: str | None = None
    labelled_by: str | None = None
    placeholder_text: str = DEFAULT_PLACEHOLDER_TEXT
    indicator_markup: str = DEFAULT_INDICATOR_MARKUP
    initial_value: str | None = None
    on_change: Callable[[str], None] = _ignore_change


@dataclass(frozen=True)
class Transition:
    """Result of one state machine step."""

    state: SelectState
    changed_value: str | None = None
