"""ARIA attributes derived from select state.

Attributes that only hold when true (``aria-expanded``, ``aria-checked``,
``aria-disabled``) are omitted rather than set to "false".
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

from .constants import LIST_ID_PREFIX, OPTION_ID_PREFIX
from .state import IndexedOption, SelectConfig, SelectState

if TYPE_CHECKING:
    from .controller import SelectionController


_list_ids = itertools.count(1)


def new_list_id() -> str:
    """Return a list id unique within this process."""
    return f"{LIST_ID_PREFIX}-{next(_list_ids)}"


def option_dom_id(option: IndexedOption) -> str:
    return option.option_id or f"{OPTION_ID_PREFIX}-{option.index}"


def trigger_attributes(
    state: SelectState, list_id: str, config: SelectConfig | None = None
) -> dict[str, str]:
    attrs = {
        "role": "button",
        "aria-haspopup": "true",
        "aria-controls": list_id,
    }
    if state.open:
        attrs["aria-expanded"] = "true"
    if config is not None:
        if config.label:
            attrs["aria-label"] = config.label
        if config.labelled_by:
            attrs["aria-labelledby"] = config.labelled_by
    return attrs


def list_attributes(list_id: str) -> dict[str, str]:
    return {"id": list_id, "role": "menu"}


def option_attributes(option: IndexedOption, state: SelectState) -> dict[str, str]:
    attrs = {
        "id": option_dom_id(option),
        "role": "menuitemradio",
        "tabindex": "0" if state.highlighted_index == option.index else "-1",
        "aria-label": option.display_label,
    }
    if state.selected_index == option.index:
        attrs["aria-checked"] = "true"
    if option.disabled:
        attrs["aria-disabled"] = "true"
    return attrs


def trigger_text(controller: SelectionController) -> str:
    """Plain text shown on the trigger: the selection or the placeholder."""
    option = controller.selected_option
    if option is None:
        return controller.config.placeholder_text
    return option.display_label
