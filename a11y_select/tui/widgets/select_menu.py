"""SelectMenu — keyboard-operable single-select dropdown for Textual.

Rendering only: every decision is made by ``SelectionController``. Raw keys,
clicks and hovers are forwarded to it and the widget redraws from the state
it commits.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterable, Mapping

from rich.markup import escape
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from ...aria import new_list_id, option_attributes, trigger_attributes, trigger_text
from ...controller import SelectionController
from ...pointer import PressWatcher, Release
from ...state import IndexedOption, OptionDefinition, SelectConfig, SelectState


class SelectTrigger(Static):
    """The always-visible button half of the widget."""

    DEFAULT_CSS = """
    SelectTrigger {
        width: 100%;
        height: 3;
        background: #1a2332;
        border: solid #1a3a4a;
        color: #e0e6f0;
        padding: 0 1;
    }
    SelectTrigger:hover {
        border: solid #00ffcc;
    }
    """

    class Pressed(Message):
        pass

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.aria: dict[str, str] = {}

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Pressed())


class MenuOption(Static):
    """One ``menuitemradio`` row of the open list."""

    DEFAULT_CSS = """
    MenuOption {
        width: 100%;
        height: 1;
        padding: 0 1;
        color: #e0e6f0;
    }
    MenuOption.-highlighted {
        background: #0a2a3a;
        color: #00ffcc;
        text-style: bold;
    }
    MenuOption.-disabled {
        color: #555e6e;
        text-style: italic;
    }
    """

    class Hovered(Message):
        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    class Clicked(Message):
        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, option: IndexedOption, **kwargs) -> None:
        extra_classes = kwargs.pop("classes", "")
        merged_classes = "menu-option"
        if option.css_class:
            merged_classes = f"{merged_classes} {option.css_class}"
        if extra_classes:
            merged_classes = f"{merged_classes} {extra_classes}"
        # Option labels are host data, never markup.
        super().__init__("", markup=False, classes=merged_classes, **kwargs)
        self.option = option
        self.aria: dict[str, str] = {}

    def sync(self, state: SelectState) -> None:
        self.aria = option_attributes(self.option, state)
        selected = "aria-checked" in self.aria
        highlighted = self.aria["tabindex"] == "0"
        self.set_class(highlighted, "-highlighted")
        self.set_class(selected, "-selected")
        self.set_class(self.option.disabled, "-disabled")
        marker = "●" if selected else " "
        self.update(f"{marker} {self.option.display_label}")
        if highlighted and state.open:
            self.scroll_visible()

    def on_enter(self, event: events.Enter) -> None:
        self.post_message(self.Hovered(self.option.index))

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Clicked(self.option.index))


class SelectMenu(Widget, can_focus=True):
    """Trigger plus ``menu`` list driven by a SelectionController."""

    DEFAULT_CSS = """
    SelectMenu {
        width: 40;
        height: auto;
    }
    SelectMenu:focus SelectTrigger {
        border: solid #00ffcc;
    }
    SelectMenu.-open SelectTrigger {
        border: solid #ff00aa;
    }
    SelectMenu .select-list {
        height: auto;
        max-height: 12;
        background: #111827;
        border: solid #1a3a4a;
        display: none;
    }
    """

    class Changed(Message):
        """Fired once per committed selection."""

        def __init__(self, select_menu: SelectMenu, value: str) -> None:
            super().__init__()
            self.select_menu = select_menu
            self.value = value

        @property
        def control(self) -> SelectMenu:
            return self.select_menu

    class Expanded(Message):
        """Fired when the list opens or closes."""

        def __init__(self, select_menu: SelectMenu, expanded: bool) -> None:
            super().__init__()
            self.select_menu = select_menu
            self.expanded = expanded

    def __init__(
        self,
        options: Iterable[OptionDefinition | Mapping[str, Any]] = (),
        config: SelectConfig | None = None,
        *,
        press_watcher: PressWatcher | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        base = config or SelectConfig()
        self._host_on_change = base.on_change
        self.controller = SelectionController(options, replace(base, on_change=self._notify_change))
        self.list_id = new_list_id()
        self._press_watcher = press_watcher
        self._rendered_open = False

    @property
    def value(self) -> str | None:
        return self.controller.selected_value

    def compose(self) -> ComposeResult:
        yield SelectTrigger(id=f"{self.list_id}-trigger")
        with Vertical(id=self.list_id, classes="select-list"):
            for option in self.controller.registry:
                yield MenuOption(option)

    def on_mount(self) -> None:
        watcher = self._press_watcher or getattr(self.app, "press_watcher", None)
        self._press_watcher = watcher
        self.controller.activate(self._subscribe_outside if watcher is not None else None)
        self._sync_view()

    def on_unmount(self) -> None:
        self.controller.deactivate()

    async def replace_options(
        self, options: Iterable[OptionDefinition | Mapping[str, Any]]
    ) -> None:
        """Swap the option list; the selection survives when its value does."""
        self.controller.replace_options(options)
        listing = self.query_one(f"#{self.list_id}", Vertical)
        await listing.remove_children()
        await listing.mount_all([MenuOption(option) for option in self.controller.registry])
        self._sync_view()

    # ── Input forwarding ─────────────────────────────────────────

    def on_key(self, event: events.Key) -> None:
        suppress = self.controller.handle_key(event.key)
        if suppress:
            event.prevent_default()
            event.stop()
        self._sync_view()

    def on_select_trigger_pressed(self, event: SelectTrigger.Pressed) -> None:
        event.stop()
        self.focus()
        self.controller.toggle()
        self._sync_view()

    def on_menu_option_hovered(self, event: MenuOption.Hovered) -> None:
        event.stop()
        self.controller.hover(event.index)
        self._sync_view()

    def on_menu_option_clicked(self, event: MenuOption.Clicked) -> None:
        event.stop()
        self.focus()
        self.controller.select_option(event.index)
        self._sync_view()

    # ── Internals ────────────────────────────────────────────────

    def _notify_change(self, value: str) -> None:
        self._host_on_change(value)
        self.post_message(self.Changed(self, value))

    def _subscribe_outside(self, callback: Callable[[], None]) -> Release:
        def listener(target: Any) -> None:
            if self not in getattr(target, "ancestors_with_self", ()):
                callback()
                self._sync_view()

        return self._press_watcher.subscribe(listener)

    def _sync_view(self) -> None:
        state = self.controller.state
        config = self.controller.config
        self.set_class(state.open, "-open")
        if state.open != self._rendered_open:
            self._rendered_open = state.open
            self.post_message(self.Expanded(self, state.open))
        try:
            trigger = self.query_one(f"#{self.list_id}-trigger", SelectTrigger)
            listing = self.query_one(f"#{self.list_id}", Vertical)
        except NoMatches:
            return
        trigger.aria = trigger_attributes(state, self.list_id, config)
        trigger.update(f"{escape(trigger_text(self.controller))} {config.indicator_markup}")
        listing.display = state.open
        for item in listing.query(MenuOption):
            item.sync(state)
