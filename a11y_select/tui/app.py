"""SelectDemoApp — hosts one SelectMenu for interactive use."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Static

from ..pointer import PressWatcher
from ..state import OptionDefinition, SelectConfig
from .widgets.log_panel import LogPanel
from .widgets.select_menu import SelectMenu
from .widgets.status_bar import StatusBar

logger = logging.getLogger(__name__)


class DemoScreen(Screen):
    """Single screen with the select, a change log and a status bar."""

    DEFAULT_CSS = """
    DemoScreen {
        background: #0a0e17;
    }
    DemoScreen #demo-main {
        padding: 1 2;
    }
    DemoScreen .demo-title {
        color: #00ffcc;
        text-style: bold;
        margin-bottom: 1;
    }
    """

    def __init__(
        self,
        options: Iterable[OptionDefinition | Mapping[str, Any]],
        config: SelectConfig | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._options = list(options)
        self._config = config

    def compose(self) -> ComposeResult:
        with Vertical(id="demo-main"):
            title = (self._config.label if self._config else None) or "Select"
            yield Static(title, classes="demo-title", markup=False)
            yield SelectMenu(self._options, self._config, id="demo-select")
            yield Static("")
            yield LogPanel(id="demo-log")
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        select = self.query_one(SelectMenu)
        status = self.query_one(StatusBar)
        status.value = select.value or ""
        diagnostic = select.controller.diagnostic
        if diagnostic is not None:
            self.query_one(LogPanel).log_warning(str(diagnostic))
        select.focus()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        watcher = getattr(self.app, "press_watcher", None)
        if watcher is not None:
            watcher.dispatch(event.widget)

    def on_select_menu_expanded(self, event: SelectMenu.Expanded) -> None:
        self.query_one(StatusBar).expanded = event.expanded

    def on_select_menu_changed(self, event: SelectMenu.Changed) -> None:
        self.query_one(LogPanel).log_change(event.value)
        status = self.query_one(StatusBar)
        status.value = event.value


class SelectDemoApp(App):
    """Interactive demo of the accessible select."""

    TITLE = "A11Y SELECT"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("f10", "quit", "Quit", show=False),
    ]

    def __init__(
        self,
        options: Iterable[OptionDefinition | Mapping[str, Any]],
        config: SelectConfig | None = None,
    ) -> None:
        super().__init__()
        self.press_watcher = PressWatcher()
        self._options = list(options)
        self._config = config

    def on_mount(self) -> None:
        logger.debug("Starting demo with %d options", len(self._options))
        self.push_screen(DemoScreen(self._options, self._config))
