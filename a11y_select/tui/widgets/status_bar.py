"""StatusBar — bottom bar showing the committed value and list state."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static


class StatusBar(Widget):
    """Single-line status bar at the bottom of the screen."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: #111827;
        layout: horizontal;
        padding: 0 2;
    }
    StatusBar .value-label {
        color: #00ffcc;
        text-style: bold;
        width: 1fr;
    }
    StatusBar .open-label {
        color: #ffaa00;
        width: auto;
    }
    """

    value: reactive[str] = reactive("")
    expanded: reactive[bool] = reactive(False)

    def compose(self) -> ComposeResult:
        yield Static("", classes="value-label", id="sb-value", markup=False)
        yield Static("", classes="open-label", id="sb-open")

    def watch_value(self, value: str) -> None:
        try:
            self.query_one("#sb-value", Static).update(f"value: {value}" if value else "value: -")
        except Exception:
            pass

    def watch_expanded(self, value: bool) -> None:
        try:
            self.query_one("#sb-open", Static).update("open" if value else "closed")
        except Exception:
            pass
