"""LogPanel — scrollable record of selection events."""

from __future__ import annotations

from rich.markup import escape
from textual.widgets import RichLog


class LogPanel(RichLog):
    """Scrollable log with color-coded entries for demo events."""

    DEFAULT_CSS = """
    LogPanel {
        background: #0a0e17;
        border: solid #1a3a4a;
        padding: 0 1;
        min-height: 6;
        max-height: 50%;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(highlight=False, markup=True, wrap=True, **kwargs)

    def log_info(self, message: str) -> None:
        self.write(f"[#8892a4]{escape(message)}[/]")

    def log_change(self, value: str) -> None:
        self.write(f"[#39ff14]changed[/] [#00ffcc]{escape(value)}[/]")

    def log_warning(self, message: str) -> None:
        self.write(f"[#ffaa00]{escape(message)}[/]")
