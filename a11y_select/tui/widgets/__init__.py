"""Textual widgets for the select demo."""

from .log_panel import LogPanel
from .select_menu import MenuOption, SelectMenu, SelectTrigger
from .status_bar import StatusBar

__all__ = ["LogPanel", "MenuOption", "SelectMenu", "SelectTrigger", "StatusBar"]
