import unittest

from textual.app import App, ComposeResult
from textual.widgets import Static

from a11y_select.pointer import PressWatcher
from a11y_select.state import OptionDefinition, SelectConfig, SelectState
from a11y_select.tui.app import SelectDemoApp
from a11y_select.tui.widgets.select_menu import MenuOption, SelectMenu, SelectTrigger
from a11y_select.tui.widgets.status_bar import StatusBar

ABC = [OptionDefinition("a"), OptionDefinition("b", disabled=True), OptionDefinition("c")]


class _HostApp(App):
    def __init__(self, config: SelectConfig) -> None:
        super().__init__()
        self.press_watcher = PressWatcher()
        self.changes: list[str] = []
        self._config = config

    def compose(self) -> ComposeResult:
        yield SelectMenu(ABC, self._config, id="letters")
        yield Static("elsewhere", id="elsewhere")

    def on_mount(self) -> None:
        self.query_one(SelectMenu).focus()

    def on_select_menu_changed(self, event: SelectMenu.Changed) -> None:
        self.changes.append(event.value)


class SelectMenuTests(unittest.IsolatedAsyncioTestCase):
    async def test_keyboard_walks_past_disabled_and_selects(self) -> None:
        host_changes: list[str] = []
        app = _HostApp(SelectConfig(label="Letters", on_change=host_changes.append))
        async with app.run_test() as pilot:
            menu = app.query_one(SelectMenu)
            await pilot.press("down", "down")
            self.assertEqual(menu.controller.state, SelectState(open=True, highlighted_index=1))
            options = list(menu.query(MenuOption))
            self.assertEqual(options[1].aria["tabindex"], "0")
            self.assertEqual(options[1].aria["aria-disabled"], "true")
            self.assertTrue(options[1].has_class("-highlighted"))

            await pilot.press("down", "enter")
            await pilot.pause()
            self.assertEqual(menu.controller.state, SelectState(False, 2, None))
            self.assertEqual(menu.value, "c")
            self.assertEqual(host_changes, ["c"])
            self.assertEqual(app.changes, ["c"])
            self.assertEqual(options[2].aria["aria-checked"], "true")

    async def test_trigger_aria_tracks_open_state(self) -> None:
        app = _HostApp(SelectConfig(label="Letters"))
        async with app.run_test() as pilot:
            menu = app.query_one(SelectMenu)
            trigger = app.query_one(SelectTrigger)
            self.assertNotIn("aria-expanded", trigger.aria)
            self.assertEqual(trigger.aria["aria-controls"], menu.list_id)
            self.assertEqual(trigger.aria["aria-label"], "Letters")

            await pilot.press("enter")
            self.assertEqual(trigger.aria["aria-expanded"], "true")
            self.assertTrue(menu.has_class("-open"))

            await pilot.press("escape")
            self.assertNotIn("aria-expanded", trigger.aria)
            self.assertFalse(menu.has_class("-open"))

    async def test_outside_press_dismisses(self) -> None:
        app = _HostApp(SelectConfig(label="Letters"))
        async with app.run_test() as pilot:
            menu = app.query_one(SelectMenu)
            self.assertEqual(len(app.press_watcher), 0)
            await pilot.press("down")
            self.assertEqual(len(app.press_watcher), 1)

            app.press_watcher.dispatch(menu)
            self.assertTrue(menu.controller.is_open)

            app.press_watcher.dispatch(app.query_one("#elsewhere"))
            self.assertEqual(menu.controller.state, SelectState(open=False, highlighted_index=0))
            self.assertEqual(len(app.press_watcher), 0)

    async def test_initial_value_and_option_swap(self) -> None:
        app = _HostApp(SelectConfig(label="Letters", initial_value="c"))
        async with app.run_test() as pilot:
            menu = app.query_one(SelectMenu)
            self.assertEqual(menu.value, "c")
            await menu.replace_options([OptionDefinition("c"), OptionDefinition("d")])
            await pilot.pause()
            self.assertEqual(menu.controller.state.selected_index, 0)
            self.assertEqual([o.option.value for o in menu.query(MenuOption)], ["c", "d"])

    async def test_unmount_releases_outside_listener(self) -> None:
        app = _HostApp(SelectConfig(label="Letters"))
        async with app.run_test() as pilot:
            menu = app.query_one(SelectMenu)
            await pilot.press("down")
            self.assertEqual(len(app.press_watcher), 1)
            await menu.remove()
            await pilot.pause()
            self.assertEqual(len(app.press_watcher), 0)
            self.assertFalse(menu.controller.is_active)


class DemoAppTests(unittest.IsolatedAsyncioTestCase):
    async def test_demo_reports_selection_in_status_bar(self) -> None:
        app = SelectDemoApp(
            [{"value": "apple", "label": "Apple"}, {"value": "banana"}],
            SelectConfig(label="Fruit"),
        )
        async with app.run_test() as pilot:
            await pilot.pause()
            menu = app.screen.query_one(SelectMenu)
            self.assertTrue(menu.has_focus)
            await pilot.press("enter")
            await pilot.pause()
            self.assertTrue(app.screen.query_one(StatusBar).expanded)
            await pilot.press("down", "enter")
            await pilot.pause()
            self.assertEqual(menu.value, "banana")
            status = app.screen.query_one(StatusBar)
            self.assertEqual(status.value, "banana")
            self.assertFalse(status.expanded)


if __name__ == "__main__":
    unittest.main()
