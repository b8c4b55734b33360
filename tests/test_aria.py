import unittest

from a11y_select.aria import (
    list_attributes,
    new_list_id,
    option_attributes,
    trigger_attributes,
    trigger_text,
)
from a11y_select.controller import SelectionController
from a11y_select.registry import OptionRegistry
from a11y_select.state import OptionDefinition, SelectConfig, SelectState


class AriaContractTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = OptionRegistry.build(
            [
                OptionDefinition("a", "Apple"),
                OptionDefinition("b", disabled=True),
                OptionDefinition("c", "Cherry", option_id="cherry"),
            ]
        )

    def test_trigger_omits_expanded_when_closed(self) -> None:
        attrs = trigger_attributes(SelectState(open=False), "list-1")
        self.assertEqual(
            attrs,
            {"role": "button", "aria-haspopup": "true", "aria-controls": "list-1"},
        )

    def test_trigger_expanded_and_label_when_open(self) -> None:
        attrs = trigger_attributes(
            SelectState(open=True), "list-1", SelectConfig(labelled_by="fruit-label")
        )
        self.assertEqual(attrs["aria-expanded"], "true")
        self.assertEqual(attrs["aria-labelledby"], "fruit-label")
        self.assertNotIn("aria-label", attrs)

    def test_list_is_a_menu(self) -> None:
        self.assertEqual(list_attributes("list-9"), {"id": "list-9", "role": "menu"})

    def test_option_attributes(self) -> None:
        state = SelectState(open=True, selected_index=0, highlighted_index=1)
        apple, banana, cherry = self.registry.options

        a = option_attributes(apple, state)
        self.assertEqual(a["id"], "a11y-select-option-0")
        self.assertEqual(a["role"], "menuitemradio")
        self.assertEqual(a["aria-checked"], "true")
        self.assertEqual(a["tabindex"], "-1")
        self.assertEqual(a["aria-label"], "Apple")
        self.assertNotIn("aria-disabled", a)

        b = option_attributes(banana, state)
        self.assertEqual(b["tabindex"], "0")
        self.assertEqual(b["aria-disabled"], "true")
        self.assertEqual(b["aria-label"], "b")
        self.assertNotIn("aria-checked", b)

        self.assertEqual(option_attributes(cherry, state)["id"], "cherry")

    def test_list_ids_are_unique(self) -> None:
        ids = {new_list_id() for _ in range(5)}
        self.assertEqual(len(ids), 5)
        for list_id in ids:
            self.assertTrue(list_id.startswith("a11y-select-"))

    def test_trigger_text_placeholder_then_selection(self) -> None:
        controller = SelectionController(
            self.registry, SelectConfig(label="Fruit", placeholder_text="Pick")
        )
        self.assertEqual(trigger_text(controller), "Pick")
        controller.select_option(2)
        self.assertEqual(trigger_text(controller), "Cherry")


if __name__ == "__main__":
    unittest.main()
