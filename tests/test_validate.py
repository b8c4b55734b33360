import unittest

from a11y_select.state import SelectConfig
from a11y_select.validate import (
    MISSING_LABEL,
    OptionFileError,
    raise_on_errors,
    validate_config,
    validate_option_table,
)


class ConfigValidatorTests(unittest.TestCase):
    def test_label_or_labelled_by_is_enough(self) -> None:
        self.assertIsNone(validate_config(SelectConfig(label="Fruit")))
        self.assertIsNone(validate_config(SelectConfig(labelled_by="fruit-label")))
        self.assertIsNone(validate_config(SelectConfig(label="Fruit", labelled_by="fruit-label")))

    def test_both_missing_yields_diagnostic(self) -> None:
        diagnostic = validate_config(SelectConfig())
        self.assertEqual(diagnostic.code, MISSING_LABEL)
        self.assertIn("labelled_by", diagnostic.message)
        self.assertTrue(str(diagnostic).startswith("missing-label: "))

    def test_blank_strings_count_as_missing(self) -> None:
        self.assertIsNotNone(validate_config(SelectConfig(label="  ", labelled_by="")))


class OptionTableTests(unittest.TestCase):
    def test_valid_table(self) -> None:
        data = {
            "select": {"label": "Fruit", "initial_value": "a"},
            "options": [
                {"value": "a", "label": "Apple", "id": "opt-a"},
                {"value": "b", "disabled": True, "class": "late"},
            ],
        }
        self.assertEqual(validate_option_table(data), [])

    def test_missing_options(self) -> None:
        errors = validate_option_table({"select": {"label": "x"}})
        self.assertEqual(errors, ["Missing required array: [[options]]"])

    def test_collects_every_problem(self) -> None:
        data = {
            "extra": 1,
            "select": {"label": 5, "colour": "red"},
            "options": [
                {"value": "a", "disabled": "yes"},
                "not-a-table",
                {"label": "no value", "id": "9bad"},
                {"value": "c", "id": "same"},
                {"value": "d", "id": "same", "tooltip": "x"},
            ],
        }
        errors = validate_option_table(data)
        self.assertIn("Unknown top-level key: extra", errors)
        self.assertIn("Unknown select key: colour", errors)
        self.assertIn("select.label must be a string", errors)
        self.assertIn("options[0].disabled must be a boolean", errors)
        self.assertIn("options[1] must be a table", errors)
        self.assertIn("options[2].value must be a string", errors)
        self.assertIn("options[2].id must be an identifier: [A-Za-z][A-Za-z0-9_-]*", errors)
        self.assertIn("options[4].id duplicates an earlier option id: same", errors)
        self.assertIn("Unknown options[4] key: tooltip", errors)

    def test_raise_on_errors(self) -> None:
        raise_on_errors([])
        with self.assertRaisesRegex(OptionFileError, "first\nsecond"):
            raise_on_errors(["first", "second"])
        self.assertTrue(issubclass(OptionFileError, ValueError))


if __name__ == "__main__":
    unittest.main()
