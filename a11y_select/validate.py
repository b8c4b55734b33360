"""Configuration and option file validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List

from .constants import ALLOWED_OPTION_KEYS, ALLOWED_SELECT_KEYS
from .util import clean, is_identifier

if TYPE_CHECKING:
    from .state import SelectConfig


MISSING_LABEL = "missing-label"


class OptionFileError(ValueError):
    """Raised when an option file fails validation."""


@dataclass(frozen=True)
class Diagnostic:
    """Advisory configuration problem. Never blocks construction."""

    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


def validate_config(config: SelectConfig) -> Diagnostic | None:
    """Return a diagnostic when neither label nor labelled_by is set."""
    if clean(config.label) is None and clean(config.labelled_by) is None:
        return Diagnostic(
            code=MISSING_LABEL,
            message="One of 'label' or 'labelled_by' was not specified",
        )
    return None


def validate_option_table(data: Dict[str, Any]) -> List[str]:
    errors: List[str] = []

    def err(msg: str) -> None:
        errors.append(msg)

    for key in data.keys():
        if key not in ("select", "options"):
            err(f"Unknown top-level key: {key}")

    select = data.get("select", {})
    if not isinstance(select, dict):
        err("select must be a table")
        select = {}
    for key in select.keys():
        if key not in ALLOWED_SELECT_KEYS:
            err(f"Unknown select key: {key}")
    for key in ALLOWED_SELECT_KEYS:
        value = select.get(key)
        if value is not None and not isinstance(value, str):
            err(f"select.{key} must be a string")

    options = data.get("options")
    if options is None:
        err("Missing required array: [[options]]")
        return errors
    if not isinstance(options, list):
        err("options must be an array of tables")
        return errors

    seen_ids: set[str] = set()
    for i, option in enumerate(options):
        where = f"options[{i}]"
        if not isinstance(option, dict):
            err(f"{where} must be a table")
            continue
        for key in option.keys():
            if key not in ALLOWED_OPTION_KEYS:
                err(f"Unknown {where} key: {key}")
        if not isinstance(option.get("value"), str):
            err(f"{where}.value must be a string")
        if "label" in option and not isinstance(option["label"], str):
            err(f"{where}.label must be a string")
        if "disabled" in option and not isinstance(option["disabled"], bool):
            err(f"{where}.disabled must be a boolean")
        if "class" in option and not isinstance(option["class"], str):
            err(f"{where}.class must be a string")
        option_id = option.get("id")
        if option_id is not None:
            if not isinstance(option_id, str) or not is_identifier(option_id):
                err(f"{where}.id must be an identifier: [A-Za-z][A-Za-z0-9_-]*")
            elif option_id in seen_ids:
                err(f"{where}.id duplicates an earlier option id: {option_id}")
            else:
                seen_ids.add(option_id)

    return errors


def raise_on_errors(errors: List[str]) -> None:
    if errors:
        raise OptionFileError("\n".join(errors))
