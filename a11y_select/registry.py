"""Option registry — an immutable, indexed snapshot of the host's options.

Option lists can also be kept on disk as TOML (``[select]`` table plus an
``[[options]]`` array of tables).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

from .state import IndexedOption, OptionDefinition, SelectConfig
from .util import ensure_bool, ensure_str
from .validate import raise_on_errors, validate_option_table

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

import tomli_w

logger = logging.getLogger(__name__)


def to_definition(item: OptionDefinition | Mapping[str, Any]) -> OptionDefinition:
    if isinstance(item, OptionDefinition):
        return item
    return OptionDefinition(
        value=ensure_str(item["value"], "value"),
        label=ensure_str(item.get("label", ""), "label"),
        disabled=ensure_bool(item.get("disabled", False), "disabled"),
        option_id=item.get("id"),
        css_class=ensure_str(item.get("class", ""), "class"),
    )


class OptionRegistry:
    """Indexed view over an ordered option list.

    Indices are positions in the input sequence and never change for the
    lifetime of a registry. A new option list means a new registry.
    """

    def __init__(self, options: Iterable[IndexedOption] = ()) -> None:
        self._options: tuple[IndexedOption, ...] = tuple(options)

    @classmethod
    def build(
        cls, definitions: Iterable[OptionDefinition | Mapping[str, Any]]
    ) -> OptionRegistry:
        options = []
        for index, item in enumerate(definitions):
            d = to_definition(item)
            options.append(
                IndexedOption(
                    index=index,
                    value=d.value,
                    label=d.label,
                    disabled=d.disabled,
                    option_id=d.option_id,
                    css_class=d.css_class,
                )
            )
        registry = cls(options)
        logger.debug("Built option registry with %d options", len(registry))
        return registry

    @property
    def options(self) -> tuple[IndexedOption, ...]:
        return self._options

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[IndexedOption]:
        return iter(self._options)

    def __repr__(self) -> str:
        return f"OptionRegistry({[o.value for o in self._options]!r})"

    def values(self) -> list[str]:
        return [o.value for o in self._options]

    def find_by_index(self, index: int | None) -> IndexedOption | None:
        """Return the option at ``index``, or None when out of range."""
        if index is None or index < 0 or index >= len(self._options):
            return None
        return self._options[index]

    def find_by_value(self, value: str | None) -> IndexedOption | None:
        """Return the first option whose value equals ``value``.

        Duplicate values resolve to the lowest index.
        """
        if value is None:
            return None
        for option in self._options:
            if option.value == value:
                return option
        return None


def load_option_file(path: str | Path) -> dict[str, Any]:
    """Read a raw option file table."""
    option_path = Path(path)
    if not option_path.exists():
        raise FileNotFoundError(f"Option file not found: {option_path}")
    return tomllib.loads(option_path.read_text(encoding="utf-8"))


def save_option_file(
    path: str | Path,
    select: Mapping[str, Any],
    options: Iterable[OptionDefinition],
) -> None:
    """Write a select table and its options to ``path``."""
    data: dict[str, Any] = {
        "select": {k: v for k, v in select.items() if v is not None},
        "options": [_definition_to_dict(d) for d in options],
    }
    Path(path).write_bytes(tomli_w.dumps(data).encode())


def _definition_to_dict(d: OptionDefinition) -> dict[str, Any]:
    out: dict[str, Any] = {"value": d.value}
    if d.label:
        out["label"] = d.label
    if d.disabled:
        out["disabled"] = True
    if d.option_id:
        out["id"] = d.option_id
    if d.css_class:
        out["class"] = d.css_class
    return out


def load_select_file(path: str | Path) -> tuple[SelectConfig, list[OptionDefinition]]:
    """Load, validate and convert an option file."""
    data = load_option_file(path)
    raise_on_errors(validate_option_table(data))
    select = data.get("select", {})
    config = SelectConfig(
        label=select.get("label"),
        labelled_by=select.get("labelled_by"),
        initial_value=select.get("initial_value"),
        **{
            k: select[k]
            for k in ("placeholder_text", "indicator_markup")
            if k in select
        },
    )
    definitions = [to_definition(item) for item in data.get("options", [])]
    return config, definitions
