"""Textual rendering of the accessible select."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from ..constants import SAMPLE_LABEL, SAMPLE_OPTIONS
from ..state import SelectConfig


def launch_demo(
    path: Path | None = None,
    label: str | None = None,
    initial_value: str | None = None,
) -> int:
    """Launch the select demo application."""
    from ..registry import load_select_file
    from .app import SelectDemoApp

    if path is not None:
        config, options = load_select_file(path)
    else:
        config, options = SelectConfig(label=SAMPLE_LABEL), list(SAMPLE_OPTIONS)
    overrides = {}
    if label is not None:
        overrides["label"] = label
    if initial_value is not None:
        overrides["initial_value"] = initial_value
    if overrides:
        config = replace(config, **overrides)

    app = SelectDemoApp(options, config)
    app.run()
    return 0
