"""Small coercion helpers shared by the option file loaders."""

from __future__ import annotations

import re


_ID_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


def is_identifier(value: str) -> bool:
    return bool(_ID_RE.match(value))


def clean(value: str | None) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def ensure_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    return value


def ensure_bool(value, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean")
    return value
