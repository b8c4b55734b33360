"""PressWatcher — fan-out of pointer presses to scoped listeners."""

from __future__ import annotations

from typing import Any, Callable


PressListener = Callable[[Any], None]
Release = Callable[[], None]


class PressWatcher:
    """Single-producer source of pointer-press signals.

    The producer calls :meth:`dispatch` with whatever it knows about the press
    target. Listeners decide for themselves whether the press was outside.
    """

    def __init__(self) -> None:
        self._listeners: list[PressListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: PressListener) -> Release:
        """Register ``listener``. The returned callable releases it once."""
        self._listeners.append(listener)
        released = False

        def release() -> None:
            nonlocal released
            if released:
                return
            released = True
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return release

    def dispatch(self, target: Any = None) -> None:
        # Listeners may release themselves while being notified.
        for listener in list(self._listeners):
            listener(target)
