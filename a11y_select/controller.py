"""SelectionController — the select widget's state machine.

The module-level functions are pure transitions: they take the current
``SelectState`` and the ``OptionRegistry`` and return a ``Transition``. The
controller owns the state, commits transitions one at a time and delivers the
"value changed" notification after the new state is in place.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Callable, Iterable, Iterator, Mapping

from .keys import Intent, intent_for_key, suppresses_default
from .pointer import Release
from .registry import OptionRegistry
from .state import IndexedOption, OptionDefinition, SelectConfig, SelectState, Transition
from .validate import Diagnostic, validate_config

logger = logging.getLogger(__name__)

Subscribe = Callable[[Callable[[], None]], Release]


def toggle(state: SelectState, registry: OptionRegistry) -> Transition:
    return Transition(replace(state, open=not state.open))


def dismiss(state: SelectState, registry: OptionRegistry) -> Transition:
    if not state.open:
        return Transition(state)
    return Transition(replace(state, open=False))


close_on_outside_interaction = dismiss
close_on_leave_focus = dismiss


def move_highlight_next(state: SelectState, registry: OptionRegistry) -> Transition:
    """Advance the highlight, opening the list first if it is closed."""
    count = len(registry)
    current = state.highlighted_index
    if count == 0:
        nxt = None
    elif current is None:
        nxt = 0
    else:
        nxt = min(current + 1, count - 1)
    return Transition(replace(state, open=True, highlighted_index=nxt))


def move_highlight_previous(state: SelectState, registry: OptionRegistry) -> Transition:
    count = len(registry)
    current = state.highlighted_index
    if count == 0:
        prev = None
    elif current is None:
        prev = 0
    else:
        prev = min(max(current - 1, 0), count - 1)
    return Transition(replace(state, highlighted_index=prev))


def select_option(
    state: SelectState, registry: OptionRegistry, index: int | None
) -> Transition:
    """Commit ``index`` and close. Unknown or disabled options are ignored."""
    option = registry.find_by_index(index)
    if option is None:
        logger.debug("Ignoring selection of unknown option index %r", index)
        return Transition(state)
    if option.disabled:
        logger.debug("Ignoring selection of disabled option %r", option.value)
        return Transition(state)
    return Transition(
        SelectState(open=False, selected_index=option.index, highlighted_index=None),
        changed_value=option.value,
    )


def confirm_or_open(state: SelectState, registry: OptionRegistry) -> Transition:
    if state.open:
        return select_option(state, registry, state.highlighted_index)
    first = 0 if len(registry) else None
    return Transition(replace(state, open=True, highlighted_index=first))


def hover(state: SelectState, registry: OptionRegistry, index: int | None) -> Transition:
    """Point the highlight at ``index`` without opening or closing."""
    if registry.find_by_index(index) is None:
        return Transition(state)
    return Transition(replace(state, highlighted_index=index))


_INTENT_TRANSITIONS: dict[Intent, Callable[[SelectState, OptionRegistry], Transition]] = {
    Intent.MOVE_NEXT: move_highlight_next,
    Intent.MOVE_PREVIOUS: move_highlight_previous,
    Intent.DISMISS: dismiss,
    Intent.CONFIRM_OR_OPEN: confirm_or_open,
    Intent.CLOSE_ON_LEAVE_FOCUS: close_on_leave_focus,
}


def resolve_initial_index(registry: OptionRegistry, initial_value: str | None) -> int | None:
    if initial_value is None:
        return None
    option = registry.find_by_value(initial_value)
    if option is None:
        logger.debug("Initial value %r matches no option", initial_value)
        return None
    return option.index


class SelectionController:
    """Owns a ``SelectState`` and moves it through the transitions above."""

    def __init__(
        self,
        options: OptionRegistry | Iterable[OptionDefinition | Mapping[str, Any]] = (),
        config: SelectConfig | None = None,
    ) -> None:
        self._config = config or SelectConfig()
        if isinstance(options, OptionRegistry):
            self._registry = options
        else:
            self._registry = OptionRegistry.build(options)
        self._diagnostic = validate_config(self._config)
        if self._diagnostic is not None:
            logger.warning("Select configuration: %s", self._diagnostic.message)
        self._state = SelectState(
            selected_index=resolve_initial_index(self._registry, self._config.initial_value)
        )
        self._active = False
        self._subscribe: Subscribe | None = None
        self._release: Release | None = None

    # ── Read-only views ──────────────────────────────────────────

    @property
    def state(self) -> SelectState:
        return self._state

    @property
    def registry(self) -> OptionRegistry:
        return self._registry

    @property
    def config(self) -> SelectConfig:
        return self._config

    @property
    def diagnostic(self) -> Diagnostic | None:
        return self._diagnostic

    @property
    def is_open(self) -> bool:
        return self._state.open

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def listening_for_outside(self) -> bool:
        return self._release is not None

    @property
    def selected_option(self) -> IndexedOption | None:
        return self._registry.find_by_index(self._state.selected_index)

    @property
    def selected_value(self) -> str | None:
        option = self.selected_option
        return option.value if option else None

    @property
    def highlighted_option(self) -> IndexedOption | None:
        if not self._state.open:
            return None
        return self._registry.find_by_index(self._state.highlighted_index)

    # ── Lifecycle ────────────────────────────────────────────────

    def activate(self, subscribe: Subscribe | None = None) -> None:
        """Make the widget interactive.

        ``subscribe`` registers an outside-press callback and returns its
        release. It is only called while the list is open.
        """
        self._active = True
        self._subscribe = subscribe
        self._sync_outside_listener()

    def deactivate(self) -> None:
        self._active = False
        self._sync_outside_listener()
        self._subscribe = None

    @contextmanager
    def interactive(self, subscribe: Subscribe | None = None) -> Iterator[SelectionController]:
        self.activate(subscribe)
        try:
            yield self
        finally:
            self.deactivate()

    # ── Operations ───────────────────────────────────────────────

    def toggle(self) -> Transition:
        return self._commit(toggle(self._state, self._registry))

    def dismiss(self) -> Transition:
        return self._commit(dismiss(self._state, self._registry))

    def close_on_outside_interaction(self) -> Transition:
        return self._commit(close_on_outside_interaction(self._state, self._registry))

    def close_on_leave_focus(self) -> Transition:
        return self._commit(close_on_leave_focus(self._state, self._registry))

    def move_highlight_next(self) -> Transition:
        return self._commit(move_highlight_next(self._state, self._registry))

    def move_highlight_previous(self) -> Transition:
        return self._commit(move_highlight_previous(self._state, self._registry))

    def confirm_or_open(self) -> Transition:
        return self._commit(confirm_or_open(self._state, self._registry))

    def select_option(self, index: int | None) -> Transition:
        return self._commit(select_option(self._state, self._registry, index))

    def hover(self, index: int | None) -> Transition:
        return self._commit(hover(self._state, self._registry, index))

    def apply(self, intent: Intent) -> Transition:
        return self._commit(_INTENT_TRANSITIONS[intent](self._state, self._registry))

    def handle_key(self, key: str | int) -> bool:
        """Feed a raw key. Returns True when its default action must be suppressed."""
        intent = intent_for_key(key)
        if intent is None:
            return False
        self.apply(intent)
        return suppresses_default(intent)

    def replace_options(
        self, options: OptionRegistry | Iterable[OptionDefinition | Mapping[str, Any]]
    ) -> None:
        """Swap in a new option snapshot and re-validate indices against it."""
        previous = self.selected_option
        if isinstance(options, OptionRegistry):
            registry = options
        else:
            registry = OptionRegistry.build(options)
        selected = None
        if previous is not None:
            match = registry.find_by_value(previous.value)
            selected = match.index if match else None
            if match is None:
                logger.debug("Selected value %r dropped from options", previous.value)
        highlighted = self._state.highlighted_index
        if registry.find_by_index(highlighted) is None:
            highlighted = None
        self._registry = registry
        self._commit(
            Transition(
                replace(self._state, selected_index=selected, highlighted_index=highlighted)
            )
        )

    # ── Internals ────────────────────────────────────────────────

    def _commit(self, transition: Transition) -> Transition:
        self._state = transition.state
        self._sync_outside_listener()
        if transition.changed_value is not None:
            logger.info("Selected %r", transition.changed_value)
            self._config.on_change(transition.changed_value)
        return transition

    def _on_outside_press(self) -> None:
        self.close_on_outside_interaction()

    def _sync_outside_listener(self) -> None:
        wanted = self._active and self._state.open and self._subscribe is not None
        if wanted and self._release is None:
            self._release = self._subscribe(self._on_outside_press)
            logger.debug("Outside-press listener attached")
        elif not wanted and self._release is not None:
            release, self._release = self._release, None
            release()
            logger.debug("Outside-press listener released")
