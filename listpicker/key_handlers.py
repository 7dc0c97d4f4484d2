"""Key bindings for the checklist screen.

Maps normalized key tokens to catalog transitions. Handlers mutate the
catalog and report whether a redraw is needed or the session should end.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

from .catalog import ActionItem, ActionKind, Catalog


class SessionOutcome(enum.Enum):
    SAVED = "saved"
    CANCELLED = "cancelled"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyResult:
    redraw: bool = False
    outcome: SessionOutcome | None = None


UNHANDLED = KeyResult()

_ACTION_OUTCOMES = {
    ActionKind.SAVE: SessionOutcome.SAVED,
    ActionKind.CANCEL: SessionOutcome.CANCELLED,
}


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single transition."""

    combos: tuple[str, ...]
    handler: Callable[[], KeyResult]


class SelectionKeyHandler:
    """Dispatch key tokens to cursor movement, toggling, and session actions."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self._handlers: dict[str, Callable[[], KeyResult]] = {}
        self.register_bindings(
            KeyComboBinding(("UP",), lambda: self._move(-1)),
            KeyComboBinding(("DOWN",), lambda: self._move(1)),
            KeyComboBinding((" ", "ENTER"), self._activate),
            KeyComboBinding(("CTRL_C",), self._quit),
        )

    def register_bindings(self, *bindings: KeyComboBinding) -> SelectionKeyHandler:
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
        return self

    def handle(self, key: str) -> KeyResult:
        handler = self._handlers.get(key)
        if handler is None:
            return UNHANDLED
        return handler()

    def _move(self, delta: int) -> KeyResult:
        return KeyResult(redraw=self.catalog.move_cursor(delta))

    def _activate(self) -> KeyResult:
        item = self.catalog.current
        if isinstance(item, ActionItem):
            return KeyResult(outcome=_ACTION_OUTCOMES[item.kind])
        return KeyResult(redraw=self.catalog.toggle_current())

    def _quit(self) -> KeyResult:
        return KeyResult(outcome=SessionOutcome.QUIT)
