"""Checklist model: selectable list entries plus trailing action items.

Items are a tagged variant so save/cancel are dispatched by type rather than
by their position at the end of the sequence.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .storage import scan_list_names

logger = logging.getLogger(__name__)


@dataclass
class ListEntry:
    name: str
    selected: bool = False


class ActionKind(enum.Enum):
    SAVE = "save"
    CANCEL = "cancel"


@dataclass(frozen=True)
class ActionItem:
    kind: ActionKind


CatalogItem = ListEntry | ActionItem

ACTION_ITEMS: tuple[ActionItem, ...] = (ActionItem(ActionKind.SAVE), ActionItem(ActionKind.CANCEL))


@dataclass
class Catalog:
    """Ordered checklist items and the cursor position within them.

    ``cursor`` always stays inside ``[0, len(items) - 1]``.
    """

    items: list[CatalogItem]
    cursor: int = 0

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("catalog needs at least one item")
        self.cursor = max(0, min(self.cursor, len(self.items) - 1))

    def __len__(self) -> int:
        return len(self.items)

    @property
    def current(self) -> CatalogItem:
        return self.items[self.cursor]

    @property
    def entries(self) -> list[ListEntry]:
        return [item for item in self.items if isinstance(item, ListEntry)]

    def move_cursor(self, delta: int) -> bool:
        """Move the cursor by ``delta`` without wrapping; return whether it moved."""
        target = max(0, min(self.cursor + delta, len(self.items) - 1))
        if target == self.cursor:
            return False
        self.cursor = target
        return True

    def toggle_current(self) -> bool:
        item = self.current
        if not isinstance(item, ListEntry):
            return False
        item.selected = not item.selected
        return True

    def selected_names(self) -> list[str]:
        return [entry.name for entry in self.entries if entry.selected]


def catalog_from_names(names: Sequence[str], persisted_selection: Sequence[str]) -> Catalog:
    """Build a catalog from candidate names and previously saved selections."""
    selected = set(persisted_selection)
    items: list[CatalogItem] = [ListEntry(name=name, selected=name in selected) for name in sorted(set(names))]
    items.extend(ACTION_ITEMS)
    return Catalog(items=items)


def build_catalog(list_dir: Path, persisted_selection: Sequence[str]) -> Catalog:
    catalog = catalog_from_names(scan_list_names(list_dir), persisted_selection)
    logger.debug(
        "catalog built: %d entries, %d preselected",
        len(catalog.entries),
        len(catalog.selected_names()),
    )
    return catalog
