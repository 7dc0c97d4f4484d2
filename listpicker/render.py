"""Rendering engine for the checklist screen.

Builds whole frames in memory and writes each one to stdout in a single
``os.write`` call so the terminal never shows a half-drawn frame.
"""

from __future__ import annotations

import os
import sys

from .catalog import ActionItem, Catalog, CatalogItem, ListEntry
from .messages import Messages
from .ui_theme import DEFAULT_THEME, UITheme

CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[H"
CLEAR_TO_END = "\033[J"
LINE_END = "\r\n"


def item_label(item: CatalogItem, messages: Messages) -> str:
    if isinstance(item, ActionItem):
        return messages.action_label(item.kind)
    return item.name


def format_item_line(item: CatalogItem, is_cursor: bool, messages: Messages) -> str:
    """Return the fixed-format row ``"> [*] name"`` without styling."""
    cursor_mark = ">" if is_cursor else " "
    selected_mark = "*" if isinstance(item, ListEntry) and item.selected else " "
    return f"{cursor_mark} [{selected_mark}] {item_label(item, messages)}"


def build_frame(
    catalog: Catalog,
    full_repaint: bool,
    messages: Messages,
    theme: UITheme = DEFAULT_THEME,
) -> str:
    """Compose one frame.

    A full repaint clears the screen first; every other frame only homes the
    cursor and relies on the fixed row layout to overwrite the previous frame.
    """
    out: list[str] = [CLEAR_SCREEN + CURSOR_HOME if full_repaint else CURSOR_HOME]
    out.append(f"{theme.header}{messages.header}{theme.reset}{LINE_END}")
    out.append(LINE_END)
    for idx, item in enumerate(catalog.items):
        is_cursor = idx == catalog.cursor
        line = format_item_line(item, is_cursor, messages)
        if is_cursor:
            line = f"{theme.reverse}{line}{theme.reset}"
        out.append(line)
        out.append(LINE_END)
    return "".join(out)


def _write(text: str) -> None:
    os.write(sys.stdout.fileno(), text.encode("utf-8", errors="replace"))


def draw(
    catalog: Catalog,
    full_repaint: bool,
    *,
    messages: Messages,
    theme: UITheme = DEFAULT_THEME,
) -> None:
    _write(build_frame(catalog, full_repaint, messages, theme))


def draw_status(message: str, theme: UITheme = DEFAULT_THEME) -> None:
    """Write ``message`` below the checklist, clearing anything left underneath."""
    _write(f"{LINE_END}{CLEAR_TO_END}{theme.success}{message}{theme.reset}{LINE_END}")


def format_plain_listing(catalog: Catalog, messages: Messages) -> str:
    """Render list entries as an uncolored checklist for non-interactive output."""
    entries = catalog.entries
    if not entries:
        return messages.empty + "\n"
    return "".join(f"[{'*' if entry.selected else ' '}] {entry.name}\n" for entry in entries)
