"""Session bootstrap: load the catalog, wire the loop, and run it."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from .catalog import Catalog, build_catalog
from .key_handlers import SessionOutcome
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .messages import Messages
from .render import draw, draw_status, format_plain_listing
from .storage import read_selection, selection_path, write_selection
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


def load_catalog(list_dir: Path) -> Catalog:
    return build_catalog(list_dir, read_selection(selection_path(list_dir)))


def print_listing(list_dir: Path, messages: Messages) -> None:
    sys.stdout.write(format_plain_listing(load_catalog(list_dir), messages))


def run_picker(
    list_dir: Path,
    messages: Messages,
    *,
    save_pause_seconds: float = 5.0,
    theme: UITheme = DEFAULT_THEME,
) -> SessionOutcome | None:
    """Run one interactive checklist session over ``list_dir``.

    Without a TTY on stdin the checklist is printed instead and ``None`` is
    returned. Filesystem errors propagate after the terminal was restored.
    """
    if not os.isatty(sys.stdin.fileno()):
        print_listing(list_dir, messages)
        return None

    catalog = load_catalog(list_dir)
    target = selection_path(list_dir)

    def save_selection(names: list[str]) -> None:
        write_selection(target, names)

    def show_saved(pause_seconds: float) -> None:
        draw_status(messages.saved_message(pause_seconds), theme)

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    outcome = run_main_loop(
        catalog,
        terminal,
        stdin_fd,
        RuntimeLoopTiming(save_pause_seconds=save_pause_seconds),
        RuntimeLoopCallbacks(
            draw=lambda current, full_repaint: draw(current, full_repaint, messages=messages, theme=theme),
            save_selection=save_selection,
            show_saved=show_saved,
        ),
    )
    logger.debug("session finished with %s", outcome.value)
    return outcome
