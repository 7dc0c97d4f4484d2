"""Main interactive event loop for the checklist screen.

Polls for keys with a short timeout, applies transitions, and redraws only
when a transition changed something. Feature logic lives in callbacks.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from .catalog import Catalog
from .input import read_key
from .key_handlers import SelectionKeyHandler, SessionOutcome
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_timeout_ms: int = 16
    save_pause_seconds: float = 5.0


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    draw: Callable[[Catalog, bool], None]
    save_selection: Callable[[list[str]], None]
    show_saved: Callable[[float], None]
    sleep: Callable[[float], None] = time.sleep


def run_main_loop(
    catalog: Catalog,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> SessionOutcome:
    """Run the checklist until save, cancel, or force quit.

    The terminal stays in raw alternate-screen mode for the whole session,
    including the post-save pause, and is restored on every exit path.
    """
    handler = SelectionKeyHandler(catalog)
    skip_next_lf = False

    with terminal.raw_mode():
        callbacks.draw(catalog, True)
        while True:
            try:
                key = read_key(stdin_fd, timeout_ms=timing.poll_timeout_ms)
            except KeyboardInterrupt:
                key = "CTRL_C"
            if key == "":
                continue
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue

            if key == "ENTER_CR":
                key = "ENTER"
                skip_next_lf = True
            elif key == "ENTER_LF":
                key = "ENTER"
                skip_next_lf = False
            else:
                skip_next_lf = False

            result = handler.handle(key)
            if result.outcome is SessionOutcome.SAVED:
                callbacks.save_selection(catalog.selected_names())
                callbacks.show_saved(timing.save_pause_seconds)
                if timing.save_pause_seconds > 0:
                    callbacks.sleep(timing.save_pause_seconds)
                logger.info("session saved")
                return result.outcome
            if result.outcome is not None:
                logger.info("session ended without saving: %s", result.outcome.value)
                return result.outcome
            if result.redraw:
                callbacks.draw(catalog, False)
