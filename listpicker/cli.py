"""Command-line front door for listpicker.

Parses CLI options, merges them with persisted settings, and configures
debug logging. Then dispatches into the interactive checklist session.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

from .app import print_listing, run_picker
from .config import APP_NAME, load_language, load_list_dir, load_save_pause_seconds, save_settings
from .messages import DEFAULT_LANGUAGE, available_languages, messages_for
from .storage import DEFAULT_LIST_DIR
from .terminal import TerminalError
from .ui_theme import PLAIN_THEME, available_theme_names, resolve_theme

DEBUG_ENV_VAR = "LISTPICKER_DEBUG"
DEFAULT_SAVE_PAUSE_SECONDS = 5.0


def _non_negative_float(value: str) -> float:
    """argparse type for non-negative second counts."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def configure_logging() -> None:
    """Send DEBUG logs to a file when ``LISTPICKER_DEBUG`` is set.

    The interactive screen owns stdout, so logging never targets the terminal.
    """
    if not os.environ.get(DEBUG_ENV_VAR):
        return
    log_dir = Path(user_log_dir(APP_NAME, appauthor=False))
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_dir / f"{APP_NAME}.log"),
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Pick which list files are active and save the choice to selected.txt.",
    )
    parser.add_argument(
        "list_dir",
        nargs="?",
        default=None,
        help=f"Directory holding list-*.txt files (default: {DEFAULT_LIST_DIR}).",
    )
    parser.add_argument("--lang", choices=available_languages(), default=None, help="UI language.")
    parser.add_argument(
        "--pause",
        type=_non_negative_float,
        default=None,
        help=f"Seconds to show the success message after saving (default: {DEFAULT_SAVE_PAUSE_SECONDS:g}).",
    )
    parser.add_argument("--theme", choices=available_theme_names(), default=None, help="UI color theme.")
    parser.add_argument("--no-color", action="store_true", help="Disable colors and reverse video.")
    parser.add_argument("--print", dest="print_only", action="store_true", help="Print the checklist and exit.")
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Remember the directory, language, and pause as defaults.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run one checklist session.

    Returns ``0`` for save, cancel, and force quit alike. I/O and terminal
    failures exit with a one-line message and a non-zero status.
    """
    args = build_parser().parse_args(argv)
    configure_logging()

    list_dir = Path(args.list_dir) if args.list_dir is not None else (load_list_dir() or DEFAULT_LIST_DIR)
    language = args.lang or load_language() or DEFAULT_LANGUAGE
    pause = args.pause
    if pause is None:
        pause = load_save_pause_seconds()
    if pause is None:
        pause = DEFAULT_SAVE_PAUSE_SECONDS
    theme = PLAIN_THEME if args.no_color else resolve_theme(args.theme)
    messages = messages_for(language)

    if args.save_settings:
        save_settings(list_dir, language, pause)

    try:
        if args.print_only:
            print_listing(list_dir, messages)
        else:
            run_picker(list_dir, messages, save_pause_seconds=pause, theme=theme)
    except (OSError, UnicodeError, TerminalError) as exc:
        logging.getLogger(__name__).debug("run aborted", exc_info=True)
        raise SystemExit(f"{APP_NAME}: {exc}") from exc
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
