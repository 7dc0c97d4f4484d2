"""Filesystem glue for list directories and the persisted selection file.

Scans a list directory for candidate files and reads/writes ``selected.txt``.
Errors are not swallowed here: callers decide how an ``OSError`` ends the run.
"""

from __future__ import annotations

import codecs
import contextlib
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LIST_DIR = Path("lists")
LIST_PREFIX = "list-"
LIST_SUFFIX = ".txt"
# Generated union of the other lists, never a selectable source.
AGGREGATE_LIST_NAME = "list-ultimate.txt"
SELECTION_FILENAME = "selected.txt"


def is_candidate_name(name: str) -> bool:
    return name.startswith(LIST_PREFIX) and name.endswith(LIST_SUFFIX) and name != AGGREGATE_LIST_NAME


def ensure_list_dir(list_dir: Path) -> Path:
    list_dir.mkdir(parents=True, exist_ok=True)
    return list_dir


def _is_utf8_name(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def scan_list_names(list_dir: Path) -> list[str]:
    """Return sorted candidate file names in ``list_dir``, creating it if missing.

    Names that are not valid UTF-8 (surrogate-escaped by ``os.scandir``) are
    skipped; they could not be written back to the selection file.
    """
    ensure_list_dir(list_dir)
    with os.scandir(list_dir) as it:
        names = [
            entry.name
            for entry in it
            if entry.is_file() and is_candidate_name(entry.name) and _is_utf8_name(entry.name)
        ]
    names.sort()
    logger.debug("found %d list files in %s", len(names), list_dir)
    return names


def selection_path(list_dir: Path) -> Path:
    return list_dir / SELECTION_FILENAME


def _decode_line(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def read_lines(path: Path) -> list[str]:
    """Read ``path`` as lines, decoding each line on its own.

    A stray invalid byte only affects its own line: it falls back to latin-1
    while every other line stays UTF-8. A leading BOM is dropped.
    """
    data = path.read_bytes()
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    return [_decode_line(raw) for raw in data.splitlines()]


def read_selection(path: Path) -> list[str]:
    """Load previously selected names, one per line.

    A missing file means nothing was selected before. Lines are returned as-is
    (minus line terminators); lines that match no list file are harmless.
    """
    if not path.exists():
        return []
    names = read_lines(path)
    logger.debug("read %d selected names from %s", len(names), path)
    return names


def write_selection(path: Path, names: Iterable[str]) -> None:
    """Replace ``path`` with one name per line; no names gives an empty file.

    Content is encoded and written to a sibling temp file first, then moved
    over ``path``, so a failed save leaves the previous record intact.
    """
    names = list(names)
    payload = "".join(f"{name}\n" for name in names).encode("utf-8")
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise
    logger.info("wrote %d selected names to %s", len(names), path)
