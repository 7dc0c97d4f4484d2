"""Tests for session bootstrap, the non-TTY fallback, and save wiring."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from listpicker import app
from listpicker.key_handlers import SessionOutcome
from listpicker.messages import ENGLISH


class RunPickerTests(unittest.TestCase):
    def _list_dir(self, tmp: str) -> Path:
        list_dir = Path(tmp) / "lists"
        list_dir.mkdir()
        for name in ("list-a.txt", "list-b.txt", "list-ultimate.txt"):
            (list_dir / name).write_text("", encoding="utf-8")
        return list_dir

    def test_non_tty_stdin_prints_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            list_dir = self._list_dir(tmp)
            stdout = io.StringIO()
            with mock.patch("listpicker.app.os.isatty", return_value=False), mock.patch(
                "listpicker.app.sys.stdin"
            ), mock.patch("listpicker.app.sys.stdout", stdout), mock.patch(
                "listpicker.app.run_main_loop"
            ) as loop_mock:
                result = app.run_picker(list_dir, ENGLISH)

        self.assertIsNone(result)
        loop_mock.assert_not_called()
        self.assertEqual(stdout.getvalue(), "[ ] list-a.txt\n[ ] list-b.txt\n")

    def test_session_save_callback_writes_selection_file(self) -> None:
        def fake_loop(catalog, _terminal, _fd, timing, callbacks):
            catalog.toggle_current()
            callbacks.save_selection(catalog.selected_names())
            return SessionOutcome.SAVED

        with tempfile.TemporaryDirectory() as tmp:
            list_dir = self._list_dir(tmp)
            (list_dir / "selected.txt").write_text("list-b.txt\n", encoding="utf-8")
            with mock.patch("listpicker.app.os.isatty", return_value=True), mock.patch(
                "listpicker.app.sys.stdin"
            ), mock.patch("listpicker.app.sys.stdout"), mock.patch(
                "listpicker.app.TerminalController"
            ), mock.patch("listpicker.app.run_main_loop", side_effect=fake_loop):
                result = app.run_picker(list_dir, ENGLISH, save_pause_seconds=0)

            saved = (list_dir / "selected.txt").read_text(encoding="utf-8")

        self.assertIs(result, SessionOutcome.SAVED)
        self.assertEqual(saved, "list-a.txt\nlist-b.txt\n")

    def test_cancelled_session_leaves_selection_file_untouched(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            list_dir = self._list_dir(tmp)
            (list_dir / "selected.txt").write_text("list-b.txt\nkeep-me\n", encoding="utf-8")
            with mock.patch("listpicker.app.os.isatty", return_value=True), mock.patch(
                "listpicker.app.sys.stdin"
            ), mock.patch("listpicker.app.sys.stdout"), mock.patch(
                "listpicker.app.TerminalController"
            ), mock.patch("listpicker.app.run_main_loop", return_value=SessionOutcome.CANCELLED):
                result = app.run_picker(list_dir, ENGLISH)

            saved = (list_dir / "selected.txt").read_text(encoding="utf-8")

        self.assertIs(result, SessionOutcome.CANCELLED)
        self.assertEqual(saved, "list-b.txt\nkeep-me\n")


if __name__ == "__main__":
    unittest.main()
