"""Regression tests for raw-key decoding.

Covers ESC timing, arrow sequences, Enter variants, and Ctrl+C mapping.
These tests protect interactive input handling in raw terminal mode.
"""

import os
import time
import unittest

from listpicker import input as input_mod


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()
        os.close(self.read_fd)
        os.close(self.write_fd)

    def _keys(self, payload: bytes, count: int) -> list[str]:
        os.write(self.write_fd, payload)
        return [input_mod.read_key(self.read_fd, timeout_ms=20) for _ in range(count)]

    def test_timeout_without_input_returns_empty_token(self) -> None:
        started = time.monotonic()
        key = input_mod.read_key(self.read_fd, timeout_ms=10)
        elapsed = time.monotonic() - started

        self.assertEqual(key, "")
        self.assertLess(elapsed, 0.5)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(self._keys(b"\x1b[A\x1b[B", 2), ["UP", "DOWN"])

    def test_application_mode_arrows_are_recognized(self) -> None:
        self.assertEqual(self._keys(b"\x1bOA\x1bOB", 2), ["UP", "DOWN"])

    def test_space_is_returned_literally(self) -> None:
        self.assertEqual(self._keys(b" ", 1), [" "])

    def test_enter_variants_are_distinguished(self) -> None:
        self.assertEqual(self._keys(b"\r\n", 2), ["ENTER_CR", "ENTER_LF"])

    def test_ctrl_c_byte_is_recognized(self) -> None:
        self.assertEqual(self._keys(b"\x03", 1), ["CTRL_C"])

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        os.write(self.write_fd, b"\x1b")
        started = time.monotonic()
        key = input_mod.read_key(self.read_fd, timeout_ms=20)
        elapsed = time.monotonic() - started

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._keys(b"\x1ba", 2), ["ESC", "a"])

    def test_modified_arrow_is_consumed_as_single_unmapped_key(self) -> None:
        self.assertEqual(self._keys(b"\x1b[1;5A ", 2), ["ESC", " "])

    def test_multibyte_character_is_decoded_whole(self) -> None:
        self.assertEqual(self._keys("й".encode("utf-8"), 1), ["й"])


if __name__ == "__main__":
    unittest.main()
