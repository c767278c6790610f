# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the ANSI color helpers."""

import io
import os
import unittest
import unittest.mock

from tinycli.lib._util.ansi import (
    bold,
    color,
    green,
    strip_ansi,
    supports_color,
    violet,
    yellow,
)


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class _ClosedStream(io.StringIO):
    def isatty(self) -> bool:
        raise ValueError("I/O operation on closed file")


class SupportsColorTests(unittest.TestCase):
    def test_no_color_wins(self) -> None:
        env = {"NO_COLOR": "1", "FORCE_COLOR": "1"}
        with unittest.mock.patch.dict(os.environ, env, clear=True):
            self.assertFalse(supports_color(_TtyStream()))

    def test_force_color(self) -> None:
        with unittest.mock.patch.dict(os.environ, {"FORCE_COLOR": "1"}, clear=True):
            self.assertTrue(supports_color(io.StringIO()))

    def test_force_color_zero_is_ignored(self) -> None:
        with unittest.mock.patch.dict(os.environ, {"FORCE_COLOR": "0"}, clear=True):
            self.assertFalse(supports_color(io.StringIO()))

    def test_tty_detection(self) -> None:
        with unittest.mock.patch.dict(os.environ, {}, clear=True):
            self.assertTrue(supports_color(_TtyStream()))
            self.assertFalse(supports_color(io.StringIO()))

    def test_broken_stream_means_no_color(self) -> None:
        with unittest.mock.patch.dict(os.environ, {}, clear=True):
            self.assertFalse(supports_color(_ClosedStream()))


class ColorTests(unittest.TestCase):
    def test_disabled_returns_text_unchanged(self) -> None:
        for fn in (bold, yellow, green, violet):
            self.assertEqual(fn("text", False), "text")

    def test_enabled_wraps_with_sgr_code(self) -> None:
        self.assertEqual(color("x", "31", True), "\x1b[31mx\x1b[0m")
        self.assertEqual(green("ok", True), "\x1b[32mok\x1b[0m")
        self.assertEqual(yellow("Usage:", True), "\x1b[33mUsage:\x1b[0m")

    def test_nested_colors_strip_cleanly(self) -> None:
        text = bold(violet("banner", True), True)
        self.assertEqual(strip_ansi(text), "banner")

    def test_strip_leaves_plain_text(self) -> None:
        self.assertEqual(strip_ansi("plain [text]"), "plain [text]")


if __name__ == "__main__":
    unittest.main()
