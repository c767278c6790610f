# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the best-effort debug log."""

import os
import re
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from tinycli.lib.util.logging_utils import _log_debug


class LogDebugTests(unittest.TestCase):
    def test_appends_timestamped_lines(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            log_file = Path(td) / "nested" / "debug.log"
            _log_debug("first", log_file)
            _log_debug("second", log_file)
            lines = log_file.read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 2)
        self.assertRegex(lines[0], r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] first$")
        self.assertTrue(lines[1].endswith("] second"))

    def test_uses_env_path_when_none_given(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            log_file = Path(td) / "env.log"
            with unittest.mock.patch.dict(os.environ, {"TINYCLI_LOG_FILE": str(log_file)}, clear=True):
                _log_debug("from env")
            self.assertIn("from env", log_file.read_text(encoding="utf-8"))

    def test_noop_without_configured_path(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with unittest.mock.patch.dict(os.environ, {}, clear=True):
                _log_debug("nowhere")
            self.assertEqual(list(Path(td).iterdir()), [])

    def test_io_errors_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            # A directory where the file should be makes open() fail
            target = Path(td) / "is-a-dir"
            target.mkdir()
            _log_debug("ignored", target)
            self.assertTrue(target.is_dir())

    def test_message_is_written_verbatim(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            log_file = Path(td) / "debug.log"
            _log_debug("cli: unknown subcommand 'x y', showing help", log_file)
            content = log_file.read_text(encoding="utf-8")
        self.assertTrue(re.search(r"cli: unknown subcommand 'x y', showing help\n$", content))


if __name__ == "__main__":
    unittest.main()
