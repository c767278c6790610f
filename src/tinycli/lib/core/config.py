# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Framework settings: defaults, environment overrides, host overrides.

These settings control how tinycli itself behaves (help colors, layout,
debug log).  They never carry values for host commands.
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, TextIO

from .._util.ansi import supports_color
from .._util.config_stack import ConfigScope, ConfigStack

ENV_COLOR = "TINYCLI_COLOR"
ENV_LOG_FILE = "TINYCLI_LOG_FILE"

COLOR_MODES = ("auto", "always", "never")

DEFAULTS: dict[str, Any] = {
    "color": "auto",
    "log_file": None,
    "help": {
        "indent": 4,
        "gap": 2,
    },
}


def _env_settings() -> dict[str, Any]:
    """Collect settings from ``TINYCLI_*`` environment variables."""
    data: dict[str, Any] = {}
    mode = os.environ.get(ENV_COLOR, "").strip().lower()
    if mode in COLOR_MODES:
        data["color"] = mode
    log_file = os.environ.get(ENV_LOG_FILE, "").strip()
    if log_file:
        data["log_file"] = log_file
    return data


def settings_stack(overrides: dict | None = None) -> ConfigStack:
    """Build the settings stack: defaults < env < *overrides*."""
    stack = ConfigStack()
    stack.push(ConfigScope("defaults", DEFAULTS))
    stack.push(ConfigScope("env", _env_settings()))
    if overrides:
        stack.push(ConfigScope("app", overrides))
    return stack


def resolve_settings(overrides: dict | None = None) -> dict[str, Any]:
    """Return the effective settings dict for *overrides*."""
    return copy.deepcopy(settings_stack(overrides).resolve())


def log_path(settings: dict | None = None) -> Path | None:
    """Return the debug log path, or None when logging is off."""
    if settings is None:
        settings = resolve_settings()
    value = settings.get("log_file")
    if not value:
        return None
    return Path(value).expanduser()


def color_enabled(settings: dict, stream: TextIO | None = None) -> bool:
    """Decide whether help output to *stream* should be colored."""
    mode = settings.get("color", "auto")
    if mode == "always":
        return True
    if mode == "never":
        return False
    return supports_color(stream)


def help_layout(settings: dict) -> tuple[int, int]:
    """Return ``(indent, gap)`` for the help renderer."""
    section = settings.get("help") or {}
    indent = section.get("indent", DEFAULTS["help"]["indent"])
    gap = section.get("gap", DEFAULTS["help"]["gap"])
    return max(int(indent), 0), max(int(gap), 1)
