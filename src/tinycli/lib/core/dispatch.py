# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Argument dispatch and help output.

``run`` looks at the first token after the program path, finds the command
registered under that exact name and calls its action with whatever follows.
A missing or unknown token prints help instead; that is normal behavior, not
an error.  Exceptions raised by an action propagate to the caller untouched.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .._util.ansi import green, yellow
from ..util.cells import cell_padding, max_cells
from ..util.logging_utils import _log_debug
from .app import App, Command
from .config import color_enabled, help_layout, log_path, resolve_settings


def find_command(app: App, token: str) -> Command | None:
    """Return the first command named *token* in registration order."""
    for command in app.commands:
        if command.name == token:
            return command
    return None


def render_help(app: App, color: bool | None = None) -> str:
    """Return the help text for *app*.

    Sections: banner (if any), name, author and description (if set),
    version, usage, then one line per command.  When *color* is None it is
    decided from the app settings and stdout.
    """
    settings = resolve_settings(app.settings)
    if color is None:
        color = color_enabled(settings, sys.stdout)
    indent, gap = help_layout(settings)
    pad = " " * indent

    def section(label: str, body: str) -> list[str]:
        return [yellow(f"{label}:", color), f"{pad}{body}".rstrip()]

    lines: list[str] = []
    if app.display_name:
        lines.append(app.display_name)
    lines += section("Name", app.name)
    if app.author:
        lines += section("Author", app.author)
    if app.description:
        lines += section("Description", app.description)
    lines += section("Version", app.version)
    lines += section("Usage", app.usage)

    if app.commands:
        lines.append("")
        lines.append(yellow("Commands:", color))
        width = max_cells(c.name for c in app.commands) + gap
        for command in app.commands:
            padding = cell_padding(command.name, width)
            line = f"{pad}{green(command.name, color)}{padding}{command.usage}"
            if command.description:
                line = f"{line} - {command.description}"
            lines.append(line.rstrip())

    return "\n".join(lines)


def print_help(app: App) -> None:
    """Print the help text for *app* to stdout."""
    print(render_help(app))


def run(app: App, args: Sequence[str] | None = None) -> None:
    """Dispatch *args* (full argv, program path first) to a command of *app*.

    With no subcommand token, or a token that matches no registered name,
    prints help and invokes nothing.  Otherwise calls the matched action
    with the arguments after the token, on the calling thread.
    """
    if args is None:
        args = sys.argv
    settings = resolve_settings(app.settings)
    log_file = log_path(settings)

    def note(message: str) -> None:
        if log_file is not None:
            _log_debug(message, log_file)

    if len(args) < 2:
        note(f"{app.name}: no subcommand given, showing help")
        print_help(app)
        return

    token = args[1]
    command = find_command(app, token)
    if command is None:
        note(f"{app.name}: unknown subcommand '{token}', showing help")
        print_help(app)
        return

    rest = list(args[2:])
    note(f"{app.name}: dispatching '{command.name}' with {len(rest)} argument(s)")
    command.action(rest)
