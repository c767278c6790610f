# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Application and command data model.

Pure data types plus ``register``.  The companion ``dispatch`` module
resolves argv against an ``App`` and renders help.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

Action = Callable[[list[str]], None]


@dataclass
class Command:
    """A named subcommand and the callback that handles it."""

    name: str
    usage: str
    action: Action
    # Optional one-line summary shown after the usage in help
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Command name must be a non-empty string")
        if not callable(self.action):
            raise TypeError(f"Action for command '{self.name}' is not callable")


@dataclass
class App:
    """Top-level application metadata and its command registry.

    Built once by the host before ``run`` is called and left alone after
    that.  ``commands`` keeps registration order, which is the order help
    lists them in.
    """

    name: str
    # Optional banner printed above the help text (may carry ANSI colors)
    display_name: str = ""
    usage: str = ""
    version: str = ""
    author: str = ""
    description: str = ""
    commands: list[Command] = field(default_factory=list)
    # Framework setting overrides (see tinycli.lib.core.config)
    settings: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        initial, self.commands = list(self.commands), []
        for command in initial:
            register(self, command)

    @property
    def command_names(self) -> list[str]:
        return [c.name for c in self.commands]


def register(app: App, command: Command) -> Command:
    """Append *command* to *app*'s registry.

    Raises ValueError when a command with the same name is already
    registered; names are the dispatch key and must be unique.
    """
    if command.name in app.command_names:
        raise ValueError(f"Command '{command.name}' is already registered in '{app.name}'")
    app.commands.append(command)
    return command
