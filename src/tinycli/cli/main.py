#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import sys

from ..lib._util.ansi import bold as _bold, violet as _violet
from ..lib.core.app import App, Command, register
from ..lib.core.config import color_enabled as _color_enabled, resolve_settings
from ..lib.core.dispatch import print_help, run
from ..lib.core.version import format_version_string, package_version, vcs_revision

PROG = "tinycli-demo"


def _version_string() -> str:
    return format_version_string(package_version("tinycli"), vcs_revision("tinycli"))


def _cmd_hello(args: list[str]) -> None:
    """Greet the given names, or the world."""
    who = " ".join(args) if args else "world"
    print(f"Hello, {who}!")


def _cmd_args(args: list[str]) -> None:
    """Print each received argument on its own line."""
    for arg in args:
        print(arg)


def build_app() -> App:
    """Build the demo application registry."""
    color_enabled = _color_enabled(resolve_settings(), sys.stdout)
    app = App(
        name=PROG,
        display_name=_bold(_violet("tinycli demo", color_enabled), color_enabled),
        usage=f"{PROG} [command] [args...]",
        version=_version_string(),
        description="Example host program for the tinycli dispatcher",
    )
    register(app, Command("hello", f"{PROG} hello [name...]", _cmd_hello, "Greet someone"))
    register(app, Command("args", f"{PROG} args [arg...]", _cmd_args, "Echo arguments"))
    register(app, Command("help", f"{PROG} help", lambda _args: print_help(app), "Show this help"))
    register(
        app,
        Command("version", f"{PROG} version", lambda _args: print(app.version), "Show version"),
    )
    return app


def main(argv: list[str] | None = None) -> None:
    run(build_app(), argv if argv is not None else sys.argv)


if __name__ == "__main__":
    main()
