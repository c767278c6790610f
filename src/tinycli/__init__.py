"""tinycli package.

A minimal framework for command-line programs with a flat list of named
subcommands::

    from tinycli import App, Command, register, run

    app = App(name="cli", usage="cli [command] [args...]", version="1.0.0")
    register(app, Command("hello", "cli hello [name...]", lambda args: print(args)))
    run(app, sys.argv)

Modules:
- tinycli.lib.core: App/Command model, dispatch, settings, version helpers
- tinycli.lib._util: ANSI colors, layered settings merge
- tinycli.lib.util: cell-width padding, debug logging
- tinycli.cli: demo host program (tinycli-demo)
"""

from .lib._util.ansi import color, supports_color
from .lib.core.app import Action, App, Command, register
from .lib.core.dispatch import find_command, print_help, render_help, run

__all__ = [
    "Action",
    "App",
    "Command",
    "color",
    "find_command",
    "print_help",
    "register",
    "render_help",
    "run",
    "supports_color",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("tinycli")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
