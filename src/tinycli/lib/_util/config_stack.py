"""Generic layered settings resolution.

Domain-agnostic: no tinycli service dependencies.  Layers are plain dicts
supplied by the caller; nothing here reads files.

A **scope** is one named layer ("defaults", "env", "app"); a **stack**
holds scopes lowest-priority first and folds them with ``deep_merge``.
"""

from __future__ import annotations

from dataclasses import dataclass


def deep_merge(base: dict, override: dict) -> dict:
    """Merge *override* onto *base* and return a **new** dict.

    Nested dicts merge key by key.  A ``None`` in *override* removes the
    key.  Any other value replaces what *base* had.  Key order follows
    *base*, with keys new in *override* appended.
    """
    merged: dict = {}
    for key in list(base) + [k for k in override if k not in base]:
        if key not in override:
            merged[key] = base[key]
            continue
        value = override[key]
        if value is None:
            continue
        current = base.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class ConfigScope:
    """A single layer in the settings stack."""

    level: str
    data: dict


class ConfigStack:
    """Ordered collection of settings scopes, lowest-priority first.

    Usage::

        stack = ConfigStack()
        stack.push(ConfigScope("defaults", DEFAULTS))
        stack.push(ConfigScope("app", app.settings))
        resolved = stack.resolve()
    """

    def __init__(self) -> None:
        self._scopes: list[ConfigScope] = []

    def push(self, scope: ConfigScope) -> None:
        """Append a scope (higher priority than all previous)."""
        self._scopes.append(scope)

    def resolve(self) -> dict:
        """Fold all scopes in push order and return the result."""
        result: dict = {}
        for scope in self._scopes:
            result = deep_merge(result, scope.data)
        return result
