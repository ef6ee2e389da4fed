"""
Runtime half of emitted key expressions.

Python-dialect expressions call :func:`canonical_name` on class objects; it
must agree with how introspection turns classes into declared types.
"""

from __future__ import annotations

from typing import Any

_UNQUALIFIED_MODULES = frozenset({"builtins"})


def class_path(cls: type[Any]) -> tuple[str, tuple[str, ...]]:
    """Return the ``(package, nested names)`` pair identifying a class."""
    module = cls.__module__
    package = "" if module in _UNQUALIFIED_MODULES else module
    return package, tuple(cls.__qualname__.split("."))


def canonical_name(cls: type[Any], nesting_delimiter: str = "$") -> str:
    """Canonical name of a class object, e.g. ``app.models.Outer$Inner``."""
    package, names = class_path(cls)
    prefix = f"{package}." if package else ""
    return prefix + nesting_delimiter.join(names)
