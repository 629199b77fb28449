"""
Identifier handling for container entries.

Entries are keyed by strings. Classes are accepted anywhere an identifier is
expected and are converted to their fully-qualified name, so a class and its
dotted path address the same entry.
"""

from __future__ import annotations

import builtins
import importlib
import inspect
from typing import Any

Identifier = str | type


def identifier_of(key: Identifier) -> str:
    """Return the string identifier for a key."""
    if isinstance(key, str):
        return key
    if inspect.isclass(key):
        if key.__module__ == "builtins":
            return key.__qualname__
        return f"{key.__module__}.{key.__qualname__}"
    raise TypeError(f"Container identifiers must be strings or classes, got {key!r}")


def locate(name: str) -> Any:
    """
    Find the object named by a dotted path.

    The longest importable module prefix is imported and the remaining parts are
    looked up as attributes, so nested classes resolve too. Names without a dot
    are looked up in ``builtins``.

    Raises:
        LookupError: If nothing is found under that name
    """
    if not name:
        raise LookupError("Cannot locate an empty name")

    parts = name.split(".")
    if len(parts) == 1:
        try:
            return getattr(builtins, name)
        except AttributeError as e:
            raise LookupError(f"No builtin named {name!r}") from e

    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            found: Any = importlib.import_module(module_name)
        except ModuleNotFoundError:
            continue
        try:
            for attribute in parts[split:]:
                found = getattr(found, attribute)
        except AttributeError as e:
            raise LookupError(f"Module {module_name!r} has no attribute path {name!r}") from e
        return found

    raise LookupError(f"No module found for {name!r}")


def is_interface(cls: Any) -> bool:
    """Check whether ``cls`` is an interface: an abstract class or a Protocol."""
    if not inspect.isclass(cls):
        return False
    if getattr(cls, "_is_protocol", False):
        return True
    return inspect.isabstract(cls)
