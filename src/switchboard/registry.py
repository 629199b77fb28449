"""
Binding tables backing the container.
"""

from __future__ import annotations

from typing import Any


class Registry:
    """
    Owns the mutable binding tables of a container.

    The registry only stores and answers membership queries; every resolution
    decision is made by the container on top of it. All keys are string
    identifiers.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._factories: set[str] = set()
        self._resolved: dict[str, Any] = {}
        self._interfaces: dict[str, str] = {}
        self._aliases: dict[str, str] = {}

    def set(self, identifier: str, value: Any) -> None:
        """Store or overwrite a direct binding."""
        self._entries[identifier] = value

    def mark_factory(self, identifier: str) -> None:
        """Mark an identifier as a factory whose results are never cached."""
        self._factories.add(identifier)

    def store_resolved(self, identifier: str, value: Any) -> None:
        """Put a concrete value into the resolved cache."""
        self._resolved[identifier] = value

    def add_alias(self, alias: str, identifier: str) -> None:
        self._aliases[alias] = identifier

    def add_interface(self, interface: str, identifier: str) -> None:
        self._interfaces[interface] = identifier

    def has(self, identifier: str) -> bool:
        """Check whether any table holds the identifier."""
        return (
            identifier in self._entries
            or identifier in self._resolved
            or identifier in self._interfaces
            or identifier in self._aliases
        )

    def is_factory(self, identifier: str) -> bool:
        return identifier in self._factories

    def is_resolved(self, identifier: str) -> bool:
        return identifier in self._resolved

    def redirect(self, identifier: str) -> str | None:
        """Return the identifier an alias or interface binding points at, if any."""
        if identifier in self._aliases:
            return self._aliases[identifier]
        return self._interfaces.get(identifier)

    def entry(self, identifier: str) -> Any:
        """Return the raw binding stored by ``set``."""
        return self._entries[identifier]

    def resolved(self, identifier: str) -> Any:
        return self._resolved[identifier]

    def resolved_count(self) -> int:
        return len(self._resolved)
