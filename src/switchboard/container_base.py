"""
Abstract container interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .keys import Identifier


class ContainerInterface(ABC):
    """
    Abstract interface for dependency containers.

    A container finds entries by identifier and returns them. Identifiers are
    strings; classes may be passed and are addressed by their qualified name.
    """

    @abstractmethod
    def get(self, identifier: Identifier) -> Any:
        """
        Find an entry by its identifier and return it.

        Args:
            identifier: Identifier of the entry to look for

        Returns:
            The entry

        Raises:
            EntryNotFoundError: If no entry is registered under the identifier
            ContainerError: If the entry exists but could not be produced
        """

    @abstractmethod
    def has(self, identifier: Identifier) -> bool:
        """
        Check whether an entry is registered under the identifier.

        ``has`` returning True does not mean ``get`` cannot fail, only that it
        will not raise EntryNotFoundError.
        """

    def find(self, identifier: Identifier) -> Any | None:
        """Return the entry for ``identifier``, or None if nothing is registered under it."""
        if not self.has(identifier):
            return None
        return self.get(identifier)
