"""
Error kinds raised by the container.
"""

from __future__ import annotations


class ContainerError(Exception):
    """Structural failure while configuring the container or resolving an entry."""


class EntryNotFoundError(ContainerError, LookupError):
    """No entry is registered under the requested identifier."""

    MESSAGE_FORMAT = "Entry [{}] was not found in container"

    def __init__(self, identifier: str):
        super().__init__(self.MESSAGE_FORMAT.format(identifier))
        self.identifier = identifier


class CircularReferenceError(ContainerError):
    """An alias or interface binding eventually points back to itself."""

    def __init__(self, chain: list[str]):
        super().__init__(f"Circular alias/interface reference: {' -> '.join(chain)}")
        self.chain = chain
