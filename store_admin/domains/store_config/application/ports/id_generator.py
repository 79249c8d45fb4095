"""
Identifier generator port.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IIdGenerator(Protocol):
    """Produces opaque unique identifiers for aggregates and sub-entities."""

    def __call__(self) -> str: ...
