"""Vertex value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable


@dataclass(frozen=True)
class Vertex:
    """
    Immutable node wrapping an arbitrary payload.

    Two vertices are equal when their payloads are equal, so a vertex can be
    rebuilt from its payload and still address the same graph node. The
    payload may be None.

    Attributes:
        value: Hashable payload.

    Example:
        >>> Vertex.create(1) == Vertex(1)
        True
    """

    value: Hashable = None

    @classmethod
    def create(cls, value: Any = None) -> "Vertex":
        """Build a vertex holding ``value``."""
        return cls(value)

    def __repr__(self) -> str:
        return f"Vertex({self.value!r})"
