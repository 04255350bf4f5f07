"""
Edge kinds: undirected Line and directed Arrow.

The set of edge kinds is closed. AdjacencyTable branches on exactly these two
classes when writing and reading neighbor entries.

An edge weight is any hashable, comparable value (a Weight or a bare number).
An unweighted edge reports None; passing ``weight=None`` explicitly is
rejected so that "no weight" is never confused with "a missing weight".
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional, Tuple

from .preconditions import is_instance, not_equal, not_none
from .vertex import Vertex

# Distinguishes an omitted weight from an explicit None.
_MISSING: Any = object()


def _resolve_weight(weight: Any) -> Optional[Any]:
    if weight is _MISSING:
        return None
    not_none(weight, "weight == None")
    return weight


def _check_endpoint(vertex: Any, name: str) -> None:
    not_none(vertex, f"{name} must be non-None.")
    is_instance(vertex, Vertex, f"{name} must be a Vertex, got {type(vertex).__name__}.")


class Edge(ABC):
    """Connection between exactly two vertices with an optional weight."""

    __slots__ = ()

    is_directed: ClassVar[bool]

    @abstractmethod
    def endpoints(self) -> Tuple[Vertex, Vertex]:
        """Return the two endpoints."""

    @abstractmethod
    def weight(self) -> Optional[Any]:
        """Return the weight, or None for an unweighted edge."""

    @abstractmethod
    def reversed(self) -> "Edge":
        """Return the same kind of edge with the endpoints swapped."""


class Directed(ABC):
    """An edge with a distinguished source and target."""

    __slots__ = ()

    @abstractmethod
    def source(self) -> Vertex:
        """Return the vertex the edge leaves."""

    @abstractmethod
    def target(self) -> Vertex:
        """Return the vertex the edge enters."""


class Line(Edge):
    """
    Undirected edge between two distinct vertices.

    Endpoints are an unordered pair: ``Line(a, b) == Line(b, a)``. They are
    reported by ``endpoints()`` in construction order.

    Args:
        first: One endpoint.
        second: The other endpoint; must differ from ``first``.
        weight: Optional weight. Omit for an unweighted line.

    Raises:
        NullArgumentError: If an endpoint is None or weight is passed as None.
        InvalidConstructionError: If ``first == second``.
        TypeError: If an endpoint is not a Vertex.
    """

    is_directed = False

    __slots__ = ("_endpoints", "_weight")

    def __init__(self, first: Vertex, second: Vertex, weight: Any = _MISSING):
        _check_endpoint(first, "first vertex")
        _check_endpoint(second, "second vertex")
        not_equal(first, second, "first and second must be distinct.")
        self._endpoints = (first, second)
        self._weight = _resolve_weight(weight)

    @classmethod
    def create(cls, first: Vertex, second: Vertex, weight: Any = _MISSING) -> "Line":
        """Build a line between ``first`` and ``second``."""
        return cls(first, second, weight)

    def endpoints(self) -> Tuple[Vertex, Vertex]:
        return self._endpoints

    def weight(self) -> Optional[Any]:
        return self._weight

    def reversed(self) -> "Line":
        first, second = self._endpoints
        return Line(second, first, _MISSING if self._weight is None else self._weight)

    def __eq__(self, other: object) -> bool:
        if type(other) is not Line:
            return NotImplemented
        return (
            frozenset(self._endpoints) == frozenset(other._endpoints)
            and self._weight == other._weight
        )

    def __hash__(self) -> int:
        return hash((frozenset(self._endpoints), self._weight))

    def __repr__(self) -> str:
        first, second = self._endpoints
        if self._weight is None:
            return f"Line({first!r}, {second!r})"
        return f"Line({first!r}, {second!r}, weight={self._weight!r})"


class Arrow(Edge, Directed):
    """
    Directed edge from ``source`` to ``target``.

    Order matters: ``Arrow(a, b) != Arrow(b, a)`` unless ``a == b``. Self-loops
    are allowed.

    Args:
        source: Vertex the arrow leaves.
        target: Vertex the arrow enters.
        weight: Optional weight. Omit for an unweighted arrow.

    Raises:
        NullArgumentError: If an endpoint is None or weight is passed as None.
        TypeError: If an endpoint is not a Vertex.
    """

    is_directed = True

    __slots__ = ("_source", "_target", "_weight")

    def __init__(self, source: Vertex, target: Vertex, weight: Any = _MISSING):
        _check_endpoint(source, "source")
        _check_endpoint(target, "target")
        self._source = source
        self._target = target
        self._weight = _resolve_weight(weight)

    @classmethod
    def create(cls, source: Vertex, target: Vertex, weight: Any = _MISSING) -> "Arrow":
        """Build an arrow from ``source`` to ``target``."""
        return cls(source, target, weight)

    def endpoints(self) -> Tuple[Vertex, Vertex]:
        return (self._source, self._target)

    def source(self) -> Vertex:
        return self._source

    def target(self) -> Vertex:
        return self._target

    def weight(self) -> Optional[Any]:
        return self._weight

    def reversed(self) -> "Arrow":
        return Arrow(self._target, self._source, _MISSING if self._weight is None else self._weight)

    def __eq__(self, other: object) -> bool:
        if type(other) is not Arrow:
            return NotImplemented
        return (
            self._source == other._source
            and self._target == other._target
            and self._weight == other._weight
        )

    def __hash__(self) -> int:
        return hash((self._source, self._target, self._weight))

    def __repr__(self) -> str:
        if self._weight is None:
            return f"Arrow({self._source!r}, {self._target!r})"
        return f"Arrow({self._source!r}, {self._target!r}, weight={self._weight!r})"
