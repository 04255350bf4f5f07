"""
Graph contract.

Declares the operations every graph container supports, independent of how
adjacency is stored. Vertex and edge operations have distinct names; the
``add``/``remove``/``contains`` conveniences dispatch on the argument type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Collection, Iterator, Mapping, Optional, Set

from .edges import Edge
from .preconditions import not_none
from .vertex import Vertex


class Graph(ABC):
    """
    Abstract graph of vertices joined by Lines and Arrows.

    Failing preconditions raise a GraphError subclass; query results are
    read-only.
    """

    @abstractmethod
    def neighbors(self, vertex: Vertex) -> Set[Vertex]:
        """
        Return the vertices reachable from ``vertex`` through one entry.

        Raises:
            NullArgumentError: If vertex is None.
            UnknownEntityError: If vertex is not in the graph.
        """

    @abstractmethod
    def weights(self, vertex: Vertex) -> Mapping[Vertex, Optional[Any]]:
        """
        Return a mapping from each neighbor of ``vertex`` to the entry weight.

        Raises:
            NullArgumentError: If vertex is None.
            UnknownEntityError: If vertex is not in the graph.
        """

    @abstractmethod
    def add_vertex(self, vertex: Vertex) -> None:
        """Add ``vertex``; raises DuplicateEntityError if already present."""

    @abstractmethod
    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove ``vertex`` and every entry referencing it; raises UnknownEntityError if absent."""

    @abstractmethod
    def contains_vertex(self, vertex: Vertex) -> bool:
        """Return whether ``vertex`` is in the graph."""

    @abstractmethod
    def contains_all(self, vertices: Collection[Vertex]) -> bool:
        """Return whether every vertex in ``vertices`` is in the graph."""

    @abstractmethod
    def vertices(self) -> Set[Vertex]:
        """Return a read-only view of the vertices in the graph."""

    @abstractmethod
    def add_edge(self, edge: Edge) -> None:
        """
        Add ``edge``.

        Raises:
            UnknownEntityError: If an endpoint is not in the graph.
            DuplicateEntityError: If the endpoints are already related.
        """

    @abstractmethod
    def remove_edge(self, edge: Edge) -> None:
        """
        Remove ``edge``.

        Raises:
            UnknownEntityError: If an endpoint is not in the graph or the
                edge is not contained.
        """

    @abstractmethod
    def contains_edge(self, edge: Edge) -> bool:
        """
        Return whether the entries written by ``edge`` are present.

        Raises:
            UnknownEntityError: If an endpoint is not in the graph.
        """

    def add(self, item: Vertex | Edge) -> None:
        """Add a vertex or an edge."""
        if isinstance(self._dispatch(item), Vertex):
            self.add_vertex(item)
        else:
            self.add_edge(item)

    def remove(self, item: Vertex | Edge) -> None:
        """Remove a vertex or an edge."""
        if isinstance(self._dispatch(item), Vertex):
            self.remove_vertex(item)
        else:
            self.remove_edge(item)

    def contains(self, item: Vertex | Edge) -> bool:
        """Return whether a vertex or an edge is in the graph."""
        if isinstance(self._dispatch(item), Vertex):
            return self.contains_vertex(item)
        return self.contains_edge(item)

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __len__(self) -> int:
        return len(self.vertices())

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices())

    @staticmethod
    def _dispatch(item: Any) -> Vertex | Edge:
        not_none(item, "item == None")
        if not isinstance(item, (Vertex, Edge)):
            raise TypeError(f"expected a Vertex or an Edge, got {type(item).__name__}")
        return item
