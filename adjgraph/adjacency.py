"""
Adjacency-table graph.

The table maps each vertex to a dict from neighbor to the weight of the entry
reaching it (None when unweighted). Edges are not stored as objects: an edge
exists exactly when the entries it writes exist.

  - Arrow(a, b, w) writes table[a][b] = w.
  - Line(a, b, w) writes table[a][b] = w and table[b][a] = w.

Containment is read back from the entries alone, so after adding Line(a, b)
both Arrow(a, b) and Arrow(b, a) are contained, while after adding only
Arrow(a, b) the query for Line(a, b) is False.

Complexity:
    - add_vertex, add_edge, remove_edge, contains_*: O(1)
    - remove_vertex: O(V), every neighbor dict is purged
    - adjacency_matrix: O(V^2)
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Any, Collection, Dict, KeysView, List, Mapping, Optional

import numpy as np

from .diagnostics import check_mutation, is_debug_enabled
from .edges import Arrow, Edge, Line
from .errors import DuplicateEntityError, UnknownEntityError
from .graph import Graph
from .logging import get_logger
from .preconditions import is_false, is_instance, is_true, not_none
from .utils import node_index_map, sum_weights, weight_value
from .vertex import Vertex
from .weight import is_weight_number

logger = get_logger(__name__)

_Table = Dict[Vertex, Dict[Vertex, Optional[Any]]]


class AdjacencyTable(Graph):
    """
    Graph backed by a vertex -> {neighbor: weight} table.

    No parallel entries: an ordered vertex pair holds at most one weight, so
    adding any edge over an already related pair fails regardless of kind.

    Example:
        >>> a, b = Vertex(1), Vertex(2)
        >>> g = AdjacencyTable.create()
        >>> g.add_vertex(a); g.add_vertex(b)
        >>> g.add_edge(Line(a, b, 3))
        >>> dict(g.weights(b))
        {Vertex(1): 3}
    """

    def __init__(self):
        self._neighbors: _Table = {}

    @classmethod
    def create(cls) -> "AdjacencyTable":
        """Build an empty graph."""
        return cls()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors(self, vertex: Vertex) -> KeysView[Vertex]:
        self._require_vertex(vertex)
        return self._neighbors[vertex].keys()

    def weights(self, vertex: Vertex) -> Mapping[Vertex, Optional[Any]]:
        self._require_vertex(vertex)
        return MappingProxyType(self._neighbors[vertex])

    def contains_vertex(self, vertex: Vertex) -> bool:
        not_none(vertex, "vertex == None")
        is_instance(vertex, Vertex, f"expected a Vertex, got {type(vertex).__name__}")
        return vertex in self._neighbors

    def contains_all(self, vertices: Collection[Vertex]) -> bool:
        not_none(vertices, "vertices == None")
        return all(self.contains_vertex(vertex) for vertex in vertices)

    def vertices(self) -> KeysView[Vertex]:
        return self._neighbors.keys()

    def contains_edge(self, edge: Edge) -> bool:
        not_none(edge, "edge == None")
        is_true(
            self.contains_all(edge.endpoints()),
            f"edge endpoint(s) not in graph: {edge!r}",
            UnknownEntityError,
        )
        vertex, adjacent = edge.endpoints()
        if self._is_undirected(edge) and not self._has_entry(adjacent, vertex, edge.weight()):
            return False
        return self._has_entry(vertex, adjacent, edge.weight())

    def degree(self, vertex: Vertex) -> int:
        """Return the number of neighbor entries stored for ``vertex``."""
        self._require_vertex(vertex)
        return len(self._neighbors[vertex])

    def total_weight(self, vertex: Vertex) -> Decimal:
        """
        Return the decimal sum of the weights on ``vertex``'s entries.

        Unweighted entries contribute nothing; Weight instances are unwrapped.

        Raises:
            UnknownEntityError: If vertex is not in the graph.
            TypeError: If a stored weight is not a real number or Decimal.
        """
        self._require_vertex(vertex)
        return sum_weights(self._neighbors[vertex].values())

    def adjacency_matrix(self, order: Optional[List[Vertex]] = None) -> np.ndarray:
        """
        Build the dense weight matrix of the graph.

        M[i, j] is the weight of the entry i -> j, 1.0 for an unweighted
        entry and 0.0 where there is none. A Line shows up symmetrically, an
        Arrow in its source row only.

        Args:
            order: Vertices giving the row/column order. Defaults to all
                vertices sorted by string representation.

        Returns:
            (n, n) float64 array.

        Raises:
            UnknownEntityError: If order names a vertex not in the graph.
            ValueError: If order repeats a vertex.
            TypeError: If a stored weight is not a real number or Decimal.
        """
        if order is None:
            node_to_idx, nodes = node_index_map(self._neighbors)
        else:
            is_true(self.contains_all(order), "order names vertices not in graph.", UnknownEntityError)
            if len(set(order)) != len(order):
                raise ValueError("order must not repeat vertices.")
            nodes = list(order)
            node_to_idx = {node: idx for idx, node in enumerate(nodes)}

        n = len(nodes)
        W = np.zeros((n, n))

        for u in nodes:
            i = node_to_idx[u]
            for v, weight in self._neighbors[u].items():
                if v not in node_to_idx:
                    continue
                value = weight_value(weight)
                if value is None:
                    value = 1.0
                elif not is_weight_number(value):
                    raise TypeError(
                        f"entry {u!r} -> {v!r} has non-numeric weight {weight!r}"
                    )
                W[i, node_to_idx[v]] = float(value)

        return W

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        is_false(self.contains_vertex(vertex), f"vertex is already in graph: {vertex!r}", DuplicateEntityError)
        self._neighbors[vertex] = {}
        logger.debug("Added vertex %r", vertex)
        self._after_mutation()

    def remove_vertex(self, vertex: Vertex) -> None:
        is_true(self.contains_vertex(vertex), f"vertex not in graph: {vertex!r}", UnknownEntityError)
        del self._neighbors[vertex]

        # Any remaining vertex may hold an entry for the removed one.
        purged = 0
        for adjacent in self._neighbors.values():
            if vertex in adjacent:
                del adjacent[vertex]
                purged += 1

        logger.debug("Removed vertex %r and %d inbound entries", vertex, purged)
        self._after_mutation()

    def add_edge(self, edge: Edge) -> None:
        not_none(edge, "edge == None")
        is_true(
            self.contains_all(edge.endpoints()),
            f"endpoint(s) not in graph: {edge!r}",
            UnknownEntityError,
        )
        vertex, adjacent = edge.endpoints()
        undirected = self._is_undirected(edge)

        # No multigraphs: one weight per ordered pair.
        is_false(
            adjacent in self._neighbors[vertex],
            f"relationship already exists between {vertex!r} and {adjacent!r}",
            DuplicateEntityError,
        )

        self._neighbors[vertex][adjacent] = edge.weight()
        if undirected:
            self._neighbors[adjacent][vertex] = edge.weight()

        logger.debug("Added edge %r", edge)
        self._after_mutation(edge, added=True)

    def remove_edge(self, edge: Edge) -> None:
        is_true(self.contains_edge(edge), f"edge not in graph: {edge!r}", UnknownEntityError)
        vertex, adjacent = edge.endpoints()

        del self._neighbors[vertex][adjacent]
        if self._is_undirected(edge):
            del self._neighbors[adjacent][vertex]

        logger.debug("Removed edge %r", edge)
        self._after_mutation(edge, added=False)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_vertex(self, vertex: Vertex) -> None:
        is_true(self.contains_vertex(vertex), f"vertex not in graph: {vertex!r}", UnknownEntityError)

    def _has_entry(self, vertex: Vertex, adjacent: Vertex, weight: Optional[Any]) -> bool:
        entries = self._neighbors[vertex]
        return adjacent in entries and entries[adjacent] == weight

    @staticmethod
    def _is_undirected(edge: Edge) -> bool:
        if isinstance(edge, Line):
            return True
        if isinstance(edge, Arrow):
            return False
        raise TypeError(f"unsupported edge kind: {type(edge).__name__}")

    def _after_mutation(self, edge: Optional[Edge] = None, added: bool = True) -> None:
        if is_debug_enabled():
            check_mutation(self, edge, added)

    def __repr__(self) -> str:
        entries = sum(len(adjacent) for adjacent in self._neighbors.values())
        return f"AdjacencyTable(vertices={len(self._neighbors)}, entries={entries})"
