"""Structural checks for adjacency tables and the debug switch that enables them."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from ..edges import Edge, Line
from ..errors import InconsistentGraphError
from ..vertex import Vertex

if TYPE_CHECKING:
    from ..adjacency import AdjacencyTable

_DEBUG_ENV_VAR = "ADJGRAPH_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in ("1", "true", "yes", "on")


def is_debug_enabled() -> bool:
    """
    Return whether tables verify themselves after every mutation.

    The initial value comes from the ADJGRAPH_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn post-mutation verification on or off for all tables."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily turn post-mutation verification on (or off).

    Example
    -------
    >>> with debug_context():
    ...     table.remove_vertex(v)  # checked after the removal
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def find_dangling_references(table: "AdjacencyTable") -> List[Tuple[Vertex, Vertex]]:
    """
    List neighbor entries that point at vertices outside the graph.

    Parameters
    ----------
    table:
        Adjacency table to inspect.

    Returns
    -------
    list of (vertex, neighbor)
        One pair per offending entry; empty for a consistent table.
    """
    vertices = table.vertices()
    dangling = []
    for vertex in vertices:
        for neighbor in table.neighbors(vertex):
            if neighbor not in vertices:
                dangling.append((vertex, neighbor))
    return dangling


def assert_consistent(table: "AdjacencyTable") -> None:
    """
    Raise if ``table`` holds entries for vertices no longer in the graph.

    Raises
    ------
    InconsistentGraphError
        Listing the first few dangling entries.
    """
    dangling = find_dangling_references(table)
    if dangling:
        shown = ", ".join(f"{v!r}->{n!r}" for v, n in dangling[:5])
        raise InconsistentGraphError(
            f"{len(dangling)} neighbor entries reference missing vertices: {shown}"
        )


def assert_edge_entries(table: "AdjacencyTable", edge: Edge, present: bool = True) -> None:
    """
    Raise unless the entries ``edge`` writes are all present (or all gone).

    A Line owns both directions with the same weight; an Arrow owns only the
    source -> target entry. After a removal none of the owned entries may
    remain.

    Raises
    ------
    InconsistentGraphError
        Naming the first entry that does not match.
    """
    first, second = edge.endpoints()
    owned = [(first, second)]
    if isinstance(edge, Line):
        owned.append((second, first))

    for vertex, adjacent in owned:
        entries = table.weights(vertex)
        if present and (adjacent not in entries or entries[adjacent] != edge.weight()):
            raise InconsistentGraphError(
                f"entry {vertex!r}->{adjacent!r} missing or mismatched after adding {edge!r}"
            )
        if not present and adjacent in entries:
            raise InconsistentGraphError(
                f"entry {vertex!r}->{adjacent!r} left behind after removing {edge!r}"
            )


def check_mutation(table: "AdjacencyTable", edge: Optional[Edge] = None, added: bool = True) -> None:
    """Verify ``table`` after a mutation, including the entries of ``edge`` if given."""
    assert_consistent(table)
    if edge is not None:
        assert_edge_entries(table, edge, present=added)
