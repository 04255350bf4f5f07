"""adjgraph - an in-memory graph of value vertices joined by Lines and Arrows."""

__version__ = "0.1.0"

from .adjacency import AdjacencyTable
from .diagnostics import (
    assert_consistent,
    assert_edge_entries,
    debug_context,
    find_dangling_references,
    is_debug_enabled,
    set_debug_enabled,
)
from .edges import Arrow, Directed, Edge, Line
from .errors import (
    DuplicateEntityError,
    GraphError,
    InconsistentGraphError,
    InvalidConstructionError,
    NullArgumentError,
    UnknownEntityError,
)
from .graph import Graph
from .logging import configure_logging, get_logger, set_log_level
from .utils import node_index_map, sum_weights
from .vertex import Vertex
from .weight import Weight

__all__ = [
    "AdjacencyTable",
    "Arrow",
    "Directed",
    "DuplicateEntityError",
    "Edge",
    "Graph",
    "GraphError",
    "InconsistentGraphError",
    "InvalidConstructionError",
    "Line",
    "NullArgumentError",
    "UnknownEntityError",
    "Vertex",
    "Weight",
    "assert_consistent",
    "assert_edge_entries",
    "configure_logging",
    "debug_context",
    "find_dangling_references",
    "get_logger",
    "is_debug_enabled",
    "node_index_map",
    "set_debug_enabled",
    "set_log_level",
    "sum_weights",
]

# Example usage:
# from adjgraph import AdjacencyTable, Line, Vertex
#
# g = AdjacencyTable.create()
# a, b = Vertex(1), Vertex(2)
# g.add(a)
# g.add(b)
# g.add(Line(a, b, 5))
# g.weights(a)  # {Vertex(2): 5}
