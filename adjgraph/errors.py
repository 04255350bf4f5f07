"""Exceptions raised by adjgraph.

Every failure is a caller precondition violation reported at the offending
call. All of them derive from ``GraphError``, itself a ``ValueError``.
"""


class GraphError(ValueError):
    """Base class for graph precondition violations."""


class NullArgumentError(GraphError):
    """A required vertex, edge, collection or weight was None."""


class DuplicateEntityError(GraphError):
    """The vertex or vertex-pair relationship already exists."""


class UnknownEntityError(GraphError):
    """The vertex, or an edge endpoint, is not in the graph, or the edge is absent."""


class InvalidConstructionError(GraphError):
    """An edge was built from arguments that cannot form a valid edge."""


class InconsistentGraphError(GraphError):
    """The adjacency table violates a structural invariant."""
