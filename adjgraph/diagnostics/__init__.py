"""Consistency checks and debug mode for adjgraph."""

from .core import (
    assert_consistent,
    assert_edge_entries,
    check_mutation,
    debug_context,
    find_dangling_references,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "find_dangling_references",
    "assert_consistent",
    "assert_edge_entries",
    "check_mutation",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
