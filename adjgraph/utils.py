"""
Utility helpers for adjacency tables.

Provides deterministic vertex indexing and decimal weight summation.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any, Dict, Hashable, Iterable, List, Tuple

from .preconditions import not_none
from .weight import Number, Weight, is_weight_number


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Nodes are sorted by string representation for deterministic ordering.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    sorted_nodes = sorted(set(nodes), key=lambda x: str(x))
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


def weight_value(weight: Any) -> Any:
    """Return the number carried by ``weight``, unwrapping Weight instances."""
    if isinstance(weight, Weight):
        return weight.value
    return weight


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, numbers.Rational) and not isinstance(value, numbers.Integral):
        return Decimal(value.numerator) / Decimal(value.denominator)
    return Decimal(str(value))


def sum_weights(values: Iterable[Any]) -> Decimal:
    """
    Sum weights in decimal arithmetic.

    Floats go through their string form so ``0.1 + 0.2`` sums to
    ``Decimal('0.3')``; Decimal entries are added as they are. Fractions
    are divided out, so a non-terminating one such as ``Fraction(1, 3)`` is
    rounded to the current decimal context precision, as is any sum longer
    than that precision. None entries (unweighted edges) are skipped.

    Args:
        values: Weights, bare numbers, or None.

    Returns:
        The sum, ``Decimal(0)`` when nothing is summed.

    Raises:
        NullArgumentError: If values is None.
        TypeError: If an entry is neither None, a real number nor a Decimal.
    """
    not_none(values, "values == None")
    total = Decimal(0)
    for value in values:
        value = weight_value(value)
        if value is None:
            continue
        if not is_weight_number(value):
            raise TypeError(f"cannot sum weight of type {type(value).__name__}")
        total += _to_decimal(value)
    return total
