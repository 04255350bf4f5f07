"""Argument checks shared by the value types and the graph."""

from __future__ import annotations

from typing import Any, Type

from .errors import GraphError, InvalidConstructionError, NullArgumentError


def _check(condition: bool, message: str, error: Type[GraphError]) -> None:
    if not condition:
        raise error(message)


def not_none(obj: Any, message: str) -> None:
    """Raise NullArgumentError if ``obj`` is None."""
    _check(obj is not None, message, NullArgumentError)


def not_equal(first: Any, second: Any, message: str) -> None:
    """Raise InvalidConstructionError if ``first == second``.

    Two None values count as equal.
    """
    _check(first != second, message, InvalidConstructionError)


def is_true(condition: bool, message: str, error: Type[GraphError] = GraphError) -> None:
    """Raise ``error`` unless ``condition`` holds."""
    _check(bool(condition), message, error)


def is_false(condition: bool, message: str, error: Type[GraphError] = GraphError) -> None:
    """Raise ``error`` if ``condition`` holds."""
    _check(not condition, message, error)


def is_instance(obj: Any, cls: type, message: str) -> None:
    """Raise TypeError unless ``obj`` is an instance of ``cls``."""
    if not isinstance(obj, cls):
        raise TypeError(message)
