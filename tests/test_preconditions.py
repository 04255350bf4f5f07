"""Tests for argument checks."""

import pytest

from adjgraph.errors import (
    DuplicateEntityError,
    GraphError,
    InvalidConstructionError,
    NullArgumentError,
)
from adjgraph.preconditions import is_false, is_instance, is_true, not_equal, not_none


def test_not_none():
    """Test that only None fails."""
    not_none(0, "unused")
    not_none("", "unused")
    with pytest.raises(NullArgumentError, match="thing == None"):
        not_none(None, "thing == None")


def test_not_equal():
    """Test that equal values fail, including two Nones."""
    not_equal(1, 2, "unused")
    not_equal(None, 1, "unused")
    not_equal(1, None, "unused")
    with pytest.raises(InvalidConstructionError):
        not_equal(1, 1, "same")
    with pytest.raises(InvalidConstructionError):
        not_equal(None, None, "same")


def test_is_true_and_is_false():
    """Test the boolean checks and their default error."""
    is_true(True, "unused")
    is_false(False, "unused")
    with pytest.raises(GraphError, match="broken"):
        is_true(False, "broken")
    with pytest.raises(DuplicateEntityError):
        is_false(True, "exists", DuplicateEntityError)


def test_is_instance():
    """Test that the wrong type is a TypeError."""
    is_instance(1, int, "unused")
    with pytest.raises(TypeError, match="not a str"):
        is_instance(1, str, "not a str")


def test_errors_are_value_errors():
    """Test the shared base class."""
    assert issubclass(GraphError, ValueError)
    assert issubclass(NullArgumentError, GraphError)
