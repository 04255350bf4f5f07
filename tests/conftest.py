"""Pytest configuration and shared fixtures for adjgraph tests.

This module provides:
- A deterministic numpy RNG for randomized graph tests
- Three sample vertices and an empty adjacency table
- Debug mode reset around every test
"""

import os

import numpy as np
import pytest

from adjgraph import AdjacencyTable, Vertex
from adjgraph.diagnostics import set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def a() -> Vertex:
    return Vertex(1)


@pytest.fixture
def b() -> Vertex:
    return Vertex(2)


@pytest.fixture
def c() -> Vertex:
    return Vertex(3)


@pytest.fixture
def graph(a, b, c) -> AdjacencyTable:
    """Adjacency table holding vertices 1, 2 and 3 and no edges."""
    g = AdjacencyTable.create()
    for vertex in (a, b, c):
        g.add_vertex(vertex)
    return g


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode():
    """Run every test with debug mode off unless the test enables it."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)
