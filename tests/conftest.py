"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from hoproute import BFSRouter, Graph


@pytest.fixture
def graph() -> Graph:
    """Return an empty graph with insertion neighbor order."""
    return Graph(neighbor_order="insertion")


@pytest.fixture
def diamond() -> Graph:
    """
    Return the four-node diamond A-B, B-C, A-D, D-C.

    Two shortest A->C routes exist; insertion order makes A-B-C the winner.
    """
    g = Graph(neighbor_order="insertion")
    for node in ("A", "B", "C", "D"):
        g.add_node(node)
    for a, b in (("A", "B"), ("B", "C"), ("A", "D"), ("D", "C")):
        g.add_edge(a, b)
    return g


@pytest.fixture
def two_components() -> Graph:
    """Return a graph with components {A, B, C} and {X, Y}."""
    g = Graph(neighbor_order="insertion")
    for node in ("A", "B", "C", "X", "Y"):
        g.add_node(node)
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    g.add_edge("X", "Y")
    return g


@pytest.fixture
def router(diamond: Graph) -> BFSRouter:
    """Return a router bound to the diamond graph."""
    return BFSRouter(diamond)
