"""
In-memory undirected graph with live topology editing.

Usage:
    from hoproute.graph import Graph

    graph = Graph()
    graph.add_node("A")
    graph.add_node("B")
    graph.add_edge("A", "B")
    graph.neighbors("A")   # ["B"]

Every mutation is total: bad input never raises, the call just returns a
MutationResult explaining why nothing changed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from hoproute.config import NEIGHBOR_ORDER, validate_neighbor_order

logger = logging.getLogger(__name__)


class MutationResult(str, Enum):
    """Outcome of a Graph mutation. Only APPLIED means the graph changed."""

    APPLIED = "applied"
    INVALID_NODE = "invalid_node"
    DUPLICATE_NODE = "duplicate_node"
    MISSING_NODE = "missing_node"
    SELF_LOOP = "self_loop"
    DUPLICATE_EDGE = "duplicate_edge"
    MISSING_EDGE = "missing_edge"

    @property
    def applied(self) -> bool:
        return self is MutationResult.APPLIED

    def __bool__(self) -> bool:
        return self.applied


@dataclass(frozen=True)
class Position:
    """Display coordinate for a node. Never consulted by the router."""

    x: float
    y: float


def normalize_id(node: object) -> str | None:
    """Trim a node identifier, or return None if it is not usable."""
    if not isinstance(node, str):
        return None
    node = node.strip()
    return node or None


class Graph:
    """
    Undirected, unweighted graph keyed by string identifiers.

    Adjacency is stored as insertion-ordered dicts used as sets, so
    neighbor iteration is deterministic. With neighbor_order="sorted" the
    query methods return identifiers in ascending order instead.

    Invariants held after every call:
    - every node has an adjacency entry and vice versa
    - no node is its own neighbor
    - b in adjacency[a] exactly when a in adjacency[b]
    - positions only exist for present nodes
    """

    def __init__(self, neighbor_order: str | None = None) -> None:
        """
        Initialize an empty graph.

        Args:
            neighbor_order: "insertion" or "sorted". Defaults to config.NEIGHBOR_ORDER.

        Raises:
            ValueError: If neighbor_order is not a known policy
        """
        self._order = validate_neighbor_order(
            NEIGHBOR_ORDER if neighbor_order is None else neighbor_order
        )
        self._adj: dict[str, dict[str, None]] = {}
        self._positions: dict[str, Position] = {}

    @property
    def neighbor_order(self) -> str:
        return self._order

    def _ordered(self, items) -> list[str]:
        if self._order == "sorted":
            return sorted(items)
        return list(items)

    def _reject(self, result: MutationResult, action: str, *nodes: object) -> MutationResult:
        logger.debug(f"Ignored {action}({', '.join(map(repr, nodes))}): {result.value}")
        return result

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_node(self, node: str) -> MutationResult:
        """Add a node with no neighbors. Adding an existing node is a no-op."""
        name = normalize_id(node)
        if name is None:
            return self._reject(MutationResult.INVALID_NODE, "add_node", node)
        if name in self._adj:
            return self._reject(MutationResult.DUPLICATE_NODE, "add_node", node)

        self._adj[name] = {}
        return MutationResult.APPLIED

    def remove_node(self, node: str) -> MutationResult:
        """Remove a node, every edge touching it, and its position."""
        name = normalize_id(node)
        if name is None:
            return self._reject(MutationResult.INVALID_NODE, "remove_node", node)
        if name not in self._adj:
            return self._reject(MutationResult.MISSING_NODE, "remove_node", node)

        for neighbor in self._adj.pop(name):
            self._adj[neighbor].pop(name, None)
        self._positions.pop(name, None)
        return MutationResult.APPLIED

    def add_edge(self, a: str, b: str) -> MutationResult:
        """
        Connect two existing nodes.

        Returns:
            APPLIED, or the reason nothing changed (INVALID_NODE, SELF_LOOP,
            MISSING_NODE, DUPLICATE_EDGE)
        """
        first, second = normalize_id(a), normalize_id(b)
        if first is None or second is None:
            return self._reject(MutationResult.INVALID_NODE, "add_edge", a, b)
        if first == second:
            return self._reject(MutationResult.SELF_LOOP, "add_edge", a, b)
        if first not in self._adj or second not in self._adj:
            return self._reject(MutationResult.MISSING_NODE, "add_edge", a, b)
        if second in self._adj[first]:
            return self._reject(MutationResult.DUPLICATE_EDGE, "add_edge", a, b)

        self._adj[first][second] = None
        self._adj[second][first] = None
        return MutationResult.APPLIED

    def remove_edge(self, a: str, b: str) -> MutationResult:
        """Disconnect two nodes. Removing an edge that does not exist is a no-op."""
        first, second = normalize_id(a), normalize_id(b)
        if first is None or second is None:
            return self._reject(MutationResult.INVALID_NODE, "remove_edge", a, b)
        if first not in self._adj or second not in self._adj:
            return self._reject(MutationResult.MISSING_NODE, "remove_edge", a, b)
        if second not in self._adj[first]:
            return self._reject(MutationResult.MISSING_EDGE, "remove_edge", a, b)

        del self._adj[first][second]
        del self._adj[second][first]
        return MutationResult.APPLIED

    def set_position(self, node: str, x: float, y: float) -> MutationResult:
        """Attach a display coordinate to an existing node."""
        name = normalize_id(node)
        if name is None:
            return self._reject(MutationResult.INVALID_NODE, "set_position", node)
        if name not in self._adj:
            return self._reject(MutationResult.MISSING_NODE, "set_position", node)

        self._positions[name] = Position(x, y)
        return MutationResult.APPLIED

    def clear(self) -> None:
        """Remove every node, edge and position."""
        self._adj.clear()
        self._positions.clear()

    # =========================================================================
    # Queries
    # =========================================================================

    def has_node(self, node: str) -> bool:
        name = normalize_id(node)
        return name is not None and name in self._adj

    def neighbors(self, node: str) -> list[str]:
        """Neighbors of node in neighbor order, or [] if node is absent."""
        name = normalize_id(node)
        if name is None or name not in self._adj:
            return []
        return self._ordered(self._adj[name])

    def all_nodes(self) -> list[str]:
        """Snapshot of every node identifier."""
        return self._ordered(self._adj)

    def is_connected(self, a: str, b: str) -> bool:
        """Whether a and b share an edge. False if a is absent."""
        first, second = normalize_id(a), normalize_id(b)
        if first is None or first not in self._adj:
            return False
        return second in self._adj[first]

    def all_edges(self) -> list[tuple[str, str]]:
        """
        Every undirected edge exactly once.

        An edge is emitted from whichever endpoint is reached first; the
        reverse pair is remembered and skipped when the other endpoint
        comes up.
        """
        edges: list[tuple[str, str]] = []
        seen: set[tuple[str, str]] = set()
        for node in self.all_nodes():
            for neighbor in self.neighbors(node):
                if (neighbor, node) in seen:
                    continue
                seen.add((node, neighbor))
                edges.append((node, neighbor))
        return edges

    def get_position(self, node: str) -> Position | None:
        """Display coordinate for node, or None if none was set."""
        name = normalize_id(node)
        if name is None:
            return None
        return self._positions.get(name)

    @property
    def node_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adj.values()) // 2

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, str) and self.has_node(node)

    def __iter__(self) -> Iterator[str]:
        return iter(self.all_nodes())

    def __str__(self) -> str:
        lines = [
            f"{node} -> {', '.join(self.neighbors(node))}".rstrip()
            for node in self.all_nodes()
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(nodes={self.node_count}, "
            f"edges={self.edge_count}, neighbor_order={self._order!r})"
        )
