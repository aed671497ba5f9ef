"""
Search state dataclasses for tracking a single BFS run.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum


class RouteOutcome(str, Enum):
    """How a search ended."""

    FOUND = "found"
    SAME_NODE = "same_node"
    INVALID_INPUT = "invalid_input"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class RouteResult:
    """
    Complete record of a finished search.

    Attributes:
        source: Node the search started from
        destination: Node the search was looking for
        path: Source-to-destination path, or None if no path was found
        visit_order: Nodes in the order they were dequeued
        log: Human-readable trace entries, in order
        outcome: Why the search ended
    """

    source: str
    destination: str
    path: tuple[str, ...] | None
    visit_order: tuple[str, ...]
    log: tuple[str, ...]
    outcome: RouteOutcome

    @property
    def found(self) -> bool:
        """Whether a path was returned."""
        return self.path is not None

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, or None if there is no path."""
        if self.path is None:
            return None
        return len(self.path) - 1


@dataclass
class SearchState:
    """
    Mutable state during an active search. Discarded after each run.

    Attributes:
        source: Starting node
        destination: Target node
        frontier: Discovered nodes waiting to be expanded (FIFO)
        discovered: Every node ever enqueued
        predecessor: Node each discovered node was first reached from
        visit_order: Nodes dequeued so far
        log: Trace entries written so far
    """

    source: str
    destination: str
    frontier: deque[str] = field(default_factory=deque)
    discovered: set[str] = field(default_factory=set)
    predecessor: dict[str, str] = field(default_factory=dict)
    visit_order: list[str] = field(default_factory=list)
    log: list[str] = field(default_factory=list)

    def seed(self) -> None:
        """Put the source on the frontier."""
        self.frontier.append(self.source)
        self.discovered.add(self.source)

    def discover(self, node: str, parent: str) -> bool:
        """Enqueue node if it has not been seen. Returns True if it was new."""
        if node in self.discovered:
            return False
        self.discovered.add(node)
        self.predecessor[node] = parent
        self.frontier.append(node)
        return True

    def next_node(self) -> str:
        """Dequeue the head of the frontier and record the visit."""
        current = self.frontier.popleft()
        self.visit_order.append(current)
        return current

    def reconstruct_path(self) -> list[str]:
        """Follow predecessor links from destination back to source."""
        path = []
        node: str | None = self.destination
        while node is not None:
            path.append(node)
            node = self.predecessor.get(node)
        return list(reversed(path))

    def to_result(self, path: list[str] | None, outcome: RouteOutcome) -> RouteResult:
        """Convert to immutable RouteResult."""
        return RouteResult(
            source=self.source,
            destination=self.destination,
            path=None if path is None else tuple(path),
            visit_order=tuple(self.visit_order),
            log=tuple(self.log),
            outcome=outcome,
        )
