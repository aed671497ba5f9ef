"""
Breadth-first shortest-path router.

Finds one shortest hop-count path between two nodes of a Graph and keeps
a step-by-step trace of the search for replay or auditing.

Usage:
    from hoproute.graph import Graph
    from hoproute.routing import BFSRouter

    router = BFSRouter(graph)
    path = router.find_path("A", "C")   # ["A", "B", "C"] or None
    router.get_log()                    # ["Starting BFS from: A", ...]
    router.get_visit_order()            # ["A", "B", "D", "C"]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hoproute.config import PATH_SEPARATOR
from hoproute.graph.store import normalize_id
from hoproute.routing.state import RouteOutcome, RouteResult, SearchState

if TYPE_CHECKING:
    from hoproute.graph.store import Graph

logger = logging.getLogger(__name__)


class BFSRouter:
    """
    Shortest-path router over an unweighted, undirected Graph.

    The router only reads the graph. Ties between equally short paths are
    broken by the graph's neighbor order, so results are reproducible for
    a given sequence of mutations.

    Only the most recent run is kept; get_log() and get_visit_order()
    describe that run.
    """

    def __init__(self, graph: Graph) -> None:
        """
        Initialize router.

        Args:
            graph: Graph to search. Held by reference, never modified.
        """
        self._graph = graph
        self._last: RouteResult | None = None

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def last_result(self) -> RouteResult | None:
        """Record of the most recent find_path() call, or None before the first."""
        return self._last

    def get_log(self) -> list[str]:
        """Trace entries from the most recent run."""
        if self._last is None:
            return []
        return list(self._last.log)

    def get_visit_order(self) -> list[str]:
        """Nodes dequeued during the most recent run, in dequeue order."""
        if self._last is None:
            return []
        return list(self._last.visit_order)

    def find_path(self, source: str, destination: str) -> list[str] | None:
        """
        Find a shortest path from source to destination.

        Args:
            source: Starting node identifier
            destination: Target node identifier

        Returns:
            List of nodes from source to destination, or None if either
            node is missing or the destination cannot be reached. Check
            get_log() or last_result.outcome to tell those cases apart.
        """
        start = normalize_id(source)
        target = normalize_id(destination)

        if not self._graph.has_node(start) or not self._graph.has_node(target):
            state = SearchState(source=start or "", destination=target or "")
            state.log.append(
                f"Invalid source or destination node: {source!r} -> {destination!r}"
            )
            logger.warning(f"Invalid source or destination: {source!r} -> {destination!r}")
            return self._finish(state, None, RouteOutcome.INVALID_INPUT)

        state = SearchState(source=start, destination=target)

        if start == target:
            state.log.append(f"Source and destination are the same: {start}")
            state.visit_order.append(start)
            return self._finish(state, [start], RouteOutcome.SAME_NODE)

        return self._search(state)

    def _search(self, state: SearchState) -> list[str] | None:
        """Run BFS until the destination is dequeued or the frontier empties."""
        state.log.append(f"Starting BFS from: {state.source}")
        state.seed()

        while state.frontier:
            current = state.next_node()
            state.log.append(f"Visiting: {current}")
            logger.debug(f"Visiting {current} (frontier={len(state.frontier)})")

            if current == state.destination:
                path = state.reconstruct_path()
                state.log.append(f"Destination reached: {state.destination}")
                state.log.append(f"Shortest path: {PATH_SEPARATOR.join(path)}")
                logger.info(
                    f"Found path ({len(path) - 1} hops): {PATH_SEPARATOR.join(path)}"
                )
                return self._finish(state, path, RouteOutcome.FOUND)

            queued = [
                neighbor
                for neighbor in self._graph.neighbors(current)
                if state.discover(neighbor, current)
            ]
            if queued:
                state.log.append(f"Queueing: {', '.join(queued)}")

        state.log.append(f"No path found from {state.source} to {state.destination}")
        logger.warning(f"No path found from '{state.source}' to '{state.destination}'")
        return self._finish(state, None, RouteOutcome.UNREACHABLE)

    def _finish(
        self,
        state: SearchState,
        path: list[str] | None,
        outcome: RouteOutcome,
    ) -> list[str] | None:
        self._last = state.to_result(path, outcome)
        return None if path is None else list(path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(graph={self._graph!r})"
