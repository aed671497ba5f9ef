"""
Routing module.

Provides shortest-path search over a Graph:
- BFSRouter: Breadth-first search with a replayable decision log
- SearchState: Per-run frontier, predecessors and trace
- RouteResult: Immutable record of a finished search
- RouteOutcome: How a search ended
"""

from hoproute.routing.bfs import BFSRouter
from hoproute.routing.state import RouteOutcome, RouteResult, SearchState

__all__ = [
    "BFSRouter",
    "SearchState",
    "RouteResult",
    "RouteOutcome",
]
