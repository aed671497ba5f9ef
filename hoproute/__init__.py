"""
hoproute: shortest-path discovery over an editable graph.

An in-memory undirected graph that can be changed at any time, and a
breadth-first router that returns a shortest hop-count path together
with a step-by-step trace of the search.
"""

from hoproute.graph import Graph, MutationResult, Position
from hoproute.routing import BFSRouter, RouteOutcome, RouteResult

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "MutationResult",
    "Position",
    "BFSRouter",
    "RouteOutcome",
    "RouteResult",
]
