"""
Graph module.

Provides the editable undirected graph the router searches:
- Graph: Node/edge storage with total (never raising) mutations
- MutationResult: Why a mutation did or did not change the graph
- Position: Optional display coordinate for a node
- normalize_id: Trim an identifier, None if unusable
"""

from hoproute.graph.store import Graph, MutationResult, Position, normalize_id

__all__ = [
    "Graph",
    "MutationResult",
    "Position",
    "normalize_id",
]
