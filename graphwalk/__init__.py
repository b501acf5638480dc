"""graphwalk: adjacency-list graphs with BFS/DFS traversal.

Also ships a small solver for the increasing-path edge puzzle.
"""

from graphwalk.graph import (
    Graph,
    GraphError,
    InvalidVertexCountError,
    Queue,
    Stack,
    VertexOutOfRangeError,
    breadth_first_search,
    depth_first_search,
)
from graphwalk.puzzle import Edge, has_increasing_path

__all__ = [
    "Edge",
    "Graph",
    "GraphError",
    "InvalidVertexCountError",
    "Queue",
    "Stack",
    "VertexOutOfRangeError",
    "breadth_first_search",
    "depth_first_search",
    "has_increasing_path",
]
