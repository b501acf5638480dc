"""Graph module for adjacency-list storage and traversal.

This module provides a directed graph backed by per-vertex neighbor lists and
the breadth-first and depth-first traversals that run over it.
"""

from graphwalk.graph.adjacency import (
    Graph,
    GraphError,
    InvalidVertexCountError,
    VertexOutOfRangeError,
)
from graphwalk.graph.ordered import Queue, Stack
from graphwalk.graph.traversal import breadth_first_search, depth_first_search

__all__ = [
    "Graph",
    "GraphError",
    "InvalidVertexCountError",
    "Queue",
    "Stack",
    "VertexOutOfRangeError",
    "breadth_first_search",
    "depth_first_search",
]
