"""Directed graph stored as an adjacency list.

This module provides the Graph class, which owns a fixed number of vertices
and an insertion-ordered neighbor list per vertex. Edges can only be added.
"""

from collections.abc import Iterable

import structlog

logger = structlog.get_logger(__name__)


class GraphError(Exception):
    """Base exception for graph misuse.

    Raised for caller errors only. Callers are expected to fix the input
    rather than retry.
    """

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the error
        """
        super().__init__(message)
        self.message = message


class InvalidVertexCountError(GraphError, ValueError):
    """Exception raised when a graph is constructed with a negative size."""

    def __init__(self, vertex_count: int):
        super().__init__(f"Vertex count must be non-negative, got {vertex_count}")
        self.vertex_count = vertex_count


class VertexOutOfRangeError(GraphError, IndexError):
    """Exception raised when a vertex id falls outside [0, vertex_count)."""

    def __init__(self, vertex: int, vertex_count: int):
        super().__init__(
            f"Vertex {vertex} is out of range for a graph with {vertex_count} vertices",
        )
        self.vertex = vertex
        self.vertex_count = vertex_count


class Graph:
    """Directed graph with a fixed vertex count and appendable neighbor lists.

    Vertices are the integers ``0 .. vertex_count - 1``. Each vertex owns an
    ordered list of outbound neighbors; insertion order is preserved and
    duplicate edges and self-loops are kept as given. An undirected edge is
    represented by inserting both directions.

    Thread-safety:
        This class is NOT thread-safe. Traversals may share a graph as long
        as no edge is added while any traversal is running.

    Example:
        >>> graph = Graph(3)
        >>> graph.add_edge(0, 1)
        >>> graph.add_edge(1, 2)
        >>> graph.adjacency
        [[1], [2], []]
    """

    def __init__(self, vertex_count: int):
        """Create a graph with ``vertex_count`` vertices and no edges.

        Args:
            vertex_count: Number of vertices, must be >= 0

        Raises:
            InvalidVertexCountError: If vertex_count is negative
        """
        if vertex_count < 0:
            raise InvalidVertexCountError(vertex_count)

        self.vertex_count = vertex_count
        self.adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

        logger.debug("graph_initialized", vertex_count=vertex_count)

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[tuple[int, int]]) -> "Graph":
        """Build a graph and insert each ``(source, target)`` pair in order.

        Args:
            vertex_count: Number of vertices
            edges: Directed edges to insert

        Returns:
            A populated Graph

        Raises:
            InvalidVertexCountError: If vertex_count is negative
            VertexOutOfRangeError: If an edge references an invalid vertex

        Example:
            >>> Graph.from_edges(2, [(0, 1), (1, 0)]).adjacency
            [[1], [0]]
        """
        graph = cls(vertex_count)
        for source, target in edges:
            graph.add_edge(source, target)
        return graph

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge from ``source`` to ``target``.

        Only the neighbor list of ``source`` changes.

        Args:
            source: Vertex the edge leaves
            target: Vertex the edge enters

        Raises:
            VertexOutOfRangeError: If either vertex is out of range
        """
        self.check_vertex(source)
        self.check_vertex(target)

        self.adjacency[source].append(target)

        logger.debug("edge_added", source=source, target=target)

    def neighbors(self, vertex: int) -> list[int]:
        """Return a copy of the outbound neighbors of ``vertex``."""
        self.check_vertex(vertex)
        return list(self.adjacency[vertex])

    def check_vertex(self, vertex: int) -> None:
        """Raise VertexOutOfRangeError unless ``vertex`` is a valid id."""
        if not 0 <= vertex < self.vertex_count:
            raise VertexOutOfRangeError(vertex, self.vertex_count)

    @property
    def edge_count(self) -> int:
        """Total number of directed edges, duplicates included."""
        return sum(len(targets) for targets in self.adjacency)

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self.vertex_count}, edge_count={self.edge_count})"
