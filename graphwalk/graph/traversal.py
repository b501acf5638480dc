"""Breadth-first and depth-first traversal over an adjacency-list graph.

Both traversals mark a vertex as visited at the moment it is discovered
(enqueued or pushed), not when it is later processed. For depth-first search
this means the order differs from a recursive pre-order walk: every unvisited
neighbor of the current vertex is pushed before any of them is popped, so the
most recently inserted neighbor is explored first and a vertex already on the
stack is never pushed again.
"""

from typing import TYPE_CHECKING

import structlog

from graphwalk.graph.ordered import Queue, Stack

if TYPE_CHECKING:
    from graphwalk.graph.adjacency import Graph

logger = structlog.get_logger(__name__)


def breadth_first_search(graph: "Graph", start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in breadth order.

    Siblings on the same level appear in adjacency insertion order. Vertices
    not reachable from ``start`` are omitted.

    Args:
        graph: Graph to traverse (not modified)
        start: Source vertex

    Returns:
        Vertex ids in the order they were discovered, ``start`` first

    Raises:
        VertexOutOfRangeError: If start is not a vertex of the graph

    Example:
        >>> from graphwalk.graph.adjacency import Graph
        >>> breadth_first_search(Graph.from_edges(3, [(0, 2), (0, 1)]), 0)
        [0, 2, 1]
    """
    graph.check_vertex(start)

    result: list[int] = []
    visited = [False] * graph.vertex_count
    queue: Queue[int] = Queue()

    visited[start] = True
    queue.add(start)
    result.append(start)

    while queue.count > 0:
        current = queue.remove()

        for neighbor in graph.adjacency[current]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.add(neighbor)
                result.append(neighbor)

    logger.debug("bfs_completed", start=start, visited_count=len(result))

    return result


def depth_first_search(graph: "Graph", start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in stack pop order.

    Args:
        graph: Graph to traverse (not modified)
        start: Source vertex

    Returns:
        Vertex ids in the order they were popped, ``start`` first

    Raises:
        VertexOutOfRangeError: If start is not a vertex of the graph

    Example:
        >>> from graphwalk.graph.adjacency import Graph
        >>> depth_first_search(Graph.from_edges(4, [(0, 1), (0, 2), (1, 3)]), 0)
        [0, 2, 1, 3]
    """
    graph.check_vertex(start)

    result: list[int] = []
    visited = [False] * graph.vertex_count
    stack: Stack[int] = Stack()

    visited[start] = True
    stack.push(start)

    while stack.count > 0:
        current = stack.pop()
        result.append(current)

        # Mark on push; a vertex waiting on the stack is not pushed twice
        for neighbor in graph.adjacency[current]:
            if not visited[neighbor]:
                visited[neighbor] = True
                stack.push(neighbor)

    logger.debug("dfs_completed", start=start, visited_count=len(result))

    return result
