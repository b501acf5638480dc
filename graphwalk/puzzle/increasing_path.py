"""Increasing-path check over an undirected edge list.

Given vertices numbered 1..N and undirected edges described by two parallel
arrays A and B (edge k joins A[k] and B[k]), decide whether the path
1 -> 2 -> ... -> N exists using only direct edges.
"""

from collections.abc import Sequence
from typing import NamedTuple

import structlog

logger = structlog.get_logger(__name__)


class Edge(NamedTuple):
    """An edge between two labelled vertices, as given in the input."""

    a: int
    b: int

    def reversed(self) -> "Edge":
        return Edge(self.b, self.a)


def build_edges(a: Sequence[int], b: Sequence[int]) -> list[Edge]:
    """Pair up the endpoint arrays into edges, keeping input order.

    Raises:
        ValueError: If the arrays differ in length
    """
    if len(a) != len(b):
        msg = f"Endpoint arrays must have equal length, got {len(a)} and {len(b)}"
        raise ValueError(msg)

    return [Edge(left, right) for left, right in zip(a, b)]


def has_increasing_path(n: int, a: Sequence[int], b: Sequence[int]) -> bool:
    """Check whether vertices 1..n are joined one-by-one by direct edges.

    Args:
        n: Highest vertex label
        a: First endpoint of each edge
        b: Second endpoint of each edge

    Returns:
        True if every pair (i, i + 1) for 1 <= i < n is an edge in either
        orientation, False otherwise. Always False when either array is empty,
        before lengths are compared.

    Raises:
        ValueError: If a and b are non-empty and differ in length

    Example:
        >>> has_increasing_path(4, [1, 2, 4, 4, 3], [2, 3, 1, 3, 1])
        True
        >>> has_increasing_path(4, [1, 2, 1, 3], [2, 4, 3, 4])
        False
    """
    if not a or not b:
        return False

    known = set(build_edges(a, b))

    for label in range(1, n):
        step = Edge(label, label + 1)
        if step not in known and step.reversed() not in known:
            logger.debug("increasing_path_broken", missing=tuple(step), n=n)
            return False

    return True
