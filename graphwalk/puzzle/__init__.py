"""Edge puzzles that work directly on edge lists."""

from graphwalk.puzzle.increasing_path import Edge, build_edges, has_increasing_path

__all__ = ["Edge", "build_edges", "has_increasing_path"]
