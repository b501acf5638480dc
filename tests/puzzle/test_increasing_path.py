"""Unit tests for the increasing-path puzzle solver."""

import pytest

from graphwalk.puzzle.increasing_path import Edge, build_edges, has_increasing_path


class TestHasIncreasingPath:
    """Test the path check against the worked examples and edge cases."""

    @pytest.mark.parametrize(
        ("n", "a", "b", "expected"),
        [
            (4, [1, 2, 4, 4, 3], [2, 3, 1, 3, 1], True),
            (4, [1, 2, 1, 3], [2, 4, 3, 4], False),
            (6, [2, 4, 5, 3], [3, 5, 6, 4], False),
            (3, [1, 3], [2, 2], True),
            (3, [2, 3], [3, 4], False),
        ],
    )
    def test_worked_examples(self, n, a, b, expected):
        """Test the five worked examples."""
        assert has_increasing_path(n, a, b) is expected

    def test_empty_edges(self):
        """Test that an empty edge list never has a path."""
        assert has_increasing_path(1, [], []) is False
        assert has_increasing_path(4, [], []) is False

    def test_one_empty_array_is_false(self):
        """Test that an empty array returns False before lengths are compared."""
        assert has_increasing_path(3, [], [1]) is False
        assert has_increasing_path(3, [1, 2], []) is False

    def test_orientation_does_not_matter(self):
        """Test that edges count in either direction."""
        assert has_increasing_path(4, [2, 3, 4], [1, 2, 3]) is True

    def test_single_vertex(self):
        """Test that n = 1 needs no steps once any edge is given."""
        assert has_increasing_path(1, [5], [6]) is True

    def test_checks_up_to_n(self):
        """Test that the last step (n - 1, n) is required."""
        a, b = [1, 2, 3], [2, 3, 4]

        assert has_increasing_path(4, a, b) is True
        assert has_increasing_path(5, a, b) is False

    def test_extra_edges_ignored(self):
        """Test that edges outside the path do not matter."""
        assert has_increasing_path(3, [1, 1, 2, 7], [2, 3, 3, 9]) is True

    def test_mismatched_lengths(self):
        """Test that endpoint arrays of different lengths are rejected."""
        with pytest.raises(ValueError, match="equal length"):
            has_increasing_path(3, [1, 2], [2])


class TestBuildEdges:
    """Test edge construction."""

    def test_pairs_in_order(self):
        """Test that edges keep input order and orientation."""
        assert build_edges([1, 3], [2, 2]) == [Edge(1, 2), Edge(3, 2)]

    def test_reversed(self):
        """Test flipping an edge."""
        assert Edge(1, 2).reversed() == Edge(2, 1)
        assert Edge(1, 2) != Edge(2, 1)
