"""
Tests for initial patterns.
"""

import numpy as np
import pytest
import mlx.core as mx

from lifelike.patterns import BLINKER, GLIDER, get_pattern, place_pattern, random_state
from lifelike.space import CellValueError


class TestPlacePattern:
    """Tests for stamping patterns onto grids."""

    def test_centred(self):
        """Patterns are centred by default."""
        grid = place_pattern((5, 5), "blinker")

        assert grid.shape == (5, 5)
        assert grid.dtype == np.uint32
        assert list(zip(*np.nonzero(grid))) == [(2, 1), (2, 2), (2, 3)]

    def test_rows_accepted(self):
        """Explicit rows can be placed."""
        grid = place_pattern((4, 3), [[1, 0], [0, 1]], offset=(0, 0))

        assert grid.tolist() == [
            [1, 0, 0, 0],
            [0, 1, 0, 0],
            [0, 0, 0, 0],
        ]

    def test_offset_wraps(self):
        """Cells past an edge wrap to the opposite edge."""
        grid = place_pattern((4, 4), BLINKER, offset=(3, 3))

        assert grid[3].tolist() == [1, 1, 0, 1]
        assert int(grid.sum()) == 3

    def test_glider_cells(self):
        """Glider rows land at the offset."""
        grid = place_pattern((6, 6), GLIDER, offset=(1, 2))

        assert grid[2:5, 1:4].tolist() == GLIDER

    def test_unknown_name(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="unknown pattern"):
            get_pattern("gosper")

    def test_too_large_for_grid(self):
        """Patterns bigger than the grid are refused instead of folded onto themselves."""
        with pytest.raises(ValueError, match="does not fit"):
            place_pattern((3, 3), "toad")
        with pytest.raises(ValueError, match="does not fit"):
            place_pattern((4, 1), "block")

    def test_exact_fit(self):
        """A pattern as large as the grid keeps all its cells."""
        grid = place_pattern((4, 2), "toad")

        assert int(grid.sum()) == 6

    def test_negative_cells_rejected(self):
        """Pattern values are checked like any other state."""
        with pytest.raises(CellValueError):
            place_pattern((4, 4), [[1, -1]])

    def test_not_rows(self):
        """Patterns must be 2-D."""
        with pytest.raises(ValueError, match="2-D"):
            place_pattern((4, 4), [1, 1, 1])


class TestRandomState:
    """Tests for random fills."""

    def test_shape_and_values(self):
        """Random fill is flat and binary."""
        state = random_state((8, 4), density=0.5, seed=1)

        assert state.dtype == mx.uint32
        assert tuple(state.shape) == (32,)
        assert set(state.tolist()) <= {0, 1}

    def test_reproducible(self):
        """Same seed gives the same fill."""
        first = random_state((16, 16), seed=3)
        second = random_state((16, 16), seed=3)

        assert mx.array_equal(first, second)

    def test_density_extremes(self):
        """Density 0 and 1 give empty and full grids."""
        assert random_state((6, 6), density=0.0).tolist() == [0] * 36
        assert random_state((6, 6), density=1.0).tolist() == [1] * 36

    def test_invalid_density(self):
        """Density outside [0, 1] is rejected."""
        with pytest.raises(ValueError, match="density"):
            random_state((4, 4), density=2.0)
