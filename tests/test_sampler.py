"""Tests for midpoint sampling and jitter."""

import numpy as np
import pytest

from heightmap_worker.terrain import Grid, Point, Tile, diamond_tile, sample, square_tile
from heightmap_worker.terrain.sampler import (
    amplitude_for_stage,
    clamp_height,
    corner_average,
    draw_jitter,
)


class TestCornerAverage:
    """Tests for averaging over valid corners."""

    def test_square_average(self, seeded_3x3):
        assert corner_average(seeded_3x3, square_tile(Point(0, 0), 1)) == 25

    def test_off_grid_corners_excluded(self, seeded_3x3):
        """Top edge diamond has one corner above the grid and skips it."""
        seeded_3x3.fill(Point(1, 1), 25)
        tile = diamond_tile(Point(1, 0), 1)
        assert corner_average(seeded_3x3, tile) == (10 + 20 + 25) // 3

    def test_unfilled_corners_excluded(self, seeded_3x3):
        """Cells that hold no value yet do not count toward the mean."""
        tile = diamond_tile(Point(1, 0), 1)
        assert corner_average(seeded_3x3, tile) == 15

    def test_truncates(self):
        grid = Grid(1)
        grid.fill_many([Point(0, 0), Point(2, 0), Point(0, 2), Point(2, 2)], [1, 1, 1, 2])
        assert corner_average(grid, square_tile(Point(0, 0), 1)) == 1

    def test_no_valid_corners_fails_loudly(self):
        grid = Grid(1)
        with pytest.raises(AssertionError):
            corner_average(grid, square_tile(Point(0, 0), 1))

    def test_all_corners_off_grid_fails_loudly(self):
        tile = Tile(
            corners=(Point(-1, -1), Point(9, 0), Point(0, 9), Point(-3, 2)),
            midpoint=Point(1, 1),
        )
        with pytest.raises(AssertionError):
            corner_average(Grid(1), tile)


class TestSample:
    """Tests for jittered, clamped sampling."""

    def test_adds_jitter(self, seeded_3x3):
        assert sample(seeded_3x3, square_tile(Point(0, 0), 1), -5) == 20

    def test_does_not_write(self, seeded_3x3):
        sample(seeded_3x3, square_tile(Point(0, 0), 1), 0)
        assert not seeded_3x3.is_filled(Point(1, 1))

    def test_clamps_high(self):
        grid = Grid(1)
        grid.fill_many([Point(0, 0), Point(2, 0), Point(0, 2), Point(2, 2)], [250] * 4)
        assert sample(grid, square_tile(Point(0, 0), 1), 40) == 255

    def test_clamps_low(self):
        grid = Grid(1)
        grid.fill_many([Point(0, 0), Point(2, 0), Point(0, 2), Point(2, 2)], [3] * 4)
        assert sample(grid, square_tile(Point(0, 0), 1), -40) == 0

    @pytest.mark.parametrize("value,expected", [(-1, 0), (0, 0), (128, 128), (255, 255), (300, 255)])
    def test_clamp_height(self, value, expected):
        assert clamp_height(value) == expected


class TestJitter:
    """Tests for the jitter schedule and draws."""

    def test_amplitude_is_linear_in_stage(self):
        assert [amplitude_for_stage(3, s) for s in (4, 3, 2, 1)] == [12, 9, 6, 3]

    @pytest.mark.parametrize("stage", [1, 2, 5])
    def test_bounds(self, stage):
        """Offsets stay within [-amplitude, amplitude)."""
        amplitude = amplitude_for_stage(2, stage)
        draws = draw_jitter(np.random.default_rng(7), amplitude, 5000)
        assert draws.min() >= -amplitude
        assert draws.max() < amplitude

    def test_zero_amplitude_is_zero(self):
        draws = draw_jitter(np.random.default_rng(7), 0, 10)
        assert (draws == 0).all()

    def test_deterministic_for_seed(self):
        a = draw_jitter(np.random.default_rng(3), 8, 100)
        b = draw_jitter(np.random.default_rng(3), 8, 100)
        assert (a == b).all()
