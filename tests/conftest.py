"""Pytest configuration and fixtures for heightmap tests."""

import numpy as np
import pytest

from heightmap_worker.terrain import Grid, Point


@pytest.fixture
def rng():
    """Seeded random source for reproducible runs."""
    return np.random.default_rng(42)


@pytest.fixture
def seeded_3x3():
    """3x3 grid with corners TL=10, TR=20, BL=30, BR=40 already placed."""
    grid = Grid(1)
    grid.fill_many(
        [Point(0, 0), Point(2, 0), Point(0, 2), Point(2, 2)],
        [10, 20, 30, 40],
    )
    return grid
