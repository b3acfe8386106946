"""Midpoint sampling: corner average plus bounded random jitter."""

import numpy as np
from numpy.typing import NDArray

from heightmap_worker.terrain.grid import Grid
from heightmap_worker.terrain.types import HEIGHT_MAX, HEIGHT_MIN, Tile


def amplitude_for_stage(amplitude_scale: int, stage: int) -> int:
    """Jitter amplitude at ``stage``; decays linearly toward the finest stage."""
    return amplitude_scale * stage


def draw_jitter(rng: np.random.Generator, amplitude: int, count: int) -> NDArray[np.int64]:
    """Draw ``count`` signed offsets uniformly from [-amplitude, amplitude)."""
    if amplitude == 0:
        return np.zeros(count, dtype=np.int64)
    return rng.integers(-amplitude, amplitude, size=count, dtype=np.int64)


def corner_average(grid: Grid, tile: Tile) -> int:
    """Integer mean of the tile corners that exist and already hold a value.

    Corners off the grid edge are skipped, which is expected along the
    border where a diamond has only three neighbors.
    """
    total = 0
    count = 0
    for corner in tile.corners:
        index = grid.index_of(corner)
        if index is None:
            continue
        value = grid.value_at(index)
        if value is None:
            continue
        total += value
        count += 1

    assert count > 0, f"no valid corners around {tile.midpoint}"
    # Values are non-negative, so floor division truncates toward zero
    return total // count


def clamp_height(value: int) -> int:
    """Saturate to the storage range of a height sample."""
    return max(HEIGHT_MIN, min(HEIGHT_MAX, value))


def sample(grid: Grid, tile: Tile, jitter: int) -> int:
    """Height for ``tile.midpoint``. Does not write the grid."""
    return clamp_height(corner_average(grid, tile) + int(jitter))
