"""Diamond-square heightmap generator."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from numpy.typing import NDArray

from heightmap_worker.terrain.geometry import (
    diamond_centers,
    diamond_tile,
    enumerate_tiles,
    square_tile,
)
from heightmap_worker.terrain.grid import Grid
from heightmap_worker.terrain.sampler import amplitude_for_stage, draw_jitter, sample
from heightmap_worker.terrain.types import HEIGHT_MAX, HEIGHT_MIN, HeightmapConfig, Point, Tile

logger = logging.getLogger(__name__)


def create(base: int) -> Grid:
    """Allocate an empty grid of edge 2**base + 1."""
    return Grid(base)


def seed_corners(grid: Grid, base: int, rng: np.random.Generator) -> list[int]:
    """Assign the four outermost cells independent uniform heights.

    Returns the values in corner order (top-left, top-right, bottom-left,
    bottom-right).
    """
    root = square_tile(Point(0, 0), base)
    values = [int(v) for v in rng.integers(HEIGHT_MIN, HEIGHT_MAX + 1, size=4)]
    grid.fill_many(list(root.corners), values)
    return values


def _sample_half_step(
    grid: Grid,
    tiles: list[Tile],
    jitter: NDArray[np.int64],
    executor: ThreadPoolExecutor | None,
) -> list[int]:
    """Compute every midpoint value of one half-step without writing any.

    Targets of a half-step never read each other, so the work can be split
    freely. Jitter is drawn up front so the result does not depend on how
    the work is scheduled.
    """
    if executor is None:
        return [sample(grid, tile, j) for tile, j in zip(tiles, jitter, strict=True)]
    return list(executor.map(lambda args: sample(grid, *args), zip(tiles, jitter, strict=True)))


def run_stage(
    grid: Grid,
    stage: int,
    amplitude: int,
    rng: np.random.Generator,
    executor: ThreadPoolExecutor | None = None,
) -> None:
    """Run the square step, then the diamond step, for one stage."""
    squares = enumerate_tiles(grid, stage)
    square_values = _sample_half_step(
        grid, squares, draw_jitter(rng, amplitude, len(squares)), executor
    )
    # All square midpoints land before any diamond reads them
    grid.fill_many([tile.midpoint for tile in squares], square_values)

    diamonds = [diamond_tile(center, stage) for center in diamond_centers(grid, squares, stage)]
    diamond_values = _sample_half_step(
        grid, diamonds, draw_jitter(rng, amplitude, len(diamonds)), executor
    )
    grid.fill_many([tile.midpoint for tile in diamonds], diamond_values)

    logger.debug(
        "Stage %d: %d squares, %d diamonds, amplitude %d",
        stage, len(squares), len(diamonds), amplitude,
    )


def run(
    grid: Grid,
    base: int,
    amplitude_scale: int,
    rng: np.random.Generator,
    workers: int = 1,
) -> Grid:
    """Seed the corners and fill the rest of ``grid`` stage by stage.

    Args:
        grid: Empty grid created with the same ``base``
        base: Recursion depth; stages run from ``base`` down to 1
        amplitude_scale: Jitter amplitude per unit of stage
        rng: Random source for corner seeds and jitter
        workers: Threads per half-step; 1 runs everything inline

    Returns:
        The same grid, with every cell filled
    """
    if base != grid.base:
        raise ValueError(f"base {base} does not match grid base {grid.base}")
    if amplitude_scale < 0:
        raise ValueError(f"amplitude_scale must be non-negative, got {amplitude_scale}")
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    seed_corners(grid, base, rng)

    executor = ThreadPoolExecutor(max_workers=workers) if workers > 1 else None
    try:
        for stage in range(base, 0, -1):
            run_stage(grid, stage, amplitude_for_stage(amplitude_scale, stage), rng, executor)
    finally:
        if executor is not None:
            executor.shutdown()

    assert grid.complete, f"{len(grid) - grid.filled_count} cells left unfilled"
    return grid


class DiamondSquareGenerator:
    """Generates a single heightmap from a :class:`HeightmapConfig`."""

    def __init__(self, config: HeightmapConfig) -> None:
        self.config = config

    def generate(self) -> Grid:
        cfg = self.config
        logger.info(
            "Generating %dx%d heightmap (base=%d, amplitude_scale=%d, seed=%s)",
            cfg.size, cfg.size, cfg.base, cfg.amplitude_scale, cfg.seed,
        )

        t_start = time.perf_counter()

        grid = create(cfg.base)
        rng = np.random.default_rng(cfg.seed)
        run(grid, cfg.base, cfg.amplitude_scale, rng, workers=cfg.workers)

        total_ms = (time.perf_counter() - t_start) * 1000
        logger.info(
            "[Heightmap] generation complete in %.1fms (%d cells, %d workers)",
            total_ms, len(grid), cfg.workers,
        )

        return grid


def generate_heightmap(config: HeightmapConfig) -> Grid:
    """Convenience function to generate a heightmap."""
    return DiamondSquareGenerator(config).generate()
