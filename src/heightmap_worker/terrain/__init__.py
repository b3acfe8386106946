"""Diamond-square heightmap generation."""

from heightmap_worker.terrain.export import encode_png, to_image
from heightmap_worker.terrain.generator import (
    DiamondSquareGenerator,
    create,
    generate_heightmap,
    run,
    seed_corners,
)
from heightmap_worker.terrain.geometry import (
    diamond_centers,
    diamond_tile,
    enumerate_tiles,
    square_tile,
)
from heightmap_worker.terrain.grid import Grid
from heightmap_worker.terrain.sampler import amplitude_for_stage, sample
from heightmap_worker.terrain.types import HeightmapConfig, Point, Tile

__all__ = [
    "DiamondSquareGenerator",
    "Grid",
    "HeightmapConfig",
    "Point",
    "Tile",
    "amplitude_for_stage",
    "create",
    "diamond_centers",
    "diamond_tile",
    "encode_png",
    "enumerate_tiles",
    "generate_heightmap",
    "run",
    "sample",
    "seed_corners",
    "square_tile",
    "to_image",
]
