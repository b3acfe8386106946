"""Square and diamond tile geometry for each recursion stage.

A stage ``depth`` works on square tiles of side ``2**depth + 1``. The square
step fills each tile's center; the diamond step then fills the centers of its
four edges, each of which is the midpoint of a diamond of radius
``2**(depth - 1)``.
"""

from heightmap_worker.terrain.grid import Grid
from heightmap_worker.terrain.types import Point, Tile


def square_tile(top_left: Point, depth: int) -> Tile:
    """Axis-aligned tile of side 2**depth + 1 anchored at ``top_left``."""
    span = 1 << depth
    return Tile(
        corners=(
            top_left,
            top_left.translate(span, 0),
            top_left.translate(0, span),
            top_left.translate(span, span),
        ),
        midpoint=top_left.translate((span + 1) // 2, (span + 1) // 2),
    )


def diamond_tile(center: Point, depth: int) -> Tile:
    """Diamond around ``center`` with corners 2**(depth - 1) away on each axis."""
    if depth < 1:
        raise ValueError(f"diamond tiles need depth >= 1, got {depth}")
    r = 1 << (depth - 1)
    return Tile(
        corners=(
            center.translate(0, -r),
            center.translate(r, 0),
            center.translate(0, r),
            center.translate(-r, 0),
        ),
        midpoint=center,
    )


def enumerate_tiles(grid: Grid, depth: int) -> list[Tile]:
    """Cover the grid with non-overlapping square tiles for this stage.

    Tiles are ordered row-major (by y, then x). There are ``k * k`` of them
    where ``k = (size - 1) >> depth``.
    """
    if not 0 <= depth <= grid.base:
        raise ValueError(f"depth must be in [0, {grid.base}], got {depth}")
    stride = 1 << depth
    return [
        square_tile(Point(x, y), depth)
        for y in range(0, grid.size - 1, stride)
        for x in range(0, grid.size - 1, stride)
    ]


def diamond_centers(grid: Grid, tiles: list[Tile], depth: int) -> list[Point]:
    """Edge midpoints of ``tiles`` that the diamond step must fill.

    Neighboring tiles share an edge, so each center appears once, in the
    order it is first reached.
    """
    centers: dict[Point, None] = {}
    for tile in tiles:
        for point in diamond_tile(tile.midpoint, depth).corners:
            if grid.index_of(point) is not None:
                centers.setdefault(point, None)
    return list(centers)
