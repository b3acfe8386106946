"""Square height grid backed by a single row-major buffer."""

import numpy as np
from numpy.typing import NDArray

from heightmap_worker.terrain.types import Point


class Grid:
    """Owner of the height buffer for a (2**base + 1)-sided grid.

    All writes go through :meth:`fill` / :meth:`fill_many`. Each cell may be
    written once; the ``filled`` mask records which cells hold a value.
    Read access is exposed through read-only views.
    """

    def __init__(self, base: int) -> None:
        if base < 0:
            raise ValueError(f"base must be non-negative, got {base}")
        self.base = base
        self.size = (1 << base) + 1
        self._buffer = np.zeros(self.size * self.size, dtype=np.uint8)
        self._filled = np.zeros(self.size * self.size, dtype=bool)

    @property
    def width(self) -> int:
        return self.size

    @property
    def height(self) -> int:
        return self.size

    def __len__(self) -> int:
        return self._buffer.shape[0]

    def index_of(self, point: Point) -> int | None:
        """Linear index of ``point``, or None if it lies outside the grid.

        Each axis is checked separately so that a negative or overflowing x
        never wraps onto a neighboring row.
        """
        x, y = point
        if 0 <= x < self.size and 0 <= y < self.size:
            return self.size * y + x
        return None

    def point_at(self, index: int) -> Point:
        """Inverse of :meth:`index_of`. Debug helper."""
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} outside grid of {len(self)} cells")
        return Point(index % self.size, index // self.size)

    def value_at(self, index: int) -> int | None:
        """Height at ``index``, or None if the cell has not been written yet."""
        if not self._filled[index]:
            return None
        return int(self._buffer[index])

    def is_filled(self, point: Point) -> bool:
        index = self.index_of(point)
        return index is not None and bool(self._filled[index])

    def fill(self, point: Point, value: int) -> None:
        """Write a single cell. The cell must be inside the grid and empty."""
        index = self.index_of(point)
        if index is None:
            raise IndexError(f"{point} outside {self.size}x{self.size} grid")
        assert not self._filled[index], f"cell {point} written twice"
        self._buffer[index] = value
        self._filled[index] = True

    def fill_many(self, points: list[Point], values: list[int]) -> None:
        """Write a batch of cells produced by one half-step."""
        for point, value in zip(points, values, strict=True):
            self.fill(point, value)

    @property
    def filled_count(self) -> int:
        return int(self._filled.sum())

    @property
    def complete(self) -> bool:
        return bool(self._filled.all())

    @property
    def samples(self) -> NDArray[np.uint8]:
        """Flat read-only view of the buffer."""
        view = self._buffer.view()
        view.flags.writeable = False
        return view

    def to_array(self) -> NDArray[np.uint8]:
        """Read-only (size, size) view of the buffer, indexed [y, x]."""
        return self.samples.reshape(self.size, self.size)

    def __str__(self) -> str:
        rows = []
        for row in self.to_array():
            rows.append("".join(f"{int(v):4d} " for v in row))
        return "\n".join(rows) + "\n"

    def __repr__(self) -> str:
        return f"Grid(base={self.base}, size={self.size}, filled={self.filled_count})"
