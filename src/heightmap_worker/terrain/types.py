"""Type definitions for heightmap generation."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from heightmap_worker.config import Settings

# Storage range of a single height sample (uint8)
HEIGHT_MIN = 0
HEIGHT_MAX = 255


class Point(NamedTuple):
    """An integer grid point. Validity depends on the grid it is used with."""

    x: int
    y: int

    def translate(self, dx: int, dy: int) -> "Point":
        """Return this point offset by (dx, dy). No bounds check."""
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Tile:
    """Four corner points and the midpoint they drive.

    Used for both square tiles (axis-aligned corners) and diamond tiles
    (corners at the four axis neighbors of the midpoint).
    """

    corners: tuple[Point, Point, Point, Point]
    midpoint: Point


@dataclass
class HeightmapConfig:
    """Configuration for a diamond-square run.

    Given the same seed, generation is bit-for-bit reproducible.
    """

    # Recursion depth; grid edge is 2**base + 1 samples
    base: int = 9

    # Jitter amplitude per stage is amplitude_scale * stage
    amplitude_scale: int = 4

    # None draws a fresh seed from OS entropy
    seed: int | None = None

    # Threads used per half-step (1 = run inline)
    workers: int = 1

    def __post_init__(self) -> None:
        if self.base < 0:
            raise ValueError(f"base must be non-negative, got {self.base}")
        if self.amplitude_scale < 0:
            raise ValueError(
                f"amplitude_scale must be non-negative, got {self.amplitude_scale}"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def size(self) -> int:
        """Edge length of the grid this config produces."""
        return (1 << self.base) + 1

    @classmethod
    def from_settings(cls, settings: "Settings") -> "HeightmapConfig":
        """Build a config from environment-driven worker settings."""
        return cls(
            base=settings.base,
            amplitude_scale=settings.amplitude_scale,
            seed=settings.seed,
            workers=settings.workers,
        )
