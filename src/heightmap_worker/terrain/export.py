"""Hand a finished grid to Pillow for image output."""

import logging
from typing import BinaryIO

from PIL import Image

from heightmap_worker.terrain.grid import Grid

logger = logging.getLogger(__name__)

IMAGE_MODES = ("L", "RGB")


def to_image(grid: Grid, mode: str = "L") -> Image.Image:
    """Render the grid as a grayscale image, one pixel per sample.

    Mode "RGB" repeats each sample on all three channels.
    """
    if mode not in IMAGE_MODES:
        raise ValueError(f"Unsupported image mode: {mode}")
    image = Image.frombytes("L", (grid.width, grid.height), grid.samples.tobytes())
    if mode == "RGB":
        image = image.convert("RGB")
    return image


def encode_png(grid: Grid, stream: BinaryIO, mode: str = "L") -> None:
    """Write the grid to ``stream`` as PNG."""
    to_image(grid, mode=mode).save(stream, format="PNG")
    logger.debug("Encoded %dx%d %s PNG", grid.width, grid.height, mode)
