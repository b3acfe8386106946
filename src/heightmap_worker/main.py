"""Worker entry point."""

import io
import logging
import sys

from heightmap_worker.config import Settings, settings
from heightmap_worker.terrain import DiamondSquareGenerator, HeightmapConfig, encode_png


def setup_logging(level_name: str | None = None) -> None:
    """Configure logging for the worker."""
    level = getattr(logging, (level_name or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def main(worker_settings: Settings = settings) -> str:
    """Generate one heightmap and write it to the configured PNG path."""
    setup_logging(worker_settings.log_level)
    logger = logging.getLogger(__name__)
    logger.info("Heightmap worker starting...")

    config = HeightmapConfig.from_settings(worker_settings)
    grid = DiamondSquareGenerator(config).generate()

    # Encode fully before touching the output path
    png = io.BytesIO()
    encode_png(grid, png, mode=worker_settings.image_mode)
    with open(worker_settings.output_path, "wb") as f:
        f.write(png.getvalue())

    logger.info("Wrote %s", worker_settings.output_path)
    return worker_settings.output_path


def run() -> None:
    """Entry point for the worker."""
    main()


if __name__ == "__main__":
    run()
