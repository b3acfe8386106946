"""Worker configuration."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Worker settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HEIGHTMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Heightmap generation
    base: int = 9
    amplitude_scale: int = 4
    seed: int | None = None
    workers: int = 1

    # Output
    image_mode: Literal["L", "RGB"] = "L"
    output_path: str = "heightmap.png"

    # Logging
    log_level: str = "info"


settings = Settings()
