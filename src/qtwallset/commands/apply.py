"""Apply command: set a wallpaper and record its palette."""

import logging
from pathlib import Path
from typing import Optional

from ..config import Config
from ..palette import PaletteGenerator
from ..pipeline import WallpaperPipeline
from ..reload import WindowManagerReloader
from ..wallpaper import WallpaperConfig


def apply_wallpaper(
    config: Config,
    wallpaper_path: Path,
    palette_generator: Optional[PaletteGenerator] = None,
    reloader: Optional[WindowManagerReloader] = None,
) -> WallpaperConfig:
    """
    Set a wallpaper for the Qtile session.

    Args:
        config: Config instance (CLI overrides already applied)
        wallpaper_path: Source image
        palette_generator: Optional palette source override
        reloader: Optional reload trigger override

    Returns:
        The descriptor that was written
    """
    logger = logging.getLogger(__name__)

    pipeline = WallpaperPipeline(config, palette_generator=palette_generator, reloader=reloader)
    wallpaper_config = pipeline.run(wallpaper_path)

    logger.debug(f"Descriptor at {pipeline.descriptor_path}")
    print(f"Wallpaper set: {wallpaper_config.file_path}")
    return wallpaper_config
