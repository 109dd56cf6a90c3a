"""
Wallpaper pipeline.

Runs the five stages in order: dependency check, palette extraction,
directory preparation, persistence and the optional reload. Any failure
raises and aborts the remaining stages; completed side effects are kept.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Config
from .dependencies import require_command
from .palette import MatugenPaletteGenerator, PaletteGenerator
from .reload import WindowManagerReloader
from .wallpaper import (
    WallpaperConfig,
    WallpaperDirectories,
    copy_wallpaper,
    destination_for,
    write_descriptor,
)

logger = logging.getLogger(__name__)


class WallpaperPipeline:
    """
    Sets a wallpaper and records its palette.

    Collaborators are injected so tests can replace the palette generator
    and the reloader with doubles.
    """

    def __init__(
        self,
        config: Config,
        palette_generator: Optional[PaletteGenerator] = None,
        reloader: Optional[WindowManagerReloader] = None,
    ) -> None:
        self.config = config
        self.palette_generator = palette_generator or MatugenPaletteGenerator(config.palette)
        self.reloader = reloader or WindowManagerReloader(config.reload)
        self.directories = WallpaperDirectories.from_config(config.paths)

    @property
    def descriptor_path(self) -> Path:
        return self.directories.cache / self.config.paths.descriptor_name

    def run(self, wallpaper_path: Path, reload: Optional[bool] = None) -> WallpaperConfig:
        """
        Apply a wallpaper.

        Args:
            wallpaper_path: Source image
            reload: Override config.reload.enabled

        Returns:
            The descriptor that was written
        """
        # Stage 1: nothing is touched until the generator is known to exist
        require_command(self.palette_generator.command)

        # Stage 2
        colors = self.palette_generator.generate(wallpaper_path)

        # Stage 3
        destination_for(self.directories.active, wallpaper_path)
        source = wallpaper_path
        keep = None
        resolved = wallpaper_path.resolve()
        if resolved.parent == self.directories.active.resolve():
            # re-applying the current wallpaper, possibly through a symlink,
            # must not delete its source
            source = keep = resolved
        self.directories.clear_active(keep=keep)
        self.directories.ensure()

        # Stage 4
        copied = copy_wallpaper(self.directories.active, source)
        wallpaper_config = WallpaperConfig(
            file_path=str(copied),
            colors=colors,
        )
        write_descriptor(
            self.directories.cache,
            wallpaper_config,
            name=self.config.paths.descriptor_name,
        )

        # Stage 5
        should_reload = self.config.reload.enabled if reload is None else reload
        if should_reload:
            self.reloader.reload()
        else:
            logger.info("Skipping window manager reload.")

        return wallpaper_config
