"""
Managed wallpaper directories.

Resolves the output root into the active-wallpaper and cache directories and
keeps the active directory down to a single image.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..config import PathsConfig
from ..exceptions import WallpaperIOError

logger = logging.getLogger(__name__)


def resolve_path(directory: Union[str, Path], sub_path: str) -> Path:
    """Expand a leading ~ in directory, make it absolute and join sub_path onto it."""
    return Path(directory).expanduser().absolute() / sub_path


def clear_directory(directory: Path, keep: Optional[Path] = None) -> int:
    """
    Delete regular files directly inside a directory.

    Subdirectories and their contents are left alone. A missing directory
    is a no-op.

    Args:
        directory: Directory to clear
        keep: Optional file to leave in place

    Returns:
        Number of files removed

    Raises:
        WallpaperIOError: If listing or removing a file fails
    """
    if not directory.is_dir():
        logger.debug(f"Nothing to clear, {directory} does not exist")
        return 0

    keep_resolved = keep.resolve() if keep is not None else None
    removed = 0

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise WallpaperIOError(f"Failed to list {directory}: {e}") from e

    for path in entries:
        if path.is_dir() or not path.is_file():
            continue
        if keep_resolved is not None and path.resolve() == keep_resolved:
            logger.debug(f"Keeping {path}")
            continue
        try:
            path.unlink()
        except OSError as e:
            raise WallpaperIOError(f"Failed to remove file {path}: {e}") from e
        removed += 1

    logger.info(f"Wallpaper directory cleared ({removed} file(s) removed).")
    return removed


@dataclass
class WallpaperDirectories:
    """Concrete locations derived from the output root."""
    active: Path
    cache: Path

    @classmethod
    def from_root(
        cls,
        root: Union[str, Path],
        active_subdir: str = "wallpaper/active",
        cache_subdir: str = "cache",
    ) -> 'WallpaperDirectories':
        """Resolve the output root (with ~ expansion) into both directories."""
        return cls(
            active=resolve_path(root, active_subdir),
            cache=resolve_path(root, cache_subdir),
        )

    @classmethod
    def from_config(cls, config: PathsConfig) -> 'WallpaperDirectories':
        return cls.from_root(
            config.output_directory,
            active_subdir=config.active_subdir,
            cache_subdir=config.cache_subdir,
        )

    def clear_active(self, keep: Optional[Path] = None) -> int:
        """Remove stale wallpapers from the active directory."""
        return clear_directory(self.active, keep=keep)

    def ensure(self) -> None:
        """
        Create both directories if needed.

        Raises:
            WallpaperIOError: If a directory cannot be created
        """
        for directory in (self.active, self.cache):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise WallpaperIOError(f"Failed to create directory {directory}: {e}") from e
