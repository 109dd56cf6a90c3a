"""
Wallpaper placement and the descriptor file.

The descriptor records the active wallpaper path and its palette for other
desktop components (status bar, lock screen) to read.
"""

import json
import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from ..exceptions import (
    InternalError,
    InvalidInputError,
    PaletteParseError,
    WallpaperIOError,
)
from ..palette import Colors

logger = logging.getLogger(__name__)

DESCRIPTOR_NAME = "wallpaper_info.json"


@dataclass
class WallpaperConfig:
    """Persisted descriptor: active wallpaper path plus palette."""
    file_path: str
    colors: Colors

    def to_dict(self) -> Dict[str, Any]:
        return {"file_path": self.file_path, "colors": self.colors.to_dict()}

    def to_json(self) -> str:
        """
        Serialize as indented JSON.

        Raises:
            InternalError: If serialization fails
        """
        try:
            return json.dumps(self.to_dict(), indent=2)
        except (TypeError, ValueError) as e:
            raise InternalError(f"Failed to serialize wallpaper config: {e}") from e

    @classmethod
    def from_dict(cls, data: Any) -> 'WallpaperConfig':
        """
        Parse a descriptor.

        Raises:
            PaletteParseError: If the descriptor has an unexpected shape
        """
        if not isinstance(data, dict) or not isinstance(data.get("file_path"), str):
            raise PaletteParseError("Wallpaper descriptor has no 'file_path' string")
        if "colors" not in data:
            raise PaletteParseError("Wallpaper descriptor has no 'colors' object")
        return cls(file_path=data["file_path"], colors=Colors.from_dict(data["colors"]))


def destination_for(active_directory: Path, wallpaper_path: Path) -> Path:
    """
    Get where a wallpaper lands inside the active directory.

    Raises:
        InvalidInputError: If the path has no file name component
    """
    if not wallpaper_path.name or wallpaper_path.name in (".", ".."):
        raise InvalidInputError(f"Wallpaper file name is missing: {str(wallpaper_path)!r}")
    return active_directory / wallpaper_path.name


def copy_wallpaper(active_directory: Path, wallpaper_path: Path) -> Path:
    """
    Copy a wallpaper into the active directory under its own file name.

    Returns:
        Destination path

    Raises:
        InvalidInputError: If the path has no file name component
        WallpaperIOError: If the copy fails
    """
    destination = destination_for(active_directory, wallpaper_path)
    try:
        shutil.copy(wallpaper_path, destination)
    except shutil.SameFileError:
        logger.debug(f"{wallpaper_path} is already in place")
    except OSError as e:
        raise WallpaperIOError(f"Failed to copy wallpaper to {destination}: {e}") from e

    logger.info(f"Wallpaper copied to {destination}")
    return destination


def write_descriptor(
    cache_directory: Path,
    wallpaper_config: WallpaperConfig,
    name: str = DESCRIPTOR_NAME,
) -> Path:
    """
    Write the descriptor into the cache directory, replacing any previous one.

    Returns:
        Path of the written file

    Raises:
        InternalError: If serialization fails
        WallpaperIOError: If the write fails
    """
    config_file_path = cache_directory / name
    config_json = wallpaper_config.to_json()

    try:
        config_file_path.write_text(config_json, encoding='utf-8')
    except OSError as e:
        raise WallpaperIOError(f"Failed to write to config file {config_file_path}: {e}") from e

    logger.info(f"Wallpaper config written to {config_file_path}")
    return config_file_path


def read_descriptor(path: Path) -> WallpaperConfig:
    """
    Load an existing descriptor.

    Raises:
        WallpaperIOError: If the file cannot be read
        PaletteParseError: If it is not a valid descriptor
    """
    try:
        content = path.read_text(encoding='utf-8')
    except OSError as e:
        raise WallpaperIOError(f"Failed to read wallpaper config {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise PaletteParseError(f"Malformed wallpaper config {path}: {e}") from e

    return WallpaperConfig.from_dict(data)
