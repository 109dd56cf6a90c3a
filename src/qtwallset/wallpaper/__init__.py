"""Wallpaper management module."""

from .directories import WallpaperDirectories, clear_directory, resolve_path
from .descriptor import (
    WallpaperConfig,
    copy_wallpaper,
    destination_for,
    read_descriptor,
    write_descriptor,
)

__all__ = [
    "WallpaperDirectories",
    "WallpaperConfig",
    "clear_directory",
    "copy_wallpaper",
    "destination_for",
    "read_descriptor",
    "resolve_path",
    "write_descriptor",
]
