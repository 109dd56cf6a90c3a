"""
qtwallset - Qtile wallpaper setter.

Derive a material color palette from an image with matugen, install the
image as the active wallpaper, record both in a JSON descriptor and reload
Qtile.
"""

__version__ = "0.1.0"

from .config import Config
from .palette import ColorScheme, Colors, PaletteGenerator, MatugenPaletteGenerator
from .wallpaper import WallpaperConfig, WallpaperDirectories
from .reload import WindowManagerReloader
from .pipeline import WallpaperPipeline

__all__ = [
    "Config",
    "ColorScheme",
    "Colors",
    "PaletteGenerator",
    "MatugenPaletteGenerator",
    "WallpaperConfig",
    "WallpaperDirectories",
    "WindowManagerReloader",
    "WallpaperPipeline",
]
