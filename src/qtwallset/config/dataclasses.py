"""
Configuration dataclasses for qtwallset.
"""

from typing import Optional
from dataclasses import dataclass


DEFAULT_OUTPUT_DIRECTORY = "~/.config/qtile"
DEFAULT_RELOAD_COMMAND = "qtile cmd-obj -o cmd -f reload_config"


@dataclass
class PathsConfig:
    """Output locations."""
    output_directory: str = DEFAULT_OUTPUT_DIRECTORY
    active_subdir: str = "wallpaper/active"
    cache_subdir: str = "cache"
    descriptor_name: str = "wallpaper_info.json"


@dataclass
class PaletteConfig:
    """Palette generator settings."""
    command: str = "matugen"
    mode: Optional[str] = None  # dark, light, amoled
    scheme_type: Optional[str] = None  # e.g. scheme-tonal-spot
    timeout: int = 60


@dataclass
class ReloadConfig:
    """Window manager reload settings."""
    enabled: bool = True
    binary: str = "qtile"
    command: str = DEFAULT_RELOAD_COMMAND


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
