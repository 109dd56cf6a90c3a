"""CLI commands module."""

from .apply import apply_wallpaper
from .show import show_current

__all__ = [
    "apply_wallpaper",
    "show_current",
]
