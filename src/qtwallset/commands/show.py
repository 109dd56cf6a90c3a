"""Show command: print the current wallpaper descriptor."""

import json
from pathlib import Path

from ..config import Config
from ..wallpaper import WallpaperDirectories, read_descriptor
from ..exceptions import WallpaperIOError


def show_current(config: Config, json_output: bool = False) -> None:
    """
    Display the active wallpaper and its primary colors.

    Args:
        config: Config instance
        json_output: If True, print the raw descriptor instead

    Raises:
        WallpaperIOError: If no descriptor has been written yet
    """
    directories = WallpaperDirectories.from_config(config.paths)
    descriptor_path = directories.cache / config.paths.descriptor_name

    if not descriptor_path.exists():
        raise WallpaperIOError(
            f"No wallpaper descriptor at {descriptor_path}. Set a wallpaper first."
        )

    wallpaper_config = read_descriptor(descriptor_path)

    if json_output:
        print(json.dumps(wallpaper_config.to_dict(), indent=2))
        return

    print("qtwallset Status")
    print("=" * 40)
    print(f"  Wallpaper:  {wallpaper_config.file_path}")
    print(f"  Exists:     {'✓' if Path(wallpaper_config.file_path).exists() else '✗'}")
    print(f"  Descriptor: {descriptor_path}")

    for mode in ("dark", "light"):
        scheme = getattr(wallpaper_config.colors, mode)
        print(f"\n{mode.capitalize()} scheme")
        print(f"  primary:    {scheme.primary}")
        print(f"  secondary:  {scheme.secondary}")
        print(f"  tertiary:   {scheme.tertiary}")
        print(f"  surface:    {scheme.surface}")
        print(f"  background: {scheme.background}")
