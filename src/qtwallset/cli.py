"""
Command-line interface for qtwallset.

Usage:
    qtwallset [options] WALLPAPER_PATH
    qtwallset --show [--json]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Config
from .exceptions import (
    QtWallsetError,
    ConfigError,
    ConfigValidationError,
    MissingDependencyError,
    ExecutionError,
    PaletteParseError,
    InvalidInputError,
    WallpaperIOError,
    InternalError,
)
from .commands import apply_wallpaper, show_current


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qtwallset",
        description="A tool to set Qtile wallpaper for my config"
    )

    parser.add_argument(
        "wallpaper_path",
        nargs="?",
        type=Path,
        help="Path to the wallpaper image"
    )
    parser.add_argument(
        "-o", "--output-directory",
        help="Root configuration directory (default: ~/.config/qtile)"
    )
    parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Do not reload Qtile"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to config file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Show the current wallpaper descriptor and exit"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With --show, print the raw descriptor"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.show and args.wallpaper_path is None:
        parser.error("the following arguments are required: wallpaper_path")
    if args.json and not args.show:
        parser.error("--json requires --show")

    logger = logging.getLogger(__name__)

    try:
        config = Config.load(config_file=args.config).with_overrides(
            output_directory=args.output_directory,
            no_reload=args.no_reload,
            verbose=args.verbose,
        )

        setup_logging(config.logging.level)

        if args.show:
            show_current(config, json_output=args.json)
        else:
            apply_wallpaper(config, args.wallpaper_path)

        return 0

    # Handle specific error types with appropriate exit codes and messages
    except KeyboardInterrupt:
        print("\nCancelled by user", file=sys.stderr)
        return 130

    except ConfigValidationError as e:
        print(f"\n❌ Configuration Validation Error: {e}", file=sys.stderr)
        return 78  # EX_CONFIG

    except ConfigError as e:
        print(f"\n❌ Configuration Error: {e}", file=sys.stderr)
        return 78  # EX_CONFIG

    except MissingDependencyError as e:
        print(f"\n❌ Missing Dependency: {e}", file=sys.stderr)
        return 69  # EX_UNAVAILABLE

    except PaletteParseError as e:
        print(f"\n❌ Palette Error: {e}", file=sys.stderr)
        return 65  # EX_DATAERR

    except InvalidInputError as e:
        print(f"\n❌ Invalid Input: {e}", file=sys.stderr)
        return 64  # EX_USAGE

    except WallpaperIOError as e:
        print(f"\n❌ Filesystem Error: {e}", file=sys.stderr)
        return 74  # EX_IOERR

    except (ExecutionError, InternalError) as e:
        print(f"\n❌ Command Failed: {e}", file=sys.stderr)
        return 70  # EX_SOFTWARE

    except QtWallsetError as e:
        # Catch-all for any other qtwallset errors
        print(f"\n❌ Error: {e}", file=sys.stderr)
        logger.error(str(e))
        if args.verbose:
            raise
        return 1

    except Exception as e:
        # Unexpected errors - show full traceback in verbose mode
        print(f"\n❌ Unexpected Error: {type(e).__name__}: {e}", file=sys.stderr)
        logger.error(f"Unexpected error: {type(e).__name__}: {e}")
        if args.verbose:
            raise
        print("\nRun with -v/--verbose for full traceback.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
