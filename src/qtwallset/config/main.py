"""
Main Config class for qtwallset.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field, replace

try:
    import tomli
except ImportError:
    raise ImportError("Required package 'tomli' not found. Install with: pip install tomli")

from ..exceptions import ConfigError, ConfigValidationError

from .dataclasses import (
    PathsConfig,
    PaletteConfig,
    ReloadConfig,
    LoggingConfig,
)
from .validation import (
    VALID_LOG_LEVELS,
    VALID_PALETTE_MODES,
    validate_toml_structure,
)


@dataclass
class Config:
    """
    Main configuration class for qtwallset.

    Configuration is loaded from an optional TOML file; command-line flags
    are applied on top with `with_overrides`.
    """

    paths: PathsConfig = field(default_factory=PathsConfig)
    palette: PaletteConfig = field(default_factory=PaletteConfig)
    reload: ReloadConfig = field(default_factory=ReloadConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.paths.output_directory.strip():
            raise ConfigValidationError("paths.output_directory must not be empty.")

        if not self.paths.descriptor_name or "/" in self.paths.descriptor_name:
            raise ConfigValidationError(
                f"Invalid descriptor name: {self.paths.descriptor_name!r}\n"
                "Must be a plain file name."
            )

        if not self.palette.command.strip():
            raise ConfigValidationError("palette.command must not be empty.")

        if self.palette.timeout <= 0:
            raise ConfigValidationError(
                f"Palette timeout ({self.palette.timeout}s) must be positive."
            )

        if self.palette.mode is not None and self.palette.mode not in VALID_PALETTE_MODES:
            raise ConfigValidationError(
                f"Invalid palette mode: {self.palette.mode}\n"
                f"Must be one of: {VALID_PALETTE_MODES}"
            )

        if self.reload.enabled and not (self.reload.binary.strip() and self.reload.command.strip()):
            raise ConfigValidationError(
                "reload.binary and reload.command must be set when reload is enabled."
            )

        if self.logging.level.upper() not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level: {self.logging.level}\n"
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

    def with_overrides(
        self,
        output_directory: Optional[str] = None,
        no_reload: bool = False,
        verbose: bool = False,
    ) -> 'Config':
        """
        Return a copy with command-line overrides applied.

        Args:
            output_directory: Replaces paths.output_directory when given
            no_reload: Disables the reload stage
            verbose: Forces DEBUG logging
        """
        paths = self.paths
        if output_directory is not None:
            paths = replace(paths, output_directory=output_directory)

        reload = replace(self.reload, enabled=False) if no_reload else self.reload
        logging_config = (
            replace(self.logging, level="DEBUG") if verbose else self.logging
        )

        return replace(self, paths=paths, reload=reload, logging=logging_config)

    @classmethod
    def get_config_dir(cls) -> Path:
        """
        Get user configuration directory.

        Uses XDG_CONFIG_HOME if set, otherwise defaults to ~/.config.
        """
        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / "qtwallset"
        return Path.home() / ".config" / "qtwallset"

    @classmethod
    def get_config_file(cls) -> Path:
        """Get default config file path."""
        return cls.get_config_dir() / "config.toml"

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> 'Config':
        """
        Load configuration from TOML file.

        A missing file yields the defaults.

        Args:
            config_file: Optional path to config TOML file

        Returns:
            Config instance with loaded settings

        Raises:
            ConfigError: If the file is unreadable, malformed or has unknown keys
        """
        logger = logging.getLogger(__name__)

        if not config_file:
            config_file = cls.get_config_file()

        config_dict = {}
        if config_file.exists():
            try:
                with open(config_file, 'rb') as f:
                    config_dict = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise ConfigError(f"Malformed config file {config_file}: {e}") from e
            except OSError as e:
                raise ConfigError(f"Failed to read config file {config_file}: {e}") from e

            validate_toml_structure(config_dict, config_file)
            logger.debug(f"Loaded config from {config_file}")
        else:
            logger.debug(f"No config file at {config_file}, using defaults")

        return cls(
            paths=PathsConfig(**config_dict.get('paths', {})),
            palette=PaletteConfig(**config_dict.get('palette', {})),
            reload=ReloadConfig(**config_dict.get('reload', {})),
            logging=LoggingConfig(**config_dict.get('logging', {})),
        )
