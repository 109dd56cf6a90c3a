"""
Configuration package for qtwallset.
"""

from .main import Config
from .dataclasses import (
    PathsConfig,
    PaletteConfig,
    ReloadConfig,
    LoggingConfig,
)
from ..exceptions import ConfigError, ConfigValidationError
