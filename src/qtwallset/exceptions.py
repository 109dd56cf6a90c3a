"""
Common exception classes for qtwallset.

Provides domain-specific exceptions for consistent error handling across modules.
All exceptions inherit from QtWallsetError for unified catching at CLI level.
"""


class QtWallsetError(Exception):
    """
    Base exception for all qtwallset errors.

    All domain-specific exceptions inherit from this class, allowing
    callers to catch all qtwallset errors with a single except clause.
    """
    pass


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigError(QtWallsetError):
    """
    Configuration-related errors.

    Raised when:
    - Config file is malformed or unreadable
    - Config contains unknown sections or keys
    - A config value has the wrong type
    """
    pass


class ConfigValidationError(ConfigError):
    """
    Config value validation failed.

    Raised when a config value is present but invalid (e.g., non-positive
    timeout, unknown log level, empty command).
    """
    pass


# ============================================================================
# External Command Errors
# ============================================================================

class MissingDependencyError(QtWallsetError):
    """
    Required external binary not found in PATH.

    Raised when the palette generator or the window manager is not installed.
    """
    pass


class ExecutionError(QtWallsetError):
    """
    External command could not be spawned or exited abnormally.

    Raised for spawn failures, non-zero exit codes and timeouts.
    """
    pass


# ============================================================================
# Data Errors
# ============================================================================

class PaletteParseError(QtWallsetError):
    """
    Palette generator output has an unexpected shape.

    Raised when the output is not JSON, or when the light/dark schemes
    are missing color roles.
    """
    pass


class InvalidInputError(QtWallsetError):
    """Malformed path argument (e.g., no file name component)."""
    pass


class WallpaperIOError(QtWallsetError):
    """
    Filesystem error while clearing, copying or writing.

    Already-completed side effects are not rolled back.
    """
    pass


class InternalError(QtWallsetError):
    """Descriptor serialization failed."""
    pass
