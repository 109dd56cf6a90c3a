"""
Configuration validation for qtwallset.
"""

from pathlib import Path
from typing import Dict, Any

from ..exceptions import ConfigError


VALID_STRUCTURE = {
    'paths': {
        'output_directory': str,
        'active_subdir': str,
        'cache_subdir': str,
        'descriptor_name': str,
    },
    'palette': {
        'command': str,
        'mode': str,
        'scheme_type': str,
        'timeout': int,
    },
    'reload': {
        'enabled': bool,
        'binary': str,
        'command': str,
    },
    'logging': {
        'level': str,
    },
}

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
VALID_PALETTE_MODES = ['dark', 'light', 'amoled']


def validate_toml_structure(config_dict: Dict[str, Any], config_file: Path) -> None:
    """
    Validate TOML structure before creating dataclasses.

    Checks for unknown sections and keys, providing helpful error messages.

    Args:
        config_dict: Loaded TOML configuration dictionary
        config_file: Path to config file for error messages

    Raises:
        ConfigError: If structure validation fails
    """
    for section in config_dict:
        if section not in VALID_STRUCTURE:
            raise ConfigError(
                f"Unknown config section '{section}' in {config_file}. "
                f"Valid sections: {list(VALID_STRUCTURE.keys())}"
            )

    for section_name, section_config in config_dict.items():
        if not isinstance(section_config, dict):
            raise ConfigError(
                f"Section '{section_name}' must be a dictionary in {config_file}"
            )

        valid_keys = VALID_STRUCTURE[section_name]

        for key, value in section_config.items():
            if key not in valid_keys:
                raise ConfigError(
                    f"Unknown key '{key}' in section '{section_name}' in {config_file}. "
                    f"Valid keys: {list(valid_keys.keys())}"
                )

            # bool is an int subclass, so `timeout = true` must be rejected explicitly
            expected_type = valid_keys[key]
            if not isinstance(value, expected_type) or (
                expected_type is int and isinstance(value, bool)
            ):
                raise ConfigError(
                    f"Key '{section_name}.{key}' must be of type {expected_type.__name__} "
                    f"in {config_file}, got {type(value).__name__}"
                )
