"""
External binary checks.

The pipeline verifies its collaborators are installed before touching the
filesystem.
"""

import logging
import shutil
from typing import Optional

from .exceptions import MissingDependencyError

logger = logging.getLogger(__name__)


def command_exists(command: str) -> bool:
    """Check if a command resolves on PATH."""
    return shutil.which(command) is not None


def require_command(command: str, package: Optional[str] = None) -> str:
    """
    Ensure a command is installed.

    Args:
        command: Binary name to look up (e.g., "matugen")
        package: Name to show in the install hint (defaults to command)

    Returns:
        Resolved path of the binary

    Raises:
        MissingDependencyError: If the command is not on PATH
    """
    path = shutil.which(command)
    if path is None:
        name = package or command
        raise MissingDependencyError(
            f"{name} is not installed. Please install {name}."
        )
    logger.debug(f"Found {command} at {path}")
    return path
