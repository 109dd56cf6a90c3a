"""
Window manager reload trigger.

Asks the running Qtile session to re-read its configuration so the new
palette is picked up.
"""

import logging
import subprocess
from typing import Optional

from .config import ReloadConfig
from .dependencies import require_command
from .exceptions import ExecutionError


class WindowManagerReloader:
    """Spawns the reload command without waiting for it."""

    def __init__(self, config: Optional[ReloadConfig] = None) -> None:
        self.config = config or ReloadConfig()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def reload(self) -> None:
        """
        Trigger a configuration reload.

        The process is detached and its exit status is never inspected.

        Raises:
            MissingDependencyError: If the window manager binary is not on PATH
            ExecutionError: If the reload process cannot be spawned
        """
        require_command(self.config.binary)

        cmd = ["sh", "-c", self.config.command]
        self.logger.debug(f"Running command: {self.config.command}")

        try:
            # never waited on; the child outlives this process in its own session
            subprocess.Popen(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise ExecutionError(f"Failed to restart {self.config.binary}: {e}") from e

        self.logger.info(f"Triggered {self.config.binary} reload.")
