"""
Color palette extraction.

Runs the external palette generator (matugen) against an image and parses
its JSON output into light and dark material color schemes.
"""

import json
import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import PaletteConfig
from .exceptions import ExecutionError, PaletteParseError


@dataclass
class ColorScheme:
    """Material color roles for one appearance mode, as hex strings."""
    background: str
    error: str
    error_container: str
    inverse_on_surface: str
    inverse_primary: str
    inverse_surface: str
    on_background: str
    on_error: str
    on_error_container: str
    on_primary: str
    on_primary_container: str
    on_primary_fixed: str
    on_primary_fixed_variant: str
    on_secondary: str
    on_secondary_container: str
    on_secondary_fixed: str
    on_secondary_fixed_variant: str
    on_surface: str
    on_surface_variant: str
    on_tertiary: str
    on_tertiary_container: str
    on_tertiary_fixed: str
    on_tertiary_fixed_variant: str
    outline: str
    outline_variant: str
    primary: str
    primary_container: str
    primary_fixed: str
    primary_fixed_dim: str
    scrim: str
    secondary: str
    secondary_container: str
    secondary_fixed: str
    secondary_fixed_dim: str
    shadow: str
    surface: str
    surface_bright: str
    surface_container: str
    surface_container_high: str
    surface_container_highest: str
    surface_container_low: str
    surface_container_lowest: str
    surface_dim: str
    surface_tint: str
    surface_variant: str
    tertiary: str
    tertiary_container: str
    tertiary_fixed: str
    tertiary_fixed_dim: str

    @classmethod
    def role_names(cls) -> List[str]:
        """Get the color role names in declaration order."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Any, mode: str = "scheme") -> 'ColorScheme':
        """
        Parse a scheme from decoded JSON.

        Unknown roles are ignored so newer generator versions keep working.

        Raises:
            PaletteParseError: If data is not an object, or a role is missing
                or not a string
        """
        if not isinstance(data, dict):
            raise PaletteParseError(
                f"Expected an object for the {mode} scheme, got {type(data).__name__}"
            )

        names = cls.role_names()
        missing = [name for name in names if name not in data]
        if missing:
            raise PaletteParseError(
                f"The {mode} scheme is missing color roles: {', '.join(missing)}"
            )

        invalid = [name for name in names if not isinstance(data[name], str)]
        if invalid:
            raise PaletteParseError(
                f"The {mode} scheme has non-string values for: {', '.join(invalid)}"
            )

        return cls(**{name: data[name] for name in names})

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class Colors:
    """Dark and light color schemes derived from one image."""
    dark: ColorScheme
    light: ColorScheme

    @classmethod
    def from_dict(cls, data: Any) -> 'Colors':
        """
        Parse `{"dark": {...}, "light": {...}}`.

        Raises:
            PaletteParseError: If either scheme is absent or malformed
        """
        if not isinstance(data, dict):
            raise PaletteParseError(
                f"Expected an object for colors, got {type(data).__name__}"
            )
        for mode in ("dark", "light"):
            if mode not in data:
                raise PaletteParseError(f"Palette has no {mode} scheme")

        return cls(
            dark=ColorScheme.from_dict(data["dark"], mode="dark"),
            light=ColorScheme.from_dict(data["light"], mode="light"),
        )

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {"dark": self.dark.to_dict(), "light": self.light.to_dict()}


def parse_generator_output(output: str) -> Colors:
    """
    Parse the palette generator's stdout.

    Expected shape: `{"colors": {"dark": {...}, "light": {...}}}`.

    Raises:
        PaletteParseError: If output is not JSON or has an unexpected shape
    """
    try:
        payload = json.loads(output)
    except json.JSONDecodeError as e:
        raise PaletteParseError(f"Failed to parse palette generator output: {e}") from e

    if not isinstance(payload, dict) or "colors" not in payload:
        raise PaletteParseError(
            "Failed to parse palette generator output: no 'colors' object"
        )

    return Colors.from_dict(payload["colors"])


class PaletteGenerator(ABC):
    """Abstract base class for palette sources."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def command(self) -> str:
        """Binary that must be installed for generate() to work."""
        pass

    @abstractmethod
    def generate(self, image_path: Path) -> Colors:
        """
        Derive a palette from an image.

        Args:
            image_path: Path to the wallpaper image

        Returns:
            Parsed Colors

        Raises:
            ExecutionError: If the generator cannot run or fails
            PaletteParseError: If its output has an unexpected shape
        """
        pass


class MatugenPaletteGenerator(PaletteGenerator):
    """Palette generator backed by the matugen CLI."""

    def __init__(self, config: Optional[PaletteConfig] = None) -> None:
        super().__init__()
        self.config = config or PaletteConfig()

    @property
    def command(self) -> str:
        return self.config.command

    def build_command(self, image_path: Path) -> List[str]:
        """Build the matugen argument list for an image."""
        cmd = [self.config.command, "image", str(image_path), "--json", "hex"]
        if self.config.mode:
            cmd.extend(["--mode", self.config.mode])
        if self.config.scheme_type:
            cmd.extend(["--type", self.config.scheme_type])
        return cmd

    def generate(self, image_path: Path) -> Colors:
        cmd = self.build_command(image_path)
        cmd_str = ' '.join(cmd)
        self.logger.debug(f"Running command: {cmd_str}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.config.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ExecutionError(
                f"{self.config.command} timed out after {self.config.timeout}s: {cmd_str}"
            ) from e
        except OSError as e:
            raise ExecutionError(f"Failed to execute {self.config.command} command: {e}") from e

        # undecodable bytes must surface as a parse failure, not a decode error
        stdout = result.stdout.decode("utf-8", errors="replace")
        stderr = result.stderr.decode("utf-8", errors="replace")

        if result.returncode != 0:
            error_msg = f"Command failed with exit code {result.returncode}: {cmd_str}"
            if stderr:
                error_msg += f"\nStderr: {stderr.strip()}"
            raise ExecutionError(error_msg)

        colors = parse_generator_output(stdout)
        self.logger.info(f"Generated palette from {image_path}")
        return colors
