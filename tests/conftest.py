"""Test configuration and fixtures."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

from qtwallset.config import Config, PathsConfig, PaletteConfig, ReloadConfig
from qtwallset.palette import ColorScheme, Colors, PaletteGenerator, parse_generator_output
from qtwallset.reload import WindowManagerReloader


def make_scheme(seed: int) -> Dict[str, str]:
    """Build a complete color scheme with distinct hex values."""
    return {
        name: f"#{(seed * 0x10101 + index * 0x0b0d07) % 0xffffff:06x}"
        for index, name in enumerate(ColorScheme.role_names())
    }


class StubPaletteGenerator(PaletteGenerator):
    """Returns a fixed generator payload instead of running matugen."""

    def __init__(self, output: str, command: str = "matugen") -> None:
        super().__init__()
        self.output = output
        self._command = command
        self.calls: List[Path] = []

    @property
    def command(self) -> str:
        return self._command

    def generate(self, image_path: Path) -> Colors:
        self.calls.append(image_path)
        return parse_generator_output(self.output)


class SpyReloader(WindowManagerReloader):
    """Records reload requests instead of spawning a process."""

    def __init__(self) -> None:
        super().__init__(ReloadConfig())
        self.calls = 0

    def reload(self):
        self.calls += 1
        return None


@pytest.fixture
def matugen_payload() -> Dict[str, Any]:
    """Well-formed `matugen image --json hex` output."""
    return {
        "image": "/tmp/wall.png",
        "mode": "dark",
        "colors": {
            "dark": make_scheme(1),
            "light": make_scheme(2),
        },
        "palettes": {"primary": {"0": "#000000", "100": "#ffffff"}},
    }


@pytest.fixture
def matugen_output(matugen_payload: Dict[str, Any]) -> str:
    return json.dumps(matugen_payload)


@pytest.fixture
def stub_generator(matugen_output: str) -> StubPaletteGenerator:
    return StubPaletteGenerator(matugen_output)


@pytest.fixture
def spy_reloader() -> SpyReloader:
    return SpyReloader()


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Output root standing in for ~/.config/qtile."""
    root = tmp_path / "qtile"
    root.mkdir()
    return root


@pytest.fixture
def active_dir(output_root: Path) -> Path:
    return output_root / "wallpaper" / "active"


@pytest.fixture
def cache_dir(output_root: Path) -> Path:
    return output_root / "cache"


@pytest.fixture
def source_image(tmp_path: Path) -> Path:
    """A wallpaper outside the managed directories."""
    pictures = tmp_path / "Pictures"
    pictures.mkdir()
    image = pictures / "forest.png"
    image.write_bytes(b"\x89PNG\r\n\x1a\nfake image data")
    return image


@pytest.fixture
def test_config(output_root: Path) -> Config:
    """Config pointing at the temporary output root."""
    return Config(
        paths=PathsConfig(output_directory=str(output_root)),
        palette=PaletteConfig(),
        reload=ReloadConfig(),
    )


@pytest.fixture
def installed_commands(monkeypatch) -> Callable[..., None]:
    """Control which binaries shutil.which resolves."""
    def install(*names: str) -> None:
        available = set(names)

        def fake_which(cmd: str, *args, **kwargs) -> Optional[str]:
            return f"/usr/bin/{cmd}" if cmd in available else None

        monkeypatch.setattr("qtwallset.dependencies.shutil.which", fake_which)

    return install
