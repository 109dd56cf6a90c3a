"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from qtwallset.config import (
    Config,
    ConfigError,
    ConfigValidationError,
    PaletteConfig,
    PathsConfig,
    ReloadConfig,
    LoggingConfig,
)
from qtwallset.wallpaper import WallpaperDirectories


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "config.toml"


class TestConfigLoading:

    def test_missing_file_uses_defaults(self, tmp_path):
        config = Config.load(config_file=tmp_path / "missing.toml")

        assert config.paths.output_directory == "~/.config/qtile"
        assert config.palette.command == "matugen"
        assert config.reload.enabled is True
        assert config.reload.command == "qtile cmd-obj -o cmd -f reload_config"
        assert config.logging.level == "INFO"

    def test_default_location_honours_xdg(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert Config.get_config_file() == tmp_path / "qtwallset" / "config.toml"

    def test_default_location_without_xdg(self, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert Config.get_config_dir() == tmp_path / ".config" / "qtwallset"

    def test_load_all_sections(self, config_file):
        config_file.write_text("""
[paths]
output_directory = "~/dotfiles/qtile"

[palette]
command = "matugen"
mode = "dark"
scheme_type = "scheme-fidelity"
timeout = 30

[reload]
enabled = false
binary = "qtile"
command = "qtile cmd-obj -o cmd -f restart"

[logging]
level = "WARNING"
""")

        config = Config.load(config_file=config_file)

        assert config.paths.output_directory == "~/dotfiles/qtile"
        assert config.palette.mode == "dark"
        assert config.palette.scheme_type == "scheme-fidelity"
        assert config.palette.timeout == 30
        assert config.reload.enabled is False
        assert config.reload.command == "qtile cmd-obj -o cmd -f restart"
        assert config.logging.level == "WARNING"

    def test_malformed_toml(self, config_file):
        config_file.write_text("[paths\noutput_directory = ")

        with pytest.raises(ConfigError) as exc_info:
            Config.load(config_file=config_file)
        assert "Malformed config file" in str(exc_info.value)

    def test_unknown_section(self, config_file):
        config_file.write_text("[wallust]\nbackend = \"kmeans\"\n")

        with pytest.raises(ConfigError) as exc_info:
            Config.load(config_file=config_file)
        assert "Unknown config section 'wallust'" in str(exc_info.value)

    def test_unknown_key(self, config_file):
        config_file.write_text("[reload]\nsignal = \"HUP\"\n")

        with pytest.raises(ConfigError) as exc_info:
            Config.load(config_file=config_file)
        assert "Unknown key 'signal'" in str(exc_info.value)

    def test_verbose_is_not_a_config_key(self, config_file):
        config_file.write_text("[logging]\nverbose = true\n")

        with pytest.raises(ConfigError) as exc_info:
            Config.load(config_file=config_file)
        assert "Unknown key 'verbose'" in str(exc_info.value)

    def test_wrong_type(self, config_file):
        config_file.write_text("[palette]\ntimeout = \"soon\"\n")

        with pytest.raises(ConfigError) as exc_info:
            Config.load(config_file=config_file)
        assert "'palette.timeout' must be of type int" in str(exc_info.value)

    def test_bool_is_not_an_int(self, config_file):
        config_file.write_text("[palette]\ntimeout = true\n")

        with pytest.raises(ConfigError):
            Config.load(config_file=config_file)

    def test_section_must_be_table(self, config_file):
        config_file.write_text("paths = \"~/.config/qtile\"\n")

        with pytest.raises(ConfigError) as exc_info:
            Config.load(config_file=config_file)
        assert "must be a dictionary" in str(exc_info.value)


class TestConfigValidation:

    def test_non_positive_timeout(self):
        with pytest.raises(ConfigValidationError):
            Config(palette=PaletteConfig(timeout=0))

    def test_unknown_mode(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            Config(palette=PaletteConfig(mode="sepia"))
        assert "Invalid palette mode" in str(exc_info.value)

    def test_invalid_log_level(self):
        with pytest.raises(ConfigValidationError):
            Config(logging=LoggingConfig(level="LOUD"))

    def test_empty_output_directory(self):
        with pytest.raises(ConfigValidationError):
            Config(paths=PathsConfig(output_directory="  "))

    def test_descriptor_name_must_be_plain(self):
        with pytest.raises(ConfigValidationError):
            Config(paths=PathsConfig(descriptor_name="../escape.json"))

    def test_empty_reload_command_when_enabled(self):
        with pytest.raises(ConfigValidationError):
            Config(reload=ReloadConfig(command=""))

    def test_empty_reload_command_when_disabled(self):
        config = Config(reload=ReloadConfig(enabled=False, command=""))
        assert config.reload.enabled is False

    def test_validation_error_is_config_error(self):
        assert issubclass(ConfigValidationError, ConfigError)


class TestOverrides:

    def test_output_directory_override(self):
        config = Config().with_overrides(output_directory="/tmp/qtile")

        assert config.paths.output_directory == "/tmp/qtile"
        assert config.paths.cache_subdir == "cache"

    def test_no_override_keeps_file_value(self):
        base = Config(paths=PathsConfig(output_directory="~/dots/qtile"))

        assert base.with_overrides().paths.output_directory == "~/dots/qtile"

    def test_no_reload_override(self):
        config = Config().with_overrides(no_reload=True)

        assert config.reload.enabled is False

    def test_verbose_override(self):
        config = Config().with_overrides(verbose=True)

        assert config.logging.level == "DEBUG"

    def test_overrides_do_not_mutate_original(self):
        base = Config()

        base.with_overrides(output_directory="/elsewhere", no_reload=True)

        assert base.paths.output_directory == "~/.config/qtile"
        assert base.reload.enabled is True

    def test_tilde_expansion(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        config = Config().with_overrides(output_directory="~/custom")

        directories = WallpaperDirectories.from_config(config.paths)
        assert directories.active == tmp_path / "custom" / "wallpaper" / "active"
