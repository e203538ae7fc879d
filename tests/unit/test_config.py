"""
Unit Tests for Configuration Module

These tests verify that:
- Settings are loaded from NANJI_* environment variables
- The config file is discovered via NANJI_CONFIG_FILE or XDG_CONFIG_HOME
- A valid config.toml yields zones and aliases
- Missing, unreadable or malformed config behaves like no config

Run with:
    pytest tests/unit/test_config.py -v
"""

import pytest

from nanji.core.config import (
    Settings,
    ZoneConfig,
    find_config_path,
    get_settings,
    load_config,
    load_zone_config,
)


VALID_CONFIG = """
zones = ["Asia/Tokyo", "America/Chicago"]

[aliases]
London = "Europe/London"
home = "America/Chicago"
"""


class TestSettings:
    """Environment-level settings"""

    def test_defaults(self):
        """Verify defaults with no NANJI_* variables"""
        settings = get_settings()
        assert settings.log_level == "WARNING"
        assert settings.config_file is None

    def test_log_level_from_env(self, monkeypatch):
        """Verify NANJI_LOG_LEVEL is read and uppercased"""
        monkeypatch.setenv("NANJI_LOG_LEVEL", "debug")
        assert get_settings().log_level == "DEBUG"

    def test_invalid_log_level_falls_back(self, monkeypatch):
        """Verify an unknown level does not break startup"""
        monkeypatch.setenv("NANJI_LOG_LEVEL", "chatty")
        assert get_settings().log_level == "WARNING"

    def test_config_file_from_env(self, monkeypatch, tmp_path):
        """Verify NANJI_CONFIG_FILE is read"""
        path = tmp_path / "custom.toml"
        monkeypatch.setenv("NANJI_CONFIG_FILE", str(path))
        assert get_settings().config_file == str(path)


class TestConfigDiscovery:
    """Locating config.toml"""

    def test_no_file(self):
        """Verify None when nothing exists"""
        assert find_config_path(get_settings()) is None

    def test_xdg_location(self, write_config):
        """Verify $XDG_CONFIG_HOME/nanji/config.toml is found"""
        path = write_config(VALID_CONFIG)
        assert find_config_path(get_settings()) == path

    def test_explicit_path_wins(self, write_config, tmp_path):
        """Verify an explicit path is used instead of the XDG location"""
        write_config(VALID_CONFIG)
        custom = tmp_path / "custom.toml"
        custom.write_text('zones = ["Europe/Paris"]', encoding="utf-8")

        assert find_config_path(Settings(config_file=str(custom))) == custom

    def test_explicit_missing_path(self, write_config, tmp_path):
        """Verify a missing explicit path means no config (no XDG fallback)"""
        write_config(VALID_CONFIG)
        assert find_config_path(Settings(config_file=str(tmp_path / "missing.toml"))) is None

    def test_home_fallback(self, monkeypatch, tmp_path):
        """Verify ~/.config is used when XDG_CONFIG_HOME is unset"""
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))
        app_dir = tmp_path / ".config" / "nanji"
        app_dir.mkdir(parents=True)
        (app_dir / "config.toml").write_text(VALID_CONFIG, encoding="utf-8")

        assert find_config_path(get_settings()) == app_dir / "config.toml"


class TestConfigLoading:
    """Parsing and validation of config.toml"""

    def test_valid_config(self, write_config):
        """Verify zones and aliases are loaded as written"""
        config = load_zone_config(write_config(VALID_CONFIG))
        assert config.zones == ["Asia/Tokyo", "America/Chicago"]
        assert config.aliases == {"London": "Europe/London", "home": "America/Chicago"}

    def test_load_config_convenience(self, write_config):
        """Verify discovery and loading in one call"""
        write_config(VALID_CONFIG)
        assert load_config().zones == ["Asia/Tokyo", "America/Chicago"]

    def test_none_path(self):
        """Verify no path means empty config"""
        config = load_zone_config(None)
        assert config.zones is None
        assert config.aliases == {}

    def test_partial_config(self, write_config):
        """Verify either section may be omitted"""
        config = load_zone_config(write_config("[aliases]\nhome = 'Asia/Seoul'\n"))
        assert config.zones is None
        assert config.aliases == {"home": "Asia/Seoul"}

    def test_unknown_keys_ignored(self, write_config):
        """Verify extra keys do not invalidate the file"""
        config = load_zone_config(write_config('zones = ["UTC"]\ntheme = "dark"\n'))
        assert config.zones == ["UTC"]

    @pytest.mark.parametrize("content", [
        "zones = [",                      # TOML syntax error
        'zones = "Asia/Tokyo"',           # wrong type
        "zones = [1, 2]",                 # wrong element type
        "[aliases]\nhome = 42\n",         # non-string alias target
    ])
    def test_malformed_config_is_ignored(self, write_config, content):
        """Verify broken config behaves like no config"""
        config = load_zone_config(write_config(content))
        assert config == ZoneConfig()

    def test_undecodable_file_is_ignored(self, write_config):
        """Verify non-UTF-8 bytes behave like no config"""
        path = write_config("")
        path.write_bytes(b"zones = [\"\xff\xfe\"]")
        assert load_zone_config(path) == ZoneConfig()

    def test_directory_instead_of_file(self, tmp_path):
        """Verify an unreadable path behaves like no config"""
        assert load_zone_config(tmp_path) == ZoneConfig()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
