"""
Shared fixtures.

Every test runs with XDG_CONFIG_HOME pointing at an empty temporary
directory and without NANJI_* variables, so a real ~/.config/nanji/config.toml
on the developer's machine never leaks into results.
"""

import logging

import pytest

from nanji.core.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point config discovery at an empty directory and clear NANJI_* vars."""
    config_home = tmp_path / "xdg"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("NANJI_CONFIG_FILE", raising=False)
    monkeypatch.delenv("NANJI_LOG_LEVEL", raising=False)
    yield config_home


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging() during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_config(isolated_environment):
    """Write a config.toml at the default discovery location."""

    def _write(content: str):
        app_dir = isolated_environment / "nanji"
        app_dir.mkdir(exist_ok=True)
        path = app_dir / "config.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
