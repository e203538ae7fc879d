"""
Configuration Management Module

Two layers of configuration:

1. Settings (pydantic-settings): process-level options read from
   NANJI_* environment variables (log level, explicit config file path).
2. ZoneConfig (pydantic): the per-user TOML document holding the default zone
   list and alias overrides.

The ZoneConfig is loaded once at process start and passed explicitly to the
alias resolver and the commands; nothing in the core reads the file system on
its own.

Config file discovery (first match wins):
    $NANJI_CONFIG_FILE
    $XDG_CONFIG_HOME/nanji/config.toml
    ~/.config/nanji/config.toml

Example config.toml:
    zones = ["Asia/Tokyo", "America/Chicago", "Europe/London"]

    [aliases]
    london = "Europe/London"
    home = "America/Chicago"

A missing file, a file that cannot be read, invalid TOML, or values of the
wrong type all count as "no configuration". The tool must stay usable with a
broken or partial config, so these failures are only logged at DEBUG level.

Usage:
    from nanji.core.config import get_settings, load_zone_config

    settings = get_settings()
    config = load_zone_config(find_config_path(settings))
"""

import os
import tomllib
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nanji.core.logging import get_logger

logger = get_logger(__name__)

APP_DIR_NAME = "nanji"
CONFIG_FILE_NAME = "config.toml"
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Process Settings

    Values are loaded from environment variables with the NANJI_ prefix.

    Attributes:
        log_level: Diagnostic verbosity (NANJI_LOG_LEVEL)
        config_file: Explicit path to the TOML config (NANJI_CONFIG_FILE)
    """

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    config_file: Optional[str] = Field(
        default=None,
        description="Path to config.toml; overrides XDG discovery"
    )

    model_config = SettingsConfigDict(
        env_prefix="NANJI_",
        # Ignore unrelated NANJI_* variables
        extra="ignore",
        case_sensitive=False
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Uppercase the level; unknown levels fall back to WARNING."""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            return "WARNING"
        return level


class ZoneConfig(BaseModel):
    """
    Contents of config.toml.

    Attributes:
        zones: Ordered list of zone names to render by default (optional)
        aliases: Extra alias -> canonical IANA name mappings (optional)
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    zones: Optional[List[str]] = Field(
        default=None,
        description="Zone names rendered when no --zones are given"
    )

    aliases: Dict[str, str] = Field(
        default_factory=dict,
        description="Alias overrides; keys are matched case-insensitively"
    )


def get_settings() -> Settings:
    """Read Settings from the current environment."""
    return Settings()


def default_config_dir() -> Path:
    """
    Return the per-user configuration directory for nanji.

    Honors XDG_CONFIG_HOME when it holds an absolute path, otherwise falls
    back to ~/.config.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    base = Path(xdg) if xdg and os.path.isabs(xdg) else Path.home() / ".config"
    return base / APP_DIR_NAME


def find_config_path(settings: Optional[Settings] = None) -> Optional[Path]:
    """
    Locate the config file.

    Args:
        settings: Settings carrying an optional explicit path

    Returns:
        Path of an existing config file, or None if there is none
    """
    if settings is not None and settings.config_file:
        candidate = Path(settings.config_file).expanduser()
    else:
        candidate = default_config_dir() / CONFIG_FILE_NAME

    if candidate.is_file():
        return candidate

    logger.debug(f"No config file at {candidate}")
    return None


def load_zone_config(path: Optional[Path]) -> ZoneConfig:
    """
    Load and validate a config file.

    Args:
        path: File to read; None means no configuration

    Returns:
        ZoneConfig: Parsed configuration, or an empty one on any failure
    """
    if path is None:
        return ZoneConfig()

    try:
        with open(path, "rb") as fh:
            data = tomllib.load(fh)
        config = ZoneConfig.model_validate(data)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, ValidationError) as e:
        logger.debug(f"Ignoring config file {path}: {e}")
        return ZoneConfig()

    logger.debug(
        f"Loaded config from {path}: "
        f"{len(config.zones or [])} zone(s), {len(config.aliases)} alias(es)"
    )
    return config


def load_config(settings: Optional[Settings] = None) -> ZoneConfig:
    """
    Convenience function: discover and load the config file.

    Args:
        settings: Settings to use (read from the environment if None)

    Returns:
        ZoneConfig: Loaded configuration (empty if absent or invalid)
    """
    if settings is None:
        settings = get_settings()
    return load_zone_config(find_config_path(settings))
