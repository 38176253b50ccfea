"""Configuration loading for the fixture dumper."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from mc_legacy_formatting.errors import ConfigError
from mc_legacy_formatting.parser import DEFAULT_START_CHAR

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "mc-legacy-formatting"
CONFIG_FILE = CONFIG_DIR / "config.toml"
HISTORY_FILE = CONFIG_DIR / "history"


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    start_char: str = DEFAULT_START_CHAR
    collapse_strikethrough: bool = True


def load_config(path: Path = CONFIG_FILE) -> AppConfig:
    """Load and parse the configuration file.

    Returns defaults if no config file exists.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or holds
            invalid values.
    """
    if not path.exists():
        log.debug("No config file at %s, using defaults", path)
        return AppConfig()

    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigError(msg) from e

    defaults = raw.get("defaults", {})
    if not isinstance(defaults, dict):
        msg = f"defaults must be a table, got {defaults!r}"
        raise ConfigError(msg)
    start_char = defaults.get("start_char", DEFAULT_START_CHAR)
    if not isinstance(start_char, str) or len(start_char) != 1:
        msg = f"defaults.start_char must be a single character, got {start_char!r}"
        raise ConfigError(msg)

    collapse = defaults.get("collapse_strikethrough", True)
    if not isinstance(collapse, bool):
        msg = f"defaults.collapse_strikethrough must be a boolean, got {collapse!r}"
        raise ConfigError(msg)

    config = AppConfig(start_char=start_char, collapse_strikethrough=collapse)
    log.debug("Loaded config from %s: %s", path, config)
    return config


def ensure_config_dir() -> None:
    """Create the config directory if it does not exist."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
