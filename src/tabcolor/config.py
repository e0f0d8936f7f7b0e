"""Configuration file lookup and loading for tabcolor.

Profiles live in a TOML file:

    [profiles.work]
    tab = "blue"
    fg = "white"

    [profiles.work.etterminal]
    tab = "green"
"""

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path

from platformdirs import user_config_dir

from tabcolor.errors import ConfigError
from tabcolor.models import ProfileStore
from tabcolor.profiles import build_store

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SET_TAB_COLOR_CONFIG"
CONFIG_FILENAME = "set-tab-color.toml"


def get_config_path() -> Path:
    """
    Return the configuration file path.

    Order: $SET_TAB_COLOR_CONFIG, then ~/.config/set-tab-color.toml when
    ~/.config (or the file) exists, then the platform user config directory
    (%AppData% on Windows, ~/Library/Application Support on macOS).
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    preferred = Path.home() / ".config" / CONFIG_FILENAME
    if preferred.parent.exists() or preferred.exists():
        return preferred

    return Path(user_config_dir()) / CONFIG_FILENAME


def load_config(path: Path | None = None) -> dict:
    """Load the raw configuration. A missing file is an empty configuration."""
    if path is None:
        path = get_config_path()

    if not path.exists():
        logger.debug(f"No config file at {path}")
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, str(e)) from e
    except OSError as e:
        raise ConfigError(path, e.strerror or str(e)) from e

    logger.debug(f"Loaded config from {path}")
    return data


def load_store(path: Path | None = None) -> ProfileStore:
    """Load the configuration and build its ProfileStore."""
    if path is None:
        path = get_config_path()

    profiles = load_config(path).get("profiles", {})
    if not isinstance(profiles, Mapping):
        raise ConfigError(path, "'profiles' must be a table")
    return build_store(profiles)
