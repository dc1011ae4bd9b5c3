"""User configuration for the sw command."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from platformdirs import user_config_dir

from .errors import ConfigError

CONFIG_ENV_VAR = "SHELLWORDS_CONFIG"
CONFIG_FILENAME = "shellwords.toml"

OUTPUT_FORMATS = ("lines", "json", "null")


@dataclass
class Config:
    """Defaults for command-line options."""

    split_format: str = "lines"
    skip_comments: bool = True


def get_config_path() -> Path:
    """Get the configuration file path, honoring SHELLWORDS_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path(user_config_dir("shellwords")) / CONFIG_FILENAME


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load configuration from a TOML file.

    A missing file gives the defaults.

    Args:
        path: Configuration file to read (default: get_config_path())

    Returns:
        Config populated from the file

    Raises:
        ConfigError: If the file can't be parsed or holds invalid values
    """
    if path is None:
        path = get_config_path()

    if not path.exists():
        return Config()

    try:
        data = toml.load(str(path))
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Cannot read config '{path}': {e}")

    config = Config()

    split_format = _section(data, "split").get("format", config.split_format)
    if split_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid split format '{split_format}' in '{path}', "
            f"expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
    config.split_format = split_format

    skip_comments = _section(data, "check").get("skip_comments", config.skip_comments)
    if not isinstance(skip_comments, bool):
        raise ConfigError(f"check.skip_comments must be true or false in '{path}'")
    config.skip_comments = skip_comments

    return config
