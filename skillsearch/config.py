"""Configuration management for skillsearch."""

import logging
import os
from pathlib import Path
from typing import Any

import msgspec
import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "list", "json")


def default_directories() -> dict[str, Path]:
    """Get the default skill directory for each location."""
    home = Path.home()
    return {
        "claude": home / ".claude" / "skills",
        "opencode": home / ".config" / "opencode" / "skills",
    }


class Settings(msgspec.Struct, kw_only=True):
    """Typed view over the merged configuration."""

    directories: dict[str, Path] = msgspec.field(default_factory=default_directories)
    highlight_tag: str = "mark"
    highlight_style: str = "bold yellow"
    default_format: str = "table"

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "Settings":
        """Build settings from a configuration dictionary."""
        settings = cls()

        directories = config.get("directories")
        if isinstance(directories, dict) and directories:
            settings.directories = {
                str(location): Path(str(path)).expanduser()
                for location, path in directories.items()
            }

        highlight = config.get("highlight") or {}
        if isinstance(highlight, dict):
            settings.highlight_tag = str(highlight.get("tag", settings.highlight_tag))
            settings.highlight_style = str(
                highlight.get("style", settings.highlight_style)
            )

        default_format = config.get("default_format")
        if default_format in OUTPUT_FORMATS:
            settings.default_format = default_format
        elif default_format is not None:
            logger.warning(f"Ignoring unknown output format: {default_format}")

        return settings


class Config:
    """Configuration loading from YAML files."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(str(path), f"invalid YAML: {e}") from e
        except OSError as e:
            raise ConfigError(str(path), str(e)) from e

        if not isinstance(data, dict):
            raise ConfigError(str(path), "top level must be a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the configuration file paths in precedence order."""
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        return [
            xdg_config_home / "skillsearch" / "config.yaml",
            Path(".skillsearch.yaml"),
            Path("skillsearch.yaml"),
        ]

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from files and environment variables.

    Args:
        path: Explicit config file, loaded after the default locations

    Returns:
        Merged configuration dictionary
    """
    config = {}

    for config_path in Config.get_config_paths():
        if config_path.exists():
            logger.debug(f"Loading config from {config_path}")
            config = Config.merge_configs(config, Config.from_file(config_path))

    if path is not None:
        config = Config.merge_configs(config, Config.from_file(path))

    return apply_env_overrides(config)


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Override configuration with SKILLSEARCH_* environment variables."""
    result = dict(config)

    if dirs := os.environ.get("SKILLSEARCH_DIRS"):
        result["directories"] = parse_directory_specs(dirs.split(os.pathsep))
    if output_format := os.environ.get("SKILLSEARCH_FORMAT"):
        result["default_format"] = output_format

    return result


def parse_directory_specs(specs: list[str]) -> dict[str, str]:
    """Parse ``location=path`` pairs.

    Raises:
        ValueError: If a pair has no location or no path
    """
    directories = {}
    for spec in specs:
        if not spec.strip():
            continue
        location, sep, path = spec.partition("=")
        if not sep or not location.strip() or not path.strip():
            raise ValueError(f"Expected LOCATION=PATH, got: {spec}")
        directories[location.strip()] = path.strip()
    return directories


def load_settings(path: Path | None = None) -> Settings:
    """Load and type the merged configuration."""
    return Settings.from_dict(load_config(path))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
