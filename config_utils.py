"""Configuration utilities for concat-text builds."""

import os
import yaml
from typing import Any, List
from pathlib import Path

from pydantic import ValidationError

from schemas import BuildConfig
from plugins import create_plugin, is_known_plugin


class ConfigError(Exception):
    """Raised when the build configuration cannot be loaded."""


def _resolve_path(value: str, base_dir: Path) -> str:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.abspath(os.path.join(base_dir, expanded))


def load_config(config_path: str = "config.yaml") -> BuildConfig:
    """
    Load build configuration from a YAML file.

    Relative ``context`` and ``output.path`` values are resolved against the
    directory holding the config file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Validated build configuration
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    with open(config_file, 'r') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration root must be a mapping: {config_path}")

    try:
        config = BuildConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    base_dir = config_file.resolve().parent
    config.context = _resolve_path(config.context, base_dir)
    config.output.path = _resolve_path(config.output.path, base_dir)
    return config


def build_plugins(config: BuildConfig) -> List[Any]:
    """
    Instantiate every plugin listed under ``plugins``.

    Args:
        config: Loaded build configuration

    Returns:
        Plugin instances in config order
    """
    plugins = []
    for plugin_name, entries in config.plugins.items():
        if not is_known_plugin(plugin_name):
            raise ConfigError(f"Unknown plugin '{plugin_name}'")
        for options in entries:
            try:
                plugins.append(create_plugin(plugin_name, options))
            except ValidationError as e:
                raise ConfigError(f"Invalid options for '{plugin_name}': {e}") from e
    return plugins
