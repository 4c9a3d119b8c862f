"""
Configuration management for Boilerplater.

Handles loading and merging toolkit options from JSON files and
dictionaries, providing defaults and validation.
"""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Any, Optional, Union

from .logging_config import get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class ToolkitConfig:
    """Construction options for a Boilerplater instance."""

    # Active locale for messages
    locale: str = "ru"

    # Extra catalogs: locale code -> JSON file path (relative to context)
    locales: Dict[str, str] = field(default_factory=dict)

    # Root directory for relative paths
    context: str = field(default_factory=os.getcwd)

    log_level: str = "WARNING"


def _load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from a JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    if path.suffix.lower() != ".json":
        raise ConfigError(f"Configuration file must be JSON: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")

    logger.debug("Loaded configuration file %s", path)
    return config


def _validate(config_dict: Dict[str, Any]) -> None:
    known_fields = {f.name for f in fields(ToolkitConfig)}
    unknown = sorted(set(config_dict) - known_fields)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    for key in ("locale", "context", "log_level"):
        if key in config_dict and not isinstance(config_dict[key], str):
            raise ConfigError(f"'{key}' must be a string")

    locales = config_dict.get("locales", {})
    if not isinstance(locales, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in locales.items()
    ):
        raise ConfigError("'locales' must map locale codes to file paths")

    level = config_dict.get("log_level")
    if level is not None and level.upper() not in VALID_LOG_LEVELS:
        raise ConfigError(f"Invalid log_level: {level}")


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> ToolkitConfig:
    """
    Build a ToolkitConfig from defaults, a JSON file and overrides.

    Later sources win: defaults, then ``config_file``, then ``custom_config``.
    Empty values (``None`` or ``""``) in overrides keep the earlier value.

    Args:
        custom_config: Option overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration

    Raises:
        ConfigError: If the file cannot be read or a value is invalid
    """
    merged: Dict[str, Any] = {}

    if config_file:
        merged.update(_load_config_file(config_file))

    if custom_config:
        merged.update({k: v for k, v in custom_config.items() if v not in (None, "")})

    _validate(merged)
    return ToolkitConfig(**merged)
