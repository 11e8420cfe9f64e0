"""
Persistent conllukit settings.

Settings live in a single JSON file, ``config.json``, inside the conllukit
configuration directory:
  ~/.conllukit/config.json  (default)

The directory can be configured via:
  - Environment variable: CONLLUKIT_CONFIG_DIR
  - Environment variable: XDG_DATA_HOME (uses $XDG_DATA_HOME/conllukit)
  - Default: ~/.conllukit/
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

MISSING_TARGET_CHOICES = ("ignore", "error")
OUTPUT_FORMAT_CHOICES = ("conllu", "json")


def get_config_dir(create: bool = True) -> Path:
    """
    Get the conllukit configuration directory.

    Args:
        create: If True, create the directory if it doesn't exist. If False,
                return the path without creating it (for read-only operations).
    """
    if "CONLLUKIT_CONFIG_DIR" in os.environ:
        base = Path(os.environ["CONLLUKIT_CONFIG_DIR"])
    elif "XDG_DATA_HOME" in os.environ:
        base = Path(os.environ["XDG_DATA_HOME"]) / "conllukit"
    else:
        base = Path.home() / ".conllukit"
    if create:
        base.mkdir(parents=True, exist_ok=True)
    return base


def get_config_file(create_dir: bool = True) -> Path:
    """Get the path to the conllukit configuration file."""
    return get_config_dir(create=create_dir) / "config.json"


def read_config() -> dict:
    """
    Read the conllukit configuration file.

    Returns:
        Dictionary with configuration values (empty dict if the file doesn't
        exist or cannot be decoded)
    """
    config_file = get_config_file(create_dir=False)
    if not config_file.exists():
        return {}
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", config_file, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a JSON object", config_file)
        return {}
    return data


def write_config(config: dict) -> None:
    """
    Merge ``config`` into the conllukit config file.

    Args:
        config: Dictionary with configuration values
    """
    config_file = get_config_file()
    existing_config = read_config()
    existing_config.update(config)

    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(existing_config, f, indent=2, ensure_ascii=False)


def get_strict_parsing() -> bool:
    config = read_config()
    return bool(config.get("strict_parsing", True))


def set_strict_parsing(enabled: bool) -> None:
    write_config({"strict_parsing": enabled})


def get_missing_target() -> str:
    """
    Get what expand/collapse do when the target id does not exist.

    Returns:
        "ignore" (leave the sentence unchanged) or "error" (fail)
    """
    config = read_config()
    value = config.get("missing_target", "ignore")
    return value if value in MISSING_TARGET_CHOICES else "ignore"


def set_missing_target(value: str) -> None:
    if value not in MISSING_TARGET_CHOICES:
        raise ValueError(f"missing_target must be one of {', '.join(MISSING_TARGET_CHOICES)}, got '{value}'")
    write_config({"missing_target": value})


def get_default_output_format() -> Optional[str]:
    """
    Get the default output format from configuration.

    Returns:
        Default output format (conllu or json), or None if not set
    """
    config = read_config()
    return config.get("default_output_format")


def set_default_output_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMAT_CHOICES:
        raise ValueError(f"Unknown output format '{output_format}'")
    write_config({"default_output_format": output_format})
