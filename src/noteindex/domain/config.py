from __future__ import annotations

"""
Configuration Domain Management.

Handles the default runtime configuration and its optional persistence as
JSON in the user data directory (or an explicit file).
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from noteindex.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
DEFAULT_OUTPUT_FILE = "README.md"
DEFAULT_SUFFIX = ".md"
DEFAULT_TITLE = "Notes"
DEFAULT_HIDDEN_PREFIX = "."
DEFAULT_IGNORE_DIRS = [".git", "node_modules", "__pycache__"]


def get_config_file() -> str:
    """Location of the persistent configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of the indexing pipeline.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "root_path": os.getcwd(),
        "output_path": DEFAULT_OUTPUT_FILE,

        # Selection
        "suffix": DEFAULT_SUFFIX,
        "ignore_dirs": list(DEFAULT_IGNORE_DIRS),
        "hidden_prefix": DEFAULT_HIDDEN_PREFIX,

        # Rendering
        "title": DEFAULT_TITLE,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from disk, merged over the defaults.

    Args:
        path: Explicit JSON file. Defaults to the user data directory file.

    Returns:
        Dict[str, Any]: The loaded configuration or the defaults on failure.
    """
    config = get_default_config()
    config_file = path or get_config_file()

    if not os.path.exists(config_file):
        logger.debug(f"Config file not found at {config_file}. Returning defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    unknown = sorted(set(data) - set(config))
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

    config.update({k: v for k, v in data.items() if k in config})
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist configuration to disk.

    Args:
        config: The configuration dictionary to save.
        path: Explicit JSON file. Defaults to the user data directory file.

    Returns:
        bool: True if the file was written.
    """
    config_file = path or get_config_file()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_file)), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
