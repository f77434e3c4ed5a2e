from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last session's options using JSON and
provides the default runtime configuration consumed by the engine.
"""

import json
import logging
import os
from typing import Any, Dict

from tree2dir.domain.constants import CURRENT_CONFIG_VERSION
from tree2dir.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# Options remembered by save_config(); output location and dry-run are per invocation
PERSISTED_KEYS = ("strict", "indent_width", "strip_comments", "save_log")


def get_config_path() -> str:
    """Absolute path of the persistent configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Output
        "output_dir": os.getcwd(),
        "dry_run": False,
        "strict": False,

        # Parsing
        "indent_width": 0,  # 0 = detect from input
        "strip_comments": True,

        # Diagnostics
        "save_log": False,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: str = "") -> Dict[str, Any]:
    """
    Load the last saved session (PERSISTED_KEYS only) merged over the defaults.

    Missing or corrupted files fall back to defaults with a warning.

    Args:
        path: Override for the configuration file location.

    Returns:
        Dict[str, Any]: The loaded configuration.
    """
    config_path = path or get_config_path()
    defaults = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    session = data.get("last_session", {})
    if isinstance(session, dict):
        defaults.update({k: v for k, v in session.items() if k in PERSISTED_KEYS})
    return defaults


def save_config(config: Dict[str, Any], path: str = "") -> bool:
    """
    Persist the provided configuration as the 'last_session'.

    Only PERSISTED_KEYS are stored, so the output directory and the dry-run
    flag always come from the current invocation.

    Args:
        config: The configuration to save.
        path: Override for the configuration file location.

    Returns:
        bool: True if the file was written.
    """
    config_path = path or get_config_path()
    state = {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": {k: config[k] for k in PERSISTED_KEYS if k in config},
    }
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_path}")
    return True
