from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the preferred rendering settings in a JSON
state file under the user data directory. Falls back to defaults on
missing or corrupted files.
"""

import json
import logging
import os
from typing import Any, Dict

from treetext.domain.constants import CHARSET_UTF8, CURRENT_CONFIG_VERSION
from treetext.domain.render_models import FormatType
from treetext.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")
DEFAULT_LOCALE = "en"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default rendering configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "format": FormatType.UTF8.value,
        "charset": CHARSET_UTF8,
        "trailing_dir_slash": False,
        "full_path": False,
        "root_dot": True,
        "strict_format": False,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "app_settings": {
            "locale": DEFAULT_LOCALE,
        },
        "last_session": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Stored sections are merged over the defaults, so keys added in later
    versions are always present.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    state = get_default_app_state()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    if isinstance(data.get("app_settings"), dict):
        state["app_settings"].update(data["app_settings"])
    if isinstance(data.get("last_session"), dict):
        state["last_session"].update(data["last_session"])

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        parent = os.path.dirname(CONFIG_FILE)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, indent=2, ensure_ascii=False)
        logger.debug(f"Config saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save config: {e}")


def load_config() -> Dict[str, Any]:
    """Return the persisted rendering settings ('last_session')."""
    return dict(load_app_state()["last_session"])


def save_config(config: Dict[str, Any]) -> None:
    """Persist rendering settings as the new 'last_session'."""
    state = load_app_state()
    state["last_session"].update(config)
    save_app_state(state)
