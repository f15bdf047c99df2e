from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of viewer preferences as JSON in the user data
directory. The active query is never persisted; only display and source
settings survive between runs.
"""

import json
import logging
import os
from typing import Any, Dict

from unitcatalog.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_CATALOG
from unitcatalog.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")
DEFAULT_REQUEST_TIMEOUT = 10


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default session configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Data source
        "catalog": DEFAULT_CATALOG,
        "data_dir": os.getcwd(),
        "source": "",
        "request_timeout": DEFAULT_REQUEST_TIMEOUT,

        # Display
        "compact_mode": True,
    }


def get_default_app_state() -> Dict[str, Any]:
    """Generate the full structure stored in config.json."""
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

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
    except ValueError as e:
        logger.warning(f"Corrupted config file ({e}). Resetting to defaults.")
        return state
    except OSError as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    session = data.get("last_session")
    if isinstance(session, dict):
        state["last_session"].update(session)

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Retrieve the last saved session merged over the defaults."""
    return dict(load_app_state()["last_session"])


def save_config(config: Dict[str, Any]) -> None:
    """Save the provided config as the 'last_session'."""
    state = load_app_state()
    state["last_session"] = dict(config)
    save_app_state(state)
