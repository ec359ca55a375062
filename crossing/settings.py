"""
Settings Module for the crossing search engine

Provides search limits and strategy selection stored as JSON.
Settings are read from config.json in the working directory by default.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "strategy_name": "bfs",
    "max_rounds": None,
    "max_frontier": 200000,
    "timeout_sec": 20.0,
    "workers": 1,
}


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file (default: SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    if not settings_file.exists():
        logger.debug(f"Settings file {settings_file} not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(settings, dict):
        logger.warning(f"Settings in {settings_file} are not an object, using defaults")
        return DEFAULT_SETTINGS.copy()

    unknown = set(settings) - set(DEFAULT_SETTINGS)
    if unknown:
        logger.warning(f"Ignoring unknown settings: {sorted(unknown)}")

    # Merge with defaults to handle missing keys
    result = DEFAULT_SETTINGS.copy()
    result.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any],
                  path: Optional[Union[str, Path]] = None) -> None:
    """
    Save settings to a JSON file.

    Args:
        settings: Settings dictionary to save
        path: Settings file (default: SETTINGS_FILE)
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
