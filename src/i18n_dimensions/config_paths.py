"""Configuration path handling for the dimension registry.

This module implements path resolution for the settings file following the
XDG Base Directory Specification for user-specific configuration files.
"""

import os
from pathlib import Path
from typing import Optional

import platformdirs

# Application name used for directory paths
APP_NAME = "i18n-dimensions"

# Environment variable naming an explicit settings file
ENV_SETTINGS_PATH = "I18N_DIMENSIONS_CONFIG"

# Default filename inside the user config directory
SETTINGS_FILENAME = "dimensions.yml"


def get_user_config_dir() -> Path:
    """Get the path to the user's config directory for this application."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_settings_path() -> Optional[str]:
    """Get the path to the settings file, respecting the XDG specification.

    Returns:
        Path to the settings file, or None when no file is configured
    """
    # 1. Check environment variable
    env_path = os.environ.get(ENV_SETTINGS_PATH)
    if env_path and Path(env_path).is_file():
        return env_path

    # 2. Check user config directory
    user_path = get_user_config_dir() / SETTINGS_FILENAME
    if user_path.is_file():
        return str(user_path)

    # 3. No file; built-in defaults apply
    return None
