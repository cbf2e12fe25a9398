"""XDG-compliant path management for pathproviso.

Configuration lives under ``$XDG_CONFIG_HOME/pathproviso`` (by default
``~/.config/pathproviso/``).
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "pathproviso"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/pathproviso/ (or XDG_CONFIG_HOME/pathproviso/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_rules_path() -> Path:
    """Get the default rules file path.

    Returns:
        Path to ~/.config/pathproviso/rules.toml.
    """
    return get_config_dir() / "rules.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/pathproviso/theme.toml.
    """
    return get_config_dir() / "theme.toml"
