"""Configuration module for ridingtally."""

from ridingtally.infrastructure.config.settings import (
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
)


__all__ = [
    "ENV_FILE_PATH",
    "Settings",
    "find_env_file",
    "get_settings",
    "reload_settings",
]
