"""Configuration module exports."""

from .config import load_profile, list_profiles, load_env_profile, resolve_dsn, DEFAULT_PORT
from .paths import resolve_config_path, get_default_config_path, CONF_DIR

__all__ = [
    "load_profile",
    "list_profiles",
    "load_env_profile",
    "resolve_dsn",
    "DEFAULT_PORT",
    "resolve_config_path",
    "get_default_config_path",
    "CONF_DIR",
]
