"""Configuration loading for Exasol connection profiles.

A profile is one TOML table in ``connections.toml``. It names the database
either by a pyexasol ``dsn`` (``host:port``, ranges like ``exa1..3:8563``
allowed) or by ``host`` with an optional ``port``:

    [dev]
    host = "exa-dev"
    user = "sys"
    password_env = "EXAPWD"
"""

import os
import sys
from pathlib import Path
from typing import Dict, Union, Optional, Any

# Use tomllib for Python 3.11+, fallback to tomli for older versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        raise ImportError(
            "Python < 3.11 requires 'tomli' package. " +
            "Install it with: pip install tomli"
        )

from .paths import resolve_config_path

DEFAULT_PORT = 8563
DEFAULT_USER = "sys"


def _read_profiles(path: Optional[Union[str, Path]]) -> tuple[Path, Dict[str, Any]]:
    config_file = resolve_config_path(path)
    if not config_file.exists():
        return config_file, {}
    with open(config_file, "rb") as f:
        return config_file, tomllib.load(f)


def load_profile(
    profile: str,
    path: Optional[Union[str, Path]] = None
) -> Dict[str, Any]:
    """Load one profile as a new dict

    Raises:
        FileNotFoundError: If connections.toml does not exist
        KeyError: If the profile is not defined in it
        ValueError: If the profile is not a table
    """
    config_file, all_profiles = _read_profiles(path)

    if not config_file.exists():
        raise FileNotFoundError(
            f"Exasol configuration file not found at {config_file}. " +
            "Create a connections.toml file with one table per profile."
        )
    if profile not in all_profiles:
        available = ", ".join(all_profiles.keys())
        raise KeyError(
            f"Profile '{profile}' not found in {config_file}. " +
            f"Available profiles: {available}"
        )
    if not isinstance(all_profiles[profile], dict):
        raise ValueError(f"Profile '{profile}' in {config_file} must be a table")

    return dict(all_profiles[profile])


def list_profiles(path: Optional[Union[str, Path]] = None) -> list[str]:
    """Names of the profiles in connections.toml, empty when the file is missing"""
    _, all_profiles = _read_profiles(path)
    return [name for name, value in all_profiles.items() if isinstance(value, dict)]


def resolve_dsn(cfg: Dict[str, Any], profile: str = "env") -> str:
    """The pyexasol DSN of a profile: ``dsn`` as given, else ``host:port``

    Raises:
        ValueError: If the profile has neither ``dsn`` nor ``host``, or a
            ``port`` that is not an integer
    """
    if cfg.get("dsn"):
        return str(cfg["dsn"])

    host = cfg.get("host")
    if not host:
        raise ValueError(f"Profile '{profile}' needs either 'dsn' or 'host'")

    port = cfg.get("port", DEFAULT_PORT)
    try:
        port = int(port)
    except (TypeError, ValueError):
        raise ValueError(f"Profile '{profile}' has an invalid port: {port!r}") from None
    return f"{host}:{port}"


def load_env_profile() -> Dict[str, Any]:
    """
    Build a connection profile from the EXA* environment variables.

    EXAHOST is required; EXAPORT defaults to 8563, EXAUID to ``sys``.
    EXAPWD is referenced through ``password_env`` so the secret is only
    read when the connector processes authentication.

    Raises:
        KeyError: If EXAHOST is not set
    """
    host = os.environ.get("EXAHOST")
    if not host:
        raise KeyError("EXAHOST environment variable is required without a profile")

    return {
        "host": host,
        "port": int(os.environ.get("EXAPORT") or DEFAULT_PORT),
        "user": os.environ.get("EXAUID") or DEFAULT_USER,
        "password_env": "EXAPWD",
    }
