"""Base connector class with shared profile and authentication logic."""

import os
from typing import Optional, Any, Dict
from pydantic import SecretStr
import keyring

from exalib.config import load_profile, load_env_profile, resolve_dsn

# Profile keys consumed by exalib itself and never passed to pyexasol.connect
_PROFILE_ONLY_KEYS = (
    "host",
    "port",
    "password",
    "password_env",
    "use_keyring",
    "keyring_service",
    "keyring_username",
)


class BaseConnector:
    """Base class for Exasol connectors with TOML profile support and password resolution"""

    def __init__(self, profile: Optional[str] = None, **kwargs: Any) -> None:
        """Initialize the connector with a configuration profile (or EXA* env vars) and optional overrides"""
        self.password: Optional[SecretStr] = None

        self._cfg: Dict[str, Any] = load_profile(profile) if profile else load_env_profile()
        self._cfg.update(kwargs)
        self._profile = profile or "env"
        self._process_dsn()
        self._process_auth()

    def _process_dsn(self) -> None:
        """Resolve the pyexasol DSN once profile and overrides are merged"""
        self._cfg["dsn"] = resolve_dsn(self._cfg, self._profile)

    def _process_auth(self) -> None:
        """Resolve the password from the profile, an environment variable or the keyring"""
        if "password" in self._cfg:
            self.password = SecretStr(str(self._cfg["password"]))
            return

        password_env_var = self._cfg.get("password_env")
        if password_env_var:
            env_pass = os.environ.get(password_env_var)
            if env_pass:
                self.password = SecretStr(env_pass)
                return

        if self._cfg.get("use_keyring", False):
            keyring_service = self._cfg.get("keyring_service", f"exalib.{self._profile}")
            keyring_username = self._cfg.get("keyring_username", self._cfg.get("user"))
            if not keyring_username:
                raise ValueError(
                    "Keyring usage requires 'user' in profile or 'keyring_username' override."
                )
            keyring_pass = keyring.get_password(keyring_service, keyring_username)
            if keyring_pass:
                self.password = SecretStr(keyring_pass)

    def connect_params(self) -> Dict[str, Any]:
        """Parameters for pyexasol.connect, with the secret revealed"""
        params = {k: v for k, v in self._cfg.items() if k not in _PROFILE_ONLY_KEYS}
        # Reconcilers commit explicitly after each successful statement
        params.setdefault("autocommit", False)
        if self.password is not None:
            params["password"] = self.password.get_secret_value()
        return params
