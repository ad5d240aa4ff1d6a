"""Exasol connection management with profile support."""

import logging
from typing import Optional, Any, Literal

import pyexasol
from pyexasol import ExaConnection

from .base import BaseConnector

logger = logging.getLogger(__name__)


class ExasolConnector(BaseConnector):
    """
    Exasol connection manager with TOML profile support and context manager protocol.

    This class loads connection parameters from a TOML configuration file (or
    the EXAHOST/EXAUID/EXAPWD environment variables when no profile is given)
    and manages the connection lifecycle.

    Args:
        profile: Name of the profile to load from connections.toml
        **kwargs: Additional connection parameters to override profile settings

    Example:
        >>> with ExasolConnector(profile="dev") as conn:
        ...     print(conn.execute("SELECT CURRENT_USER").fetchval())

        >>> # Override the default schema from the profile
        >>> with ExasolConnector(profile="dev", schema="STAGING") as conn:
        ...     conn.execute("SELECT COUNT(*) FROM huge_table")
    """

    def __init__(self, profile: Optional[str] = None, **kwargs: Any) -> None:
        """
        Initialize the connector with a configuration profile.

        Args:
            profile: Name of the connection profile to load, None for EXA* env vars
            **kwargs: Override any connection parameters from the profile
        """
        super().__init__(profile, **kwargs)

        # Connection initialized lazily
        self._connection: Optional[ExaConnection] = None

    def connect(self) -> ExaConnection:
        """
        Establish connection to Exasol if not already connected.

        Returns:
            The pyexasol connection
        """
        if self._connection is None:
            logger.debug("Connecting to %s as %s", self._cfg["dsn"], self._cfg.get("user"))
            self._connection = pyexasol.connect(**self.connect_params())

        return self._connection

    def close(self) -> None:
        """Close the connection, releasing resources."""
        if self._connection:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> ExaConnection:
        """Context manager entry: establish connection."""
        return self.connect()

    def __exit__(
        self,
        exc_type: Any,
        exc_val: Any,
        exc_tb: Any
    ) -> Literal[False]:
        """
        Context manager exit: close connection.

        Always returns False to propagate any exceptions.
        """
        self.close()
        return False

    def __repr__(self) -> str:
        """String representation of the connector."""
        status = "connected" if self._connection else "not connected"
        return f"ExasolConnector(profile='{self._profile}', {status})"
