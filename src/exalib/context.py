"""Exasol connection context management"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from exalib.connection import ExasolConnector


class ExasolContext:
    """Manages an Exasol connection lifecycle with lazy initialization"""

    def __init__(
        self,
        profile: Optional[str] = None,
        connection: Optional[Any] = None,
        from_env: bool = False,
        **overrides: Any,
    ):
        """Initialize Exasol context with a profile, the EXA* env vars or an existing connection"""
        sources = sum([profile is not None, connection is not None, from_env])
        if sources == 0:
            raise ValueError(
                "ExasolContext requires either 'profile', 'connection' or from_env=True"
            )
        if sources > 1:
            raise ValueError(
                "ExasolContext: provide only one of 'profile', 'connection' or from_env"
            )

        self._profile = profile
        self._connection = connection
        self._overrides = overrides
        self._connector: Optional["ExasolConnector"] = None
        self._owns_connector = False

    @property
    def connection(self) -> Any:
        """Get the pyexasol connection, creating if needed"""
        if self._connection is None:
            from exalib.connection import ExasolConnector

            self._connector = ExasolConnector(
                profile=self._profile, **self._overrides
            )
            self._connection = self._connector.connect()
            self._owns_connector = True

        return self._connection

    def use_namespace(self, schema: str) -> None:
        """Open the given schema unless it is already the current one"""
        if self.current_schema.upper() != schema.upper():
            self.connection.open_schema(schema)

    def close(self) -> None:
        """Close connection if owned by this context"""
        if self._owns_connector and self._connector is not None:
            self._connector.close()
            self._connector = None
            self._connection = None

    def __enter__(self) -> "ExasolContext":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit"""
        self.close()

    @property
    def current_schema(self) -> str:
        """Get current schema from the session"""
        return self.connection.current_schema() or ""

    @property
    def current_user(self) -> str:
        """Get current user from session context"""
        result = self.connection.execute("SELECT CURRENT_USER").fetchone()
        return str(result[0]) if result and result[0] else ""

    @property
    def session_id(self) -> str:
        """Get the database session id"""
        return str(self.connection.session_id())

    def __repr__(self) -> str:
        """String representation"""
        if self._connection is not None:
            return f"ExasolContext(connection=<active>)"
        elif self._profile is None:
            return f"ExasolContext(profile=<env>)"
        else:
            return f"ExasolContext(profile='{self._profile}')"
