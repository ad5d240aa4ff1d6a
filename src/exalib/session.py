"""Context-bound session for exalib operations"""

from typing import Any, Optional

import pandas as pd

from exalib.context import ExasolContext
from exalib.gatekeeper import ConnectionGatekeeper
from exalib.primitives import Executor, QueryResult, TableReadModel, describe_table, read_table
from exalib.resources import Connection, PhysicalSchema, Role, Table, User


class Session:
    """One Exasol session shared by every reconciler through a gatekeeper

    Example:
        >>> with Session(profile="dev") as session:
        ...     data = InMemoryResourceData({"name": "staging"})
        ...     session.schema.create(data)
    """

    def __init__(
        self,
        profile: Optional[str] = None,
        context: Optional[ExasolContext] = None,
        from_env: bool = False,
        **overrides: Any,
    ):
        """Initialize session with a profile name, the EXA* env vars or an existing context"""
        if context is not None and (profile is not None or from_env):
            raise ValueError("Provide either 'profile', from_env or 'context', not several")

        if context is not None:
            self._context = context
            self._owns_context = False
        else:
            self._context = ExasolContext(profile=profile, from_env=from_env, **overrides)
            self._owns_context = True

        self._gatekeeper = ConnectionGatekeeper(Executor(self._context))

    @property
    def context(self) -> ExasolContext:
        """Access the underlying ExasolContext"""
        return self._context

    @property
    def gatekeeper(self) -> ConnectionGatekeeper:
        return self._gatekeeper

    # Primitives

    def execute_sql(self, sql: str, params: Optional[dict[str, Any]] = None) -> QueryResult:
        """Execute SQL while holding the session"""
        with self._gatekeeper.acquire() as locked:
            return locked.executor.run(sql, params)

    def query(self, sql: str, params: Optional[dict[str, Any]] = None) -> pd.DataFrame:
        """Execute SQL and return results as a DataFrame"""
        with self._gatekeeper.acquire() as locked:
            return locked.executor.fetch_df(sql, params)

    def read_table(self, schema: str, table: str) -> TableReadModel:
        """Columns, keys and composite DDL body of a table"""
        with self._gatekeeper.acquire() as locked:
            return read_table(locked.executor, schema, table)

    def describe_table(self, schema: str, table: str) -> pd.DataFrame:
        with self._gatekeeper.acquire() as locked:
            return describe_table(locked.executor, schema, table)

    # Reconcilers bound to the shared gatekeeper

    @property
    def schema(self) -> PhysicalSchema:
        return PhysicalSchema(self._gatekeeper)

    @property
    def role(self) -> Role:
        return Role(self._gatekeeper)

    @property
    def user(self) -> User:
        return User(self._gatekeeper)

    @property
    def connection(self) -> Connection:
        return Connection(self._gatekeeper)

    @property
    def table(self) -> Table:
        return Table(self._gatekeeper)

    # Lifecycle

    def close(self) -> None:
        """Close the session and underlying context if owned"""
        if self._owns_context:
            self._context.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Session({self._context!r}, {self._gatekeeper!r})"


def create_session(
    profile: Optional[str] = None,
    context: Optional[ExasolContext] = None,
    from_env: bool = False,
    **overrides: Any,
) -> Session:
    """Create a context-bound session for exalib operations"""
    return Session(profile=profile, context=context, from_env=from_env, **overrides)
