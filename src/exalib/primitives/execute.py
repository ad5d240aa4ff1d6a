"""Execute SQL statements and catalog queries with client-side parameter binding"""

import logging
from typing import Any, Mapping, Optional, Union

import pandas as pd
import pyexasol

from exalib.context import ExasolContext
from exalib.errors import ExecutionError, QueryError

from .cells import CatalogRow
from .result import QueryResult

logger = logging.getLogger(__name__)

SYSTEM_NAMESPACE = "SYS"


def _message(error: Exception) -> str:
    """The client's own message, without connection details"""
    return str(getattr(error, "message", None) or error)


class Executor:
    """Execute SQL against one Exasol session

    This is the single stateful handle guarded by the connection gatekeeper:
    opening a namespace changes the session's current schema, so callers must
    not share an executor outside of an acquired lock.
    """

    def __init__(self, context: Union[str, ExasolContext], **overrides: Any):
        """Initialize with a context profile name or ExasolContext instance"""
        if isinstance(context, str):
            self.context = ExasolContext(profile=context, **overrides)
        else:
            self.context = context

    def _execute(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]],
        namespace: Optional[str],
    ) -> Any:
        if namespace:
            self.context.use_namespace(namespace)
        logger.debug("Executing %s (namespace=%s)", sql, namespace)
        return self.context.connection.execute(sql, query_params=params)

    def run(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
        namespace: Optional[str] = None,
    ) -> QueryResult:
        """Execute a statement and return a QueryResult

        Raises:
            ExecutionError: The database rejected the statement
            QueryError: Any other client failure (network, protocol)
        """
        try:
            statement = self._execute(sql, params, namespace)
        except pyexasol.ExaQueryError as e:
            raise ExecutionError(_message(e), statement=sql) from e
        except pyexasol.ExaError as e:
            raise QueryError(_message(e), statement=sql) from e
        return QueryResult(_statement=statement)

    def fetch_rows(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
        namespace: Optional[str] = None,
    ) -> list[CatalogRow]:
        """Run a query and return every row with tagged cells

        Raises:
            QueryError: The query failed for any reason
        """
        try:
            statement = self._execute(sql, params, namespace)
            return QueryResult(_statement=statement).fetch_rows()
        except pyexasol.ExaError as e:
            raise QueryError(_message(e), statement=sql) from e

    def fetch_df(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
        namespace: Optional[str] = None,
    ) -> pd.DataFrame:
        """Run a query and return the result as a DataFrame"""
        try:
            statement = self._execute(sql, params, namespace)
            return QueryResult(_statement=statement).to_df()
        except pyexasol.ExaError as e:
            raise QueryError(_message(e), statement=sql) from e

    def commit(self) -> None:
        """Commit the session's open transaction"""
        try:
            self.context.connection.commit()
        except pyexasol.ExaError as e:
            raise QueryError(_message(e), statement="COMMIT") from e

    def rollback(self) -> None:
        """Roll back the session's open transaction"""
        try:
            self.context.connection.rollback()
        except pyexasol.ExaError as e:
            raise QueryError(_message(e), statement="ROLLBACK") from e
