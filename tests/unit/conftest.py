"""Shared fixtures for unit tests: an in-process stand-in for the executor."""

from typing import Any, Mapping, Optional
from unittest.mock import MagicMock

import pandas as pd
import pytest

from exalib.gatekeeper import ConnectionGatekeeper
from exalib.primitives import QueryResult, to_row


class FakeExecutor:
    """Records statements and answers catalog queries from scripted rows

    ``respond(needle, rows, **params)`` makes every query containing
    ``needle`` (and bound with the given parameter values) return ``rows``;
    the most recent matching script wins. ``fail(needle, error)`` makes
    matching statements raise instead.
    """

    def __init__(self):
        self.calls: list[tuple[str, dict[str, Any], Optional[str]]] = []
        self.commits = 0
        self.rollbacks = 0
        self._responses: list[tuple[str, dict[str, Any], list[tuple[Any, ...]]]] = []
        self._failures: list[tuple[str, Exception]] = []

    def respond(self, needle: str, rows: list[tuple[Any, ...]], **params: Any) -> None:
        self._responses.append((needle, params, rows))

    def fail(self, needle: str, error: Exception) -> None:
        self._failures.append((needle, error))

    @property
    def statements(self) -> list[str]:
        """DDL issued through ``run``, in order"""
        return [sql for sql, _, namespace in self.calls if namespace is None]

    @property
    def queries(self) -> list[str]:
        """Catalog queries issued through ``fetch_rows``, in order"""
        return [sql for sql, _, namespace in self.calls if namespace is not None]

    def _record(self, sql: str, params: Optional[Mapping[str, Any]], namespace: Optional[str]) -> None:
        self.calls.append((sql, dict(params or {}), namespace))
        for needle, error in self._failures:
            if needle in sql:
                raise error

    def _rows_for(self, sql: str, params: Optional[Mapping[str, Any]]) -> list[tuple[Any, ...]]:
        params = params or {}
        for needle, expected, rows in reversed(self._responses):
            if needle in sql and all(params.get(k) == v for k, v in expected.items()):
                return rows
        return []

    def run(self, sql: str, params: Optional[Mapping[str, Any]] = None, namespace: Optional[str] = None) -> QueryResult:
        self._record(sql, params, namespace)
        return QueryResult(_statement=MagicMock())

    def fetch_rows(self, sql: str, params: Optional[Mapping[str, Any]] = None, namespace: Optional[str] = None):
        self._record(sql, params, namespace or "")
        return [to_row(row) for row in self._rows_for(sql, params)]

    def fetch_df(self, sql: str, params: Optional[Mapping[str, Any]] = None, namespace: Optional[str] = None):
        self._record(sql, params, namespace or "")
        return pd.DataFrame(self._rows_for(sql, params))

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def gatekeeper(fake_executor: FakeExecutor) -> ConnectionGatekeeper:
    return ConnectionGatekeeper(fake_executor)  # type: ignore[arg-type]
