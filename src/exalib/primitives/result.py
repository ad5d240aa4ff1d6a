"""A unified, simplified interface for Exasol statement results"""
from typing import Any
from dataclasses import dataclass
import pandas as pd

from exalib.primitives.cells import CatalogRow, to_row


@dataclass
class QueryResult:
    """A unified, simplified interface for Exasol statement results"""
    _statement: Any

    @property
    def rowcount(self) -> int:
        """The number of rows affected or returned"""
        count = self._statement.rowcount()
        return count if count is not None else -1

    @property
    def sql(self) -> str:
        """The SQL statement that was executed (after parameter formatting)"""
        return self._statement.query

    @property
    def column_names(self) -> list[str]:
        """Names of the result columns"""
        return list(self._statement.column_names())

    def fetch_all(self) -> list[tuple[Any, ...]]:
        """Fetch all remaining rows of a result set"""
        result = self._statement.fetchall()
        return list(result) if result else []

    def fetch_rows(self) -> list[CatalogRow]:
        """Fetch all remaining rows with every cell tagged"""
        return [to_row(row) for row in self.fetch_all()]

    def to_df(self, lowercase_columns: bool = True) -> pd.DataFrame:
        """Fetch all results as a single DataFrame with optional column casing"""
        columns = self.column_names
        df = pd.DataFrame(self.fetch_all(), columns=columns)

        if lowercase_columns and len(df.columns) > 0:
            df.columns = df.columns.str.lower()

        return df

    def __repr__(self) -> str:
        """String representation"""
        return f"QueryResult(rowcount={self.rowcount})"
