"""Table metadata introspection.

Builds a ``TableReadModel`` for one table from three catalog views that share
no keys with each other:

- EXA_ALL_COLUMNS              → column order, types, distribution flags
- EXA_ALL_CONSTRAINT_COLUMNS   → primary / foreign key participants
- EXA_ALL_COLUMNS (again)      → declared types and nullability for the DDL body

Rows are correlated purely by (lower-cased) column name, because the views do
not guarantee identical casing.
"""

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from exalib.primitives.execute import Executor, SYSTEM_NAMESPACE

_COLUMNS_SQL = """SELECT COLUMN_ORDINAL_POSITION, COLUMN_NAME, COLUMN_TYPE, COLUMN_IS_DISTRIBUTION_KEY
FROM EXA_ALL_COLUMNS
WHERE UPPER(COLUMN_SCHEMA) = UPPER({schema}) AND UPPER(COLUMN_TABLE) = UPPER({table})
ORDER BY COLUMN_ORDINAL_POSITION"""

_CONSTRAINT_COLUMNS_SQL = """SELECT COLUMN_NAME, ORDINAL_POSITION
FROM EXA_ALL_CONSTRAINT_COLUMNS
WHERE UPPER(CONSTRAINT_SCHEMA) = UPPER({schema}) AND UPPER(CONSTRAINT_TABLE) = UPPER({table})
AND CONSTRAINT_TYPE = {constraint_type}
ORDER BY ORDINAL_POSITION"""

_DEFINITIONS_SQL = """SELECT COLUMN_NAME, COLUMN_TYPE, COLUMN_IS_NULLABLE
FROM EXA_ALL_COLUMNS
WHERE UPPER(COLUMN_SCHEMA) = UPPER({schema}) AND UPPER(COLUMN_TABLE) = UPPER({table})
ORDER BY COLUMN_ORDINAL_POSITION"""

_DESCRIBE_SQL = """SELECT COLUMN_NAME, COLUMN_TYPE, COLUMN_ORDINAL_POSITION, COLUMN_IS_NULLABLE,
COLUMN_IS_DISTRIBUTION_KEY, COLUMN_DEFAULT, COLUMN_COMMENT
FROM EXA_ALL_COLUMNS
WHERE UPPER(COLUMN_SCHEMA) = UPPER({schema}) AND UPPER(COLUMN_TABLE) = UPPER({table})
ORDER BY COLUMN_ORDINAL_POSITION"""


@dataclass(frozen=True)
class ColumnDescriptor:
    """Name and declared type of one column"""
    name: str
    type: str


@dataclass(frozen=True)
class TableReadModel:
    """Everything exalib derives about a table from the catalog

    A new instance is built on every read; nothing mutates it afterwards.
    """
    columns: tuple[ColumnDescriptor, ...] = ()
    column_indices: dict[str, int] = field(default_factory=dict)
    primary_keys: dict[str, int] = field(default_factory=dict)
    foreign_keys: dict[str, int] = field(default_factory=dict)
    distribution_keys: tuple[str, ...] = ()
    composite: str = ""

    def to_attributes(self) -> dict[str, Any]:
        """Flatten into the computed attributes exposed for a table"""
        return {
            "columns": [{"name": c.name, "type": c.type} for c in self.columns],
            "column_indices": dict(self.column_indices),
            "primary_key_indices": dict(self.primary_keys),
            "foreign_key_indices": dict(self.foreign_keys),
        }


def read_table(executor: Executor, schema: str, table: str) -> TableReadModel:
    """Read columns, keys and the composite DDL body of a table

    Raises:
        QueryError: If any catalog query fails
    """
    columns, column_indices, distribution_keys = _read_columns(executor, schema, table)
    primary_keys = _read_constraint_columns(executor, schema, table, "PRIMARY KEY")
    foreign_keys = _read_constraint_columns(executor, schema, table, "FOREIGN KEY")
    composite = _read_composite(executor, schema, table, primary_keys, distribution_keys)

    return TableReadModel(
        columns=columns,
        column_indices=column_indices,
        primary_keys=primary_keys,
        foreign_keys=foreign_keys,
        distribution_keys=distribution_keys,
        composite=composite,
    )


def _read_columns(
    executor: Executor, schema: str, table: str
) -> tuple[tuple[ColumnDescriptor, ...], dict[str, int], tuple[str, ...]]:
    rows = executor.fetch_rows(
        _COLUMNS_SQL, {"schema": schema, "table": table}, namespace=SYSTEM_NAMESPACE
    )

    columns: list[ColumnDescriptor] = []
    indices: dict[str, int] = {}
    distributes: list[str] = []

    for ordinal, name_cell, type_cell, distribution_cell in rows:
        name = name_cell.as_str()
        columns.append(ColumnDescriptor(name=name, type=type_cell.as_str()))
        if distribution_cell.as_bool():
            distributes.append(name)
        indices[name.lower()] = ordinal.as_index()

    return tuple(columns), indices, tuple(distributes)


def _read_constraint_columns(
    executor: Executor, schema: str, table: str, constraint_type: str
) -> dict[str, int]:
    rows = executor.fetch_rows(
        _CONSTRAINT_COLUMNS_SQL,
        {"schema": schema, "table": table, "constraint_type": constraint_type},
        namespace=SYSTEM_NAMESPACE,
    )
    return {name.as_str().lower(): ordinal.as_index() for name, ordinal in rows}


def _read_composite(
    executor: Executor,
    schema: str,
    table: str,
    primary_keys: dict[str, int],
    distribution_keys: tuple[str, ...],
) -> str:
    rows = executor.fetch_rows(
        _DEFINITIONS_SQL, {"schema": schema, "table": table}, namespace=SYSTEM_NAMESPACE
    )

    lines = []
    for name, column_type, nullable in rows:
        null_clause = "NULL" if nullable.as_bool() else "NOT NULL"
        lines.append(f"{name.as_str()} {column_type.as_str()} {null_clause},\n")

    if primary_keys:
        key_columns = sorted(primary_keys, key=lambda k: primary_keys[k])
        lines.append(f"CONSTRAINT PRIMARY KEY ({', '.join(key_columns).upper()}),\n")

    if distribution_keys:
        lines.append(f"DISTRIBUTE BY {', '.join(distribution_keys).upper()},\n")

    return "".join(lines)


def describe_table(executor: Executor, schema: str, table: str) -> pd.DataFrame:
    """Get the column catalog of a table as a DataFrame"""
    return executor.fetch_df(
        _DESCRIBE_SQL, {"schema": schema, "table": table}, namespace=SYSTEM_NAMESPACE
    )
