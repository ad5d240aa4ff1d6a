"""Primitive operations to wrap direct pyexasol calls"""

from exalib.primitives.cells import Cell, CellKind, CatalogRow, to_row
from exalib.primitives.result import QueryResult
from exalib.primitives.execute import Executor, SYSTEM_NAMESPACE

from exalib.primitives.catalog import (
    schema_exists,
    role_exists,
    user_exists,
    find_connection,
    table_exists,
    rename_statement,
)

from exalib.primitives.metadata import (
    ColumnDescriptor,
    TableReadModel,
    read_table,
    describe_table,
)

__all__ = [
    # Cells
    "Cell",
    "CellKind",
    "CatalogRow",
    "to_row",
    # Execution
    "QueryResult",
    "Executor",
    "SYSTEM_NAMESPACE",
    # Catalog
    "schema_exists",
    "role_exists",
    "user_exists",
    "find_connection",
    "table_exists",
    "rename_statement",
    # Metadata
    "ColumnDescriptor",
    "TableReadModel",
    "read_table",
    "describe_table",
]
