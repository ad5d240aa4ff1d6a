"""Catalog query primitives.

Fixed statements against the Exasol system views, all evaluated in the
``SYS`` namespace and matched case-insensitively on names.
"""

from typing import Any, Optional

from exalib.primitives.cells import CatalogRow
from exalib.primitives.execute import Executor, SYSTEM_NAMESPACE
from exalib.utils.query import SafeQuery


def find(
    executor: Executor,
    view: str,
    columns: str,
    name_column: str,
    name: str,
    *predicates: str,
    **values: Any,
) -> list[CatalogRow]:
    """Select ``columns`` from ``view`` where ``name_column`` matches ``name``"""
    query = SafeQuery(f"SELECT {columns} FROM {view}")
    query.where(f"UPPER({name_column}) = UPPER({{name}})", name=name)
    for predicate in predicates:
        query.where(predicate, **values)
    sql, params = query.as_tuple()
    return executor.fetch_rows(sql, params, namespace=SYSTEM_NAMESPACE)


def schema_exists(executor: Executor, name: str) -> bool:
    """Check if a physical (non-virtual) schema exists"""
    rows = find(
        executor, "EXA_SCHEMAS", "SCHEMA_NAME", "SCHEMA_NAME", name,
        "SCHEMA_IS_VIRTUAL = FALSE",
    )
    return len(rows) != 0


def role_exists(executor: Executor, name: str) -> bool:
    """Check if a role exists"""
    return len(find(executor, "EXA_ALL_ROLES", "ROLE_NAME", "ROLE_NAME", name)) != 0


def user_exists(executor: Executor, name: str) -> bool:
    """Check if a user exists"""
    return len(find(executor, "EXA_ALL_USERS", "USER_NAME", "USER_NAME", name)) != 0


def find_connection(executor: Executor, name: str) -> Optional[CatalogRow]:
    """Get (CONNECTION_NAME, CONNECTION_STRING, USER_NAME) for a connection, or None"""
    rows = find(
        executor, "EXA_DBA_CONNECTIONS",
        "CONNECTION_NAME, CONNECTION_STRING, USER_NAME", "CONNECTION_NAME", name,
    )
    return rows[0] if rows else None


def table_exists(executor: Executor, schema: str, table: str) -> bool:
    """Check if a table has at least one column in the column catalog"""
    rows = find(
        executor, "EXA_ALL_COLUMNS", "COLUMN_NAME", "COLUMN_TABLE", table,
        "UPPER(COLUMN_SCHEMA) = UPPER({schema})",
        schema=schema,
    )
    return len(rows) != 0


def rename_statement(kind: str, old: str, new: str, extra: str = "") -> str:
    """Build RENAME for an object kind; ``extra`` is appended verbatim"""
    sql = f"RENAME {kind} {old} TO {new}"
    if extra:
        sql = f"{sql} {extra}"
    return sql
