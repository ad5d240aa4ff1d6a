"""Utilities for building SQL queries with safe parameter binding"""

from typing import Any


class SafeQuery:
    """Build SQL queries with client-side parameter binding

    Placeholders use the pyexasol formatter syntax (``{name}``), so values
    are quoted and escaped by the client rather than by string concatenation.
    """

    def __init__(self, base: str):
        """Initialize with a base SQL statement"""
        self._parts: list[str] = [base]
        self._bindings: dict[str, Any] = {}
        self._has_where = False

    def when(self, condition: Any, template: str, **values: Any) -> 'SafeQuery':
        """Add a clause and maybe bind values when condition is truthy"""
        if condition:
            self._parts.append(template)
            self._bindings.update(values)
        return self

    def where(self, predicate: str, **values: Any) -> 'SafeQuery':
        """Add a predicate joined with WHERE/AND"""
        keyword = "AND" if self._has_where else "WHERE"
        self._has_where = True
        return self.when(True, f"{keyword} {predicate}", **values)

    def sql(self) -> str:
        """Get the SQL string with placeholders"""
        return " ".join(self._parts)

    def bindings(self) -> dict[str, Any]:
        """Get the bindings mapping"""
        return dict(self._bindings)

    def as_tuple(self) -> tuple[str, dict[str, Any]]:
        """Get both SQL and bindings as a tuple"""
        return self.sql(), self.bindings()
