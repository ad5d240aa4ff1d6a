"""Connection resource (credentials for IMPORT/EXPORT targets)"""

from typing import ClassVar

from exalib import argument
from exalib.primitives.catalog import find_connection
from exalib.primitives.execute import Executor
from exalib.resource_data import ResourceData
from exalib.utils.identifiers import quote_literal
from .base import Resource


class Connection(Resource):
    """Reconciles an Exasol connection object"""

    OBJECT_KIND: ClassVar[str] = "CONNECTION"
    UPDATABLE_FIELDS: ClassVar[tuple[str, ...]] = ("name", "to", "user", "password")

    def exists(self, executor: Executor, name: str) -> bool:
        return find_connection(executor, name) is not None

    def _read(self, executor: Executor, data: ResourceData, name: str) -> bool:
        row = find_connection(executor, name)
        if row is None:
            return False
        _, to, user = row
        data.set("to", to.as_str())
        data.set("user", None if user.is_null else user.as_str())
        return True

    def _definition(self, data: ResourceData) -> str:
        """``TO '...' [USER '...' IDENTIFIED BY '...']`` from declared fields"""
        to = argument.required_str(data, "to")
        clause = f"TO {quote_literal(to)}"

        user = argument.optional_str(data, "user")
        password = argument.optional_str(data, "password")
        if user is not None:
            clause += f" USER {quote_literal(user)}"
        if password is not None:
            clause += f" IDENTIFIED BY {quote_literal(password)}"
        return clause

    def create_statements(self, data: ResourceData, name: str) -> list[str]:
        return [f"CREATE CONNECTION {name} {self._definition(data)}"]

    def update_statements(self, data: ResourceData) -> list[str]:
        statements = super().update_statements(data)

        if any(data.changed(field)[2] for field in ("to", "user", "password")):
            name = argument.name(data)
            statements.append(f"ALTER CONNECTION {name} {self._definition(data)}")

        return statements
