"""User resource"""

from typing import ClassVar

from exalib import argument
from exalib.primitives.catalog import user_exists
from exalib.primitives.execute import Executor
from exalib.resource_data import ResourceData
from exalib.utils.identifiers import quote_password
from .base import Resource


class User(Resource):
    """Reconciles an Exasol user authenticated by password"""

    OBJECT_KIND: ClassVar[str] = "USER"
    UPDATABLE_FIELDS: ClassVar[tuple[str, ...]] = ("name", "password")

    def exists(self, executor: Executor, name: str) -> bool:
        return user_exists(executor, name)

    def create_statements(self, data: ResourceData, name: str) -> list[str]:
        password = argument.required_str(data, "password")
        return [f"CREATE USER {name} IDENTIFIED BY {quote_password(password)}"]

    def update_statements(self, data: ResourceData) -> list[str]:
        statements = super().update_statements(data)

        _, _, password_changed = data.changed("password")
        if password_changed:
            name = argument.name(data)
            password = argument.required_str(data, "password")
            statements.append(f"ALTER USER {name} IDENTIFIED BY {quote_password(password)}")

        return statements
