"""Table resource"""

import logging
from typing import ClassVar

from exalib import argument
from exalib.errors import NotFoundError, ValidationError
from exalib.primitives.catalog import rename_statement, table_exists
from exalib.primitives.execute import Executor
from exalib.primitives.metadata import TableReadModel, read_table
from exalib.resource_data import ResourceData
from .base import Resource, FQN

logger = logging.getLogger(__name__)


class Table(Resource):
    """Exposes a table's computed metadata and adopts existing tables

    The table's columns are whatever DDL created it; ``read`` publishes
    ``columns``, ``column_indices``, ``primary_key_indices``,
    ``foreign_key_indices`` and ``composite`` (the body needed to recreate
    it). ``create`` accepts such a body back.
    """

    OBJECT_KIND: ClassVar[str] = "TABLE"

    def exists(self, executor: Executor, name: str) -> bool:
        fqn = _qualified(name)
        return table_exists(executor, fqn.schema, fqn.name)

    def _declared_fqn(self, data: ResourceData) -> FQN:
        return FQN.from_parts(argument.identifier(data, "schema"), argument.name(data))

    def _tracked_fqn(self, data: ResourceData) -> FQN:
        """Identity, else the last applied schema and name, else the declared ones"""
        if data.identity:
            return _qualified(data.identity)
        schema = data.changed("schema")[0] or argument.identifier(data, "schema")
        name = data.changed("name")[0] or argument.name(data)
        return FQN.from_parts(schema, name)

    def read(self, data: ResourceData) -> None:
        """Publish the computed attributes, raising NotFoundError when the table is gone

        The tracked table is read, so a pending rename is left for ``update``.
        """
        fqn = self._tracked_fqn(data)

        with self._gatekeeper.acquire() as locked:
            if not table_exists(locked.executor, fqn.schema, fqn.name):
                raise NotFoundError(self.kind, str(fqn))
            model = read_table(locked.executor, fqn.schema, fqn.name)

        self._publish(data, model)
        data.set_identity(str(fqn))

    def read_model(self, schema: str, table: str) -> TableReadModel:
        """Introspect a table without any resource data"""
        with self._gatekeeper.acquire() as locked:
            return read_table(locked.executor, schema, table)

    def _publish(self, data: ResourceData, model: TableReadModel) -> None:
        for key, value in model.to_attributes().items():
            data.set(key, value)
        data.set("composite", model.composite)

    def create_statements(self, data: ResourceData, name: str) -> list[str]:
        schema = argument.identifier(data, "schema")
        body = argument.required_str(data, "composite").rstrip().rstrip(",")
        return [f"CREATE TABLE {schema}.{name} ({body})"]

    def create(self, data: ResourceData) -> None:
        fqn = self._declared_fqn(data)
        self._apply(self.create_statements(data, argument.name(data)))
        data.set_identity(str(fqn))
        logger.info("Created table %s", fqn)

    def update_statements(self, data: ResourceData) -> list[str]:
        _, _, schema_changed = data.changed("schema")
        if schema_changed:
            raise ValidationError("A table cannot be moved to another schema by renaming")

        old, new, changed = data.changed("name")
        if not changed:
            return []
        fqn = self._declared_fqn(data)
        old_fqn = FQN.from_parts(fqn.schema, old)
        return [rename_statement(self.OBJECT_KIND, str(old_fqn), fqn.name)]

    def _identity(self, data: ResourceData) -> str:
        return str(self._declared_fqn(data))

    def delete(self, data: ResourceData) -> None:
        fqn = self._tracked_fqn(data)
        self._apply([f"DROP TABLE {fqn}"])
        data.set_identity("")
        logger.info("Dropped table %s", fqn)

    def import_(self, data: ResourceData) -> None:
        """Adopt an existing table by its ``SCHEMA.TABLE`` identity"""
        if not data.identity:
            raise ValidationError("Importing a table requires SCHEMA.TABLE as identity")
        fqn = _qualified(data.identity)

        with self._gatekeeper.acquire() as locked:
            if not table_exists(locked.executor, fqn.schema, fqn.name):
                raise NotFoundError(self.kind, str(fqn))
            locked.executor.commit()

        data.set_identity(str(fqn))
        data.set("schema", fqn.schema)
        data.set("name", fqn.name)
        logger.info("Imported table %s", fqn)


def _qualified(name: str) -> FQN:
    """Parse ``SCHEMA.TABLE``, rejecting unqualified names"""
    fqn = FQN.parse(name)
    if fqn.schema is None:
        raise ValidationError(f"Table identity must be qualified as SCHEMA.TABLE: {name!r}")
    return fqn
