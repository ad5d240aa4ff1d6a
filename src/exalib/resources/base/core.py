"""Core base class for reconciled Exasol objects"""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from exalib import argument
from exalib.errors import NotFoundError, ValidationError
from exalib.gatekeeper import ConnectionGatekeeper
from exalib.primitives.catalog import rename_statement
from exalib.primitives.execute import Executor
from exalib.resource_data import ResourceData
from exalib.utils.identifiers import is_valid_identifier

logger = logging.getLogger(__name__)


class Resource(ABC):
    """Reconciles declared state of one object kind with the catalog

    Every public operation follows the same discipline: validate declared
    fields, acquire the shared session, run the statements, commit, release,
    and only then record the new identity on the resource data. Failures
    propagate unchanged; nothing is retried or rolled back here.
    """

    OBJECT_KIND: ClassVar[str]
    # Fields whose change is converged by ``update``
    UPDATABLE_FIELDS: ClassVar[tuple[str, ...]] = ("name",)

    def __init__(self, gatekeeper: ConnectionGatekeeper):
        self._gatekeeper = gatekeeper

    @property
    def kind(self) -> str:
        """Lower-case object kind for messages"""
        return self.OBJECT_KIND.lower()

    # ---------- hooks ----------

    @abstractmethod
    def exists(self, executor: Executor, name: str) -> bool:
        """Check the catalog for an object of this kind"""

    def _read(self, executor: Executor, data: ResourceData, name: str) -> bool:
        """Existence check that may also refresh fields from the catalog"""
        return self.exists(executor, name)

    def create_statements(self, data: ResourceData, name: str) -> list[str]:
        return [f"CREATE {self.OBJECT_KIND} {name}"]

    def update_statements(self, data: ResourceData) -> list[str]:
        """Statements converging changed fields, empty when nothing changed"""
        old, new, changed = data.changed("name")
        if not changed:
            return []
        new = argument.name(data)
        if not is_valid_identifier(old):
            raise ValidationError(f"Previous name is not a valid identifier: {old!r}")
        return [rename_statement(self.OBJECT_KIND, old, new)]

    # ---------- lifecycle ----------

    def create(self, data: ResourceData) -> None:
        """Create the object; an existing one surfaces as ExecutionError"""
        name = argument.name(data)
        statements = self.create_statements(data, name)

        self._apply(statements)

        data.set_identity(name.upper())
        logger.info("Created %s %s", self.kind, name.upper())

    def read(self, data: ResourceData) -> None:
        """Confirm the tracked object still exists, raising NotFoundError otherwise

        The lookup uses the tracked name, so a declared rename that has not
        been applied yet is left for ``update``.
        """
        name = self._tracked_name(data)

        with self._gatekeeper.acquire() as locked:
            found = self._read(locked.executor, data, name)

        if not found:
            raise NotFoundError(self.kind, name.upper())

        data.set_identity(name.upper())
        if not data.get("name"):
            data.set("name", name)

    def update(self, data: ResourceData) -> None:
        """Converge changed fields; a no-op when nothing changed"""
        statements = self.update_statements(data)
        if not statements:
            return

        self._apply(statements)

        for field in self.UPDATABLE_FIELDS:
            _, new, changed = data.changed(field)
            if changed:
                data.set(field, new)
        data.set_identity(self._identity(data))
        logger.info("Updated %s %s", self.kind, data.identity)

    def delete(self, data: ResourceData) -> None:
        """Drop the object; a missing object surfaces the database error"""
        name = self._tracked_name(data)

        self._apply([f"DROP {self.OBJECT_KIND} {name}"])

        data.set_identity("")
        logger.info("Dropped %s %s", self.kind, name)

    def import_(self, data: ResourceData) -> None:
        """Adopt an object created outside of the declared configuration"""
        supplied = data.identity
        if not supplied:
            raise ValidationError(f"Importing a {self.kind} requires its name as identity")
        name = supplied.upper()

        with self._gatekeeper.acquire() as locked:
            if not self._read(locked.executor, data, name):
                raise NotFoundError(self.kind, name)
            locked.executor.commit()

        data.set_identity(name)
        if not data.get("name"):
            data.set("name", name)
        logger.info("Imported %s %s", self.kind, name)

    # ---------- helpers ----------

    def _apply(self, statements: list[str]) -> None:
        with self._gatekeeper.acquire() as locked:
            for sql in statements:
                locked.executor.run(sql)
            locked.executor.commit()

    def _identity(self, data: ResourceData) -> str:
        """Identity recorded for the declared object"""
        return argument.name(data).upper()

    def _tracked_name(self, data: ResourceData) -> str:
        """Identity, else the last applied name, else the declared one"""
        applied, declared, _ = data.changed("name")
        name = data.identity or applied or declared
        if not name or not is_valid_identifier(name):
            raise ValidationError(f"No valid {self.kind} identity to act on: {name!r}")
        return name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._gatekeeper!r})"
