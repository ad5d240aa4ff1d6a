"""Unit tests for the table reconciler."""

import pytest

from exalib.errors import NotFoundError, ValidationError
from exalib.resource_data import InMemoryResourceData
from exalib.resources import Table

EXISTS = "SELECT COLUMN_NAME FROM EXA_ALL_COLUMNS"


@pytest.fixture
def tables(gatekeeper):
    return Table(gatekeeper)


@pytest.fixture
def t1(fake_executor):
    """Catalog holding S.T1 (A VARCHAR(20) primary key, B DECIMAL(24,4))"""
    fake_executor.respond(EXISTS, [("A",), ("B",)])
    fake_executor.respond(
        "SELECT COLUMN_ORDINAL_POSITION",
        [(1.0, "A", "VARCHAR(20)", False), (2.0, "B", "DECIMAL(24,4)", False)],
    )
    fake_executor.respond(
        "SELECT COLUMN_NAME, COLUMN_TYPE, COLUMN_IS_NULLABLE",
        [("A", "VARCHAR(20)", False), ("B", "DECIMAL(24,4)", True)],
    )
    fake_executor.respond("EXA_ALL_CONSTRAINT_COLUMNS", [("A", 1.0)], constraint_type="PRIMARY KEY")
    return fake_executor


class TestRead:
    """Tests for Table.read."""

    def test_publishes_computed_attributes(self, tables, t1):
        data = InMemoryResourceData({"name": "t1", "schema": "s"})

        tables.read(data)

        assert data.identity == "S.T1"
        assert data.get("columns") == [
            {"name": "A", "type": "VARCHAR(20)"},
            {"name": "B", "type": "DECIMAL(24,4)"},
        ]
        assert data.get("column_indices") == {"a": 0, "b": 1}
        assert data.get("primary_key_indices") == {"a": 0}
        assert data.get("foreign_key_indices") == {}
        assert data.get("composite") == (
            "A VARCHAR(20) NOT NULL,\nB DECIMAL(24,4) NULL,\nCONSTRAINT PRIMARY KEY (A),\n"
        )
        assert t1.commits == 0

    def test_absent(self, tables, gatekeeper):
        data = InMemoryResourceData({"name": "t1", "schema": "s"})

        with pytest.raises(NotFoundError, match="Table S.T1 not found"):
            tables.read(data)

        assert not gatekeeper.locked

    def test_requires_schema(self, tables, fake_executor):
        with pytest.raises(ValidationError, match="schema"):
            tables.read(InMemoryResourceData({"name": "t1"}))

        assert fake_executor.calls == []

    def test_pending_rename_reads_tracked_table(self, tables, fake_executor):
        fake_executor.respond(EXISTS, [("A",)], name="T_OLD", schema="S")
        fake_executor.respond(
            "SELECT COLUMN_ORDINAL_POSITION", [(1.0, "A", "VARCHAR(20)", False)], table="T_OLD"
        )
        data = InMemoryResourceData(
            {"name": "t_new", "schema": "s"},
            identity="S.T_OLD",
            previous={"name": "t_old", "schema": "s"},
        )

        tables.read(data)

        assert data.identity == "S.T_OLD"
        assert data.get("column_indices") == {"a": 0}

        tables.update(data)

        assert fake_executor.statements == ["RENAME TABLE S.T_OLD TO T_NEW"]
        assert data.identity == "S.T_NEW"

    def test_read_model(self, tables, t1):
        model = tables.read_model("S", "T1")

        assert model.primary_keys == {"a": 0}


class TestImport:
    """Tests for Table.import_."""

    def test_adopts_existing_table(self, tables, t1):
        data = InMemoryResourceData(identity="s.t1")

        tables.import_(data)

        assert data.identity == "S.T1"
        assert data.get("schema") == "S"
        assert data.get("name") == "T1"
        assert t1.commits == 1
        assert t1.calls[0][1] == {"name": "T1", "schema": "S"}

    def test_missing_table(self, tables, fake_executor):
        with pytest.raises(NotFoundError, match="S.T9"):
            tables.import_(InMemoryResourceData(identity="s.t9"))

        assert fake_executor.commits == 0

    def test_requires_qualified_identity(self, tables, fake_executor):
        with pytest.raises(ValidationError, match="SCHEMA.TABLE"):
            tables.import_(InMemoryResourceData(identity="t1"))

        assert fake_executor.calls == []


class TestDdl:
    """Tests for Table create, update and delete."""

    def test_create_from_composite(self, tables, fake_executor):
        data = InMemoryResourceData({
            "name": "t1",
            "schema": "s",
            "composite": "A VARCHAR(20) NOT NULL,\nDISTRIBUTE BY A,\n",
        })

        tables.create(data)

        assert fake_executor.statements == [
            "CREATE TABLE s.t1 (A VARCHAR(20) NOT NULL,\nDISTRIBUTE BY A)"
        ]
        assert data.identity == "S.T1"

    def test_rename_within_schema(self, tables, fake_executor):
        data = InMemoryResourceData(
            {"name": "t2", "schema": "s"},
            identity="S.T1",
            previous={"name": "t1", "schema": "s"},
        )

        tables.update(data)

        assert fake_executor.statements == ["RENAME TABLE S.T1 TO T2"]
        assert data.identity == "S.T2"

    def test_schema_change_rejected(self, tables, fake_executor):
        data = InMemoryResourceData(
            {"name": "t1", "schema": "other"},
            identity="S.T1",
            previous={"name": "t1", "schema": "s"},
        )

        with pytest.raises(ValidationError, match="another schema"):
            tables.update(data)

        assert fake_executor.calls == []

    def test_delete(self, tables, fake_executor):
        data = InMemoryResourceData({"name": "t1", "schema": "s"}, identity="S.T1")

        tables.delete(data)

        assert fake_executor.statements == ["DROP TABLE S.T1"]
        assert data.identity == ""


def test_exists_takes_qualified_name(tables, t1):
    locked = tables._gatekeeper.acquire()
    try:
        assert tables.exists(locked.executor, "s.t1")
        with pytest.raises(ValidationError, match="SCHEMA.TABLE"):
            tables.exists(locked.executor, "t1")
    finally:
        locked.release()
