"""Unit tests for in-memory resource data."""

from exalib.resource_data import InMemoryResourceData


def test_fresh_data_has_no_changes():
    data = InMemoryResourceData({"name": "a"})

    assert data.changed("name") == ("a", "a", False)
    assert data.identity == ""


def test_declare_then_applied():
    data = InMemoryResourceData({"name": "a"})
    data.declare(name="b")

    assert data.changed("name") == ("a", "b", True)

    data.applied()

    assert data.changed("name") == ("b", "b", False)


def test_set_keeps_declared_value():
    data = InMemoryResourceData({"to": "declared"})

    data.set("to", "observed")

    assert data.get("to") == "declared"
    assert data.state("to") == "observed"
    assert data.changed("to") == ("observed", "declared", True)


def test_set_fills_undeclared_field():
    data = InMemoryResourceData()

    data.set("columns", [{"name": "A", "type": "VARCHAR(20)"}])

    assert data.get("columns") == [{"name": "A", "type": "VARCHAR(20)"}]
    assert data.changed("columns")[2] is False


def test_fields_is_a_copy():
    data = InMemoryResourceData({"name": "a"})
    data.fields["name"] = "b"

    assert data.get("name") == "a"


def test_repr():
    data = InMemoryResourceData({"name": "a"}, identity="A")
    assert repr(data) == "InMemoryResourceData(identity='A', fields={'name': 'a'})"
