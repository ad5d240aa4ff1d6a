"""Pytest configuration and fixtures for integration tests.

These run against a live Exasol database described by the EXA* environment
variables (EXAHOST, EXAPORT, EXAUID, EXAPWD) and are skipped without them.
"""

import os
import secrets
import string

import pytest

from exalib.session import Session


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "tests/integration" in str(item.fspath).replace(os.sep, "/"):
            item.add_marker(pytest.mark.integration)
            if not os.environ.get("EXAHOST"):
                item.add_marker(pytest.mark.skip(reason="EXAHOST not set"))


@pytest.fixture
def suffix() -> str:
    """Random identifier suffix so concurrent runs do not collide."""
    alphabet = string.ascii_uppercase + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(10))


@pytest.fixture
def session():
    with Session(from_env=True) as session:
        yield session


@pytest.fixture
def run_ddl(session):
    """Run statements outside of the reconcilers and commit them."""
    def run(*statements: str) -> None:
        with session.gatekeeper.acquire() as locked:
            for sql in statements:
                locked.executor.run(sql)
            locked.executor.commit()
    return run


@pytest.fixture
def test_schema(run_ddl, suffix):
    """A scratch schema dropped with everything in it after the test."""
    name = f"EXALIB_TEST_{suffix}"
    run_ddl(f"CREATE SCHEMA {name}")
    yield name
    run_ddl(f"DROP SCHEMA {name} CASCADE")
