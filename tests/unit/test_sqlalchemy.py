"""Unit tests for the SQLAlchemy engine factory."""

import pytest
from unittest.mock import patch

pytest.importorskip("sqlalchemy")

from exalib.sqlalchemy import create_engine_from_profile  # noqa: E402


@pytest.fixture
def config(tmp_path):
    config_path = tmp_path / "connections.toml"
    config_path.write_text("""
[default]
host = "exa-host"
port = 8563
user = "sys"
password = "exasol"
schema = "RETAIL"
encryption = true
""")
    with patch('exalib.config.config.resolve_config_path', return_value=config_path):
        yield config_path


def test_engine_url(config):
    with patch("exalib.sqlalchemy.create_engine") as create_engine:
        create_engine_from_profile("default", pool_size=2)

    url = create_engine.call_args.args[0]
    assert url.drivername == "exa+websocket"
    assert url.host == "exa-host"
    assert url.port == 8563
    assert url.username == "sys"
    assert url.password == "exasol"
    assert url.database == "RETAIL"

    kwargs = create_engine.call_args.kwargs
    assert kwargs["connect_args"] == {"encryption": True}
    assert kwargs["pool_size"] == 2
    assert kwargs["max_overflow"] == 10


def test_engine_kwargs_pass_through(config):
    with patch("exalib.sqlalchemy.create_engine") as create_engine:
        create_engine_from_profile("default", echo=True)

    assert create_engine.call_args.kwargs["echo"] is True
