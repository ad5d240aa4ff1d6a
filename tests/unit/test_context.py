"""Unit tests for ExasolContext class."""

import pytest
from unittest.mock import Mock, patch

from exalib.context import ExasolContext


class TestExasolContextInitialization:
    """Tests for ExasolContext initialization."""

    def test_init_with_profile(self):
        ctx = ExasolContext(profile="test", schema="STAGING")

        assert ctx._profile == "test"
        assert ctx._connection is None
        assert ctx._overrides == {"schema": "STAGING"}

    def test_init_with_connection(self):
        mock_conn = Mock()
        ctx = ExasolContext(connection=mock_conn)

        assert ctx.connection is mock_conn
        assert ctx._owns_connector is False

    def test_init_requires_a_source(self):
        with pytest.raises(ValueError, match="requires either"):
            ExasolContext()

    def test_init_rejects_two_sources(self):
        with pytest.raises(ValueError, match="provide only one"):
            ExasolContext(profile="test", from_env=True)


class TestExasolContextLazyLoading:
    """Tests for lazy connection creation."""

    def test_connection_created_on_first_access(self):
        with patch("exalib.connection.ExasolConnector") as connector_class:
            ctx = ExasolContext(profile="test", schema="STAGING")
            conn = ctx.connection

            connector_class.assert_called_once_with(profile="test", schema="STAGING")
            assert conn is connector_class.return_value.connect.return_value
            assert ctx.connection is conn
            assert connector_class.call_count == 1

    def test_from_env_uses_no_profile(self):
        with patch("exalib.connection.ExasolConnector") as connector_class:
            ExasolContext(from_env=True).connection

        connector_class.assert_called_once_with(profile=None)

    def test_close_owned_connector(self):
        with patch("exalib.connection.ExasolConnector") as connector_class:
            ctx = ExasolContext(profile="test")
            ctx.connection
            ctx.close()

        connector_class.return_value.close.assert_called_once()
        assert ctx._connection is None

    def test_close_leaves_borrowed_connection_open(self):
        mock_conn = Mock()
        with ExasolContext(connection=mock_conn):
            pass

        mock_conn.close.assert_not_called()


class TestNamespace:
    """Tests for use_namespace and session properties."""

    def test_same_schema_is_not_reopened(self):
        mock_conn = Mock()
        mock_conn.current_schema.return_value = "SYS"

        ExasolContext(connection=mock_conn).use_namespace("sys")

        mock_conn.open_schema.assert_not_called()

    def test_other_schema_is_opened(self):
        mock_conn = Mock()
        mock_conn.current_schema.return_value = None

        ExasolContext(connection=mock_conn).use_namespace("DATA")

        mock_conn.open_schema.assert_called_once_with("DATA")

    def test_current_user(self):
        mock_conn = Mock()
        mock_conn.execute.return_value.fetchone.return_value = ("SYS",)

        assert ExasolContext(connection=mock_conn).current_user == "SYS"

    def test_repr(self):
        assert repr(ExasolContext(profile="dev")) == "ExasolContext(profile='dev')"
        assert repr(ExasolContext(connection=Mock())) == "ExasolContext(connection=<active>)"
